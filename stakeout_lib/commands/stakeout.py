# -*- coding: utf-8 -*-
"""Stakeout command.

Evaluates one stakeout tick for a JSON job document::

    {
      "observation": {"lat_deg": 45.0, "lon_deg": 7.0, "fix_type": "RTK_FIX"},
      "target": {"kind": "point", "e": 392000.0, "n": 4984000.0},
      "tolerances": {"horizontal_m": 0.05},
      "projection": {
        "semi_major_m": 6378137.0,
        "inverse_flattening": 298.257223563,
        "utm_zone": 32
      }
    }

and prints the resulting state as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from stakeout_lib.constants import JSON_ENCODING
from stakeout_lib.coords.models import ProjectionSettings
from stakeout_lib.coords.transform import ProjectionEngine
from stakeout_lib.errors import StakeoutError
from stakeout_lib.gnss import GnssObservation
from stakeout_lib.stakeout.models import StakeoutState
from stakeout_lib.stakeout.models import StakeoutTarget
from stakeout_lib.stakeout.state import StakeoutInputs
from stakeout_lib.stakeout.state import recompute
from stakeout_lib.stakeout.tolerance import ToleranceSettings

logger = logging.getLogger(__name__)


class StakeoutJob(BaseModel):
    """Inputs of a single command-line stakeout evaluation."""

    model_config = ConfigDict(extra="forbid")

    observation: GnssObservation | None = None
    target: StakeoutTarget | None = None
    tolerances: ToleranceSettings = Field(default_factory=ToleranceSettings)
    projection: ProjectionSettings | None = None


def run_job(job: StakeoutJob) -> StakeoutState:
    transformer = ProjectionEngine.for_project(job.projection)
    logger.debug("Using transformer %s", transformer.name)
    return recompute(
        StakeoutState(),
        StakeoutInputs(
            observation=job.observation,
            target=job.target,
            tolerances=job.tolerances,
            transformer=transformer,
        ),
    )


def stakeout(args: list[str]) -> int:
    """Entry point for the stakeout command."""
    parser = argparse.ArgumentParser(
        prog="stakeout_lib stakeout",
        description="Evaluate a stakeout job and print the resulting state",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="JSON job file (observation, target, tolerances, projection)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )

    parsed_args = parser.parse_args(args)

    try:
        job = StakeoutJob.model_validate_json(
            parsed_args.input_file.read_text(encoding=JSON_ENCODING)
        )
        state = run_job(job)
    except (ValidationError, StakeoutError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = state.model_dump_json(indent=2)
    if parsed_args.output_file is None:
        print(result)
    else:
        parsed_args.output_file.write_text(result, encoding=JSON_ENCODING)
        print(
            f"Stakeout {state.status.value} -> {parsed_args.output_file}",
            file=sys.stderr,
        )
    return 0
