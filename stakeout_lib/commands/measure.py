# -*- coding: utf-8 -*-
"""Measure command.

Reads a JSON array of CAD entities and prints, for each entity, its
kind, layer, length, area and bounds, followed by the padded bounds of
the whole drawing.
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from stakeout_lib.constants import JSON_ENCODING
from stakeout_lib.errors import StakeoutError
from stakeout_lib.geometry.bounds import bounds_of
from stakeout_lib.geometry.measure import describe_entity
from stakeout_lib.geometry.models import ENTITY_LIST_ADAPTER
from stakeout_lib.geometry.simplify import filter_layers


def _measure(input_path: Path, layers: list[str] | None = None) -> dict:
    entities = ENTITY_LIST_ADAPTER.validate_json(
        input_path.read_text(encoding=JSON_ENCODING)
    )
    if layers:
        entities = filter_layers(entities, set(layers))

    bounds = bounds_of(entities)
    return {
        "count": len(entities),
        "entities": [describe_entity(entity) for entity in entities],
        "bounds": [bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y],
    }


def measure(args: list[str]) -> int:
    """Entry point for the measure command."""
    parser = argparse.ArgumentParser(
        prog="stakeout_lib measure",
        description="Report lengths, areas and bounds of CAD entities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stakeout_lib measure -i drawing.json                  # All entities
  stakeout_lib measure -i drawing.json -l ROAD -l KERB  # Only some layers
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="JSON file holding a list of entities",
    )
    parser.add_argument(
        "-l",
        "--layer",
        action="append",
        default=None,
        dest="layers",
        help="Only measure entities on this layer (repeatable)",
    )

    parsed_args = parser.parse_args(args)

    try:
        report = _measure(parsed_args.input_file, parsed_args.layers)
    except (ValidationError, StakeoutError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=2))
    return 0
