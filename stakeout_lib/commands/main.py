from __future__ import annotations

import argparse
import logging
from importlib.metadata import entry_points

import stakeout_lib


def main():
    registered_commands = entry_points(group="stakeout_lib.actions")

    parser = argparse.ArgumentParser(prog="stakeout_lib")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {stakeout_lib.__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        choices=registered_commands.names,
    )
    parser.add_argument(
        "args",
        help=argparse.SUPPRESS,
        nargs=argparse.REMAINDER,
    )

    args = argparse.Namespace()
    parser.parse_args(namespace=args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    main_fn = registered_commands[args.command].load()
    return main_fn(args.args)
