# -*- coding: utf-8 -*-
"""Command line entry point: ``jgd_lib <command> [args]``.

Commands are registered under the ``jgd_lib.actions`` entry-point group and
receive the remaining arguments as a list; their return value is the exit
code.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import entry_points

import jgd_lib

LOG_FORMAT = "%(levelname)s: %(message)s"


def main() -> int:
    registered_commands = entry_points(group="jgd_lib.actions")

    parser = argparse.ArgumentParser(prog="jgd_lib")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {jgd_lib.__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Verbosity of the messages written to stderr (default: INFO)",
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

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    main_fn = registered_commands[args.command].load()
    return main_fn(args.args)
