# -*- coding: utf-8 -*-
"""Compile command for GSI parameter files.

Turns a fixed-width .par text file into the sorted binary table loaded by
:class:`jgd_lib.grid.table.Grid`. This is an offline build step: it stops
on the first malformed or conflicting record rather than writing a table
that is subtly wrong.
"""

import argparse
import logging
from pathlib import Path

from jgd_lib.constants import GRID_EXTENSION
from jgd_lib.errors import GridCompileError
from jgd_lib.errors import GridCompileException
from jgd_lib.interface import GridInterface

logger = logging.getLogger(__name__)


def compile_par(args: list[str]) -> int:
    """Entry point for the compile command."""
    parser = argparse.ArgumentParser(
        prog="jgd_lib compile",
        description="Compile a GSI parameter (.par) file into a binary grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jgd_lib compile -i TKY2JGD.par                          # -> TKY2JGD.in
  jgd_lib compile -i TKY2JGD.par -o data/TKY2JGD.in
  jgd_lib compile -i touhokutaiheiyouoki2011.par --log-file patch.in.log

Notes:
  - Records may appear in any order; the output is always sorted
  - Exact duplicate records are dropped
  - A mesh listed twice with different shifts is an error
  - With --strict, unsorted input or duplicates are errors too
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input .par file path",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output binary grid path (defaults to the input with .in suffix)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write one text line per compiled grid point",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on warnings (unsorted input, duplicate records)",
    )

    parsed_args = parser.parse_args(args)
    output_file = parsed_args.output_file or parsed_args.input_file.with_suffix(
        GRID_EXTENSION
    )

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    try:
        warnings: list[GridCompileError] = []
        grid = GridInterface.compile_par(parsed_args.input_file, warnings=warnings)
        if parsed_args.strict and warnings:
            for warning in warnings:
                logger.error("Compilation failed: %s", warning)
            return 1

        GridInterface.save_grid(grid, output_file)
        if parsed_args.log_file is not None:
            GridInterface.save_log(grid, parsed_args.log_file)

    except GridCompileException as e:
        logger.error("Compilation failed: %s", e.to_error())  # noqa: TRY400
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    logger.info("Compiled %s -> %s", parsed_args.input_file, output_file)
    return 0
