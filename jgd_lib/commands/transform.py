# -*- coding: utf-8 -*-
"""Transform command: convert coordinates between Japanese datums.

Reads one ``lat lon`` pair per line (whitespace or comma separated, decimal
degrees) and writes the converted pairs in the same order.
"""

import argparse
import logging
import re
import sys
from pathlib import Path

from jgd_lib.constants import COORDINATE_PRECISION
from jgd_lib.constants import TEXT_ENCODING
from jgd_lib.crs import convert
from jgd_lib.enums import Datum
from jgd_lib.enums import GridName
from jgd_lib.errors import ConversionError
from jgd_lib.grid.table import Grid
from jgd_lib.interface import GridInterface
from jgd_lib.models import LatLon

logger = logging.getLogger(__name__)

SEPARATOR = re.compile(r"[,\s]+")


def parse_coordinates(text: str) -> list[LatLon]:
    """Parse ``lat lon`` lines, skipping blank lines and ``#`` comments.

    Raises:
        ValueError: If a line does not hold exactly two numbers
    """
    coordinates: list[LatLon] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = SEPARATOR.split(line)
        if len(fields) != 2:  # noqa: PLR2004
            raise ValueError(f"line {lineno}: expected `lat lon`, got {raw!r}")
        try:
            coordinates.append(LatLon(float(fields[0]), float(fields[1])))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
    return coordinates


def format_coordinate(degrees: LatLon) -> str:
    return f"{degrees.lat:.{COORDINATE_PRECISION}f} {degrees.lon:.{COORDINATE_PRECISION}f}"


def load_grids(grid_dir: Path | None) -> dict[GridName, Grid]:
    """Load the compiled grids found in ``grid_dir``."""
    if grid_dir is None:
        return {}
    grids: dict[GridName, Grid] = {}
    for name in GridName:
        path = grid_dir / name.grid_filename
        if path.exists():
            grids[name] = GridInterface.load_grid(path)
        else:
            logger.warning(
                "Grid %s not found in %s, the default grid will be used",
                name.value,
                grid_dir,
            )
    return grids


def transform(args: list[str]) -> int:
    """Entry point for the transform command."""
    datums = [datum.value for datum in Datum]
    parser = argparse.ArgumentParser(
        prog="jgd_lib transform",
        description="Convert coordinates between Japanese geodetic datums",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "35.0 135.0" | jgd_lib transform --from tokyo --to jgd2011
  jgd_lib transform --from tokyo97 --to jgd2000 -i points.txt -o out.txt
  jgd_lib transform --from tokyo --to jgd2000 --grid-dir ./grids -i points.txt

Supported conversions:
  tokyo   -> jgd2000, jgd2011
  tokyo97 -> jgd2000, jgd2011
  jgd2000 -> jgd2011, tokyo97
""",
    )

    parser.add_argument(
        "--from",
        dest="source",
        choices=datums,
        required=True,
        help="Datum of the input coordinates",
    )
    parser.add_argument(
        "--to",
        dest="target",
        choices=datums,
        required=True,
        help="Datum of the output coordinates",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Input file with one `lat lon` pair per line (stdin if not specified)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--grid-dir",
        type=Path,
        default=None,
        help=(
            "Directory of compiled grids; grids missing there are still "
            "loaded from JGD_LIB_DATA_DIR"
        ),
    )

    parsed_args = parser.parse_args(args)

    try:
        if parsed_args.input_file is None:
            text = sys.stdin.read()
        else:
            text = parsed_args.input_file.read_text(encoding=TEXT_ENCODING)

        grids = load_grids(parsed_args.grid_dir)
        results = [
            convert(p, parsed_args.source, parsed_args.target, grids=grids)
            for p in parse_coordinates(text)
        ]
        output = "".join(f"{format_coordinate(r)}\n" for r in results)

        if parsed_args.output_file is None:
            sys.stdout.write(output)
        else:
            parsed_args.output_file.write_text(output, encoding=TEXT_ENCODING)
            logger.info(
                "Converted %d coordinates -> %s", len(results), parsed_args.output_file
            )

    except ConversionError:
        logger.exception("ConversionError")
        return 1

    except FileNotFoundError:
        logger.exception("FileNotFoundError")
        return 1

    except ValueError:
        logger.exception("Invalid input")
        return 1

    return 0
