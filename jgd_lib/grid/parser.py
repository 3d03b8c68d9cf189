# -*- coding: utf-8 -*-
"""Parser for GSI parameter (.par) files.

A parameter file starts with a free-form preamble that ends with the
column header ``MeshCode   dB(sec)   dL(sec)``. Every following line is a
fixed-width record::

    46303582  12.79799  -8.13354
    ^^^^^^^^                        mesh code: lat1 lon1 lat2 lon2 lat3 lon3
            ^^^^^^^^^               dB: integer(4) "." fraction(5), arcsec
                     ^^^^^^^^^^     dL: integer(4) "." fraction(5), arcsec

Columns after dL (PatchJGD files carry dH) are ignored.

Unlike the survey-style parsers that collect errors and keep going, this
parser stops at the first malformed record: a partially parsed grid must
never be compiled.
"""

import logging
import re
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from jgd_lib.constants import MESH1_LON_OFFSET
from jgd_lib.constants import MICRO_SECS_PER_SEC
from jgd_lib.constants import PAR_ENCODING
from jgd_lib.constants import PAR_FRACTION_WIDTH
from jgd_lib.constants import PAR_HEADER
from jgd_lib.constants import PAR_INTEGER_WIDTH
from jgd_lib.constants import PAR_MESH_WIDTHS
from jgd_lib.errors import GridCompileException
from jgd_lib.errors import SourceLocation
from jgd_lib.grid.models import ParRecord

logger = logging.getLogger(__name__)


def mesh_serial(mesh1: int, mesh2: int, mesh3: int) -> int:
    """Serial 3rd level mesh number from the three mesh code levels.

    A 1st level mesh spans 80 3rd level meshes, a 2nd level mesh 10.
    """
    return mesh1 * 80 + mesh2 * 10 + mesh3


class _FixedWidthCursor:
    """Consumes a fixed-width record column by column."""

    INTEGER = re.compile(r" *[-+]?\d+")
    FRACTION = re.compile(r" *\d+")

    def __init__(self, parser: "ParFileParser", line: str, lineno: int) -> None:
        self._parser = parser
        self.line = line
        self.lineno = lineno
        self.column = 0

    def _take(self, width: int, what: str) -> str:
        end = self.column + width
        if len(self.line) < end:
            raise self._parser.error(
                f"Record too short, expected {what}", self.line, self.lineno, self.column
            )
        field = self.line[self.column : end]
        self.column = end
        return field

    def integer(self, width: int, what: str) -> tuple[int, str]:
        """Right-justified signed integer; also returns the raw text."""
        start = self.column
        field = self._take(width, what)
        if not self.INTEGER.fullmatch(field):
            raise self._parser.error(
                f"Invalid {what}: {field!r}", self.line, self.lineno, start
            )
        return int(field), field

    def decimal_point(self, what: str) -> None:
        start = self.column
        if self._take(1, what) != ".":
            raise self._parser.error(
                f"Expected decimal point in {what}", self.line, self.lineno, start
            )

    def fraction(self, width: int, what: str) -> int:
        """Unsigned, right-justified fraction digits, scaled to micro units."""
        start = self.column
        field = self._take(width, what)
        if not self.FRACTION.fullmatch(field) or width > 6:
            raise self._parser.error(
                f"Invalid fraction in {what}: {field!r}", self.line, self.lineno, start
            )
        return int(field) * 10 ** (6 - width)


class ParFileParser:
    """Parser for GSI parameter (.par) files.

    The parser produces validated :class:`ParRecord` objects in file order.
    File order is not trusted to be sorted or unique; that is the job of
    :func:`jgd_lib.grid.compiler.compile_records`.
    """

    def __init__(self) -> None:
        self._source: str = "<string>"

    def error(
        self,
        message: str,
        text: str = "",
        line: int = 0,
        column: int = 0,
    ) -> GridCompileException:
        """Build an exception located in the current source."""
        return GridCompileException(
            message,
            location=SourceLocation(
                source=self._source,
                line=line,
                column=column,
                text=text,
            ),
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def parse_file(
        self,
        path: Path,
        *,
        encoding: str = PAR_ENCODING,
    ) -> list[ParRecord]:
        """Parse a parameter file.

        Args:
            path: Path to the .par file
            encoding: Character encoding (default: ASCII)

        Returns:
            List of parsed records, in file order

        Raises:
            GridCompileException: On the first malformed record
        """
        with path.open(mode="r", encoding=encoding) as f:
            return list(self.iter_records(f, str(path)))

    def parse_string(self, data: str, source: str = "<string>") -> list[ParRecord]:
        """Parse parameter data from a string."""
        return list(self.iter_records(data.splitlines(), source))

    def iter_records(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> Iterator[ParRecord]:
        """Yield records from an iterable of text lines.

        Raises:
            GridCompileException: If the column header is missing or a
                record is malformed
        """
        self._source = source
        in_body = False
        count = 0

        for lineno, raw in enumerate(lines):
            line = raw.rstrip("\r\n")
            if not in_body:
                in_body = line == PAR_HEADER
                continue
            if not line.strip():
                continue
            yield self.parse_line(line, lineno)
            count += 1

        if not in_body:
            raise self.error(f"Column header {PAR_HEADER!r} not found")

        logger.info("Parsed %d records from %s", count, source)

    def parse_line(self, line: str, lineno: int = 0) -> ParRecord:
        """Parse a single fixed-width record."""
        cursor = _FixedWidthCursor(self, line, lineno)

        lat1_w, lon1_w, lat2_w, lon2_w, lat3_w, lon3_w = PAR_MESH_WIDTHS
        lat1, _ = cursor.integer(lat1_w, "1st mesh latitude")
        lon1, _ = cursor.integer(lon1_w, "1st mesh longitude")
        lat2, _ = cursor.integer(lat2_w, "2nd mesh latitude")
        lon2, _ = cursor.integer(lon2_w, "2nd mesh longitude")
        lat3, _ = cursor.integer(lat3_w, "3rd mesh latitude")
        lon3, _ = cursor.integer(lon3_w, "3rd mesh longitude")

        d_lat = self._parse_shift(cursor, "dB(sec)")
        d_lon = self._parse_shift(cursor, "dL(sec)")

        data = {
            "mesh_lat": mesh_serial(lat1, lat2, lat3),
            "mesh_lon": mesh_serial(lon1 + MESH1_LON_OFFSET, lon2, lon3),
            "shift_lat": d_lat,
            "shift_lon": d_lon,
        }
        try:
            return ParRecord.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise self.error(
                f"Value out of range for packed record: {fields}", line, lineno
            ) from e

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_shift(cursor: _FixedWidthCursor, what: str) -> int:
        """Parse ``integer.fraction`` arcseconds into micro-arcseconds.

        The fraction is written unsigned and takes the sign of the integer
        part, including a negative zero (``-0.12345``).
        """
        integer, text = cursor.integer(PAR_INTEGER_WIDTH, what)
        cursor.decimal_point(what)
        fraction = cursor.fraction(PAR_FRACTION_WIDTH, what)
        sign = -1 if text.strip().startswith("-") else 1
        return integer * MICRO_SECS_PER_SEC + sign * fraction
