# -*- coding: utf-8 -*-
"""Error handling for grid compilation and coordinate transforms.

This module provides error classes for tracking compile errors with
source location information for helpful error messages.
"""

from dataclasses import dataclass

from jgd_lib.enums import Severity


@dataclass(frozen=True)
class SourceLocation:
    """Tracks the source location of text for error reporting.

    Attributes:
        source: The source file name or identifier
        line: Line number (0-based)
        column: Column number (0-based)
        text: The text at this location
    """

    source: str
    line: int
    column: int
    text: str

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, line {self.line + 1}, column {self.column + 1})"


@dataclass(frozen=True)
class GridCompileError:
    """Represents a compile error or warning with source location.

    This is a data record for storing error information, not an exception.
    Use GridCompileException for raising errors.

    Attributes:
        severity: ERROR or WARNING
        message: Human-readable error message
        location: Source location where error occurred (optional)
    """

    severity: Severity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable error string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}"
        return base


class GridCompileException(Exception):  # noqa: N818
    """Exception raised when a parameter file cannot be compiled.

    Attributes:
        message: Error message
        location: Source location where error occurred
    """

    def __init__(self, message: str, location: SourceLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message

    def to_error(self) -> GridCompileError:
        """Convert exception to GridCompileError record."""
        return GridCompileError(
            severity=Severity.ERROR,
            message=self.message,
            location=self.location,
        )


class DegreesError(ValueError):
    """Raised when a coordinate is outside of the valid range of degrees.

    Attributes:
        possibly_reversed: The pair may have been given as (lon, lat)
    """

    def __init__(self, possibly_reversed: bool = False):
        self.possibly_reversed = possibly_reversed
        super().__init__(str(self))

    def __str__(self) -> str:
        msg = "degrees out of range"
        if self.possibly_reversed:
            msg += "; may be lat and lon reversed?"
        return msg


class ConversionError(Exception):
    """Error raised for unsupported datum conversions."""
