"""Domain-specific exceptions for the POS sales heatmap.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosHeatmapError for easy catching.
"""

from __future__ import annotations

from typing import Iterable


class PosHeatmapError(Exception):
    """Base exception for all POS heatmap errors.

    Callers embedding the report builder can catch this exception to
    present a single user-facing message for any fatal failure.
    """

    pass


class ConfigError(PosHeatmapError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - An unknown timezone name is configured
    - The contrast exponent is outside (0, 1]
    - An unknown location ordering is requested
    """

    pass


class DataQualityError(PosHeatmapError):
    """Raised when the input cannot be aggregated at all.

    Row-level problems (blank location, bad date, non-numeric quantity)
    never raise; they are skipped or coerced to zero.
    """

    pass


class MissingColumnsError(DataQualityError):
    """Raised when required header columns are absent from the input.

    Attributes:
        missing: Header names of the required columns that were not found.
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")


class EmptyInputError(DataQualityError):
    """Raised when the input holds a header row but no data rows."""

    pass


class SourceError(PosHeatmapError):
    """Raised when the tabular input cannot be read.

    This exception is raised when:
    - The input file does not exist
    - The file extension is not a supported tabular format
    """

    pass
