"""h2blend exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Sequence


class H2BlendError(Exception):
    """Base exception for all h2blend failures."""


class H2BlendConfigError(H2BlendError):
    """Raised for invalid runtime configuration."""


class H2BlendDependencyError(H2BlendError):
    """Raised when an optional runtime dependency is missing."""


class H2BlendRunSpecError(H2BlendError):
    """Raised for invalid or unsupported run-spec configuration."""


class H2BlendReportError(H2BlendError):
    """Raised when a compliance report cannot be written."""


class IngestionError(H2BlendError):
    """Raised for source parsing and ingest failures."""


class UnsupportedFileTypeError(IngestionError):
    """Raised before parsing when the source is not a tabular text file."""


class EmptyOrInvalidFileError(IngestionError):
    """Raised when the source has no header plus data rows."""


class MissingColumnsError(IngestionError):
    """Raised when required columns are absent from the header row.

    Attributes:
        missing: Expected columns not found in the source.
        expected: Full expected column list.
        found: Columns actually present in the source header.
    """

    def __init__(
        self,
        missing: Sequence[str],
        expected: Sequence[str],
        found: Sequence[str],
    ) -> None:
        self.missing = tuple(missing)
        self.expected = tuple(expected)
        self.found = tuple(found)
        super().__init__(
            f"Missing required columns: {', '.join(self.missing)}. "
            f"Expected columns: {', '.join(self.expected)}. "
            f"Found columns: {', '.join(self.found)}. "
            "Fix the header row and retry."
        )


class RowProcessingError(IngestionError):
    """Raised for one unusable data row; the row is dropped."""


class ParseDelimiterFailure(IngestionError):
    """Raised when a delimiter strategy yields no usable table."""


class SimulationError(H2BlendError):
    """Raised when simulation inputs violate the engine contract."""
