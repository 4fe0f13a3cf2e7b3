"""Ingest orchestration for uploaded telemetry exports.

This module coordinates file type checks, decoding, multi-strategy
parsing, column validation, and per-row normalization into a Dataset.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import CARBON_INTENSITY_COLUMN, EXPECTED_COLUMNS
from core.errors import EmptyOrInvalidFileError, RowProcessingError
from core.logging_config import get_logger
from core.types import Dataset, NormalizedRecord
from ingest.column_validation import resolve_column_mapping
from ingest.delimited_parser import ParsedTable, parse_delimited_text
from ingest.field_cleaning import normalize_row
from ingest.input_reader import (
    decode_source_text,
    ensure_supported_file_type,
    read_source_bytes,
)

_LOGGER = get_logger(__name__)


def ingest(raw: bytes, filename: str) -> Dataset:
    """Normalize an uploaded export into a Dataset.

    Args:
        raw: Complete file contents.
        filename: Uploaded file name, used for type checks and labeling.

    Returns:
        Dataset with records in source row order.

    Raises:
        UnsupportedFileTypeError: If the file is not a tabular text export.
        EmptyOrInvalidFileError: If no header plus data rows can be read.
        MissingColumnsError: If required columns are absent.
    """
    ensure_supported_file_type(filename)
    text = decode_source_text(raw)
    table = parse_delimited_text(text)
    column_mapping = resolve_column_mapping(table.columns)
    records, dropped_row_count = _normalize_rows(table, column_mapping)
    if not records:
        raise EmptyOrInvalidFileError(
            f"No usable data rows found in '{filename}'. "
            "Add monthly rows below the header and retry."
        )
    dataset = Dataset(
        records=tuple(records),
        columns=(*EXPECTED_COLUMNS, CARBON_INTENSITY_COLUMN),
        source_name=filename,
        parse_strategy=table.strategy,
        dropped_row_count=dropped_row_count,
    )
    _LOGGER.info(
        "ingest_completed",
        source_name=filename,
        strategy=table.strategy,
        row_count=dataset.row_count,
        dropped_rows=dropped_row_count,
    )
    return dataset


def ingest_file(source_path: str | Path) -> Dataset:
    """Read a local export and normalize it.

    Args:
        source_path: Path to a delimited text file.

    Returns:
        Normalized dataset named after the file.
    """
    path = Path(source_path).expanduser()
    ensure_supported_file_type(path.name)
    return ingest(read_source_bytes(path), path.name)


def _normalize_rows(
    table: ParsedTable,
    column_mapping: dict[str, str],
) -> tuple[list[NormalizedRecord], int]:
    """Normalize live rows, dropping rows that fail processing."""
    records: list[NormalizedRecord] = []
    dropped_row_count = 0
    for row_index, row in enumerate(table.rows):
        try:
            records.append(normalize_row(row, column_mapping, row_index))
        except RowProcessingError as error:
            dropped_row_count += 1
            _LOGGER.warning("row_dropped", row_index=row_index, reason=str(error))
    return records, dropped_row_count
