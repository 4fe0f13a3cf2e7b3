"""Multi-strategy delimited text parsing.

Exports arrive with semicolon, comma, or tab delimiters and no reliable
dialect metadata. This module tries an ordered list of strategies and
returns the first table that has a header plus at least one live row.
When every strategy fails, a semicolon line-split parser runs once as
the parser of last resort.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from core.constants import (
    MANUAL_PARSE_DELIMITER,
    MIN_SOURCE_LINES,
    SNIFF_DELIMITERS,
    SNIFF_SAMPLE_SIZE,
)
from core.errors import EmptyOrInvalidFileError, ParseDelimiterFailure
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

MANUAL_STRATEGY_NAME = "manual"


@dataclass(frozen=True)
class ParsedTable:
    """Header and live rows produced by one parse strategy.

    Attributes:
        columns: Trimmed header fields in source order.
        rows: Live rows keyed by header field.
        strategy: Name of the strategy that produced the table.
    """

    columns: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...]
    strategy: str


ParseStrategy = Callable[[str], ParsedTable]


def parse_delimited_text(text: str) -> ParsedTable:
    """Parse text with the first delimiter strategy that succeeds.

    Args:
        text: Decoded, LF-normalized source text.

    Returns:
        Parsed table from a delimiter strategy or the manual fallback.

    Raises:
        EmptyOrInvalidFileError: If the manual fallback finds fewer than two lines.
    """
    for strategy_name, strategy in DELIMITER_STRATEGIES:
        try:
            table = strategy(text)
        except ParseDelimiterFailure as error:
            _LOGGER.debug("parse_strategy_failed", strategy=strategy_name, reason=str(error))
            continue
        _LOGGER.debug("parse_strategy_succeeded", strategy=strategy_name, rows=len(table.rows))
        return table
    _LOGGER.info("parse_manual_fallback", strategies=len(DELIMITER_STRATEGIES))
    return parse_manual_semicolon(text)


def parse_semicolon(text: str) -> ParsedTable:
    """Parse text as a semicolon-delimited table."""
    return _parse_with_delimiter(text, ";", "semicolon")


def parse_comma(text: str) -> ParsedTable:
    """Parse text as a comma-delimited table."""
    return _parse_with_delimiter(text, ",", "comma")


def parse_tab(text: str) -> ParsedTable:
    """Parse text as a tab-delimited table."""
    return _parse_with_delimiter(text, "\t", "tab")


def parse_auto_detect(text: str) -> ParsedTable:
    """Parse text with a delimiter sniffed from the leading sample.

    Raises:
        ParseDelimiterFailure: If no delimiter can be detected.
    """
    try:
        dialect = csv.Sniffer().sniff(text[:SNIFF_SAMPLE_SIZE], delimiters=SNIFF_DELIMITERS)
    except csv.Error as error:
        raise ParseDelimiterFailure(f"Could not detect delimiter: {error}.") from error
    return _parse_with_delimiter(text, dialect.delimiter, "auto-detect")


def parse_manual_semicolon(text: str) -> ParsedTable:
    """Split lines on semicolons without quote handling.

    Args:
        text: Decoded, LF-normalized source text.

    Returns:
        Parsed table; rows may be empty when every data line is blank.

    Raises:
        EmptyOrInvalidFileError: If fewer than two non-blank lines exist.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) < MIN_SOURCE_LINES:
        raise EmptyOrInvalidFileError(
            "File appears to be empty or invalid: expected a header line and at "
            f"least one data line, found {len(lines)} non-blank line(s)."
        )
    columns = tuple(field.strip() for field in lines[0].split(MANUAL_PARSE_DELIMITER))
    rows = []
    for line in lines[1:]:
        values = [value.strip() for value in line.split(MANUAL_PARSE_DELIMITER)]
        if _is_live_row(values):
            rows.append(_map_row(columns, values))
    return ParsedTable(columns=columns, rows=tuple(rows), strategy=MANUAL_STRATEGY_NAME)


def _parse_with_delimiter(text: str, delimiter: str, strategy_name: str) -> ParsedTable:
    """Parse text with csv using the first line as header.

    Raises:
        ParseDelimiterFailure: If the header is not split by the delimiter,
            the csv reader fails, or no live rows remain.
    """
    try:
        raw_rows = list(csv.reader(io.StringIO(text, newline=""), delimiter=delimiter))
    except csv.Error as error:
        raise ParseDelimiterFailure(
            f"Strategy '{strategy_name}' could not read rows: {error}."
        ) from error
    if not raw_rows:
        raise ParseDelimiterFailure(f"Strategy '{strategy_name}' found no header line.")
    columns = tuple(field.strip() for field in raw_rows[0])
    if len(columns) < 2:
        raise ParseDelimiterFailure(
            f"Strategy '{strategy_name}' detected no columns: delimiter "
            f"{delimiter!r} does not split the header line."
        )
    rows = tuple(_map_row(columns, row) for row in raw_rows[1:] if _is_live_row(row))
    if not rows:
        raise ParseDelimiterFailure(f"Strategy '{strategy_name}' found no data rows.")
    return ParsedTable(columns=columns, rows=rows, strategy=strategy_name)


def _is_live_row(values: Sequence[str]) -> bool:
    """Return whether any field is non-empty after trimming."""
    return any(value.strip() for value in values)


def _map_row(columns: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    """Key row values by header field, padding short rows with blanks."""
    padded = list(values) + [""] * max(len(columns) - len(values), 0)
    return {column: padded[index] for index, column in enumerate(columns)}


DELIMITER_STRATEGIES: tuple[tuple[str, ParseStrategy], ...] = (
    ("semicolon", parse_semicolon),
    ("comma", parse_comma),
    ("tab", parse_tab),
    ("auto-detect", parse_auto_detect),
)
