"""Header validation against the canonical column set."""

from __future__ import annotations

import re
from typing import Sequence

from core.constants import EXPECTED_COLUMNS
from core.errors import MissingColumnsError

_SEPARATOR_RUN = re.compile(r"[\s\-_]+")


def canonicalize_column_name(name: str) -> str:
    """Normalize a column name for case and separator-insensitive matching.

    Args:
        name: Raw header field.

    Returns:
        Trimmed, lowercased name with separator runs collapsed to "_".
    """
    return _SEPARATOR_RUN.sub("_", name.strip()).lower()


def resolve_column_mapping(
    found_columns: Sequence[str],
    expected_columns: Sequence[str] = EXPECTED_COLUMNS,
) -> dict[str, str]:
    """Map each expected column to the source header field that matches it.

    Args:
        found_columns: Header fields from the source.
        expected_columns: Canonical required column names.

    Returns:
        Mapping of expected column name to source header field.

    Raises:
        MissingColumnsError: If any expected column is absent.
    """
    source_by_canonical: dict[str, str] = {}
    for column in found_columns:
        source_by_canonical.setdefault(canonicalize_column_name(column), column)
    missing = [
        column
        for column in expected_columns
        if canonicalize_column_name(column) not in source_by_canonical
    ]
    if missing:
        raise MissingColumnsError(missing, expected_columns, found_columns)
    return {
        column: source_by_canonical[canonicalize_column_name(column)]
        for column in expected_columns
    }
