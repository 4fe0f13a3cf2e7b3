"""Per-field cleaning for raw delimited cells.

Numeric cells default to 0 when absent or unparsable. That default is the
ingest policy: a complete record set is preferred over per-cell strictness,
so a defaulted value is not distinguished from a genuine zero.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from core.carbon import compute_carbon_intensity
from core.errors import RowProcessingError
from core.types import NormalizedRecord

_WHITESPACE = re.compile(r"\s+")
_CONTROL_WHITESPACE = re.compile(r"[\t\n\r]")
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"[+-]?\d+")


def parse_numeric_or_zero(raw_value: str | None) -> float:
    """Parse a numeric cell, accepting a decimal comma.

    Whitespace is stripped and the first comma becomes a decimal point
    before the leading number is read. Thousands separators are not
    handled, so "1,250,5" reads as 1.25.

    Args:
        raw_value: Raw cell text.

    Returns:
        Parsed finite float, or 0.0 for empty or unparsable input.
    """
    if not raw_value:
        return 0.0
    compact = _WHITESPACE.sub("", raw_value).replace(",", ".", 1)
    match = _LEADING_FLOAT.match(compact)
    if match is None:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def parse_integer_or_zero(raw_value: str | None) -> int:
    """Parse the leading integer of a cell, or 0."""
    if not raw_value:
        return 0
    match = _LEADING_INT.match(_WHITESPACE.sub("", raw_value))
    return int(match.group(0)) if match is not None else 0


def clean_month(raw_value: str | None) -> str:
    """Trim a month label and drop embedded tabs and line breaks."""
    return _CONTROL_WHITESPACE.sub("", (raw_value or "").strip())


def normalize_row(
    row: Mapping[str, str],
    column_mapping: Mapping[str, str],
    row_index: int,
) -> NormalizedRecord:
    """Clean one live row into a canonical record.

    Args:
        row: Raw cells keyed by source header field.
        column_mapping: Expected column name to source header field.
        row_index: Zero-based live-row position.

    Returns:
        Normalized record with carbon intensity derived from this row only.

    Raises:
        RowProcessingError: If a cleaned quantity is negative.
    """
    def cell(expected_column: str) -> str:
        return row.get(column_mapping[expected_column], "")

    generation = parse_numeric_or_zero(cell("Generation_MW"))
    gas_consumption = parse_numeric_or_zero(cell("Gas_Consumption_m3"))
    emissions = parse_numeric_or_zero(cell("CO2_Emissions_tonns"))
    negative_fields = [
        name
        for name, value in (
            ("Generation_MW", generation),
            ("Gas_Consumption_m3", gas_consumption),
            ("CO2_Emissions_tonns", emissions),
        )
        if value < 0
    ]
    if negative_fields:
        raise RowProcessingError(
            f"Row {row_index + 1} has negative values in: {', '.join(negative_fields)}."
        )
    return NormalizedRecord(
        month=clean_month(cell("Month")),
        year=parse_integer_or_zero(cell("Year")),
        generation_mw=generation,
        gas_consumption_m3=gas_consumption,
        co2_emissions_tonnes=emissions,
        carbon_intensity=compute_carbon_intensity(emissions, generation),
        row_index=row_index,
    )
