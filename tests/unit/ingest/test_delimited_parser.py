"""Unit tests for multi-strategy delimited parsing."""

from __future__ import annotations

import pytest

from core.errors import EmptyOrInvalidFileError, ParseDelimiterFailure
from ingest.delimited_parser import (
    parse_auto_detect,
    parse_delimited_text,
    parse_manual_semicolon,
    parse_semicolon,
)
from ingest.input_reader import decode_source_text
from tests.fixture_paths import fixture_bytes


def _fixture_text(relative_path: str) -> str:
    return decode_source_text(fixture_bytes(relative_path))


@pytest.mark.parametrize(
    ("relative_path", "strategy"),
    [
        ("exports/plant_semicolon.csv", "semicolon"),
        ("exports/plant_comma.csv", "comma"),
        ("exports/plant_tab.tsv", "tab"),
    ],
)
def test_parse_delimited_text_picks_matching_strategy(relative_path: str, strategy: str) -> None:
    """Each delimiter should be handled by its own strategy."""
    table = parse_delimited_text(_fixture_text(relative_path))

    assert table.strategy == strategy and len(table.rows) == 3 and len(table.columns) == 5


def test_parse_delimited_text_keeps_decimal_comma_inside_semicolon_fields() -> None:
    """Decimal commas should stay in the cell when semicolons delimit."""
    table = parse_delimited_text(_fixture_text("exports/decimal_comma.csv"))

    assert table.rows[0]["Generation_MW"] == "1000,5"


def test_parse_delimited_text_skips_blank_rows() -> None:
    """Rows with only empty fields should not become data rows."""
    table = parse_delimited_text(_fixture_text("exports/blank_rows.csv"))

    assert [row["Month"] for row in table.rows] == ["January", "February"]


def test_parse_delimited_text_trims_header_fields() -> None:
    """Header fields should be trimmed of surrounding whitespace."""
    table = parse_delimited_text(_fixture_text("exports/messy_headers.csv"))

    assert table.columns[0] == "month"


def test_parse_delimited_text_header_only_raises_empty_file_error() -> None:
    """A header without data lines should fail after the manual fallback."""
    with pytest.raises(EmptyOrInvalidFileError):
        parse_delimited_text(_fixture_text("exports/header_only.csv"))


def test_parse_delimited_text_falls_back_to_manual_parser() -> None:
    """When no strategy finds live rows, the manual parser should run."""
    text = "Month;Year;Generation_MW;Gas_Consumption_m3;CO2_Emissions_tonns\n;;;;\n"

    table = parse_delimited_text(text)

    assert table.strategy == "manual" and table.rows == ()


def test_parse_semicolon_rejects_unsplit_header() -> None:
    """A header the delimiter does not split should count as no columns."""
    with pytest.raises(ParseDelimiterFailure, match="no columns"):
        parse_semicolon("Month,Year\nJanuary,2023\n")


def test_parse_auto_detect_finds_pipe_delimiter() -> None:
    """Sniffing should detect delimiters outside the fixed strategy list."""
    table = parse_auto_detect("Month|Year|Generation_MW\nJanuary|2023|1000\nMarch|2023|900\n")

    assert table.strategy == "auto-detect" and table.rows[1]["Generation_MW"] == "900"


def test_parse_manual_semicolon_pads_short_rows() -> None:
    """Short rows should be padded with empty cells by header name."""
    table = parse_manual_semicolon("Month;Year;Generation_MW\nJanuary;2023\n")

    assert table.rows[0] == {"Month": "January", "Year": "2023", "Generation_MW": ""}


def test_parse_manual_semicolon_requires_two_lines() -> None:
    """Fewer than two non-blank lines should be rejected."""
    with pytest.raises(EmptyOrInvalidFileError, match="found 1"):
        parse_manual_semicolon("Month;Year\n\n   \n")
