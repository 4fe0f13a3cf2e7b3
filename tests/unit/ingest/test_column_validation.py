"""Unit tests for header validation."""

from __future__ import annotations

import pytest

from core.constants import EXPECTED_COLUMNS
from core.errors import MissingColumnsError
from ingest.column_validation import canonicalize_column_name, resolve_column_mapping


def test_canonicalize_column_name_ignores_case_and_separators() -> None:
    """Spaces, hyphens, and underscores should compare as one separator."""
    assert canonicalize_column_name("  Gas Consumption-m3 ") == "gas_consumption_m3"


def test_resolve_column_mapping_maps_expected_to_source_names() -> None:
    """Expected columns should map onto the source's own header spelling."""
    found = ("month", "YEAR", "generation-mw", "Gas Consumption m3", "co2_emissions_TONNS")

    mapping = resolve_column_mapping(found)

    assert mapping == dict(zip(EXPECTED_COLUMNS, found))


def test_resolve_column_mapping_ignores_extra_columns() -> None:
    """Additional source columns should not fail validation."""
    found = (*EXPECTED_COLUMNS, "Plant_ID")

    mapping = resolve_column_mapping(found)

    assert tuple(mapping) == EXPECTED_COLUMNS


def test_resolve_column_mapping_reports_missing_columns() -> None:
    """Missing columns should be listed with expected and found sets."""
    found = ("Month", "Generation_MW", "Gas_Consumption_m3", "CO2_Emissions_tonns")

    with pytest.raises(MissingColumnsError) as error_info:
        resolve_column_mapping(found)

    error = error_info.value
    assert (
        error.missing == ("Year",)
        and error.expected == EXPECTED_COLUMNS
        and error.found == found
        and "Missing required columns: Year." in str(error)
    )
