"""Unit tests for annual summary metrics."""

from __future__ import annotations

import pytest

from compliance.summary import format_year_range, summarize_records
from ingest.demo_data import generate_demo_dataset
from ingest.pipeline import ingest_file
from tests.fixture_paths import fixture_path


def test_summarize_records_aggregates_totals_and_averages() -> None:
    """Summary should total and average the reporting period."""
    records = ingest_file(fixture_path("exports/plant_semicolon.csv")).records

    summary = summarize_records(records)

    assert (
        summary.total_generation == 3000.0
        and summary.total_emissions == 1050.0
        and summary.average_intensity == pytest.approx(350.0)
        and summary.year_range == "2023"
        and summary.monthly_generation == 1000.0
        and summary.monthly_emissions == 350.0
        and summary.efficiency_ratio == pytest.approx(3000 / 1050)
        and summary.data_points == 3
    )


def test_summarize_records_spans_demo_years() -> None:
    """Multi-year data should render the first and last year."""
    summary = summarize_records(generate_demo_dataset().records)

    assert (summary.year_range, summary.data_points) == ("2020-2023", 48)


def test_summarize_records_empty_input_is_zero() -> None:
    """No records should produce zero metrics and no year range."""
    summary = summarize_records(())

    assert (summary.total_generation, summary.efficiency_ratio, summary.year_range) == (
        0,
        0.0,
        "N/A",
    )


def test_format_year_range_sorts_distinct_years() -> None:
    """Years should be deduplicated and ordered."""
    assert format_year_range([2022, 2020, 2022, 2021]) == "2020-2022"
