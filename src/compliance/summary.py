"""Annual summary metrics for a reporting period."""

from __future__ import annotations

from typing import Iterable, Sequence

from core.carbon import mean_or_zero
from core.types import AnnualSummary, MonthlyIntensityRecord


def summarize_records(records: Sequence[MonthlyIntensityRecord]) -> AnnualSummary:
    """Aggregate totals and monthly averages.

    Args:
        records: Normalized or simulated records.

    Returns:
        Summary metrics; averages are 0 for an empty input.
    """
    data_points = len(records)
    total_generation = sum(record.generation_mw for record in records)
    total_emissions = sum(record.co2_emissions_tonnes for record in records)
    return AnnualSummary(
        total_generation=total_generation,
        total_emissions=total_emissions,
        average_intensity=mean_or_zero(record.carbon_intensity for record in records),
        year_range=format_year_range(record.year for record in records),
        monthly_generation=total_generation / data_points if data_points else 0.0,
        monthly_emissions=total_emissions / data_points if data_points else 0.0,
        efficiency_ratio=total_generation / total_emissions if total_emissions > 0 else 0.0,
        data_points=data_points,
    )


def format_year_range(years: Iterable[int]) -> str:
    """Render distinct years as "first-last", a single year, or "N/A"."""
    distinct_years = sorted(set(years))
    if not distinct_years:
        return "N/A"
    if len(distinct_years) == 1:
        return str(distinct_years[0])
    return f"{distinct_years[0]}-{distinct_years[-1]}"
