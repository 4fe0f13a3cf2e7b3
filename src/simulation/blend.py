"""Blend application for individual records.

Emissions scale linearly with the displaced fraction, so both emissions
and intensity are non-increasing in the blend for any record with
non-negative emissions. The minimum-blend search relies on that.
"""

from __future__ import annotations

from typing import Iterable

from core.carbon import compute_carbon_intensity
from core.constants import MAX_BLEND_PERCENT, MIN_BLEND_PERCENT
from core.errors import SimulationError
from core.types import NormalizedRecord, SimulatedRecord


def validate_blend_percent(blend_percent: object) -> int:
    """Return the blend if it is an integer in [0, 100].

    Raises:
        SimulationError: If the blend is not an int or is out of range.
    """
    if isinstance(blend_percent, bool) or not isinstance(blend_percent, int):
        raise SimulationError(
            f"Blend percent must be an integer, got {type(blend_percent).__name__}."
        )
    if not MIN_BLEND_PERCENT <= blend_percent <= MAX_BLEND_PERCENT:
        raise SimulationError(
            f"Blend percent {blend_percent} is out of range. "
            f"Use a value between {MIN_BLEND_PERCENT} and {MAX_BLEND_PERCENT}."
        )
    return blend_percent


def blended_emissions(co2_emissions_tonnes: float, blend_percent: int) -> float:
    """Return emissions remaining after displacing blend_percent of fuel."""
    return co2_emissions_tonnes * (1 - blend_percent / 100)


def blended_intensity(record: NormalizedRecord, blend_percent: int) -> float:
    """Return a record's carbon intensity under a blend."""
    return compute_carbon_intensity(
        blended_emissions(record.co2_emissions_tonnes, blend_percent),
        record.generation_mw,
    )


def apply_blend(record: NormalizedRecord, blend_percent: int) -> SimulatedRecord:
    """Build a fresh simulated record; the input record is not modified."""
    new_emissions = blended_emissions(record.co2_emissions_tonnes, blend_percent)
    return SimulatedRecord(
        month=record.month,
        year=record.year,
        generation_mw=record.generation_mw,
        gas_consumption_m3=record.gas_consumption_m3,
        co2_emissions_tonnes=new_emissions,
        carbon_intensity=compute_carbon_intensity(new_emissions, record.generation_mw),
        original_emissions=record.co2_emissions_tonnes,
        emissions_reduction=record.co2_emissions_tonnes - new_emissions,
        blend_percent=blend_percent,
        row_index=record.row_index,
    )


def apply_blend_to_records(
    records: Iterable[NormalizedRecord],
    blend_percent: int,
) -> tuple[SimulatedRecord, ...]:
    """Apply one blend to every record, preserving order."""
    return tuple(apply_blend(record, blend_percent) for record in records)
