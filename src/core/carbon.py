"""Carbon intensity arithmetic shared by ingest and simulation."""

from __future__ import annotations

from typing import Iterable

from core.constants import KG_PER_TONNE


def compute_carbon_intensity(co2_emissions_tonnes: float, generation_mw: float) -> float:
    """Return kgCO2 per MWh, floored to 0 when nothing was generated.

    Args:
        co2_emissions_tonnes: Emitted CO2 in tonnes.
        generation_mw: Generated energy for the same period.

    Returns:
        Carbon intensity in kgCO2/MWh.
    """
    if generation_mw > 0:
        return co2_emissions_tonnes * KG_PER_TONNE / generation_mw
    return 0.0


def mean_or_zero(values: Iterable[float]) -> float:
    """Return the arithmetic mean, or 0 for an empty input."""
    rows = list(values)
    if not rows:
        return 0.0
    return sum(rows) / len(rows)
