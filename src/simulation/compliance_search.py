"""Compliance predicate and minimum-blend binary search."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

from compliance.classification import compliance_rate, count_within_threshold
from core.carbon import mean_or_zero
from core.constants import MAX_BLEND_PERCENT, MIN_BLEND_PERCENT
from core.errors import SimulationError
from core.logging_config import get_logger
from core.types import NormalizedRecord
from simulation.blend import blended_intensity

_LOGGER = get_logger(__name__)


def validate_threshold(threshold: object) -> float:
    """Return the threshold if it is a positive finite number.

    Raises:
        SimulationError: If the threshold is not a number, is NaN or infinite,
            or is not greater than zero.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise SimulationError(
            f"Threshold must be a number in kgCO2/MWh, got {type(threshold).__name__}."
        )
    if not math.isfinite(threshold) or threshold <= 0:
        raise SimulationError(
            f"Threshold {threshold} is invalid. Use a positive kgCO2/MWh value."
        )
    return float(threshold)


@dataclass(frozen=True)
class IntensityStats:
    """Aggregate intensity metrics for one blend.

    Attributes:
        average_intensity: Unweighted mean across months.
        max_intensity: Highest monthly value.
        min_intensity: Lowest monthly value.
        compliance_rate: Percent of months at or below threshold.
        compliant_months: Months at or below threshold.
        total_months: Months evaluated.
        is_compliant: Both average and max at or below threshold.
    """

    average_intensity: float
    max_intensity: float
    min_intensity: float
    compliance_rate: float
    compliant_months: int
    total_months: int
    is_compliant: bool


def evaluate_intensities(intensities: Sequence[float], threshold: float) -> IntensityStats:
    """Aggregate monthly intensities against a threshold.

    The average is not weighted by generation; every month counts equally.

    Args:
        intensities: Non-empty monthly intensities.
        threshold: Regulatory limit in kgCO2/MWh.

    Returns:
        Aggregate statistics with the strict compliance predicate applied.
    """
    average_intensity = mean_or_zero(intensities)
    max_intensity = max(intensities)
    return IntensityStats(
        average_intensity=average_intensity,
        max_intensity=max_intensity,
        min_intensity=min(intensities),
        compliance_rate=compliance_rate(intensities, threshold),
        compliant_months=count_within_threshold(intensities, threshold),
        total_months=len(intensities),
        is_compliant=average_intensity <= threshold and max_intensity <= threshold,
    )


def is_compliant_at_blend(
    records: Sequence[NormalizedRecord],
    blend_percent: int,
    threshold: float,
) -> bool:
    """Return whether records meet the threshold under a blend."""
    intensities = [blended_intensity(record, blend_percent) for record in records]
    return evaluate_intensities(intensities, threshold).is_compliant


def find_min_blend_for_compliance(
    records: Sequence[NormalizedRecord],
    threshold: float,
) -> int:
    """Binary-search the smallest compliant integer blend.

    A 100% blend zeroes every month's emissions, so it is always
    compliant and serves as the initial answer.

    Args:
        records: Non-empty normalized records.
        threshold: Regulatory limit in kgCO2/MWh.

    Returns:
        Smallest blend in [0, 100] for which the facility is compliant.

    Raises:
        SimulationError: If the threshold is not positive and finite.
    """
    threshold = validate_threshold(threshold)
    left = MIN_BLEND_PERCENT
    right = MAX_BLEND_PERCENT
    best = MAX_BLEND_PERCENT
    iterations = 0
    while left <= right:
        iterations += 1
        mid = (left + right) // 2
        if is_compliant_at_blend(records, mid, threshold):
            best = mid
            right = mid - 1
        else:
            left = mid + 1
    _LOGGER.debug("min_blend_search_completed", best=best, iterations=iterations)
    return best
