"""Threshold evaluation and compliance band classification.

One evaluator serves every intensity-based regime: it only needs the
monthly intensities and the regime's threshold. Bands use inclusive
lower bounds.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import AT_RISK_RATE, FULLY_COMPLIANT_RATE, MOSTLY_COMPLIANT_RATE
from core.types import ComplianceBand, RegimeStatus

_PASSING_BANDS: tuple[ComplianceBand, ...] = ("Fully Compliant", "Mostly Compliant")


def count_within_threshold(intensities: Sequence[float], threshold: float) -> int:
    """Count months whose intensity is at or below the threshold."""
    return sum(1 for intensity in intensities if intensity <= threshold)


def compliance_rate(intensities: Sequence[float], threshold: float) -> float:
    """Return the percent of months at or below the threshold.

    Args:
        intensities: Monthly carbon intensities.
        threshold: Regulatory limit in kgCO2/MWh.

    Returns:
        Rate in [0, 100]; 0 for an empty input.
    """
    if not intensities:
        return 0.0
    return count_within_threshold(intensities, threshold) / len(intensities) * 100


def classify_compliance_rate(rate: float) -> ComplianceBand:
    """Classify a compliance rate into a reporting band."""
    if rate >= FULLY_COMPLIANT_RATE:
        return "Fully Compliant"
    if rate >= MOSTLY_COMPLIANT_RATE:
        return "Mostly Compliant"
    if rate >= AT_RISK_RATE:
        return "At Risk"
    return "Non-Compliant"


def band_status(band: ComplianceBand) -> RegimeStatus:
    """Collapse a band into the pass/fail status used in reports."""
    return "Compliant" if band in _PASSING_BANDS else "Non-Compliant"
