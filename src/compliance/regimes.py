"""Tracked regulatory regimes and their evaluation.

EU ETS and CSRD share the threshold evaluator with different limits.
MRV is a data-completeness rule scored as all-or-nothing.
"""

from __future__ import annotations

from typing import Sequence

from compliance.classification import band_status, classify_compliance_rate, compliance_rate
from core.constants import (
    DEFAULT_PRIMARY_THRESHOLD,
    DEFAULT_SECONDARY_THRESHOLD,
    FULLY_COMPLIANT_RATE,
)
from core.types import MonthlyIntensityRecord, RegimeAssessment, RegulatoryRegime

EU_ETS_KEY = "euets"
CSRD_KEY = "csrd"
MRV_KEY = "mrv"


def build_regimes(
    primary_threshold: float = DEFAULT_PRIMARY_THRESHOLD,
    secondary_threshold: float = DEFAULT_SECONDARY_THRESHOLD,
) -> tuple[RegulatoryRegime, ...]:
    """Return the tracked regimes in report order."""
    return (
        RegulatoryRegime(
            key=EU_ETS_KEY,
            name="EU ETS",
            description="EU Emissions Trading System",
            threshold=primary_threshold,
            kind="intensity",
        ),
        RegulatoryRegime(
            key=CSRD_KEY,
            name="CSRD",
            description="Corporate Sustainability Reporting Directive",
            threshold=secondary_threshold,
            kind="intensity",
        ),
        RegulatoryRegime(
            key=MRV_KEY,
            name="MRV",
            description="Monitoring, Reporting, Verification",
            threshold=FULLY_COMPLIANT_RATE,
            kind="completeness",
        ),
    )


def has_complete_data(records: Sequence[MonthlyIntensityRecord]) -> bool:
    """Return whether every record carries all four reported fields.

    A zero year, generation, or emissions value counts as missing, since
    unparsable cells are stored as zero.
    """
    return all(
        record.month and record.year and record.generation_mw and record.co2_emissions_tonnes
        for record in records
    )


def assess_regime(
    regime: RegulatoryRegime,
    records: Sequence[MonthlyIntensityRecord],
) -> RegimeAssessment:
    """Evaluate one regime against a record set."""
    if regime.kind == "completeness":
        rate = FULLY_COMPLIANT_RATE if has_complete_data(records) else 0.0
    else:
        rate = compliance_rate([record.carbon_intensity for record in records], regime.threshold)
    band = classify_compliance_rate(rate)
    return RegimeAssessment(regime=regime, rate=rate, band=band, status=band_status(band))


def assess_regimes(
    records: Sequence[MonthlyIntensityRecord],
    regimes: Sequence[RegulatoryRegime] | None = None,
) -> tuple[RegimeAssessment, ...]:
    """Evaluate every regime independently against the same records.

    Args:
        records: Normalized or simulated records.
        regimes: Regimes to evaluate; defaults to the tracked set.

    Returns:
        Assessments in regime order.
    """
    selected = tuple(regimes) if regimes is not None else build_regimes()
    return tuple(assess_regime(regime, records) for regime in selected)
