"""Simulation entry point.

Every call recomputes all outputs from its inputs; nothing is cached
between calls with different blends.
"""

from __future__ import annotations

from typing import Sequence

from compliance.classification import classify_compliance_rate
from core.constants import DEFAULT_PRIMARY_THRESHOLD
from core.errors import SimulationError
from core.logging_config import get_logger
from core.types import ComplianceResult, NormalizedRecord, SimulationOutput
from simulation.blend import apply_blend_to_records, validate_blend_percent
from simulation.compliance_search import (
    evaluate_intensities,
    find_min_blend_for_compliance,
    validate_threshold,
)

_LOGGER = get_logger(__name__)


def simulate(
    records: Sequence[NormalizedRecord],
    blend_percent: int,
    threshold: float = DEFAULT_PRIMARY_THRESHOLD,
) -> SimulationOutput:
    """Apply a hydrogen blend and evaluate compliance.

    Args:
        records: Normalized records, typically ``Dataset.records``.
        blend_percent: Integer blend in [0, 100].
        threshold: Regulatory limit in kgCO2/MWh.

    Returns:
        Fresh simulated records and compliance status.

    Raises:
        SimulationError: If records are empty or the blend or threshold is invalid.
    """
    blend = validate_blend_percent(blend_percent)
    threshold = validate_threshold(threshold)
    record_rows = tuple(records)
    if not record_rows:
        raise SimulationError(
            "Cannot simulate an empty record set. Ingest a file with monthly rows first."
        )
    simulated_records = apply_blend_to_records(record_rows, blend)
    stats = evaluate_intensities(
        [record.carbon_intensity for record in simulated_records], threshold
    )
    compliance_result = ComplianceResult(
        is_compliant=stats.is_compliant,
        compliance_rate=stats.compliance_rate,
        average_intensity=stats.average_intensity,
        max_intensity=stats.max_intensity,
        min_intensity=stats.min_intensity,
        min_blend_for_compliance=find_min_blend_for_compliance(record_rows, threshold),
        threshold=threshold,
        compliant_months=stats.compliant_months,
        total_months=stats.total_months,
        status_band=classify_compliance_rate(stats.compliance_rate),
    )
    total_original = sum(record.original_emissions for record in simulated_records)
    total_savings = sum(record.emissions_reduction for record in simulated_records)
    _LOGGER.info(
        "simulation_completed",
        blend_percent=blend,
        threshold=threshold,
        is_compliant=compliance_result.is_compliant,
        min_blend=compliance_result.min_blend_for_compliance,
    )
    return SimulationOutput(
        simulated_records=simulated_records,
        compliance_result=compliance_result,
        blend_percent=blend,
        total_original_emissions=total_original,
        total_emissions_savings=total_savings,
        reduction_percent=total_savings / total_original * 100 if total_original > 0 else 0.0,
    )


def render_simulation_lines(output: SimulationOutput) -> tuple[str, ...]:
    """Render simulation headline values as stable key=value lines."""
    result = output.compliance_result
    return (
        f"blend_percent={output.blend_percent}",
        f"threshold={result.threshold:g}",
        f"is_compliant={str(result.is_compliant).lower()}",
        f"compliance_rate={result.compliance_rate:.1f}",
        f"status_band={result.status_band}",
        f"average_intensity={result.average_intensity:.1f}",
        f"max_intensity={result.max_intensity:.1f}",
        f"min_blend_for_compliance={result.min_blend_for_compliance}",
        f"emissions_savings={output.total_emissions_savings:.1f}",
        f"reduction_percent={output.reduction_percent:.1f}",
    )
