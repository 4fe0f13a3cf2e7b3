"""Compliance report assembly and persistence.

Reports are built from simulation output without recomputing any
compliance metric, then written as indented JSON for downstream
document rendering.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Sequence

from compliance.regimes import CSRD_KEY, EU_ETS_KEY, MRV_KEY, assess_regimes
from compliance.summary import summarize_records
from core.constants import DEFAULT_FACILITY_NAME, FULLY_COMPLIANT_RATE, MOSTLY_COMPLIANT_RATE
from core.errors import H2BlendReportError
from core.logging_config import get_logger
from core.types import (
    ComplianceReport,
    Dataset,
    Recommendation,
    RegimeAssessment,
    RegulatoryRegime,
    SimulationOutput,
)

_LOGGER = get_logger(__name__)


def build_compliance_report(
    dataset: Dataset,
    output: SimulationOutput,
    regimes: Sequence[RegulatoryRegime] | None = None,
    facility: str = DEFAULT_FACILITY_NAME,
    generated_on: date | None = None,
) -> ComplianceReport:
    """Assemble a report for one simulated blend.

    Args:
        dataset: Ingested dataset the simulation ran on.
        output: Simulation output at the reported blend.
        regimes: Regimes to assess; defaults to the tracked set.
        facility: Facility display name.
        generated_on: Report date; defaults to today.

    Returns:
        Report payload ready for serialization.
    """
    report_date = (generated_on or date.today()).isoformat()
    assessments = assess_regimes(output.simulated_records, regimes)
    return ComplianceReport(
        title=f"Power Plant Compliance Report - {report_date}",
        generated_date=report_date,
        facility=facility,
        source_name=dataset.source_name,
        blend_percent=output.blend_percent,
        summary=summarize_records(output.simulated_records),
        compliance=output.compliance_result,
        regimes=assessments,
        emissions_reduction=output.total_emissions_savings,
        reduction_percent=output.reduction_percent,
        recommendations=build_recommendations(output, assessments),
    )


def build_recommendations(
    output: SimulationOutput,
    assessments: Sequence[RegimeAssessment],
) -> tuple[Recommendation, ...]:
    """Derive ordered recommendations from regime rates and blend impact."""
    rates = {assessment.regime.key: assessment.rate for assessment in assessments}
    recommendations: list[Recommendation] = []
    eu_rate = rates.get(EU_ETS_KEY)
    if eu_rate is not None and eu_rate < MOSTLY_COMPLIANT_RATE:
        recommendations.append(
            Recommendation(
                priority="High",
                category="EU ETS Compliance",
                action=(
                    "Increase hydrogen blend to "
                    f"{output.compliance_result.min_blend_for_compliance}% to achieve compliance"
                ),
                impact=f"Will improve compliance rate from {eu_rate:.1f}% to 100%",
                timeline="6-12 months",
            )
        )
    csrd_rate = rates.get(CSRD_KEY)
    if csrd_rate is not None and csrd_rate < MOSTLY_COMPLIANT_RATE:
        recommendations.append(
            Recommendation(
                priority="Medium",
                category="CSRD Compliance",
                action="Implement additional efficiency measures beyond hydrogen blending",
                impact="Will improve sustainability reporting compliance",
                timeline="12-18 months",
            )
        )
    if output.blend_percent > 0:
        recommendations.append(
            Recommendation(
                priority="High",
                category="Hydrogen Integration",
                action=(
                    f"Current {output.blend_percent}% hydrogen blend is reducing emissions "
                    f"by {output.reduction_percent:.1f}%"
                ),
                impact=f"Annual CO2 savings: {output.total_emissions_savings:,.0f} tonnes",
                timeline="Ongoing",
            )
        )
    mrv_rate = rates.get(MRV_KEY)
    if mrv_rate is not None and mrv_rate < FULLY_COMPLIANT_RATE:
        recommendations.append(
            Recommendation(
                priority="Medium",
                category="Data Quality",
                action="Improve data collection and reporting processes",
                impact="Will ensure complete MRV compliance",
                timeline="3-6 months",
            )
        )
    return tuple(recommendations)


def save_compliance_report(report: ComplianceReport, report_path: Path) -> Path:
    """Persist report JSON and return the resolved path.

    Raises:
        H2BlendReportError: If the file cannot be written.
    """
    resolved_path = report_path.expanduser().resolve()
    try:
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
        resolved_path.write_text(
            json.dumps(asdict(report), indent=2) + "\n", encoding="utf-8"
        )
    except OSError as error:
        raise H2BlendReportError(
            f"Failed to write compliance report at {resolved_path}: {error}. "
            "Choose a writable report directory."
        ) from error
    _LOGGER.info("report_saved", report_path=str(resolved_path))
    return resolved_path


def render_report_lines(report: ComplianceReport) -> tuple[str, ...]:
    """Render report headline values as stable key=value lines."""
    compliance = report.compliance
    lines = [
        f"source={report.source_name}",
        f"blend_percent={report.blend_percent}",
        f"is_compliant={str(compliance.is_compliant).lower()}",
        f"average_intensity={compliance.average_intensity:.1f}",
        f"min_blend_for_compliance={compliance.min_blend_for_compliance}",
        f"year_range={report.summary.year_range}",
        f"emissions_reduction={report.emissions_reduction:.1f}",
    ]
    for assessment in report.regimes:
        lines.append(
            f"regime_{assessment.regime.key}={assessment.rate:.1f}% "
            f"{assessment.band} ({assessment.status})"
        )
    for recommendation in report.recommendations:
        lines.append(
            f"[{recommendation.priority}] {recommendation.category}: {recommendation.action}"
        )
    return tuple(lines)
