"""Shared typed models.

This module defines immutable data models used by ingest, simulation,
compliance, and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

ComplianceBand = Literal["Fully Compliant", "Mostly Compliant", "At Risk", "Non-Compliant"]
RegimeStatus = Literal["Compliant", "Non-Compliant"]
RecommendationPriority = Literal["High", "Medium"]


@dataclass(frozen=True)
class NormalizedRecord:
    """One calendar month of facility data.

    Attributes:
        month: Month label as written in the source.
        year: Calendar year, 0 when unparsable.
        generation_mw: Generated energy.
        gas_consumption_m3: Gas consumed in cubic meters.
        co2_emissions_tonnes: CO2 emitted in tonnes.
        carbon_intensity: Derived kgCO2/MWh, 0 when generation is 0.
        row_index: Zero-based live-row position in the source.
    """

    month: str
    year: int
    generation_mw: float
    gas_consumption_m3: float
    co2_emissions_tonnes: float
    carbon_intensity: float
    row_index: int = 0


@dataclass(frozen=True)
class Dataset:
    """Normalized records from one uploaded source.

    Attributes:
        records: Records in source row order.
        columns: Expected columns followed by the derived intensity column.
        source_name: Original file name.
        parse_strategy: Name of the parser strategy that produced the rows.
        dropped_row_count: Rows discarded by row-level processing errors.
    """

    records: tuple[NormalizedRecord, ...]
    columns: tuple[str, ...]
    source_name: str
    parse_strategy: str
    dropped_row_count: int = 0

    @property
    def row_count(self) -> int:
        """Number of normalized records."""
        return len(self.records)


@dataclass(frozen=True)
class SimulatedRecord:
    """A record with emissions recomputed under a hydrogen blend.

    Attributes:
        month: Month label.
        year: Calendar year.
        generation_mw: Generated energy, unchanged by blending.
        gas_consumption_m3: Gas consumed, unchanged by blending.
        co2_emissions_tonnes: Emissions after blending.
        carbon_intensity: Intensity after blending.
        original_emissions: Emissions before blending.
        emissions_reduction: original_emissions minus co2_emissions_tonnes.
        blend_percent: Blend used to produce this record.
        row_index: Source row position.
    """

    month: str
    year: int
    generation_mw: float
    gas_consumption_m3: float
    co2_emissions_tonnes: float
    carbon_intensity: float
    original_emissions: float
    emissions_reduction: float
    blend_percent: int
    row_index: int = 0


@dataclass(frozen=True)
class ComplianceResult:
    """Compliance status of one simulation run.

    Attributes:
        is_compliant: Average and peak intensity both within threshold.
        compliance_rate: Percent of months at or below threshold.
        average_intensity: Unweighted mean monthly intensity.
        max_intensity: Highest monthly intensity.
        min_intensity: Lowest monthly intensity.
        min_blend_for_compliance: Smallest blend that makes the facility compliant.
        threshold: Regulatory limit in kgCO2/MWh.
        compliant_months: Months at or below threshold.
        total_months: Months evaluated.
        status_band: Classification of compliance_rate.
    """

    is_compliant: bool
    compliance_rate: float
    average_intensity: float
    max_intensity: float
    min_intensity: float
    min_blend_for_compliance: int
    threshold: float
    compliant_months: int
    total_months: int
    status_band: ComplianceBand


@dataclass(frozen=True)
class SimulationOutput:
    """Full output of one simulation call.

    Attributes:
        simulated_records: Freshly recomputed records in source order.
        compliance_result: Compliance status at the requested blend.
        blend_percent: Requested hydrogen blend.
        total_original_emissions: Sum of emissions before blending.
        total_emissions_savings: Sum of per-record reductions.
        reduction_percent: Savings as a percent of original emissions.
    """

    simulated_records: tuple[SimulatedRecord, ...]
    compliance_result: ComplianceResult
    blend_percent: int
    total_original_emissions: float
    total_emissions_savings: float
    reduction_percent: float


@dataclass(frozen=True)
class RegulatoryRegime:
    """A named threshold or completeness rule.

    Attributes:
        key: Stable identifier used in reports.
        name: Display name.
        description: One-line description.
        threshold: Intensity limit, or the required completeness percent.
        kind: Whether the regime checks intensity or data completeness.
    """

    key: str
    name: str
    description: str
    threshold: float
    kind: Literal["intensity", "completeness"]


@dataclass(frozen=True)
class RegimeAssessment:
    """Evaluation of one regulatory regime against a record set."""

    regime: RegulatoryRegime
    rate: float
    band: ComplianceBand
    status: RegimeStatus


@dataclass(frozen=True)
class AnnualSummary:
    """Aggregate metrics across a reporting period.

    Attributes:
        total_generation: Sum of generation.
        total_emissions: Sum of CO2 emissions in tonnes.
        average_intensity: Unweighted mean intensity.
        year_range: First and last year, e.g. "2020-2023".
        monthly_generation: Mean generation per month.
        monthly_emissions: Mean emissions per month.
        efficiency_ratio: Generation per tonne of CO2, 0 without emissions.
        data_points: Number of months.
    """

    total_generation: float
    total_emissions: float
    average_intensity: float
    year_range: str
    monthly_generation: float
    monthly_emissions: float
    efficiency_ratio: float
    data_points: int


@dataclass(frozen=True)
class Recommendation:
    """One actionable compliance recommendation."""

    priority: RecommendationPriority
    category: str
    action: str
    impact: str
    timeline: str


@dataclass(frozen=True)
class ComplianceReport:
    """Self-contained compliance report payload.

    Attributes:
        title: Report title.
        generated_date: ISO date the report was built.
        facility: Facility display name.
        source_name: Source file of the reported dataset.
        blend_percent: Hydrogen blend used for the simulation.
        summary: Aggregate metrics of the simulated records.
        compliance: Simulation compliance status.
        regimes: Assessments for each tracked regime.
        emissions_reduction: Tonnes saved against the original data.
        reduction_percent: Savings as a percent of original emissions.
        recommendations: Ordered recommendations.
    """

    title: str
    generated_date: str
    facility: str
    source_name: str
    blend_percent: int
    summary: AnnualSummary
    compliance: ComplianceResult
    regimes: tuple[RegimeAssessment, ...]
    emissions_reduction: float
    reduction_percent: float
    recommendations: tuple[Recommendation, ...]


class MonthlyIntensityRecord(Protocol):
    """Record shape shared by normalized and simulated months."""

    @property
    def month(self) -> str: ...

    @property
    def year(self) -> int: ...

    @property
    def generation_mw(self) -> float: ...

    @property
    def co2_emissions_tonnes(self) -> float: ...

    @property
    def carbon_intensity(self) -> float: ...
