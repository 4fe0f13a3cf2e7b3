"""Python SDK for facility compliance workflows.

This module exposes high-level APIs for ingest, blend simulation,
regime assessment, and report generation bound to one runtime config.
The client holds no dataset state; every call recomputes from its inputs.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Sequence

from compliance.regimes import assess_regimes, build_regimes
from compliance.report import build_compliance_report, save_compliance_report
from core.config import H2BlendConfig
from core.constants import REPORT_FILE_NAME
from core.run_spec_execution import execute_run_spec_file
from core.types import (
    ComplianceReport,
    Dataset,
    MonthlyIntensityRecord,
    RegimeAssessment,
    RegulatoryRegime,
    SimulationOutput,
)
from ingest.demo_data import generate_demo_dataset
from ingest.pipeline import ingest, ingest_file
from simulation.compliance_search import find_min_blend_for_compliance
from simulation.engine import simulate


class FacilityClient:
    """Primary SDK entry point for compliance what-if workflows."""

    def __init__(self, config: H2BlendConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or H2BlendConfig.from_env()

    @property
    def config(self) -> H2BlendConfig:
        """Runtime configuration bound to this client."""
        return self._config

    def ingest_file(self, source_path: str | Path) -> Dataset:
        """Ingest a local delimited export.

        Args:
            source_path: Path to a CSV/TSV/TXT export.

        Returns:
            Normalized dataset.

        Raises:
            IngestionError: If the file cannot be read or validated.
        """
        return ingest_file(source_path)

    def ingest_bytes(self, raw: bytes, filename: str) -> Dataset:
        """Ingest uploaded bytes.

        Args:
            raw: Complete file contents.
            filename: Uploaded file name.

        Returns:
            Normalized dataset.
        """
        return ingest(raw, filename)

    def demo_dataset(self, seed: int | None = None) -> Dataset:
        """Generate the demo dataset, seeded from config unless overridden."""
        return generate_demo_dataset(self._config.random_seed if seed is None else seed)

    def simulate(
        self,
        dataset: Dataset,
        blend_percent: int,
        threshold: float | None = None,
    ) -> SimulationOutput:
        """Simulate a hydrogen blend against the primary threshold.

        Args:
            dataset: Ingested dataset.
            blend_percent: Integer blend in [0, 100].
            threshold: Optional override of the configured primary threshold.

        Returns:
            Simulated records and compliance status.
        """
        return simulate(dataset.records, blend_percent, self._resolve_threshold(threshold))

    def min_blend(self, dataset: Dataset, threshold: float | None = None) -> int:
        """Return the smallest blend that makes the dataset compliant."""
        return find_min_blend_for_compliance(dataset.records, self._resolve_threshold(threshold))

    def assess(
        self,
        records: Sequence[MonthlyIntensityRecord],
        threshold: float | None = None,
    ) -> tuple[RegimeAssessment, ...]:
        """Evaluate every tracked regime against records."""
        return assess_regimes(records, self._regimes(threshold))

    def report(
        self,
        dataset: Dataset,
        blend_percent: int = 0,
        threshold: float | None = None,
    ) -> ComplianceReport:
        """Build a compliance report for one blend.

        Args:
            dataset: Ingested dataset.
            blend_percent: Integer blend in [0, 100].
            threshold: Optional override of the configured primary threshold.

        Returns:
            Report payload.
        """
        output = self.simulate(dataset, blend_percent, threshold)
        return build_compliance_report(dataset, output, self._regimes(threshold))

    def save_report(
        self,
        report: ComplianceReport,
        output_path: str | Path | None = None,
    ) -> Path:
        """Write a report as JSON, defaulting to the configured report dir.

        Returns:
            Resolved report path.
        """
        target = Path(output_path) if output_path else self._config.report_dir / REPORT_FILE_NAME
        return save_compliance_report(report, target)

    def with_report_dir(self, report_dir: str) -> "FacilityClient":
        """Clone the client with a different report directory.

        Args:
            report_dir: New report directory path.

        Returns:
            New SDK client instance.
        """
        resolved_dir = Path(report_dir).expanduser().resolve()
        return FacilityClient(replace(self._config, report_dir=resolved_dir))

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec file.

        Returns:
            Ordered command output lines.
        """
        return execute_run_spec_file(self, spec_file)

    def _resolve_threshold(self, threshold: float | None) -> float:
        return self._config.primary_threshold if threshold is None else threshold

    def _regimes(self, threshold: float | None) -> tuple[RegulatoryRegime, ...]:
        return build_regimes(self._resolve_threshold(threshold), self._config.secondary_threshold)
