"""Unit tests for compliance report assembly and persistence."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from compliance.report import build_compliance_report, render_report_lines, save_compliance_report
from core.errors import H2BlendReportError
from core.types import ComplianceReport
from ingest.pipeline import ingest_file
from simulation.engine import simulate
from tests.fixture_paths import fixture_path


def _report(blend_percent: int) -> ComplianceReport:
    dataset = ingest_file(fixture_path("exports/plant_semicolon.csv"))
    output = simulate(dataset.records, blend_percent)
    return build_compliance_report(dataset, output, generated_on=date(2024, 1, 15))


def test_build_compliance_report_reuses_simulation_result() -> None:
    """Report header and compliance block should mirror the simulation."""
    report = _report(0)

    assert (
        report.title == "Power Plant Compliance Report - 2024-01-15"
        and report.source_name == "plant_semicolon.csv"
        and report.compliance.min_blend_for_compliance == 13
        and report.summary.data_points == 3
    )


def test_build_compliance_report_without_blend_recommends_regime_fixes() -> None:
    """Failing EU ETS and CSRD rates should produce ordered recommendations."""
    report = _report(0)

    assert [(item.priority, item.category) for item in report.recommendations] == [
        ("High", "EU ETS Compliance"),
        ("Medium", "CSRD Compliance"),
    ] and "13%" in report.recommendations[0].action


def test_build_compliance_report_with_blend_reports_hydrogen_impact() -> None:
    """A positive blend should add a hydrogen integration recommendation."""
    report = _report(13)

    assert [item.category for item in report.recommendations] == [
        "CSRD Compliance",
        "Hydrogen Integration",
    ] and report.emissions_reduction == pytest.approx(136.5)


def test_save_compliance_report_writes_json(tmp_path: Path) -> None:
    """Saved reports should be valid JSON with nested regime data."""
    report_path = save_compliance_report(_report(13), tmp_path / "reports" / "report.json")

    payload = json.loads(report_path.read_text(encoding="utf-8"))

    assert (
        payload["blend_percent"] == 13
        and payload["regimes"][0]["regime"]["key"] == "euets"
        and payload["compliance"]["is_compliant"] is True
    )


def test_save_compliance_report_raises_for_unwritable_path(tmp_path: Path) -> None:
    """Filesystem failures should surface as report errors."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(H2BlendReportError):
        save_compliance_report(_report(0), blocker / "report.json")


def test_render_report_lines_includes_regimes_and_recommendations() -> None:
    """Rendered report lines should list regime and recommendation rows."""
    lines = render_report_lines(_report(0))

    assert (
        "regime_euets=66.7% At Risk (Non-Compliant)" in lines
        and "regime_mrv=100.0% Fully Compliant (Compliant)" in lines
        and lines[-1].startswith("[Medium] CSRD Compliance:")
    )
