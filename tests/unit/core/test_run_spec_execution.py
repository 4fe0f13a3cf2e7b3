"""Unit tests for shared run-spec execution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.config import H2BlendConfig
from core.errors import H2BlendRunSpecError
from core.run_spec import RunSpec, RunSpecDefaults, RunSpecStep
from core.run_spec_execution import execute_run_spec
from sdk.facility_sdk import FacilityClient
from tests.fixture_paths import fixture_path


def _client(report_dir: Path) -> FacilityClient:
    return FacilityClient(
        H2BlendConfig(
            primary_threshold=350.0,
            secondary_threshold=300.0,
            report_dir=report_dir,
            random_seed=42,
        )
    )


def _spec(*steps: RunSpecStep, **defaults: object) -> RunSpec:
    return RunSpec(version=1, defaults=RunSpecDefaults(**defaults), steps=steps)


def test_execute_run_spec_runs_scenario_in_order(tmp_path: Path) -> None:
    """Steps should share the ingested dataset and emit ordered lines."""
    spec = _spec(
        RunSpecStep(command="ingest", args={}),
        RunSpecStep(command="simulate", args={"blend": 13}),
        RunSpecStep(command="min-blend", args={}),
        source=str(fixture_path("exports/plant_semicolon.csv")),
    )

    output_lines = execute_run_spec(_client(tmp_path), spec)

    assert (
        output_lines[:3] == ("source=plant_semicolon.csv", "rows=3", "strategy=semicolon")
        and "is_compliant=true" in output_lines
        and output_lines[-1] == "min_blend_for_compliance=13"
    )


def test_execute_run_spec_step_threshold_overrides_default(tmp_path: Path) -> None:
    """A step threshold should take precedence over defaults.threshold."""
    spec = _spec(
        RunSpecStep(command="ingest", args={}),
        RunSpecStep(command="min-blend", args={"threshold": 400}),
        source=str(fixture_path("exports/plant_semicolon.csv")),
        threshold=300.0,
    )

    output_lines = execute_run_spec(_client(tmp_path), spec)

    assert output_lines[-1] == "min_blend_for_compliance=0"


def test_execute_run_spec_report_uses_defaults_report_dir(tmp_path: Path) -> None:
    """Report steps should write into defaults.report_dir when set."""
    report_dir = tmp_path / "scenario-reports"
    spec = _spec(
        RunSpecStep(command="demo", args={"seed": 7}),
        RunSpecStep(command="report", args={"blend": 50}),
        report_dir=str(report_dir),
    )

    output_lines = execute_run_spec(_client(tmp_path), spec)
    report_path = report_dir / "compliance_report.json"
    payload = json.loads(report_path.read_text(encoding="utf-8"))

    assert output_lines[-1] == f"report_path={report_path.resolve()}"
    assert payload["blend_percent"] == 50


def test_execute_run_spec_requires_dataset_before_simulate(tmp_path: Path) -> None:
    """Dataset-dependent steps should fail without a prior ingest or demo step."""
    spec = _spec(RunSpecStep(command="simulate", args={"blend": 10}))

    with pytest.raises(H2BlendRunSpecError, match="needs a dataset"):
        execute_run_spec(_client(tmp_path), spec)


def test_execute_run_spec_ingest_requires_source(tmp_path: Path) -> None:
    """Ingest without source or defaults.source should fail."""
    spec = _spec(RunSpecStep(command="ingest", args={}))

    with pytest.raises(H2BlendRunSpecError, match="source"):
        execute_run_spec(_client(tmp_path), spec)


def test_execute_run_spec_rejects_non_positive_step_threshold(tmp_path: Path) -> None:
    """Step thresholds must be positive."""
    spec = _spec(
        RunSpecStep(command="demo", args={}),
        RunSpecStep(command="min-blend", args={"threshold": -5}),
    )

    with pytest.raises(H2BlendRunSpecError, match="positive"):
        execute_run_spec(_client(tmp_path), spec)


def test_execute_run_spec_rejects_non_integer_blend(tmp_path: Path) -> None:
    """Blend values in steps must be integers."""
    spec = _spec(
        RunSpecStep(command="demo", args={}),
        RunSpecStep(command="simulate", args={"blend": 12.5}),
    )

    with pytest.raises(H2BlendRunSpecError, match="blend"):
        execute_run_spec(_client(tmp_path), spec)
