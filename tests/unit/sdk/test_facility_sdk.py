"""Unit tests for the facility SDK client."""

from __future__ import annotations

from pathlib import Path

from core.config import H2BlendConfig
from ingest.demo_data import generate_demo_dataset
from sdk.facility_sdk import FacilityClient
from tests.fixture_paths import fixture_path


def _client(report_dir: Path, primary_threshold: float = 350.0) -> FacilityClient:
    return FacilityClient(
        H2BlendConfig(
            primary_threshold=primary_threshold,
            secondary_threshold=300.0,
            report_dir=report_dir,
            random_seed=11,
        )
    )


def test_demo_dataset_defaults_to_configured_seed(tmp_path: Path) -> None:
    """Demo data should use config.random_seed unless a seed is passed."""
    client = _client(tmp_path)

    assert (
        client.demo_dataset() == generate_demo_dataset(11)
        and client.demo_dataset(3) == generate_demo_dataset(3)
    )


def test_ingest_bytes_matches_ingest_file(tmp_path: Path) -> None:
    """Uploads and local files should normalize identically."""
    client = _client(tmp_path)
    source_path = fixture_path("exports/plant_comma.csv")

    from_bytes = client.ingest_bytes(source_path.read_bytes(), source_path.name)

    assert from_bytes == client.ingest_file(source_path)


def test_min_blend_uses_configured_threshold(tmp_path: Path) -> None:
    """The client's primary threshold should drive the search."""
    dataset = _client(tmp_path).ingest_file(fixture_path("exports/plant_semicolon.csv"))

    assert (
        _client(tmp_path).min_blend(dataset),
        _client(tmp_path, primary_threshold=400.0).min_blend(dataset),
        _client(tmp_path).min_blend(dataset, threshold=400.0),
    ) == (13, 0, 0)


def test_assess_uses_secondary_threshold_for_csrd(tmp_path: Path) -> None:
    """Assessment should evaluate CSRD at the secondary threshold."""
    client = _client(tmp_path)
    dataset = client.ingest_file(fixture_path("exports/plant_semicolon.csv"))

    assessments = client.assess(dataset.records)

    assert [assessment.regime.threshold for assessment in assessments] == [350.0, 300.0, 100.0]


def test_save_report_defaults_to_report_dir(tmp_path: Path) -> None:
    """Reports without an explicit path should land in the report dir."""
    client = _client(tmp_path)
    dataset = client.demo_dataset()

    report_path = client.save_report(client.report(dataset, 30))

    assert report_path == (tmp_path / "compliance_report.json").resolve() and report_path.exists()


def test_with_report_dir_returns_new_client(tmp_path: Path) -> None:
    """Overriding the report dir should not mutate the original client."""
    client = _client(tmp_path)

    updated = client.with_report_dir(str(tmp_path / "other"))

    assert (
        updated.config.report_dir == (tmp_path / "other").resolve()
        and client.config.report_dir == tmp_path
        and updated.config.primary_threshold == client.config.primary_threshold
    )


def test_run_spec_executes_yaml_file(tmp_path: Path) -> None:
    """SDK run_spec should share execution with the CLI."""
    spec_path = tmp_path / "scenario.yaml"
    spec_path.write_text(
        "version: 1\nsteps:\n  - command: demo\n  - command: min-blend\n",
        encoding="utf-8",
    )

    output_lines = _client(tmp_path).run_spec(str(spec_path))

    assert output_lines[0] == "source=demo_power_plant_data.csv"
    assert output_lines[-1].startswith("min_blend_for_compliance=")
