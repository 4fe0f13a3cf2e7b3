"""Step runner for validated run-spec scenarios.

The CLI and the SDK both execute scenarios through ``execute_run_spec``.
Steps run in file order against one scenario state; each ingest or demo step
replaces the dataset that later steps read.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Protocol

from core.errors import H2BlendRunSpecError
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.run_spec_fields import (
    int_with_default,
    optional_int,
    optional_positive_float,
    optional_string,
)
from core.types import ComplianceReport, Dataset, SimulationOutput
from simulation.engine import render_simulation_lines


class RunSpecClient(Protocol):
    """The FacilityClient surface a scenario needs."""

    def with_report_dir(self, report_dir: str) -> Any: ...

    def ingest_file(self, source_path: str | Path) -> Dataset: ...

    def demo_dataset(self, seed: int | None = None) -> Dataset: ...

    def simulate(
        self,
        dataset: Dataset,
        blend_percent: int,
        threshold: float | None = None,
    ) -> SimulationOutput: ...

    def min_blend(self, dataset: Dataset, threshold: float | None = None) -> int: ...

    def report(
        self,
        dataset: Dataset,
        blend_percent: int = 0,
        threshold: float | None = None,
    ) -> ComplianceReport: ...

    def save_report(
        self,
        report: ComplianceReport,
        output_path: str | Path | None = None,
    ) -> Path: ...


@dataclass
class ScenarioState:
    """Mutable state carried from one step to the next."""

    client: RunSpecClient
    default_source: str | None
    default_threshold: float | None
    dataset: Dataset | None = None


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Validate spec_file, then run it; nothing executes if validation fails."""
    return execute_run_spec(client, load_run_spec(spec_file))


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Run every step of spec and collect their printable output lines.

    Raises:
        H2BlendRunSpecError: If a step lacks a dataset or source.
        H2BlendError: Propagated from the underlying client operation.
    """
    if spec.defaults.report_dir:
        client = client.with_report_dir(spec.defaults.report_dir)
    state = ScenarioState(
        client=client,
        default_source=spec.defaults.source,
        default_threshold=spec.defaults.threshold,
    )
    lines: list[str] = []
    for step in spec.steps:
        lines.extend(_STEP_RUNNERS[step.command](state, step))
    return tuple(lines)


def _execute_ingest_step(state: ScenarioState, step: RunSpecStep) -> tuple[str, ...]:
    source = optional_string(step.args, "source") or state.default_source
    if source is None:
        raise H2BlendRunSpecError(
            "Run-spec ingest step requires 'source' or defaults.source to be set."
        )
    state.dataset = state.client.ingest_file(source)
    return _dataset_lines(state.dataset)


def _execute_demo_step(state: ScenarioState, step: RunSpecStep) -> tuple[str, ...]:
    state.dataset = state.client.demo_dataset(optional_int(step.args, "seed"))
    return _dataset_lines(state.dataset)


def _execute_simulate_step(state: ScenarioState, step: RunSpecStep) -> tuple[str, ...]:
    output = state.client.simulate(
        _require_dataset(state, step),
        int_with_default(step.args, "blend", 0),
        _resolve_threshold(state, step),
    )
    return render_simulation_lines(output)


def _execute_min_blend_step(state: ScenarioState, step: RunSpecStep) -> tuple[str, ...]:
    min_blend = state.client.min_blend(
        _require_dataset(state, step), _resolve_threshold(state, step)
    )
    return (f"min_blend_for_compliance={min_blend}",)


def _execute_report_step(state: ScenarioState, step: RunSpecStep) -> tuple[str, ...]:
    report = state.client.report(
        _require_dataset(state, step),
        int_with_default(step.args, "blend", 0),
        _resolve_threshold(state, step),
    )
    report_path = state.client.save_report(report, optional_string(step.args, "output"))
    return (f"report_path={report_path}",)


def _require_dataset(state: ScenarioState, step: RunSpecStep) -> Dataset:
    if state.dataset is None:
        raise H2BlendRunSpecError(
            f"Run-spec step '{step.command}' needs a dataset. "
            "Add an 'ingest' or 'demo' step before it."
        )
    return state.dataset


def _resolve_threshold(state: ScenarioState, step: RunSpecStep) -> float | None:
    step_threshold = optional_positive_float(step.args, "threshold")
    return step_threshold if step_threshold is not None else state.default_threshold


def _dataset_lines(dataset: Dataset) -> tuple[str, ...]:
    return (
        f"source={dataset.source_name}",
        f"rows={dataset.row_count}",
        f"strategy={dataset.parse_strategy}",
    )


_STEP_RUNNERS: dict[str, Callable[[ScenarioState, RunSpecStep], tuple[str, ...]]] = {
    "ingest": _execute_ingest_step,
    "demo": _execute_demo_step,
    "simulate": _execute_simulate_step,
    "min-blend": _execute_min_blend_step,
    "report": _execute_report_step,
}
