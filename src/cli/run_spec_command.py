"""The run-spec subcommand: execute or validate a YAML blend scenario."""

from __future__ import annotations

import argparse
from typing import Any

from core.run_spec import load_run_spec
from core.run_spec_execution import execute_run_spec_file
from sdk.facility_sdk import FacilityClient


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run a declarative YAML blend scenario",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the scenario and list its steps without running them",
    )


def run_run_spec_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Run every scenario step, or only validate it with --check."""
    if args.check:
        spec = load_run_spec(args.spec_file)
        lines: tuple[str, ...] = (
            f"steps={len(spec.steps)}",
            "commands=" + ",".join(step.command for step in spec.steps),
        )
    else:
        lines = execute_run_spec_file(client, args.spec_file)
    print("\n".join(lines))
    return 0
