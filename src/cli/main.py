"""h2blend CLI entry points.
This module exposes commands for ingest, blend simulation, and reporting.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from compliance.report import render_report_lines
from core.constants import MAX_BLEND_PERCENT, MIN_BLEND_PERCENT
from core.errors import H2BlendError
from core.logging_config import stderr_logging
from ingest.dataset_export import write_dataset_csv
from sdk.facility_sdk import FacilityClient
from simulation.engine import render_simulation_lines


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="h2blend",
        description="Hydrogen blend compliance simulator",
    )
    parser.add_argument("--report-dir", help="Override H2BLEND_REPORT_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ingest_command(subparsers)
    _add_simulate_command(subparsers)
    _add_min_blend_command(subparsers)
    _add_report_command(subparsers)
    _add_demo_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the h2blend CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    with stderr_logging():
        try:
            client = _build_client(args.report_dir)
            return _dispatch(parser, client, args)
        except H2BlendError as error:
            print(f"error={error}", file=sys.stderr)
            return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: FacilityClient,
    args: argparse.Namespace,
) -> int:
    if args.command == "ingest":
        return _run_ingest_command(client, args)
    if args.command == "simulate":
        return _run_simulate_command(client, args)
    if args.command == "min-blend":
        return _run_min_blend_command(client, args)
    if args.command == "report":
        return _run_report_command(client, args)
    if args.command == "demo":
        return _run_demo_command(client, args)
    if args.command == "run-spec":
        return run_run_spec_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(report_dir: str | None) -> FacilityClient:
    """Build SDK client with optional report-dir override.

    Args:
        report_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    client = FacilityClient()
    if report_dir:
        return client.with_report_dir(report_dir)
    return client


def _run_ingest_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Handle ingest command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    dataset = client.ingest_file(args.source)
    print(f"source={dataset.source_name}")
    print(f"rows={dataset.row_count}")
    print(f"dropped_rows={dataset.dropped_row_count}")
    print(f"strategy={dataset.parse_strategy}")
    print(f"columns={','.join(dataset.columns)}")
    return 0


def _run_simulate_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Handle simulate command."""
    dataset = client.ingest_file(args.source)
    output = client.simulate(dataset, args.blend, args.threshold)
    for line in render_simulation_lines(output):
        print(line)
    return 0


def _run_min_blend_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Handle min-blend command."""
    dataset = client.ingest_file(args.source)
    print(client.min_blend(dataset, args.threshold))
    return 0


def _run_report_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Handle report command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    dataset = client.ingest_file(args.source)
    report = client.report(dataset, args.blend, args.threshold)
    report_path = client.save_report(report, args.output)
    for line in render_report_lines(report):
        print(line)
    print(f"report_path={report_path}")
    return 0


def _run_demo_command(client: FacilityClient, args: argparse.Namespace) -> int:
    """Handle demo command."""
    dataset = client.demo_dataset(args.seed)
    output_path = write_dataset_csv(dataset, Path(args.output))
    print(output_path)
    return 0


def _blend_percent(raw_value: str) -> int:
    """Parse a blend argument, rejecting values outside [0, 100]."""
    try:
        value = int(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"blend must be an integer, got '{raw_value}'") from error
    if not MIN_BLEND_PERCENT <= value <= MAX_BLEND_PERCENT:
        raise argparse.ArgumentTypeError(
            f"blend must be between {MIN_BLEND_PERCENT} and {MAX_BLEND_PERCENT}, got {value}"
        )
    return value


def _positive_threshold(raw_value: str) -> float:
    """Parse a threshold argument, rejecting non-positive or non-finite values."""
    try:
        value = float(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            f"threshold must be a number, got '{raw_value}'"
        ) from error
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"threshold must be a positive number, got {raw_value}")
    return value


def _add_threshold_argument(parser: Any) -> None:
    parser.add_argument(
        "--threshold",
        type=_positive_threshold,
        help="Carbon intensity limit in kgCO2/MWh (default: H2BLEND_PRIMARY_THRESHOLD)",
    )


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Validate and normalize a telemetry export")
    parser.add_argument("source", help="Source CSV/TSV/TXT file")


def _add_simulate_command(subparsers: Any) -> None:
    """Register simulate subcommand."""
    parser = subparsers.add_parser("simulate", help="Simulate a hydrogen blend")
    parser.add_argument("source", help="Source CSV/TSV/TXT file")
    parser.add_argument("--blend", type=_blend_percent, required=True, help="Blend percent 0-100")
    _add_threshold_argument(parser)


def _add_min_blend_command(subparsers: Any) -> None:
    """Register min-blend subcommand."""
    parser = subparsers.add_parser(
        "min-blend",
        help="Print the minimum hydrogen blend needed for compliance",
    )
    parser.add_argument("source", help="Source CSV/TSV/TXT file")
    _add_threshold_argument(parser)


def _add_report_command(subparsers: Any) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser("report", help="Write a JSON compliance report")
    parser.add_argument("source", help="Source CSV/TSV/TXT file")
    parser.add_argument("--blend", type=_blend_percent, default=0, help="Blend percent 0-100")
    parser.add_argument(
        "--output", help="Report path (default: <report-dir>/compliance_report.json)"
    )
    _add_threshold_argument(parser)


def _add_demo_command(subparsers: Any) -> None:
    """Register demo subcommand."""
    parser = subparsers.add_parser("demo", help="Write the 48-month demo dataset as CSV")
    parser.add_argument("--output", required=True, help="Destination CSV path")
    parser.add_argument("--seed", type=int, help="Random seed (default: H2BLEND_RANDOM_SEED)")
