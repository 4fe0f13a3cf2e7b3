"""Shared fixture helpers for tests."""

from __future__ import annotations

from pathlib import Path

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    return FIXTURES_ROOT / relative_path


def fixture_bytes(relative_path: str) -> bytes:
    """Read a fixture file as raw upload bytes."""
    return fixture_path(relative_path).read_bytes()
