"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_H2BLEND_ENV_VARS = (
    "H2BLEND_PRIMARY_THRESHOLD",
    "H2BLEND_SECONDARY_THRESHOLD",
    "H2BLEND_REPORT_DIR",
    "H2BLEND_RANDOM_SEED",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolate_h2blend_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test with default thresholds and a throwaway report dir."""
    for variable_name in _H2BLEND_ENV_VARS:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.setenv("H2BLEND_REPORT_DIR", str(tmp_path / "default-reports"))
