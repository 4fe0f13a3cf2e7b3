"""Runtime configuration model for h2blend.

Environment variables are read and validated here only. Every other module
receives an ``H2BlendConfig`` and never touches ``os.environ``.

Variables:
    H2BLEND_PRIMARY_THRESHOLD: EU ETS limit in kgCO2/MWh (default 350).
    H2BLEND_SECONDARY_THRESHOLD: CSRD limit in kgCO2/MWh (default 300).
    H2BLEND_REPORT_DIR: Directory for saved compliance reports.
    H2BLEND_RANDOM_SEED: Seed for the demo dataset generator (default 42).
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path
from typing import Callable, TypeVar

from core.constants import (
    DEFAULT_PRIMARY_THRESHOLD,
    DEFAULT_RANDOM_SEED,
    DEFAULT_REPORT_DIR,
    DEFAULT_SECONDARY_THRESHOLD,
)
from core.errors import H2BlendConfigError

_ValueT = TypeVar("_ValueT")


@dataclass(frozen=True)
class H2BlendConfig:
    """Validated runtime configuration.

    Attributes:
        primary_threshold: EU ETS carbon intensity limit in kgCO2/MWh.
        secondary_threshold: Stricter CSRD carbon intensity limit in kgCO2/MWh.
        report_dir: Local directory for compliance report documents.
        random_seed: Seed used for deterministic demo data.
    """

    primary_threshold: float
    secondary_threshold: float
    report_dir: Path
    random_seed: int

    @classmethod
    def from_env(cls) -> "H2BlendConfig":
        """Build config from process environment variables.

        Raises:
            H2BlendConfigError: If any variable holds an invalid value.
        """
        report_dir = os.getenv("H2BLEND_REPORT_DIR") or str(DEFAULT_REPORT_DIR)
        return cls(
            primary_threshold=_read_env(
                "H2BLEND_PRIMARY_THRESHOLD", DEFAULT_PRIMARY_THRESHOLD, _positive_float
            ),
            secondary_threshold=_read_env(
                "H2BLEND_SECONDARY_THRESHOLD", DEFAULT_SECONDARY_THRESHOLD, _positive_float
            ),
            report_dir=Path(report_dir).expanduser().resolve(),
            random_seed=_read_env("H2BLEND_RANDOM_SEED", DEFAULT_RANDOM_SEED, int),
        )


def _read_env(
    variable_name: str,
    default_value: _ValueT,
    parse: Callable[[str], _ValueT],
) -> _ValueT:
    """Parse one variable, falling back to default_value when unset or blank."""
    raw_value = os.getenv(variable_name, "").strip()
    if not raw_value:
        return default_value
    try:
        return parse(raw_value)
    except ValueError as error:
        expected = "a positive kgCO2/MWh value" if parse is _positive_float else "an integer"
        raise H2BlendConfigError(
            f"Invalid {variable_name} value '{raw_value}'. Set {variable_name} to {expected}."
        ) from error


def _positive_float(raw_value: str) -> float:
    value = float(raw_value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"not a positive finite number: {raw_value}")
    return value
