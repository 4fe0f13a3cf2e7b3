"""Public SDK surface for h2blend.

This module provides a stable import path for library users.
It re-exports the client, entry points, and typed result models.
"""

from __future__ import annotations

from compliance.classification import classify_compliance_rate
from compliance.regimes import assess_regimes, build_regimes
from core.config import H2BlendConfig
from core.errors import (
    EmptyOrInvalidFileError,
    H2BlendError,
    IngestionError,
    MissingColumnsError,
    SimulationError,
    UnsupportedFileTypeError,
)
from core.types import (
    ComplianceReport,
    ComplianceResult,
    Dataset,
    NormalizedRecord,
    SimulatedRecord,
    SimulationOutput,
)
from ingest.pipeline import ingest, ingest_file
from sdk.facility_sdk import FacilityClient
from simulation.compliance_search import find_min_blend_for_compliance
from simulation.engine import simulate

__all__ = [
    "ComplianceReport",
    "ComplianceResult",
    "Dataset",
    "EmptyOrInvalidFileError",
    "FacilityClient",
    "H2BlendConfig",
    "H2BlendError",
    "IngestionError",
    "MissingColumnsError",
    "NormalizedRecord",
    "SimulatedRecord",
    "SimulationError",
    "SimulationOutput",
    "UnsupportedFileTypeError",
    "assess_regimes",
    "build_regimes",
    "classify_compliance_rate",
    "find_min_blend_for_compliance",
    "ingest",
    "ingest_file",
    "simulate",
]
