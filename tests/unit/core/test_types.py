"""Unit tests for shared dataclass types."""

from __future__ import annotations

import pytest

from core.types import Dataset


def test_dataset_requires_parse_strategy() -> None:
    """Datasets built in code must name the strategy that produced them."""
    with pytest.raises(TypeError, match="parse_strategy"):
        Dataset(records=(), columns=(), source_name="manual.csv")  # type: ignore[call-arg]


def test_dataset_row_count_counts_records() -> None:
    """An empty dataset reports zero rows and no dropped rows."""
    dataset = Dataset(records=(), columns=(), source_name="manual.csv", parse_strategy="manual")

    assert (dataset.row_count, dataset.dropped_row_count) == (0, 0)
