"""Write datasets back to semicolon-delimited text."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from core.constants import EXPECTED_COLUMNS
from core.errors import IngestionError
from core.types import Dataset


def render_dataset_csv(dataset: Dataset) -> str:
    """Render source columns of a dataset as semicolon-delimited text.

    The derived intensity column is omitted; ingest recomputes it.

    Args:
        dataset: Dataset to render.

    Returns:
        Header line plus one line per record.
    """
    output = io.StringIO(newline="")
    writer = csv.writer(output, delimiter=";", lineterminator="\n")
    writer.writerow(EXPECTED_COLUMNS)
    for record in dataset.records:
        writer.writerow(
            [
                record.month,
                record.year,
                _format_number(record.generation_mw),
                _format_number(record.gas_consumption_m3),
                _format_number(record.co2_emissions_tonnes),
            ]
        )
    return output.getvalue()


def write_dataset_csv(dataset: Dataset, output_path: Path) -> Path:
    """Write a dataset export to disk and return its resolved path."""
    resolved_path = output_path.expanduser().resolve()
    try:
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
        resolved_path.write_text(render_dataset_csv(dataset), encoding="utf-8")
    except OSError as error:
        raise IngestionError(
            f"Failed to write dataset export at {resolved_path}: {error}. "
            "Choose a writable output path."
        ) from error
    return resolved_path


def _format_number(value: float) -> str:
    """Format whole floats without a trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)
