"""Source file readers for ingestion.

This module checks upload file types, loads raw bytes from disk,
and decodes them into newline-normalized text for the parsers.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from charset_normalizer import from_bytes

from core.constants import SUPPORTED_TABULAR_EXTENSIONS
from core.errors import IngestionError, UnsupportedFileTypeError


def ensure_supported_file_type(filename: str) -> None:
    """Reject sources that are not tabular text exports.

    Args:
        filename: Uploaded file name.

    Raises:
        UnsupportedFileTypeError: If the extension is not recognized.
    """
    if Path(filename).suffix.lower() not in SUPPORTED_TABULAR_EXTENSIONS:
        supported = ", ".join(SUPPORTED_TABULAR_EXTENSIONS)
        raise UnsupportedFileTypeError(
            f"Unsupported file type for '{filename}'. "
            f"Upload a delimited text file with one of: {supported}."
        )


def read_source_bytes(source_path: Path) -> bytes:
    """Read a source file fully into memory.

    Args:
        source_path: Local file path.

    Returns:
        Raw file bytes.

    Raises:
        IngestionError: If the path is missing or unreadable.
    """
    if not source_path.is_file():
        raise IngestionError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing CSV export."
        )
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise IngestionError(
            f"Failed to read source at {source_path}: {error}. "
            "Check file permissions and retry."
        ) from error


def decode_source_text(raw: bytes) -> str:
    """Decode uploaded bytes into LF-terminated text.

    Encoding is detected best-effort with charset-normalizer. Undecodable
    input falls back to UTF-8 with replacement characters so parsing can
    still report column problems to the user.

    Args:
        raw: Raw file bytes.

    Returns:
        Decoded text without BOM and with CRLF/CR converted to LF.
    """
    if raw.startswith(codecs.BOM_UTF8):
        text = raw[len(codecs.BOM_UTF8):].decode("utf-8", errors="replace")
    else:
        text = _decode_detected(raw)
    text = text.lstrip("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _decode_detected(raw: bytes) -> str:
    """Decode bytes using the best charset-normalizer match."""
    match = from_bytes(raw).best()
    encoding = match.encoding if match is not None else "utf-8"
    try:
        return raw.decode(encoding)
    except (LookupError, UnicodeDecodeError):
        return raw.decode("utf-8", errors="replace")
