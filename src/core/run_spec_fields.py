"""Typed field readers shared by run-spec parsing and execution.

Every reader returns None for an absent or null field and raises
H2BlendRunSpecError naming the field when the YAML value has the wrong type.
"""

from __future__ import annotations

from typing import Collection, Mapping

from core.errors import H2BlendRunSpecError


def optional_string(fields: Mapping[str, object], name: str) -> str | None:
    """Read a string field; blank strings count as absent."""
    value = fields.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _type_error(name, "a string", value)
    return value.strip() or None


def optional_int(fields: Mapping[str, object], name: str) -> int | None:
    """Read an integer field; YAML booleans are rejected."""
    value = fields.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(name, "an integer", value)
    return value


def int_with_default(fields: Mapping[str, object], name: str, default_value: int) -> int:
    """Read an integer field, keeping an explicit zero."""
    value = optional_int(fields, name)
    return default_value if value is None else value


def optional_positive_float(fields: Mapping[str, object], name: str) -> float | None:
    """Read a numeric field that must be greater than zero."""
    value = fields.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(name, "a number", value)
    if value <= 0:
        raise H2BlendRunSpecError(f"Run-spec field '{name}' must be positive, got {value}.")
    return float(value)


def reject_unknown_fields(
    fields: Mapping[str, object],
    allowed: Collection[str],
    context: str,
) -> None:
    """Raise when fields holds keys outside allowed.

    Args:
        fields: Parsed YAML mapping.
        allowed: Accepted key names.
        context: Prefix naming the mapping in the error message.

    Raises:
        H2BlendRunSpecError: If any key is not allowed.
    """
    unknown = sorted(set(fields) - set(allowed))
    if unknown:
        raise H2BlendRunSpecError(
            f"{context} has unknown fields: {', '.join(unknown)}. Remove them and retry."
        )


def _type_error(name: str, expected: str, value: object) -> H2BlendRunSpecError:
    return H2BlendRunSpecError(
        f"Run-spec field '{name}' must be {expected}, got {type(value).__name__}."
    )
