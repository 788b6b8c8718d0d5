"""Scalar conversions that match how YAML and JSON spell values."""

from __future__ import annotations

import json
import math
from typing import Any, Optional


def is_absent(value: Any) -> bool:
    """Return True for values an info.yaml field counts as not filled in.

    Only ``null``, ``false``, zero and the empty string qualify; an empty
    mapping or list is still a value that was written down.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def normalise_number(value: Any) -> Any:
    """Collapse integral floats (``4.0``) to ints so they print as ``4``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def scalar_text(value: Any) -> Optional[str]:
    """Return the YAML spelling of a scalar, or ``None`` when the value is absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(normalise_number(value))


def display_text(value: Any) -> str:
    """Like :func:`scalar_text` but spells an absent value as ``null``."""
    text = scalar_text(value)
    return "null" if text is None else text


def json_literal(value: Any) -> str:
    """Serialise a value as a JSON literal.

    Python ints are arbitrary precision, so large identifiers keep every digit.
    Non-ASCII text is kept as-is rather than escaped, YAML-only types such as
    timestamps are quoted as text, and NaN or infinities become ``null``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        value = None
    return json.dumps(normalise_number(value), ensure_ascii=False, default=str)


__all__ = ["display_text", "is_absent", "json_literal", "normalise_number", "scalar_text"]
