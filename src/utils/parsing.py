"""Parsing helpers for form text and backend numbers."""

import math
import re
from typing import Any, Iterable, List, Mapping, Optional

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_DECIMAL_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"[+-]?Infinity")

INVALID_NUMBER = float("nan")


def parse_decimal(text: Any) -> float:
    """Parse form text into a float, or return the NaN marker.

    Leading whitespace is skipped and the longest numeric prefix is used, so
    ``"12.5kg"`` parses as ``12.5``. Text with no numeric prefix yields
    ``INVALID_NUMBER`` which is passed on unchanged.
    """
    if isinstance(text, bool):
        return INVALID_NUMBER
    if isinstance(text, (int, float)):
        return float(text)
    if not isinstance(text, str):
        return INVALID_NUMBER

    stripped = text.lstrip()
    match = _INFINITY_PREFIX.match(stripped)
    if match:
        return float(match.group(0).replace("Infinity", "inf"))
    match = _DECIMAL_PREFIX.match(stripped)
    if match is None:
        return INVALID_NUMBER
    return float(match.group(0))


def is_invalid_number(value: Any) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def to_wire_number(value: float) -> Optional[float]:
    """JSON has no NaN or Infinity; such values are sent as ``null``."""
    return None if is_invalid_number(value) else value


def as_number(value: Any) -> float:
    """Coerce a backend field to a number, treating absent or invalid values as zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    return value if math.isfinite(value) else 0.0


def missing_required(draft: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """Return the required fields of ``draft`` that are blank."""
    return [name for name in required if not str(draft.get(name) or "").strip()]
