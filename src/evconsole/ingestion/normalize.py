"""Normalization helpers.

Centralizes lenient parsing of user input. Form fields arrive as text and
are read like a browser number parser: the longest numeric prefix counts
(``"12abc"`` is ``12``), and text without one falls back to zero instead
of being rejected.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None or math.isinf(parsed):
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _leading(pattern: re.Pattern[str], value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    match = pattern.match(value.lstrip())
    return match.group() if match else None


def coerce_float(value: Any) -> float:
    """Parse the numeric prefix of *value* as a float, ``0.0`` when there is none."""
    if isinstance(value, str):
        value = _leading(_FLOAT_PREFIX, value)
    parsed = safe_float(value)
    if parsed is None or math.isinf(parsed):
        return 0.0
    return parsed


def coerce_int(value: Any) -> int:
    """Parse the integer prefix of *value*, ``0`` when there is none.

    Decimals and exponents are not part of the prefix: ``"22.7"`` is ``22``
    and ``"1e3"`` is ``1``.
    """
    if isinstance(value, str):
        value = _leading(_INT_PREFIX, value)
        return int(value) if value is not None else 0
    parsed = safe_int(value)
    return 0 if parsed is None else parsed
