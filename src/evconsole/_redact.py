"""Trace formatting for request/response debug logs.

Every request carries the project key in ``apikey`` and the operator's
JWT in ``Authorization``. Both are masked before a trace is logged; the
station rows themselves hold nothing secret and are logged as-is, cut to
a readable length.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_CREDENTIAL_HEADERS: frozenset[str] = frozenset({"apikey", "authorization"})
_MASK = "<redacted>"


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit]}…<truncated>"


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Copy of a trace value with credential headers masked and long text clipped.

    Handles what the transport actually traces: header mappings, JSON
    payloads (dicts, lists, scalars) and raw response text.
    """
    if isinstance(value, str):
        return _clip(value, max_string)
    if isinstance(value, Mapping):
        return {
            str(key): _MASK if str(key).lower() in _CREDENTIAL_HEADERS else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string) for item in value]
    return value
