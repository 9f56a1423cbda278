"""Shared helpers for REST endpoint modules.

This module centralizes the most repeated patterns:
- building table endpoints and row filters
- mapping structured error bodies to exceptions
- unwrapping single-row replies

It is internal to evconsole and may change at any time.
"""

from __future__ import annotations

from typing import Any, NoReturn

from evconsole.exceptions import EvConsoleApiError


def table_endpoint(table: str) -> str:
    return f"/{table}"


def eq_filter(value: str) -> str:
    """PostgREST equality operator for a query parameter."""
    return f"eq.{value}"


def raise_for_error_body(
    *,
    endpoint: str,
    status_code: int,
    body: dict[str, Any],
) -> NoReturn:
    code = str(body.get("code") or status_code)
    message = str(body.get("message") or body.get("msg") or body.get("error") or "unknown error")
    details = body.get("details")
    hint = body.get("hint")
    raise EvConsoleApiError(
        f"{endpoint} failed: code={code} message={message}",
        code=code,
        endpoint=endpoint,
        status_code=status_code,
        details=str(details) if details is not None else None,
        hint=str(hint) if hint is not None else None,
    )


def single_row(endpoint: str, decoded: Any) -> dict[str, Any]:
    """Return the one row of a ``.single()`` style reply.

    Some proxies ignore the single-object ``Accept`` header and return a
    one-element list instead, so both shapes are accepted.
    """
    if isinstance(decoded, list):
        if len(decoded) != 1:
            raise EvConsoleApiError(
                f"{endpoint} expected exactly one row, got {len(decoded)}",
                code="PGRST116",
                endpoint=endpoint,
            )
        decoded = decoded[0]
    if not isinstance(decoded, dict):
        raise EvConsoleApiError(
            f"{endpoint} returned an unexpected payload: {type(decoded).__name__}",
            code="invalid_payload",
            endpoint=endpoint,
        )
    return decoded
