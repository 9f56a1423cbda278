"""Custom exception hierarchy for evconsole."""

from __future__ import annotations


class EvConsoleError(Exception):
    """Base exception for all evconsole errors."""


class EvConsoleConfigError(EvConsoleError):
    """Invalid or missing configuration."""


class EvConsoleTransportError(EvConsoleError):
    """HTTP-level failure (network, unexpected status, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class EvConsoleApiError(EvConsoleError):
    """The backend rejected a request with a structured error body.

    PostgREST replies with ``{"code", "message", "details", "hint"}``;
    those fields are kept on the exception for callers that want to
    distinguish e.g. constraint violations (``23505``) from missing
    rows (``PGRST116``).
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
        status_code: int | None = None,
        details: str | None = None,
        hint: str | None = None,
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        self.status_code = status_code
        self.details = details
        self.hint = hint
        super().__init__(message)


class FetchError(EvConsoleError):
    """Retrieving the station collection failed.

    The underlying transport or API error is available as ``__cause__``.
    """


class MutationError(EvConsoleError):
    """A create, update or delete of a station failed."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        station_id: str | None = None,
    ) -> None:
        self.operation = operation
        self.station_id = station_id
        super().__init__(message)


class FormBusyError(EvConsoleError):
    """A form submission was attempted while another one is still pending."""
