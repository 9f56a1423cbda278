"""Client configuration for evconsole."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from evconsole._constants import DEFAULT_SCHEMA, DEFAULT_TABLE
from evconsole.exceptions import EvConsoleConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ConsoleConfig:
    """Backend connection configuration.

    Parameters
    ----------
    base_url : str
        Project URL of the backend, e.g. ``"https://xyz.supabase.co"``.
        A trailing slash is stripped.
    api_key : str
        Public (anon) API key sent as the ``apikey`` header.
    access_token : str or None
        Bearer token of the signed-in operator. When ``None`` the
        ``api_key`` is used as bearer token, which is what the backend
        expects for anonymous access.
    table : str
        Name of the stations table.
    schema : str
        Database schema exposed through the REST API.
    request_timeout : float
        Total timeout per HTTP request in seconds.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG level.
    """

    base_url: str
    api_key: str
    access_token: str | None = None
    table: str = DEFAULT_TABLE
    schema: str = DEFAULT_SCHEMA
    request_timeout: float = 30.0
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        url = (self.base_url or "").strip().rstrip("/")
        if not url:
            raise EvConsoleConfigError("base_url must be non-empty")
        if not url.startswith(("http://", "https://")):
            raise EvConsoleConfigError(f"base_url must be an http(s) URL, got {url!r}")
        if not (self.api_key or "").strip():
            raise EvConsoleConfigError("api_key must be non-empty")
        if not self.table.strip():
            raise EvConsoleConfigError("table must be non-empty")
        if self.request_timeout <= 0:
            raise EvConsoleConfigError("request_timeout must be positive")
        # Frozen dataclass: normalise in place via object.__setattr__.
        object.__setattr__(self, "base_url", url)

    @property
    def bearer_token(self) -> str:
        return self.access_token or self.api_key

    @classmethod
    def from_env(cls, **overrides: Any) -> ConsoleConfig:
        """Create configuration from environment variables.

        Reads ``EVCONSOLE_SUPABASE_URL`` and ``EVCONSOLE_SUPABASE_KEY``
        plus the optional ``EVCONSOLE_*`` variables below. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ConsoleConfig
            Populated configuration.

        Raises
        ------
        EvConsoleConfigError
            If the URL or key is missing or a numeric variable is malformed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "EVCONSOLE_SUPABASE_URL": "base_url",
            "EVCONSOLE_SUPABASE_KEY": "api_key",
            "EVCONSOLE_ACCESS_TOKEN": "access_token",
            "EVCONSOLE_TABLE": "table",
            "EVCONSOLE_SCHEMA": "schema",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("EVCONSOLE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise EvConsoleConfigError(f"EVCONSOLE_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("EVCONSOLE_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        for required in ("base_url", "api_key"):
            if not config_kwargs.get(required):
                raise EvConsoleConfigError(f"Missing required setting {required!r} (see EVCONSOLE_* variables)")

        return cls(**config_kwargs)
