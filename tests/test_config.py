from __future__ import annotations

import pytest

from evconsole.config import ConsoleConfig
from evconsole.exceptions import EvConsoleConfigError


def test_from_env_reads_variables_and_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVCONSOLE_SUPABASE_URL", "https://project.example.co/")
    monkeypatch.setenv("EVCONSOLE_SUPABASE_KEY", "anon-key")
    monkeypatch.setenv("EVCONSOLE_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("EVCONSOLE_API_TRACE_ENABLED", "yes")

    config = ConsoleConfig.from_env(table="stations_staging")

    assert config.base_url == "https://project.example.co"
    assert config.api_key == "anon-key"
    assert config.request_timeout == 12.5
    assert config.api_trace_enabled is True
    assert config.table == "stations_staging"
    assert config.bearer_token == "anon-key"


def test_access_token_is_preferred_bearer() -> None:
    config = ConsoleConfig(base_url="https://x.example.co", api_key="anon", access_token="jwt")
    assert config.bearer_token == "jwt"


def test_from_env_missing_url_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EVCONSOLE_SUPABASE_URL", raising=False)
    monkeypatch.setenv("EVCONSOLE_SUPABASE_KEY", "anon-key")

    with pytest.raises(EvConsoleConfigError):
        ConsoleConfig.from_env()


def test_malformed_timeout_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVCONSOLE_REQUEST_TIMEOUT", "soon")
    with pytest.raises(EvConsoleConfigError):
        ConsoleConfig.from_env(base_url="https://x.example.co", api_key="k")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": "", "api_key": "k"},
        {"base_url": "ftp://x.example.co", "api_key": "k"},
        {"base_url": "https://x.example.co", "api_key": " "},
        {"base_url": "https://x.example.co", "api_key": "k", "request_timeout": 0},
    ],
)
def test_invalid_config_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(EvConsoleConfigError):
        ConsoleConfig(**kwargs)  # type: ignore[arg-type]
