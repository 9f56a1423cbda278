"""HTTP transport for the backend's REST interface."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from evconsole._api._common import raise_for_error_body
from evconsole._constants import REST_PATH, USER_AGENT
from evconsole._redact import redact_for_log
from evconsole.config import ConsoleConfig
from evconsole.exceptions import EvConsoleTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`RestTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        ...


class RestTransport:
    """HTTP transport that adds the backend auth headers and decodes JSON replies."""

    def __init__(
        self,
        config: ConsoleConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _base_headers(self) -> dict[str, str]:
        return {
            "apikey": self._config.api_key,
            "authorization": f"Bearer {self._config.bearer_token}",
            "accept": "application/json",
            "content-type": "application/json",
            "accept-profile": self._config.schema,
            "content-profile": self._config.schema,
            "user-agent": USER_AGENT,
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request to ``{base_url}/rest/v1{endpoint}``.

        Returns the decoded JSON body, or ``None`` for empty replies
        (``204 No Content`` after a delete). Non-2xx replies carrying a
        structured error body raise :class:`EvConsoleApiError`; any other
        failure raises :class:`EvConsoleTransportError`.
        """
        request_headers = self._base_headers()
        if headers:
            request_headers.update(headers)

        url = f"{self._config.base_url}{REST_PATH}{endpoint}"
        body = json.dumps(payload, separators=(",", ":")) if payload is not None else None

        _logger.debug("%s %s params=%s", method, url, dict(params or {}))
        if self._config.api_trace_enabled:
            _logger.debug(
                "request trace: %s",
                redact_for_log({"headers": request_headers, "payload": payload}),
            )

        try:
            async with self._http.request(
                method,
                url,
                params=dict(params or {}),
                data=body,
                headers=request_headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise EvConsoleTransportError(
                f"{method} {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except TimeoutError as exc:
            raise EvConsoleTransportError(
                f"{method} {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("response trace: status=%s body=%s", status, redact_for_log(text, max_string=256))

        decoded: Any = None
        if text.strip():
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError as exc:
                if 200 <= status < 300:
                    raise EvConsoleTransportError(
                        f"Invalid JSON from {endpoint}: {text[:200]}",
                        status_code=status,
                        endpoint=endpoint,
                    ) from exc
                decoded = None

        if 200 <= status < 300:
            return decoded

        if isinstance(decoded, dict):
            raise_for_error_body(endpoint=endpoint, status_code=status, body=decoded)
        raise EvConsoleTransportError(
            f"HTTP {status} from {endpoint}: {text[:200]}",
            status_code=status,
            endpoint=endpoint,
        )
