"""HTTP transport for the inventory REST endpoints."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Protocol

import aiohttp

from carinventory._redact import redact_body_for_log, redact_headers
from carinventory.config import InventoryConfig
from carinventory.exceptions import InventoryInvalidResponseError, InventoryTransportError

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class TransportResponse:
    """Status and body of a completed HTTP exchange.

    ``text`` is ``None`` when the server sent no body or a body that is
    not valid UTF-8.
    """

    status: int
    text: str | None = None


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(self, method: str, path: str, *, json_body: str | None = None) -> TransportResponse:
        ...


def _decode_body(raw: bytes) -> str | None:
    if not raw:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


class HttpTransport:
    """Issue one request per call against ``config.base_url``.

    No retries are attempted; every failure is raised to the caller as an
    :class:`InventoryTransportError` (or its invalid-response subclass).
    """

    def __init__(self, config: InventoryConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def url_for(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    async def request(self, method: str, path: str, *, json_body: str | None = None) -> TransportResponse:
        """Send *method* to *path* and return the raw status and body text.

        *json_body*, when given, must already be JSON-encoded.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if json_body is not None:
            headers["content-type"] = "application/json"

        url = self.url_for(path)
        _logger.debug("%s %s", method, url)
        if json_body is not None:
            _logger.debug("Request body: %s", redact_body_for_log(json_body))

        try:
            async with self._http.request(
                method,
                url,
                data=json_body,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                raw = await resp.read()
                status = resp.status
                _logger.debug("Response headers: %s", redact_headers(resp.headers))
        except (
            aiohttp.ClientResponseError,
            aiohttp.ClientPayloadError,
            aiohttp.ServerDisconnectedError,
        ) as exc:
            raise InventoryInvalidResponseError(
                f"Invalid HTTP response from {path}: {exc}",
                endpoint=path,
            ) from exc
        except aiohttp.ClientError as exc:
            raise InventoryTransportError(
                f"Request to {path} failed: {exc}",
                endpoint=path,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise InventoryTransportError(
                f"Request to {path} timed out after {self._config.request_timeout}s",
                endpoint=path,
            ) from exc

        text = _decode_body(raw)
        _logger.debug("%s %s -> %s %s", method, url, status, redact_body_for_log(text))
        return TransportResponse(status=status, text=text)
