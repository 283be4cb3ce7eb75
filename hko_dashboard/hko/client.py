"""Hong Kong Observatory open data client.

Wraps ``GET weather.php?dataType=..&lang=..`` with:

- **Parallel fetch pair**: ``fetch_all()`` issues the current-conditions
  (``rhrread``) and nine-day forecast (``fnd``) requests concurrently on a
  single ``httpx.AsyncClient``.
- **Typed failures**: timeouts, connection problems and bad responses are
  raised as ``HKOError`` subclasses so the API layer can map them to a
  single 502 response.
- **Latency tracking**: wall-clock time of the last ``fetch_all()``.

There is no retry or caching; the dashboard's reload button is the only
recovery path.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from hko_dashboard.core.constants import DATA_TYPE_CURRENT, DATA_TYPE_FORECAST, SUPPORTED_LANGS
from hko_dashboard.core.settings import get_settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Custom exceptions
# ---------------------------------------------------------------------------


class HKOError(RuntimeError):
    """Base class for failures talking to the HKO API."""


class HKOConnectionError(HKOError):
    """Raised when the HKO API is unreachable."""


class HKOTimeoutError(HKOError):
    """Raised when a request exceeds the configured timeout."""


class HKOResponseError(HKOError):
    """Raised on a non-2xx status or a body that is not a JSON object."""


# ---------------------------------------------------------------------------
# WeatherBundle
# ---------------------------------------------------------------------------


@dataclass
class WeatherBundle:
    """The two raw documents one dashboard refresh is built from."""

    current: dict[str, Any]
    forecast: dict[str, Any]


# ---------------------------------------------------------------------------
# HKOClient
# ---------------------------------------------------------------------------


class HKOClient:
    """Async client for the HKO ``weather.php`` endpoint.

    Parameters
    ----------
    base_url:
        Endpoint URL.  Defaults to ``settings.hko_base_url``.
    lang:
        ``"tc"`` or ``"en"``.  Defaults to ``settings.hko_lang``.
    timeout_s:
        Per-request timeout in seconds.  Defaults to
        ``settings.hko_timeout_s``.
    transport:
        Optional ``httpx`` transport, used by tests to avoid the network.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        lang: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url or settings.hko_base_url
        self.lang = lang or settings.hko_lang
        if self.lang not in SUPPORTED_LANGS:
            raise ValueError(f"Unsupported HKO language {self.lang!r}")
        self.timeout_s = timeout_s if timeout_s is not None else settings.hko_timeout_s
        self.transport = transport
        self._last_latency_ms: int | None = None

    # -- public API ---------------------------------------------------------

    async def fetch(self, data_type: str) -> dict[str, Any]:
        """Fetch and decode a single ``dataType`` document."""
        async with self._client() as client:
            return await self._get(client, data_type)

    async def fetch_all(self) -> WeatherBundle:
        """Fetch current conditions and the forecast concurrently.

        Raises
        ------
        HKOTimeoutError
            If either request times out.
        HKOConnectionError
            If the API is unreachable.
        HKOResponseError
            If either response is not a 2xx JSON object.
        """
        start = time.monotonic()
        try:
            async with self._client() as client:
                # A failing request cancels its sibling before the client closes
                async with asyncio.TaskGroup() as group:
                    current = group.create_task(self._get(client, DATA_TYPE_CURRENT))
                    forecast = group.create_task(self._get(client, DATA_TYPE_FORECAST))
        except ExceptionGroup as group_exc:
            first = group_exc.exceptions[0]
            if isinstance(first, HKOError):
                raise first
            raise
        finally:
            self._last_latency_ms = int((time.monotonic() - start) * 1000)

        logger.info("Fetched HKO data (lang=%s) in %d ms", self.lang, self._last_latency_ms)
        return WeatherBundle(current=current.result(), forecast=forecast.result())

    @property
    def last_latency_ms(self) -> int | None:
        """Wall-clock latency of the most recent ``fetch_all()`` call (ms)."""
        return self._last_latency_ms

    # -- internals ----------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport)

    async def _get(self, client: httpx.AsyncClient, data_type: str) -> dict[str, Any]:
        params = {"dataType": data_type, "lang": self.lang}
        try:
            response = await client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise HKOTimeoutError(
                f"HKO request for {data_type} timed out after {self.timeout_s}s"
            ) from exc
        except httpx.ConnectError as exc:
            raise HKOConnectionError(f"Cannot connect to HKO at {self.base_url}") from exc
        except httpx.HTTPStatusError as exc:
            raise HKOResponseError(
                f"HKO returned HTTP {exc.response.status_code} for {data_type}"
            ) from exc
        except httpx.HTTPError as exc:
            raise HKOConnectionError(f"HKO HTTP error: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise HKOResponseError(f"HKO returned invalid JSON for {data_type}") from exc

        if not isinstance(data, dict):
            raise HKOResponseError(
                f"HKO returned {type(data).__name__} for {data_type}, expected an object"
            )
        return data
