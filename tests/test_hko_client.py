"""Tests for the HKO open data client.

Covers:
- fetch(): query parameters, JSON decoding
- fetch_all(): both documents, concurrency of the request pair, sibling
  cancellation on failure, latency
- error mapping: timeout, connection, HTTP status, invalid JSON, non-object body
- settings defaults and language validation

All network traffic goes through ``httpx.MockTransport``.
"""
from __future__ import annotations

import asyncio

import httpx
import pytest

from hko_dashboard.hko.client import (
    HKOClient,
    HKOConnectionError,
    HKOError,
    HKOResponseError,
    HKOTimeoutError,
    WeatherBundle,
)


@pytest.fixture(autouse=True)
def _settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HKO_BASE_URL", "https://hko.test/weather.php")
    monkeypatch.setenv("HKO_LANG", "tc")
    monkeypatch.setenv("HKO_TIMEOUT_S", "5")
    from hko_dashboard.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _raising(exc: Exception) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)


class TestHKOClientConfig:
    def test_defaults_from_settings(self) -> None:
        client = HKOClient()
        assert client.base_url == "https://hko.test/weather.php"
        assert client.lang == "tc"
        assert client.timeout_s == 5.0

    def test_explicit_arguments_win(self) -> None:
        client = HKOClient(base_url="https://other.test/", lang="en", timeout_s=1)
        assert client.base_url == "https://other.test/"
        assert client.lang == "en"
        assert client.timeout_s == 1

    def test_unsupported_lang_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported HKO language"):
            HKOClient(lang="fr")


class TestHKOClientFetch:
    def test_fetch_sends_data_type_and_lang(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"updateTime": "2025-08-03T11:30:00+08:00"})

        client = HKOClient(lang="en", transport=httpx.MockTransport(handler))
        data = asyncio.run(client.fetch("fnd"))

        assert data == {"updateTime": "2025-08-03T11:30:00+08:00"}
        assert seen[0].url.host == "hko.test"
        assert seen[0].url.params["dataType"] == "fnd"
        assert seen[0].url.params["lang"] == "en"

    def test_fetch_all_returns_both_documents(self, make_transport, current_doc, forecast_doc) -> None:
        client = HKOClient(transport=make_transport(current_doc, forecast_doc))
        bundle = asyncio.run(client.fetch_all())

        assert isinstance(bundle, WeatherBundle)
        assert bundle.current == current_doc
        assert bundle.forecast == forecast_doc
        assert client.last_latency_ms is not None

    def test_fetch_all_issues_requests_concurrently(self) -> None:
        in_flight = 0
        peak = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.05)
            in_flight -= 1
            return httpx.Response(200, json={"dataType": request.url.params["dataType"]})

        client = HKOClient(transport=httpx.MockTransport(handler))
        bundle = asyncio.run(client.fetch_all())

        assert peak == 2
        assert bundle.current == {"dataType": "rhrread"}
        assert bundle.forecast == {"dataType": "fnd"}


class TestHKOClientErrors:
    def test_timeout(self) -> None:
        client = HKOClient(transport=_raising(httpx.ReadTimeout("slow")))
        with pytest.raises(HKOTimeoutError, match="timed out"):
            asyncio.run(client.fetch_all())

    def test_connection_refused(self) -> None:
        client = HKOClient(transport=_raising(httpx.ConnectError("refused")))
        with pytest.raises(HKOConnectionError, match="Cannot connect"):
            asyncio.run(client.fetch_all())

    def test_other_transport_error(self) -> None:
        client = HKOClient(transport=_raising(httpx.RemoteProtocolError("bad frame")))
        with pytest.raises(HKOConnectionError, match="HKO HTTP error"):
            asyncio.run(client.fetch("rhrread"))

    def test_http_status(self, make_transport) -> None:
        client = HKOClient(transport=make_transport({}, {}, status_code=503))
        with pytest.raises(HKOResponseError, match="HTTP 503"):
            asyncio.run(client.fetch_all())

    def test_invalid_json(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        client = HKOClient(transport=transport)
        with pytest.raises(HKOResponseError, match="invalid JSON"):
            asyncio.run(client.fetch("fnd"))

    def test_non_object_body(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[1, 2]))
        client = HKOClient(transport=transport)
        with pytest.raises(HKOResponseError, match="expected an object"):
            asyncio.run(client.fetch("fnd"))

    def test_errors_share_base_class(self) -> None:
        client = HKOClient(transport=_raising(httpx.ConnectError("refused")))
        with pytest.raises(HKOError):
            asyncio.run(client.fetch_all())

    def test_failure_cancels_sibling_request(self) -> None:
        state = {"fnd_cancelled": False, "fnd_finished": False}

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["dataType"] == "rhrread":
                await asyncio.sleep(0.01)
                raise httpx.ConnectError("refused")
            try:
                await asyncio.sleep(0.2)
            except asyncio.CancelledError:
                state["fnd_cancelled"] = True
                raise
            state["fnd_finished"] = True
            return httpx.Response(200, json={})

        client = HKOClient(transport=httpx.MockTransport(handler))

        async def run() -> None:
            with pytest.raises(HKOConnectionError, match="Cannot connect"):
                await client.fetch_all()
            await asyncio.sleep(0.3)

        asyncio.run(run())
        assert state == {"fnd_cancelled": True, "fnd_finished": False}

    def test_error_keeps_transport_cause(self) -> None:
        client = HKOClient(transport=_raising(httpx.ReadTimeout("slow")))
        with pytest.raises(HKOTimeoutError) as exc_info:
            asyncio.run(client.fetch_all())
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    def test_latency_recorded_on_failure(self) -> None:
        client = HKOClient(transport=_raising(httpx.ConnectError("refused")))
        with pytest.raises(HKOConnectionError):
            asyncio.run(client.fetch_all())
        assert client.last_latency_ms is not None
