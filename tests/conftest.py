import copy
import os

import httpx
import pytest
from fastapi.testclient import TestClient

CURRENT_DOC = {
    "rainfall": {
        "data": [
            {"unit": "mm", "place": "中西區", "max": 0, "main": "FALSE"},
            {"unit": "mm", "place": "東區", "max": 12, "main": "FALSE"},
            {"unit": "mm", "place": "葵青", "max": 5, "main": "FALSE"},
        ],
        "startTime": "2025-08-03T09:45:00+08:00",
        "endTime": "2025-08-03T10:45:00+08:00",
    },
    "icon": [62],
    "iconUpdateTime": "2025-08-03T10:00:00+08:00",
    "uvindex": {
        "data": [{"place": "京士柏", "value": 3, "desc": "中"}],
        "recordDesc": "過去一小時",
    },
    "updateTime": "2025-08-03T10:02:00+08:00",
    "warningMessage": "",
    "temperature": {
        "data": [
            {"place": "京士柏", "value": 29, "unit": "C"},
            {"place": "香港天文台", "value": 30, "unit": "C"},
        ],
        "recordTime": "2025-08-03T10:00:00+08:00",
    },
    "humidity": {
        "recordTime": "2025-08-03T10:00:00+08:00",
        "data": [{"unit": "percent", "value": 78, "place": "香港天文台"}],
    },
}

FORECAST_DOC = {
    "generalSituation": "一道低壓槽為華南沿岸帶來驟雨。",
    "weatherForecast": [
        {
            "forecastDate": "20250803",
            "week": "星期日",
            "forecastWeather": "有驟雨及幾陣狂風雷暴。",
            "forecastMaxtemp": {"value": 32, "unit": "C"},
            "forecastMintemp": {"value": 27, "unit": "C"},
            "forecastMaxrh": {"value": 95, "unit": "percent"},
            "forecastMinrh": {"value": 70, "unit": "percent"},
            "ForecastIcon": 62,
            "PSR": "中高",
        },
        {
            "forecastDate": "20250804",
            "week": "星期一",
            "forecastWeather": "大致多雲。",
            "forecastMaxtemp": {"value": 33, "unit": "C"},
            "forecastMintemp": {"value": 28, "unit": "C"},
            "forecastMaxrh": {"value": 90, "unit": "percent"},
            "forecastMinrh": {"value": 65, "unit": "percent"},
            "ForecastIcon": 51,
            "PSR": "低",
        },
    ],
    "updateTime": "2025-08-03T11:30:00+08:00",
}


@pytest.fixture
def current_doc() -> dict:
    return copy.deepcopy(CURRENT_DOC)


@pytest.fixture
def forecast_doc() -> dict:
    return copy.deepcopy(FORECAST_DOC)


def hko_transport(current: dict, forecast: dict, *, status_code: int = 200) -> httpx.MockTransport:
    """MockTransport answering ``rhrread`` with *current* and ``fnd`` with *forecast*."""

    def handler(request: httpx.Request) -> httpx.Response:
        data_type = request.url.params.get("dataType")
        body = current if data_type == "rhrread" else forecast
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, current_doc: dict, forecast_doc: dict) -> TestClient:
    monkeypatch.setenv("HKO_LANG", "tc")

    from hko_dashboard.core.settings import get_settings

    get_settings.cache_clear()

    from hko_dashboard.api.deps import get_hko_client
    from hko_dashboard.hko.client import HKOClient
    from hko_dashboard.main import app

    app.dependency_overrides[get_hko_client] = lambda: HKOClient(
        transport=hko_transport(current_doc, forecast_doc)
    )

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
    os.environ.pop("HKO_LANG", None)


@pytest.fixture
def make_transport():
    """Factory fixture exposing ``hko_transport`` to test modules."""
    return hko_transport
