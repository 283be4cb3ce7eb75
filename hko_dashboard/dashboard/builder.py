"""Dashboard view model.

``build_dashboard`` combines the ``rhrread`` and ``fnd`` documents into a
``Dashboard`` of plain dataclasses.  Every value read from the documents
goes through ``get_value`` or one of the date formatters, so a missing or
oddly shaped section shows up as ``None`` / ``"--"`` instead of an error.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import tzinfo
from typing import Any

from hko_dashboard.core.constants import HKO_STATION_NAMES, PLACEHOLDER
from hko_dashboard.core.labels import get_labels
from hko_dashboard.dashboard.icons import psr_icon, psr_text, weather_background, weather_icon
from hko_dashboard.normalization.date_formatter import format_day, format_timestamp
from hko_dashboard.normalization.recorder import NULL_RECORDER, Recorder
from hko_dashboard.normalization.value_normalizer import get_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# View model
# ---------------------------------------------------------------------------

@dataclass
class CurrentConditions:
    temperature: str | None = None
    description: str | None = None
    humidity: str | None = None
    uv_index: str | None = None
    rainfall: str | None = None
    record_time: str | None = None
    special_tip: str | None = None


@dataclass
class ForecastDay:
    date_label: str
    icon: str
    max_temp: str
    min_temp: str
    humidity: str
    psr: str | None = None
    psr_icon: str | None = None


@dataclass
class ChartPoint:
    """One forecast day on the trend chart; unknown readings are ``None``."""

    date: str
    max_temp: float | None
    min_temp: float | None
    max_humidity: float | None
    min_humidity: float | None


@dataclass
class Dashboard:
    lang: str
    background: str
    update_time: str | None = None
    current: CurrentConditions | None = None
    forecast_days: list[ForecastDay] = field(default_factory=list)
    chart_points: list[ChartPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    """Render a normalized value; blank strings become the placeholder."""
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _readings(section: Any) -> list[Any]:
    """``section["data"]`` when it is a non-empty list, else ``[]``."""
    if isinstance(section, Mapping):
        data = section.get("data")
        if isinstance(data, list):
            return data
    return []


def _first_of(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


# ---------------------------------------------------------------------------
# Current conditions
# ---------------------------------------------------------------------------

def _current_temperature(current: Mapping[str, Any], recorder: Recorder) -> str | None:
    section = current.get("temperature")
    if not isinstance(section, Mapping) or not isinstance(section.get("data"), list):
        return None
    readings = section["data"]
    for item in readings:
        if not isinstance(item, Mapping):
            continue
        place = get_value(item.get("place"), recorder=recorder)
        if isinstance(place, str) and place in HKO_STATION_NAMES:
            return f"{_text(get_value(item, 'value', recorder=recorder))}°"
    if readings:
        return f"{_text(get_value(readings[0], 'value', recorder=recorder))}°"
    return f"{PLACEHOLDER}°"


def _highest_rainfall(current: Mapping[str, Any], recorder: Recorder) -> str | None:
    readings = _readings(current.get("rainfall"))
    if not readings:
        return None

    wettest = readings[0]
    wettest_mm = _number(get_value(wettest, "max", recorder=recorder)) or 0.0
    for item in readings[1:]:
        mm = _number(get_value(item, "max", recorder=recorder)) or 0.0
        if mm > wettest_mm:
            wettest, wettest_mm = item, mm
    return f"{_text(get_value(wettest, 'max', recorder=recorder))}mm"


def _uv_index(current: Mapping[str, Any], recorder: Recorder) -> str | None:
    uv = current.get("uvindex")
    if not uv:
        return None
    # rhrread nests the reading under uvindex.data[]; older payloads send a scalar
    readings = _readings(uv)
    return _text(get_value(readings if readings else uv, recorder=recorder))


def build_current(
    current: Mapping[str, Any],
    forecast: Mapping[str, Any] | None,
    *,
    lang: str,
    tz: tzinfo | None,
    recorder: Recorder,
) -> CurrentConditions:
    labels = get_labels(lang)
    conditions = CurrentConditions(temperature=_current_temperature(current, recorder))

    warning = _first_of(current.get("warningMessage"))
    if warning is not None:
        conditions.description = _text(get_value(warning, recorder=recorder))
    elif forecast and forecast.get("generalSituation"):
        situation = get_value(forecast["generalSituation"], recorder=recorder)
        conditions.description = str(situation) if situation else labels["general_situation"]

    humidity = _readings(current.get("humidity"))
    if humidity:
        conditions.humidity = f"{_text(get_value(humidity[0], 'value', recorder=recorder))}%"

    conditions.uv_index = _uv_index(current, recorder)
    conditions.rainfall = _highest_rainfall(current, recorder)

    temperature = current.get("temperature")
    if isinstance(temperature, Mapping) and temperature.get("recordTime"):
        conditions.record_time = format_timestamp(
            temperature["recordTime"], lang=lang, tz=tz, recorder=recorder
        )

    tip = _first_of(current.get("specialWxTips"))
    if tip is not None:
        conditions.special_tip = _text(get_value(tip, recorder=recorder))

    return conditions


# ---------------------------------------------------------------------------
# Forecast
# ---------------------------------------------------------------------------

def build_forecast_day(day: Mapping[str, Any], *, lang: str, recorder: Recorder) -> ForecastDay:
    def value(key: str) -> str:
        return _text(get_value(day.get(key), recorder=recorder))

    forecast_day = ForecastDay(
        date_label=format_day(day.get("forecastDate"), day.get("week"), lang=lang, recorder=recorder),
        icon=weather_icon(get_value(day.get("ForecastIcon"), recorder=recorder)),
        max_temp=f"{value('forecastMaxtemp')}°",
        min_temp=f"{value('forecastMintemp')}°",
        humidity=f"{value('forecastMinrh')}-{value('forecastMaxrh')}%",
    )

    if day.get("PSR"):
        psr = get_value(day["PSR"], recorder=recorder)
        forecast_day.psr = psr_text(psr)
        forecast_day.psr_icon = psr_icon(psr)

    return forecast_day


def build_chart_point(day: Mapping[str, Any], *, recorder: Recorder) -> ChartPoint:
    def reading(key: str) -> float | None:
        return _number(get_value(day.get(key), recorder=recorder))

    date = get_value(day.get("forecastDate"), recorder=recorder)
    return ChartPoint(
        date="" if date == PLACEHOLDER else str(date),
        max_temp=reading("forecastMaxtemp"),
        min_temp=reading("forecastMintemp"),
        max_humidity=reading("forecastMaxrh"),
        min_humidity=reading("forecastMinrh"),
    )


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

def build_dashboard(
    current: Mapping[str, Any] | None,
    forecast: Mapping[str, Any] | None,
    *,
    lang: str = "tc",
    tz: tzinfo | None = None,
    recorder: Recorder | None = None,
) -> Dashboard:
    """Build the full dashboard view model from the two raw documents."""
    recorder = recorder or NULL_RECORDER
    dashboard = Dashboard(lang=lang, background=weather_background(current))

    if forecast and forecast.get("updateTime"):
        dashboard.update_time = format_timestamp(
            forecast["updateTime"], lang=lang, tz=tz, recorder=recorder
        )

    if current:
        dashboard.current = build_current(current, forecast, lang=lang, tz=tz, recorder=recorder)

    days = forecast.get("weatherForecast") if forecast else None
    if isinstance(days, list):
        for day in days:
            if not isinstance(day, Mapping):
                logger.debug("Skipping forecast entry of type %s", type(day).__name__)
                continue
            dashboard.forecast_days.append(build_forecast_day(day, lang=lang, recorder=recorder))
            dashboard.chart_points.append(build_chart_point(day, recorder=recorder))

    return dashboard
