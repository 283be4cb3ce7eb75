"""Lookup tables: HKO icon codes, PSR categories and page background.

Icon classes are Bootstrap Icons names.  PSR ("Probability of Significant
Rainfall") arrives as English (``Medium High``) or Chinese (``中高``)
depending on the request language; both map to the same display text.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hko_dashboard.normalization.value_normalizer import get_value

# ---------------------------------------------------------------------------
# Weather icons
# ---------------------------------------------------------------------------

DEFAULT_WEATHER_ICON = "bi-cloud"

WEATHER_ICONS: dict[int, str] = {
    50: "bi-sun",  # sunny
    51: "bi-sun",  # sunny periods
    52: "bi-cloud-sun",  # sunny intervals
    53: "bi-cloud-sun",  # sunny periods with a few showers
    54: "bi-clouds",  # sunny intervals with showers
    60: "bi-clouds",  # cloudy
    61: "bi-cloud-drizzle",  # overcast
    62: "bi-cloud-rain",  # light rain
    63: "bi-cloud-rain-heavy",  # rain
    64: "bi-cloud-rain-heavy",  # heavy rain
    65: "bi-cloud-lightning-rain",  # thunderstorms
    70: "bi-snow",
    71: "bi-snow",
    72: "bi-snow",
    73: "bi-snow",
    74: "bi-snow",
    75: "bi-snow",
    76: "bi-cloud-hail",
    77: "bi-cloud-hail",
    80: "bi-wind",  # windy
    81: "bi-wind",  # dry
    82: "bi-wind",  # humid
    83: "bi-wind",  # fog
    84: "bi-wind",  # mist
    85: "bi-wind",  # haze
    90: "bi-thermometer-high",
    91: "bi-thermometer-low",
    92: "bi-thermometer-high",
    93: "bi-moisture",
}


def _as_icon_code(code: Any) -> int | None:
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str) and code.strip().isdigit():
        return int(code)
    return None


def weather_icon(code: Any) -> str:
    """Return the Bootstrap icon class for an HKO icon code."""
    return WEATHER_ICONS.get(_as_icon_code(code), DEFAULT_WEATHER_ICON)


# ---------------------------------------------------------------------------
# PSR
# ---------------------------------------------------------------------------

_PSR_ICONS: dict[str, str] = {
    "High": "bi-umbrella-fill text-danger",
    "高": "bi-umbrella-fill text-danger",
    "Medium High": "bi-umbrella-fill text-warning",
    "中高": "bi-umbrella-fill text-warning",
    "Medium": "bi-umbrella text-info",
    "中": "bi-umbrella text-info",
    "Medium Low": "bi-umbrella text-secondary",
    "中低": "bi-umbrella text-secondary",
}
_PSR_DEFAULT_ICON = "bi-umbrella text-success"

PSR_TEXT: dict[str, str] = {
    "High": "高 (≥70%)",
    "Medium High": "中高 (55-69%)",
    "Medium": "中 (45-54%)",
    "Medium Low": "中低 (30-44%)",
    "Low": "低 (<30%)",
    "高": "高 (≥70%)",
    "中高": "中高 (55-69%)",
    "中": "中 (45-54%)",
    "中低": "中低 (30-44%)",
    "低": "低 (<30%)",
}


def psr_icon(psr: Any) -> str:
    """Umbrella icon plus colour class; ``Low`` and unknown values share one."""
    return _PSR_ICONS.get(psr, _PSR_DEFAULT_ICON) if isinstance(psr, str) else _PSR_DEFAULT_ICON


def psr_text(psr: Any) -> str:
    if isinstance(psr, str) and psr in PSR_TEXT:
        return PSR_TEXT[psr]
    return f"{psr} (降雨概率)"


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------

_BACKGROUND_BY_ICON: tuple[tuple[frozenset[int], str], ...] = (
    (frozenset({50, 51, 52}), "sunny"),
    (frozenset({53, 54, 60}), "cloudy"),
    (frozenset({61, 62, 63, 64}), "rainy"),
    (frozenset({65}), "stormy"),
    (frozenset({70, 71, 72, 73, 74, 75, 76, 77}), "snowy"),
)

_STORM_WORDS = ("雷暴", "暴雨", "thunderstorm", "rainstorm")
_RAIN_WORDS = ("雨", "rain")

DEFAULT_BACKGROUND = "cloudy"


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def weather_background(current: Mapping[str, Any] | None) -> str:
    """Pick the page background class from the current-conditions document.

    Checked in order: first icon code, first warning message, presence of
    special weather tips.  Defaults to ``cloudy``.
    """
    if not current:
        return DEFAULT_BACKGROUND

    icon = _first(current.get("icon"))
    if icon is not None:
        code = _as_icon_code(get_value(icon))
        for codes, background in _BACKGROUND_BY_ICON:
            if code in codes:
                return background

    warning = _first(current.get("warningMessage"))
    if warning is not None:
        text = str(get_value(warning)).lower()
        if any(word in text for word in _STORM_WORDS):
            return "stormy"
        if any(word in text for word in _RAIN_WORDS):
            return "rainy"

    if _first(current.get("specialWxTips")) is not None:
        return "stormy"

    return DEFAULT_BACKGROUND
