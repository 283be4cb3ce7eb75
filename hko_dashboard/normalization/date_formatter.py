"""Day, timestamp and chart-axis labels built on top of ``get_value``.

All three formatters return a string and never raise.

Timezone rule for ``format_timestamp``: with ``tz=None`` the wall-clock
fields written in the timestamp are used as-is, so
``2025-08-03T00:00:00+08:00`` renders as 00:00 whatever the host zone is.
With a ``tz`` the offset-aware value is converted to that zone first.
Naive timestamps are never shifted.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo
from typing import Any

from hko_dashboard.core.constants import PLACEHOLDER
from hko_dashboard.core.labels import get_labels
from hko_dashboard.normalization.recorder import Recorder
from hko_dashboard.normalization.value_normalizer import get_value

logger = logging.getLogger(__name__)

_COMPACT_DATE_RE = re.compile(r"^\d{8}$")
_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def _is_blank(value: Any) -> bool:
    return not value or value == PLACEHOLDER


def _month_day(date: str) -> tuple[int, int] | None:
    """Extract (month, day) from ``YYYYMMDD`` or ``YYYY-MM-DD``.

    Dashed parts only need leading digits, so ``2025-08-03T00:00``
    yields ``(8, 3)``.
    """
    if len(date) == 8 and _COMPACT_DATE_RE.match(date):
        return int(date[4:6]), int(date[6:8])

    parts = date.split("-")
    if len(parts) != 3:
        return None
    month = _LEADING_INT_RE.match(parts[1])
    day = _LEADING_INT_RE.match(parts[2])
    if month is None or day is None:
        return None
    return int(month.group(1)), int(day.group(1))


def format_day(
    date_field: Any,
    week_field: Any,
    *,
    lang: str = "tc",
    recorder: Recorder | None = None,
) -> str:
    """Return a forecast day label such as ``"8月3日 星期日"``.

    The fallback label (``"第{week}天"`` / ``"Day {week}"``) is built from
    the raw *week_field*, not its normalized value.
    """
    labels = get_labels(lang)

    def fallback() -> str:
        try:
            return labels["day_fallback"].format(week=week_field)
        except Exception:  # noqa: BLE001
            return labels["day_fallback"].format(week=PLACEHOLDER)

    try:
        date = get_value(date_field, recorder=recorder)
        week = get_value(week_field, recorder=recorder)

        if _is_blank(date):
            return fallback()

        if not isinstance(date, str):
            raise TypeError(f"date is {type(date).__name__}, expected str")

        month_day = _month_day(date)
        if month_day is None:
            return f"{date} {week}"

        month, day = month_day
        return labels["day_template"].format(month=month, day=day, week=week)
    except Exception as exc:  # noqa: BLE001
        logger.debug("format_day: falling back (%s)", exc)
        return fallback()


def format_timestamp(
    field: Any,
    *,
    lang: str = "tc",
    tz: tzinfo | None = None,
    recorder: Recorder | None = None,
) -> str:
    """Return ``"2025年8月3日 00:00"`` style text for an ISO-8601 fragment.

    Unparseable input is returned as the normalized raw string.
    """
    labels = get_labels(lang)
    raw = get_value(field, recorder=recorder)

    if _is_blank(raw):
        return labels["unknown_time"]

    text = str(raw)
    try:
        parsed = datetime.fromisoformat(text.strip())
        if tz is not None and parsed.tzinfo is not None:
            parsed = parsed.astimezone(tz)
        return labels["timestamp_template"].format(
            year=parsed.year,
            month=parsed.month,
            day=parsed.day,
            hour=parsed.hour,
            minute=parsed.minute,
        )
    except (TypeError, ValueError, OverflowError):
        logger.debug("format_timestamp: unparseable timestamp (length=%d)", len(text))
        return text


def format_axis_tick(value: Any) -> str:
    """Short ``M/D`` label for the trend chart x-axis."""
    if _is_blank(value):
        return ""

    text = str(value)
    if len(text) == 8 and _COMPACT_DATE_RE.match(text):
        return f"{int(text[4:6])}/{int(text[6:8])}"

    if "-" in text:
        month_day = _month_day(text)
        if month_day is not None:
            return f"{month_day[0]}/{month_day[1]}"

    return text[-5:]
