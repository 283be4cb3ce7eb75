"""HTML renderer for the dashboard and the fetch-error page.

Page skeletons live in ``hko_dashboard/templates`` as ``string.Template``
files; the repeated blocks (detail items, forecast cards) are assembled
here.  Every value taken from the view model is HTML-escaped.
"""
from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from string import Template

from hko_dashboard.core.labels import get_labels
from hko_dashboard.dashboard.builder import CurrentConditions, Dashboard, ForecastDay

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


# ---------------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------------

def _load_template(name: str, template_dir: Path = TEMPLATE_DIR) -> Template:
    path = template_dir / name
    if not path.is_file():
        raise FileNotFoundError(f"No template {name!r} in {template_dir}")
    return Template(path.read_text(encoding="utf-8"))


def _detail(label: str, value: str) -> str:
    return (
        '<div class="current-detail-item">'
        f'<div class="current-detail-label">{escape(label)}</div>'
        f'<div class="current-detail-value">{escape(value)}</div>'
        "</div>"
    )


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _render_current(current: CurrentConditions | None, labels: dict[str, str]) -> str:
    if current is None:
        return ""

    parts = [
        '<section class="current-weather">',
        f'<h2 class="current-weather-title">{escape(labels["today"])}</h2>',
    ]
    if current.temperature is not None:
        parts.append(f'<div class="current-temp">{escape(current.temperature)}</div>')
    if current.description:
        parts.append(f'<div class="current-description">{escape(current.description)}</div>')

    details = [
        (labels["humidity"], current.humidity),
        (labels["uv_index"], current.uv_index),
        (labels["rainfall"], current.rainfall),
        (labels["record_time"], current.record_time),
    ]
    parts.append('<div class="current-details">')
    parts.extend(_detail(label, value) for label, value in details if value is not None)
    parts.append("</div>")

    if current.special_tip:
        parts.append(
            '<div class="weather-warning">'
            '<h4 class="warning-title"><i class="bi bi-exclamation-triangle-fill me-2"></i>'
            f"{escape(labels['special_tips'])}</h4>"
            f'<p class="warning-text">{escape(current.special_tip)}</p>'
            "</div>"
        )

    parts.append("</section>")
    return "".join(parts)


def _render_forecast_card(day: ForecastDay, labels: dict[str, str]) -> str:
    psr = ""
    if day.psr is not None:
        psr = (
            '<div class="forecast-detail">'
            f'<span class="forecast-detail-label">{escape(labels["psr"])}</span>'
            '<span class="forecast-detail-value">'
            f'<i class="{escape(day.psr_icon or "")} me-1"></i>{escape(day.psr)}'
            "</span></div>"
        )
    return (
        '<article class="forecast-card">'
        f'<div class="forecast-date">{escape(day.date_label)}</div>'
        f'<div class="forecast-icon"><i class="{escape(day.icon)}"></i></div>'
        '<div class="forecast-temps">'
        f'<span class="forecast-temp-high">{escape(day.max_temp)}</span>'
        f'<span class="forecast-temp-low">{escape(day.min_temp)}</span>'
        "</div>"
        '<div class="forecast-details">'
        '<div class="forecast-detail">'
        f'<span class="forecast-detail-label">{escape(labels["humidity"])}</span>'
        f'<span class="forecast-detail-value">{escape(day.humidity)}</span>'
        "</div>"
        f"{psr}"
        "</div>"
        "</article>"
    )


def _render_forecast(days: list[ForecastDay], labels: dict[str, str]) -> str:
    if not days:
        return ""
    cards = "".join(_render_forecast_card(day, labels) for day in days)
    return (
        '<section class="forecast-section">'
        f'<h2 class="forecast-title">{escape(labels["forecast_title"])}</h2>'
        f'<div class="forecast-grid">{cards}</div>'
        "</section>"
    )


def _render_chart(chart_html: str, labels: dict[str, str]) -> str:
    if not chart_html:
        return ""
    # chart_html is Plotly output and is embedded unescaped
    return (
        '<section class="chart-section">'
        f'<h3 class="chart-title">{escape(labels["chart_title"])}</h3>'
        f"{chart_html}"
        "</section>"
    )


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def render_dashboard(dashboard: Dashboard, chart_html: str = "") -> str:
    """Render the full dashboard page."""
    labels = get_labels(dashboard.lang)
    update_time = ""
    if dashboard.update_time:
        update_time = (
            '<div class="weather-update-time"><i class="bi bi-clock"></i>'
            f"<span>{escape(labels['last_updated'])}：{escape(dashboard.update_time)}</span></div>"
        )

    page = _load_template("dashboard.html").safe_substitute(
        lang=escape(dashboard.lang),
        background=escape(dashboard.background),
        title=escape(labels["title"]),
        subtitle=escape(labels["subtitle"]),
        update_time=update_time,
        current=_render_current(dashboard.current, labels),
        forecast=_render_forecast(dashboard.forecast_days, labels),
        chart=_render_chart(chart_html, labels),
    )
    logger.debug("Rendered dashboard page (%d forecast days)", len(dashboard.forecast_days))
    return page


def render_error(retry_url: str, *, lang: str = "tc", message: str | None = None) -> str:
    """Render the fetch-error page with a reload button pointing at *retry_url*."""
    labels = get_labels(lang)
    return _load_template("error.html").safe_substitute(
        lang=escape(lang),
        title=escape(labels["title"]),
        error_title=escape(labels["error_title"]),
        error_message=escape(message or labels["error_message"]),
        retry_url=escape(retry_url, quote=True),
        reload=escape(labels["reload"]),
    )
