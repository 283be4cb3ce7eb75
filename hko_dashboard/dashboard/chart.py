"""Temperature trend chart.

Builds a Plotly line figure (max / min temperature per forecast day) and
renders it as an HTML fragment for the dashboard page.  The caller passes
the viewport width explicitly; nothing here reads browser state.
"""
from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from hko_dashboard.core.labels import get_labels
from hko_dashboard.dashboard.builder import ChartPoint
from hko_dashboard.normalization.date_formatter import format_axis_tick

SMALL_VIEWPORT_PX = 576

_MAX_LINE_COLOR = "rgba(255,255,255,0.9)"
_MIN_LINE_COLOR = "rgba(255,255,255,0.6)"
_AXIS_COLOR = "rgba(255,255,255,0.5)"
_TICK_COLOR = "rgba(255,255,255,0.7)"
_GRID_COLOR = "rgba(255,255,255,0.2)"


def chart_dimensions(viewport_width: int | None) -> tuple[int, int]:
    """Return ``(height_px, tick_font_size)`` for *viewport_width*."""
    if viewport_width is not None and viewport_width < SMALL_VIEWPORT_PX:
        return 250, 10
    return 300, 12


def build_temperature_chart(
    points: Sequence[ChartPoint],
    *,
    lang: str = "tc",
    viewport_width: int | None = None,
) -> go.Figure:
    labels = get_labels(lang)
    height, font_size = chart_dimensions(viewport_width)
    ticks = [format_axis_tick(p.date) for p in points]
    hover = f"{labels['chart_date']}: %{{x}}<br>%{{fullData.name}}: %{{y}}°C<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=ticks,
            y=[p.max_temp for p in points],
            name=labels["max_temp"],
            mode="lines+markers",
            line={"color": _MAX_LINE_COLOR, "width": 3, "shape": "spline"},
            marker={"color": _MAX_LINE_COLOR, "size": 8},
            hovertemplate=hover,
        )
    )
    fig.add_trace(
        go.Scatter(
            x=ticks,
            y=[p.min_temp for p in points],
            name=labels["min_temp"],
            mode="lines+markers",
            line={"color": _MIN_LINE_COLOR, "width": 3, "shape": "spline"},
            marker={"color": _MIN_LINE_COLOR, "size": 8},
            hovertemplate=hover,
        )
    )

    axis = {
        "tickfont": {"size": font_size, "color": _TICK_COLOR},
        "linecolor": _AXIS_COLOR,
        "gridcolor": _GRID_COLOR,
        "griddash": "dash",
    }
    fig.update_layout(
        height=height,
        margin={"t": 5, "r": 15, "l": 10, "b": 5},
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
        hoverlabel={"bgcolor": "rgba(0,0,0,0.8)", "font": {"color": "#ffffff"}},
        xaxis=axis,
        yaxis=axis,
    )
    return fig


def render_chart_html(
    points: Sequence[ChartPoint],
    *,
    lang: str = "tc",
    viewport_width: int | None = None,
) -> str:
    """Return an embeddable ``<div>`` for the chart, or ``""`` with no points."""
    if not points:
        return ""
    fig = build_temperature_chart(points, lang=lang, viewport_width=viewport_width)
    return fig.to_html(full_html=False, include_plotlyjs="cdn", config={"displayModeBar": False})
