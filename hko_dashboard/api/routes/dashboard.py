"""Dashboard routes.

GET /               renders the HTML dashboard (502 error page with a
                    reload button when HKO cannot be reached).
GET /api/dashboard  returns the dashboard view model as JSON.

Both fetch the two HKO documents once per request; nothing is cached.
"""
from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from hko_dashboard.api.deps import get_display_timezone, get_hko_client
from hko_dashboard.dashboard.builder import Dashboard, build_dashboard
from hko_dashboard.dashboard.chart import render_chart_html
from hko_dashboard.dashboard.renderer import render_dashboard, render_error
from hko_dashboard.hko.client import HKOClient, HKOError
from hko_dashboard.normalization.recorder import LoggingRecorder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])

_recorder = LoggingRecorder(logging.getLogger("hko_dashboard.normalization"))


async def _load_dashboard(client: HKOClient, tz: tzinfo | None) -> Dashboard:
    bundle = await client.fetch_all()
    return build_dashboard(
        bundle.current,
        bundle.forecast,
        lang=client.lang,
        tz=tz,
        recorder=_recorder,
    )


@router.get("/", response_class=HTMLResponse, summary="Weather dashboard page")
async def dashboard_page(
    request: Request,
    viewport_width: int | None = Query(default=None, ge=0),
    client: HKOClient = Depends(get_hko_client),
    tz: tzinfo | None = Depends(get_display_timezone),
) -> HTMLResponse:
    try:
        dashboard = await _load_dashboard(client, tz)
    except HKOError as exc:
        logger.error("Failed to fetch weather data: %s", exc)
        return HTMLResponse(render_error(str(request.url), lang=client.lang), status_code=502)

    chart_html = render_chart_html(
        dashboard.chart_points, lang=dashboard.lang, viewport_width=viewport_width
    )
    return HTMLResponse(render_dashboard(dashboard, chart_html))


@router.get("/api/dashboard", summary="Weather dashboard data")
async def dashboard_data(
    client: HKOClient = Depends(get_hko_client),
    tz: tzinfo | None = Depends(get_display_timezone),
) -> dict:
    try:
        dashboard = await _load_dashboard(client, tz)
    except HKOError as exc:
        logger.error("Failed to fetch weather data: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return dashboard.to_dict()
