#!/usr/bin/env python3
"""Fetch live HKO data once and print the dashboard view model as JSON.

Usage:
    python scripts/dump_dashboard.py                 # JSON to stdout
    python scripts/dump_dashboard.py page.html       # also write the HTML page
    HKO_LANG=en python scripts/dump_dashboard.py
"""
from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from hko_dashboard.api.deps import get_display_timezone
from hko_dashboard.core.logging import setup_logging
from hko_dashboard.dashboard.builder import build_dashboard
from hko_dashboard.dashboard.chart import render_chart_html
from hko_dashboard.dashboard.renderer import render_dashboard
from hko_dashboard.hko.client import HKOClient, HKOError
from hko_dashboard.normalization.recorder import LoggingRecorder


def main() -> int:
    setup_logging()
    client = HKOClient()
    try:
        bundle = asyncio.run(client.fetch_all())
    except HKOError as exc:
        print(f"Failed to fetch weather data: {exc}", file=sys.stderr)
        return 1

    dashboard = build_dashboard(
        bundle.current,
        bundle.forecast,
        lang=client.lang,
        tz=get_display_timezone(),
        recorder=LoggingRecorder(),
    )
    print(json.dumps(dashboard.to_dict(), ensure_ascii=False, indent=2))

    if len(sys.argv) > 1:
        out_path = Path(sys.argv[1])
        chart_html = render_chart_html(dashboard.chart_points, lang=dashboard.lang)
        out_path.write_text(render_dashboard(dashboard, chart_html), encoding="utf-8")
        print(f"Wrote {out_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
