"""FastAPI dependency injection - HKO client and display timezone."""
from __future__ import annotations

import logging
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hko_dashboard.core.settings import get_settings
from hko_dashboard.hko.client import HKOClient

logger = logging.getLogger(__name__)


def get_hko_client() -> HKOClient:
    """Return an HKO client configured from settings."""
    return HKOClient()


def get_display_timezone() -> tzinfo | None:
    """Return the configured ``DISPLAY_TIMEZONE``, or ``None`` to keep timestamp offsets."""
    name = get_settings().display_timezone
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown DISPLAY_TIMEZONE %r; using timestamp offsets as-is", name)
        return None
