"""GET /health - liveness check."""
from __future__ import annotations

from fastapi import APIRouter

from hko_dashboard.core.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "hko_lang": settings.hko_lang,
    }
