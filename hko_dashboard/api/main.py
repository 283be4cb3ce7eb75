"""FastAPI application factory.

Assembles CORS and the health and dashboard routers.
This module is the authoritative app object - hko_dashboard/main.py re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hko_dashboard.api.routes.dashboard import router as dashboard_router
from hko_dashboard.api.routes.health import router as health_router
from hko_dashboard.core.logging import setup_logging
from hko_dashboard.core.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    settings = get_settings()
    logger.info("Starting %s %s (%s)", settings.app_name, settings.app_version, settings.app_env)
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# The JSON endpoint is read-only public data
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(dashboard_router)
