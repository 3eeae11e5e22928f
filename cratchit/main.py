"""
Cratchit FastAPI application.

This is the entry point for the application.
Logging is configured and all routers are registered here.
"""

import logging

from fastapi import FastAPI

from cratchit.config import get_settings
from cratchit.api.health import router as health_router
from cratchit.api.chart import router as chart_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Chart of accounts parsing and lookup",
)

# Register routers
app.include_router(health_router)
app.include_router(chart_router)

logger.info(
    "%s %s starting (%s)",
    settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT,
)
