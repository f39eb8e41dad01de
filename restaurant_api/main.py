"""Restaurant API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RestaurantError → {"status": "error", ...} envelopes
    - CORS configured from settings (not hardcoded)
    - The restaurant (stores + facade) is built once in the lifespan and kept on
      app.state; routes reach it only through api.dependencies.get_restaurant
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurant_api.api.error_handlers import register_error_handlers
from restaurant_api.api.routes import health, menus, tables
from restaurant_api.config import get_settings
from restaurant_api.infrastructure.observability import setup_logging
from restaurant_api.services.bootstrap import build_restaurant

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.restaurant = build_restaurant(settings)
    logger.info("Restaurant API started")
    yield
    logger.info("Restaurant API shutting down")


app = FastAPI(
    title="Restaurant API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tables.router)
app.include_router(menus.router)

register_error_handlers(app)
