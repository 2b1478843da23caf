"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.notifications import ConnectionRegistry, NotificationFanOut
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the realtime components for this process and tear them down on exit."""

    settings = get_settings()
    database.initialize_database()
    registry = ConnectionRegistry()
    app.state.fanout = NotificationFanOut(
        registry,
        database.SessionLocal,
        admin_observes=settings.admin_observes_notifications,
    )
    try:
        yield
    finally:
        await app.state.fanout.aclose()
        await registry.close_all()
        app.state.fanout = None
        database.engine.dispose()
        logger.info("Realtime notification fan-out stopped")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Festival notifications", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()
