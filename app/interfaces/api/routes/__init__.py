from fastapi import FastAPI

from .festivals import router as festivals_router
from .health import router as health_router
from .notifications import router as notifications_router
from .reviews import router as reviews_router
from .sales import router as sales_router
from .vendors import router as vendors_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(festivals_router)
    app.include_router(vendors_router)
    app.include_router(sales_router)
    app.include_router(reviews_router)
    app.include_router(notifications_router)
