"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from app.infrastructure.notifications import NotificationFanOut


def get_fanout(request: Request) -> NotificationFanOut:
    """Return the fan-out engine created by the application lifespan."""

    fanout = getattr(request.app.state, "fanout", None)
    if fanout is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Realtime notifications are not initialised",
        )
    return fanout
