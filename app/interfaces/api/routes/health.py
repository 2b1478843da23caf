from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict[str, object]:
    fanout = getattr(request.app.state, "fanout", None)
    connections = len(fanout.registry) if fanout is not None else 0
    return {"status": "ok", "realtime_connections": connections}
