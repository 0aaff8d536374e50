# External package imports
from fastapi import APIRouter
from fastapi.responses import JSONResponse

# Local application imports
from ..core.config import get_settings, DEVICE_STORE_MONGO
from ..infrastructure.db.mongo_connection import ping_database


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness probe: the process is up and serving requests"""
    return {"status": "ok"}


@router.get("/ready")
async def ready() -> JSONResponse:
    """
    Readiness probe

    Pings MongoDB when it backs the device store; the in-memory store is
    always ready.
    """
    settings = get_settings()
    if settings.device_store == DEVICE_STORE_MONGO and not await ping_database():
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return JSONResponse(status_code=200, content={"status": "ready"})
