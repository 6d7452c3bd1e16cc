from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from lostfound_service.api.deps import KVStoreDep
from lostfound_service.config import settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(store: KVStoreDep) -> JSONResponse:
    if not await store.ping():
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "errors": [f"{settings.KV_BACKEND}: ping failed"]},
        )
    return JSONResponse(content={"status": "ready"})
