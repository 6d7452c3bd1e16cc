from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lostfound_service.api.middleware.request_context import RequestContextMiddleware
from lostfound_service.api.v1.routers import (
    conversations,
    health,
    items,
    messages,
    users,
)
from lostfound_service.application.exceptions import (
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    UnauthorizedError,
    ValidationError,
)
from lostfound_service.config import settings
from lostfound_service.infrastructure.kv.factory import open_kv_store
from lostfound_service.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    configure_logging(settings.LOG_LEVEL)
    app.state.kv_store = await open_kv_store(settings)

    yield

    await app.state.kv_store.close()
    logger.info("KV store closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Campus Lost & Found Board",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(items.router)
    app.include_router(conversations.router)
    app.include_router(messages.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(UnauthorizedError)
    async def _unauthorized(_req: Request, exc: UnauthorizedError) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"detail": exc.detail},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(ForbiddenError)
    async def _forbidden(_req: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": exc.detail})

    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def _bad_request(_req: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"detail": detail})

    @app.exception_handler(PersistenceError)
    async def _persistence(req: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(
            "Persistence failure on %s %s: %s",
            req.method,
            req.url.path,
            exc.detail,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})
