"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware and DI.

Dispatch order (first match wins, each route checked once):
  OPTIONS *                        → 204 preflight (CorsMiddleware)
  POST /auth/login                 → login
  GET  /users, POST /users         → list users, update own profile
  GET  /messages                   → list messages
  GET  /messages/channel/          → 400 "Channel not specified"
  GET  /messages/channel/{channel} → list one channel
  POST /messages                   → post message
  GET  /channels                   → list channels
  GET  /                           → health/version
  anything else                    → 404 "Not found"
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from chat_service.config.logging_config import setup_logging, correlation_id_var
from chat_service.config.settings import Config
from chat_service.infrastructure.sessions.session_registry import SessionRegistry
from chat_service.presentation.api import ROUTERS

logger = logging.getLogger(__name__)

ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Authorization, Content-Type",
    "Access-Control-Max-Age": "86400",
}
NOT_FOUND = "Not found"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class CorsMiddleware(BaseHTTPMiddleware):
    """
    Answers every OPTIONS request as a preflight and marks every other
    response as readable from any origin.

    Starlette's CORSMiddleware only short-circuits requests that carry Origin
    and Access-Control-Request-Method, and answers them with 200; OPTIONS here
    must be 204 with or without those headers.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=PREFLIGHT_HEADERS)

        response = await call_next(request)
        response.headers.update(ALLOW_ORIGIN)
        return response


def _describe_validation_error(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return "Malformed JSON body"
        loc = tuple(error.get("loc", ()))
        if loc[:1] == ("body",):
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        if field not in fields:
            fields.append(field)
    return f"Missing or invalid field(s): {', '.join(fields)}"


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use. Defaults to the production
            container backed by prisma.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    if container is None:
        from chat_service.setup.ioc import make_container

        container = make_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: start the session sweeper
        - Shutdown: stop the sweeper, close the DI container (disconnects prisma)
        """
        registry = await container.get(SessionRegistry)
        registry.start()
        logger.info(f"{Config.APP_NAME} {Config.APP_VERSION} started")
        try:
            yield
        finally:
            await registry.stop()
            await container.close()
            logger.info(f"{Config.APP_NAME} shutdown complete")

    app = FastAPI(
        title="Chat Service API",
        description="Channels, messages and user profiles behind bearer sessions",
        version=Config.APP_VERSION,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    setup_dishka(container, app)
    app.add_middleware(CorrelationIdMiddleware)
    # Added last so it wraps everything, including preflight short-circuit
    app.add_middleware(CorsMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.debug(f"[VALIDATION ERROR] {request.method} {request.url.path}: {message}")
        return PlainTextResponse(message, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths with the wrong method are both misses
        if exc.status_code == 405 or (
            exc.status_code == 404 and exc.detail == "Not Found"
        ):
            return PlainTextResponse(NOT_FOUND, status_code=404)
        if exc.status_code >= 500:
            logger.error(
                f"[HTTP ERROR {exc.status_code}] {request.method} {request.url.path}",
                exc_info=exc.__cause__,
            )
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__} on {request.url.path}")
        return PlainTextResponse(
            "Internal server error", status_code=500, headers=ALLOW_ORIGIN
        )

    for router in ROUTERS:
        app.include_router(router)

    @app.get("/", tags=["health"])
    async def root():
        return {
            "name": Config.APP_NAME,
            "version": Config.APP_VERSION,
            "status": "ok",
        }

    return app
