"""cafepos FastAPI application.

Usage:
    uvicorn cafepos.infrastructure.api.app:app --port 3001
    cafepos serve
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cafepos.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from cafepos.infrastructure.api.dependencies import Services
from cafepos.infrastructure.api.routes import (
    customer_router,
    dashboard_router,
    order_router,
    product_router,
)
from cafepos.infrastructure.config import AppConfig, get_config
from cafepos.infrastructure.logging import get_logger

log = get_logger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (StorageError, 500),
]

GENERIC_ERROR = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _config_for(request: Request) -> AppConfig:
    services = request.app.state.services
    return services.config if services is not None else get_config()


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {location} {first.get('msg', '')}".strip()


def create_app(services: Services | None = None) -> FastAPI:
    """Build the app. Without *services*, the configured database is used."""
    app = FastAPI(
        title="cafepos API",
        description="Coffee shop point of sale: orders, menu, customers and dashboard",
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Error mapping; every error body is {"error": <message>}
    # -----------------------------------------------------------------------
    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        status_code = next(
            (code for cls, code in _STATUS_BY_ERROR if isinstance(exc, cls)), 500
        )
        if status_code >= 500:
            log.error("{} {} failed: {}", request.method, request.url.path, exc)
            if not _config_for(request).exposes_error_details:
                return _error(status_code, GENERIC_ERROR)
        return _error(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, _first_validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "API endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return _error(500, GENERIC_ERROR)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    api = APIRouter(prefix="/api")
    api.include_router(order_router)
    api.include_router(dashboard_router)
    api.include_router(product_router)
    api.include_router(customer_router)

    @api.get("/health")
    async def health():
        return {
            "status": "ok",
            "message": "Coffee shop server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(api)
    return app


app = create_app()
