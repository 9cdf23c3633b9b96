"""Application factory.

Serve with ``uvicorn --factory tailor_dashboard.main:create_app``; nothing is
seeded until the factory runs.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tailor_dashboard.api import api_router
from tailor_dashboard.core.config import Settings, settings as default_settings
from tailor_dashboard.core.exceptions import DashboardError
from tailor_dashboard.db.seed import KNOWN_CUSTOMER_IDS, generate_customers
from tailor_dashboard.db.store import CustomerStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> CustomerStore:
    """Seed a store with the mock population described by ``settings``."""
    store = CustomerStore(
        generate_customers(settings.SEED_CUSTOMER_COUNT, seed=settings.RANDOM_SEED),
        allow_fallback_creation=settings.ALLOW_FALLBACK_CREATION,
    )
    logger.info("Known customer IDs: %s", ", ".join(KNOWN_CUSTOMER_IDS))
    logger.info("Total mock customers generated: %d", len(store))
    return store


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "query"))
        parts.append(f"{loc}: {error.get('msg')}" if loc else error.get("msg", ""))
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Error in %s %s", request.method, request.url.path, exc_info=exc
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Error in %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(
    settings: Settings | None = None, store: CustomerStore | None = None
) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description="Customer and bespoke order dashboard backed by in-memory mock data",
        version=settings.VERSION,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": settings.VERSION}

    return app

