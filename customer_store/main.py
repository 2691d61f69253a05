from __future__ import annotations

import logging

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from customer_store import __version__
from customer_store.api.customers import router as customers_router
from customer_store.api.metrics import router as metrics_router
from customer_store.config import Settings, get_settings
from customer_store.exceptions import CustomerStoreError
from customer_store.observability.logging import configure_logging
from customer_store.observability.middleware import RequestContextMiddleware
from customer_store.services.customer_service import CustomerStore

logger = logging.getLogger(__name__)


def create_app(store: CustomerStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around ``store`` (a fresh, empty one by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.settings = settings
    app.state.customer_store = store if store is not None else CustomerStore()

    app.add_middleware(RequestContextMiddleware)
    _register_exception_handlers(app)

    app.include_router(customers_router)
    app.include_router(metrics_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustomerStoreError)
    async def customer_store_error_handler(request: Request, exc: CustomerStoreError) -> PlainTextResponse:
        structlog.get_logger("api").warning(
            "api_error",
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            message=exc.message,
            path=request.url.path,
        )
        # Errors are plain text, newline terminated.
        return PlainTextResponse(
            f"{exc.message}\n",
            status_code=exc.status_code,
            headers={"X-Content-Type-Options": "nosniff"},
        )


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("server.started", extra={"host": settings.host, "port": settings.port})
    # uvicorn exits the process if the port cannot be bound.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
