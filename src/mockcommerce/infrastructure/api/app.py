"""
FastAPI Application Factory
===========================

Builds the app: settings, logging, the order manager, request-id
middleware, and the exception handlers that turn every failure into the
``{success: false, ...}`` envelope.
"""
import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockcommerce.application.order_manager import OrderManager
from mockcommerce.domain.exceptions import DomainException, EntityNotFoundError
from mockcommerce.infrastructure import bootstrap
from mockcommerce.infrastructure.api.order_controller import router as order_router
from mockcommerce.infrastructure.api.responses import ApiError, envelope
from mockcommerce.infrastructure.config import Settings
from mockcommerce.infrastructure.logging_config import request_id_var, setup_logging

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list:
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        if isinstance(exc, EntityNotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        else:
            status_code = status.HTTP_400_BAD_REQUEST
        logger.warning("%s %s -> %s %s", request.method, request.url.path, status_code, exc.code)
        return envelope(message=exc.message, code=exc.code, status_code=status_code)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
        return envelope(message=exc.message, code=exc.code, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = _validation_errors(exc)
        logger.warning("%s %s -> 400 invalid data: %s", request.method, request.url.path, errors)
        return envelope(
            message="Invalid data",
            code="INVALID_DATA",
            errors=errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return envelope(message=str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return envelope(
            message="Internal server error",
            code="INTERNAL_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(
    settings: Optional[Settings] = None,
    order_manager: Optional[OrderManager] = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        settings: defaults to ``Settings.from_env()``
        order_manager: defaults to one backed by the JSON store in
            ``settings.data_dir``
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Mock Commerce Order API",
        description="Order lifecycle endpoints for the mock e-commerce platform",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.order_manager = order_manager or bootstrap.order_manager(settings)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response

    _register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(order_router)

    logger.info("Order API ready (data dir: %s)", settings.data_dir)
    return app
