"""Global exception handlers.

Every error response has the shape ``{"error": "<message>"}``. Internal
details of unexpected failures are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from design_studio.exceptions import AuthenticationError, DesignStudioError, StorageError

logger = logging.getLogger(__name__)

GENERIC_ERROR = {"error": "Internal server error"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_storage_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DesignStudioError)
    async def domain_error_handler(request: Request, exc: DesignStudioError):
        """Handle all domain errors with their own status code."""
        if isinstance(exc, StorageError):
            logger.error(f"Storage error on {request.url.path}: {exc.message}")
        else:
            logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")

        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request body validation errors as 400s."""
        fields = _invalid_fields(exc)
        logger.info(f"Validation error on {request.url.path}: {fields}")
        message = "Missing or invalid fields"
        if fields:
            message = f"{message}: {', '.join(fields)}"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message, "fields": fields},
        )


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Keep framework errors (404 route, 405 method) in the same shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_storage_error_handler(app: FastAPI) -> None:
    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        """Database failures that escaped a store."""
        logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=GENERIC_ERROR,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=GENERIC_ERROR,
        )


def _invalid_fields(exc: RequestValidationError) -> list[str]:
    """Field names from a validation error, as the client sent them."""
    fields = []
    for error in exc.errors():
        # loc is ("body", "<field>", ...); a missing body has loc ("body",)
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    return fields
