"""Centralized error handlers.

Maps domain errors to JSON ``{"message": ...}`` responses. Internal details
never reach the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exchange_office.core.exceptions import (
    AuthenticationError,
    ConflictError,
    ExchangeOfficeError,
    NotFoundError,
    ValidationError,
)
from exchange_office.modules.ledger.exceptions import InsufficientBalanceError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, errors: list | None = None) -> JSONResponse:
    body: dict = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def status_for(exc: ExchangeOfficeError) -> int:
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED if exc.missing else status.HTTP_403_FORBIDDEN
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ValidationError, InsufficientBalanceError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ExchangeOfficeError)
    async def handle_domain_error(request: Request, exc: ExchangeOfficeError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("Unhandled domain error on %s: %s", request.url.path, exc.message)
            return _error_response(status_code, "Internal server error")
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid input on %s", request.url.path)
        errors = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
            for error in exc.errors()
        ]
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid input", errors)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s: %s", request.url.path, type(exc).__name__)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


__all__ = ["register_error_handlers", "status_for"]
