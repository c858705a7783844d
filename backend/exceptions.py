"""
exceptions.py — Domain failures and their HTTP rendering.
"""

import time
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class DomainError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TransactionNotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Transaction with this id wasn't found"


class TransactionNotCreatedError(DomainError):
    default_message = "Transaction was not created"


class LimitNotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Limit for this account and category wasn't found"


class LimitNotCreatedError(DomainError):
    default_message = "Limit was not created"


def field_errors_message(exc: ValidationError | RequestValidationError) -> str:
    """Concatenate pydantic errors as 'field - message;' pairs."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ())) or "body"
        parts.append(f"{field} - {error.get('msg', 'invalid value')};")
    return "".join(parts)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "timestamp": int(time.time() * 1000)},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = field_errors_message(exc)
    logger.info(f"{request.method} {request.url.path} -> 422: {message}")
    return _error_response(422, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
