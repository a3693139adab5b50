# app/core/error_handlers.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import KasirError
from app.core.response import failed

logger = logging.getLogger("app")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    loc = errors[0].get("loc", ())
    source = loc[0] if loc else "body"

    if source == "path":
        # category_id -> "Invalid Category ID"
        param = str(loc[-1])
        if param.endswith("_id"):
            param = param[: -len("_id")]
        return f"Invalid {param.replace('_', ' ').title()} ID"

    if source == "query":
        return f"Invalid query parameter: {loc[-1]}"

    return "Invalid request body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "Method not allowed"

    return failed(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _validation_message(exc)
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return failed(status.HTTP_400_BAD_REQUEST, message)


async def kasir_exception_handler(request: Request, exc: KasirError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return failed(exc.status_code, exc.message)


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    logger.info(f"{request.method} {request.url.path} rate limited: {exc.detail}")
    return failed(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed unexpectedly")
    return failed(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Internal server error: {exc}")


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(KasirError, kasir_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
