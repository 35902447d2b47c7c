"""Translate exceptions into the storefront's error envelope."""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.schemas import ErrorBody, ErrorEnvelope

logger = structlog.get_logger(__name__)

# Router misses: no route for the path, or none for the method on that path
UNMATCHED_ROUTE = {(404, "Not Found"), (405, "Method Not Allowed")}


def first_message(exc) -> str:
    """The first human-readable message carried by a Protean exception."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, list | tuple) and value:
                return str(value[0])
            if value:
                return str(value)
    if isinstance(messages, list | tuple) and messages:
        return str(messages[0])
    if isinstance(messages, str) and messages:
        return messages
    return str(exc)


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    envelope = ErrorEnvelope(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope, exclude_none=True))


async def handle_domain_validation(request: Request, exc: ValidationError) -> JSONResponse:
    messages = exc.messages if isinstance(exc.messages, dict) else None
    return error_response(400, "VALIDATION_ERROR", first_message(exc), messages)


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(404, "NOT_FOUND", first_message(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    message = errors[0]["msg"] if errors else "Invalid request"
    return error_response(400, "VALIDATION_ERROR", message, errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if (exc.status_code, exc.detail) in UNMATCHED_ROUTE:
        return error_response(404, "NOT_FOUND", f"Route {request.method} {request.url.path} not found")
    return error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled API error", path=request.url.path, method=request.method)
    return error_response(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
