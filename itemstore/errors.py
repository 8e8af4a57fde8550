import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


def describe_validation_error(exc: RequestValidationError) -> str:
    """One-line message for the first problem found in a request body."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"

    first = errors[0]
    if first.get("type") == "json_invalid":
        reason = (first.get("ctx") or {}).get("error") or first.get("msg")
        return f"Invalid JSON: {reason}"

    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = METHOD_NOT_ALLOWED if exc.status_code == 405 else str(exc.detail)
    logger.info(
        "%s %s rejected with %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        detail,
    )
    return PlainTextResponse(
        detail,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    detail = describe_validation_error(exc)
    logger.info("%s %s rejected with 400: %s", request.method, request.url.path, detail)
    return PlainTextResponse(detail, status_code=400)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse("Internal server error", status_code=500)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
