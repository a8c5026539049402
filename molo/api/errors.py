from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from molo.core.exceptions import MoloError, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)


def status_code_for(exc: Exception) -> int:
    """Map an error to the HTTP status it is reported with"""
    if isinstance(exc, MoloError):
        return exc.status_code
    if isinstance(exc, RequestValidationError):
        return ValidationError.status_code
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    return UnexpectedError.status_code


def success_envelope(data: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    return body


def error_envelope(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def _error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_envelope(message),
        headers=headers
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts) or ValidationError.default_message


async def molo_exception_handler(request: Request, exc: MoloError):
    """Handle diary errors raised by services and dependencies"""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.kind}: {exc.message} - {request.url.path}", exc_info=exc.__cause__)
    else:
        logger.warning(f"{exc.kind} ({status_code}): {exc.message} - {request.url.path}")

    return _error_response(status_code, exc.message, exc.headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope"""
    logger.warning(f"HTTP {exc.status_code}: {exc.detail} - {request.url.path}")
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request schema failures as 400 validation errors"""
    message = _describe_validation_errors(exc)
    logger.warning(f"Validation error: {message} - {request.url.path}")
    return _error_response(status_code_for(exc), message)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking internals"""
    logger.error(f"Unexpected error: {exc} - {request.url.path}", exc_info=True)
    return _error_response(status_code_for(exc), UnexpectedError.default_message)
