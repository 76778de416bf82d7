"""Translate exceptions into JSON error bodies.

Every error leaves the API as ``{"error": message, "code": CODE}`` with an
optional ``details`` object. Status codes come from ``ERROR_CODE_TO_STATUS``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from masterdom.domain.shared.exceptions import DomainException, ErrorCode

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANNOT_CHAT_WITH_SELF: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized - identity not established
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden - identity known, privilege missing
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ADMIN_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_OFFER_AUTHOR: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_A_PARTICIPANT: status.HTTP_403_FORBIDDEN,
    ErrorCode.CANNOT_DEMOTE_SELF: status.HTTP_403_FORBIDDEN,
    ErrorCode.CANNOT_DEMOTE_ADMIN: status.HTTP_403_FORBIDDEN,
    ErrorCode.CANNOT_DELETE_ADMIN: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.OFFER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONVERSATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_RESPONSE: status.HTTP_409_CONFLICT,
    ErrorCode.CATEGORY_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    # 504 Gateway Timeout
    ErrorCode.REQUEST_TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Codes for framework-raised HTTPExceptions (unknown routes, bad methods)
_HTTP_STATUS_TO_CODE: dict[int, str] = {
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTHENTICATION_REQUIRED.value,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN.value,
    status.HTTP_404_NOT_FOUND: ErrorCode.ENTITY_NOT_FOUND.value,
}

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def status_for(exc: DomainException) -> int:
    return ERROR_CODE_TO_STATUS.get(
        exc.code,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[Any] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": message, "code": code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the handlers for domain, validation, HTTP and unexpected errors."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        headers = (
            _BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
        )
        return create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            details=exc.details,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies and query parameters are client errors (400)."""
        errors = [
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.info(
            "Request validation failed on %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Request validation failed",
            code=ErrorCode.VALIDATION_ERROR.value,
            details={"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        code = _HTTP_STATUS_TO_CODE.get(exc.status_code, f"HTTP_{exc.status_code}")
        return create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            code=code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Log the traceback and answer with an opaque 500."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
