"""HTTP middleware for the API."""

import asyncio
import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status

from masterdom.domain.shared.exceptions import ErrorCode
from masterdom.presentation.api.exception_handlers import create_error_response

logger = logging.getLogger(__name__)


def add_request_timeout(app: FastAPI, timeout_seconds: float) -> None:
    """
    Bound every request by ``timeout_seconds``.

    An overrunning request is cancelled and answered with 504
    REQUEST_TIMEOUT. A non-positive value disables the deadline.
    """
    if timeout_seconds <= 0:
        return

    @app.middleware("http")
    async def request_deadline(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request %s %s exceeded %.1fs deadline",
                request.method,
                request.url.path,
                timeout_seconds,
            )
            return create_error_response(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                message="Request timed out",
                code=ErrorCode.REQUEST_TIMEOUT.value,
            )
