"""
Error messages and plain‑text exception handlers.

Every failure of the ``/clients`` API is answered with a fixed
plain‑text body rather than FastAPI's default JSON ``{"detail": ...}``
envelope.  Handlers raise :class:`fastapi.HTTPException` with one of
the messages below; the handlers registered here turn those (and the
router's own 404/405 responses, and body validation failures) into
``text/plain`` responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

METHOD_NOT_ALLOWED_MSG = "Method not allowed"
INVALID_CLIENT_ID_MSG = "Invalid client ID"
CLIENT_NOT_FOUND_MSG = "Client not found"
BAD_REQUEST_MSG = "Bad request"

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render an HTTP exception as its plain‑text detail."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED_MSG
    else:
        message = str(exc.detail)
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, message)
    return PlainTextResponse(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Answer any request body that does not decode to a client with 400."""
    logger.debug("%s %s -> 400 %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(BAD_REQUEST_MSG, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the plain‑text handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
