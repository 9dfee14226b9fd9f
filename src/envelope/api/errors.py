"""Content-negotiated error responses.

Every client-visible error goes through :func:`error_response`: clients that
accept ``*/*`` or ``application/json`` get ``{"error": ..., "code": ...}``,
anything else gets a minimal HTML page. Tracebacks are never rendered.
"""

from __future__ import annotations

import html
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response

from envelope.core.errors import EnvelopeError
from envelope.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

_HTML_TEMPLATE = """<html>
    <head>
        <title>Error Occurred</title>
    </head>
    <body>
        <h1>Error Occurred: {code}</h1>
        <p>{message}</p>
    </body>
</html>"""


def accepts_json(accept: str | None) -> bool:
    """Return True when the ``Accept`` header admits a JSON body.

    A missing header means the client accepts anything; an empty one
    admits neither and gets HTML.
    """
    if accept is None:
        return True
    return "*/*" in accept or "application/json" in accept


def error_response(request: Request, message: str, status_code: int) -> Response:
    """Render ``message`` as JSON or HTML depending on the request's ``Accept`` header."""
    if accepts_json(request.headers.get("accept")):
        body = ErrorResponse(error=message, code=status_code)
        return JSONResponse(body.model_dump(), status_code=status_code)
    return HTMLResponse(
        _HTML_TEMPLATE.format(code=status_code, message=html.escape(message)),
        status_code=status_code,
    )


async def envelope_error_handler(request: Request, exc: EnvelopeError) -> Response:
    return error_response(request, exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.debug("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return error_response(request, "Bad Request", status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the shared error responder on ``app``."""
    app.add_exception_handler(EnvelopeError, envelope_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
