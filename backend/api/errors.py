# backend/api/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger("foliochat.errors")

MESSAGE_REQUIRED = "Message is required"
METHOD_NOT_ALLOWED = "Method not allowed"


def error_json(status_code: int, error: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Every HTTP error leaves as {"error": ...}; 405 keeps its Allow header."""
    if exc.status_code == 405:
        detail = METHOD_NOT_ALLOWED
    else:
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_json(exc.status_code, detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only /chat takes a body; a missing, unparsable or mistyped message is a client error.
    log.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_json(400, MESSAGE_REQUIRED)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
