# backend/middleware/graceful_cancel.py
from __future__ import annotations

import asyncio
import logging
from starlette.types import ASGIApp, Scope, Receive, Send

log = logging.getLogger("foliochat.middleware")


class GracefulCancelMiddleware:
    """
    Absorbs asyncio.CancelledError from dropped clients and server shutdown.
    A visitor closing the chat widget mid-generation abandons the outbound
    Ollama call; there is nothing to clean up, so it is logged at DEBUG only.
    """
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await self.app(scope, receive, send)
        except asyncio.CancelledError:
            log.debug(
                "Request cancelled | %s %s",
                scope.get("method", "-"),
                scope.get("path", "-"),
            )
            return
