# backend/api/app.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config as cfg
from backend.ai_engine import ReplyResolver
from backend.api.errors import install_error_handlers
from backend.api.routes.chat import router as chat_router
from backend.api.routes.health import router as health_router
from backend.core.ports import ChatBackend
from backend.llm.ollama_client import OllamaClient
from backend.middleware.graceful_cancel import GracefulCancelMiddleware

log = logging.getLogger("foliochat")


@asynccontextmanager
async def _lifespan(app: FastAPI):
    backend = app.state.backend
    log.info("🤖 Folio Chat ready | model=%s", backend.model)
    yield
    log.info("🛑 Folio Chat shutting down.")


def create_app(
    settings: cfg.Settings | None = None,
    backend: ChatBackend | None = None,
) -> FastAPI:
    """
    Build the API. The Ollama client and resolver are created once here from
    an explicit config and shared read-only by all requests; tests may pass
    their own backend.
    """
    s = settings or cfg.settings
    app = FastAPI(title="Folio Chat", lifespan=_lifespan)

    app.state.backend = backend or OllamaClient(s.ollama_config())
    app.state.resolver = ReplyResolver(app.state.backend, persona=s.persona_prompt)

    # Client disconnects abandon in-flight calls; keep the logs quiet
    app.add_middleware(GracefulCancelMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=s.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)
    app.include_router(health_router)
    app.include_router(chat_router)

    return app
