# server.py
from __future__ import annotations

import logging
import os
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

import config as cfg
from backend.util.logging_setup import init_logging
from backend.api.app import create_app as create_fastapi_app

log = logging.getLogger("foliochat")


def build_app_with_ui() -> FastAPI:
    """API app with the Gradio chat panel mounted at settings.ui_mount_path."""
    import gradio as gr
    from ui.app import create_app as create_gradio_blocks

    s = cfg.settings
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "true" if s.gradio_analytics_enabled else "false"

    app = create_fastapi_app(s)
    mount_path = s.ui_mount_path.rstrip("/") or "/"
    gr.mount_gradio_app(app=app, blocks=create_gradio_blocks(), path=mount_path)

    if mount_path != "/":
        @app.get("/", include_in_schema=False)
        def _root_redirect():
            return RedirectResponse(url=mount_path, status_code=307)
    return app


def main() -> int:
    s = cfg.settings
    init_logging(s.log_level)

    app = build_app_with_ui() if s.ui_enabled else create_fastapi_app(s)

    log.info("🤖 Chatbot backend running on port %d", s.server_port)
    log.info("📡 Ollama URL: %s (model=%s)", s.ollama_url, s.ollama_model)

    uvicorn.run(
        app,
        host=s.server_host,
        port=s.server_port,
        log_level=s.log_level,
        access_log=s.uvicorn_access_log,
        timeout_graceful_shutdown=3,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
