# ui/api.py
from __future__ import annotations

import logging
import os

import requests

import config as cfg

log = logging.getLogger("foliochat.ui.api")


def server_url() -> str:
    """
    Resolve the FastAPI base URL used by the Gradio panel.
    FOLIOCHAT_SERVER_URL wins; otherwise the host/port this process serves on.
    """
    url = os.environ.get("FOLIOCHAT_SERVER_URL") or cfg.settings.local_url
    return url.rstrip("/")


# ---------------- HTTP helpers ----------------
def api_get_health(timeout: float = 5.0) -> dict:
    try:
        r = requests.get(f"{server_url()}/health", timeout=timeout)
        r.raise_for_status()
        return r.json()
    except Exception as e:
        log.debug("GET /health failed: %s", e)
        return {"status": "down", "mode": None, "error": str(e)}


def api_post_chat(message: str, timeout: float = 60.0) -> dict:
    """POST /chat; errors come back as {"error": ...} rather than raising."""
    try:
        r = requests.post(f"{server_url()}/chat", json={"message": message}, timeout=timeout)
    except requests.RequestException as e:
        log.error("POST /chat failed: %s", e)
        return {"error": f"Chat server unreachable ({e.__class__.__name__})."}

    try:
        data = r.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        return {"error": f"Unexpected response from chat server (HTTP {r.status_code})."}

    if not r.ok:
        return {"error": str(data.get("error") or f"HTTP {r.status_code}")}
    return data


# ---------------- Small UI utilities ----------------
def mode_badge(mode: str | None) -> str:
    if mode == "ai-powered":
        return '<span class="mode-badge mode-ai">AI-powered</span>'
    if mode == "rule-based":
        return '<span class="mode-badge mode-rules">Rule-based</span>'
    return '<span class="mode-badge mode-down">Offline</span>'
