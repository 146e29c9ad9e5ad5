# tests/conftest.py
from __future__ import annotations

import json
import os
import sys

import pytest

# --- FORCE PROJECT ROOT ONTO sys.path ----------------------------------------

# Project root = parent of the "tests" directory
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Ensure project root is at the *front* of sys.path so it wins over site-packages
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# -----------------------------------------------------------------------------


@pytest.fixture(scope="session", autouse=True)
def _test_env_isolation():
    """
    Session-wide defaults so tests don't phone home or pick up a
    developer's Ollama overrides.
    """
    os.environ.setdefault("GRADIO_ANALYTICS_ENABLED", "false")
    for name in ("OLLAMA_URL", "OLLAMA_MODEL", "PORT", "FOLIOCHAT_SERVER_URL"):
        os.environ.pop(name, None)
    yield


@pytest.fixture(autouse=True)
def _offline_ollama(monkeypatch):
    """
    Per-test: no real network IO to Ollama.

    requests.get/post inside the client raise ConnectionError unless a test
    patches them, so the backend looks unreachable by default.
    """
    import requests

    from backend.llm import ollama_client

    def _refuse(*a, **k):
        raise requests.ConnectionError("network disabled in tests")

    monkeypatch.setattr(ollama_client.requests, "get", _refuse, raising=True)
    monkeypatch.setattr(ollama_client.requests, "post", _refuse, raising=True)


class FakeResponse:
    """Just enough of requests.Response for the client code."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content(self) -> bytes:
        if self._text is not None:
            return self._text.encode("utf-8")
        return json.dumps(self._payload).encode("utf-8")

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    def iter_content(self, chunk_size=1):
        body = self.content
        for i in range(0, len(body), chunk_size):
            yield body[i:i + chunk_size]

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def raise_for_status(self) -> None:
        if not self.ok:
            import requests

            raise requests.HTTPError(f"HTTP {self.status_code}")


class FakeBackend:
    """In-memory stand-in for OllamaClient."""

    def __init__(self, available: bool = False, result=None, model: str = "llama3"):
        self.available = available
        self.result = result
        self._model = model
        self.probe_calls = 0
        self.prompts: list[str] = []

    @property
    def model(self) -> str:
        return self._model

    def probe(self) -> bool:
        self.probe_calls += 1
        return self.available

    def generate(self, prompt: str):
        self.prompts.append(prompt)
        return self.result


async def asgi_request(app, method: str, path: str, body: bytes = b"", headers=None):
    """
    Drive an ASGI app with a single HTTP request.
    Returns (status, headers_dict, json_body_or_None).
    """
    sent = {"body": False}
    messages: list[dict] = []

    async def receive():
        if not sent["body"]:
            sent["body"] = True
            return {"type": "http.request", "body": body, "more_body": False}
        return {"type": "http.disconnect"}

    async def send(message):
        messages.append(message)

    raw_headers = [(b"host", b"testserver")]
    if body:
        raw_headers.append((b"content-type", b"application/json"))
        raw_headers.append((b"content-length", str(len(body)).encode()))
    for k, v in (headers or {}).items():
        raw_headers.append((k.lower().encode(), v.encode()))

    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": raw_headers,
        "client": ("127.0.0.1", 12345),
        "server": ("testserver", 80),
    }
    await app(scope, receive, send)

    start = next(m for m in messages if m["type"] == "http.response.start")
    resp_headers = {k.decode().lower(): v.decode() for k, v in start.get("headers", [])}
    payload = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    data = json.loads(payload) if payload else None
    return start["status"], resp_headers, data


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def make_app():
    from config import Settings
    from backend.api.app import create_app

    def _make(backend=None, **overrides):
        return create_app(Settings(**overrides), backend=backend)

    return _make
