# backend/llm/ollama_client.py
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

log = logging.getLogger("foliochat.ollama")


@dataclass(frozen=True)
class OllamaConfig:
    base_url: str = "http://localhost:11434"
    model: str = "llama3"
    probe_timeout: float = 2.0       # reachability check; keep short
    generate_timeout: float = 30.0   # generation can be slow on CPU


@dataclass(frozen=True)
class GenerationSuccess:
    text: str
    model: str


@dataclass(frozen=True)
class GenerationFailure:
    reason: str


GenerationResult = Union[GenerationSuccess, GenerationFailure]


def _is_success(r: requests.Response) -> bool:
    return 200 <= r.status_code < 300


def _read_body(r: requests.Response, deadline: float) -> Optional[bytes]:
    """
    Read a streamed body, or None once `deadline` (time.monotonic) passes.
    requests' own timeout only bounds each socket read, so a server that
    drips bytes would otherwise hold us indefinitely. Single-byte reads
    return as soon as anything arrives.
    """
    if time.monotonic() > deadline:
        return None
    buf = bytearray()
    for chunk in r.iter_content(chunk_size=1):
        buf.extend(chunk)
        if time.monotonic() > deadline:
            return None
    return bytes(buf)


def _json_object(body: bytes) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(body.decode("utf-8"))
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class OllamaClient:
    """
    Thin HTTP client for a local Ollama server.

    probe()    -> GET  /api/tags      (bool, never raises)
    generate() -> POST /api/generate  (GenerationResult, never raises)

    requests' timeout bounds connect and the first byte; the body is read
    against an overall deadline of the same length.
    """

    def __init__(self, config: OllamaConfig | None = None) -> None:
        self.config = config or OllamaConfig()

    @property
    def model(self) -> str:
        return self.config.model

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{path}"

    def probe(self) -> bool:
        url = self._url("/api/tags")
        timeout = self.config.probe_timeout
        deadline = time.monotonic() + timeout
        try:
            with requests.get(url, timeout=timeout, stream=True) as r:
                if not _is_success(r):
                    log.info("Ollama probe returned HTTP %d", r.status_code)
                    return False
                body = _read_body(r, deadline)
        except requests.RequestException as e:
            log.info("Ollama unreachable at %s: %s", url, e.__class__.__name__)
            return False

        if body is None:
            log.info("Ollama reachability check exceeded %.1fs", timeout)
            return False
        if _json_object(body) is None:
            log.info("Ollama probe returned a non-object body")
            return False

        log.debug("Ollama reachable at %s", url)
        return True

    def generate(self, prompt: str) -> GenerationResult:
        payload = {
            "model": self.config.model,
            "prompt": prompt,
            "stream": False,
        }
        timeout = self.config.generate_timeout
        deadline = time.monotonic() + timeout
        try:
            with requests.post(
                self._url("/api/generate"),
                json=payload,
                timeout=timeout,
                stream=True,
            ) as r:
                if not _is_success(r):
                    return GenerationFailure(reason=f"HTTP {r.status_code}")
                body = _read_body(r, deadline)
        except requests.Timeout:
            return GenerationFailure(reason="timeout")
        except requests.RequestException as e:
            return GenerationFailure(reason=f"request error: {e.__class__.__name__}")

        if body is None:
            return GenerationFailure(reason="timeout")

        data = _json_object(body)
        if data is None:
            return GenerationFailure(reason="malformed payload")

        text = data.get("response")
        if not isinstance(text, str) or not text.strip():
            return GenerationFailure(reason="empty or missing 'response' field")

        log.debug("Ollama generated %d chars with model=%s", len(text), self.config.model)
        return GenerationSuccess(text=text.strip(), model=self.config.model)
