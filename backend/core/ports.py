# backend/core/ports.py
from __future__ import annotations
from typing import Protocol

from backend.llm.ollama_client import GenerationResult


class BackendProber(Protocol):
    def probe(self) -> bool: ...


class TextGenerator(Protocol):
    @property
    def model(self) -> str: ...

    def generate(self, prompt: str) -> GenerationResult: ...


class ChatBackend(BackendProber, TextGenerator, Protocol):
    """Anything that can both report reachability and generate text."""
