# backend/core/__init__.py
from .ports import BackendProber, TextGenerator, ChatBackend

__all__ = ["BackendProber", "TextGenerator", "ChatBackend"]
