# backend/api/schemas.py
from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, ConfigDict


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ErrorResponse(_StrictModel):
    error: str


class ChatRequest(BaseModel):
    # Widgets may send extra keys (session ids, etc.); ignore them.
    model_config = ConfigDict(extra="ignore")

    message: str | None = None


class ChatResponse(_StrictModel):
    reply: str
    mode: Literal["ai-powered", "rule-based"]
    model: str | None = None


class HealthResponse(_StrictModel):
    status: Literal["ok"] = "ok"
    mode: Literal["ai-powered", "rule-based"]
