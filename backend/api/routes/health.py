# backend/api/routes/health.py
from __future__ import annotations

import logging
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from backend.ai_engine import availability_mode
from backend.api.schemas import HealthResponse

router = APIRouter(tags=["health"])
log = logging.getLogger("foliochat.routes.health")


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """
    Readiness with the reply mode a chat request would get right now.
    Probes the backend on every call; nothing is cached.
    """
    backend = request.app.state.backend
    mode = await run_in_threadpool(availability_mode, backend)
    return HealthResponse(status="ok", mode=mode)


@router.get("/healthz")
async def healthz() -> dict:
    """Process liveness only; does not touch the backend."""
    return {"status": "ok"}
