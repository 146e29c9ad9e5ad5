# backend/api/routes/chat.py
from __future__ import annotations

import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from backend.ai_engine import ReplyResolver
from backend.api.errors import MESSAGE_REQUIRED, error_json
from backend.api.schemas import ChatRequest, ChatResponse, ErrorResponse

log = logging.getLogger("foliochat.routes.chat")
router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}},
)
async def chat_endpoint(payload: ChatRequest, request: Request) -> ChatResponse | JSONResponse:
    """
    Reply to one visitor message.
    Tries the local model first (fresh probe each call) and falls back to the
    canned rule table; backend trouble never surfaces as an error here.
    """
    text = (payload.message or "").strip()
    if not text:
        log.debug("Empty chat message rejected.")
        return error_json(400, MESSAGE_REQUIRED)

    resolver: ReplyResolver = request.app.state.resolver
    # probe + generate use blocking requests calls
    result = await run_in_threadpool(resolver.resolve, text)
    log.info("Chat reply | mode=%s chars=%d", result.mode, len(result.reply))
    return ChatResponse(reply=result.reply, mode=result.mode, model=result.model)
