# backend/ai_engine.py
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal, Optional, Sequence

from backend.core.ports import ChatBackend
from backend.llm.ollama_client import GenerationFailure, GenerationSuccess
from backend.rules import RULES, Rule, match_rule

log = logging.getLogger("foliochat.resolver")

Mode = Literal["ai-powered", "rule-based"]
MODE_AI: Mode = "ai-powered"
MODE_RULES: Mode = "rule-based"


@dataclass(frozen=True)
class ChatResult:
    reply: str
    mode: Mode
    model: Optional[str] = None


def build_prompt(persona: str, message: str) -> str:
    return f"{persona.strip()}\n\nUser: {message}\n\nAssistant:"


def availability_mode(backend: ChatBackend) -> Mode:
    return MODE_AI if backend.probe() else MODE_RULES


class ReplyResolver:
    """
    Picks the reply for one chat message.

    The backend is probed on every call. When it answers, the message goes to
    the model with the persona prompt; any generation failure drops through to
    the rule table, which always produces a reply. ``mode`` on the result names
    the path that actually produced the text.
    """

    def __init__(
        self,
        backend: ChatBackend,
        persona: str,
        rules: Sequence[Rule] = RULES,
    ) -> None:
        self.backend = backend
        self.persona = persona
        self.rules = rules

    def resolve(self, message: str) -> ChatResult:
        if self.backend.probe():
            result = self.backend.generate(build_prompt(self.persona, message))
            if isinstance(result, GenerationSuccess):
                return ChatResult(reply=result.text, mode=MODE_AI, model=result.model)
            if isinstance(result, GenerationFailure):
                log.warning("Ollama generation failed (%s); using rule table.", result.reason)
        else:
            log.debug("Backend unavailable; using rule table.")

        rule = match_rule(message, self.rules)
        log.debug("Rule matched: %s", rule.name)
        return ChatResult(reply=rule.reply, mode=MODE_RULES)
