# ui/actions.py
from __future__ import annotations

from typing import List, Tuple

from ui.api import api_post_chat, api_get_health, mode_badge

History = List[Tuple[str, str]]


def update_history_display(history: History | None) -> str:
    """
    Render the flat [(role, message)] history as Markdown.
    Lives in browser session state only; the server keeps nothing.
    """
    if not history:
        return "_Ask about skills, services, rates or availability._"

    blocks: List[str] = []
    for role, message in history:
        if not message:
            continue
        who = "**You**" if role == "user" else "**Assistant**"
        blocks.append(f"{who}\n\n{message}")
    return "\n\n---\n\n".join(blocks)


def send_message(message: str, history: History | None):
    """
    Returns (textbox_value, history, chat_markdown, badge_html).
    Empty input is a no-op; server errors show up inline.
    """
    history = list(history or [])
    text = (message or "").strip()
    if not text:
        return "", history, update_history_display(history), mode_badge(None)

    data = api_post_chat(text)
    history.append(("user", text))
    if "error" in data:
        history.append(("assistant", f"⚠️ {data['error']}"))
        return "", history, update_history_display(history), mode_badge(None)

    history.append(("assistant", str(data.get("reply", ""))))
    return "", history, update_history_display(history), mode_badge(data.get("mode"))


def clear_history():
    return [], update_history_display([])


def refresh_mode() -> str:
    return mode_badge(api_get_health().get("mode"))
