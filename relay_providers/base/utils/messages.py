"""Message helpers shared by the converters.

Helpers here are pure: they read canonical `Message` values and never mutate
them.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..models import Message, ROLE_SYSTEM


def split_system_messages(messages: Sequence[Message]) -> Tuple[Optional[str], List[Message]]:
    """Separate system turns from the rest of the conversation.

    Returns ``(system_text, remaining)`` where ``system_text`` is every system
    message's text joined with ``"\\n"`` in order (``None`` when there is no
    system message) and ``remaining`` keeps the other messages in order.
    """
    system_parts: List[str] = []
    remaining: List[Message] = []
    for m in messages:
        if m.role == ROLE_SYSTEM:
            system_parts.append(m.content_string())
        else:
            remaining.append(m)
    system_text = "\n".join(system_parts) if system_parts else None
    return system_text, remaining


def parse_data_url(url: str) -> Optional[Tuple[str, str]]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    Returns ``None`` when ``url`` is not a data URL or lacks the comma.
    """
    if not url.startswith("data:"):
        return None
    header, sep, payload = url.partition(",")
    if not sep:
        return None
    mime = header[len("data:"):].split(";", 1)[0]
    return mime, payload


__all__ = ["split_system_messages", "parse_data_url"]
