"""Mistral provider adapter (OpenAI-compatible API).

Mistral differs from OpenAI in two ways handled before every call:

- a ``tool`` message directly followed by a ``user`` message is rejected, so
  an assistant ``"OK"`` turn is inserted between them;
- ``reasoning_effort`` and ``user`` are not accepted and are dropped
  (Magistral models reason without being asked).
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..base.capabilities import Capabilities
from ..base.models import CompletionParams, Message, ROLE_ASSISTANT, ROLE_TOOL, ROLE_USER
from ..base.openai_compat import CompatibleConfig, CompatibleProvider
from ..config.defaults import MISTRAL_DEFAULT_BASE_URL, MISTRAL_TOOL_BRIDGE_CONTENT

__all__ = ["MistralProvider", "MISTRAL_CAPABILITIES", "patch_messages"]

MISTRAL_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=True,
    image=True,
    pdf=False,
    embedding=True,
    list_models=True,
)


def patch_messages(messages: Sequence[Message]) -> Tuple[Message, ...]:
    """Insert an assistant bridge turn between each tool→user pair."""
    out: List[Message] = []
    for i, msg in enumerate(messages):
        out.append(msg)
        nxt = messages[i + 1] if i + 1 < len(messages) else None
        if msg.role == ROLE_TOOL and nxt is not None and nxt.role == ROLE_USER:
            out.append(Message(role=ROLE_ASSISTANT, content=MISTRAL_TOOL_BRIDGE_CONTENT))
    return tuple(out)


class MistralProvider(CompatibleProvider):
    compat = CompatibleConfig(
        name="mistral",
        default_base_url=MISTRAL_DEFAULT_BASE_URL,
        capabilities=MISTRAL_CAPABILITIES,
    )

    def prepare_params(self, params: CompletionParams) -> CompletionParams:
        return params.model_copy(
            update={
                "messages": patch_messages(params.messages),
                "reasoning_effort": None,
                "user": None,
            }
        )
