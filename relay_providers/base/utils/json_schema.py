"""JSON-schema to JSON-object degradation for backends without schema decoding.

Backends that support JSON mode but not schema-constrained decoding still
honour ``json_schema`` requests if the schema is spelled out in the prompt.
`degrade_json_schema` rewrites the last user message to carry the schema and
switches the response format to ``json_object``. Whenever that rewrite is not
possible the params come back unchanged.
"""
from __future__ import annotations

import json
from typing import Optional, Tuple

from ..models import (
    CompletionParams,
    Message,
    ResponseFormat,
    ROLE_USER,
    RESPONSE_FORMAT_JSON_OBJECT,
    RESPONSE_FORMAT_JSON_SCHEMA,
)

SCHEMA_PROMPT_TEMPLATE = (
    "Please respond with a JSON object that matches the following schema:\n\n"
    "{schema}\n\n"
    "Return the JSON object only, no other text, do not wrap it in ```json or ```.\n\n"
    "{content}"
)


def _inject_schema(messages: Tuple[Message, ...], schema: dict) -> Optional[Tuple[Message, ...]]:
    last_user = next(
        (i for i in range(len(messages) - 1, -1, -1) if messages[i].role == ROLE_USER),
        None,
    )
    if last_user is None:
        return None
    target = messages[last_user]
    if target.is_multimodal():
        return None
    try:
        schema_json = json.dumps(schema, indent=2)
    except (TypeError, ValueError):
        return None
    content = SCHEMA_PROMPT_TEMPLATE.format(schema=schema_json, content=target.content_string())
    patched = list(messages)
    patched[last_user] = target.model_copy(update={"content": content})
    return tuple(patched)


def degrade_json_schema(params: CompletionParams) -> CompletionParams:
    """Return params with a ``json_schema`` format folded into the prompt.

    Applies only to ``json_schema`` requests that carry a schema. Needs a last
    user message with plain-string content and a JSON-serializable schema;
    otherwise ``params`` is returned as is. The input is never mutated.
    """
    fmt = params.response_format
    if fmt is None or fmt.type != RESPONSE_FORMAT_JSON_SCHEMA or fmt.json_schema is None:
        return params
    messages = _inject_schema(params.messages, fmt.json_schema.schema_)
    if messages is None:
        return params
    return params.model_copy(
        update={
            "messages": messages,
            "response_format": ResponseFormat(type=RESPONSE_FORMAT_JSON_OBJECT),
        }
    )


__all__ = ["degrade_json_schema", "SCHEMA_PROMPT_TEMPLATE"]
