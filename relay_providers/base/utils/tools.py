"""Tool-schema helpers shared by the request converters.

JSON-Schema ``required`` lists arrive as arbitrary JSON. A malformed list is
reported as an error naming the tool; it is never dropped silently.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..errors import ToolSchemaError
from ..models import Tool


def to_string_list(value: Any) -> List[str]:
    """Return ``value`` as a list of strings or raise ``TypeError``.

    Accepts lists and tuples whose elements are all strings. The message names
    the first offending element position and its type.
    """
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected list of strings, got {type(value).__name__}")
    out: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"element {i}: expected string, got {type(item).__name__}")
        out.append(item)
    return out


def required_fields(provider: str, tool: Tool) -> Optional[List[str]]:
    """Return the tool's ``required`` list, ``None`` when absent.

    Raises:
        ToolSchemaError: ``required`` is present but not a list of strings.
    """
    params: Dict[str, Any] = tool.function.parameters or {}
    if "required" not in params or params["required"] is None:
        return None
    try:
        return to_string_list(params["required"])
    except TypeError as exc:
        raise ToolSchemaError(
            provider,
            tool.function.name,
            f"invalid required field: {exc}",
        ) from exc



__all__ = ["required_fields", "to_string_list"]
