"""Canonical data model parts (one concern per module).

Prefer importing from `relay_providers.base.models` for the stable surface.
"""

from .content_part import ContentPart, ContentPartType, FileData, ImageURL
from .tool import (
    FunctionCall,
    FunctionDefinition,
    Tool,
    ToolCall,
    ToolChoice,
    ToolChoiceFunction,
    ToolChoiceParam,
)
from .message import (
    Message,
    Reasoning,
    Role,
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_TOOL,
    ROLE_USER,
)
from .completion_params import (
    CompletionParams,
    JSONSchema,
    ReasoningEffort,
    ResponseFormat,
    StreamOptions,
    RESPONSE_FORMAT_JSON_OBJECT,
    RESPONSE_FORMAT_JSON_SCHEMA,
    RESPONSE_FORMAT_TEXT,
)
from .chat_completion import (
    ChatCompletion,
    ChatCompletionChunk,
    Choice,
    ChunkChoice,
    ChunkDelta,
    FinishReason,
    Usage,
    OBJECT_CHAT_COMPLETION,
    OBJECT_CHAT_COMPLETION_CHUNK,
)
from .embedding import EmbeddingData, EmbeddingParams, EmbeddingResponse
from .model_info import ModelInfo, ModelsResponse

__all__ = [
    "ContentPart",
    "ContentPartType",
    "FileData",
    "ImageURL",
    "FunctionCall",
    "FunctionDefinition",
    "Tool",
    "ToolCall",
    "ToolChoice",
    "ToolChoiceFunction",
    "ToolChoiceParam",
    "Message",
    "Reasoning",
    "Role",
    "ROLE_ASSISTANT",
    "ROLE_SYSTEM",
    "ROLE_TOOL",
    "ROLE_USER",
    "CompletionParams",
    "JSONSchema",
    "ReasoningEffort",
    "ResponseFormat",
    "StreamOptions",
    "RESPONSE_FORMAT_JSON_OBJECT",
    "RESPONSE_FORMAT_JSON_SCHEMA",
    "RESPONSE_FORMAT_TEXT",
    "ChatCompletion",
    "ChatCompletionChunk",
    "Choice",
    "ChunkChoice",
    "ChunkDelta",
    "FinishReason",
    "Usage",
    "OBJECT_CHAT_COMPLETION",
    "OBJECT_CHAT_COMPLETION_CHUNK",
    "EmbeddingData",
    "EmbeddingParams",
    "EmbeddingResponse",
    "ModelInfo",
    "ModelsResponse",
]
