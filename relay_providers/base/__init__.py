"""
Providers Base Package

Provider-agnostic contracts shared by every adapter:
- Models: the canonical request/response/chunk schema
- Interfaces: provider, embedding and model-listing protocols
- Errors: the closed error taxonomy and status classification
- Streaming: stream reconstruction and the chunk/error channels
- Factory: lazy creation of provider adapters by canonical name
"""

from .capabilities import Capabilities
from .cancellation import CancellationToken, CancelledError
from .dto import ProviderConfig
from .errors import ErrorCode, ProviderError
from .factory import ProviderFactory, UnknownProviderError, create_provider
from .interfaces import EmbeddingProvider, ErrorConverter, ModelLister, Provider
from .models import (
    ChatCompletion,
    ChatCompletionChunk,
    CompletionParams,
    ContentPart,
    EmbeddingParams,
    EmbeddingResponse,
    FinishReason,
    Message,
    ModelInfo,
    ModelsResponse,
    Tool,
    ToolCall,
    Usage,
)
from .streaming import ChunkStream, StreamMetrics, StreamState

__all__ = [
    # Models
    "ChatCompletion",
    "ChatCompletionChunk",
    "CompletionParams",
    "ContentPart",
    "EmbeddingParams",
    "EmbeddingResponse",
    "FinishReason",
    "Message",
    "ModelInfo",
    "ModelsResponse",
    "Tool",
    "ToolCall",
    "Usage",
    # Interfaces
    "Provider",
    "EmbeddingProvider",
    "ModelLister",
    "ErrorConverter",
    "Capabilities",
    # Errors
    "ErrorCode",
    "ProviderError",
    # Construction
    "ProviderConfig",
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
    # Streaming
    "CancellationToken",
    "CancelledError",
    "ChunkStream",
    "StreamMetrics",
    "StreamState",
]
