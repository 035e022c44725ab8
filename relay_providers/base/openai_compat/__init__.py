"""OpenAI-compatible base shared by OpenAI, DeepSeek, Mistral, Groq and llama.cpp."""

from .provider import CompatibleConfig, CompatibleProvider
from .errors import convert_openai_error
from .request import build_chat_kwargs
from .response import convert_completion
from .stream import OpenAIStreamTranslator

__all__ = [
    "CompatibleConfig",
    "CompatibleProvider",
    "OpenAIStreamTranslator",
    "build_chat_kwargs",
    "convert_completion",
    "convert_openai_error",
]
