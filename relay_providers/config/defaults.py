"""relay_providers.config.defaults
===============================

Stable default values used across the provider adapters. Plain constants
only; nothing here performs I/O or imports provider packages.
"""

from __future__ import annotations

# ---- OpenAI-compatible base URLs ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"
MISTRAL_DEFAULT_BASE_URL = "https://api.mistral.ai/v1/"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
LLAMACPP_DEFAULT_BASE_URL = "http://127.0.0.1:8080/v1"

# llama.cpp's server ignores the key but the OpenAI SDK requires one.
LLAMACPP_DUMMY_API_KEY = "llama-cpp-dummy-key"

# ---- Anthropic ----
# Messages API requires max_tokens; used when the request leaves it unset.
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096
# Extended thinking budget per reasoning effort tier.
ANTHROPIC_THINKING_BUDGETS = {
    "low": 1024,
    "medium": 4096,
    "high": 16384,
}
# max_tokens must exceed the thinking budget; raise it to this multiple.
ANTHROPIC_MAX_TOKENS_BUDGET_FACTOR = 2

# ---- Gemini ----
GEMINI_THINKING_BUDGETS = {
    "low": 1024,
    "medium": 8192,
    "high": 24576,
}
# Remote (non data:) image URLs carry no MIME type; assume JPEG.
GEMINI_DEFAULT_IMAGE_MIME = "image/jpeg"
GEMINI_FALLBACK_FUNCTION_NAME = "function"

# ---- Mistral ----
# Placeholder assistant turn inserted between a tool result and a user turn.
MISTRAL_TOOL_BRIDGE_CONTENT = "OK"

__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "MISTRAL_DEFAULT_BASE_URL",
    "GROQ_DEFAULT_BASE_URL",
    "LLAMACPP_DEFAULT_BASE_URL",
    "LLAMACPP_DUMMY_API_KEY",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "ANTHROPIC_THINKING_BUDGETS",
    "ANTHROPIC_MAX_TOKENS_BUDGET_FACTOR",
    "GEMINI_THINKING_BUDGETS",
    "GEMINI_DEFAULT_IMAGE_MIME",
    "GEMINI_FALLBACK_FUNCTION_NAME",
    "MISTRAL_TOOL_BRIDGE_CONTENT",
]
