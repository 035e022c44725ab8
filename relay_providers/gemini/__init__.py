"""Google Gemini provider package."""

from .client import GEMINI_CAPABILITIES, GeminiProvider

__all__ = ["GeminiProvider", "GEMINI_CAPABILITIES"]
