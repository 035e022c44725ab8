"""Provider factory.

Purpose
-------
Create provider adapters by canonical name. Adapter modules are imported
lazily with ``importlib`` so that importing the package does not import every
vendor SDK.

Failure modes
-------------
- Unknown name, import failure, missing class or bad constructor arguments
  raise :class:`UnknownProviderError`.
- Provider errors raised by the adapter constructor (e.g. a missing API key)
  propagate unchanged.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from .dto import ProviderConfig
from .errors import ProviderError


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or constructed."""


class ProviderFactory:
    """Create provider adapters from a canonical name (e.g. ``"openai"``)."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "relay_providers.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "relay_providers.anthropic.client", "class": "AnthropicProvider"},
        "gemini": {"module": "relay_providers.gemini.client", "class": "GeminiProvider"},
        "deepseek": {"module": "relay_providers.deepseek.client", "class": "DeepSeekProvider"},
        "mistral": {"module": "relay_providers.mistral.client", "class": "MistralProvider"},
        "groq": {"module": "relay_providers.groq.client", "class": "GroqProvider"},
        "llamacpp": {"module": "relay_providers.llamacpp.client", "class": "LlamaCppProvider"},
    }

    @classmethod
    def create(cls, provider: str, config: Optional[ProviderConfig] = None, **kwargs: Any) -> Any:
        """Create an adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name, case-insensitive.
        config:
            Optional construction settings.
        **kwargs:
            Forwarded to the adapter constructor (``client=`` or config
            field overrides).

        Raises
        ------
        UnknownProviderError
            Unknown name, import failure, missing class or invalid arguments.
        ProviderError
            The adapter rejected its configuration.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(config, **kwargs)
        except ProviderError:
            raise
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Canonical provider names in registration order."""
        return tuple(cls._PROVIDERS.keys())


def create_provider(provider: str, config: Optional[ProviderConfig] = None, **kwargs: Any) -> Any:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, config, **kwargs)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
