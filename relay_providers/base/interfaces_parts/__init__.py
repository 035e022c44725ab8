from .provider import Provider
from .embedding_provider import EmbeddingProvider
from .model_lister import ModelLister
from .error_converter import ErrorConverter

__all__ = ["Provider", "EmbeddingProvider", "ModelLister", "ErrorConverter"]
