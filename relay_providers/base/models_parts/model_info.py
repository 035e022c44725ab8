"""
Model listing DTOs.

`ModelsResponse.data` preserves the order in which the provider's SDK yielded
models across all pages.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


OBJECT_MODEL = "model"


class ModelInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    object: str = OBJECT_MODEL
    created: Optional[int] = None
    owned_by: Optional[str] = None


class ModelsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: str = "list"
    data: Tuple[ModelInfo, ...] = ()

    def ids(self) -> List[str]:
        return [m.id for m in self.data]


__all__ = ["ModelInfo", "ModelsResponse", "OBJECT_MODEL"]
