"""
Typed content parts for multimodal messages.

A message's content is either a plain string or an ordered tuple of
`ContentPart` items. Parts carry text, an image reference (URL or ``data:``
URL) or an inline file (used for PDF input by providers that accept it).
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


# Known content part types accepted by the canonical schema.
ContentPartType = Literal[
    "text",       # Plain text content
    "image_url",  # Image reference: https URL or base64 data URL
    "file",       # Inline file payload (e.g. application/pdf data URL)
]


class ImageURL(BaseModel):
    """Reference to an image, either remote (``https://``) or inline (``data:``)."""

    model_config = ConfigDict(frozen=True)

    url: str
    detail: Optional[str] = None

    def is_data_url(self) -> bool:
        """Return True when the image is embedded as a base64 data URL."""
        return self.url.startswith("data:")


class FileData(BaseModel):
    """Inline file payload carried as a ``data:<mime>;base64,<payload>`` URL."""

    model_config = ConfigDict(frozen=True)

    file_data: str
    filename: Optional[str] = None


class ContentPart(BaseModel):
    """A single piece of structured message content.

    Attributes:
        type: The semantic kind of the part.
        text: Text for ``"text"`` parts.
        image_url: Image reference for ``"image_url"`` parts.
        file: Inline file for ``"file"`` parts.
    """

    model_config = ConfigDict(frozen=True)

    type: ContentPartType
    text: Optional[str] = None
    image_url: Optional[ImageURL] = None
    file: Optional[FileData] = None

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def from_image_url(cls, url: str, detail: Optional[str] = None) -> "ContentPart":
        return cls(type="image_url", image_url=ImageURL(url=url, detail=detail))


__all__ = [
    "ContentPart",
    "ContentPartType",
    "FileData",
    "ImageURL",
]
