"""Signatory variants.

A signatory either carries a registered signature image or falls back to a
stylized text rendering of the name. The ``kind`` tag keeps the renderer's
branch exhaustive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ImageSignatory:
    id: str
    name: str
    title: str
    image: bytes = field(repr=False)
    kind: Literal["image"] = "image"


@dataclass(frozen=True)
class TextSignatory:
    id: str
    name: str
    title: str
    kind: Literal["text_fallback"] = "text_fallback"


Signatory = Union[ImageSignatory, TextSignatory]


def fallback_signatory(
    name: str = "Authorized Signatory",
    title: str = "Authorized Representative",
) -> TextSignatory:
    """The identity used when no directory record can be resolved."""
    return TextSignatory(id="fallback", name=name, title=title)


def as_text(signatory: Signatory) -> TextSignatory:
    """Drop the image from a signatory, keeping its identity."""
    return TextSignatory(id=signatory.id, name=signatory.name, title=signatory.title)


class SignatoryRecord(BaseModel):
    """On-disk shape of a directory entry."""

    id: str
    name: str
    title: str
    is_default: bool = False
    signature_image: Optional[str] = Field(
        default=None, description="Path to a PNG/JPEG signature, relative to the directory file"
    )
