"""Pillow helpers shared by the attachment embedder and the signature renderer."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from PIL import Image

PDF_SIGNATURE = b"%PDF-"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"
TIFF_SIGNATURES = (b"II*\x00", b"MM\x00*")


@dataclass(frozen=True)
class EncodedImage:
    """Image bytes re-encoded for placement, with their pixel geometry."""

    data: bytes = field(repr=False)
    fmt: str
    width_px: int
    height_px: int
    dpi: float

    @property
    def width_pt(self) -> float:
        return self.width_px * 72.0 / self.dpi

    @property
    def height_pt(self) -> float:
        return self.height_px * 72.0 / self.dpi


def looks_like_pdf(payload: bytes) -> bool:
    return payload.lstrip()[:5] == PDF_SIGNATURE


def encode_image(
    payload: bytes,
    fmt: str = "PNG",
    *,
    default_dpi: float = 96.0,
    jpeg_quality: int = 90,
) -> EncodedImage:
    """Decode *payload* with Pillow and re-encode it as PNG or JPEG.

    Raises whatever Pillow raises for unreadable data; callers decide how to
    degrade.
    """
    with Image.open(io.BytesIO(payload)) as image:
        image.load()
        dpi_info = image.info.get("dpi")
        dpi = float(dpi_info[0]) if dpi_info and dpi_info[0] else default_dpi
        width, height = image.size
        if fmt == "JPEG":
            converted = image.convert("RGB")
        elif image.mode not in ("RGB", "RGBA", "L", "LA"):
            converted = image.convert("RGBA")
        else:
            converted = image
        buffer = io.BytesIO()
        if fmt == "JPEG":
            converted.save(buffer, format="JPEG", quality=jpeg_quality)
        else:
            converted.save(buffer, format="PNG")
    return EncodedImage(
        data=buffer.getvalue(), fmt=fmt, width_px=width, height_px=height, dpi=dpi
    )
