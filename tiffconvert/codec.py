"""Pillow-backed image codec: metadata probe and JPEG encoding."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import CodecError
from .models import ImageInfo

log = logging.getLogger(__name__)

FLATTEN_BACKGROUND = (255, 255, 255)


def _to_rgb(img: Image.Image) -> Image.Image:
    """Return an RGB copy of *img*, compositing any alpha onto white."""
    if img.mode in ("RGBA", "LA") or "transparency" in img.info:
        rgba = img.convert("RGBA")
        background = Image.new("RGB", rgba.size, FLATTEN_BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


class PillowCodec:
    """Decode images and re-encode them as JPEG with Pillow."""

    def probe(self, path: Path) -> ImageInfo:
        """Read the encoded format and size of *path* without decoding pixels."""
        try:
            with Image.open(path) as img:
                return ImageInfo(
                    format=(img.format or "").lower(),
                    width=img.width,
                    height=img.height,
                )
        except (UnidentifiedImageError, OSError) as exc:
            raise CodecError(f"Cannot read image metadata for {path}: {exc}") from exc

    def encode_jpeg(self, src: Path, dest: Path, quality: int) -> Path:
        """Write the first frame of *src* to *dest* as a JPEG."""
        try:
            with Image.open(src) as img:
                img.seek(0)
                rgb = _to_rgb(img)
                rgb.save(dest, "JPEG", quality=quality)
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise CodecError(f"JPEG encoding failed for {src}: {exc}") from exc
        log.debug("encode_jpeg: %s -> %s (quality=%s)", src.name, dest, quality)
        return dest
