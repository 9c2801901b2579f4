"""Helpers for turning local images into Messages API content blocks."""

from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PNG_MEDIA_TYPE = "image/png"
JPEG_MEDIA_TYPE = "image/jpeg"


def resolve_image_path(image_uri: str) -> Path:
    """Map a plain path or ``file://`` URI to a filesystem path."""

    if image_uri.startswith("file://"):
        return Path(unquote(urlparse(image_uri).path))
    return Path(image_uri)


def resolve_media_type(image_uri: str) -> str:
    """``.png`` (any case) is PNG; everything else is sent as JPEG."""

    suffix = resolve_image_path(image_uri).suffix.lower()
    return PNG_MEDIA_TYPE if suffix == ".png" else JPEG_MEDIA_TYPE


async def read_image_base64(image_uri: str) -> str:
    """Read the image at ``image_uri`` and return its base64 encoding."""

    path = resolve_image_path(image_uri)
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        logger.warning("Unable to read image %s: %s", path, exc)
        raise ValidationError(f"Unable to read image: {image_uri}", field="image_uri") from exc
    return base64.b64encode(data).decode("ascii")


__all__ = [
    "JPEG_MEDIA_TYPE",
    "PNG_MEDIA_TYPE",
    "read_image_base64",
    "resolve_image_path",
    "resolve_media_type",
]
