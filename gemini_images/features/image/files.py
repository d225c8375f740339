"""Load reference images and persist generated ones.

Reference images come from local files or http(s) URLs. Generated images are
written under the extension matching their actual bytes, optionally with a
Markdown metadata document next to them.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import urlparse

import httpx

from gemini_images.core.exceptions import ProviderError, ValidationError
from gemini_images.core.pydantic_schemas import GenerationResult, ImageInput, ImageMetadata

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MIME_TYPES_BY_EXTENSION: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}
DEFAULT_MIME_TYPE = "image/jpeg"
IMAGE_EXTENSIONS = tuple(MIME_TYPES_BY_EXTENSION)

DOWNLOAD_TIMEOUT_SECONDS = 30


def mime_type_for_path(path: PathLike) -> str:
    """Map a file extension to its MIME type, defaulting to JPEG."""

    return MIME_TYPES_BY_EXTENSION.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def _normalise_content_type(content_type: str) -> str:
    if "jpeg" in content_type or "jpg" in content_type:
        return "image/jpeg"
    if "webp" in content_type:
        return "image/webp"
    if "gif" in content_type:
        return "image/gif"
    if "png" in content_type:
        return "image/png"
    return DEFAULT_MIME_TYPE


def is_url(source: str) -> bool:
    return urlparse(str(source)).scheme in {"http", "https"}


async def load_image_from_file(path: PathLike) -> ImageInput:
    """Read ``path`` into an ``ImageInput``."""

    file_path = Path(path)
    data = await asyncio.to_thread(file_path.read_bytes)
    mime_type = mime_type_for_path(file_path)
    logger.debug("Loaded reference image %s (%s, %d bytes)", file_path, mime_type, len(data))
    return ImageInput(data=data, mime_type=mime_type)


async def load_image_from_url(url: str) -> ImageInput:
    """Download ``url`` into an ``ImageInput``."""

    try:
        async with httpx.AsyncClient(timeout=DOWNLOAD_TIMEOUT_SECONDS) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("Failed to download reference image from %s: %s", url, exc)
        raise ProviderError(
            f"Failed to download reference image: {exc}",
            provider="http",
            original_error=exc,
        ) from exc

    content_type = response.headers.get("content-type", "")
    if content_type:
        mime_type = _normalise_content_type(content_type)
    else:
        mime_type = mime_type_for_path(urlparse(url).path)

    logger.debug("Downloaded reference image: %d bytes, mime_type=%s", len(response.content), mime_type)
    return ImageInput(data=response.content, mime_type=mime_type)


async def load_image(source: PathLike) -> ImageInput:
    if isinstance(source, str) and is_url(source):
        return await load_image_from_url(source)
    return await load_image_from_file(source)


async def load_images(sources: Iterable[PathLike]) -> list[ImageInput]:
    """Load every source concurrently; the result keeps the input order."""

    return list(await asyncio.gather(*(load_image(source) for source in sources)))


def detect_image_extension(data: bytes) -> str:
    """Return the extension matching the image signature, ``.jpg`` when unknown."""

    if data[:4] == b"\x89PNG":
        return ".png"
    if data[:3] == b"\xff\xd8\xff":
        return ".jpg"
    if data[8:12] == b"WEBP":
        return ".webp"
    return ".jpg"


def _format_timestamp(timestamp: str) -> str:
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def render_metadata_markdown(metadata: ImageMetadata) -> str:
    """Render ``metadata`` as the Markdown document stored beside an image."""

    lines = ["# Image Metadata", ""]

    if metadata.prompt:
        lines.extend(["## Prompt", "", metadata.prompt, ""])

    if metadata.model:
        lines.append(f"**Model:** {metadata.model}")

    specs = []
    if metadata.aspect_ratio:
        specs.append(f"Aspect Ratio: {metadata.aspect_ratio}")
    if metadata.image_size:
        specs.append(f"Size: {metadata.image_size}")
    if specs:
        lines.append(f"**Settings:** {', '.join(specs)}")

    if metadata.source_ids:
        lines.extend(["", "**Source Images:**"])
        lines.extend(f"- `{source_id}`" for source_id in metadata.source_ids)

    if metadata.timestamp:
        lines.extend(["", f"**Generated:** {_format_timestamp(metadata.timestamp)}"])

    return "\n".join(lines)


def save_image_to_file(
    result: GenerationResult,
    output_path: PathLike,
    metadata: Optional[ImageMetadata] = None,
) -> Path:
    """Write the generated image and return the path actually used.

    The extension of ``output_path`` is replaced by the one matching the image
    bytes; metadata goes to ``<stem>.md`` in the same directory.
    """

    if not result.image_data:
        raise ValidationError("No image data in result", field="image_data")

    requested = Path(output_path)
    image_path = requested.with_suffix(detect_image_extension(result.image_data))
    image_path.parent.mkdir(parents=True, exist_ok=True)
    image_path.write_bytes(result.image_data)
    logger.info("Image saved to %s", image_path)

    if metadata is not None:
        metadata_path = requested.with_suffix(".md")
        metadata_path.write_text(render_metadata_markdown(metadata), encoding="utf-8")
        logger.debug("Metadata saved to %s", metadata_path)

    return image_path


__all__ = [
    "DEFAULT_MIME_TYPE",
    "IMAGE_EXTENSIONS",
    "MIME_TYPES_BY_EXTENSION",
    "detect_image_extension",
    "is_url",
    "load_image",
    "load_image_from_file",
    "load_image_from_url",
    "load_images",
    "mime_type_for_path",
    "render_metadata_markdown",
    "save_image_to_file",
]
