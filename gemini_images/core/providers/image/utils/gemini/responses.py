"""Normalise Gemini ``generate_content`` responses into ``GenerationResult``."""

from __future__ import annotations

import base64
import logging
from typing import Any, Optional, Sequence

from gemini_images.core.pydantic_schemas import GenerationResult

logger = logging.getLogger(__name__)


def _first_candidate_parts(response: Any) -> Optional[Sequence[Any]]:
    """Return the parts of candidate 0, or ``None`` when there are no candidates.

    Later candidates are ignored on purpose; one image per call is expected.
    """

    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None

    if len(candidates) > 1:
        logger.debug("Ignoring %d additional candidates", len(candidates) - 1)

    content = getattr(candidates[0], "content", None)
    return getattr(content, "parts", None) or []


def _inline_bytes(data: Any) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    return base64.b64decode(data)


def parse_result(response: Any) -> GenerationResult:
    """Extract the first image and all text from ``response``."""

    parts = _first_candidate_parts(response)
    if parts is None:
        logger.info("Gemini returned no candidates")
        return GenerationResult(raw=response)

    image_data: Optional[bytes] = None
    mime_type: Optional[str] = None
    text: Optional[str] = None

    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and getattr(inline_data, "data", None):
            if image_data is None:
                image_data = _inline_bytes(inline_data.data)
                mime_type = getattr(inline_data, "mime_type", None)
            continue

        part_text = getattr(part, "text", None)
        if part_text:
            text = (text or "") + part_text

    return GenerationResult(image_data=image_data, mime_type=mime_type, text=text, raw=response)


__all__ = ["parse_result"]
