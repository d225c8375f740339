"""Gemini image model capability table."""

from __future__ import annotations

from typing import Dict

from gemini_images.core.providers.capabilities import ModelCapabilities

FLASH_IMAGE_MODEL = "gemini-2.5-flash-image"
PRO_IMAGE_MODEL = "gemini-3-pro-image-preview"

MODEL_CAPABILITIES: Dict[str, ModelCapabilities] = {
    FLASH_IMAGE_MODEL: ModelCapabilities(
        alias="Flash",
        max_resolution="1K",
        supported_sizes=("1K",),
        max_reference_images=1,
        supports_search_grounding=False,
        supports_text_rendering=False,
    ),
    PRO_IMAGE_MODEL: ModelCapabilities(
        alias="Pro",
        max_resolution="4K",
        supported_sizes=("1K", "2K", "4K"),
        max_reference_images=14,
        supports_search_grounding=True,
        supports_text_rendering=True,
    ),
}

# Suggested replacement when a feature is missing on the requested model
GROUNDING_FALLBACK_MODEL = PRO_IMAGE_MODEL

__all__ = [
    "FLASH_IMAGE_MODEL",
    "GROUNDING_FALLBACK_MODEL",
    "MODEL_CAPABILITIES",
    "PRO_IMAGE_MODEL",
]
