"""Image generation configuration defaults."""

from __future__ import annotations

from typing import Dict, Tuple

DEFAULT_MODEL = "gemini-3-pro-image-preview"
DEFAULT_ASPECT_RATIO = "1:1"
DEFAULT_IMAGE_SIZE = "1K"
DEFAULT_RESPONSE_MODALITIES: Tuple[str, ...] = ("TEXT", "IMAGE")
DEFAULT_ENABLE_SEARCH_GROUNDING = False

SUPPORTED_ASPECT_RATIOS: Tuple[str, ...] = (
    "1:1",
    "2:3",
    "3:2",
    "3:4",
    "4:3",
    "4:5",
    "5:4",
    "9:16",
    "16:9",
    "21:9",
)
SUPPORTED_IMAGE_SIZES: Tuple[str, ...] = ("1K", "2K", "4K")

# Width/height units per aspect ratio
ASPECT_RATIO_DIMENSIONS: Dict[str, Dict[str, int]] = {
    "1:1": {"width": 1, "height": 1},
    "2:3": {"width": 2, "height": 3},
    "3:2": {"width": 3, "height": 2},
    "3:4": {"width": 3, "height": 4},
    "4:3": {"width": 4, "height": 3},
    "4:5": {"width": 4, "height": 5},
    "5:4": {"width": 5, "height": 4},
    "9:16": {"width": 9, "height": 16},
    "16:9": {"width": 16, "height": 9},
    "21:9": {"width": 21, "height": 9},
}

# Longest edge in pixels
IMAGE_SIZE_PIXELS: Dict[str, int] = {
    "1K": 1024,
    "2K": 2048,
    "4K": 4096,
}

# Retry behaviour for overloaded service responses (seconds)
DEFAULT_MAX_RETRIES = 3
DEFAULT_INITIAL_DELAY = 2.0
DEFAULT_BACKOFF_MULTIPLIER = 2.0

__all__ = [
    "ASPECT_RATIO_DIMENSIONS",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_ENABLE_SEARCH_GROUNDING",
    "DEFAULT_IMAGE_SIZE",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MODEL",
    "DEFAULT_RESPONSE_MODALITIES",
    "IMAGE_SIZE_PIXELS",
    "SUPPORTED_ASPECT_RATIOS",
    "SUPPORTED_IMAGE_SIZES",
]
