"""Alias mapping for Gemini image models."""

from __future__ import annotations

from .models import FLASH_IMAGE_MODEL, PRO_IMAGE_MODEL

# Friendly names accepted wherever a model identifier is expected
IMAGE_MODEL_ALIASES: dict[str, str] = {
    "flash": FLASH_IMAGE_MODEL,
    "gemini": FLASH_IMAGE_MODEL,
    "gemini-flash": FLASH_IMAGE_MODEL,
    "gemini_flash": FLASH_IMAGE_MODEL,
    "nano-banana": FLASH_IMAGE_MODEL,
    "pro": PRO_IMAGE_MODEL,
    "gemini-pro": PRO_IMAGE_MODEL,
    "nano-banana-pro": PRO_IMAGE_MODEL,
}

__all__ = ["IMAGE_MODEL_ALIASES"]
