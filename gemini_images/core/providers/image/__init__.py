"""Image generation transport."""

from .gemini import GeminiImageProvider

__all__ = ["GeminiImageProvider"]
