"""Gemini request assembly, config resolution and response parsing."""

from . import options, requests, responses

__all__ = ["options", "requests", "responses"]
