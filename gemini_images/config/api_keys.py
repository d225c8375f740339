"""API key resolution for the Gemini service."""

from __future__ import annotations

from gemini_images.core.exceptions import MissingCredentialError
from gemini_images.core.utils.env import get_first_env

# Checked in order after an explicitly supplied key
API_KEY_ENV_VARS: tuple[str, ...] = (
    "GEMINI_API_KEY",
    "GOOGLE_AI_STUDIO_KEY",
    "GOOGLE_API_KEY",
)


def load_api_key() -> str | None:
    """Return the first API key found in the environment."""

    return get_first_env(*API_KEY_ENV_VARS)


def resolve_api_key(explicit: str | None = None) -> str:
    """Return ``explicit`` when given, otherwise fall back to the environment."""

    if explicit and explicit.strip():
        return explicit.strip()

    api_key = load_api_key()
    if not api_key:
        raise MissingCredentialError()
    return api_key


__all__ = ["API_KEY_ENV_VARS", "load_api_key", "resolve_api_key"]
