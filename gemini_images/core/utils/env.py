"""Common environment helpers used across the library."""

from __future__ import annotations

import os

from gemini_images.core.exceptions import ConfigurationError

__all__ = ["get_env", "get_first_env", "parse_bool_env"]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_first_env(*keys: str) -> str | None:
    """Return the first non-empty value among ``keys``."""

    for key in keys:
        value = (get_env(key) or "").strip()
        if value:
            return value
    return None


def parse_bool_env(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off", ""}:
        return False
    raise ConfigurationError(f"Invalid boolean environment variable value: {value}")
