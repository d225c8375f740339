"""Utility helpers shared across core packages.

Only the environment helpers are re-exported; ``config.api_keys`` imports them
during package initialisation. Import :mod:`gemini_images.core.utils.retry`
directly.
"""

from .env import get_env, get_first_env, parse_bool_env

__all__ = ["get_env", "get_first_env", "parse_bool_env"]
