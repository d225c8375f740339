"""Centralised logging configuration for the Gemini image client.

Library modules only create loggers; handlers are installed by
:func:`setup_logging`, which the CLI calls on start-up.
"""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Dict, Optional

from gemini_images.core.utils.env import get_env, parse_bool_env

_LOGGING_CONFIGURED = False

_NOISY_LOGGERS = (
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
    "httpx",
    "urllib3",
    "urllib3.connectionpool",
    "grpc",
    "google",
    "google.genai",
    "google_genai",
)


def _resolve_level(value: Optional[str], default: str) -> str:
    value = (value or "").strip().upper()
    if value and getattr(logging, value, None) is not None:
        return value
    return default


def setup_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger for console and optional file output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    log_level = _resolve_level(level or get_env("GEMINI_IMAGES_LOG_LEVEL"), "WARNING")

    handlers: Dict[str, object] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }
    root_handlers = ["console"]

    log_file = get_env("GEMINI_IMAGES_LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": _resolve_level(get_env("GEMINI_IMAGES_LOG_FILE_LEVEL"), log_level),
            "formatter": "standard",
            "filename": str(log_path),
            "when": "midnight",
            "backupCount": int(get_env("GEMINI_IMAGES_LOG_RETENTION", default="7") or "7"),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    if parse_bool_env(get_env("GEMINI_IMAGES_LOG_TIME_MS")):
        fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(name)s] - %(message)s"
    else:
        fmt = "%(asctime)s %(levelname)s [%(name)s] - %(message)s"

    config: Dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": root_handlers,
        },
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    # Transport libraries are chatty at INFO; keep them to warnings
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
