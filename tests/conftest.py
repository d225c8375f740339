"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# AnyIO's plugin drives the ``@pytest.mark.anyio`` tests even when plugin
# auto-discovery is disabled through ``PYTEST_DISABLE_PLUGIN_AUTOLOAD``.
pytest_plugins = ("anyio",)

# Make ``import gemini_images`` work from a plain checkout.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from helpers.gemini_fakes import FakeGenaiClient, SleepRecorder  # noqa: E402

_API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_AI_STUDIO_KEY", "GOOGLE_API_KEY")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clear_api_keys(monkeypatch):
    for key in _API_KEY_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def fake_client() -> FakeGenaiClient:
    return FakeGenaiClient()
