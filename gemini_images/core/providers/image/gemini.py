"""Google Gemini image generation transport."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from google import genai
from google.genai import types  # type: ignore

from gemini_images.core.exceptions import MissingCredentialError, ProviderError

from .utils.gemini.requests import GeminiImageRequest

logger = logging.getLogger(__name__)

PROVIDER_NAME = "gemini_image"


class GeminiImageProvider:
    """Thin async wrapper around the synchronous ``google-genai`` client."""

    def __init__(self, api_key: Optional[str] = None, *, client: Any = None) -> None:
        if client is None:
            if not api_key:
                raise MissingCredentialError()
            client = genai.Client(api_key=api_key)

        self.client = client

    async def generate_content(self, request: GeminiImageRequest) -> Any:
        """Send a one-shot ``generate_content`` call."""

        logger.info(
            "Generating Gemini image with model=%s parts=%d",
            request.model,
            len(request.parts),
        )

        try:
            return await asyncio.to_thread(
                self.client.models.generate_content,
                model=request.model,
                contents=request.contents,
                config=request.config,
            )
        except ProviderError:
            raise
        except Exception as exc:
            logger.debug("Gemini image generation error: %s", exc)
            raise ProviderError(
                f"Gemini image error: {exc}",
                provider=PROVIDER_NAME,
                original_error=exc,
            ) from exc

    def create_chat(self, *, model: str, config: Optional[types.GenerateContentConfig] = None) -> Any:
        """Open a multi-turn chat; history is kept by the chat object."""

        logger.debug("Opening Gemini chat session with model=%s", model)
        return self.client.chats.create(model=model, config=config)

    async def send_message(self, chat: Any, message: Any) -> Any:
        """Send one turn on an existing chat."""

        try:
            return await asyncio.to_thread(chat.send_message, message)
        except ProviderError:
            raise
        except Exception as exc:
            logger.debug("Gemini chat message error: %s", exc)
            raise ProviderError(
                f"Gemini image error: {exc}",
                provider=PROVIDER_NAME,
                original_error=exc,
            ) from exc


__all__ = ["GeminiImageProvider", "PROVIDER_NAME"]
