"""Generator facade: config resolution, request building, retries and parsing."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from gemini_images.config.api_keys import resolve_api_key
from gemini_images.core.exceptions import SessionClosedError, ValidationError
from gemini_images.core.providers.image.gemini import GeminiImageProvider
from gemini_images.core.providers.image.utils.gemini import options
from gemini_images.core.providers.image.utils.gemini import requests as request_utils
from gemini_images.core.providers.image.utils.gemini.responses import parse_result
from gemini_images.core.providers.registry import resolve_model_name
from gemini_images.core.pydantic_schemas import (
    GenerationConfig,
    GenerationResult,
    ImageEditRequest,
    ImageGenerationConfig,
    MultiImageRequest,
    RetryPolicy,
    TextToImageRequest,
)
from gemini_images.core.utils.retry import RetryExecutor

logger = logging.getLogger(__name__)


def _ensure_prompt(prompt: str) -> None:
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt cannot be empty", field="prompt")


class RefinementSession:
    """Multi-turn conversation used to iteratively refine a generated image.

    The remote chat keeps the history, so ``refine`` only sends the feedback.
    Use as an async context manager or call :meth:`close` when finished.
    """

    def __init__(
        self,
        *,
        chat: Any,
        result: GenerationResult,
        config: GenerationConfig,
        generator: "GeminiImageGenerator",
    ) -> None:
        self.chat = chat
        self.result = result
        self.config = config
        self.turns = 1
        self._generator = generator
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def refine(self, feedback: str) -> GenerationResult:
        """Send ``feedback`` on the existing conversation and return the new result."""

        if self._closed:
            raise SessionClosedError("Refinement session is closed")
        _ensure_prompt(feedback)

        chat = self.chat
        response = await self._generator.executor.execute(
            lambda: self._generator.provider.send_message(chat, feedback),
            "Refine image",
        )
        self.turns += 1
        self.result = parse_result(response)
        return self.result

    def close(self) -> None:
        """Drop the conversation handle."""

        if not self._closed:
            logger.debug("Closing refinement session after %d turns", self.turns)
        self._closed = True
        self.chat = None

    async def __aenter__(self) -> "RefinementSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


class GeminiImageGenerator:
    """Generate, edit and compose images with Gemini image models."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_config: Union[ImageGenerationConfig, Mapping[str, Any], None] = None,
        retry_config: Union[RetryPolicy, Mapping[str, Any], None] = None,
        *,
        client: Any = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        if client is None:
            api_key = resolve_api_key(api_key)

        self.default_config = options.coerce_config(default_config)
        if retry_config is None:
            self.retry_policy = RetryPolicy()
        elif isinstance(retry_config, RetryPolicy):
            self.retry_policy = retry_config
        else:
            self.retry_policy = RetryPolicy.model_validate(dict(retry_config))

        self.provider = GeminiImageProvider(api_key, client=client)
        self.executor = RetryExecutor(self.retry_policy, sleep=sleep)

    def resolve_config(self, override: Optional[ImageGenerationConfig] = None) -> GenerationConfig:
        """Merge ``override`` over the generator defaults."""

        return options.merge_config(self.default_config, override)

    def _resolve_and_validate(self, override: Optional[ImageGenerationConfig]) -> GenerationConfig:
        config = self.resolve_config(override)
        options.validate_config(config.model, config)
        return config

    async def _execute(self, request: request_utils.GeminiImageRequest, label: str) -> GenerationResult:
        response = await self.executor.execute(
            lambda: self.provider.generate_content(request),
            label,
        )
        return parse_result(response)

    async def generate_from_text(self, request: TextToImageRequest) -> GenerationResult:
        """Generate an image from a text prompt."""

        _ensure_prompt(request.prompt)
        config = self._resolve_and_validate(request.config)
        wire_request = request_utils.build_text_to_image_request(request.prompt, config)
        return await self._execute(wire_request, "Generate image from text")

    async def edit_image(self, request: ImageEditRequest) -> GenerationResult:
        """Edit an existing image."""

        _ensure_prompt(request.prompt)
        config = self._resolve_and_validate(request.config)
        wire_request = request_utils.build_edit_request(request.image, request.prompt, config)
        return await self._execute(wire_request, "Edit image")

    async def compose_from_multiple_images(self, request: MultiImageRequest) -> GenerationResult:
        """Generate an image from several reference images."""

        _ensure_prompt(request.prompt)
        config = self.resolve_config(request.config)
        # Reference limit is reported ahead of any other config problem
        request_utils.ensure_reference_limit(request.images, config.model)
        options.validate_config(config.model, config)
        wire_request = request_utils.build_compose_request(request.images, request.prompt, config)
        return await self._execute(wire_request, "Compose from multiple images")

    async def start_refinement_session(self, request: TextToImageRequest) -> RefinementSession:
        """Generate an initial image and keep the conversation open for refinement."""

        _ensure_prompt(request.prompt)
        config = self._resolve_and_validate(request.config)

        chat = self.provider.create_chat(
            model=resolve_model_name(config.model),
            config=request_utils.build_generate_content_config(config),
        )
        prompt = request_utils.enhance_prompt(request.prompt, config)
        response = await self.executor.execute(
            lambda: self.provider.send_message(chat, prompt),
            "Start refinement session",
        )
        return RefinementSession(
            chat=chat,
            result=parse_result(response),
            config=config,
            generator=self,
        )


def create_generator(
    api_key: Optional[str] = None,
    default_config: Union[ImageGenerationConfig, Mapping[str, Any], None] = None,
    retry_config: Union[RetryPolicy, Mapping[str, Any], None] = None,
) -> GeminiImageGenerator:
    """Build a generator, falling back to the environment for the API key."""

    return GeminiImageGenerator(
        api_key=resolve_api_key(api_key),
        default_config=default_config,
        retry_config=retry_config,
    )


__all__ = ["GeminiImageGenerator", "RefinementSession", "create_generator"]
