"""Helpers for assembling Gemini image generation requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from google.genai import types  # type: ignore

from gemini_images.config.image.defaults import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_SIZE
from gemini_images.core.exceptions import TooManyReferenceImagesError, ValidationError
from gemini_images.core.providers.registry import get_capabilities, resolve_model_name
from gemini_images.core.pydantic_schemas import GenerationConfig, ImageInput

_SIZE_DIRECTIVES: dict[str, str] = {
    "2K": "High quality, 2K resolution, detailed",
    "4K": "Ultra high quality, 4K resolution, highly detailed",
}


@dataclass(frozen=True)
class GeminiImageRequest:
    """Resolved payload for a single ``generate_content`` call."""

    model: str
    parts: tuple[types.Part, ...]
    config: types.GenerateContentConfig

    @property
    def contents(self) -> list[types.Content]:
        return [types.Content(role="user", parts=list(self.parts))]


def enhance_prompt(prompt: str, config: GenerationConfig) -> str:
    """Append aspect ratio and resolution directives to ``prompt``.

    Returns ``prompt`` unchanged when the config asks for a square image at the
    base size.
    """

    enhancements: list[str] = []

    if config.aspect_ratio != DEFAULT_ASPECT_RATIO:
        enhancements.append(f"Aspect ratio: {config.aspect_ratio}")

    size_directive = _SIZE_DIRECTIVES.get(config.image_size)
    if size_directive:
        enhancements.append(size_directive)

    if not enhancements:
        return prompt

    return f"{prompt}\n\n[{', '.join(enhancements)}]"


def build_generate_content_config(config: GenerationConfig) -> types.GenerateContentConfig:
    """Create the ``GenerateContentConfig`` sent alongside the parts."""

    image_config_kwargs: dict[str, Any] = {"aspect_ratio": config.aspect_ratio}
    # The base size is the service default and the only one Flash accepts
    if config.image_size != DEFAULT_IMAGE_SIZE:
        image_config_kwargs["image_size"] = config.image_size

    config_kwargs: dict[str, Any] = {
        "response_modalities": list(config.response_modalities),
        "image_config": types.ImageConfig(**image_config_kwargs),
    }
    if config.enable_search_grounding:
        config_kwargs["tools"] = [types.Tool(google_search=types.GoogleSearch())]

    return types.GenerateContentConfig(**config_kwargs)


def build_image_part(image: ImageInput) -> types.Part:
    return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)


def build_text_part(text: str) -> types.Part:
    return types.Part.from_text(text=text)


def build_text_to_image_request(prompt: str, config: GenerationConfig) -> GeminiImageRequest:
    """Text-only request: a single, enhanced text part."""

    return GeminiImageRequest(
        model=resolve_model_name(config.model),
        parts=(build_text_part(enhance_prompt(prompt, config)),),
        config=build_generate_content_config(config),
    )


def build_edit_request(image: ImageInput, prompt: str, config: GenerationConfig) -> GeminiImageRequest:
    """Edit request: the image part always precedes the instruction."""

    return GeminiImageRequest(
        model=resolve_model_name(config.model),
        parts=(build_image_part(image), build_text_part(prompt)),
        config=build_generate_content_config(config),
    )


def ensure_reference_limit(images: Sequence[ImageInput], model: str) -> None:
    """Fail when ``images`` is empty or exceeds the model's reference limit."""

    if not images:
        raise ValidationError("At least one reference image is required", field="images")

    capabilities = get_capabilities(model)
    if len(images) > capabilities.max_reference_images:
        raise TooManyReferenceImagesError(model, capabilities.max_reference_images, len(images))


def build_compose_request(
    images: Sequence[ImageInput],
    prompt: str,
    config: GenerationConfig,
) -> GeminiImageRequest:
    """Compose request: every image in caller order, then the prompt."""

    ensure_reference_limit(images, config.model)

    parts = [build_image_part(image) for image in images]
    parts.append(build_text_part(prompt))

    return GeminiImageRequest(
        model=resolve_model_name(config.model),
        parts=tuple(parts),
        config=build_generate_content_config(config),
    )


__all__ = [
    "GeminiImageRequest",
    "build_compose_request",
    "build_edit_request",
    "build_generate_content_config",
    "build_image_part",
    "build_text_part",
    "build_text_to_image_request",
    "enhance_prompt",
    "ensure_reference_limit",
]
