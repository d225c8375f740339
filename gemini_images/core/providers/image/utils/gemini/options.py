"""Configuration merging and capability validation for Gemini image requests."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from gemini_images.config.image.models import GROUNDING_FALLBACK_MODEL
from gemini_images.core.exceptions import (
    IncompatibleModalitiesError,
    UnsupportedResolutionError,
    UnsupportedSearchGroundingError,
    ValidationError,
)
from gemini_images.core.providers.registry import get_capabilities
from gemini_images.core.pydantic_schemas import GenerationConfig, ImageGenerationConfig

ConfigLayer = Union[ImageGenerationConfig, GenerationConfig, Mapping[str, Any], None]


def coerce_config(layer: ConfigLayer) -> Optional[ImageGenerationConfig]:
    """Turn a config layer into an ``ImageGenerationConfig`` (or ``None``).

    Invalid mappings raise ``ValidationError``, so ``merge_config`` only ever
    sees well-formed layers.
    """

    if layer is None:
        return None
    if isinstance(layer, ImageGenerationConfig):
        return layer
    if isinstance(layer, GenerationConfig):
        return ImageGenerationConfig(**layer.model_dump())
    try:
        return ImageGenerationConfig.model_validate(dict(layer))
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid image generation config: {exc}", field="config") from exc


def merge_config(base: ConfigLayer = None, override: ConfigLayer = None) -> GenerationConfig:
    """Merge ``override`` over ``base`` over the hardcoded defaults, field by field."""

    merged: dict[str, Any] = {}
    for layer in (coerce_config(base), coerce_config(override)):
        if layer is not None:
            merged.update(layer.model_dump(exclude_none=True))
    return GenerationConfig(**merged)


def validate_config(model: str, config: ConfigLayer) -> None:
    """Check ``config`` against the capabilities of ``model``.

    Checks run in a fixed order and the first failure is raised:
    image size, search grounding support, grounding with image-only output.
    Fields absent from a partial config are not checked.
    """

    capabilities = get_capabilities(model)
    layer = coerce_config(config) or ImageGenerationConfig()

    if layer.image_size and not capabilities.supports_size(layer.image_size):
        raise UnsupportedResolutionError(model, layer.image_size, capabilities.supported_sizes)

    if layer.enable_search_grounding and not capabilities.supports_search_grounding:
        raise UnsupportedSearchGroundingError(model, suggested_model=GROUNDING_FALLBACK_MODEL)

    if layer.enable_search_grounding and layer.is_image_only:
        raise IncompatibleModalitiesError(layer.response_modalities or ())


__all__ = ["ConfigLayer", "coerce_config", "merge_config", "validate_config"]
