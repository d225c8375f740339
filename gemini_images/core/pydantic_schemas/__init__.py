"""Public pydantic schema exports."""

from .image import (
    AspectRatio,
    GenerationConfig,
    GenerationResult,
    ImageEditRequest,
    ImageGenerationConfig,
    ImageInput,
    ImageMetadata,
    ImageSize,
    MultiImageRequest,
    ResponseModality,
    RetryPolicy,
    TextToImageRequest,
)

__all__ = [
    "AspectRatio",
    "GenerationConfig",
    "GenerationResult",
    "ImageEditRequest",
    "ImageGenerationConfig",
    "ImageInput",
    "ImageMetadata",
    "ImageSize",
    "MultiImageRequest",
    "ResponseModality",
    "RetryPolicy",
    "TextToImageRequest",
]
