"""Async Python client for Gemini image generation models."""

from gemini_images.core.exceptions import (
    ConfigurationError,
    IncompatibleModalitiesError,
    MissingCredentialError,
    ProviderError,
    RetryExhaustedError,
    ServiceError,
    SessionClosedError,
    TooManyReferenceImagesError,
    UnknownModelError,
    UnsupportedResolutionError,
    UnsupportedSearchGroundingError,
    ValidationError,
)
from gemini_images.core.providers.capabilities import ModelCapabilities
from gemini_images.core.providers.registry import get_capabilities, resolve_model_name
from gemini_images.core.pydantic_schemas import (
    GenerationConfig,
    GenerationResult,
    ImageEditRequest,
    ImageGenerationConfig,
    ImageInput,
    ImageMetadata,
    MultiImageRequest,
    RetryPolicy,
    TextToImageRequest,
)
from gemini_images.features.image import (
    GeminiImageGenerator,
    PromptTemplates,
    RefinementSession,
    create_generator,
    load_image,
    load_images,
    save_image_to_file,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GeminiImageGenerator",
    "GenerationConfig",
    "GenerationResult",
    "ImageEditRequest",
    "ImageGenerationConfig",
    "ImageInput",
    "ImageMetadata",
    "IncompatibleModalitiesError",
    "MissingCredentialError",
    "ModelCapabilities",
    "MultiImageRequest",
    "PromptTemplates",
    "ProviderError",
    "RefinementSession",
    "RetryExhaustedError",
    "RetryPolicy",
    "ServiceError",
    "SessionClosedError",
    "TextToImageRequest",
    "TooManyReferenceImagesError",
    "UnknownModelError",
    "UnsupportedResolutionError",
    "UnsupportedSearchGroundingError",
    "ValidationError",
    "create_generator",
    "get_capabilities",
    "load_image",
    "load_images",
    "resolve_model_name",
    "save_image_to_file",
]
