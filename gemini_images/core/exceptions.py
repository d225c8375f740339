"""Custom exception hierarchy for the Gemini image client.

Exception Handling Flow:
    1. Configuration problems are raised before any remote call is made
    2. Transport failures are wrapped in ``ProviderError`` by the provider
    3. The retry executor re-raises fatal errors untouched and converts a spent
       retry budget into ``RetryExhaustedError``
    4. Callers (CLI or library consumers) decide how to present the failure
"""

from __future__ import annotations

from typing import Iterable, Sequence


class ServiceError(Exception):
    """Base exception for all library errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class UnknownModelError(ConfigurationError):
    """Raised when a model identifier is outside the supported set."""

    def __init__(self, model: str, supported_models: Iterable[str] = ()):
        self.model = model
        self.supported_models = tuple(supported_models)
        message = f"Unknown model {model}."
        if self.supported_models:
            message += f" Supported models: {', '.join(self.supported_models)}"
        super().__init__(message, key="model")


class UnsupportedResolutionError(ConfigurationError):
    """Raised when the requested image size is not offered by the model."""

    def __init__(self, model: str, image_size: str, supported_sizes: Sequence[str]):
        self.model = model
        self.image_size = image_size
        self.supported_sizes = tuple(supported_sizes)
        super().__init__(
            f"Model {model} does not support {image_size} resolution. "
            f"Supported sizes: {', '.join(self.supported_sizes)}",
            key="image_size",
        )


class UnsupportedSearchGroundingError(ConfigurationError):
    """Raised when search grounding is requested on a model without it."""

    def __init__(self, model: str, suggested_model: str | None = None):
        self.model = model
        self.suggested_model = suggested_model
        message = f"Model {model} does not support Google Search grounding."
        if suggested_model:
            message += f" Use {suggested_model} instead."
        super().__init__(message, key="enable_search_grounding")


class IncompatibleModalitiesError(ConfigurationError):
    """Raised when search grounding is combined with image-only responses."""

    def __init__(self, response_modalities: Sequence[str]):
        self.response_modalities = tuple(response_modalities)
        super().__init__(
            "Google Search grounding is incompatible with image-only response mode. "
            "Include TEXT in response_modalities or disable search grounding.",
            key="response_modalities",
        )


class TooManyReferenceImagesError(ConfigurationError):
    """Raised when a compose request exceeds the model's reference image limit."""

    def __init__(self, model: str, limit: int, count: int):
        self.model = model
        self.limit = limit
        self.count = count
        super().__init__(
            f"Model {model} supports maximum {limit} reference images. "
            f"You provided {count}.",
            key="images",
        )


class MissingCredentialError(ConfigurationError):
    """Raised when no API key can be resolved."""

    def __init__(self, message: str | None = None, key: str | None = "GEMINI_API_KEY"):
        super().__init__(
            message
            or "Gemini API key is required. Provide it as a parameter or set "
            "GEMINI_API_KEY environment variable.",
            key=key,
        )


class ProviderError(ServiceError):
    """Raised when the remote generation service fails."""

    def __init__(self, message: str, provider: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)


class RetryExhaustedError(ProviderError):
    """Raised once every permitted attempt failed with a transient error."""

    def __init__(self, message: str, attempts: int, original_error: Exception | None = None, provider: str | None = None):
        super().__init__(message, provider=provider, original_error=original_error)
        self.attempts = attempts


class SessionClosedError(ServiceError):
    """Raised when a closed refinement session is used."""


__all__ = [
    "ConfigurationError",
    "IncompatibleModalitiesError",
    "MissingCredentialError",
    "ProviderError",
    "RetryExhaustedError",
    "ServiceError",
    "SessionClosedError",
    "TooManyReferenceImagesError",
    "UnknownModelError",
    "UnsupportedResolutionError",
    "UnsupportedSearchGroundingError",
    "ValidationError",
]
