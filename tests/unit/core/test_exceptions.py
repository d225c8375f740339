"""Unit tests for the exception hierarchy."""

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


def test_validation_error():
    """ValidationError should capture message and field."""

    error = ValidationError("Prompt cannot be empty", field="prompt")
    assert error.message == "Prompt cannot be empty"
    assert error.field == "prompt"
    assert isinstance(error, ServiceError)


def test_provider_error():
    """ProviderError should retain provider and original exception."""

    original = ValueError("API failed")
    error = ProviderError("Gemini image error", provider="gemini_image", original_error=original)

    assert error.message == "Gemini image error"
    assert error.provider == "gemini_image"
    assert error.original_error is original
    assert isinstance(error, ServiceError)


def test_retry_exhausted_error_is_provider_error():
    original = RuntimeError("503 Service Unavailable")
    error = RetryExhaustedError("Service overloaded after 4 attempts.", attempts=4, original_error=original)

    assert isinstance(error, ProviderError)
    assert error.attempts == 4
    assert error.original_error is original


def test_unsupported_resolution_message_lists_supported_sizes():
    error = UnsupportedResolutionError("gemini-2.5-flash-image", "2K", ["1K"])

    assert isinstance(error, ConfigurationError)
    assert error.key == "image_size"
    assert error.supported_sizes == ("1K",)
    assert str(error) == (
        "Model gemini-2.5-flash-image does not support 2K resolution. Supported sizes: 1K"
    )


def test_too_many_reference_images_message():
    error = TooManyReferenceImagesError("gemini-2.5-flash-image", 1, 3)

    assert (error.limit, error.count) == (1, 3)
    assert str(error) == (
        "Model gemini-2.5-flash-image supports maximum 1 reference images. You provided 3."
    )


def test_configuration_errors_share_base():
    errors = [
        UnknownModelError("dall-e", supported_models=["gemini-2.5-flash-image"]),
        UnsupportedSearchGroundingError("gemini-2.5-flash-image", suggested_model="gemini-3-pro-image-preview"),
        IncompatibleModalitiesError(["IMAGE"]),
        MissingCredentialError(),
    ]

    for error in errors:
        assert isinstance(error, ConfigurationError)

    assert "gemini-3-pro-image-preview" in str(errors[1])
    assert errors[2].response_modalities == ("IMAGE",)
    assert errors[3].key == "GEMINI_API_KEY"


def test_session_closed_error_is_service_error():
    assert issubclass(SessionClosedError, ServiceError)
