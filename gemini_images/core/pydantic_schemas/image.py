"""Pydantic models describing image generation requests and results."""

from __future__ import annotations

import base64
from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gemini_images.config.image.defaults import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_ENABLE_SEARCH_GROUNDING,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
    DEFAULT_RESPONSE_MODALITIES,
)

AspectRatio = Literal["1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"]
ImageSize = Literal["1K", "2K", "4K"]
ResponseModality = Literal["TEXT", "IMAGE"]


def _normalise_modalities(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = (value,)
    # Keep first-seen order while dropping duplicates
    return tuple(dict.fromkeys(item.upper() if isinstance(item, str) else item for item in value))


def _require_modality(value: Any) -> Any:
    if value is not None and not value:
        raise ValueError("At least one response modality is required")
    return value


class ImageGenerationConfig(BaseModel):
    """Partial configuration layer; ``None`` marks a field as absent."""

    model: Optional[str] = None
    aspect_ratio: Optional[AspectRatio] = None
    image_size: Optional[ImageSize] = None
    response_modalities: Optional[Tuple[ResponseModality, ...]] = None
    enable_search_grounding: Optional[bool] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("response_modalities", mode="before")
    @classmethod
    def _normalise_response_modalities(cls, value: Any) -> Any:
        return _normalise_modalities(value)

    @field_validator("response_modalities")
    @classmethod
    def _check_response_modalities(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        return _require_modality(value)

    @property
    def is_image_only(self) -> bool:
        return set(self.response_modalities or ()) == {"IMAGE"}


class GenerationConfig(BaseModel):
    """Fully resolved configuration; every field is populated."""

    model: str = DEFAULT_MODEL
    aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO
    image_size: ImageSize = DEFAULT_IMAGE_SIZE
    response_modalities: Tuple[ResponseModality, ...] = DEFAULT_RESPONSE_MODALITIES
    enable_search_grounding: bool = DEFAULT_ENABLE_SEARCH_GROUNDING

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("response_modalities", mode="before")
    @classmethod
    def _normalise_response_modalities(cls, value: Any) -> Any:
        return _normalise_modalities(value)

    @field_validator("response_modalities")
    @classmethod
    def _check_response_modalities(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _require_modality(value)


class ImageInput(BaseModel):
    """Reference image payload supplied to edit/compose requests."""

    data: bytes
    mime_type: str = "image/jpeg"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_base64(cls, data: str, mime_type: str = "image/jpeg") -> "ImageInput":
        return cls(data=base64.b64decode(data), mime_type=mime_type)

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


class TextToImageRequest(BaseModel):
    """Generate an image from a text prompt."""

    prompt: str
    config: Optional[ImageGenerationConfig] = None


class ImageEditRequest(BaseModel):
    """Edit a single reference image according to a prompt."""

    image: ImageInput
    prompt: str
    config: Optional[ImageGenerationConfig] = None


class MultiImageRequest(BaseModel):
    """Compose several reference images, in order, into a new image."""

    images: List[ImageInput]
    prompt: str
    config: Optional[ImageGenerationConfig] = None


class GenerationResult(BaseModel):
    """Normalised result of a generation call.

    A missing ``image_data`` means the service produced no image (for example
    a text-only or safety-filtered reply); it is not an error.
    """

    image_data: Optional[bytes] = None
    mime_type: Optional[str] = None
    text: Optional[str] = None
    raw: Any = Field(default=None, repr=False)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def has_image(self) -> bool:
        return bool(self.image_data)


class RetryPolicy(BaseModel):
    """Bounded exponential backoff settings shared by every remote call."""

    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    initial_delay: float = Field(default=DEFAULT_INITIAL_DELAY, ge=0)
    backoff_multiplier: float = Field(default=DEFAULT_BACKOFF_MULTIPLIER, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the zero-indexed ``attempt`` failed."""

        return self.initial_delay * (self.backoff_multiplier ** attempt)


class ImageMetadata(BaseModel):
    """Details recorded next to a saved image."""

    prompt: Optional[str] = None
    model: Optional[str] = None
    aspect_ratio: Optional[str] = None
    image_size: Optional[str] = None
    source_ids: List[str] = Field(default_factory=list)
    timestamp: Optional[str] = None


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
