"""Tests for config merging and capability validation."""

from __future__ import annotations

import pytest

from gemini_images.core.exceptions import (
    IncompatibleModalitiesError,
    UnknownModelError,
    UnsupportedResolutionError,
    UnsupportedSearchGroundingError,
    ValidationError,
)
from gemini_images.core.providers.image.utils.gemini.options import merge_config, validate_config
from gemini_images.core.pydantic_schemas import GenerationConfig, ImageGenerationConfig

FLASH = "gemini-2.5-flash-image"
PRO = "gemini-3-pro-image-preview"


def test_merge_without_layers_yields_defaults():
    assert merge_config() == GenerationConfig()


def test_merge_override_wins_field_by_field():
    base = ImageGenerationConfig(model=FLASH, aspect_ratio="16:9")
    override = ImageGenerationConfig(aspect_ratio="9:16")

    merged = merge_config(base, override)

    assert merged.model == FLASH
    assert merged.aspect_ratio == "9:16"
    assert merged.image_size == "1K"


def test_merge_accepts_mappings():
    merged = merge_config({"image_size": "2K"}, {"enable_search_grounding": True})

    assert merged.image_size == "2K"
    assert merged.enable_search_grounding is True


def test_absent_fields_do_not_erase_base():
    merged = merge_config(ImageGenerationConfig(image_size="4K"), ImageGenerationConfig(image_size=None))

    assert merged.image_size == "4K"


def test_validate_accepts_supported_config():
    validate_config(PRO, GenerationConfig(image_size="4K", enable_search_grounding=True))
    validate_config(FLASH, ImageGenerationConfig())


def test_validate_unsupported_resolution():
    with pytest.raises(UnsupportedResolutionError) as exc:
        validate_config(FLASH, ImageGenerationConfig(image_size="2K"))

    assert exc.value.supported_sizes == ("1K",)
    assert "1K" in str(exc.value)


def test_validate_grounding_on_flash_suggests_pro():
    with pytest.raises(UnsupportedSearchGroundingError) as exc:
        validate_config(FLASH, ImageGenerationConfig(enable_search_grounding=True))

    assert exc.value.suggested_model == PRO


def test_validate_grounding_with_image_only_output():
    config = ImageGenerationConfig(enable_search_grounding=True, response_modalities=["IMAGE"])

    with pytest.raises(IncompatibleModalitiesError):
        validate_config(PRO, config)


def test_validate_checks_resolution_first():
    config = ImageGenerationConfig(image_size="4K", enable_search_grounding=True, response_modalities=["IMAGE"])

    with pytest.raises(UnsupportedResolutionError):
        validate_config(FLASH, config)


def test_validate_unknown_model():
    with pytest.raises(UnknownModelError):
        validate_config("imagen-4", ImageGenerationConfig())


def test_invalid_mapping_layer_is_rejected_before_merge():
    with pytest.raises(ValidationError) as exc:
        merge_config({"response_modalities": []})

    assert exc.value.field == "config"


def test_grounding_with_text_and_image_is_accepted():
    validate_config(PRO, ImageGenerationConfig(enable_search_grounding=True, response_modalities=["IMAGE", "TEXT"]))
