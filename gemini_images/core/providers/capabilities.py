"""Model capability declarations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModelCapabilities:
    """Constraints and feature flags of a single image model."""

    alias: str
    max_resolution: str
    supported_sizes: tuple[str, ...]
    max_reference_images: int = 1
    supports_search_grounding: bool = False
    supports_text_rendering: bool = False

    def __post_init__(self) -> None:
        """Validate capability invariants."""

        # Deferred: config.image.models builds instances of this class at import.
        from gemini_images.config.image.defaults import IMAGE_SIZE_PIXELS

        if not self.supported_sizes:
            raise ValueError(f"Model {self.alias} must declare at least one supported size")

        unknown = [size for size in self.supported_sizes if size not in IMAGE_SIZE_PIXELS]
        if unknown:
            raise ValueError(f"Model {self.alias} declares unknown sizes: {', '.join(unknown)}")

        pixels = [IMAGE_SIZE_PIXELS[size] for size in self.supported_sizes]
        if any(later <= earlier for earlier, later in zip(pixels, pixels[1:])):
            raise ValueError(
                f"Model {self.alias} supported sizes must be ordered by pixel count",
            )

        if self.max_resolution != self.supported_sizes[-1]:
            raise ValueError(
                f"Model {self.alias} max_resolution {self.max_resolution} "
                f"does not match largest supported size {self.supported_sizes[-1]}",
            )

        if self.max_reference_images < 1:
            raise ValueError(f"Model {self.alias} must accept at least one reference image")

    def supports_size(self, image_size: str) -> bool:
        return image_size in self.supported_sizes


__all__ = ["ModelCapabilities"]
