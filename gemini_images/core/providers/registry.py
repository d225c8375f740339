"""Registry of supported image models and their capabilities."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from gemini_images.core.exceptions import UnknownModelError
from gemini_images.core.providers.capabilities import ModelCapabilities

logger = logging.getLogger(__name__)


class ModelRegistry:
    """Read-only lookup table from model identifier to capabilities."""

    def __init__(
        self,
        models: Optional[Mapping[str, ModelCapabilities]] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._models: Dict[str, ModelCapabilities] = {}
        self._aliases: Dict[str, str] = {}
        self._initialised = False
        if models is not None:
            self._populate(models, aliases or {})

    def _populate(self, models: Mapping[str, ModelCapabilities], aliases: Mapping[str, str]) -> None:
        for key, capabilities in models.items():
            self._models[key.lower().strip()] = capabilities
        for alias, target in aliases.items():
            self._aliases[alias.lower().strip()] = target.lower().strip()
        self._initialised = True

    def ensure_initialised(self) -> None:
        """Populate the registry from the configured capability table once."""

        if self._initialised:
            return

        from gemini_images.config.image.aliases import IMAGE_MODEL_ALIASES
        from gemini_images.config.image.models import MODEL_CAPABILITIES

        self._populate(MODEL_CAPABILITIES, IMAGE_MODEL_ALIASES)

    def resolve_model_name(self, model: str) -> str:
        """Return the canonical identifier for ``model`` or raise ``UnknownModelError``."""

        self.ensure_initialised()

        lookup_key = (model or "").lower().strip()
        lookup_key = self._aliases.get(lookup_key, lookup_key)
        if lookup_key not in self._models:
            logger.debug("Unknown image model requested: %s", model)
            raise UnknownModelError(model, supported_models=self.list_models())
        return lookup_key

    def get_capabilities(self, model: str) -> ModelCapabilities:
        """Return the capabilities of ``model`` (canonical name or alias)."""

        return self._models[self.resolve_model_name(model)]

    def list_models(self) -> list[str]:
        self.ensure_initialised()
        return list(self._models.keys())


_REGISTRY: Optional[ModelRegistry] = None


def get_registry() -> ModelRegistry:
    """Return the global model registry instance."""

    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = ModelRegistry()
    return _REGISTRY


def get_capabilities(model: str) -> ModelCapabilities:
    """Pure lookup of capabilities for ``model``."""

    return get_registry().get_capabilities(model)


def resolve_model_name(model: str) -> str:
    return get_registry().resolve_model_name(model)


__all__ = [
    "ModelRegistry",
    "get_capabilities",
    "get_registry",
    "resolve_model_name",
]
