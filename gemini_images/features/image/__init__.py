"""Image generation feature: generator facade, file helpers and prompt templates."""

from .files import load_image, load_images, save_image_to_file
from .prompts import PromptTemplates
from .service import GeminiImageGenerator, RefinementSession, create_generator

__all__ = [
    "GeminiImageGenerator",
    "PromptTemplates",
    "RefinementSession",
    "create_generator",
    "load_image",
    "load_images",
    "save_image_to_file",
]
