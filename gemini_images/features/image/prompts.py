"""Reusable prompt builders for common image styles."""

from __future__ import annotations


class PromptTemplates:
    @staticmethod
    def photorealistic(subject: str, details: str) -> str:
        return (
            f"Photorealistic image of {subject}. {details}. Shot with professional camera, "
            "natural lighting, high dynamic range, sharp focus, 8k quality."
        )

    @staticmethod
    def illustration(subject: str, style: str) -> str:
        return (
            f"{style} illustration of {subject}. Professional digital art, clean lines, "
            "vibrant colors, detailed rendering."
        )

    @staticmethod
    def portrait(subject: str, mood: str) -> str:
        return (
            f"Portrait photograph of {subject}. {mood} mood. Professional portrait photography, "
            "bokeh background, natural skin tones, emotional depth."
        )

    @staticmethod
    def landscape(location: str, time: str) -> str:
        return (
            f"Landscape photograph of {location} during {time}. Wide angle shot, dramatic lighting, "
            "rich colors, professional landscape photography."
        )

    @staticmethod
    def game_sprite(description: str, style: str) -> str:
        return (
            f"{description}, {style} game sprite art. Clean silhouette, centered composition, "
            "game-ready asset."
        )

    @staticmethod
    def tileable(description: str) -> str:
        """Texture prompt whose four edges must wrap seamlessly."""

        return (
            f"Seamlessly tileable texture: {description}. All four edges must connect perfectly "
            "when tiled. Consistent lighting, no directional elements."
        )


__all__ = ["PromptTemplates"]
