"""Provider-specific helpers for image generation."""
