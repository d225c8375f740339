"""Gemini transport and model registry.

Submodules are imported explicitly by callers; ``config.image.models`` depends
on :mod:`capabilities` and must be importable without pulling in the registry.
"""
