"""Configuration modules for the Gemini image client.

Import submodules directly (``config.image``, ``config.api_keys``); nothing is
loaded eagerly so that core modules can depend on configuration constants.
"""
