"""
Configuration management module for tubeformat.

Handles application settings loaded from environment variables and
``.env`` files.
"""

from __future__ import annotations

from .settings import Settings, get_settings

__all__: list[str] = ["Settings", "get_settings"]
