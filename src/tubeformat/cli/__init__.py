"""
CLI interface module for tubeformat.

Provides a Typer-based command-line interface over saved watch pages and
player responses: video ID resolution, literal extraction, format
listing and format selection.
"""

from __future__ import annotations

__all__: list[str] = []
