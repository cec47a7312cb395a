"""
tubeformat - Streaming format extraction and selection toolkit.

Pulls the embedded player data out of a video hosting page, enriches the
advertised formats with known catalog attributes, ranks them by quality
and picks the single format that best matches a caller's preferences.
"""

from __future__ import annotations

__version__ = "0.4.0"
__author__ = "tubeformat"
__email__ = "noreply@tubeformat.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
