"""
CLI constants for tubeformat.

Exit codes following Unix conventions, and table display settings.
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
"""Operation completed normally."""

EXIT_USER_ERROR: Final[int] = 1
"""
User error: invalid input or requested data not present.

Examples:
- Link on an unsupported host
- Page without an embedded player response
- Quality tier the video does not offer
"""

EXIT_SYSTEM_ERROR: Final[int] = 2
"""Unreadable input file or other environment failure."""

# =============================================================================
# Display
# =============================================================================

URL_DISPLAY_LENGTH: Final[int] = 60
"""Playback URLs longer than this are truncated in tables."""

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
