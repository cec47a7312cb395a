"""
Standardized error message helpers for CLI commands.

Provides:
- Error display formatters with a consistent multi-part format
- A Rich panel wrapper for error display
- Mapping from ``ErrorKind`` to display category and hint

Error Format:
    Title -> Problem -> Expected -> Got -> Hint

Examples:
    >>> format_error("Validation", "Invalid video ID", got="abc")
    'Error: Validation: Invalid video ID
       Got: abc'
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tubeformat.exceptions import ErrorKind, TubeformatError

# Module-level console for CLI error display
console = Console()


class ErrorCategory:
    """
    Standard error categories for CLI commands.

    - VALIDATION: Input format or value validation failed
    - NOT_FOUND: Requested data is not present in the input
    - UNSUPPORTED: Input is of a kind the tool does not handle
    """

    VALIDATION = "Validation"
    NOT_FOUND = "Not Found"
    UNSUPPORTED = "Unsupported"


_KIND_CATEGORIES: dict[ErrorKind, str] = {
    ErrorKind.UNSUPPORTED_INPUT_KIND: ErrorCategory.UNSUPPORTED,
    ErrorKind.UNBALANCED_LITERAL: ErrorCategory.VALIDATION,
    ErrorKind.NO_LITERAL_FOUND: ErrorCategory.NOT_FOUND,
    ErrorKind.MALFORMED_LITERAL: ErrorCategory.VALIDATION,
    ErrorKind.NOT_SUPPORTED_DOMAIN: ErrorCategory.UNSUPPORTED,
    ErrorKind.NO_IDENTIFIER_FOUND: ErrorCategory.NOT_FOUND,
    ErrorKind.INVALID_IDENTIFIER_SHAPE: ErrorCategory.VALIDATION,
    ErrorKind.NO_FORMATS_MATCH_FILTER: ErrorCategory.NOT_FOUND,
    ErrorKind.NO_MATCHING_FORMAT: ErrorCategory.NOT_FOUND,
    ErrorKind.INVALID_FILTER_SPECIFICATION: ErrorCategory.VALIDATION,
}

_KIND_HINTS: dict[ErrorKind, str] = {
    ErrorKind.NOT_SUPPORTED_DOMAIN: "Use a youtube.com or youtu.be link.",
    ErrorKind.INVALID_IDENTIFIER_SHAPE: "Video IDs are 11 characters of A-Z, a-z, 0-9, - and _.",
    ErrorKind.NO_LITERAL_FOUND: "Save the full watch page source, not a rendered copy.",
    ErrorKind.NO_FORMATS_MATCH_FILTER: "Try a broader --filter or drop it.",
    ErrorKind.NO_MATCHING_FORMAT: "Run 'tubeformat formats list' to see available itags.",
}


def format_error(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
) -> str:
    """
    Format error message in standardized multi-part format.

    Parameters
    ----------
    category : str
        Error category. Use ErrorCategory constants for consistency.
    message : str
        Human-readable error description.
    expected : Optional[str]
        Description of expected format/value (optional).
    got : Optional[str]
        Actual value that was received (optional).
    hint : Optional[str]
        Actionable suggestion for resolving the error (optional).

    Returns
    -------
    str
        Formatted error message string.
    """
    lines = [f"Error: {category}: {message}"]

    if expected is not None:
        lines.append(f"   Expected: {expected}")

    if got is not None:
        lines.append(f"   Got: {got}")

    if hint is not None:
        lines.append(f"   Hint: {hint}")

    return "\n".join(lines)


def display_error_panel(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """Display formatted error in a Rich panel."""
    formatted = format_error(category, message, expected, got, hint)
    console.print(
        Panel(
            f"[red]{escape(formatted)}[/red]",
            title=title,
            border_style="red",
        )
    )


def display_tubeformat_error(error: TubeformatError) -> None:
    """Display a reported tubeformat failure with its category and hint."""
    display_error_panel(
        _KIND_CATEGORIES.get(error.kind, ErrorCategory.VALIDATION),
        error.message,
        hint=_KIND_HINTS.get(error.kind),
        title=error.kind.value.replace("_", " ").title(),
    )

