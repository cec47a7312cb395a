"""
Custom exceptions for the tubeformat package.

Every failure the package can report is an instance of ``TubeformatError``
tagged with an ``ErrorKind``. Most of them are *returned* inside an
``Err`` result (see ``tubeformat.models.result``) because they describe an
ordinary property of the input data: a page without a player literal, a
link on a foreign host, a quality tier the video does not offer.

``InvalidFilterSpecificationError`` is the exception: it signals a caller
programming error and is raised immediately.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error categories."""

    UNSUPPORTED_INPUT_KIND = "unsupported_input_kind"
    UNBALANCED_LITERAL = "unbalanced_literal"
    NO_LITERAL_FOUND = "no_literal_found"
    MALFORMED_LITERAL = "malformed_literal"
    NOT_SUPPORTED_DOMAIN = "not_supported_domain"
    NO_IDENTIFIER_FOUND = "no_identifier_found"
    INVALID_IDENTIFIER_SHAPE = "invalid_identifier_shape"
    NO_FORMATS_MATCH_FILTER = "no_formats_match_filter"
    NO_MATCHING_FORMAT = "no_matching_format"
    INVALID_FILTER_SPECIFICATION = "invalid_filter_specification"


class TubeformatError(Exception):
    """
    Base exception for all tubeformat errors.

    Attributes
    ----------
    message : str
        Human-readable error message.
    detail : object
        The offending value (character, link, identifier or quality
        descriptor) the message was built from.
    kind : ErrorKind
        Category of the failure, fixed per subclass.
    """

    kind: ErrorKind

    def __init__(self, message: str, detail: object = None) -> None:
        """
        Initialize TubeformatError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        detail : object, optional
            The offending value (default: None).
        """
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TubeformatError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.detail == other.detail
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message))


# =============================================================================
# Structured literal extraction
# =============================================================================


class ExtractionError(TubeformatError):
    """Base class for embedded literal extraction failures."""


class UnsupportedInputKindError(ExtractionError):
    """
    Raised when the text to cut does not begin with ``[`` or ``{``.

    ``detail`` holds the offending first character (empty string for
    empty input).
    """

    kind = ErrorKind.UNSUPPORTED_INPUT_KIND

    def __init__(self, character: str) -> None:
        super().__init__(
            "Can't cut unsupported JSON (need to begin with [ or { ) "
            f"but got: {character!r}",
            detail=character,
        )


class UnbalancedLiteralError(ExtractionError):
    """Raised when the scan reaches the end of input with brackets still open."""

    kind = ErrorKind.UNBALANCED_LITERAL

    def __init__(self, open_brackets: int) -> None:
        super().__init__(
            "Can't cut unsupported JSON (no matching closing bracket found)",
            detail=open_brackets,
        )


class NoLiteralFoundError(ExtractionError):
    """Raised when a page holds no assignment to the requested variable."""

    kind = ErrorKind.NO_LITERAL_FOUND

    def __init__(self, variable_name: str) -> None:
        super().__init__(
            f"No embedded literal assigned to {variable_name} was found",
            detail=variable_name,
        )


class MalformedLiteralError(ExtractionError):
    """Raised when a balanced literal cannot be decoded as JSON."""

    kind = ErrorKind.MALFORMED_LITERAL

    def __init__(self, variable_name: str, reason: str) -> None:
        super().__init__(
            f"Embedded literal {variable_name} is not valid JSON: {reason}",
            detail=variable_name,
        )


# =============================================================================
# Video identifier resolution
# =============================================================================


class VideoIdError(TubeformatError):
    """Base class for video identifier resolution failures."""


class NotSupportedDomainError(VideoIdError):
    """Raised when a link points to a host outside the supported set."""

    kind = ErrorKind.NOT_SUPPORTED_DOMAIN

    def __init__(self, hostname: str) -> None:
        super().__init__(f"Not a YouTube domain: {hostname}", detail=hostname)


class NoIdentifierFoundError(VideoIdError):
    """Raised when a supported link carries no video identifier."""

    kind = ErrorKind.NO_IDENTIFIER_FOUND

    def __init__(self, link: str) -> None:
        super().__init__(f"No video id found: {link}", detail=link)


class InvalidIdentifierShapeError(VideoIdError):
    """Raised when a candidate identifier is not 11 characters of ``[A-Za-z0-9_-]``."""

    kind = ErrorKind.INVALID_IDENTIFIER_SHAPE

    def __init__(self, video_id: str, pattern: str) -> None:
        super().__init__(
            f"Video id ({video_id}) does not match expected format ({pattern})",
            detail=video_id,
        )


# =============================================================================
# Format selection
# =============================================================================


class FormatSelectionError(TubeformatError):
    """Base class for format selection failures."""


class NoFormatsMatchFilterError(FormatSelectionError):
    """Raised when a filter leaves no candidate formats."""

    kind = ErrorKind.NO_FORMATS_MATCH_FILTER

    def __init__(self, filter_spec: object) -> None:
        name = getattr(filter_spec, "value", None) or getattr(
            filter_spec, "__name__", filter_spec
        )
        super().__init__(f"No formats found with filter: {name}", detail=name)


class NoMatchingFormatError(FormatSelectionError):
    """Raised when a quality request resolves to no format."""

    kind = ErrorKind.NO_MATCHING_FORMAT

    def __init__(self, quality: object) -> None:
        super().__init__(f"No such format found: {quality}", detail=quality)


class InvalidFilterSpecificationError(FormatSelectionError, TypeError):
    """
    Raised when a filter is neither a known filter name nor a callable.

    This is a contract violation by the caller and is always raised,
    never returned.
    """

    kind = ErrorKind.INVALID_FILTER_SPECIFICATION

    def __init__(self, filter_spec: object) -> None:
        super().__init__(
            f"Given filter ({filter_spec}) is not supported", detail=filter_spec
        )
