"""
Discriminated result type for operations that report failures as values.

Expected failures (a page without player data, an unsupported link, a
quality tier the video does not offer) are returned as ``Err`` rather than
raised, so callers can branch on them without ``try``/``except``::

    result = get_video_id(link)
    if isinstance(result, Err):
        print(result.error.message)
    else:
        print(result.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from tubeformat.exceptions import TubeformatError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome holding the ``error`` that describes it."""

    error: TubeformatError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """
        Raise the wrapped error.

        Raises
        ------
        TubeformatError
            Always.
        """
        raise self.error


Result = Union[Ok[T], Err]
