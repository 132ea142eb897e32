"""Error values carried by failed results.

An ``Error`` describes why an operation failed. The set of variants is closed:

    EmptyError      no error information available
    StandardError   a human-authored message
    ExceptionError  a caught exception, kept for inspection or re-raising

Usage:
    match result.error:
        case ExceptionError(exception=exc):
            raise exc
        case StandardError(message=message):
            print(message)
        case EmptyError():
            print("failed")

``InvalidOperationError`` is not an ``Error`` value. It signals a caller bug
(reading ``error`` on a success or ``value`` on a failure).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "Error",
    "EmptyError",
    "StandardError",
    "ExceptionError",
    "EMPTY_ERROR",
    "InvalidOperationError",
]


class InvalidOperationError(RuntimeError):
    """Raised when a result accessor is read on the wrong variant."""


class Error(ABC):
    """Minimal error contract: an optional human-readable message."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"cannot subclass closed type Error: {cls.__qualname__}")

    @property
    @abstractmethod
    def message(self) -> str | None:
        """The error message, or None when there is none."""


@dataclass(frozen=True, slots=True)
class EmptyError(Error):
    """Error carrying no information."""

    @property
    def message(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class StandardError(Error):
    """Error holding a plain message, stored as given.

    Attributes:
        text: The message text (may be None).
    """

    text: str | None

    @property
    def message(self) -> str | None:
        return self.text


@dataclass(frozen=True, slots=True, eq=False)
class ExceptionError(Error):
    """Error wrapping a caught exception.

    Compared by identity, as the wrapped exception is.

    Attributes:
        exception: The caught exception (may be None).
    """

    exception: BaseException | None

    @property
    def message(self) -> str | None:
        if self.exception is None:
            return None
        return str(self.exception)


# Shared instance used wherever a missing error is normalized.
EMPTY_ERROR = EmptyError()
