"""Result types for explicit success/failure reporting.

A ``Result`` is either a ``Success`` or a ``Fail`` carrying an ``Error``.
``ValueResult[T]`` is the payload-carrying flavor: ``ValueSuccess[T]`` holds a
value, ``ValueFail[T]`` holds an error. Both flavors share the same
``is_success`` / ``is_fail`` / ``error`` contract, so code that does not care
about the payload can handle either.

Reading ``error`` on a success, or ``value`` on a failure, is a caller bug and
raises ``InvalidOperationError``. Check ``is_fail`` (or match) first.

Usage:
    def load_user(user_id: int) -> ValueResult[User]:
        if user_id <= 0:
            return ValueResult.from_fail(Result.fail("bad input"))
        try:
            return Result.success(db.get(user_id))
        except LookupError as e:
            return ValueFail(ExceptionError(e))

    result = load_user(42)
    if result.is_fail:
        print(f"Error: {result.error.message}")
    else:
        print(f"User: {result.value}")

    # Or with pattern matching
    match load_user(42):
        case ValueSuccess(value):
            print(f"User: {value}")
        case ValueFail(error):
            print(f"Error: {error.message}")

Both hierarchies are closed: only the variants defined here exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, overload

from .errors import EMPTY_ERROR, Error, ExceptionError, InvalidOperationError, StandardError

__all__ = [
    "Result",
    "Success",
    "Fail",
    "ValueResult",
    "ValueSuccess",
    "ValueFail",
    "SUCCESS",
    "FAIL",
]

_SUCCESS_HAS_NO_ERROR = "Result is Success. It does not have an Error."
_FAIL_HAS_NO_VALUE = "Result is Fail. It does not have a Value."


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Final = _Missing()


class Result(ABC):
    """Outcome of an operation: ``Success`` or ``Fail``."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"cannot subclass closed type Result: {cls.__qualname__}")

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    @abstractmethod
    def is_fail(self) -> bool: ...

    @property
    @abstractmethod
    def error(self) -> Error:
        """The failure's error.

        Raises:
            InvalidOperationError: If the result is a success.
        """

    @overload
    @staticmethod
    def success() -> Success: ...

    @overload
    @staticmethod
    def success[T](value: T) -> ValueSuccess[T]: ...

    @staticmethod
    def success(value: object = _MISSING) -> Result:
        """Build a success.

        Without an argument, returns the shared ``SUCCESS``. With one, wraps
        it (even None) in a new ``ValueSuccess``.
        """
        if value is _MISSING:
            return SUCCESS
        return ValueSuccess(value)

    @staticmethod
    def fail(cause: Error | str | BaseException | None = None) -> Fail:
        """Build a failure.

        Args:
            cause: What went wrong:
                - None: returns the shared ``FAIL`` (empty error)
                - Error: used as is
                - str: wrapped in a ``StandardError``
                - exception: wrapped in an ``ExceptionError``

        Raises:
            TypeError: If cause is none of the above.
        """
        match cause:
            case None:
                return FAIL
            case Error():
                return Fail(cause)
            case str():
                return Fail(StandardError(cause))
            case BaseException():
                return Fail(ExceptionError(cause))
            case _:
                raise TypeError(f"cannot build a Fail from {type(cause).__name__}")


@dataclass(frozen=True, slots=True)
class Success(Result):
    """Successful result without a payload."""

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_fail(self) -> bool:
        return False

    @property
    def error(self) -> Error:
        raise InvalidOperationError(_SUCCESS_HAS_NO_ERROR)

    def __repr__(self) -> str:
        return "Success()"


@dataclass(frozen=True, slots=True, init=False)
class Fail(Result):
    """Failed result. A missing error is stored as ``EMPTY_ERROR``.

    Attributes:
        error: The error, never None.
    """

    error: Error

    def __init__(self, error: Error | None = None) -> None:
        object.__setattr__(self, "error", EMPTY_ERROR if error is None else error)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_fail(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Fail({self.error!r})"


class ValueResult[T](Result):
    """Result that carries a value of type T when successful."""

    __slots__ = ()

    @property
    @abstractmethod
    def value(self) -> T:
        """The success value.

        Raises:
            InvalidOperationError: If the result is a failure.
        """

    @classmethod
    def from_fail(cls, result: Fail | None) -> ValueFail[T]:
        """Adapt a plain ``Fail`` into a ``ValueFail``.

        The error is carried over unchanged. None (no result produced) gives
        a ``ValueFail`` with the empty error. Successes cannot be adapted:
        there is no value to put in them.

        Raises:
            TypeError: If result is not a ``Fail`` or None.
        """
        match result:
            case Fail(error=error):
                return ValueFail(error)
            case None:
                return ValueFail()
            case _:
                raise TypeError(f"only a Fail can be adapted, got {type(result).__name__}")


@dataclass(frozen=True, slots=True, init=False)
class ValueSuccess[T](ValueResult[T]):
    """Successful result holding a value (which may be None).

    Attributes:
        value: The success value.
    """

    value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "value", value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_fail(self) -> bool:
        return False

    @property
    def error(self) -> Error:
        raise InvalidOperationError(_SUCCESS_HAS_NO_ERROR)

    def __repr__(self) -> str:
        return f"ValueSuccess({self.value!r})"


@dataclass(frozen=True, slots=True, init=False)
class ValueFail[T](ValueResult[T]):
    """Failed result in place of a value. A missing error is stored as ``EMPTY_ERROR``.

    Attributes:
        error: The error, never None.
    """

    error: Error

    def __init__(self, error: Error | None = None) -> None:
        object.__setattr__(self, "error", EMPTY_ERROR if error is None else error)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_fail(self) -> bool:
        return True

    @property
    def value(self) -> T:
        raise InvalidOperationError(_FAIL_HAS_NO_VALUE)

    def __repr__(self) -> str:
        return f"ValueFail({self.error!r})"


# Shared instances returned by the argument-less factories.
SUCCESS: Final = Success()
FAIL: Final = Fail()
