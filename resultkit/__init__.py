"""Typed result values: explicit success or failure instead of exceptions."""

from .core.errors import (
    EMPTY_ERROR,
    EmptyError,
    Error,
    ExceptionError,
    InvalidOperationError,
    StandardError,
)
from .core.result import FAIL, SUCCESS, Fail, Result, Success, ValueFail, ValueResult, ValueSuccess

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EMPTY_ERROR",
    "EmptyError",
    "Error",
    "ExceptionError",
    "InvalidOperationError",
    "StandardError",
    "FAIL",
    "SUCCESS",
    "Fail",
    "Result",
    "Success",
    "ValueFail",
    "ValueResult",
    "ValueSuccess",
]
