"""Core value types: errors and results."""

from .config import Config, load_config, load_config_or_default
from .errors import (
    EMPTY_ERROR,
    EmptyError,
    Error,
    ExceptionError,
    InvalidOperationError,
    StandardError,
)
from .exit_codes import ErrorCode
from .result import FAIL, SUCCESS, Fail, Result, Success, ValueFail, ValueResult, ValueSuccess

__all__ = [
    # config
    "Config",
    "load_config",
    "load_config_or_default",
    # errors
    "EMPTY_ERROR",
    "EmptyError",
    "Error",
    "ExceptionError",
    "InvalidOperationError",
    "StandardError",
    # exit codes
    "ErrorCode",
    # result
    "FAIL",
    "SUCCESS",
    "Fail",
    "Result",
    "Success",
    "ValueFail",
    "ValueResult",
    "ValueSuccess",
]
