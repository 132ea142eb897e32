"""Result presentation utilities.

Centralized result formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resultkit.core.config import Config
from resultkit.core.errors import Error, ExceptionError, StandardError
from resultkit.core.exit_codes import ErrorCode
from resultkit.core.result import Fail, Result, Success, ValueFail, ValueSuccess
from resultkit.output.console import Style

if TYPE_CHECKING:
    from resultkit.output.console import ConsoleProtocol

__all__ = ["describe_error", "print_result", "result_exit_code"]

NO_ERROR_INFO = "no error information"


def describe_error(error: Error, *, show_exception_type: bool = True) -> str:
    """Render an error as a single line."""
    match error:
        case StandardError(text=text) if text:
            return text
        case ExceptionError(exception=exc) if exc is not None:
            name = type(exc).__name__
            message = error.message
            if not message:
                return name
            return f"{name}: {message}" if show_exception_type else message
        case _:
            # EmptyError, or a variant holding nothing
            return NO_ERROR_INFO


def print_result(result: Result, console: ConsoleProtocol, config: Config) -> None:
    """Print a result to the console."""
    match result:
        case ValueSuccess(value=value):
            if config.output.show_value:
                console.success(repr(value))
            else:
                console.success("success")
        case Success():
            console.success("success")
        case Fail(error=error) | ValueFail(error=error):
            console.error(
                describe_error(error, show_exception_type=config.output.show_exception_type)
            )
            if isinstance(error, ExceptionError) and error.exception is not None:
                cause = error.exception.__cause__
                if cause is not None:
                    console.print(f"caused by: {type(cause).__name__}: {cause}", Style.DIM)


def result_exit_code(result: Result, config: Config) -> int:
    """Get exit code for a result."""
    if result.is_fail:
        return config.exit_codes.fail
    return int(ErrorCode.OK)
