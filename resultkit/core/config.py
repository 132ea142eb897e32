"""Typed configuration loading for the resultkit CLI.

The CLI reads an optional ``resultkit.toml``:

    [output]
    show_exception_type = true
    show_value = true

    [exit_codes]
    fail = 1

Loading never raises for bad input; problems come back as a ``ValueFail``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import StandardError
from .exit_codes import ErrorCode
from .result import Result, ValueFail, ValueResult
from .structured import StrDict, as_str_dict, get_bool, get_int, get_table

__all__ = [
    "Config",
    "OutputConfig",
    "ExitCodesConfig",
    "CONFIG_FILENAME",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "resultkit.toml"


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """How results are printed."""

    show_exception_type: bool = True
    show_value: bool = True


@dataclass(frozen=True, slots=True)
class ExitCodesConfig:
    """Exit code overrides."""

    fail: int = int(ErrorCode.FAIL)


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    output: OutputConfig = field(default_factory=OutputConfig)
    exit_codes: ExitCodesConfig = field(default_factory=ExitCodesConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If the fail exit code is outside 1..255.
        """
        output: StrDict = get_table(data, "output") or {}
        exit_codes: StrDict = get_table(data, "exit_codes") or {}

        fail = get_int(exit_codes, "fail")
        if fail is None:
            fail = int(ErrorCode.FAIL)
        if not 1 <= fail <= 255:
            raise ValueError(f"exit_codes.fail must be between 1 and 255, got {fail}")

        show_exception_type = get_bool(output, "show_exception_type")
        show_value = get_bool(output, "show_value")
        return cls(
            output=OutputConfig(
                show_exception_type=True if show_exception_type is None else show_exception_type,
                show_value=True if show_value is None else show_value,
            ),
            exit_codes=ExitCodesConfig(fail=fail),
        )


def _config_fail(message: str) -> ValueFail[StrDict]:
    return ValueFail(StandardError(message))


def _parse_toml(path: Path) -> ValueResult[StrDict]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return _config_fail(f"Config file not found: {path}")
    except PermissionError:
        return _config_fail(f"Permission denied reading: {path}")
    except tomllib.TOMLDecodeError as e:
        return _config_fail(f"Invalid TOML syntax in {path}: {e}")
    except UnicodeDecodeError as e:
        return _config_fail(f"Error reading config {path}: {e}")

    data = as_str_dict(data_obj)
    if data is None:
        return _config_fail(f"Config root must be a TOML table: {path}")
    return Result.success(data)


def load_config(path: Path) -> ValueResult[Config]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to resultkit.toml

    Returns:
        ValueSuccess(Config) on success, ValueFail with a StandardError otherwise
    """
    parsed = _parse_toml(path)
    if parsed.is_fail:
        return ValueFail(parsed.error)

    try:
        return Result.success(Config.from_dict(parsed.value))
    except (TypeError, ValueError) as e:
        return ValueFail(StandardError(f"Invalid config structure in {path}: {e}"))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config if loading fails.

    This is useful when config is optional.
    """
    result = load_config(path)
    if result.is_success:
        return result.value
    return Config()
