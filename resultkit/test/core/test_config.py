"""Tests for resultkit.core.config module."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from resultkit.core.config import (
    Config,
    ExitCodesConfig,
    OutputConfig,
    load_config,
    load_config_or_default,
)
from resultkit.core.errors import StandardError
from resultkit.core.result import ValueFail, ValueSuccess


class TestDefaults:
    """Test config defaults and structure."""

    def test_output_defaults(self) -> None:
        config = OutputConfig()
        assert config.show_exception_type is True
        assert config.show_value is True

    def test_exit_code_defaults(self) -> None:
        assert ExitCodesConfig().fail == 1

    def test_config_defaults(self) -> None:
        config = Config()
        assert config.output == OutputConfig()
        assert config.exit_codes == ExitCodesConfig()

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(FrozenInstanceError):
            config.output = OutputConfig(show_value=False)  # type: ignore[misc]


class TestFromDict:
    """Test Config.from_dict()."""

    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_partial(self) -> None:
        config = Config.from_dict({"output": {"show_value": False}})
        assert config.output.show_value is False
        assert config.output.show_exception_type is True
        assert config.exit_codes.fail == 1

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "output": {"show_exception_type": False, "show_value": False},
                "exit_codes": {"fail": 10},
            }
        )
        assert config.output == OutputConfig(show_exception_type=False, show_value=False)
        assert config.exit_codes.fail == 10

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict(
            {
                "output": {"show_value": "no"},
                "exit_codes": {"fail": True},
            }
        )
        assert config.output.show_value is True
        assert config.exit_codes.fail == 1

    def test_non_table_sections_ignored(self) -> None:
        assert Config.from_dict({"output": "loud", "exit_codes": [1]}) == Config()

    @pytest.mark.parametrize("code", [0, -1, 256])
    def test_fail_code_out_of_range(self, code: int) -> None:
        with pytest.raises(ValueError, match="exit_codes.fail"):
            Config.from_dict({"exit_codes": {"fail": code}})


class TestLoadConfig:
    """Test load_config()."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("""
[output]
show_exception_type = false

[exit_codes]
fail = 7
""")
        result = load_config(config_file)
        assert isinstance(result, ValueSuccess)
        assert result.value.output.show_exception_type is False
        assert result.value.exit_codes.fail == 7

    def test_load_empty_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("")
        result = load_config(config_file)
        assert result.is_success
        assert result.value == Config()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, ValueFail)
        assert isinstance(result.error, StandardError)
        assert "not found" in (result.error.message or "")

    def test_load_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("this is not valid toml [[[")
        result = load_config(config_file)
        assert result.is_fail
        assert "Invalid TOML" in (result.error.message or "")

    def test_load_invalid_utf8(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_bytes(b"\xff\xfe\x00")
        result = load_config(config_file)
        assert result.is_fail
        assert "Error reading config" in (result.error.message or "")

    def test_load_invalid_structure(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("[exit_codes]\nfail = 0\n")
        result = load_config(config_file)
        assert result.is_fail
        assert "Invalid config structure" in (result.error.message or "")


class TestLoadConfigOrDefault:
    """Test load_config_or_default()."""

    def test_returns_config_when_file_exists(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("[exit_codes]\nfail = 9\n")
        assert load_config_or_default(config_file).exit_codes.fail == 9

    def test_returns_default_when_missing(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()

    def test_returns_default_on_invalid(self, tmp_path: Path) -> None:
        config_file = tmp_path / "resultkit.toml"
        config_file.write_text("invalid[[[")
        assert load_config_or_default(config_file) == Config()
