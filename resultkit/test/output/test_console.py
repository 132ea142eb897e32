"""Tests for resultkit.output.console module."""

from __future__ import annotations

import pytest

from resultkit.output.console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DIM) == "dim"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_print_with_style(self) -> None:
        console = MockConsole()
        console.print("detail", Style.DIM)
        assert console.outputs[0].style == Style.DIM

    def test_success(self) -> None:
        console = MockConsole()
        console.success("42")
        assert console.messages == ["OK 42"]
        assert console.has_success()
        assert not console.has_error()

    def test_error(self) -> None:
        console = MockConsole()
        console.error("disk full")
        assert console.messages == ["error: disk full"]
        assert console.has_error()

    def test_text_joins_lines(self) -> None:
        console = MockConsole()
        console.print("a")
        console.print("b")
        assert console.text == "a\nb"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    """Test RichConsole stream routing."""

    def test_success_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().success("done")
        captured = capsys.readouterr()
        assert "OK" in captured.out
        assert "done" in captured.out
        assert captured.err == ""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("broken")
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert "broken" in captured.err
        assert captured.out == ""

    def test_markup_in_message_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("[bold]not markup[/bold]")
        assert "[bold]not markup[/bold]" in capsys.readouterr().out
