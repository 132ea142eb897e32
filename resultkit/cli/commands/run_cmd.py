from __future__ import annotations

import sys
from pathlib import Path

import typer

from resultkit.cli.target import resolve_target
from resultkit.core.config import CONFIG_FILENAME, Config, load_config
from resultkit.core.exit_codes import ErrorCode
from resultkit.core.result import Result
from resultkit.output.console import ConsoleProtocol, RichConsole
from resultkit.output.report import describe_error, print_result, result_exit_code


def build_console() -> ConsoleProtocol:
    return RichConsole()


def run(
    target: str = typer.Argument(..., help="Callable to invoke, as MODULE:CALLABLE"),
    args: list[str] | None = typer.Argument(None, help="String arguments passed to the callable"),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Config file (default: ./{CONFIG_FILENAME} when present)",
    ),
    app_dir: Path = typer.Option(
        Path("."),
        "--app-dir",
        help="Directory prepended to the import path before importing the target",
    ),
) -> None:
    """Call a function that returns a Result and report the outcome."""
    console = build_console()
    config = _resolve_config(config_path, console)

    app_path = str(app_dir.expanduser().resolve())
    added = app_path not in sys.path
    if added:
        sys.path.insert(0, app_path)
    try:
        _run_target(target, args or [], console, config)
    finally:
        if added and app_path in sys.path:
            sys.path.remove(app_path)


def _run_target(
    target: str,
    args: list[str],
    console: ConsoleProtocol,
    config: Config,
) -> None:
    resolved = resolve_target(target)
    if resolved.is_fail:
        console.error(describe_error(resolved.error))
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    func = resolved.value
    try:
        returned = func(*args)
    except Exception as e:
        returned = Result.fail(e)

    if not isinstance(returned, Result):
        console.error(f"'{target}' returned {type(returned).__name__}, not a Result")
        raise typer.Exit(code=int(ErrorCode.CONTRACT_ERROR))

    print_result(returned, console, config)
    code = result_exit_code(returned, config)
    if code != int(ErrorCode.OK):
        raise typer.Exit(code=code)


def _resolve_config(config_path: Path | None, console: ConsoleProtocol) -> Config:
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
        if not config_path.exists():
            return Config()

    loaded = load_config(config_path)
    if loaded.is_fail:
        console.error(describe_error(loaded.error))
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
    return loaded.value
