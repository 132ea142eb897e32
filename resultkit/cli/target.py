"""Resolve ``MODULE:CALLABLE`` target strings."""

from __future__ import annotations

import importlib
from collections.abc import Callable

from resultkit.core.errors import ExceptionError, StandardError
from resultkit.core.result import Result, ValueFail, ValueResult

__all__ = ["resolve_target"]


def resolve_target(target: str) -> ValueResult[Callable[..., object]]:
    """Import the module and look up the (possibly dotted) attribute.

    Examples: ``json:dumps``, ``mypkg.users:Loader.load``.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        return ValueFail(StandardError(f"invalid target '{target}' (expected MODULE:CALLABLE)"))

    # Any exception raised while importing means the target is broken, not failed
    try:
        obj: object = importlib.import_module(module_name)
    except Exception as e:
        return ValueFail(ExceptionError(e))

    found: list[str] = []
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            owner = f"{module_name}:{'.'.join(found)}" if found else module_name
            return ValueFail(StandardError(f"'{owner}' has no attribute '{part}'"))
        found.append(part)

    if not callable(obj):
        return ValueFail(StandardError(f"'{target}' is not callable"))
    return Result.success(obj)
