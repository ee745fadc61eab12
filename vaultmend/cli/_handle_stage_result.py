"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("json", "yaml")
DEFAULT_DISPLAY_FORMAT = "yaml"


def display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the nearest ancestor context.

    A sub-app invoked on its own has no ``--display`` option, so the
    option's default applies when no context in the chain carries one.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in DISPLAY_FORMATS:
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return DEFAULT_DISPLAY_FORMAT


def handle_stage_result(func: F, output_format: str) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout as YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from vaultmend.cli.display import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), output_format)

    return wrapper  # type: ignore[return-value]
