"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

import typer
from rich.markup import escape

from sumdir.api.validate_output import validate_output

from .display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    result_printer: Callable[[dict[str, Any]], None],
    suppress_output: bool = False,
) -> None:
    """Run command once and display result.

    Announce, progress and success lines go to stderr and are hidden when
    ``suppress_output`` is set; failures are always shown. On success the
    output dict is handed to ``result_printer``.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not suppress_output:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if not suppress_output:
            timestamp = datetime.now().strftime("%H:%M:%S")
            display.info(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        if not suppress_output:
            display.success(result.result)
            for warning in result.output.get("warnings", []):
                display.warning(warning)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result.success:
        result_printer(result.output)

    raise typer.Exit(0 if result.success else 1)
