"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict[str, Any]], None],
    suppress_output: bool = False,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (``result_printer`` writes to stdout)

    Args:
        func: Function that returns StageResult
        result_printer: Renders the output dict of a successful run
        suppress_output: Hide stages 1-3 unless the command failed

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        _run_single_execution(func, args, kwargs, display, result_printer, suppress_output)

    return wrapper  # type: ignore[return-value]
