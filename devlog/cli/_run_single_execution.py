"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from devlog.api.validate_output import validate_output

from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands handle their expected failures internally and report them
    through their output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        # Validation failure is a programming error - fail loudly
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)
    for warning in result.output.get("warnings", []):
        display.warning(warning)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
