"""CLI utilities for error handling."""

import functools
import logging
from typing import Callable, TypeVar

import typer
from rich.markup import escape

from ghosttify.exceptions import GhosttifyError
from ghosttify.utils.output import console

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def handle_cli_errors(action: str) -> Callable[[F], F]:
    """Decorator that turns ghosttify errors into a red message and exit code 1.

    Example:
        @handle_cli_errors("converting shortcuts")
        def convert(...):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except GhosttifyError as e:
                console.print(f"[red]Error {action}: {escape(str(e))}[/red]")
                logger.debug(f"Error during {action}", exc_info=True)
                raise typer.Exit(1) from e

        return wrapper  # type: ignore[return-value]

    return decorator
