"""Console output helpers for the command line."""

import functools
import sys
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from .errors import MarkupConverterError

err_console = Console(stderr=True)


def info(message: str) -> None:
    err_console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    err_console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {message}")


def handle_errors(func: Callable) -> Callable:
    """Report converter and I/O errors from a command and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (MarkupConverterError, OSError) as e:
            error(escape(str(e)))
            sys.exit(1)
        except KeyboardInterrupt:
            warning("Interrupted")
            sys.exit(130)

    return wrapper
