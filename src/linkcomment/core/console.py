"""User-facing terminal output for CLI operations.

Usage::

    from linkcomment.core.console import status

    status("Symbol \"helper\" not found in util.py", style="warning")  # ! Symbol ...
    status("main.py:5:5", style="success")  # ✓ main.py:5:5
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Pause structlog console output while a status line is printed.

    File handlers still receive every record.
    """
    previous = is_console_suppressed()
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = previous


def _get_logger() -> BoundLogger:
    from linkcomment.core.logging import get_logger

    return get_logger("console")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    with suppress_console_logs():
        _console.print(f"{padding}{prefix}{escape(message)}", highlight=False)

    _get_logger().debug("status", message=message, style=style)
