"""Console output helpers.

Provides a shared rich Console and consistent message styles for the CLI.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from reportforge.core.exceptions import get_error_info

# Shared console instance
_console: Optional[Console] = None


def get_console() -> Console:
    """Get shared console instance (lazy-loaded)."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def print_error(error: BaseException) -> None:
    """Print an error with its code and the first fix suggestion."""
    info = get_error_info(error)
    console = get_console()
    console.print(
        f"[red]Error[/red] [dim]{info['error_code']}[/dim]: {escape(str(error))}",
        soft_wrap=True,
    )
    if info["how_to_fix"]:
        console.print(f"  [dim]Tip: {escape(info['how_to_fix'][0])}[/dim]", soft_wrap=True)
