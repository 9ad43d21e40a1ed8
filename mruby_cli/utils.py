"""Shared utility functions for mruby-cli.

Provides the name transform used inside generated source files and the
Rich-based console helpers used by the command-line front end.
"""

from __future__ import annotations

import re

from rich.console import Console

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_SEGMENT_SEPARATORS = re.compile(r"[_\- ]")


def camelize(name: str) -> str:
    """Convert a project name into a class-name style identifier.

    The name is split on ``_``, ``-`` and spaces.  Each segment has its first
    character upper-cased and the rest left as-is, and the segments are joined
    with nothing between them.

    Examples::

        camelize("my_tool")   -> "MyTool"
        camelize("json-APIs") -> "JsonAPIs"
        camelize("widget")    -> "Widget"
    """
    return "".join(
        segment[:1].upper() + segment[1:]
        for segment in _SEGMENT_SEPARATORS.split(name)
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
