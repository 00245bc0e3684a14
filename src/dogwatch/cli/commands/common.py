"""Shared utilities and conventions for CLI commands.

This module provides the console, message styling, and the per-id loop
used by the add and remove commands.
"""

import sys
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ...api.dognzb import DogNZBApiError
from ...models import ResourceKind

# Shared console instance for consistent CLI output formatting
console = Console()

# Color scheme
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"

# Symbols
SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"

PREFIX_SUCCESS = f"[{COLOR_SUCCESS}]{SYMBOL_SUCCESS}[/{COLOR_SUCCESS}]"
PREFIX_ERROR = f"[{COLOR_ERROR}]{SYMBOL_ERROR}[/{COLOR_ERROR}]"


def success_message(text: str) -> str:
    """Format a success message with standard styling."""
    return f"{PREFIX_SUCCESS} {text}"


def error_message(text: str) -> str:
    """Format an error message with standard styling."""
    return f"{PREFIX_ERROR} {text}"


def print_section_header(title: str) -> None:
    """
    Print a section header with consistent formatting.

    Args:
        title: Section title
    """
    console.print(f"\n[bold cyan]═══ {title} ═══[/bold cyan]\n")


def kind_title(kind: ResourceKind) -> str:
    """Human-readable watchlist name."""
    return "Movie" if kind is ResourceKind.MOVIE else "TV"


def apply_to_ids(
    ids: Sequence[str],
    action: Callable[[str], Optional[str]],
    describe: Callable[[str], str],
) -> None:
    """
    Run an API action once per id, reporting each outcome.

    Every id is attempted even after a failure; the command exits with
    status 1 if any of them failed.

    Args:
        ids: Item ids from the command line
        action: Performs the request; may return extra detail to print
        describe: Builds the success message for an id
    """
    failed = 0

    for item_id in ids:
        try:
            detail = action(item_id)
        except DogNZBApiError as e:
            console.print(error_message(escape(f"{item_id}: {e}")))
            failed += 1
            continue

        console.print(success_message(escape(describe(item_id))))
        if detail:
            console.print(f"  [dim]{escape(detail)}[/dim]")

    if failed:
        sys.exit(1)


__all__ = [
    "console",
    "COLOR_SUCCESS",
    "COLOR_ERROR",
    "PREFIX_SUCCESS",
    "PREFIX_ERROR",
    "success_message",
    "error_message",
    "print_section_header",
    "kind_title",
    "apply_to_ids",
]
