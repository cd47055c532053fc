"""Shared console helpers for newclass.

Provides the Rich console used by the CLI, the ``print_*`` helpers, and the
``Notifier`` abstraction the scaffolder reports through.  The scaffolder never
prints directly; it is handed a notifier so that tests can record messages and
the CLI can colour them.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

WARNING_PREFIX = "Warning: "
ERROR_PREFIX = "Error: "

BANNER = r"""
  _____             __        ___     _  __             _______
 / ___/______ ___ _/ /____   / _ |   / |/ /__ _    __  / ___/ /__ ____ ___
/ /__/ __/ -_) _ `/ __/ -_) / __ |  /    / -_) |/|/ / / /__/ / _ `(_-<(_-<
\___/_/  \__/\_,_/\__/\__/ /_/ |_| /_/|_/\__/|__,__/  \___/_/\_,_/___/___/
"""


# ---------------------------------------------------------------------------
# Notifier
# ---------------------------------------------------------------------------


class Notifier(Protocol):
    """Sink for the user-facing messages emitted while scaffolding."""

    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleNotifier:
    """Notifier that writes to a Rich console.

    Warnings and errors carry the ``Warning: `` / ``Error: `` prefixes and are
    coloured; info messages are printed as-is.
    """

    def __init__(self, target: Console | None = None) -> None:
        self.console = target or console

    # soft_wrap keeps long paths on one line so they can be copied or grepped.

    def info(self, message: str) -> None:
        self.console.print(escape(message), soft_wrap=True)

    def warn(self, message: str) -> None:
        self.console.print(
            f"[bold yellow]{WARNING_PREFIX}[/bold yellow]{escape(message)}",
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        self.console.print(
            f"[bold red]{ERROR_PREFIX}[/bold red]{escape(message)}",
            soft_wrap=True,
        )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner() -> None:
    """Print the ``Create A New Class`` banner."""
    console.print()
    console.print(Panel(BANNER, style="black on dark_orange", expand=False))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)
