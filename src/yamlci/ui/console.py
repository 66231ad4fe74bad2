"""Console output formatting utilities for yamlci."""

from __future__ import annotations

import sys
from typing import Optional

import click


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show debug lines and full stack traces
        """
        self.debug = debug

    def print_output(self, text: str) -> None:
        """Print a rendered pipeline result, preceded by a blank line."""
        click.echo()
        click.echo(text)

    def print_validation_error(self, message: str) -> None:
        """Print a document validation failure in red."""
        click.echo()
        click.echo(click.style(message, fg="red"))

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        click.echo(click.style(f"\nERROR: {title}", fg="red"), err=True)
        click.echo(message, err=True)
        if details:
            for detail in details:
                click.echo(f"  {detail}", err=True)
        if suggestion:
            click.echo(f"\n{suggestion}", err=True)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
        else:
            click.echo(click.style(f"Error: {exc}", fg="red"), err=True)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        click.echo(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            click.echo(f"[DEBUG] {message}", err=True)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
