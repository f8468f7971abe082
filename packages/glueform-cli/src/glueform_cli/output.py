"""Rich console output utilities for glueform-cli.

This module provides formatted console output with Rich, supporting
colored success/error/warning messages and respecting the NO_COLOR
environment variable. It also configures structlog for CLI runs.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from rich.console import Console

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(force_terminal=force_terminal, no_color=no_color or _force_no_color)


# Default console instance
console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Configuration valid")
        ✓ Configuration valid
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("Glue job is missing a script")
        ✗ Glue job is missing a script
    """
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(message, **kwargs)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Note:
        This updates the module-level console instance.
    """
    global console
    console = create_console(no_color=no_color)


def configure_logging(verbose: bool = False) -> None:
    """Route structlog output to stderr.

    Args:
        verbose: Show info-level events (script uploads, template summary).
            Only warnings and errors are shown otherwise.
    """
    level = logging.INFO if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=not _force_no_color),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
