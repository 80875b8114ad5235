"""
Centralized error handling and operator messages for docver

This module provides:
- Rich Console on stderr for every operator-facing message
- Structured logging for developer diagnostics
- A single fatal path (handle_error) that logs, displays and exits
"""

import functools
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from docver.exceptions import DocverError, ErrorCategory, ErrorSeverity

# Diagnostics never go to stdout; stdout is reserved for `docver show`
console = Console(stderr=True, color_system="auto")

logger = logging.getLogger("docver")

# Set by setup_logging; silences the non-error status helpers
_quiet = False

_COLORS = {
    ErrorSeverity.INFO: "blue",
    ErrorSeverity.WARNING: "yellow",
    ErrorSeverity.ERROR: "red",
    ErrorSeverity.CRITICAL: "red",
}

_ICONS = {
    ErrorSeverity.INFO: "ℹ️",
    ErrorSeverity.WARNING: "⚠️",
    ErrorSeverity.ERROR: "❌",
    ErrorSeverity.CRITICAL: "💥",
}


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    default_level: int = logging.INFO,
) -> None:
    """
    Set up logging for docver

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Only show errors on the console
        log_file: Optional file receiving detailed DEBUG diagnostics
        default_level: Console level when neither verbose nor quiet is set
    """
    global _quiet
    _quiet = quiet and not verbose

    if verbose:
        console_level = logging.DEBUG
    elif quiet:
        console_level = logging.ERROR
    else:
        console_level = default_level

    detailed_formatter = logging.Formatter(
        '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s'
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(message)s')

    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            # The log file is optional; the run itself must not fail because of it
            warn_user(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)


def handle_error(
    error: Exception,
    operation: str = "unknown",
    context: Optional[Dict[str, Any]] = None,
    show_details: bool = False
) -> None:
    """
    Report a fatal error and terminate the command

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        context: Additional context for logging
        show_details: Whether to show technical details to the operator

    Raises:
        typer.Exit: always, with the error's exit code
    """
    context = context or {}

    if isinstance(error, DocverError):
        log_data = {"operation": operation, **context, **error.details}
        level = logging.CRITICAL if error.severity == ErrorSeverity.CRITICAL else logging.ERROR
        logger.log(level, f"{error.category.value}: {error.message} {log_data}")
        _display_user_error(error, show_details)
        raise typer.Exit(error.exit_code)

    logger.error(f"Unexpected error during {operation}: {error}", exc_info=True)
    wrapped_error = DocverError(
        message=f"An unexpected error occurred during {operation}",
        category=ErrorCategory.INTERNAL,
        details={"original_error": str(error), "error_type": type(error).__name__},
        suggestion="Re-run with --verbose and --log-file to capture details.",
    )
    _display_user_error(wrapped_error, show_details=True)
    raise typer.Exit(wrapped_error.exit_code)


def _display_user_error(error: DocverError, show_details: bool) -> None:
    """Display error to operator with Rich formatting"""
    color = _COLORS.get(error.severity, "red")
    icon = _ICONS.get(error.severity, "❌")

    message = Text()
    message.append(f"{icon} ", style="bold")
    message.append(error.message, style=f"bold {color}")

    if show_details and error.details:
        details_text = "\n".join(f"• {k}: {v}" for k, v in error.details.items())
        message.append(f"\n\nDetails:\n{details_text}", style=f"dim {color}")

    if error.suggestion:
        message.append(f"\n\n💡 Suggestion: {error.suggestion}", style="cyan")

    if error.severity == ErrorSeverity.WARNING:
        title = "Warning"
    else:
        title = f"{error.category.value.replace('_', ' ').title()} Error"

    panel = Panel(
        message,
        title=f"[bold]{title}[/bold]",
        title_align="left",
        border_style=color,
        padding=(0, 1)
    )

    console.print(panel)


def safe_operation(operation_name: str, show_details: bool = False):
    """
    Decorator routing every failure of a command through handle_error

    Args:
        operation_name: Name of the operation for logging
        show_details: Whether to show technical details on error
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except Exception as e:
                handle_error(e, operation_name, show_details=show_details)
        return wrapper
    return decorator


def fail_user(message: str, suggestion: Optional[str] = None) -> None:
    """Display a failure message without terminating"""
    _display_user_error(DocverError(message=message, suggestion=suggestion), show_details=False)


def warn_user(message: str, suggestion: Optional[str] = None) -> None:
    """Display a warning message to the operator"""
    if _quiet:
        return
    warning = DocverError(
        message=message,
        severity=ErrorSeverity.WARNING,
        suggestion=suggestion
    )
    _display_user_error(warning, show_details=False)


def info_user(message: str) -> None:
    """Print a one-line informational status message"""
    if _quiet:
        return
    console.print(f"[blue]ℹ️  {message}[/blue]")


def done_user(message: str) -> None:
    """Print a one-line success status message"""
    if _quiet:
        return
    console.print(f"[green]✅ {message}[/green]")
