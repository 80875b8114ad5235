#!/usr/bin/env python3
"""
Main CLI entry point for docver
"""

from pathlib import Path
from typing import Optional

import typer

from docver import __version__
from docver.commands import update as update_commands
from docver.config.settings import get_log_level
from docver.error_handling import handle_error, setup_logging
from docver.exceptions import ConfigurationError


# Version command
def version():
    """Show docver version"""
    typer.echo(f"docver version {__version__}")


# Callback for global options
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write detailed diagnostics to this file"
    ),
):
    """
    docver - content-driven version counter for document builds

    Hashes a declared list of source files and bumps the number in a
    generated "Version: N" file whenever their content changes.

    [bold]Examples:[/bold]

    Before compiling:
        [cyan]docver update lai.tex chapters.tex[/cyan]

    Check without writing:
        [cyan]docver status lai.tex chapters.tex[/cyan]

    Print the current number:
        [cyan]docver show[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    try:
        default_level = get_log_level()
    except ConfigurationError as e:
        handle_error(e, "reading configuration")

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file, default_level=default_level)


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="docver",
        help="Content-driven version counter for document builds",
        rich_markup_mode="rich",
        no_args_is_help=True,
    )
    app.callback()(main)

    for command in update_commands.app.registered_commands:
        app.registered_commands.append(command)
    app.command(name="version")(version)

    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
