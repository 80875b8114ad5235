"""
Version commands - update, status and show.

`update` is what a document build runs before compiling:

    docver update chapter1.tex chapter2.tex refs.bib
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..config import resolve_store_paths, resolve_version_path
from ..core import StorePair, inspect_stores, read_current_version, reconcile
from ..error_handling import done_user, info_user, safe_operation, warn_user

logger = logging.getLogger(__name__)

HASH_FILE_OPTION = typer.Option(
    None, "--hash-file", help="Hash store file [env: DOCVER_HASH_FILE]"
)
VERSION_FILE_OPTION = typer.Option(
    None, "--version-file", help="Generated version file [env: DOCVER_VERSION_FILE]"
)


def _store_pair(hash_file: Optional[Path], version_file: Optional[Path]) -> StorePair:
    hash_path, version_path = resolve_store_paths(hash_file, version_file)
    return StorePair(hash_path=hash_path, version_path=version_path)


def _check_duplicates(files: List[Path]) -> None:
    seen = set()
    for path in files:
        if path in seen:
            warn_user(f"Observed file listed more than once, hashed each time: {path}")
        seen.add(path)


@safe_operation("updating version")
def update(
    files: List[Path] = typer.Argument(
        ..., help="Observed source files, hashed in the order given"
    ),
    hash_file: Optional[Path] = HASH_FILE_OPTION,
    version_file: Optional[Path] = VERSION_FILE_OPTION,
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Report the result without writing the stores"
    ),
):
    """
    Advance the version if the observed files changed since the last run.

    Creates the hash store and the version file on first use. Exits non-zero
    without changing either file if anything cannot be read or parsed.

    Examples:
        docver update main.tex intro.tex
        docver update --version-file build/version.tex *.tex
    """
    logger.debug(f"Observed set: {[str(p) for p in files]}")
    _check_duplicates(files)
    stores = _store_pair(hash_file, version_file)
    result = reconcile(stores, files, dry_run=dry_run)

    if not result.changed:
        info_user("Sources unchanged, version not advanced")
    elif dry_run:
        info_user(
            f"Sources changed, version would advance "
            f"{result.old_version} → {result.new_version} (dry run)"
        )
    else:
        done_user(f"Version {result.new_version} written to {stores.version_path}")


@safe_operation("checking status")
def status(
    files: List[Path] = typer.Argument(
        ..., help="Observed source files, hashed in the order given"
    ),
    hash_file: Optional[Path] = HASH_FILE_OPTION,
    version_file: Optional[Path] = VERSION_FILE_OPTION,
):
    """
    Show whether the observed files changed, without creating or writing files.
    """
    stores = _store_pair(hash_file, version_file)
    result = inspect_stores(stores, files)

    info_user(f"Current version: {result.old_version}")
    if result.changed:
        warn_user(
            f"Sources changed since the last update; next version is {result.new_version}",
            suggestion="Run `docver update` with the same files to record it.",
        )
    else:
        done_user("Sources match the recorded fingerprint")


@safe_operation("reading version")
def show(version_file: Optional[Path] = VERSION_FILE_OPTION):
    """
    Print the current version number to stdout.
    """
    typer.echo(read_current_version(resolve_version_path(version_file)))


# Create typer app for the commands
app = typer.Typer()
app.command(name="update")(update)
app.command(name="status")(status)
app.command(name="show")(show)
