"""
Reconcile the stored fingerprint with the observed files.

One run moves through these states::

    BOOTSTRAPPED --(fingerprint equal)--> UNCHANGED
    BOOTSTRAPPED --(fingerprint differs)--> ADVANCED

Everything that can fail (reading both stores, hashing the observed files,
parsing and incrementing the version) happens before the first write, so
a failed run leaves both stores as they were.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from ..config.constants import INITIAL_VERSION
from .fingerprint import compute_fingerprint
from .stores import StorePair, read_version_file
from .version_file import next_version

logger = logging.getLogger(__name__)


class ReconcileState(str, Enum):
    """State of a reconcile run."""

    BOOTSTRAPPED = "bootstrapped"
    UNCHANGED = "unchanged"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of a reconcile run or inspection.

    ``new_version`` is the version the stores hold (or would hold, for a dry
    run or an inspection) once the run is done. An UNCHANGED reconcile run
    does not read the version store, so both versions are ``None`` there.
    """

    state: ReconcileState
    old_fingerprint: str
    new_fingerprint: str
    old_version: Optional[int]
    new_version: Optional[int]
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.state == ReconcileState.ADVANCED


def reconcile(
    stores: StorePair, observed: Sequence[Path], dry_run: bool = False
) -> ReconcileResult:
    """Advance the version if the observed files changed since the last run.

    Args:
        stores: Hash and version store to reconcile
        observed: Ordered observed file paths
        dry_run: Compute the outcome but skip the two store writes

    Returns:
        ReconcileResult with state UNCHANGED or ADVANCED

    Raises:
        StoreIOError: A store cannot be created, read or written
        ObservedFileError: An observed file cannot be read
        VersionParseError: The version store has no ``Version: <int>`` line
        VersionArithmeticError: The next version cannot be computed
    """
    stores.bootstrap()
    state = ReconcileState.BOOTSTRAPPED
    logger.debug(f"State: {state.value}")

    old_fingerprint = stores.read_fingerprint()
    new_fingerprint = compute_fingerprint(observed)

    if old_fingerprint == new_fingerprint:
        logger.debug("Observed files unchanged")
        return ReconcileResult(
            state=ReconcileState.UNCHANGED,
            old_fingerprint=old_fingerprint,
            new_fingerprint=new_fingerprint,
            old_version=None,
            new_version=None,
        )

    old_version = stores.read_version().value
    new_version = next_version(old_version)

    if dry_run:
        logger.debug(f"Dry run: version would advance {old_version} -> {new_version}")
    else:
        stores.write_fingerprint(new_fingerprint)
        stores.write_version(new_version)
        logger.debug(f"Version advanced {old_version} -> {new_version}")

    return ReconcileResult(
        state=ReconcileState.ADVANCED,
        old_fingerprint=old_fingerprint,
        new_fingerprint=new_fingerprint,
        old_version=old_version,
        new_version=new_version,
        written=not dry_run,
    )


def read_current_version(version_path: Path) -> int:
    """Current version, or the initial version if the version file is missing."""
    if not version_path.exists():
        return INITIAL_VERSION
    return read_version_file(version_path).value


def inspect_stores(stores: StorePair, observed: Sequence[Path]) -> ReconcileResult:
    """Report what :func:`reconcile` would do without creating or writing files."""
    old_fingerprint = stores.read_fingerprint() if stores.hash_path.exists() else ""
    new_fingerprint = compute_fingerprint(observed)
    current = read_current_version(stores.version_path)

    if old_fingerprint == new_fingerprint:
        return ReconcileResult(
            state=ReconcileState.UNCHANGED,
            old_fingerprint=old_fingerprint,
            new_fingerprint=new_fingerprint,
            old_version=current,
            new_version=current,
        )
    return ReconcileResult(
        state=ReconcileState.ADVANCED,
        old_fingerprint=old_fingerprint,
        new_fingerprint=new_fingerprint,
        old_version=current,
        new_version=next_version(current),
    )
