"""Change detection and version bookkeeping."""

from .fingerprint import compute_fingerprint
from .reconciler import (
    ReconcileResult,
    ReconcileState,
    inspect_stores,
    read_current_version,
    reconcile,
)
from .stores import StorePair
from .version_file import VersionLine, format_version_line, parse_version_text

__all__ = [
    "ReconcileResult",
    "ReconcileState",
    "StorePair",
    "VersionLine",
    "compute_fingerprint",
    "format_version_line",
    "inspect_stores",
    "parse_version_text",
    "read_current_version",
    "reconcile",
]
