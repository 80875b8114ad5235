"""The pair of files docver persists its state in."""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config.constants import INITIAL_VERSION, STORE_ENCODING
from ..exceptions import StoreIOError, VersionParseError
from .version_file import VersionLine, format_version_line, parse_version_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorePair:
    """Hash store and version store paths with their read/write operations.

    The hash store holds the last committed fingerprint on its first
    non-blank line. The version store holds a ``Version: N`` line.
    """

    hash_path: Path
    version_path: Path

    def bootstrap(self) -> None:
        """Create missing stores: an empty hash store and ``Version: 0``.

        Parent directories are not created.

        Raises:
            StoreIOError: If a store cannot be created
        """
        self._ensure(self.hash_path, "")
        self._ensure(self.version_path, format_version_line(INITIAL_VERSION) + "\n")

    def _ensure(self, path: Path, initial: str) -> None:
        if path.exists():
            return
        try:
            with open(path, "x", encoding=STORE_ENCODING) as f:
                f.write(initial)
        except OSError as e:
            raise StoreIOError(
                f"Cannot create store file {path}", path=str(path), reason=e.strerror
            ) from e
        if not path.is_file():
            raise StoreIOError(f"Store file {path} missing after creation", path=str(path))
        logger.info(f"Created {path}")

    def read_fingerprint(self) -> str:
        """First non-blank line of the hash store, or "" if there is none."""
        for line in _read_store(self.hash_path).splitlines():
            if line.strip():
                return line.strip()
        return ""

    def read_version(self) -> VersionLine:
        """Parse the version store; see :func:`read_version_file`."""
        return read_version_file(self.version_path)

    def write_fingerprint(self, fingerprint: str) -> None:
        self._write(self.hash_path, fingerprint + "\n")

    def write_version(self, version: int) -> None:
        self._write(self.version_path, format_version_line(version) + "\n")

    def _write(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding=STORE_ENCODING)
        except OSError as e:
            raise StoreIOError(
                f"Cannot write store file {path}", path=str(path), reason=e.strerror
            ) from e
        logger.debug(f"Wrote {path}")


def read_version_file(path: Path) -> VersionLine:
    """Parse the ``Version: <int>`` line of a version file.

    Raises:
        StoreIOError: If the file cannot be read
        VersionParseError: If it holds no ``Version: <int>`` line
    """
    try:
        return parse_version_text(_read_store(path))
    except VersionParseError as e:
        raise VersionParseError(path=str(path)) from e


def _read_store(path: Path) -> str:
    # Undecodable bytes outside the ASCII version line must not fail the read
    try:
        with open(path, encoding=STORE_ENCODING, errors="surrogateescape") as f:
            return f.read()
    except OSError as e:
        raise StoreIOError(
            f"Cannot read store file {path}", path=str(path), reason=e.strerror
        ) from e
