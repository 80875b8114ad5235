"""Fingerprint of the observed source files."""

import hashlib
import logging
from pathlib import Path
from typing import Sequence

from ..config.constants import HASH_ALGORITHM, READ_CHUNK_SIZE
from ..exceptions import ConfigurationError, ObservedFileError

logger = logging.getLogger(__name__)


def compute_fingerprint(observed: Sequence[Path]) -> str:
    """Hash the concatenated bytes of every observed file, in the given order.

    No separator is inserted between files, so the digest depends only on
    the byte stream and the order of the paths.

    Args:
        observed: Ordered paths of the observed set

    Returns:
        Lowercase hex digest (40 characters for sha1)

    Raises:
        ConfigurationError: If the observed set is empty
        ObservedFileError: If any observed file cannot be read
    """
    if not observed:
        raise ConfigurationError("No observed files were given")

    digest = hashlib.new(HASH_ALGORITHM)
    for path in observed:
        try:
            with open(path, "rb") as f:
                for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b""):
                    digest.update(chunk)
        except OSError as e:
            raise ObservedFileError(
                f"Cannot read observed file {path}", path=str(path), reason=e.strerror
            ) from e

    fingerprint = digest.hexdigest()
    logger.debug(f"Fingerprint of {len(observed)} file(s): {fingerprint}")
    return fingerprint
