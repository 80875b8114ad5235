"""Configuration utilities for docver."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import ENV_VAR_DEFINITIONS

logger = logging.getLogger(__name__)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None

    if value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        if not value.strip():
            return False, f"{name} is set but empty"
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable, falling back to its declared default.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, variable=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_log_level() -> int:
    """Console log level from DOCVER_LOG_LEVEL."""
    return getattr(logging, get_env_var("DOCVER_LOG_LEVEL").upper())


def resolve_version_path(version_file: Optional[Path] = None) -> Path:
    """Resolve the version file path: explicit argument, DOCVER_VERSION_FILE, default."""
    return version_file or Path(get_env_var("DOCVER_VERSION_FILE"))


def resolve_store_paths(
    hash_file: Optional[Path] = None,
    version_file: Optional[Path] = None,
) -> Tuple[Path, Path]:
    """Resolve the hash and version store paths.

    Explicit arguments win over DOCVER_HASH_FILE / DOCVER_VERSION_FILE,
    which win over the defaults in the current directory.
    """
    resolved_hash = hash_file or Path(get_env_var("DOCVER_HASH_FILE"))
    resolved_version = resolve_version_path(version_file)

    if resolved_hash.resolve() == resolved_version.resolve():
        raise ConfigurationError(
            "Hash file and version file must be different files",
            path=str(resolved_hash),
        )

    logger.debug(f"Stores: hash={resolved_hash} version={resolved_version}")
    return resolved_hash, resolved_version
