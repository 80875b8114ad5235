"""Configuration for docver."""

from .constants import DEFAULT_HASH_FILE, DEFAULT_VERSION_FILE, ENV_VAR_DEFINITIONS
from .settings import (
    get_env_var,
    resolve_store_paths,
    resolve_version_path,
    validate_env_var,
)

__all__ = [
    "DEFAULT_HASH_FILE",
    "DEFAULT_VERSION_FILE",
    "ENV_VAR_DEFINITIONS",
    "get_env_var",
    "resolve_store_paths",
    "resolve_version_path",
    "validate_env_var",
]
