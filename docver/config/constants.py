"""
Centralized constants for docver.
"""

# =============================================================================
# STORE FILES
# =============================================================================

DEFAULT_HASH_FILE = ".docver.hash"  # Last committed fingerprint
DEFAULT_VERSION_FILE = "version.tex"  # Read by the document as plain text

STORE_ENCODING = "utf-8"

# =============================================================================
# VERSION LINE
# =============================================================================

VERSION_PREFIX = "Version:"
INITIAL_VERSION = 0

# =============================================================================
# FINGERPRINT
# =============================================================================

HASH_ALGORITHM = "sha1"  # 160-bit, 40 hex chars
READ_CHUNK_SIZE = 64 * 1024

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "DOCVER_HASH_FILE": {
        "description": "Path of the hash store file",
        "default": DEFAULT_HASH_FILE,
        "valid_values": None,
    },
    "DOCVER_VERSION_FILE": {
        "description": "Path of the generated version file",
        "default": DEFAULT_VERSION_FILE,
        "valid_values": None,
    },
    "DOCVER_LOG_LEVEL": {
        "description": "Console log level when neither --verbose nor --quiet is given",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
