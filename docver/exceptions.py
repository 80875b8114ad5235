"""Custom exception hierarchy for docver.

Every fatal condition the tool can hit is one of these types. Each carries a
category, a severity, an optional suggestion for the operator and the exit
code the CLI terminates with.

Exception Hierarchy:
    DocverError (base)
    ├── FileOperationError - File I/O
    │   ├── StoreIOError - hash/version store cannot be created, read or written
    │   └── ObservedFileError - an observed source file cannot be read
    ├── VersionParseError - no "Version: <int>" line in the version store
    ├── VersionArithmeticError - next version cannot be computed
    └── ConfigurationError - Settings/configuration issues

Usage:
    from docver.exceptions import StoreIOError

    try:
        path.touch()
    except OSError as e:
        raise StoreIOError("Cannot create hash store", path=str(path)) from e
"""

from enum import Enum
from typing import Any, Dict, Optional

EXIT_GENERIC = 1
EXIT_IO = 2
EXIT_PARSE = 3
EXIT_ARITHMETIC = 4


class ErrorSeverity(Enum):
    """Error severity levels for categorization"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for better handling"""
    FILE_SYSTEM = "file_system"
    PARSE = "parse"
    ARITHMETIC = "arithmetic"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class DocverError(Exception):
    """Base exception for all docver errors.

    Attributes:
        message: Human-readable error description
        category: Which part of the system failed
        severity: How loudly to report it
        details: Additional context about the error (e.g. paths)
        suggestion: Optional hint shown to the operator
        exit_code: Process exit code when this error terminates the CLI
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
        exit_code: int = EXIT_GENERIC,
        **context: Any,
    ) -> None:
        self.message = message
        self.category = category
        self.severity = severity
        self.details = {**(details or {}), **context}
        self.suggestion = suggestion
        self.exit_code = exit_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.details:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# File Operation Errors
# =============================================================================


class FileOperationError(DocverError):
    """Base exception for file operations."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("category", ErrorCategory.FILE_SYSTEM)
        kwargs.setdefault("exit_code", EXIT_IO)
        super().__init__(message, **kwargs)


class StoreIOError(FileOperationError):
    """The hash store or version store could not be created, read or written."""

    def __init__(
        self,
        message: str = "Store file is not accessible",
        *,
        path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if path:
            kwargs = {"path": path, **kwargs}
        kwargs.setdefault(
            "suggestion",
            "Check that the directory exists and that you have write permission.",
        )
        super().__init__(message, **kwargs)


class ObservedFileError(FileOperationError):
    """An observed source file could not be read."""

    def __init__(
        self,
        message: str = "Observed file is not readable",
        *,
        path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if path:
            kwargs = {"path": path, **kwargs}
        kwargs.setdefault(
            "suggestion", "Check the list of observed files passed to docver."
        )
        super().__init__(message, **kwargs)


# =============================================================================
# Version Errors
# =============================================================================


class VersionParseError(DocverError):
    """The version store holds no line matching "Version: <int>"."""

    def __init__(
        self,
        message: str = "Unable to extract current version",
        *,
        path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if path:
            kwargs = {"path": path, **kwargs}
        kwargs.setdefault("category", ErrorCategory.PARSE)
        kwargs.setdefault("exit_code", EXIT_PARSE)
        kwargs.setdefault(
            "suggestion", 'The version file must contain a line like "Version: 12".'
        )
        super().__init__(message, **kwargs)


class VersionArithmeticError(DocverError):
    """The next version number could not be computed."""

    def __init__(
        self, message: str = "Unable to compute next version", **kwargs: Any
    ) -> None:
        kwargs.setdefault("category", ErrorCategory.ARITHMETIC)
        kwargs.setdefault("exit_code", EXIT_ARITHMETIC)
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DocverError):
    """Invalid settings or command-line configuration."""

    def __init__(self, message: str = "Invalid configuration", **kwargs: Any) -> None:
        kwargs.setdefault("category", ErrorCategory.CONFIGURATION)
        super().__init__(message, **kwargs)
