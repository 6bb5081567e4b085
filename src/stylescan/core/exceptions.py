"""Custom exception hierarchy for stylescan.

This module defines the exception classes used throughout stylescan
for error handling and reporting. All exceptions inherit from the
base StyleScanError class, allowing callers to catch all stylescan
errors with a single except clause.

Only FileReadError is recoverable: the scanner logs it, records the
skipped file and moves on. Every other error aborts the run before a
report is written.
"""

from __future__ import annotations


class StyleScanError(Exception):
    """Base exception for all stylescan errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary of additional context about the error.
    """

    def __init__(self, message: str, context: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Optional dictionary of additional context about the error.
        """
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including context if present."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class CatalogError(StyleScanError):
    """Exception raised when the detector catalog is invalid.

    Raised at startup, before any file is scanned, when a detector or
    anti-pattern regular expression fails to compile, when two detectors
    share a key, or when a custom catalog file is malformed.

    Example:
        >>> raise CatalogError("Invalid regular expression", key="di_field", pattern="(")
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        pattern: str | None = None,
        context: dict | None = None,
    ):
        """Initialize the catalog error.

        Args:
            message: Human-readable error message.
            key: Key of the offending detector, if applicable.
            pattern: The offending regular expression, if applicable.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if key:
            ctx["key"] = key
        if pattern is not None:
            ctx["pattern"] = pattern
        super().__init__(message, ctx)
        self.key = key
        self.pattern = pattern


class ConfigError(StyleScanError):
    """Exception raised for configuration errors.

    Example:
        >>> raise ConfigError("Invalid output format", config_key="output.format")
    """

    def __init__(self, message: str, config_key: str | None = None, context: dict | None = None):
        """Initialize the config error.

        Args:
            message: Human-readable error message.
            config_key: The configuration key that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, ctx)
        self.config_key = config_key


class ScanError(StyleScanError):
    """Exception raised when a scan cannot start.

    Raised when the scan root does not exist or cannot be read.

    Example:
        >>> raise ScanError("Scan root does not exist", path="/nonexistent")
    """

    def __init__(self, message: str, path: str | None = None, context: dict | None = None):
        """Initialize the scan error.

        Args:
            message: Human-readable error message.
            path: The path that caused the error, if applicable.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path


class FileReadError(StyleScanError):
    """Exception raised when a single file cannot be read during a scan.

    The scanner catches this error, logs a warning and continues; the file
    contributes zero matches.
    """

    def __init__(self, message: str, file_path: str | None = None, context: dict | None = None):
        """Initialize the file read error.

        Args:
            message: Human-readable error message.
            file_path: The file that could not be read.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, ctx)
        self.file_path = file_path


class OutputError(StyleScanError):
    """Exception raised when the report cannot be written.

    Example:
        >>> raise OutputError("Failed to write report", output_path="/readonly/scan.md")
    """

    def __init__(self, message: str, output_path: str | None = None, context: dict | None = None):
        """Initialize the output error.

        Args:
            message: Human-readable error message.
            output_path: The output path that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if output_path:
            ctx["output_path"] = output_path
        super().__init__(message, ctx)
        self.output_path = output_path
