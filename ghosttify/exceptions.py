"""Custom exception hierarchy for ghosttify.

Exception Hierarchy:
    GhosttifyError (base)
    ├── SourceError - reading GNOME Terminal shortcuts
    │   ├── ExternalToolError
    │   ├── MalformedSourceDataError
    │   └── SourceReadError
    ├── ConfigTreeError - Ghostty configuration files
    │   ├── UnreadableConfigFileError (recoverable)
    │   ├── MissingRootConfigError
    │   └── ConfigWriteError
    ├── MappingError - bundled or user supplied mapping table
    └── ConfigurationError - invalid GHOSTTIFY_* settings

Translation anomalies (an unsupported action, a disabled key) are not
errors: those shortcuts are simply left out of the translated set.

Usage:
    from ghosttify.exceptions import ExternalToolError

    try:
        result = subprocess.run(cmd, ...)
    except FileNotFoundError as e:
        raise ExternalToolError("dconf is not installed", command="dconf") from e
"""

from typing import Any, Optional


class GhosttifyError(Exception):
    """Base exception for all ghosttify errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, commands)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Source (GNOME Terminal) Errors
# =============================================================================


class SourceError(GhosttifyError):
    """Base exception for reading the GNOME Terminal shortcut store."""

    pass


class ExternalToolError(SourceError):
    """The dconf command is missing, failed, or did not return in time."""

    def __init__(
        self,
        message: str = "External command failed",
        *,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        **context: Any,
    ) -> None:
        if command:
            context["command"] = command
        if exit_code is not None:
            context["exit_code"] = exit_code
        if stderr:
            stderr = stderr.strip()
            context["stderr"] = stderr[:200] + "..." if len(stderr) > 200 else stderr
        super().__init__(message, **context)


class MalformedSourceDataError(SourceError):
    """The dconf dump could not be parsed as key-value text."""

    def __init__(self, message: str = "Malformed dconf dump", **context: Any) -> None:
        super().__init__(message, **context)


class SourceReadError(SourceError):
    """A dconf dump file given on the command line could not be read."""

    def __init__(
        self,
        message: str = "Failed to read dconf dump",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Ghostty Configuration Errors
# =============================================================================


class ConfigTreeError(GhosttifyError):
    """Base exception for Ghostty configuration file operations."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = str(path)
        super().__init__(message, **context)


class UnreadableConfigFileError(ConfigTreeError):
    """A file in the configuration tree could not be read.

    The resolver treats this as "no content contributed" and carries on.
    """

    def __init__(self, message: str = "Unreadable config file", **context: Any) -> None:
        super().__init__(message, **context)


class MissingRootConfigError(ConfigTreeError):
    """The Ghostty root configuration file does not exist."""

    def __init__(self, message: str = "Ghostty config file not found", **context: Any) -> None:
        super().__init__(message, **context)


class ConfigWriteError(ConfigTreeError):
    """The root or override file could not be appended to.

    Lines already flushed before the failure are not rolled back.
    """

    def __init__(self, message: str = "Failed to write config file", **context: Any) -> None:
        super().__init__(message, **context)


# =============================================================================
# Mapping Errors
# =============================================================================


class MappingError(GhosttifyError):
    """The key/action mapping table is missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid mapping table",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = str(path)
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GhosttifyError):
    """A GHOSTTIFY_* setting has an invalid value."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
