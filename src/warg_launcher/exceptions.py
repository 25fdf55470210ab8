"""
Custom exceptions for the warg-server launcher.
"""

from __future__ import annotations

from .constants import EXIT_CONFIG_ERROR, EXIT_LAUNCH_ERROR


__all__: list[str] = [
    "ConfigurationError",
    "LaunchError",
    "LauncherError",
]


class LauncherError(Exception):
    """Base exception for all launcher errors."""

    def __init__(self, message: str, exit_code: int) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigurationError(LauncherError):
    """
    Raised when required configuration is missing or empty.

    Detected before any external action is taken; the server is never started.

    Attributes:
        variable: Name of the offending variable or file, if any.
    """

    def __init__(self, message: str | None = None, variable: str | None = None) -> None:
        self.variable = variable
        super().__init__(
            message or f"{variable} environment variable is required and must not be empty",
            exit_code=EXIT_CONFIG_ERROR,
        )


class LaunchError(LauncherError):
    """Raised when the server binary is missing, not executable, or fails to start."""

    def __init__(self, binary: str, reason: str) -> None:
        self.binary = binary
        super().__init__(f"Cannot launch '{binary}': {reason}", exit_code=EXIT_LAUNCH_ERROR)
