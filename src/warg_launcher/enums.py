"""
Enums for launcher options.
"""

from __future__ import annotations

from enum import Enum
import os


class InvocationMode(str, Enum):
    """
    How the server binary takes over from the launcher.
    """

    AUTO = "auto"
    """
    Replace the process where the platform supports it, spawn otherwise.
    """

    EXEC = "exec"
    """
    Replace the current process image in place (same PID).
    """

    SPAWN = "spawn"
    """
    Start a child, wait for it, then exit with its status.
    """

    def resolve(self) -> InvocationMode:
        if self is not InvocationMode.AUTO:
            return self

        return InvocationMode.EXEC if os.name == "posix" else InvocationMode.SPAWN


class LogLevel(str, Enum):
    """
    Logging levels for the launcher.

    DISABLED turns launcher logging off entirely; errors still reach stderr
    as a one-line diagnostic.
    """

    DISABLED = "DISABLED"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
