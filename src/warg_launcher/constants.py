"""
Constants for the warg-server launcher.
"""

from __future__ import annotations

from typing import Final


# Target binary
SERVER_BINARY: Final[str] = "warg-server"
"""
Name of the server binary, looked up on PATH unless a path is given.
"""

# Environment variables
ENV_CONTENT_DIR: Final[str] = "CONTENT_DIR"
"""
Required. Directory the server stores content in.
"""

ENV_OPERATOR_KEY: Final[str] = "WARG_OPERATOR_KEY"
"""
Optional. Operator key handed to the server when set and non-empty.
"""

ENV_LOG_LEVEL: Final[str] = "WARG_LAUNCHER_LOG_LEVEL"
"""
Optional. Log level for the launcher itself.
"""

# Server flags
FLAG_CONTENT_DIR: Final[str] = "--content-dir"
FLAG_OPERATOR_KEY: Final[str] = "--operator-key"

REDACTED: Final[str] = "***"
"""
Placeholder shown instead of secret argument values.
"""

# Reserved exit codes
EXIT_CONFIG_ERROR: Final[int] = 78
"""
Required configuration is missing (sysexits EX_CONFIG).
"""

EXIT_LAUNCH_ERROR: Final[int] = 127
"""
Target binary could not be started (shell convention for "command not found").
"""

SIGNAL_EXIT_BASE: Final[int] = 128
"""
Exit status offset for a child terminated by a signal.
"""
