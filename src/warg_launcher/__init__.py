"""
Launch warg-server with command-line flags taken from the environment.
"""

from importlib import metadata

from .argv import build_argv, redact_argv
from .config import LauncherConfig
from .core import Launcher
from .enums import InvocationMode, LogLevel
from .exceptions import ConfigurationError, LaunchError, LauncherError
from .process import ExitOutcome


__version__: str = metadata.version("warg-launcher")
__all__: list[str] = [
    "ConfigurationError",
    "ExitOutcome",
    "InvocationMode",
    "LaunchError",
    "Launcher",
    "LauncherConfig",
    "LauncherError",
    "LogLevel",
    "build_argv",
    "redact_argv",
]
