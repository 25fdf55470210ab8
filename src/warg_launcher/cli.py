"""
Command-line entry point for the warg-server launcher.
"""

from __future__ import annotations

import argparse
import os
import shlex

from rich.console import Console
from rich.markup import escape

from . import __version__
from .argv import redact_argv
from .config import LauncherConfig
from .constants import ENV_CONTENT_DIR, ENV_LOG_LEVEL, ENV_OPERATOR_KEY, SERVER_BINARY
from .core import Launcher
from .enums import InvocationMode, LogLevel
from .exceptions import LauncherError
from .logging import configure_logging, log_error


# Diagnostics go to stderr; stdout belongs to the server
console = Console(stderr=True, soft_wrap=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warg-launcher",
        description="Start warg-server with flags taken from the environment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment Variables:
  {ENV_CONTENT_DIR:<24}  (required) - Passed as --content-dir
  {ENV_OPERATOR_KEY:<24}  (optional) - Passed as --operator-key when non-empty
  {ENV_LOG_LEVEL:<24}  (optional) - Launcher log level (default: DISABLED)

Examples:
  CONTENT_DIR=/data warg-launcher
  CONTENT_DIR=/data WARG_OPERATOR_KEY=... warg-launcher --mode spawn
  warg-launcher --env-file .env --dry-run
        """,
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in InvocationMode],
        default=InvocationMode.AUTO.value,
        help="exec replaces this process, spawn waits for a child (default: auto)",
    )
    parser.add_argument(
        "--binary",
        default=SERVER_BINARY,
        help=f"server binary name or path (default: {SERVER_BINARY})",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="dotenv file with fallback values; the process environment takes precedence",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the command line instead of running it (operator key hidden)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        default=None,
        help=f"launcher log level (default: ${ENV_LOG_LEVEL} or DISABLED)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(args: list[str] | None = None) -> int:
    """
    Run the launcher.

    Returns the exit status for the cases where the server is not started;
    otherwise the process ends with the server's own status.
    """

    parser = build_parser()
    options = parser.parse_args(args)

    try:
        configure_logging(options.log_level or os.environ.get(ENV_LOG_LEVEL, LogLevel.DISABLED.value))
    except ValueError:
        parser.error(f"invalid {ENV_LOG_LEVEL}: {os.environ.get(ENV_LOG_LEVEL)!r}")

    try:
        config = LauncherConfig.from_env(env_file=options.env_file)
        launcher = Launcher(config, binary=options.binary, mode=options.mode)

        if options.dry_run:
            print(shlex.join(redact_argv(launcher.argv)))
            return 0

        launcher.run()
    except LauncherError as e:
        log_error(e)
        console.print(f"[bold red]error:[/bold red] {escape(e.message)}")
        return e.exit_code
