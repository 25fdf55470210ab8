"""Logging configuration using loguru.

Launcher logging is disabled by default and written to stderr when enabled,
so the server's own stdout is never interleaved with launcher output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

from .argv import redact_argv
from .enums import LogLevel


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import LauncherConfig
    from .process import ExitOutcome


# Remove default handler so nothing is printed until configure_logging runs
logger.remove()
logger.disable("warg_launcher")

_handler_id: int | None = None


def configure_logging(level: LogLevel | str = LogLevel.DISABLED) -> None:
    """Configure logging for the launcher.

    Args:
        level: Logging level (LogLevel enum or string). Default is DISABLED.

    Raises:
        ValueError: If level is not a known level name.
    """

    global _handler_id  # noqa: PLW0603

    level = LogLevel(level.value if isinstance(level, LogLevel) else str(level).upper())

    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None

    if level is LogLevel.DISABLED:
        logger.disable("warg_launcher")
        return

    logger.enable("warg_launcher")

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    _handler_id = logger.add(
        sys.stderr,
        format=console_format,
        level=level.value,
        colorize=True,
        filter="warg_launcher",
    )


def log_config_loaded(config: LauncherConfig) -> None:
    logger.info(
        "Configuration loaded | content_dir={content_dir} operator_key_set={has_key}",
        content_dir=config.content_dir,
        has_key=config.has_operator_key,
    )


def log_argv_built(argv: Sequence[str]) -> None:
    """
    Log the argument vector with the operator key value hidden.
    """

    logger.debug("Argument vector built | argv={argv}", argv=redact_argv(argv))


def log_binary_resolved(binary: str, path: str) -> None:
    logger.debug("Server binary resolved | binary={binary} path={path}", binary=binary, path=path)


def log_invocation(mode: str, path: str) -> None:
    logger.info("Starting server | mode={mode} path={path}", mode=mode, path=path)


def log_child_exit(outcome: ExitOutcome) -> None:
    level = "INFO" if outcome.exit_status == 0 else "WARNING"
    logger.log(
        level,
        "Server exited | returncode={returncode} signal={signum} exit_status={exit_status}",
        returncode=outcome.returncode,
        signum=outcome.signum,
        exit_status=outcome.exit_status,
    )


def log_signal_fallback(signum: int, error: BaseException) -> None:
    """
    Log that the child's signal could not be re-raised on the launcher.
    """

    logger.debug(
        "Signal re-raise failed, exiting with 128 + signal | signal={signum} error_type={error_type} message={message}",
        signum=signum,
        error_type=type(error).__name__,
        message=str(error),
    )


def log_error(error: Exception) -> None:
    logger.error(
        "Launcher failed | error_type={error_type} message={message}",
        error_type=type(error).__name__,
        message=str(error),
    )
