"""
Argument vector construction for the server binary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import FLAG_CONTENT_DIR, FLAG_OPERATOR_KEY, REDACTED, SERVER_BINARY


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import LauncherConfig


__all__: list[str] = ["build_argv", "redact_argv"]


def build_argv(config: LauncherConfig, binary: str = SERVER_BINARY) -> list[str]:
    """
    Build the server's argument vector.

    Every value is a single token, so values containing spaces or shell
    metacharacters reach the server untouched.
    """

    argv = [binary, FLAG_CONTENT_DIR, config.content_dir]

    if config.has_operator_key:
        argv.extend([FLAG_OPERATOR_KEY, config.operator_key])

    return argv


def redact_argv(argv: Sequence[str]) -> list[str]:
    """
    Copy of argv with the operator key value replaced, safe to log or print.
    """

    redacted = list(argv)

    for index, token in enumerate(redacted[:-1]):
        if token == FLAG_OPERATOR_KEY:
            redacted[index + 1] = REDACTED

    return redacted
