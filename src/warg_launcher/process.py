"""
Process invocation: resolving the server binary and handing control to it.

Two strategies share one contract, the child's termination status becomes
the launcher's own:

- ``exec_replace`` replaces the current process image (POSIX).
- ``spawn_and_wait`` starts a child, waits for it, and reports its outcome.
  ``terminate_as`` then exits the launcher the same way the child exited.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import shutil
import signal
import subprocess
import sys
import threading
from typing import TYPE_CHECKING, NoReturn

from .constants import SIGNAL_EXIT_BASE
from .exceptions import LaunchError
from .logging import log_signal_fallback


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__: list[str] = [
    "ExitOutcome",
    "exec_replace",
    "resolve_binary",
    "spawn_and_wait",
    "terminate_as",
]


# Signals relayed to the child while the launcher waits on it.
# Windows cannot relay SIGINT; its console already delivers Ctrl+C to the child.
_FORWARDED_SIGNALS: tuple[int, ...] = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT", "SIGUSR1", "SIGUSR2")
    if hasattr(signal, name) and (name != "SIGINT" or os.name == "posix")
)

_IGNORED_SIGNALS: tuple[int, ...] = () if os.name == "posix" else (signal.SIGINT,)


@dataclass(frozen=True, slots=True)
class ExitOutcome:
    """
    How the server process terminated.

    Exactly one of ``returncode`` and ``signum`` is set.
    """

    returncode: int | None = None
    signum: int | None = None

    def __post_init__(self) -> None:
        if (self.returncode is None) == (self.signum is None):
            raise ValueError("ExitOutcome needs exactly one of returncode or signum")

    @classmethod
    def from_returncode(cls, returncode: int) -> ExitOutcome:
        """
        Convert a ``subprocess`` return code; negative values mean "killed by signal".
        """

        if returncode < 0:
            return cls(signum=-returncode)

        return cls(returncode=returncode)

    @property
    def signaled(self) -> bool:
        return self.signum is not None

    @property
    def exit_status(self) -> int:
        if self.signum is not None:
            return SIGNAL_EXIT_BASE + self.signum

        return self.returncode


def resolve_binary(binary: str) -> str:
    """
    Locate the server binary.

    A name without a directory part is searched on PATH; anything else is
    treated as a path.

    Raises:
        LaunchError: If the binary does not exist or is not executable.
    """

    if os.path.dirname(binary):
        path = Path(binary)

        if not path.is_file():
            raise LaunchError(binary, "no such file")

        if not os.access(path, os.X_OK):
            raise LaunchError(binary, "permission denied (not executable)")

        return str(path)

    found = shutil.which(binary)

    if found is None:
        raise LaunchError(binary, "not found on PATH")

    return found


def exec_replace(path: str, argv: Sequence[str]) -> NoReturn:
    """
    Replace the current process with the server. Does not return on success.

    Raises:
        LaunchError: If the OS refuses to execute the binary.
    """

    # Buffered output would be lost with the old process image
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        os.execv(path, list(argv))
    except OSError as e:
        raise LaunchError(argv[0], e.strerror or str(e)) from e


def spawn_and_wait(path: str, argv: Sequence[str]) -> ExitOutcome:
    """
    Start the server as a child and wait for it to terminate.

    The child inherits stdin, stdout and stderr. It is never killed or timed
    out by the launcher; termination signals the launcher receives meanwhile
    are relayed to it.

    Raises:
        LaunchError: If the child cannot be started.
    """

    process: subprocess.Popen[bytes] | None = None
    pending: list[int] = []

    # Signals arriving before the child exists are held and relayed once it starts
    def forward(signum: int, _frame: object) -> None:
        if process is None:
            pending.append(signum)
        else:
            process.send_signal(signum)

    previous: dict[int, object] = {}

    # signal.signal only works from the main thread
    if threading.current_thread() is threading.main_thread():
        for signum in _FORWARDED_SIGNALS:
            previous[signum] = signal.signal(signum, forward)
        for signum in _IGNORED_SIGNALS:
            previous[signum] = signal.signal(signum, signal.SIG_IGN)

    try:
        try:
            process = subprocess.Popen(list(argv), executable=path, close_fds=True)
        except OSError as e:
            raise LaunchError(argv[0], e.strerror or str(e)) from e

        while pending:
            process.send_signal(pending.pop(0))

        returncode = process.wait()
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    return ExitOutcome.from_returncode(returncode)


def terminate_as(outcome: ExitOutcome) -> NoReturn:
    """
    End the launcher with the child's termination status.

    A signal-terminated child is mirrored by re-raising the same signal with
    its default disposition; if that does not end the process, the exit
    status falls back to 128 + signal.
    """

    sys.stdout.flush()
    sys.stderr.flush()

    if outcome.signum is not None and os.name == "posix":
        try:
            signal.signal(outcome.signum, signal.SIG_DFL)
            signal.raise_signal(outcome.signum)
        except (OSError, ValueError) as e:
            log_signal_fallback(outcome.signum, e)

    sys.exit(outcome.exit_status)
