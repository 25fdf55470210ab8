"""
Core launcher: environment configuration in, running server out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from .argv import build_argv
from .constants import SERVER_BINARY
from .enums import InvocationMode
from .logging import log_argv_built, log_binary_resolved, log_child_exit, log_config_loaded, log_invocation
from .process import ExitOutcome, exec_replace, resolve_binary, spawn_and_wait, terminate_as


if TYPE_CHECKING:
    from .config import LauncherConfig


class Launcher:
    """
    Starts the server binary for a given configuration.

    The configuration is taken as an already-validated value; building it
    from the environment is ``LauncherConfig.from_env``'s job.

    Example:
        >>> config = LauncherConfig.from_env()
        >>> Launcher(config).run()
    """

    __slots__ = ("_binary", "_config", "_mode")

    def __init__(
        self,
        config: LauncherConfig,
        *,
        binary: str = SERVER_BINARY,
        mode: InvocationMode | str = InvocationMode.AUTO,
    ) -> None:
        self._config = config
        self._binary = binary
        self._mode = InvocationMode(mode).resolve()

        log_config_loaded(config)

    @property
    def config(self) -> LauncherConfig:
        return self._config

    @property
    def binary(self) -> str:
        return self._binary

    @property
    def mode(self) -> InvocationMode:
        """Invocation mode, with AUTO already resolved for this platform."""

        return self._mode

    @property
    def argv(self) -> list[str]:
        return build_argv(self._config, self._binary)

    def resolve_binary(self) -> str:
        """
        Path of the server binary.

        Raises:
            LaunchError: If it is missing or not executable.
        """

        path = resolve_binary(self._binary)
        log_binary_resolved(self._binary, path)

        return path

    def launch(self) -> ExitOutcome:
        """
        Hand control to the server.

        In EXEC mode this only returns by raising; the server replaces the
        current process. In SPAWN mode it returns once the server has exited.

        Raises:
            LaunchError: If the server cannot be started.
        """

        path = self.resolve_binary()
        argv = self.argv
        log_argv_built(argv)
        log_invocation(self._mode.value, path)

        if self._mode is InvocationMode.EXEC:
            exec_replace(path, argv)

        outcome = spawn_and_wait(path, argv)
        log_child_exit(outcome)

        return outcome

    def run(self) -> NoReturn:
        """
        Launch the server and terminate with its status.
        """

        terminate_as(self.launch())
