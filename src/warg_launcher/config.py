"""
Configuration classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import dotenv_values

from .constants import ENV_CONTENT_DIR, ENV_OPERATOR_KEY
from .exceptions import ConfigurationError


if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """
    Launcher settings, read once from the environment at startup.

    Attributes:
        content_dir: Directory passed to the server as ``--content-dir``. Never validated here.
        operator_key: Operator key passed as ``--operator-key``, or None when unset or empty.
    """

    content_dir: str
    operator_key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.content_dir:
            raise ConfigurationError(variable=ENV_CONTENT_DIR)

        # An empty key means "not set"; there is no present-but-empty state.
        if self.operator_key == "":
            object.__setattr__(self, "operator_key", None)

    @property
    def has_operator_key(self) -> bool:
        return self.operator_key is not None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | os.PathLike[str] | None = None,
    ) -> LauncherConfig:
        """
        Build the configuration from an environment mapping.

        Args:
            environ: Variables to read. Defaults to a snapshot of ``os.environ``.
            env_file: Optional dotenv file. Its values only fill keys missing from ``environ``.

        Raises:
            ConfigurationError: If the content directory is unset or empty, or env_file does not exist.
        """

        values: dict[str, str] = dict(os.environ if environ is None else environ)

        if env_file is not None:
            path = Path(env_file)

            if not path.is_file():
                raise ConfigurationError(f"Env file not found: {path}", variable=str(path))

            for key, value in dotenv_values(path).items():
                if value is not None:
                    values.setdefault(key, value)

        content_dir = values.get(ENV_CONTENT_DIR, "")

        if not content_dir:
            raise ConfigurationError(variable=ENV_CONTENT_DIR)

        return cls(content_dir=content_dir, operator_key=values.get(ENV_OPERATOR_KEY) or None)
