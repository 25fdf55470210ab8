from __future__ import annotations

import json
import os
from pathlib import Path
import sys

import pytest

from warg_launcher.logging import configure_logging


FAKE_SERVER = """#!{python}
import json
import os
import sys

with open(os.environ["FAKE_SERVER_OUTPUT"], "w", encoding="utf-8") as f:
    json.dump(sys.argv[1:], f)

sys.exit(int(os.environ.get("FAKE_SERVER_EXIT", "0")))
"""


posix_only = pytest.mark.skipif(os.name != "posix", reason="needs an executable script with a shebang")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in ("CONTENT_DIR", "WARG_OPERATOR_KEY", "WARG_LAUNCHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    yield

    configure_logging("DISABLED")


class FakeServer:
    def __init__(self, path: Path, output: Path) -> None:
        self.path = path
        self.output = output

    @property
    def invoked(self) -> bool:
        return self.output.exists()

    @property
    def args(self) -> list[str]:
        return json.loads(self.output.read_text(encoding="utf-8"))


@pytest.fixture
def fake_server(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    """An executable that records its arguments and exits with $FAKE_SERVER_EXIT."""

    path = tmp_path / "warg-server"
    path.write_text(FAKE_SERVER.format(python=sys.executable), encoding="utf-8")
    path.chmod(0o755)

    output = tmp_path / "argv.json"
    monkeypatch.setenv("FAKE_SERVER_OUTPUT", str(output))

    return FakeServer(path, output)
