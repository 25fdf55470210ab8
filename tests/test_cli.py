import pytest

from warg_launcher.cli import main

from .conftest import posix_only


def test_missing_content_dir(capsys: pytest.CaptureFixture[str], fake_server):
    assert main(["--binary", str(fake_server.path)]) == 78

    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert "CONTENT_DIR" in captured.err
    assert captured.out == ""
    assert not fake_server.invoked


def test_empty_content_dir(monkeypatch: pytest.MonkeyPatch, fake_server):
    monkeypatch.setenv("CONTENT_DIR", "")

    assert main(["--binary", str(fake_server.path)]) == 78
    assert not fake_server.invoked


def test_missing_binary(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path):
    monkeypatch.setenv("CONTENT_DIR", "/data")

    assert main(["--binary", str(tmp_path / "warg-server"), "--mode", "spawn"]) == 127
    assert "Cannot launch" in capsys.readouterr().err


def test_dry_run_hides_operator_key(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setenv("CONTENT_DIR", "/my data")
    monkeypatch.setenv("WARG_OPERATOR_KEY", "abc123")

    assert main(["--dry-run"]) == 0

    out = capsys.readouterr().out
    assert out.strip() == "warg-server --content-dir '/my data' --operator-key '***'"
    assert "abc123" not in out


def test_env_file(tmp_path, capsys: pytest.CaptureFixture[str]):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTENT_DIR=/from-file\n", encoding="utf-8")

    assert main(["--env-file", str(env_file), "--dry-run"]) == 0
    assert capsys.readouterr().out.strip() == "warg-server --content-dir /from-file"


def test_invalid_log_level_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WARG_LAUNCHER_LOG_LEVEL", "loud")

    with pytest.raises(SystemExit) as exc_info:
        main(["--dry-run"])

    assert exc_info.value.code == 2


@posix_only
def test_spawn_forwards_exit_code(monkeypatch: pytest.MonkeyPatch, fake_server):
    monkeypatch.setenv("CONTENT_DIR", "/data")
    monkeypatch.setenv("WARG_OPERATOR_KEY", "abc123")
    monkeypatch.setenv("FAKE_SERVER_EXIT", "5")

    with pytest.raises(SystemExit) as exc_info:
        main(["--binary", str(fake_server.path), "--mode", "spawn"])

    assert exc_info.value.code == 5
    assert fake_server.args == ["--content-dir", "/data", "--operator-key", "abc123"]


@posix_only
def test_debug_logging_never_shows_operator_key(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], fake_server
):
    monkeypatch.setenv("CONTENT_DIR", "/data")
    monkeypatch.setenv("WARG_OPERATOR_KEY", "abc123")

    with pytest.raises(SystemExit):
        main(["--binary", str(fake_server.path), "--mode", "spawn", "--log-level", "debug"])

    err = capsys.readouterr().err
    assert "Argument vector built" in err
    assert "***" in err
    assert "abc123" not in err
