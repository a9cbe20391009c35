import shutil
import sys
import tempfile
from pathlib import Path

import pytest

from arbor import __main__ as arbor_main
from arbor.__main__ import bootstrap, find_arbor_config, main

CALLS = []


def greet(command):
    CALLS.append(command.arguments)


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in an empty working directory without logging setup."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARBOR_CONFIG", raising=False)
    monkeypatch.setattr(arbor_main, "setup_logging", lambda: None)
    CALLS.clear()
    yield tmp_path


def test_find_arbor_config_none():
    assert find_arbor_config() is None


def test_find_arbor_config_in_cwd(isolated_cwd):
    config_file = isolated_cwd / "arbor.toml"
    config_file.touch()
    assert find_arbor_config().resolve() == config_file.resolve()


def test_find_arbor_config_from_env(tmp_path, monkeypatch):
    other = tmp_path / "elsewhere"
    other.mkdir()
    config_file = other / "custom.yaml"
    config_file.touch()
    monkeypatch.setenv("ARBOR_CONFIG", str(config_file))
    assert find_arbor_config() == config_file


def test_find_arbor_config_in_home(fake_home):
    config_dir = fake_home / ".config" / "arbor"
    config_dir.mkdir(parents=True)
    config_file = config_dir / "arbor.yaml"
    config_file.touch()
    assert find_arbor_config() == config_file


def test_bootstrap_extends_sys_path(isolated_cwd, monkeypatch):
    monkeypatch.setattr(sys, "path", list(sys.path))
    (isolated_cwd / "arbor.yaml").touch()
    config_path = bootstrap()
    assert config_path is not None
    assert str(config_path.parent) in sys.path


def test_main_without_config(context, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(context=context)
    assert excinfo.value.code == 1
    assert "No Arbor configuration found." in capsys.readouterr().out


def test_main_runs_config(isolated_cwd, context):
    (isolated_cwd / "arbor.yaml").write_text(
        "name: tool\ncommands:\n  - name: greet\n    action: test_main.greet\n"
    )
    context.arguments = ["gr", "world"]
    application = main(context=context)
    assert application.name == "tool"
    assert CALLS == [["world"]]


def test_main_reports_errors(isolated_cwd, context, capsys):
    (isolated_cwd / "arbor.yaml").write_text("name: tool\ncommands:\n  - name: greet\n")
    context.arguments = ["--bogus"]
    with pytest.raises(SystemExit) as excinfo:
        main(context=context)
    assert excinfo.value.code == 1
    assert "Option --bogus is not valid." in capsys.readouterr().out
