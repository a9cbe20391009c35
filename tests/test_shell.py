import sys

import pytest

from arbor.console import ConsoleWriter
from arbor.shell import ShellResult, ShellRunner


@pytest.fixture
def runner(context):
    return ShellRunner(ConsoleWriter(), context=context)


def test_shell_result():
    assert ShellResult(0).success
    assert not ShellResult(2, "boom").success


def test_run_success_with_output(runner, capsys):
    result = runner.run("echo hello", show_output=True, show_command=True)
    assert result.status == 0
    assert result.output.strip() == "hello"

    output = capsys.readouterr().out
    assert "Running command: echo hello" in output
    assert "hello" in output
    assert "Command succeeded." in output


def test_run_skipped(runner, capsys):
    result = runner.run("exit 3", "Doing things", run=False)
    assert result == ShellResult(status=0, output="")
    output = capsys.readouterr().out
    assert "Doing things" in output
    assert "Skipping command: exit 3" in output


def test_run_failure_not_fatal(runner, capsys):
    result = runner.run(f'"{sys.executable}" -c "import sys; sys.exit(4)"', fatal=False)
    assert result.status == 4
    assert "Command failed with status 4." in capsys.readouterr().out


def test_run_failure_fatal(runner):
    with pytest.raises(SystemExit) as excinfo:
        runner.run(f'"{sys.executable}" -c "import sys; sys.exit(5)"', show_exit=False)
    assert excinfo.value.code == 5
