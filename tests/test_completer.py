import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from arbor.application import Application
from arbor.completer import CommandTreeCompleter


@pytest.fixture
def completer(context):
    def setup(application):
        application.option("verbose", ["-v", "--verbose"])
        manage = application.command("manage")
        manage.command("add")
        manage.command("alter")
        manage.option("force")
        application.command("deploy")

    return CommandTreeCompleter(Application({"name": "tool", "context": context}, setup))


def texts(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_complete_root_commands(completer):
    assert texts(completer, "") == ["deploy", "help", "manage"]
    assert texts(completer, "d") == ["deploy"]


def test_complete_no_match(completer):
    assert texts(completer, "z") == []


def test_complete_subcommands_after_abbreviation(completer):
    assert texts(completer, "ma ") == ["a", "add", "alter"]
    assert texts(completer, "manage al") == ["alter"]


def test_complete_chained_names(completer):
    results = list(completer.get_completions(Document("m:al"), None))
    assert [c.text for c in results] == ["alter"]
    assert results[0].start_position == -2


def test_complete_options(completer):
    assert texts(completer, "--v") == ["--verbose"]
    assert texts(completer, "manage --") == ["--force", "--help"]
    assert texts(completer, "-v manage -") == ["--force", "--help", "-f", "-h"]


def test_complete_skips_positional_arguments(completer):
    assert texts(completer, "manage extra ad") == ["add"]


def test_complete_ambiguous_path(completer):
    assert texts(completer, "manage a ") == []


def test_complete_unbalanced_quotes(completer):
    assert texts(completer, 'manage "unterminated') == []


def test_lcp_completions(completer):
    results = list(completer._yield_lcp_completions(["alpha", "alpine", "beta"], "a"))
    assert isinstance(results[0], Completion)
    assert [c.text for c in results] == ["alp", "alpha", "alpine"]
