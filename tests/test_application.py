import pytest
from rich.console import Console

from arbor.application import Application, create_application
from arbor.console import ConsoleWriter
from arbor.context import ExecutionContext
from arbor.exceptions import ErrorReason
from arbor.role import Role
from arbor.shell import ShellResult


def test_application_defaults(context):
    application = Application({"name": "tool", "context": context})
    assert application.role is Role.ROOT
    assert application.application is application
    assert application.parent is None
    assert application.full_name() is None
    assert application.version() is None
    assert application.skip_commands is False
    assert application.show_commands is False
    assert application.output_commands is False
    assert "help" in application.commands
    assert "help" in application.options
    assert application.commands["help"].description == "Shows a help about a command."


def test_application_settings(context):
    writer = ConsoleWriter()
    application = Application(
        {
            "name": "tool",
            "version": "1.2.3",
            "locale": "it",
            "skip_commands": True,
            "show_commands": True,
            "output_commands": True,
            "console": writer,
            "context": context,
        }
    )
    assert application.version() == "1.2.3"
    assert application.locale == "it"
    assert application.i18n.locale == "it"
    assert application.skip_commands is True
    assert application.show_commands is True
    assert application.output_commands is True
    assert application.console is writer
    assert application.context is context


def test_application_accepts_rich_console(context):
    console = Console()
    application = Application({"name": "tool", "console": console, "context": context})
    assert isinstance(application.console, ConsoleWriter)
    assert application.console.console is console


def test_application_version_setter(context):
    application = Application({"name": "tool", "context": context})
    assert application.version("2.0") == "2.0"
    assert application.version() == "2.0"


def test_executable_name_is_read_at_call_time():
    context = ExecutionContext(program="first")
    application = Application({"name": "tool", "context": context})
    assert application.executable_name == "first"
    context.program = "second"
    assert application.executable_name == "second"


def test_children_share_application_localizer(context):
    application = Application({"name": "tool", "locale": "it", "context": context})
    child = application.command("manage")
    assert child.i18n is application.i18n
    assert child.options["help"].help == "Mostra questo messaggio."


def test_execute_reads_arguments_from_context(context):
    seen = []
    context.arguments = ["run", "x"]
    application = Application({"name": "tool", "context": context})
    application.command("run", {"action": lambda command: seen.append(command.arguments)})

    application.execute()
    assert seen == [["x"]]


def test_execute_nested_abbreviations(context):
    """`m:a` and `manage add` reach the same command."""
    seen = []

    def setup(application):
        manage = application.command("manage")
        manage.command("add", {"action": lambda command: seen.append(command.full_name())})

    application = Application({"name": "tool", "context": context}, setup)
    application.execute(["m:a"])
    application.execute(["manage", "add"])
    application.execute(["ma", "a"])
    assert seen == ["manage:add", "manage:add", "manage:add"]


def test_execute_end_to_end_options(context):
    def setup(application):
        application.option("boolean")
        application.option("string", settings={"type": "string"})
        application.option("integer", settings={"type": "integer"})

    application = Application({"name": "tool", "context": context}, setup)
    application.action(lambda command: None)
    application.execute(["-b", "--string", "A", "--integer", "5"])

    assert application.get_options() == {"boolean": True, "string": "A", "integer": 5}


def test_application_help_option(context, capsys):
    def setup(application):
        application.option("verbose", ["-v", "--verbose"], {"help": "Prints more."})
        application.option("name", settings={"type": str, "meta": "WHO"})
        application.command("manage", {"description": "Manages things."})

    application = Application(
        {"name": "tool", "version": "1.0", "description": "A tool.", "context": context},
        setup,
    )
    with pytest.raises(SystemExit) as excinfo:
        application.execute(["--help"])
    assert excinfo.value.code == 0

    output = capsys.readouterr().out
    assert "[NAME]" in output
    assert "tool 1.0 - A tool." in output
    assert "tool [options] [command [subcommand ...]] [command-options] [arguments]" in output
    assert "[GLOBAL OPTIONS]" in output
    assert "-n WHO, --name WHO - *NO DESCRIPTION PROVIDED*" in output
    assert "-v, --verbose      - Prints more." in output
    assert "[COMMANDS]" in output
    assert "manage - Manages things." in output
    assert "help   - Shows a help about a command." in output


def test_application_without_action_shows_help(context, capsys):
    application = Application({"name": "tool", "context": context})
    with pytest.raises(SystemExit) as excinfo:
        application.execute([])
    assert excinfo.value.code == 0
    assert "[SYNOPSIS]" in capsys.readouterr().out


def test_command_help_walks_abbreviated_path(context, capsys):
    def setup(application):
        manage = application.command("manage", {"description": "Manages things."})
        manage.command("add", {"banner": "Adds things to the list."})

    application = Application({"name": "tool", "context": context}, setup)
    with pytest.raises(SystemExit):
        application.execute(["help", "m:a"])

    output = capsys.readouterr().out
    assert "[DESCRIPTION]" in output
    assert "Adds things to the list." in output
    assert "tool [options] manage add [command-options] [arguments]" in output


def test_command_help_stops_at_unknown_token(context, capsys):
    def setup(application):
        manage = application.command("manage", {"description": "Manages things."})
        manage.command("add")
        manage.command("alter")

    application = Application({"name": "tool", "context": context}, setup)
    with pytest.raises(SystemExit):
        application.execute(["help", "manage", "a", "zzz"])

    output = capsys.readouterr().out
    assert "[SUBCOMMANDS]" in output
    assert "add   - *NO DESCRIPTION PROVIDED*" in output
    assert "alter - *NO DESCRIPTION PROVIDED*" in output


def test_run_forwards_shell_flags(context):
    calls = []

    class FakeShell:
        def run(self, command, message=None, **kwargs):
            calls.append((command, message, kwargs))
            return ShellResult(status=0)

    application = Application(
        {
            "name": "tool",
            "skip_commands": True,
            "show_commands": True,
            "shell": FakeShell(),
            "context": context,
        }
    )
    result = application.run("echo hi", "Greeting", show_exit=False)

    assert result.success
    assert calls == [
        (
            "echo hi",
            "Greeting",
            {
                "run": False,
                "show_exit": False,
                "show_output": False,
                "show_command": True,
                "fatal": True,
            },
        )
    ]


def test_create_application_runs_with_args(context):
    seen = []

    def setup(application):
        application.command("go", {"action": lambda command: seen.append("go")})

    application = create_application({"name": "tool", "args": ["go"]}, setup, context=context)
    assert isinstance(application, Application)
    assert seen == ["go"]


def test_create_application_without_run(context):
    seen = []
    application = create_application(
        {"name": "tool", "run": False},
        lambda application: application.action(lambda command: seen.append(1)),
        context=context,
    )
    assert application.name == "tool"
    assert seen == []


def test_create_application_default_name(context):
    application = create_application({"run": False}, lambda application: None, context=context)
    assert application.name == "__APPLICATION__"


def test_create_application_without_block(context, capsys, caplog):
    with pytest.raises(SystemExit) as excinfo:
        create_application({"name": "tool"}, context=context)
    assert excinfo.value.code == 1
    assert "You have to provide a block to create an application!" in capsys.readouterr().out
    assert "provide a block" in caplog.text


def test_create_application_reports_errors(context, capsys):
    def setup(application):
        application.option("name", settings={"type": str, "required": True})

    with pytest.raises(SystemExit) as excinfo:
        create_application({"name": "tool", "args": []}, setup, context=context)
    assert excinfo.value.code == 1
    assert "Required option -n/--name is missing." in capsys.readouterr().out


def test_create_application_returns_none_when_exit_returns():
    statuses = []
    context = ExecutionContext(arguments=[], program="tool", exit_function=statuses.append)
    result = create_application({"name": "tool"}, None, context=context)
    assert result is None
    assert statuses == [1]


def test_error_reason_values():
    assert [reason.value for reason in ErrorReason] == [
        "duplicate_command",
        "duplicate_option",
        "ambiguous_command",
        "ambiguous_form",
        "missing_argument",
        "invalid_option",
        "invalid_argument",
        "missing_option",
        "validation_failed",
        "missing_app_block",
    ]


def test_create_application_accepts_non_string_description(context, capsys):
    seen = []

    def setup(application):
        application.command(
            "x", {"description": 5, "action": lambda command: seen.append("x")}
        )

    application = create_application(
        {"name": "tool", "args": ["x"], "locale": 1}, setup, context=context
    )
    assert seen == ["x"]
    assert application.commands["x"].description == 5
    assert application.locale == "en"

    with pytest.raises(SystemExit) as excinfo:
        application.execute(["-h"])
    assert excinfo.value.code == 0
    assert "- 5" in capsys.readouterr().out
