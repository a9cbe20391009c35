# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Application`, the root of an Arbor command tree, and the
`create_application` entry point.

An application is a command with a version, a localizer, a console writer, a
shell runner and an execution context. Every application gets:

- a `help` subcommand that shows the help page of the command path given as
  its arguments (`app help manage add`, `app help m:a`).
- a global `-h/--help` option that shows the application help page.

Example:
    def setup(app):
        app.option("verbose", ["-v", "--verbose"])

        def add(command):
            print(command.get_options())

        app.command("add", {"description": "Adds things.", "action": add})

    create_application({"name": "tool", "version": "1.0.0"}, setup)
"""
from __future__ import annotations

from typing import Any, Mapping

from rich.console import Console

from arbor.command import Command, CommandBlock
from arbor.console import ConsoleWriter
from arbor.context import ExecutionContext
from arbor.exceptions import AmbiguousCommandError, ArborError, MissingAppBlockError
from arbor.i18n import Localizer
from arbor.logger import logger
from arbor.parser import find_command
from arbor.role import Role
from arbor.settings import ApplicationSettings, BaseSettings
from arbor.shell import ShellResult, ShellRunner


class Application(Command):
    """
    The root command of an Arbor command tree.

    Args:
        settings (ApplicationSettings | Mapping | None): The command settings
            plus `version`, `locale`, `skip_commands`, `show_commands`,
            `output_commands`, `console`, `shell` and `context`.
        block (Callable[[Application], Any] | None): Declares the options and
            commands of the application.
    """

    role = Role.ROOT
    settings_model = ApplicationSettings

    def __init__(
        self,
        settings: ApplicationSettings | Any = None,
        block: CommandBlock | None = None,
    ) -> None:
        self._version: Any = None
        self._i18n: Localizer = Localizer()
        self._console: ConsoleWriter = ConsoleWriter()
        self._context: ExecutionContext = ExecutionContext()
        self._shell: ShellRunner | None = None
        self.skip_commands: bool = False
        self.show_commands: bool = False
        self.output_commands: bool = False

        super().__init__(settings, block)
        self.help_option()

    def _apply_setting(self, field: str, value: Any) -> None:
        if field == "version":
            self._version = value
        elif field == "locale":
            if value:
                self._i18n.set_locale(value)
        elif field == "skip_commands":
            self.skip_commands = bool(value)
        elif field == "show_commands":
            self.show_commands = bool(value)
        elif field == "output_commands":
            self.output_commands = bool(value)
        elif field == "console":
            if value is not None:
                self.console = value
        elif field == "shell":
            self._shell = value
        elif field == "context":
            if value is not None:
                self._context = value
        else:
            super()._apply_setting(field, value)

    def version(self, value: Any = None) -> Any:
        if value is not None:
            self._version = value
        return self._version

    @property
    def i18n(self) -> Localizer:
        return self._i18n

    @property
    def locale(self) -> str:
        return self._i18n.locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._i18n.set_locale(value)

    @property
    def console(self) -> ConsoleWriter:
        return self._console

    @console.setter
    def console(self, value: ConsoleWriter | Console) -> None:
        self._console = as_writer(value)

    @property
    def context(self) -> ExecutionContext:
        return self._context

    @context.setter
    def context(self, value: ExecutionContext) -> None:
        self._context = value

    @property
    def shell(self) -> ShellRunner:
        if self._shell is None:
            self._shell = ShellRunner(self._console, self._i18n, self._context)
        return self._shell

    @shell.setter
    def shell(self, value: ShellRunner | None) -> None:
        self._shell = value

    @property
    def executable_name(self) -> str:
        """The invocation name of the running process."""
        return self.context.program_name

    def execute(self, args: Any = None) -> None:
        """Execute the application, reading arguments from the context by default."""
        super().execute(self.context.argv if args is None else args)

    def help_option(self) -> None:
        """Register the `help` command and the global `-h/--help` option."""
        self.command(
            "help",
            {"description": self.i18n.help_command_description()},
            _declare_help_command,
        )
        self.option(
            "help",
            ["-h", "--help"],
            {"help": self.i18n.help_option_help()},
            _show_application_help,
        )

    def command_help(self, command: Command) -> None:
        """
        Show the help page for the command path in `command.arguments`.

        Every argument is a (possibly abbreviated) subcommand name, and
        `:`-chained names are flattened. The walk stops at the first token that
        does not resolve to exactly one subcommand.
        """
        tokens = [
            token for argument in command.arguments for token in str(argument).split(":")
        ]
        target: Command = self
        for token in tokens:
            try:
                found = find_command(token, target)
            except AmbiguousCommandError:
                found = None
            if found is None:
                break
            target = target.commands[found["name"]]

        target.show_help()

    def run(
        self,
        command: str,
        message: str | None = None,
        show_exit: bool = True,
        fatal: bool = True,
    ) -> ShellResult:
        """Run a shell command honoring the application's echo settings."""
        return self.shell.run(
            command,
            message,
            run=not self.skip_commands,
            show_exit=show_exit,
            show_output=self.output_commands,
            show_command=self.show_commands,
            fatal=fatal,
        )


def _declare_help_command(command: Command) -> None:
    command.action(_run_help_command)


def _run_help_command(command: Command) -> None:
    command.application.command_help(command)


def _show_application_help(application: Command, option: Any) -> None:
    application.show_help()


def as_writer(value: ConsoleWriter | Console | None) -> ConsoleWriter:
    if isinstance(value, ConsoleWriter):
        return value
    return ConsoleWriter(value)


def create_application(
    settings: ApplicationSettings | Mapping[str, Any] | None = None,
    block: CommandBlock | None = None,
    *,
    context: ExecutionContext | None = None,
) -> Application | None:
    """
    Build an application and, unless `run` is False, execute it.

    Args:
        settings (ApplicationSettings | Mapping | None): Application settings.
            Two extra keys are recognized: `run` (default True) and `args`, the
            arguments to execute with instead of the context's argv.
        block (Callable[[Application], Any] | None): Declares the application.
        context (ExecutionContext | None): Overrides the `context` setting.

    Returns:
        Application | None: The application, or None when creation failed and
        the context's exit function returned.

    Errors raised while building or executing the application are printed,
    logged and end the process with status 1.
    """
    if isinstance(settings, BaseSettings):
        values = settings.given()
    elif isinstance(settings, Mapping):
        values = {str(key): value for key, value in settings.items()}
    else:
        values = {}

    run = bool(values.pop("run", True))
    args = values.pop("args", None)
    if context is not None:
        values["context"] = context
    context = values.get("context") or ExecutionContext()
    writer = as_writer(values.get("console"))
    i18n = Localizer(values.get("locale"))
    values.setdefault("name", i18n.default_application_name())

    try:
        if block is None:
            raise MissingAppBlockError(Application, message=i18n.missing_block())
        application = Application(values, block)
        if run:
            application.execute(args)
    except ArborError as error:
        logger.error("[Application] %s", error.message)
        writer.error(error.message)
        context.exit(1)
        return None

    return application
