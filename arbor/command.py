# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, a node of the Arbor command tree.

A command owns its options, its subcommands and three lifecycle hooks:

- `before`: runs first.
- `action`: the body of the command.
- `after`: runs last.

Each hook receives the command itself. Hooks that do not accept exactly one
positional argument are ignored at registration.

`execute(args)` parses `args` against the command. When the parser resolves
a subcommand, execution recurses into it with the residual arguments.
Otherwise the hooks run, or the help page is shown when no action is bound.

Every child created with `Command.command()` gets a `-h/--help` option that
shows its own help page.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

from arbor.console import ConsoleWriter
from arbor.context import ExecutionContext
from arbor.exceptions import DuplicateCommandError, DuplicateOptionError
from arbor.help import HelpRenderer
from arbor.i18n import Localizer
from arbor.logger import logger
from arbor.option import Option, OptionAction
from arbor.parser import Parser
from arbor.role import Role
from arbor.settings import CommandSettings
from arbor.utils import accepts_arguments, ensure_list

if TYPE_CHECKING:
    from arbor.application import Application

CommandHook = Callable[["Command"], Any]
CommandBlock = Callable[["Command"], Any]

HOOK_NAMES = ("before", "action", "after")


class Command:
    """
    A node of the command tree.

    Args:
        settings (CommandSettings | Mapping | None): `name`, `description`,
            `banner`, `synopsis`, `before`, `action`, `after`, `parent` and
            `application`. Unknown keys are ignored.
        block (Callable[[Command], Any] | None): Called with the new command
            once the settings are applied. Used to declare options and
            subcommands.
    """

    role: Role = Role.CHILD
    settings_model: type[CommandSettings] = CommandSettings

    def __init__(
        self,
        settings: CommandSettings | Any = None,
        block: CommandBlock | None = None,
    ) -> None:
        self.name: Any = None
        self.description: str | None = None
        self.banner: str | None = None
        self.synopsis: str | None = None
        self.parent: Command | None = None
        self._application: Application | None = None
        self._hooks: dict[str, CommandHook | None] = dict.fromkeys(HOOK_NAMES)
        self._commands: dict[str, Command] = {}
        self._options: dict[str, Option] = {}
        self._arguments: list[Any] = []

        self.setup_with(settings)

        if block is not None:
            block(self)

    def setup_with(self, settings: CommandSettings | Any = None) -> Command:
        """Apply the explicitly given fields of `settings` to this command."""
        settings = self.settings_model.coerce(settings)
        for field, value in settings.given().items():
            self._apply_setting(field, value)
        return self

    def _apply_setting(self, field: str, value: Any) -> None:
        if field == "name":
            self.name = value
        elif field == "description":
            self.description = value
        elif field == "banner":
            self.banner = value
        elif field == "synopsis":
            self.synopsis = value
        elif field in HOOK_NAMES:
            self._set_hook(field, value)
        elif field == "parent":
            self.parent = value
        elif field == "application":
            self._application = value

    def _set_hook(self, name: str, hook: CommandHook | None) -> None:
        if hook is None:
            return
        if accepts_arguments(hook, 1):
            self._hooks[name] = hook
        else:
            logger.debug(
                "[Command:%s] Ignoring %s hook %r: it must accept (command).",
                self.name,
                name,
                hook,
            )

    def before(self, hook: CommandHook | None = None) -> CommandHook | None:
        """Read or set the hook run before the action. Usable as a decorator."""
        self._set_hook("before", hook)
        return hook if hook is not None else self._hooks["before"]

    def action(self, hook: CommandHook | None = None) -> CommandHook | None:
        """Read or set the body of the command. Usable as a decorator."""
        self._set_hook("action", hook)
        return hook if hook is not None else self._hooks["action"]

    def after(self, hook: CommandHook | None = None) -> CommandHook | None:
        """Read or set the hook run after the action. Usable as a decorator."""
        self._set_hook("after", hook)
        return hook if hook is not None else self._hooks["after"]

    @property
    def application(self) -> Application | None:
        if self.role is Role.ROOT:
            return self  # type: ignore[return-value]
        return self._application

    @application.setter
    def application(self, value: Application | None) -> None:
        self._application = value

    @property
    def i18n(self) -> Localizer:
        application = self.application
        if self.role is not Role.ROOT and application is not None:
            return application.i18n
        return Localizer()

    @property
    def console(self) -> ConsoleWriter:
        application = self.application
        if self.role is not Role.ROOT and application is not None:
            return application.console
        return ConsoleWriter()

    @property
    def context(self) -> ExecutionContext:
        application = self.application
        if self.role is not Role.ROOT and application is not None:
            return application.context
        return ExecutionContext()

    def full_name(self, suffix: Any = None, separator: str = ":") -> str | None:
        """
        Return the path of this command from the root, joined by `separator`.

        The root itself has no full name.
        """
        if self.role is Role.ROOT:
            return None
        parent_name = self.parent.full_name(None, separator) if self.parent else None
        parts = [parent_name, self.name, suffix]
        return separator.join(str(part) for part in parts if part is not None)

    def command(
        self,
        name: Any,
        settings: CommandSettings | Any = None,
        block: CommandBlock | None = None,
    ) -> Command:
        """
        Register a subcommand and return it.

        Raises:
            DuplicateCommandError: If a subcommand with the same name exists.
        """
        name = str(name)
        if name in self._commands:
            raise DuplicateCommandError(
                self,
                message=self.i18n.existing_command(name=self.full_name(name) or name),
            )

        settings = CommandSettings.coerce(settings).merged(
            name=name, parent=self, application=self.application
        )
        command = Command(settings, block)
        command.option(
            "help",
            ["-h", "--help"],
            {"help": self.i18n.help_option_help()},
            _show_help,
        )
        self._commands[name] = command
        logger.debug("[Command:%s] Registered subcommand '%s'.", self.name, name)
        return command

    def option(
        self,
        name: Any,
        forms: Sequence[str | None] | str | None = None,
        settings: Any = None,
        action: OptionAction | None = None,
    ) -> Option:
        """
        Register an option and return it.

        Raises:
            DuplicateOptionError: If an option with the same name exists.
        """
        name = str(name)
        if name in self._options:
            if self.role is Role.ROOT:
                message = self.i18n.existing_option_global(name=name)
            else:
                message = self.i18n.existing_option(name=name, command=self.full_name())
            raise DuplicateOptionError(self, message=message)

        option = Option(name, forms, settings, action)
        option.parent = self
        self._options[name] = option
        return option

    def argument(self, value: Any) -> None:
        self._arguments.append(value)

    @property
    def arguments(self) -> list[Any]:
        return self._arguments

    @property
    def commands(self) -> dict[str, Command]:
        return self._commands

    @property
    def options(self) -> dict[str, Option]:
        return self._options

    @property
    def has_commands(self) -> bool:
        return bool(self._commands)

    @property
    def has_options(self) -> bool:
        return bool(self._options)

    @property
    def has_description(self) -> bool:
        return self.description is not None and bool(str(self.description).strip())

    @property
    def has_banner(self) -> bool:
        return self.banner is not None and bool(str(self.banner).strip())

    def clear_commands(self) -> None:
        self._commands.clear()

    def clear_options(self) -> None:
        self._options.clear()

    def get_options(
        self,
        unprovided: bool = False,
        application_prefix: str | None = "application_",
        prefix: str | None = "",
        whitelist: Any = None,
    ) -> dict[str, Any]:
        """
        Collect option values into a dictionary.

        Args:
            unprovided (bool): Also include options that were neither provided
                nor given a default, as long as they have no action.
            application_prefix (str | None): When set and this is not the root,
                the root's options are included first under this prefix.
            prefix (str | None): Prefix for this command's own option keys.
            whitelist (Iterable[str] | None): Only include these option names.
                Empty means all.

        Returns:
            dict[str, Any]: Option values. Command values win over application
            values on key collision.
        """
        result: dict[str, Any] = {}
        application = self.application
        if (
            application_prefix is not None
            and application_prefix is not False
            and self.role is not Role.ROOT
            and application is not None
        ):
            result.update(
                application.get_options(unprovided, None, application_prefix, whitelist)
            )

        allowed = {str(name) for name in ensure_list(whitelist)}
        for name, option in self._options.items():
            if allowed and name not in allowed:
                continue
            if option.provided or option.has_default or (
                unprovided and option.action is None
            ):
                result[f"{prefix or ''}{name}"] = option.value
        return result

    def execute(self, args: Any = None) -> None:
        """Parse `args` and run either the resolved subcommand or this command."""
        subcommand = Parser().parse(self, args)
        if subcommand is not None:
            child = self._commands[subcommand["name"]]
            logger.debug(
                "[Command:%s] Resolved subcommand '%s' with %r.",
                self.name,
                subcommand["name"],
                subcommand["args"],
            )
            child.execute(subcommand["args"])
            return

        if self._hooks["action"] is None:
            self.show_help()
            return

        logger.info("[Command:%s] Executing.", self.full_name() or self.name)
        for name in HOOK_NAMES:
            hook = self._hooks[name]
            if hook is not None:
                hook(self)

    def show_help(self) -> None:
        """Render the help page and terminate with status 0."""
        HelpRenderer(self).render()
        self.context.exit(0)

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, role={self.role.value!r}, "
            f"options={list(self._options)}, commands={list(self._commands)})"
        )


def _show_help(command: Command, option: Option) -> None:
    command.show_help()
