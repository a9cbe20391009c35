# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses command line arguments against a node of the command tree.

`Parser.parse(command, args)` works in one of two modes:

- The command declares options: every token is scanned left to right. Flags
  are assigned to their options, other tokens are tried as (abbreviated)
  subcommand names and otherwise become positional arguments of the command.
  Once the scan ends, required options that were never provided are reported.
- The command declares no options: the first argument is tried as a
  subcommand name, and if it does not match every argument becomes a
  positional argument.

When a subcommand is recognized, scanning stops and a descriptor is returned:

    {"name": "manage", "args": ["add", "--force"]}

Subcommand names can be abbreviated to any unambiguous prefix and chained with
a separator, so `m:a` resolves like `manage add`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from arbor.exceptions import (
    AmbiguousCommandError,
    AmbiguousFormError,
    InvalidArgumentError,
    InvalidOptionError,
    MissingArgumentError,
    MissingOptionError,
)
from arbor.logger import logger
from arbor.option import Option, OptionType
from arbor.utils import ensure_list, smart_join

if TYPE_CHECKING:
    from arbor.command import Command

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
FLOAT_PATTERN = re.compile(r"^[+-]?\d+(\.\d+)?$")
TERMINATOR = "--"


class MissingArgument(Exception):
    """Raised by the scanner when a valued option is the last token."""

    def __init__(self, option: Option) -> None:
        super().__init__(option.label)
        self.option = option


class InvalidOption(Exception):
    """Raised by the scanner on a flag no option declares."""

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


@dataclass
class ScanEvent:
    """
    One step of a scan.

    Either a recognized `option` (with its raw `value`, None for argument-less
    options) or an operand `token` followed by the `rest` of the unscanned
    tokens. `literal` operands come after the `--` terminator.
    """

    option: Option | None = None
    value: str | None = None
    token: Any = None
    rest: list[Any] = field(default_factory=list)
    literal: bool = False


class OptionScanner:
    """
    Recognizes the short and long forms of a set of options.

    Supported syntax:
    - `--long value`, `--long=value`
    - `-s value`, `-svalue`
    - `-abc` for bundled argument-less short flags
    - `--` to end option scanning
    """

    def __init__(self, options: Iterable[Option]) -> None:
        self._forms: dict[str, Option] = {}
        for option in options:
            self._forms[option.complete_short] = option
            self._forms[option.complete_long] = option

    def scan(self, args: Iterable[Any]) -> Iterator[ScanEvent]:
        pending = list(args)
        while pending:
            token = pending.pop(0)
            text = str(token)

            if text == TERMINATOR:
                for literal in pending:
                    yield ScanEvent(token=literal, literal=True)
                return

            if text.startswith("--"):
                yield self._scan_long(text, pending)
            elif text.startswith("-") and len(text) > 1:
                yield from self._scan_short(text, pending)
            else:
                yield ScanEvent(token=token, rest=list(pending))

    def _scan_long(self, text: str, pending: list[Any]) -> ScanEvent:
        form, has_value, attached = text.partition("=")
        option = self._forms.get(form)
        if option is None:
            raise InvalidOption(text)

        if not option.requires_argument:
            if has_value:
                raise InvalidOption(text)
            return ScanEvent(option=option)

        if has_value:
            return ScanEvent(option=option, value=attached)
        return ScanEvent(option=option, value=self._next_value(option, pending))

    def _scan_short(self, text: str, pending: list[Any]) -> Iterator[ScanEvent]:
        flags = text[1:]
        for index, flag in enumerate(flags):
            option = self._forms.get(f"-{flag}")
            if option is None:
                raise InvalidOption(text)

            if option.requires_argument:
                attached = flags[index + 1 :]
                value = attached if attached else self._next_value(option, pending)
                yield ScanEvent(option=option, value=value)
                return

            yield ScanEvent(option=option)

    @staticmethod
    def _next_value(option: Option, pending: list[Any]) -> str:
        if not pending:
            raise MissingArgument(option)
        return str(pending.pop(0))


def find_command(
    token: Any,
    command: Command,
    args: Any = None,
    separator: str = ":",
) -> dict[str, Any] | None:
    """
    Match `token` against the subcommands of `command`.

    A token containing `separator` is split once and its tail is put back in
    front of `args`. The head matches every subcommand name it is a
    case-sensitive prefix of.

    Args:
        token (Any): The typed token.
        command (Command): The command whose subcommands are searched.
        args (Any): The arguments following the token.
        separator (str): The separator for chained subcommand names.

    Returns:
        dict | None: `{"name": ..., "args": [...]}` for a unique match, None
        when nothing matches or the command has no subcommands.

    Raises:
        AmbiguousCommandError: If more than one subcommand matches.
    """
    if not command.has_commands:
        return None

    args = ensure_list(args)
    token = str(token)
    if separator in token:
        token, tail = token.split(separator, 1)
        args.insert(0, tail)

    matching = [name for name in command.commands if name.startswith(token)]
    if not matching:
        return None
    if len(matching) > 1:
        raise AmbiguousCommandError(
            command,
            message=command.i18n.ambiguous_command(
                name=token, candidates=smart_join(matching)
            ),
        )
    return {"name": matching[0], "args": args}


class Parser:
    """Resolves arguments against a command: option values, positional
    arguments and the subcommand to run next."""

    find_command = staticmethod(find_command)
    smart_join = staticmethod(smart_join)

    def parse(self, command: Command, args: Any = None) -> dict[str, Any] | None:
        args = ensure_list(args)
        if command.has_options:
            return self._parse_options(command, args)
        if args:
            return self._find_command_to_execute(command, args)
        return None

    def check_unique(self, command: Command) -> None:
        """
        Verify that no two options of `command` share a form.

        Raises:
            AmbiguousFormError: Naming both conflicting options.
        """
        forms: dict[str, Option] = {}
        for option in command.options.values():
            existing = forms.get(option.complete_short) or forms.get(option.complete_long)
            if existing is not None:
                raise AmbiguousFormError(
                    command,
                    message=command.i18n.conflicting_options(
                        first=option.label, second=existing.label
                    ),
                )
            forms[option.complete_short] = option
            forms[option.complete_long] = option

    def _parse_options(self, command: Command, args: list[Any]) -> dict[str, Any] | None:
        self.check_unique(command)
        scanner = OptionScanner(command.options.values())
        subcommand = None

        try:
            for event in scanner.scan(args):
                if event.option is not None:
                    self._assign(command, event.option, event.value)
                    continue
                if not event.literal:
                    subcommand = find_command(event.token, command, event.rest)
                    if subcommand is not None:
                        break
                command.argument(event.token)
        except MissingArgument as error:
            raise MissingArgumentError(
                error.option,
                message=command.i18n.missing_argument(label=error.option.label),
            ) from None
        except InvalidOption as error:
            raise InvalidOptionError(
                command, message=command.i18n.invalid_option(name=error.token)
            ) from None

        self._check_required(command)
        return subcommand

    def _assign(self, command: Command, option: Option, value: str | None) -> None:
        logger.debug("[Parser] %s <- %r", option.label, value)
        if value is None:
            if option.action is not None:
                option.execute_action()
            else:
                option.set(True)
            return

        if option.type is OptionType.INTEGER:
            if not INTEGER_PATTERN.match(value):
                raise InvalidArgumentError(
                    option, message=command.i18n.invalid_integer(label=option.label)
                )
            option.set(int(value))
        elif option.type is OptionType.FLOAT:
            if not FLOAT_PATTERN.match(value):
                raise InvalidArgumentError(
                    option, message=command.i18n.invalid_float(label=option.label)
                )
            option.set(float(value))
        elif option.type is OptionType.LIST:
            option.set(value.split(",") if value else [])
        else:
            option.set(value)

    def _check_required(self, command: Command) -> None:
        for option in command.options.values():
            if option.required and not option.provided:
                raise MissingOptionError(
                    option, message=command.i18n.missing_option(label=option.label)
                )

    def _find_command_to_execute(
        self, command: Command, args: list[Any]
    ) -> dict[str, Any] | None:
        subcommand = find_command(args[0], command, args[1:])
        if subcommand is None:
            for argument in args:
                command.argument(argument)
        return subcommand
