# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, a single flag or valued argument declared on a command.

Each option has a short form (`-v`) and a long form (`--verbose`), a type that
decides how the parser reads its value, an optional validator, an optional
default and an optional action. Options bound to an action never take a
value: seeing the flag on the command line fires the action.

Types:
- string, integer, float, list: consume one value from the command line.
- boolean (or anything unknown): argument-less toggle.

An option's `value` is what the parser assigned, falling back to the explicit
default and then to the zero value of its type.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Sequence

from arbor.exceptions import ValidationFailedError
from arbor.i18n import Localizer
from arbor.logger import logger
from arbor.settings import OptionSettings
from arbor.utils import accepts_arguments, ensure_list, smart_join

if TYPE_CHECKING:
    from arbor.command import Command

OptionAction = Callable[["Command", "Option"], Any]


class OptionType(Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    LIST = "list"
    BOOLEAN = "boolean"

    @classmethod
    def resolve(cls, value: Any) -> OptionType:
        """
        Map a user supplied type to an `OptionType`.

        Accepts members, their names or values, and the builtin types
        `str`, `int`, `float`, `list`, `tuple` and `bool`. Anything else is
        treated as a boolean toggle.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, type):
            return _BUILTIN_TYPES.get(value, cls.BOOLEAN)
        if isinstance(value, str):
            return _TYPE_ALIASES.get(value.strip().lower(), cls.BOOLEAN)
        return cls.BOOLEAN

    @property
    def zero_value(self) -> Any:
        if self is OptionType.LIST:
            return []
        return _ZERO_VALUES[self]


_BUILTIN_TYPES: dict[type, OptionType] = {
    str: OptionType.STRING,
    int: OptionType.INTEGER,
    float: OptionType.FLOAT,
    list: OptionType.LIST,
    tuple: OptionType.LIST,
    bool: OptionType.BOOLEAN,
}

_TYPE_ALIASES: dict[str, OptionType] = {
    "string": OptionType.STRING,
    "str": OptionType.STRING,
    "integer": OptionType.INTEGER,
    "int": OptionType.INTEGER,
    "float": OptionType.FLOAT,
    "list": OptionType.LIST,
    "array": OptionType.LIST,
    "boolean": OptionType.BOOLEAN,
    "bool": OptionType.BOOLEAN,
}

_ZERO_VALUES: dict[OptionType, Any] = {
    OptionType.STRING: "",
    OptionType.INTEGER: 0,
    OptionType.FLOAT: 0.0,
    OptionType.BOOLEAN: False,
}

VALUED_TYPES = (
    OptionType.STRING,
    OptionType.INTEGER,
    OptionType.FLOAT,
    OptionType.LIST,
)


class Option:
    """
    A flag or valued argument of a command.

    Args:
        name (str): Name of the option, unique within its command.
        forms (Sequence[str | None] | str | None): `[short, long]`. A missing or
            empty short form defaults to the first character of the name, a
            missing or empty long form to the name itself.
        settings (OptionSettings | Mapping | None): `type`, `required`,
            `default`, `meta`, `help` and `validator`. Unknown keys are ignored.
        action (Callable[[Command, Option], Any] | None): Fired when the flag is
            seen. Callables not taking exactly two arguments are ignored.
    """

    def __init__(
        self,
        name: Any,
        forms: Sequence[str | None] | str | None = None,
        settings: OptionSettings | Any = None,
        action: OptionAction | None = None,
    ) -> None:
        self.name: str = str(name)
        self._short: str = self.name[:1]
        self._long: str = self.name
        self._type: OptionType = OptionType.BOOLEAN
        self._default: Any = None
        self._meta: Any = None
        self._validator: tuple[str, ...] | re.Pattern[str] | None = None
        self._value: Any = None
        self._provided: bool = False
        self.required: bool = False
        self.help: str | None = None
        self.parent: Command | None = None
        self.action: OptionAction | None = None

        forms = ensure_list(forms)
        self.short = forms[0] if len(forms) > 0 else None
        self.long = forms[1] if len(forms) > 1 else None

        self.setup_with(settings)

        if action is not None:
            if accepts_arguments(action, 2):
                self.action = action
            else:
                logger.debug(
                    "[Option:%s] Ignoring action %r: it must accept (command, option).",
                    self.name,
                    action,
                )

    def setup_with(self, settings: OptionSettings | Any = None) -> Option:
        settings = OptionSettings.coerce(settings)
        for field, value in settings.given().items():
            if field == "type":
                self.type = value
            elif field == "required":
                self.required = bool(value)
            elif field == "default":
                self._default = value
            elif field == "meta":
                self._meta = value
            elif field == "help":
                self.help = value
            elif field == "validator":
                self.validator = value
        return self

    @property
    def short(self) -> str:
        return self._short

    @short.setter
    def short(self, value: Any) -> None:
        if value is None or str(value) == "":
            value = self.name[:1]
        stripped = _strip_dashes(str(value))[:1]
        if stripped:
            self._short = stripped

    @property
    def long(self) -> str:
        return self._long

    @long.setter
    def long(self, value: Any) -> None:
        if value is None or str(value) == "":
            value = self.name
        stripped = _strip_dashes(str(value))
        if stripped:
            self._long = stripped

    @property
    def type(self) -> OptionType:
        return self._type

    @type.setter
    def type(self, value: Any) -> None:
        self._type = OptionType.resolve(value)

    @property
    def validator(self) -> tuple[str, ...] | re.Pattern[str] | None:
        return self._validator

    @validator.setter
    def validator(self, value: Any) -> None:
        if isinstance(value, re.Pattern):
            self._validator = value if value.pattern else None
        elif value is None or value is False:
            self._validator = None
        elif isinstance(value, str) and not value.strip():
            self._validator = None
        else:
            values = tuple(str(item) for item in ensure_list(value))
            self._validator = values or None

    @property
    def complete_short(self) -> str:
        return f"-{self.short}"

    @property
    def complete_long(self) -> str:
        return f"--{self.long}"

    @property
    def label(self) -> str:
        """Short and long forms joined with a slash, e.g. `-v/--verbose`."""
        return f"{self.complete_short}/{self.complete_long}"

    @property
    def meta(self) -> str | None:
        if not self.requires_argument:
            return None
        return str(self._meta) if self._meta else self.name.upper()

    @meta.setter
    def meta(self, value: Any) -> None:
        self._meta = value

    @property
    def default(self) -> Any:
        if self._default is not None:
            return self._default
        return self.type.zero_value

    @default.setter
    def default(self, value: Any) -> None:
        self._default = value

    @property
    def has_default(self) -> bool:
        return self._default is not None

    @property
    def has_help(self) -> bool:
        return self.help is not None and bool(str(self.help).strip())

    @property
    def requires_argument(self) -> bool:
        return self.type in VALUED_TYPES and self.action is None

    @property
    def provided(self) -> bool:
        return self._provided

    @property
    def value(self) -> Any:
        return self._value if self._provided else self.default

    @property
    def i18n(self) -> Localizer:
        if self.parent is not None:
            return self.parent.i18n
        return Localizer()

    def set(self, value: Any, raise_error: bool = True) -> bool:
        """
        Validate and store a value, marking the option as provided.

        Args:
            value (Any): The new value.
            raise_error (bool): Raise `ValidationFailedError` on failure instead of
                returning False.

        Returns:
            bool: True if the value was accepted.
        """
        validator = self.validator
        if validator is None:
            accepted = True
        elif isinstance(validator, re.Pattern):
            accepted = validator.search(str(value)) is not None
        else:
            accepted = str(value) in validator

        if accepted:
            self._value = value
            self._provided = True
            return True

        if not raise_error:
            return False

        if isinstance(validator, re.Pattern):
            message = self.i18n.invalid_for_regexp(
                label=self.label, pattern=validator.pattern
            )
        else:
            message = self.i18n.invalid_value(
                label=self.label, values=smart_join(validator)
            )
        raise ValidationFailedError(self, message=message)

    def execute_action(self) -> None:
        if self.action is None:
            return
        self._provided = True
        logger.debug("[Option:%s] Executing action.", self.name)
        self.action(self.parent, self)

    def __repr__(self) -> str:
        return (
            f"Option(name={self.name!r}, label={self.label!r}, "
            f"type={self.type.value!r}, required={self.required})"
        )


def _strip_dashes(value: str) -> str:
    return re.sub(r"^-{1,2}", "", value)
