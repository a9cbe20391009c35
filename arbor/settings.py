# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed settings for options, commands and applications.

Settings arrive either as plain mappings (`{"type": int, "required": True}`)
or as instances of the models below. `coerce()` normalizes both into the
model for the entity. Keys the model does not declare are dropped, and only
the fields that were explicitly given (`model_fields_set`) are applied to
the target, so a missing key never overwrites existing state.
"""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

SettingsT = TypeVar("SettingsT", bound="BaseSettings")


class BaseSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True)

    @classmethod
    def coerce(cls: type[SettingsT], settings: Any = None) -> SettingsT:
        if isinstance(settings, cls):
            return settings
        if isinstance(settings, BaseSettings):
            return cls.model_validate(settings.given())
        if isinstance(settings, Mapping):
            return cls.model_validate({str(key): value for key, value in settings.items()})
        return cls()

    def given(self) -> dict[str, Any]:
        """Return only the fields that were explicitly provided."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def merged(self: SettingsT, **overrides: Any) -> SettingsT:
        """Return a copy with `overrides` applied on top of the given fields."""
        return type(self).model_validate({**self.given(), **overrides})


class OptionSettings(BaseSettings):
    """Settings recognized by `Option`."""

    type: Any = None
    required: Any = False
    default: Any = None
    meta: Any = None
    help: Any = None
    validator: Any = None


class CommandSettings(BaseSettings):
    """Settings recognized by `Command`."""

    name: Any = None
    description: Any = None
    banner: Any = None
    synopsis: Any = None
    before: Any = None
    action: Any = None
    after: Any = None
    parent: Any = None
    application: Any = None


class ApplicationSettings(CommandSettings):
    """Settings recognized by `Application`, on top of the command ones."""

    version: Any = None
    locale: Any = None
    skip_commands: Any = False
    show_commands: Any = False
    output_commands: Any = False
    console: Any = None
    shell: Any = None
    context: Any = None
