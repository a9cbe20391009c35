# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative Arbor applications loaded from YAML or TOML files.

Example (YAML):

    name: tool
    version: 1.0.0
    description: Manages things.
    options:
      - name: verbose
        forms: ["-v", "--verbose"]
        help: Prints more output.
    commands:
      - name: manage
        description: Manages things.
        commands:
          - name: add
            action: my_module.add
            options:
              - name: count
                type: integer
                default: 1

Hooks (`before`, `action`, `after`) and option actions are dotted import
paths.
"""
from __future__ import annotations

import importlib
import re
import sys
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field

from arbor.application import Application
from arbor.command import HOOK_NAMES, Command
from arbor.console import console
from arbor.logger import logger


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(f"[arbor.error]Invalid action path:[/] {dotted_path}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[arbor.error]Could not import '{dotted_path}': {error}[/]\n"
            "[arbor.dim]Ensure the module is installed and discoverable via PYTHONPATH."
        )
        sys.exit(1)
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        console.print(
            f"[arbor.error]Module '{module_path}' has no attribute '{attr}': {error}[/]"
        )
        sys.exit(1)
    return action


class RawOption(BaseModel):
    """Raw option model for Arbor configuration."""

    model_config = ConfigDict(extra="ignore")

    name: str
    forms: list[str | None] = Field(default_factory=list)
    type: str | None = None
    required: bool = False
    default: Any = None
    meta: Any = None
    help: Any = None
    validator: list[Any] | None = None
    pattern: str | None = None
    action: str | None = None

    def settings(self) -> dict[str, Any]:
        settings = self.model_dump(
            include={"type", "required", "default", "meta", "help"}, exclude_none=True
        )
        if self.pattern:
            settings["validator"] = re.compile(self.pattern)
        elif self.validator:
            settings["validator"] = self.validator
        return settings

    def declare(self, command: Command) -> None:
        action = import_action(self.action) if self.action else None
        command.option(self.name, self.forms or None, self.settings(), action)


class RawCommand(BaseModel):
    """Raw command model for Arbor configuration."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: Any = None
    banner: Any = None
    synopsis: Any = None
    before: str | None = None
    action: str | None = None
    after: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def settings(self) -> dict[str, Any]:
        settings = self.model_dump(
            include={"name", "description", "banner", "synopsis"}, exclude_none=True
        )
        for hook in HOOK_NAMES:
            path = getattr(self, hook)
            if path:
                settings[hook] = import_action(path)
        return settings

    def declare(self, command: Command) -> None:
        """Declare options and subcommands on `command`."""
        for option in self.options:
            option.declare(command)
        for child in self.commands:
            command.command(child.name, child.settings(), child.declare)


class RawApplication(RawCommand):
    """Raw application model for Arbor configuration."""

    name: str = "arbor"
    version: Any = None
    locale: Any = None
    skip_commands: bool = False
    show_commands: bool = False
    output_commands: bool = False

    def settings(self) -> dict[str, Any]:
        settings = super().settings()
        settings.update(
            self.model_dump(
                include={
                    "version",
                    "locale",
                    "skip_commands",
                    "show_commands",
                    "output_commands",
                },
                exclude_none=True,
            )
        )
        return settings


def read_config(file_path: Path | str) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary describing the application.\n"
            "Example:\n"
            "name: 'tool'\n"
            "commands:\n"
            "  - name: 'add'\n"
            "    description: 'Example command'\n"
            "    action: 'my_module.my_function'"
        )
    return raw_config


def load_config(file_path: Path | str) -> RawApplication:
    """Read and validate a configuration file."""
    return RawApplication.model_validate(read_config(file_path))


def loader(file_path: Path | str, **settings: Any) -> Application:
    """
    Build an Arbor application from a YAML or TOML file without running it.

    Args:
        file_path (Path | str): Path to the config file.
        **settings: Extra application settings, e.g. `context`.

    Returns:
        Application: The declared application.

    Raises:
        ValueError: If the file format is unsupported or the file is not a mapping.
        ArborError: If the declared tree is invalid.
    """
    raw_application = load_config(file_path)
    return Application(
        {**raw_application.settings(), **settings}, raw_application.declare
    )
