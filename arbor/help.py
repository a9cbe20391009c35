# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the help page of a command or application.

Sections, in order:
- [NAME]: application name, version and description (applications only).
- [SYNOPSIS]: the explicit synopsis, or one generated from the executable
  name and the command path.
- [DESCRIPTION]: the banner, when present.
- [GLOBAL OPTIONS] / [OPTIONS]: every option with its forms and meta, sorted
  and aligned.
- [COMMANDS] / [SUBCOMMANDS]: every subcommand with its description, sorted
  and aligned.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from arbor.console import ConsoleWriter
from arbor.role import Role

if TYPE_CHECKING:
    from arbor.command import Command


class HelpRenderer:
    """Writes the help page for one node of the command tree."""

    def __init__(self, command: Command, writer: ConsoleWriter | None = None) -> None:
        self.command = command
        self.writer = writer or command.console
        self.i18n = command.i18n

    def render(self) -> None:
        if self.command.role is Role.ROOT:
            self._render_name()
            self.writer.write()
        self._render_synopsis()
        self._render_banner()
        self._render_options()
        self._render_commands()

    def _header(self, key: str) -> None:
        self.writer.write(self.i18n.get(key), style="arbor.header")

    def _render_name(self) -> None:
        command = self.command
        line = str(command.name)
        version = command.version()
        if version:
            line += f" {version}"
        if command.has_description:
            line += f" - {command.description}"
        self._header("help_name")
        self.writer.write(line, indent=4)

    def _render_synopsis(self) -> None:
        command = self.command
        self._header("help_synopsis")
        if command.synopsis:
            self.writer.write(command.synopsis, indent=4)
            return

        commands = (
            self.i18n.get("help_subcommand_placeholder") if command.has_commands else ""
        )
        if command.role is Role.ROOT:
            synopsis = self.i18n.get(
                "help_application_synopsis",
                executable=command.executable_name,
                commands=commands,
            )
        else:
            application = command.application
            synopsis = self.i18n.get(
                "help_command_synopsis",
                executable=application.executable_name if application else "",
                name=command.full_name(None, " ") or "",
                commands=commands,
            )
        self.writer.write(synopsis, indent=4)

    def _render_banner(self) -> None:
        if not self.command.has_banner:
            return
        self.writer.write()
        self._header("help_description")
        self.writer.write(self.command.banner, indent=4)

    def _render_options(self) -> None:
        command = self.command
        if not command.has_options:
            return

        self.writer.write()
        self._header(
            "help_global_options" if command.role is Role.ROOT else "help_options"
        )

        entries: dict[str, str] = {}
        for option in command.options.values():
            forms = [option.complete_short, option.complete_long]
            if option.requires_argument:
                forms = [f"{form} {option.meta}" for form in forms]
            entries[", ".join(forms)] = (
                option.help if option.has_help else self.i18n.get("help_no_description")
            )
        self._render_aligned(entries, style="arbor.option")

    def _render_commands(self) -> None:
        command = self.command
        if not command.has_commands:
            return

        self.writer.write()
        self._header(
            "help_commands" if command.role is Role.ROOT else "help_subcommands"
        )
        entries = {
            name: (
                child.description
                if child.has_description
                else self.i18n.get("help_no_description")
            )
            for name, child in command.commands.items()
        }
        self._render_aligned(entries, style="arbor.command")

    def _render_aligned(self, entries: dict[str, str], style: str) -> None:
        alignment = max(len(head) for head in entries)
        with self.writer.with_indentation(4):
            for head in sorted(entries):
                self.writer.write(f"{head.ljust(alignment)} - {entries[head]}", style=style)
