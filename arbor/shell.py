# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""shell.py
Run external command lines on behalf of an Arbor application."""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arbor.console import ConsoleWriter
from arbor.i18n import Localizer
from arbor.logger import logger

if TYPE_CHECKING:
    from arbor.context import ExecutionContext


@dataclass(frozen=True)
class ShellResult:
    """Exit status and captured output of a shell command."""

    status: int
    output: str = ""

    @property
    def success(self) -> bool:
        return self.status == 0


class ShellRunner:
    """
    Executes shell command lines with optional echo of the command and its output.

    A fatal failure terminates through the execution context using the
    command's exit status.
    """

    def __init__(
        self,
        writer: ConsoleWriter | None = None,
        i18n: Localizer | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        self.writer = writer or ConsoleWriter()
        self.i18n = i18n or Localizer()
        self.context = context

    def run(
        self,
        command: str,
        message: str | None = None,
        run: bool = True,
        show_exit: bool = True,
        show_output: bool = False,
        show_command: bool = False,
        fatal: bool = True,
    ) -> ShellResult:
        if message:
            self.writer.write(message)

        if show_command:
            self.writer.write(self.i18n.shell_running(command=command), style="arbor.dim")

        if not run:
            logger.info("[Shell] Skipping: %s", command)
            self.writer.write(self.i18n.shell_skipped(command=command), style="arbor.dim")
            return ShellResult(status=0, output="")

        logger.debug("[Shell] Running: %s", command)
        completed = subprocess.run(
            command, shell=True, text=True, capture_output=True, check=False
        )
        output = completed.stdout + completed.stderr
        result = ShellResult(status=completed.returncode, output=output)

        if show_output and output:
            self.writer.write(output.rstrip("\n"))

        if show_exit:
            if result.success:
                self.writer.write(self.i18n.shell_succeeded(), style="arbor.success")
            else:
                self.writer.write(
                    self.i18n.shell_failed(status=result.status), style="arbor.error"
                )

        if not result.success:
            logger.warning("[Shell] '%s' exited with %d", command, result.status)
            if fatal and self.context is not None:
                self.context.exit(result.status)

        return result
