# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Global console instance and the indentation-aware writer used for help output.

`ConsoleWriter` is the narrow text-writing surface the command tree talks to:
`write()` prints one block of text and `with_indentation()` scopes extra
indentation for structured sections.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.text import Text

from arbor.themes import get_arbor_theme

console = Console(theme=get_arbor_theme(), highlight=False)


class ConsoleWriter:
    """Writes plain text blocks to a rich console with scoped indentation."""

    def __init__(self, target: Console | None = None, indentation: int = 0) -> None:
        self.console: Console = target or console
        self.indentation: int = indentation

    def write(self, text: str = "", style: str | None = None, indent: int = 0) -> None:
        """
        Print `text` with the current indentation plus `indent` extra spaces.

        Every line of a multi-line block is indented. Text is never parsed as
        rich markup, so bracketed section titles print verbatim.
        """
        padding = " " * (self.indentation + indent)
        lines = str(text).split("\n")
        rendered = "\n".join(f"{padding}{line}" if line else line for line in lines)
        self.console.print(Text(rendered, style=style or ""), soft_wrap=True)

    @contextmanager
    def with_indentation(self, width: int = 4) -> Iterator[ConsoleWriter]:
        self.indentation += width
        try:
            yield self
        finally:
            self.indentation -= width

    def error(self, message: str) -> None:
        self.write(message, style="arbor.error")
