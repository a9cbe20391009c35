# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandTreeCompleter`, a Prompt Toolkit completer over an Arbor
command tree.

Already typed tokens are resolved through the same abbreviation rules the
parser uses (`m:a` and `manage add` reach the same node). The word under the
cursor is then completed against:
- the subcommand names of the reached node
- the short and long forms of its options, when the word starts with `-`
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from arbor.exceptions import ArborError
from arbor.parser import find_command

if TYPE_CHECKING:
    from arbor.command import Command


class CommandTreeCompleter(Completer):
    """
    Prompt Toolkit completer for the commands and options of an application.

    Args:
        application (Command): The root of the tree to complete against.
    """

    def __init__(self, application: Command):
        self.application = application

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t")) or not text

        typed = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]

        node = self._resolve(typed)
        if node is None:
            return

        if stub.startswith("-"):
            suggestions = self._suggest_options(node)
        else:
            if ":" in stub:
                head, _, stub = stub.rpartition(":")
                node = self._resolve(head.split(":"), node)
                if node is None:
                    return
            suggestions = sorted(node.commands)
        yield from self._yield_lcp_completions(suggestions, stub)

    def _resolve(self, tokens: Iterable[str], start: Command | None = None) -> Command | None:
        """Walk `tokens` down the tree, skipping flags and positional arguments."""
        node = start or self.application
        pending = list(tokens)
        while pending:
            token = pending.pop(0)
            if token.startswith("-"):
                continue
            try:
                found = find_command(token, node, pending)
            except ArborError:
                return None
            if found is None:
                continue
            node = node.commands[found["name"]]
            pending = found["args"]
        return node

    def _suggest_options(self, node: Command) -> list[str]:
        forms: list[str] = []
        for option in node.options.values():
            forms.extend([option.complete_long, option.complete_short])
        return sorted(set(forms))

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        - A single match is yielded fully.
        - Several matches sharing a longer prefix insert the prefix and list
          every match in the menu.
        - Otherwise every match is listed.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(matches[0], start_position=-len(stub), display=matches[0])
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
        else:
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
