# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Execution context for Arbor applications.

`ExecutionContext` holds everything Arbor needs from the surrounding process:
the argument vector used when `Application.execute()` is called without
arguments, the program invocation name, and the function used to terminate
the process after help is shown or a fatal error is reported.

Values left unset are read from `sys.argv` at access time, never cached at
construction, so an application built early still sees the live process state.
Tests inject their own context to run command trees without process-level
side effects.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn

from pydantic import BaseModel, ConfigDict


def _default_exit(status: int = 0) -> NoReturn:
    sys.exit(status)


class ExecutionContext(BaseModel):
    """
    Process environment seen by an Arbor application.

    Attributes:
        arguments (list[str] | None): Explicit argument vector. Defaults to
            `sys.argv[1:]` when unset.
        program (str | None): Explicit program invocation name. Defaults to
            `sys.argv[0]` when unset.
        exit_function (Callable[[int], Any]): Called to terminate the process.
    """

    arguments: list[str] | None = None
    program: str | None = None
    exit_function: Callable[[int], Any] = _default_exit

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def argv(self) -> list[str]:
        if self.arguments is not None:
            return list(self.arguments)
        return sys.argv[1:]

    @property
    def program_name(self) -> str:
        if self.program is not None:
            return self.program
        return sys.argv[0] if sys.argv else ""

    def exit(self, status: int = 0) -> None:
        self.exit_function(status)
