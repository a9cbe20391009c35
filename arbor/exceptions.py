# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the error type raised by the Arbor command tree and parser.

Every failure carries the object that caused it (`target`), a symbolic
`ErrorReason` and a human readable message. Subclasses bind the reason up
front so callers can catch either `ArborError` or a specific failure.

Exception Hierarchy:
- ArborError
    ├── DuplicateCommandError
    ├── DuplicateOptionError
    ├── AmbiguousCommandError
    ├── AmbiguousFormError
    ├── MissingArgumentError
    ├── InvalidOptionError
    ├── InvalidArgumentError
    ├── MissingOptionError
    ├── ValidationFailedError
    └── MissingAppBlockError

Errors are raised where they are detected and propagate to the caller.
Only `create_application` catches them, reporting the message and
terminating the process.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorReason(Enum):
    DUPLICATE_COMMAND = "duplicate_command"
    DUPLICATE_OPTION = "duplicate_option"
    AMBIGUOUS_COMMAND = "ambiguous_command"
    AMBIGUOUS_FORM = "ambiguous_form"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_OPTION = "invalid_option"
    INVALID_ARGUMENT = "invalid_argument"
    MISSING_OPTION = "missing_option"
    VALIDATION_FAILED = "validation_failed"
    MISSING_APP_BLOCK = "missing_app_block"


class ArborError(Exception):
    """Base exception for the Arbor framework."""

    default_reason: ErrorReason | None = None

    def __init__(
        self,
        target: Any,
        reason: ErrorReason | str | None = None,
        message: str = "",
    ) -> None:
        super().__init__(message)
        if reason is None:
            reason = self.default_reason
        self.target = target
        self.reason = ErrorReason(reason) if reason is not None else None
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateCommandError(ArborError):
    """Raised when a subcommand name is already registered under the same parent."""

    default_reason = ErrorReason.DUPLICATE_COMMAND


class DuplicateOptionError(ArborError):
    """Raised when an option name is already registered on the same command."""

    default_reason = ErrorReason.DUPLICATE_OPTION


class AmbiguousCommandError(ArborError):
    """Raised when a typed token is a prefix of more than one subcommand."""

    default_reason = ErrorReason.AMBIGUOUS_COMMAND


class AmbiguousFormError(ArborError):
    """Raised when two options share a short or long form."""

    default_reason = ErrorReason.AMBIGUOUS_FORM


class MissingArgumentError(ArborError):
    """Raised when an option that takes a value is given none."""

    default_reason = ErrorReason.MISSING_ARGUMENT


class InvalidOptionError(ArborError):
    """Raised when an unknown flag is found on the command line."""

    default_reason = ErrorReason.INVALID_OPTION


class InvalidArgumentError(ArborError):
    """Raised when a numeric option receives a value that does not convert."""

    default_reason = ErrorReason.INVALID_ARGUMENT


class MissingOptionError(ArborError):
    """Raised when a required option was never provided."""

    default_reason = ErrorReason.MISSING_OPTION


class ValidationFailedError(ArborError):
    """Raised when an option value is rejected by its validator."""

    default_reason = ErrorReason.VALIDATION_FAILED


class MissingAppBlockError(ArborError):
    """Raised when an application is created without a definition block."""

    default_reason = ErrorReason.MISSING_APP_BLOCK
