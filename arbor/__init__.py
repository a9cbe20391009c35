"""
Arbor CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .application import Application, create_application
from .command import Command
from .context import ExecutionContext
from .exceptions import ArborError, ErrorReason
from .option import Option, OptionType
from .parser import Parser, find_command
from .role import Role
from .utils import smart_join
from .version import __version__

logger = logging.getLogger("arbor")


__all__ = [
    "Application",
    "ArborError",
    "Command",
    "ErrorReason",
    "ExecutionContext",
    "Option",
    "OptionType",
    "Parser",
    "Role",
    "create_application",
    "find_command",
    "smart_join",
    "__version__",
]
