# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import inspect
import logging
import os
from typing import Any, Callable, Iterable

import pythonjsonlogger.json
from rich.logging import RichHandler


def ensure_list(value: Any) -> list[Any]:
    """Wrap scalars in a list, leave other iterables as a list copy."""
    if value is None:
        return []
    if isinstance(value, (str, bytes, dict)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def smart_join(
    items: Any,
    separator: str = ", ",
    last_separator: str = " and ",
    quote: str | None = '"',
) -> str:
    """
    Join items using a different separator before the last element.

    Examples:
        smart_join(["A", "B", "C"]) -> '"A", "B" and "C"'
        smart_join(["A", 1], quote=None) -> 'A and 1'

    Args:
        items (Any): The elements to join. A scalar is treated as a single element.
        separator (str): Separator used between all but the last two elements.
        last_separator (str): Separator used before the last element.
        quote (str | None): If set, every element is wrapped in this string.

    Returns:
        str: The joined text, empty for no elements.
    """
    separator = separator or ""
    last_separator = last_separator or ""
    rendered = [
        f"{quote}{_to_text(item)}{quote}" if quote else _to_text(item)
        for item in ensure_list(items)
    ]
    if len(rendered) < 2:
        return rendered[0] if rendered else ""
    return separator.join(rendered[:-1]) + last_separator + rendered[-1]


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def accepts_arguments(function: Callable[..., Any] | None, count: int) -> bool:
    """
    Return True if `function` can be called with exactly `count` positional arguments.

    Callables that cannot be introspected are rejected.
    """
    if function is None or not callable(function):
        return False
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return False

    required = 0
    maximum = 0
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            maximum += 1
            if parameter.default is inspect.Parameter.empty:
                required += 1
        elif parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return False
        elif (
            parameter.kind == inspect.Parameter.KEYWORD_ONLY
            and parameter.default is inspect.Parameter.empty
        ):
            return False
    return required == count and maximum == count


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str = "arbor.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for Arbor with support for both CLI-friendly and structured
    JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARBOR_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str):
            Path to the log file for file-based logging output. Defaults to "arbor.log".
        json_log_to_file (bool):
            Whether to format file logs as JSON (structured) instead of plain text.
            Defaults to False.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARBOR_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
    file_handler.setLevel(file_log_level)
    if json_log_to_file:
        file_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root.addHandler(file_handler)

    logger = logging.getLogger("arbor")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
