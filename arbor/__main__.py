"""
Arbor CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Any

from arbor.application import create_application
from arbor.config import load_config
from arbor.console import console
from arbor.context import ExecutionContext
from arbor.utils import setup_logging


def find_arbor_config() -> Path | None:
    candidates = [
        Path.cwd() / "arbor.yaml",
        Path.cwd() / "arbor.toml",
        Path.cwd() / ".arbor.yaml",
        Path.cwd() / ".arbor.toml",
        Path(os.environ.get("ARBOR_CONFIG", "arbor.yaml")),
        Path.home() / ".config" / "arbor" / "arbor.yaml",
        Path.home() / ".config" / "arbor" / "arbor.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_arbor_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: list[str] | None = None, context: ExecutionContext | None = None) -> Any:
    setup_logging()
    context = context or ExecutionContext(arguments=argv)
    config_path = bootstrap()
    if not config_path:
        console.print(
            "[arbor.error]No Arbor configuration found.[/]\n"
            "[arbor.dim]Create arbor.yaml or arbor.toml, or point ARBOR_CONFIG at one."
        )
        context.exit(1)
        return None

    raw_application = load_config(config_path)
    return create_application(
        raw_application.settings(), raw_application.declare, context=context
    )


if __name__ == "__main__":
    main()
