#!/usr/bin/env python
from arbor import create_application
from arbor.utils import setup_logging

setup_logging()


def ping(command):
    host = command.options["host"].value
    command.application.run(f"ping -c 1 {host}", f"Pinging {host}", fatal=False)


def declare_ping(command):
    command.option("host", ["-H", "--host"], {"type": str, "default": "localhost"})


def setup(application):
    application.command("ping", {"description": "Ping a host.", "action": ping}, declare_ping)


if __name__ == "__main__":
    create_application(
        {"name": "net", "show_commands": True, "output_commands": True}, setup
    )
