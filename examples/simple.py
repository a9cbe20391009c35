"""simple.py

    python examples/simple.py manage add -c 2 apples pears
    python examples/simple.py m:a --help
"""
from arbor import create_application
from arbor.utils import setup_logging

setup_logging()


def add(command):
    options = command.get_options()
    for _ in range(options["count"]):
        for item in command.arguments:
            print(f"Adding {item}")
    if options.get("application_verbose"):
        print(f"Added {len(command.arguments)} item(s).")


def declare_add(command):
    command.option("count", ["-c", "--count"], {"type": int, "default": 1, "help": "Repetitions."})


def declare_manage(command):
    command.command("add", {"description": "Adds items.", "action": add}, declare_add)
    command.command("remove", {"description": "Removes items."})


def setup(application):
    application.option("verbose", ["-v", "--verbose"], {"help": "Prints more output."})
    application.command("manage", {"description": "Manages items."}, declare_manage)


if __name__ == "__main__":
    create_application({"name": "items", "version": "1.0.0"}, setup)
