import pytest

from arbor.context import ExecutionContext


def raise_system_exit(status: int = 0):
    raise SystemExit(status)


@pytest.fixture
def context():
    """An execution context that never touches the real process."""
    return ExecutionContext(arguments=[], program="tool", exit_function=raise_system_exit)
