import subprocess

import pytest

from clipio.platform.system_adapter import CommandResult, ISystemAdapter


def pytest_addoption(parser):
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Enable tests that touch the real system clipboard (skipped by default)."
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-live"):
        return
    skip_live = pytest.mark.skip(reason="needs --run-live")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


def pytest_configure(config):
    config.addinivalue_line("markers", "live: touches the real system clipboard")


class MockSystemAdapter(ISystemAdapter):
    """Scripted ISystemAdapter.

    ``responses`` maps a program name to a CommandResult or to an exception
    instance that will be raised.  Unknown programs exit 0 with no output.
    Every call is recorded in ``calls`` as (kind, argv, payload, timeout).
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def _respond(self, args):
        response = self.responses.get(args[0], CommandResult(stdout="", stderr="", returncode=0))
        if isinstance(response, BaseException):
            raise response
        return response

    def run_command(self, args, timeout=2.0):
        self.calls.append(("run", list(args), None, timeout))
        return self._respond(args)

    def feed_command(self, args, text, timeout=2.0):
        self.calls.append(("feed", list(args), text, timeout))
        return self._respond(args)

    @property
    def programs(self):
        return [argv[0] for _, argv, _, _ in self.calls]


class InMemoryClipboardSystem(ISystemAdapter):
    """Pretends every clipboard tool shares one in-memory buffer.

    Mimics tools that echo back exactly what they were fed; ``which`` only
    finds the programs listed in ``installed``.
    """

    def __init__(self, installed=()):
        self.buffer = ""
        self.installed = set(installed)

    def run_command(self, args, timeout=2.0):
        if args[0] == "which":
            return CommandResult(stdout="", stderr="", returncode=0 if args[1] in self.installed else 1)
        return CommandResult(stdout=self.buffer + "\n", stderr="", returncode=0)

    def feed_command(self, args, text, timeout=2.0):
        self.buffer = text
        return CommandResult(stdout="", stderr="", returncode=0)


@pytest.fixture
def mock_system():
    return MockSystemAdapter()


@pytest.fixture
def timeout_error():
    return subprocess.TimeoutExpired(cmd=["pbpaste"], timeout=2.0)
