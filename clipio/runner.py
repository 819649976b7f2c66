"""Process runner: execute a resolved command and map its outcome."""

from __future__ import annotations

import logging
import subprocess

from clipio.commands import Command
from clipio.errors import NonZeroExitError, SpawnError
from clipio.platform.system_adapter import DEFAULT_TIMEOUT, ISystemAdapter

logger = logging.getLogger(__name__)

# Launch failures (missing binary, permissions), wait failures (timeout kill)
# and payloads the pipe codec cannot encode
SPAWN_FAILURES = (OSError, subprocess.SubprocessError, UnicodeError)


class ProcessRunner:
    """Runs exactly one command per call; never retries."""

    def __init__(self, system: ISystemAdapter, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.system = system
        self.timeout = timeout

    def read(self, command: Command) -> str:
        """Run *command* and return its stdout with surrounding whitespace stripped."""
        logger.debug("reading clipboard via %s", command)
        try:
            result = self.system.run_command(command.argv, timeout=self.timeout)
        except SPAWN_FAILURES as exc:
            raise SpawnError("An error occurred while reading from clipboard", cause=exc) from exc

        logger.debug("%s exited with %s", command.program, result.returncode)
        if result.returncode != 0:
            raise NonZeroExitError(
                "An unknown error occurred while reading from clipboard",
                returncode=result.returncode,
            )
        return result.stdout.strip()

    def write(self, command: Command, text: str) -> None:
        """Feed *text* to *command* on stdin."""
        logger.debug("writing %d chars to clipboard via %s", len(text), command)
        try:
            result = self.system.feed_command(command.argv, text, timeout=self.timeout)
        except SPAWN_FAILURES as exc:
            raise SpawnError("An error occurred while copying", cause=exc) from exc

        logger.debug("%s exited with %s", command.program, result.returncode)
        if result.returncode != 0:
            raise NonZeroExitError(
                "An unknown error occurred while copying",
                returncode=result.returncode,
            )
