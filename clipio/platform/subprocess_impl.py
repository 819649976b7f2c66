"""SubprocessSystemAdapter — real implementation of ISystemAdapter."""

from __future__ import annotations

import logging
import subprocess

from clipio.platform.system_adapter import DEFAULT_TIMEOUT, CommandResult, ISystemAdapter

logger = logging.getLogger(__name__)


class SubprocessSystemAdapter(ISystemAdapter):
    """Executes real subprocess calls."""

    def run_command(self, args: list[str], timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
        logger.trace("run %s (timeout=%ss)", args, timeout)
        r = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
        return CommandResult(stdout=r.stdout, stderr=r.stderr, returncode=r.returncode)

    def feed_command(self, args: list[str], text: str, timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
        logger.trace("feed %d chars to %s (timeout=%ss)", len(text), args, timeout)
        r = subprocess.run(
            args,
            input=text,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=timeout,
        )
        return CommandResult(stdout="", stderr="", returncode=r.returncode)
