"""Clipboard facade: resolve one command, run it, report the outcome.

Provides ``read_text()`` / ``write_text(text)`` which delegate to the
module-level ``CLIPBOARD`` instance, so tests and embedders can set
``clipio.clipboard.CLIPBOARD = Clipboard(system=...)`` for dependency
injection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

from clipio.commands import Command, Direction, command_from_list, make_probe, resolve_command
from clipio.config import DEFAULT_CONFIG, load_config, public_config, validate_config
from clipio.errors import NotFoundError
from clipio.platform.detect import EnvironmentSignals, Platform, detect_platform
from clipio.platform.subprocess_impl import SubprocessSystemAdapter
from clipio.platform.system_adapter import ISystemAdapter
from clipio.runner import ProcessRunner

logger = logging.getLogger(__name__)


class Clipboard:
    """Reads and writes the OS text clipboard through a native command.

    Platform and environment are looked up on every call unless pinned
    through the constructor, which is how tests exercise other OSes.
    """

    def __init__(
        self,
        system: Optional[ISystemAdapter] = None,
        config: Optional[dict] = None,
        platform: Optional[Platform] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.system = system if system is not None else SubprocessSystemAdapter()
        self.config = validate_config(config) if config is not None else dict(DEFAULT_CONFIG)
        self._platform = platform
        self._environ = environ
        self.runner = ProcessRunner(self.system, timeout=self.config['timeout'])

    @property
    def platform(self) -> Platform:
        return self._platform if self._platform is not None else detect_platform()

    def command_for(self, direction: Direction) -> Optional[Command]:
        """Resolve the command used for *direction*, or None when unsupported."""
        override = command_from_list(self.config[f'{direction.value}_command'])
        if override is not None:
            logger.debug("using configured %s command %s", direction.value, override)
            return override

        platform = self.platform
        command = resolve_command(
            direction,
            platform,
            EnvironmentSignals.from_environ(self._environ),
            make_probe(self.system, timeout=self.config['timeout']),
        )
        logger.debug("resolved %s command on %s: %s", direction.value, platform.value, command)
        return command

    def read_text(self) -> str:
        command = self.command_for(Direction.READ)
        if command is None:
            raise NotFoundError()
        return self.runner.read(command)

    def write_text(self, text: str) -> None:
        command = self.command_for(Direction.WRITE)
        if command is None:
            raise NotFoundError()
        self.runner.write(command, text)


# Module-level default clipboard, built from the user config on first use
# (can be replaced in tests for DI)
CLIPBOARD: Optional[Clipboard] = None


def get_clipboard() -> Clipboard:
    global CLIPBOARD
    if CLIPBOARD is None:
        CLIPBOARD = Clipboard(config=public_config(load_config()))
    return CLIPBOARD


def read_text() -> str:
    """Return the current clipboard text, stripped of surrounding whitespace."""
    return get_clipboard().read_text()


def write_text(text: str) -> None:
    """Replace the clipboard contents with *text*."""
    get_clipboard().write_text(text)


async def read_text_async() -> str:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, read_text)


async def write_text_async(text: str) -> None:
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, write_text, text)
