"""ISystemAdapter interface — abstraction for spawning clipboard commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_TIMEOUT: float = 2.0


@dataclass
class CommandResult:
    stdout: str
    stderr: str
    returncode: int


class ISystemAdapter(ABC):
    """Runs one external process to completion.

    Implementations raise ``OSError`` when the program cannot be launched and
    ``subprocess.SubprocessError`` (e.g. ``TimeoutExpired``) when it cannot be
    waited on.  They never interpret the exit status.
    """

    @abstractmethod
    def run_command(self, args: list[str], timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
        """Run *args* with no stdin and captured stdout."""

    @abstractmethod
    def feed_command(self, args: list[str], text: str, timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
        """Run *args* with *text* on stdin; stdout and stderr are discarded."""
