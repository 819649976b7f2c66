"""Command resolution: platform + environment -> one clipboard command.

``resolve_command`` is a pure function of its arguments.  The only side
effect it can trigger is the presence probe it is handed, and that probe is
consulted last, after the environment variables failed to decide.
"""

from __future__ import annotations

import enum
import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional

from clipio.platform.detect import EnvironmentSignals, Platform
from clipio.platform.system_adapter import DEFAULT_TIMEOUT, ISystemAdapter

logger = logging.getLogger(__name__)

Probe = Callable[[str], bool]


class Direction(enum.Enum):
    READ = 'read'
    WRITE = 'write'


@dataclass(frozen=True)
class Command:
    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return ' '.join(self.argv)


@dataclass(frozen=True)
class _Guarded:
    """One row of the Linux/BSD table: a guard and the command it selects."""

    guard: Callable[[EnvironmentSignals, Probe], bool]
    command: Command


# ---------------------------------------------------------------------------
# Resolution tables
# ---------------------------------------------------------------------------

_FIXED: dict[Direction, dict[Platform, Command]] = {
    Direction.READ: {
        Platform.MACOS: Command('pbpaste'),
        Platform.WINDOWS: Command('powershell', ('Get-Clipboard',)),
        Platform.ANDROID: Command('termux-clipboard-get'),
    },
    Direction.WRITE: {
        Platform.MACOS: Command('pbcopy'),
        Platform.WINDOWS: Command('clip'),
        Platform.ANDROID: Command('termux-clipboard-set'),
    },
}

_UNIX: dict[Direction, tuple[_Guarded, ...]] = {
    Direction.READ: (
        _Guarded(lambda env, probe: env.wayland, Command('wl-paste')),
        _Guarded(lambda env, probe: env.wsl,
                 Command('powershell.exe', ('-noprofile', '-command', 'Get-Clipboard'))),
        _Guarded(lambda env, probe: probe('xsel'), Command('xsel', ('--clipboard', '--output'))),
        _Guarded(lambda env, probe: True, Command('xclip', ('-selection', 'clipboard', '-o'))),
    ),
    Direction.WRITE: (
        _Guarded(lambda env, probe: env.wayland, Command('wl-copy')),
        _Guarded(lambda env, probe: env.wsl, Command('clip.exe')),
        _Guarded(lambda env, probe: probe('xsel'), Command('xsel', ('--clipboard', '--input'))),
        _Guarded(lambda env, probe: True, Command('xclip', ('-selection', 'clipboard', '-i'))),
    ),
}


def resolve_command(
    direction: Direction,
    platform: Platform,
    env: EnvironmentSignals,
    probe: Probe,
) -> Optional[Command]:
    """Return the command for *direction* on *platform*, or None if unsupported.

    Linux/BSD rows are evaluated top to bottom and the first matching guard
    wins; later guards (including the probe) are never evaluated.
    """
    fixed = _FIXED[direction].get(platform)
    if fixed is not None:
        return fixed

    if platform is not Platform.LINUX:
        return None

    for row in _UNIX[direction]:
        if row.guard(env, probe):
            return row.command
    return None  # pragma: no cover - last row always matches


def make_probe(system: ISystemAdapter, timeout: float = DEFAULT_TIMEOUT) -> Probe:
    """Build a presence probe that asks ``which`` to find a program.

    Any failure of the probe itself counts as "not available".
    """

    def probe(name: str) -> bool:
        try:
            result = system.run_command(['which', name], timeout=timeout)
        except (OSError, subprocess.SubprocessError) as exc:
            logger.trace("probe %s failed: %s", name, exc)
            return False
        logger.trace("probe %s -> exit %s", name, result.returncode)
        return result.returncode == 0

    return probe


def command_from_list(argv: Optional[list[str]]) -> Optional[Command]:
    """Turn a configured argv list into a Command (None stays None)."""
    if not argv:
        return None
    return Command(argv[0], tuple(argv[1:]))
