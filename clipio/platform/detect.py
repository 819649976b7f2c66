#!/usr/bin/env python3
"""Platform classification and environment signals."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional


class Platform(enum.Enum):
    MACOS = 'macos'
    WINDOWS = 'windows'
    LINUX = 'linux'        # Linux and the BSDs share the Unix tool chain
    ANDROID = 'android'
    UNSUPPORTED = 'unsupported'


_UNIX_PREFIXES = ('linux', 'freebsd', 'openbsd')


def classify_platform(name: str) -> Platform:
    """
    Map a ``sys.platform`` style identifier to a Platform

    Returns:
        Platform: UNSUPPORTED for anything without a known clipboard tool
    """
    name = name.lower()
    if name == 'darwin':
        return Platform.MACOS
    elif name in ('win32', 'cygwin'):
        return Platform.WINDOWS
    elif name == 'android':
        return Platform.ANDROID
    elif name.startswith(_UNIX_PREFIXES):
        return Platform.LINUX

    return Platform.UNSUPPORTED


def detect_platform() -> Platform:
    """
    Classify the running interpreter's OS

    Termux builds report ``linux`` but expose ``sys.getandroidapilevel``.
    """
    if hasattr(sys, 'getandroidapilevel'):
        return Platform.ANDROID
    return classify_platform(sys.platform)


@dataclass(frozen=True)
class EnvironmentSignals:
    """Environment variables that steer command selection on Linux/BSD."""

    wayland: bool = False
    wsl: bool = False

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'EnvironmentSignals':
        if environ is None:
            environ = os.environ
        return cls(
            wayland=bool(environ.get('WAYLAND_DISPLAY', '')),
            wsl=bool(environ.get('WSL_DISTRO_NAME', '')),
        )


def get_environment_info() -> dict[str, str]:
    """
    Returns a summary of what command selection will see

    Returns:
        dict: {'platform': str, 'wayland': 'yes'|'no', 'wsl': 'yes'|'no'}
    """
    env = EnvironmentSignals.from_environ()
    return {
        'platform': detect_platform().value,
        'wayland': 'yes' if env.wayland else 'no',
        'wsl': 'yes' if env.wsl else 'no',
    }


if __name__ == '__main__':
    info = get_environment_info()
    print(f"Platform: {info['platform']}")
    print(f"Wayland: {info['wayland']}")
    print(f"WSL: {info['wsl']}")
