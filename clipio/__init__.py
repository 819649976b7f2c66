"""Read and write the OS text clipboard through native command-line tools."""

import clipio.log  # noqa: F401  installs the TRACE level before any logger is used

from clipio.__version__ import __version__
from clipio.clipboard import (
    Clipboard,
    read_text,
    read_text_async,
    write_text,
    write_text_async,
)
from clipio.commands import Command, Direction, resolve_command
from clipio.errors import ClipboardError, NonZeroExitError, NotFoundError, SpawnError
from clipio.platform.detect import EnvironmentSignals, Platform

__all__ = [
    '__version__',
    'Clipboard',
    'ClipboardError',
    'Command',
    'Direction',
    'EnvironmentSignals',
    'NonZeroExitError',
    'NotFoundError',
    'Platform',
    'SpawnError',
    'read_text',
    'read_text_async',
    'resolve_command',
    'write_text',
    'write_text_async',
]
