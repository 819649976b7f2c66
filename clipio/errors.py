"""Exceptions raised by clipboard operations."""

from __future__ import annotations


class ClipboardError(Exception):
    """Base exception for every clipboard failure."""
    pass


class NotFoundError(ClipboardError):
    """No clipboard command could be resolved for this platform/environment."""

    def __init__(self, message: str = "No clipboard tool found"):
        super().__init__(message)


class SpawnError(ClipboardError):
    """The clipboard command could not be started or communicated with.

    Also raised when the command is killed after exceeding its timeout.
    The underlying exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class NonZeroExitError(ClipboardError):
    """The clipboard command ran but exited with a non-zero status."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
