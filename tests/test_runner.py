"""Tests for ProcessRunner — outcome mapping on top of a mock system adapter."""

from __future__ import annotations

import subprocess

import pytest

from clipio.commands import Command
from clipio.errors import ClipboardError, NonZeroExitError, SpawnError
from clipio.platform.system_adapter import CommandResult
from clipio.runner import ProcessRunner

PBPASTE = Command("pbpaste")
PBCOPY = Command("pbcopy")


class TestRead:
    def test_returns_trimmed_stdout(self, mock_system):
        mock_system.responses["pbpaste"] = CommandResult(stdout="  hello world \n", stderr="", returncode=0)
        assert ProcessRunner(mock_system).read(PBPASTE) == "hello world"

    def test_runs_without_stdin_and_with_timeout(self, mock_system):
        ProcessRunner(mock_system, timeout=2.0).read(Command("xclip", ("-selection", "clipboard", "-o")))
        assert mock_system.calls == [("run", ["xclip", "-selection", "clipboard", "-o"], None, 2.0)]

    def test_nonzero_exit(self, mock_system):
        mock_system.responses["pbpaste"] = CommandResult(stdout="partial", stderr="boom", returncode=1)
        with pytest.raises(NonZeroExitError) as exc_info:
            ProcessRunner(mock_system).read(PBPASTE)
        assert exc_info.value.returncode == 1
        assert "unknown error occurred while reading" in str(exc_info.value)

    def test_spawn_failure_keeps_cause(self, mock_system):
        cause = FileNotFoundError(2, "No such file or directory", "pbpaste")
        mock_system.responses["pbpaste"] = cause
        with pytest.raises(SpawnError) as exc_info:
            ProcessRunner(mock_system).read(PBPASTE)
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert str(exc_info.value) == "An error occurred while reading from clipboard"

    def test_undecodable_output_is_a_spawn_error(self, mock_system):
        mock_system.responses["pbpaste"] = UnicodeDecodeError("utf-8", b"caf\xe9", 3, 4, "invalid continuation byte")
        with pytest.raises(SpawnError):
            ProcessRunner(mock_system).read(PBPASTE)

    def test_timeout_is_a_spawn_error(self, mock_system, timeout_error):
        mock_system.responses["pbpaste"] = timeout_error
        with pytest.raises(SpawnError) as exc_info:
            ProcessRunner(mock_system).read(PBPASTE)
        assert isinstance(exc_info.value.cause, subprocess.TimeoutExpired)


class TestWrite:
    def test_feeds_payload(self, mock_system):
        assert ProcessRunner(mock_system).write(PBCOPY, "payload\nline 2") is None
        assert mock_system.calls == [("feed", ["pbcopy"], "payload\nline 2", 2.0)]

    def test_payload_is_not_trimmed(self, mock_system):
        ProcessRunner(mock_system).write(PBCOPY, "  padded  ")
        assert mock_system.calls[0][2] == "  padded  "

    def test_nonzero_exit(self, mock_system):
        mock_system.responses["pbcopy"] = CommandResult(stdout="", stderr="", returncode=3)
        with pytest.raises(NonZeroExitError) as exc_info:
            ProcessRunner(mock_system).write(PBCOPY, "x")
        assert exc_info.value.returncode == 3
        assert str(exc_info.value) == "An unknown error occurred while copying"

    def test_spawn_failure(self, mock_system):
        cause = PermissionError(13, "Permission denied")
        mock_system.responses["pbcopy"] = cause
        with pytest.raises(SpawnError) as exc_info:
            ProcessRunner(mock_system).write(PBCOPY, "x")
        assert exc_info.value.cause is cause
        assert str(exc_info.value) == "An error occurred while copying"

    def test_unencodable_payload_is_a_spawn_error(self, mock_system):
        cause = UnicodeEncodeError("utf-8", "a\udcff", 1, 2, "surrogates not allowed")
        mock_system.responses["pbcopy"] = cause
        with pytest.raises(SpawnError) as exc_info:
            ProcessRunner(mock_system).write(PBCOPY, "a\udcff")
        assert exc_info.value.cause is cause

    def test_broken_pipe_is_a_spawn_error(self, mock_system):
        mock_system.responses["pbcopy"] = BrokenPipeError(32, "Broken pipe")
        with pytest.raises(SpawnError):
            ProcessRunner(mock_system).write(PBCOPY, "x")


def test_errors_share_a_base():
    for cls in (SpawnError, NonZeroExitError):
        assert issubclass(cls, ClipboardError)
    assert not issubclass(SpawnError, NonZeroExitError)


def test_no_retry_after_failure(mock_system):
    mock_system.responses["pbpaste"] = CommandResult(stdout="", stderr="", returncode=1)
    with pytest.raises(NonZeroExitError):
        ProcessRunner(mock_system).read(PBPASTE)
    assert len(mock_system.calls) == 1
