"""Tests for linepick.terminal -- the controlling terminal device."""

from __future__ import annotations

import io
import os
import subprocess

import pytest

from linepick import terminal
from linepick.terminal import TTY, TerminalConfigError


@pytest.fixture
def pipe_tty():
    read_fd, write_fd = os.pipe()
    tty = TTY(open(read_fd, "rb", buffering=0))
    yield tty, write_fd
    tty.close()
    os.close(write_fd)


class TestReadChar:
    def test_reads_one_byte_at_a_time(self, pipe_tty) -> None:
        tty, write_fd = pipe_tty
        os.write(write_fd, b"ab")
        assert tty.read_char() == "a"
        assert tty.read_char() == "b"

    def test_reads_control_bytes(self, pipe_tty) -> None:
        tty, write_fd = pipe_tty
        os.write(write_fd, b"\x03\x7f\r")
        assert [tty.read_char() for _ in range(3)] == ["\x03", "\x7f", "\r"]

    def test_reads_multibyte_character_whole(self, pipe_tty) -> None:
        tty, write_fd = pipe_tty
        os.write(write_fd, "\u00e9\u65e5x".encode())
        assert tty.read_char() == "\u00e9"
        assert tty.read_char() == "日"
        assert tty.read_char() == "x"

    def test_end_of_file_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        os.write(write_fd, b"q")
        os.close(write_fd)
        tty = TTY(open(read_fd, "rb", buffering=0))
        try:
            assert tty.read_char() == "q"
            assert tty.read_char() == ""
        finally:
            tty.close()


class TestOutput:
    def test_writes_are_buffered_until_flush(self) -> None:
        handle = io.BytesIO()
        tty = TTY(handle)
        tty.write("abc")
        tty.write("日")
        assert handle.getvalue() == b""
        tty.flush()
        assert handle.getvalue() == "abc日".encode()

    def test_flush_without_pending_is_noop(self) -> None:
        handle = io.BytesIO()
        TTY(handle).flush()
        assert handle.getvalue() == b""

    def test_size_falls_back_without_terminal(self) -> None:
        assert TTY(io.BytesIO()).size() == (24, 80)


class TestOpen:
    def test_missing_device_raises(self, tmp_path) -> None:
        with pytest.raises(TerminalConfigError):
            TTY.open(str(tmp_path / "missing-tty"))


class TestStty:
    def test_returns_stripped_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(args, **kwargs):
            calls.append((args, kwargs))
            return subprocess.CompletedProcess(args, 0, stdout="500:5:bf\n", stderr="")

        monkeypatch.setattr(terminal.subprocess, "run", fake_run)
        handle = io.BytesIO()
        assert TTY(handle).stty("-g") == "500:5:bf"
        args, kwargs = calls[0]
        assert args == ["stty", "-g"]
        assert kwargs["stdin"] is handle
        assert kwargs["check"] is True

    def test_failure_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(args, **kwargs):
            raise subprocess.CalledProcessError(1, args, output="", stderr="stty: invalid argument\n")

        monkeypatch.setattr(terminal.subprocess, "run", fake_run)
        with pytest.raises(TerminalConfigError, match="invalid argument"):
            TTY(io.BytesIO()).stty("raw", "-echo")

    def test_missing_utility_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", "stty")

        monkeypatch.setattr(terminal.subprocess, "run", fake_run)
        with pytest.raises(TerminalConfigError, match="stty not found"):
            TTY(io.BytesIO()).stty("-g")
