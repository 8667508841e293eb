"""Receive messages sent bit by bit as SIGUSR1/SIGUSR2 signals."""

from __future__ import annotations

import enum
import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Sequence

from minitalk.cfmt import format_basic
from minitalk.protocol import ByteAssembler, MessageAssembler

__all__ = ["Mode", "Server", "main"]


class Mode(enum.Enum):
    """How the server prints data and acknowledges the client."""

    BASIC = "basic"
    BYTE_ACK = "byte-ack"
    MESSAGE_ACK = "message-ack"


_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Server:
    """Decode incoming bits and write what they spell to ``out``."""

    def __init__(self, mode: Mode = Mode.BASIC, out: BinaryIO | None = None) -> None:
        self.mode = Mode(mode)
        self._out = sys.stdout.buffer if out is None else out
        self._bytes = ByteAssembler()
        self._messages = MessageAssembler()
        self._client_pid: int | None = None

    def _write(self, data: bytes) -> None:
        self._out.write(data)
        self._out.flush()

    @staticmethod
    def _ack(pid: int | None) -> None:
        if pid:
            os.kill(pid, signal.SIGUSR1)

    def handle(self, signum: int, sender_pid: int | None = None) -> bytes | None:
        """Process one signal; return the bytes written, if any.

        SIGUSR1 carries a 0 bit and SIGUSR2 a 1 bit; other signals raise
        ``ValueError``.
        """
        if signum not in _SIGNALS:
            raise ValueError(f"unexpected signal {signum!r}")
        bit = 1 if signum == signal.SIGUSR2 else 0

        if self.mode is Mode.MESSAGE_ACK:
            if not self._client_pid:
                self._client_pid = sender_pid
            try:
                message = self._messages.feed(bit)
            except ValueError:
                self._client_pid = None
                raise
            if message is None:
                return None
            data = message + b"\n"
            self._write(data)
            pid, self._client_pid = self._client_pid, None
            self._ack(pid)
            return data

        byte = self._bytes.feed(bit)
        if byte is None:
            return None
        data = bytes([byte])
        self._write(data)
        if self.mode is Mode.BYTE_ACK:
            self._ack(sender_pid)
        return data

    def _dispatch(self, signum: int, sender_pid: int | None) -> None:
        try:
            self.handle(signum, sender_pid)
        except ValueError as exc:
            print(f"minitalk server: {exc}", file=sys.stderr)

    def serve(self) -> None:
        """Announce the pid, then handle signals until interrupted."""
        self._write(format_basic("Server's pid is %d\n", os.getpid()).encode())
        self._write(b"Waiting message...\n")
        if hasattr(signal, "sigwaitinfo"):
            signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
            try:
                while True:
                    info = signal.sigwaitinfo(_SIGNALS)
                    self._dispatch(info.si_signo, info.si_pid)
            finally:
                signal.pthread_sigmask(signal.SIG_UNBLOCK, _SIGNALS)
        else:

            def on_signal(signum: int, frame: FrameType | None) -> None:
                self._dispatch(signum, None)

            for signum in _SIGNALS:
                signal.signal(signum, on_signal)
            while True:
                signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server: ``[--mode MODE]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    mode_name = Mode.BASIC.value
    if len(args) == 1 and args[0].startswith("--mode="):
        mode_name = args[0].split("=", 1)[1]
    elif len(args) == 2 and args[0] == "--mode":
        mode_name = args[1]
    elif args:
        print("usage: server [--mode MODE]", file=sys.stderr)
        return 1
    try:
        mode = Mode(mode_name)
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        print(f"unknown mode {mode_name!r}; choose one of: {choices}", file=sys.stderr)
        return 1
    try:
        Server(mode).serve()
    except KeyboardInterrupt:
        return 0
    return 0