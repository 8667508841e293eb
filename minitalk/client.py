"""Send a text message to a server process, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from dataclasses import dataclass
from types import FrameType
from typing import Sequence

from minitalk.cfmt import printf_basic
from minitalk.parsing import atoi
from minitalk.protocol import encode_byte

__all__ = ["bit_signal", "send_byte", "send_message", "main"]

DEFAULT_DELAY = 100e-6


@dataclass(frozen=True)
class _Variant:
    terminator: bytes
    ack_text: str | None
    program: str


_VARIANTS: dict[str, _Variant] = {
    "basic": _Variant(b"\n", None, "./client"),
    "byte-ack": _Variant(b"\n", "One byte sent successfully.\n", "./client_bonus"),
    "message-ack": _Variant(
        b"\0", "Message sent successfully to the server.\n", "./client_bonus"
    ),
}


def bit_signal(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``: SIGUSR1 for 0, SIGUSR2 for 1."""
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"bit must be 0 or 1, not {bit!r}")


def send_byte(
    pid: int, byte: int, delay: float = DEFAULT_DELAY
) -> list[signal.Signals]:
    """Send the eight bits of ``byte`` to ``pid``, most significant first.

    Waits ``delay`` seconds after each signal and returns the signals sent.
    """
    sent = []
    for bit in encode_byte(byte):
        signum = bit_signal(bit)
        os.kill(pid, signum)
        sent.append(signum)
        time.sleep(delay)
    return sent


def send_message(
    pid: int,
    message: str | bytes,
    terminator: bytes = b"\n",
    delay: float = DEFAULT_DELAY,
) -> int:
    """Send ``message`` followed by ``terminator`` to ``pid``.

    Text is sent as UTF-8; the message stops at its first NUL byte.
    Returns the number of bytes sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    payload = data.split(b"\0", 1)[0] + terminator
    for byte in payload:
        send_byte(pid, byte, delay)
    return len(payload)


def _split_mode(args: list[str]) -> tuple[str, list[str]]:
    mode = "basic"
    rest: list[str] = []
    items = iter(args)
    for arg in items:
        if arg.startswith("--mode="):
            mode = arg.split("=", 1)[1]
        elif arg == "--mode":
            mode = next(items, "")
        else:
            rest.append(arg)
    return mode, rest


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client: ``[--mode MODE] server_pid message``."""
    args = list(sys.argv[1:] if argv is None else argv)
    mode, rest = _split_mode(args)
    variant = _VARIANTS.get(mode)
    if variant is None:
        printf_basic("Error: unknown mode %s.\n", mode)
        printf_basic("Choose one of: %s\n", ", ".join(_VARIANTS))
        return 1
    if len(rest) != 2:
        printf_basic("Error: wrong format for sending the message.\n")
        printf_basic('Try %s server_pid "message"\n', variant.program)
        return 1

    if variant.ack_text is not None:
        ack_text = variant.ack_text

        def on_ack(signum: int, frame: FrameType | None) -> None:
            printf_basic(ack_text)

        signal.signal(signal.SIGUSR1, on_ack)

    server_pid = atoi(rest[0])
    try:
        send_message(server_pid, rest[1], variant.terminator)
    except OSError as exc:
        printf_basic("Error: cannot signal process %d: %s\n", server_pid, str(exc))
        return 1
    return 0