"""Bit-level encoding and reassembly of bytes and messages sent as signals."""

from __future__ import annotations

__all__ = [
    "encode_byte",
    "utf8_sequence_length",
    "decode_bytes",
    "ByteAssembler",
    "MessageAssembler",
]

BITS_PER_BYTE = 8


def encode_byte(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def utf8_sequence_length(lead: int) -> int:
    """Return how many bytes a sequence starting with ``lead`` spans.

    A byte whose top bit is clear stands alone; otherwise the count of
    leading one bits gives the length (a lone continuation byte counts as 1).
    """
    bits = encode_byte(lead)
    if bits[0] == 0:
        return 1
    count = 0
    for bit in bits:
        if bit != 1:
            break
        count += 1
    return count


def decode_bytes(data: bytes) -> bytes:
    """Reassemble a received byte stream into the message text.

    Multi-byte sequences are taken whole; the message ends at the first NUL
    byte. Raises ``ValueError`` when a sequence runs past the end of ``data``.
    """
    out = bytearray()
    pos = 0
    while pos < len(data):
        length = utf8_sequence_length(data[pos])
        if pos + length > len(data):
            raise ValueError("truncated multi-byte sequence")
        out += data[pos:pos + length]
        pos += length
    return bytes(out).split(b"\0", 1)[0]


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, not {bit!r}")
    return bit


class ByteAssembler:
    """Collect bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the byte once eight bits have arrived."""
        self._value = (self._value << 1) | _check_bit(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value


class MessageAssembler:
    """Collect bits into bytes until a NUL byte ends the message."""

    def __init__(self) -> None:
        self._bytes = ByteAssembler()
        self._received = bytearray()

    def feed(self, bit: int) -> bytes | None:
        """Add one bit; return the decoded message when it is complete."""
        byte = self._bytes.feed(bit)
        if byte is None:
            return None
        self._received.append(byte)
        if byte != 0:
            return None
        data = bytes(self._received)
        self._received.clear()
        return decode_bytes(data)