import pytest

from minitalk.protocol import (
    ByteAssembler,
    MessageAssembler,
    decode_bytes,
    encode_byte,
    utf8_sequence_length,
)


def test_encode_byte_msb_first():
    assert encode_byte(0x41) == (0, 1, 0, 0, 0, 0, 0, 1)
    assert encode_byte(0) == (0,) * 8
    assert encode_byte(255) == (1,) * 8


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


@pytest.mark.parametrize("char", ["a", "é", "€", "😀"])
def test_sequence_length_matches_utf8(char):
    encoded = char.encode("utf-8")
    assert utf8_sequence_length(encoded[0]) == len(encoded)


def test_continuation_byte_counts_as_one():
    assert utf8_sequence_length(0x80) == 1


@pytest.mark.parametrize("text", ["hello", "héllo wörld", "日本語", ""])
def test_decode_round_trip(text):
    data = text.encode("utf-8") + b"\0"
    assert decode_bytes(data) == text.encode("utf-8")


def test_decode_stops_at_nul():
    assert decode_bytes(b"ab\0cd\0") == b"ab"


def test_decode_truncated_sequence():
    with pytest.raises(ValueError):
        decode_bytes("é".encode("utf-8")[:1])


def test_byte_assembler_round_trip():
    assembler = ByteAssembler()
    for value in range(256):
        results = [assembler.feed(bit) for bit in encode_byte(value)]
        assert results[:-1] == [None] * 7
        assert results[-1] == value


def test_byte_assembler_rejects_bad_bit():
    with pytest.raises(ValueError):
        ByteAssembler().feed(2)


def _feed_all(assembler, data):
    outputs = []
    for byte in data:
        for bit in encode_byte(byte):
            result = assembler.feed(bit)
            if result is not None:
                outputs.append(result)
    return outputs


def test_message_assembler_single_message():
    text = "Grüße"
    data = text.encode("utf-8") + b"\0"
    assert _feed_all(MessageAssembler(), data) == [text.encode("utf-8")]


def test_message_assembler_resets_between_messages():
    data = b"one\0two\0"
    assert _feed_all(MessageAssembler(), data) == [b"one", b"two"]


def test_message_assembler_incomplete_message():
    assert _feed_all(MessageAssembler(), b"partial") == []