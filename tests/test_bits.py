import pytest

from utilkit.bits import (
    decode_bits,
    decode_bits_to_uint,
    decode_bytes_to_bits,
    encode_bits,
    encode_bits_to_bytes,
    encode_bits_with_uint,
)


@pytest.mark.parametrize("value", [0, 99, 122, 129, 222, 999, 22322])
def test_bits_round_trip(value):
    res = encode_bits([], value, 64)
    assert len(res) == 64
    assert decode_bits(res) == value
    assert decode_bits_to_uint(res) == value
    assert decode_bytes_to_bits(encode_bits_to_bytes(res)) == res


def test_encode_bits_values():
    assert encode_bits(None, 5, 4) == [0, 1, 0, 1]
    assert encode_bits([1], 1, 2) == [1, 0, 1]


def test_encode_bits_does_not_modify_input():
    prefix = [1, 1]
    result = encode_bits(prefix, 0, 2)
    assert result == [1, 1, 0, 0]
    assert prefix == [1, 1]


def test_encode_bits_negative_wraps():
    assert encode_bits(None, -1, 8) == [1] * 8
    assert encode_bits_with_uint(None, -1, 64) == [1] * 64


def test_decode_bits_sign():
    assert decode_bits([1] * 64) == -1
    assert decode_bits_to_uint([1] * 64) == 2**64 - 1
    assert decode_bits([]) == 0


def test_encode_bits_to_bytes_pads():
    assert encode_bits_to_bytes([1, 0, 1]) == b"\xa0"
    assert encode_bits_to_bytes([0, 0, 0, 0, 0, 0, 0, 1, 1]) == b"\x01\x80"
    assert encode_bits_to_bytes([]) == b""


def test_decode_bytes_to_bits():
    assert decode_bytes_to_bits(b"\x01") == [0, 0, 0, 0, 0, 0, 0, 1]
    assert decode_bytes_to_bits(b"\x80\xff") == [1, 0, 0, 0, 0, 0, 0, 0] + [1] * 8