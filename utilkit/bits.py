"""Conversions between integers, bytes and lists of bits (0 or 1)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "decode_bits",
    "decode_bits_to_uint",
    "decode_bytes_to_bits",
    "encode_bits",
    "encode_bits_to_bytes",
    "encode_bits_with_uint",
]

_UINT64_MASK = 2**64 - 1


def encode_bits(bits: Sequence[int] | None, value: int, length: int) -> list[int]:
    """Append the low ``length`` bits of ``value``, most significant first, to ``bits``."""
    return encode_bits_with_uint(bits, value, length)


def encode_bits_with_uint(bits: Sequence[int] | None, value: int, length: int) -> list[int]:
    """Like :func:`encode_bits`; ``value`` is taken as a 64-bit unsigned number."""
    value &= _UINT64_MASK
    new_bits = [(value >> shift) & 1 for shift in range(length - 1, -1, -1)]
    if bits is None:
        return new_bits
    return [*bits, *new_bits]


def encode_bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack bits into bytes, zero-padding the last byte."""
    padded = [*bits, *[0] * (-len(bits) % 8)]
    return bytes(
        decode_bits_to_uint(padded[start:start + 8]) for start in range(0, len(padded), 8)
    )


def _fold(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = ((value << 1) | int(bit)) & _UINT64_MASK
    return value


def decode_bits(bits: Iterable[int]) -> int:
    """Read bits as a signed 64-bit integer; only the last 64 bits count."""
    value = _fold(bits)
    return value - (1 << 64) if value >> 63 else value


def decode_bits_to_uint(bits: Iterable[int]) -> int:
    """Read bits as an unsigned 64-bit integer; only the last 64 bits count."""
    return _fold(bits)


def decode_bytes_to_bits(data: bytes) -> list[int]:
    """Unpack each byte into 8 bits, most significant first."""
    bits: list[int] = []
    for byte in data:
        bits = encode_bits_with_uint(bits, byte, 8)
    return bits