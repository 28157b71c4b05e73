"""Binary encoding of numbers, strings and flags in either byte order."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, fields, is_dataclass
from typing import Any

__all__ = [
    "BIG_ENDIAN",
    "Codec",
    "DecodeError",
    "LITTLE_ENDIAN",
    "decode",
    "decode_to_string",
    "encode",
    "encode_by_length",
]

_INT8_MAX = 2**7 - 1
_INT16_MAX = 2**15 - 1
_INT32_MAX = 2**31 - 1
_UINT8_MAX = 2**8 - 1
_UINT16_MAX = 2**16 - 1
_UINT32_MAX = 2**32 - 1
_UINT64_MASK = 2**64 - 1

_READ_FORMATS = {
    "bool": "?",
    "int8": "b",
    "uint8": "B",
    "int16": "h",
    "uint16": "H",
    "int32": "i",
    "uint32": "I",
    "int64": "q",
    "uint64": "Q",
    "float32": "f",
    "float64": "d",
}


class DecodeError(ValueError):
    """Raised when bytes cannot be read into the requested values."""


def _format_value(value: Any) -> str:
    """Render a value the way the text fallback of ``encode`` writes it."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_dataclass(value) and not isinstance(value, type):
        inner = " ".join(_format_value(getattr(value, f.name)) for f in fields(value))
        return "{" + inner + "}"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        try:
            keys = sorted(value)
        except TypeError:
            keys = list(value)
        pairs = " ".join(f"{_format_value(k)}:{_format_value(value[k])}" for k in keys)
        return "map[" + pairs + "]"
    return str(value)


@dataclass(frozen=True)
class Codec:
    """Encoder and decoder for one byte order (``"little"`` or ``"big"``)."""

    byteorder: str = "little"

    def __post_init__(self) -> None:
        if self.byteorder not in ("little", "big"):
            raise ValueError(f"unknown byte order: {self.byteorder!r}")

    @property
    def _prefix(self) -> str:
        return "<" if self.byteorder == "little" else ">"

    def _pack(self, value: int, size: int) -> bytes:
        return (value & ((1 << (8 * size)) - 1)).to_bytes(size, self.byteorder)

    def _unpack(self, data: bytes, size: int, signed: bool) -> int:
        return int.from_bytes(self.fill_up_size(data, size), self.byteorder, signed=signed)

    def _encode_value(self, value: Any) -> bytes:
        if isinstance(value, bool):
            return self.encode_bool(value)
        if isinstance(value, int):
            return self.encode_int(value)
        if isinstance(value, float):
            return self.encode_float64(value)
        if isinstance(value, str):
            return self.encode_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        return self.encode_string(_format_value(value))

    def encode(self, *args: Any) -> bytes:
        """Encode values one after another; encoding stops at the first ``None``."""
        out = bytearray()
        for value in args:
            if value is None:
                break
            out += self._encode_value(value)
        return bytes(out)

    def encode_by_length(self, length: int, *args: Any) -> bytes:
        """Encode values, then zero-pad or truncate the result to ``length`` bytes."""
        encoded = self.encode(*args)
        if len(encoded) < length:
            return encoded + bytes(length - len(encoded))
        return encoded[:length]

    def decode(self, data: bytes, *args: Any) -> tuple[Any, ...]:
        """Read values from ``data`` in order.

        Each argument is a type name (``"int8"`` ... ``"uint64"``, ``"bool"``,
        ``"float32"``, ``"float64"``) or a byte count, which yields raw bytes.
        """
        values: list[Any] = []
        offset = 0
        for spec in args:
            remaining = len(data) - offset
            if isinstance(spec, int) and not isinstance(spec, bool):
                if spec < 0:
                    raise DecodeError(f"Binary.Read Failed: negative length {spec}")
                size = spec
                fmt = None
            else:
                fmt = _READ_FORMATS.get(spec) if isinstance(spec, str) else None
                if fmt is None:
                    raise DecodeError(f"Binary.Read Failed: invalid type {spec!r}")
                size = struct.calcsize(fmt)
            if size > remaining:
                reason = "EOF" if remaining == 0 else "unexpected EOF"
                raise DecodeError(f"Binary.Read Failed: {reason}")
            if fmt is None:
                values.append(bytes(data[offset:offset + size]))
            else:
                values.append(struct.unpack_from(self._prefix + fmt, data, offset)[0])
            offset += size
        return tuple(values)

    def encode_string(self, s: str) -> bytes:
        """Encode a string as UTF-8."""
        return s.encode("utf-8")

    def decode_to_string(self, data: bytes) -> str:
        """Decode UTF-8 bytes to a string."""
        return bytes(data).decode("utf-8", errors="replace")

    def encode_bool(self, b: bool) -> bytes:
        """Encode a flag as one byte."""
        return b"\x01" if b else b"\x00"

    def encode_int(self, i: int) -> bytes:
        """Encode an int in the narrowest of 1, 2, 4 or 8 bytes that holds it."""
        if i <= _INT8_MAX:
            return self.encode_int8(i)
        if i <= _INT16_MAX:
            return self.encode_int16(i)
        if i <= _INT32_MAX:
            return self.encode_int32(i)
        return self.encode_int64(i)

    def encode_uint(self, i: int) -> bytes:
        """Encode an unsigned int in the narrowest of 1, 2, 4 or 8 bytes."""
        i &= _UINT64_MASK
        if i <= _UINT8_MAX:
            return self.encode_uint8(i)
        if i <= _UINT16_MAX:
            return self.encode_uint16(i)
        if i <= _UINT32_MAX:
            return self.encode_uint32(i)
        return self.encode_uint64(i)

    def encode_int8(self, i: int) -> bytes:
        """Encode the low 8 bits of ``i``."""
        return self._pack(i, 1)

    def encode_uint8(self, i: int) -> bytes:
        """Encode the low 8 bits of ``i``."""
        return self._pack(i, 1)

    def encode_int16(self, i: int) -> bytes:
        """Encode the low 16 bits of ``i``."""
        return self._pack(i, 2)

    def encode_uint16(self, i: int) -> bytes:
        """Encode the low 16 bits of ``i``."""
        return self._pack(i, 2)

    def encode_int32(self, i: int) -> bytes:
        """Encode the low 32 bits of ``i``."""
        return self._pack(i, 4)

    def encode_uint32(self, i: int) -> bytes:
        """Encode the low 32 bits of ``i``."""
        return self._pack(i, 4)

    def encode_int64(self, i: int) -> bytes:
        """Encode the low 64 bits of ``i``."""
        return self._pack(i, 8)

    def encode_uint64(self, i: int) -> bytes:
        """Encode the low 64 bits of ``i``."""
        return self._pack(i, 8)

    def encode_float32(self, f: float) -> bytes:
        """Encode an IEEE 754 single; values beyond its range become infinity."""
        try:
            return struct.pack(self._prefix + "f", f)
        except OverflowError:
            return struct.pack(self._prefix + "f", math.copysign(math.inf, f))

    def encode_float64(self, f: float) -> bytes:
        """Encode an IEEE 754 double."""
        return struct.pack(self._prefix + "d", f)

    def decode_to_int(self, data: bytes) -> int:
        """Decode 1, 2, 4 or 8 bytes, chosen by the length of ``data``."""
        if len(data) < 2:
            return self.decode_to_uint8(data)
        if len(data) < 3:
            return self.decode_to_uint16(data)
        if len(data) < 5:
            return self.decode_to_uint32(data)
        return self.decode_to_int64(data)

    def decode_to_uint(self, data: bytes) -> int:
        """Decode 1, 2, 4 or 8 bytes as unsigned, chosen by the length of ``data``."""
        if len(data) < 2:
            return self.decode_to_uint8(data)
        if len(data) < 3:
            return self.decode_to_uint16(data)
        if len(data) < 5:
            return self.decode_to_uint32(data)
        return self.decode_to_uint64(data)

    def decode_to_bool(self, data: bytes) -> bool:
        """Return False for empty or all-zero data, True otherwise."""
        return any(data)

    def decode_to_int8(self, data: bytes) -> int:
        """Decode the first byte as signed; empty data raises ValueError."""
        if not data:
            raise ValueError("empty data given")
        return int.from_bytes(bytes(data[:1]), self.byteorder, signed=True)

    def decode_to_uint8(self, data: bytes) -> int:
        """Decode the first byte; empty data raises ValueError."""
        if not data:
            raise ValueError("empty data given")
        return data[0]

    def decode_to_int16(self, data: bytes) -> int:
        return self._unpack(data, 2, signed=True)

    def decode_to_uint16(self, data: bytes) -> int:
        return self._unpack(data, 2, signed=False)

    def decode_to_int32(self, data: bytes) -> int:
        return self._unpack(data, 4, signed=True)

    def decode_to_uint32(self, data: bytes) -> int:
        return self._unpack(data, 4, signed=False)

    def decode_to_int64(self, data: bytes) -> int:
        return self._unpack(data, 8, signed=True)

    def decode_to_uint64(self, data: bytes) -> int:
        return self._unpack(data, 8, signed=False)

    def decode_to_float32(self, data: bytes) -> float:
        return struct.unpack(self._prefix + "f", self.fill_up_size(data, 4))[0]

    def decode_to_float64(self, data: bytes) -> float:
        return struct.unpack(self._prefix + "d", self.fill_up_size(data, 8))[0]

    def fill_up_size(self, data: bytes, size: int) -> bytes:
        """Cut ``data`` to ``size`` bytes or zero-pad it on its least significant end."""
        data = bytes(data)
        if len(data) >= size:
            return data[:size]
        padding = bytes(size - len(data))
        if self.byteorder == "little":
            return data + padding
        return padding + data


LITTLE_ENDIAN = Codec("little")
BIG_ENDIAN = Codec("big")


def encode(*args: Any) -> bytes:
    """Encode values little-endian."""
    return LITTLE_ENDIAN.encode(*args)


def encode_by_length(length: int, *args: Any) -> bytes:
    """Encode values little-endian, padded or cut to ``length`` bytes."""
    return LITTLE_ENDIAN.encode_by_length(length, *args)


def decode(data: bytes, *args: Any) -> tuple[Any, ...]:
    """Read values little-endian from ``data``."""
    return LITTLE_ENDIAN.decode(data, *args)


def decode_to_string(data: bytes) -> str:
    """Decode UTF-8 bytes to a string."""
    return LITTLE_ENDIAN.decode_to_string(data)