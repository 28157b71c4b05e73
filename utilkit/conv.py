"""Lenient conversions of arbitrary values to flags, floats, bytes and runes."""

from __future__ import annotations

import json
import math
import struct
from collections.abc import Sequence
from dataclasses import is_dataclass
from decimal import Decimal
from typing import Any

from utilkit.binary import encode

__all__ = [
    "ConversionError",
    "to_bool",
    "to_byte",
    "to_bytes",
    "to_float32",
    "to_float64",
    "to_rune",
    "to_runes",
    "try_to_bool",
    "try_to_byte",
    "try_to_bytes",
    "try_to_float32",
    "try_to_float64",
    "try_to_rune",
    "try_to_runes",
]

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INF_WORDS = frozenset({"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"})
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ConversionError(ValueError):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, value: Any, target: str) -> None:
        super().__init__(
            f"unable to convert {value!r} of type {type(value).__name__} to {target}"
        )
        self.value = value
        self.target = target


def _as_text(value: bytes | bytearray | memoryview) -> str:
    return bytes(value).decode("utf-8", errors="replace")


def _parse_float(text: str, target: str, original: Any) -> float:
    """Parse a float strictly: no surrounding spaces, no underscores, no overflow."""
    if not text or text != text.strip() or "_" in text:
        raise ConversionError(original, target)
    try:
        if text.lower().lstrip("+-").startswith("0x"):
            result = float.fromhex(text)
        else:
            result = float(text)
    except (ValueError, OverflowError):
        raise ConversionError(original, target) from None
    if math.isinf(result) and text.lower() not in _INF_WORDS:
        raise ConversionError(original, target)
    return result


def _parse_int(text: str, target: str, original: Any) -> int:
    """Parse an integer; a zero fraction such as ``"12.00"`` is accepted."""
    if not text or text != text.strip() or "_" in text:
        raise ConversionError(original, target)
    if "." in text:
        whole, _, fraction = text.partition(".")
        if fraction.strip("0"):
            raise ConversionError(original, target)
        text = whole
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        raise ConversionError(original, target) from None


def _to_integer(value: Any, target: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError(value, target)
        return int(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _parse_int(_as_text(value), target, value)
    if isinstance(value, str):
        return _parse_int(value, target, value)
    raise ConversionError(value, target)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _as_text(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    raise ConversionError(value, "string")


def to_bool(value: Any) -> bool:
    """Convert to a flag; numbers are true when positive, strings as words."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value > 0
    if isinstance(value, (bytes, bytearray, memoryview)):
        return to_bool(_as_text(value))
    if isinstance(value, str):
        if value == "":
            return False
        if value.upper() == "OK":
            return True
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        raise ConversionError(value, "bool")
    raise ConversionError(value, "bool")


def to_float64(value: Any) -> float:
    """Convert to a double-precision float."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            raise ConversionError(value, "float64") from None
    if isinstance(value, float):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _parse_float(_as_text(value), "float64", value)
    if isinstance(value, str):
        return _parse_float(value, "float64", value)
    raise ConversionError(value, "float64")


def _narrow(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_float32(value: Any) -> float:
    """Convert to a float rounded to single precision."""
    try:
        return _narrow(to_float64(value))
    except ConversionError as exc:
        raise ConversionError(value, "float32") from exc


def to_byte(value: Any) -> int:
    """Convert to an integer in 0..255."""
    result = _to_integer(value, "uint8")
    if not 0 <= result <= 0xFF:
        raise ConversionError(value, "uint8")
    return result


def to_rune(value: Any) -> int:
    """Convert to a code point held in a signed 32-bit integer."""
    result = _to_integer(value, "int32")
    if not _INT32_MIN <= result <= _INT32_MAX:
        raise ConversionError(value, "int32")
    return result


def to_runes(value: Any) -> list[int]:
    """Convert to a list of code points of the value's text form.

    Values without a text form give an empty list.
    """
    if isinstance(value, list) and all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        return list(value)
    try:
        text = _to_text(value)
    except ConversionError:
        return []
    return [ord(ch) for ch in text]


def to_bytes(value: Any) -> bytes:
    """Convert to bytes.

    Strings become UTF-8, mappings become compact JSON, sequences are read
    element by element as bytes, anything else goes through binary encoding.
    """
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, dict):
        try:
            return json.dumps(
                value, sort_keys=True, separators=(",", ":"), ensure_ascii=False
            ).encode("utf-8")
        except (TypeError, ValueError):
            raise ConversionError(value, "[]byte") from None
    if is_dataclass(value) and not isinstance(value, type):
        return encode(value)
    if isinstance(value, Sequence):
        try:
            return bytes(to_byte(element) for element in value)
        except ConversionError:
            raise ConversionError(value, "[]byte") from None
    return encode(value)


def try_to_bool(value: Any) -> bool:
    """Like :func:`to_bool`, returning False when conversion fails."""
    try:
        return to_bool(value)
    except ConversionError:
        return False


def try_to_float64(value: Any) -> float:
    """Like :func:`to_float64`, returning 0.0 when conversion fails."""
    try:
        return to_float64(value)
    except ConversionError:
        return 0.0


def try_to_float32(value: Any) -> float:
    """Like :func:`to_float32`, returning 0.0 when conversion fails."""
    try:
        return to_float32(value)
    except ConversionError:
        return 0.0


def try_to_byte(value: Any) -> int:
    """Like :func:`to_byte`, returning 0 when conversion fails."""
    try:
        return to_byte(value)
    except ConversionError:
        return 0


def try_to_rune(value: Any) -> int:
    """Like :func:`to_rune`, returning 0 when conversion fails."""
    try:
        return to_rune(value)
    except ConversionError:
        return 0


def try_to_runes(value: Any) -> list[int]:
    """Like :func:`to_runes`; it never fails."""
    return to_runes(value)


def try_to_bytes(value: Any) -> bytes:
    """Like :func:`to_bytes`, returning empty bytes when conversion fails."""
    try:
        return to_bytes(value)
    except ConversionError:
        return b""