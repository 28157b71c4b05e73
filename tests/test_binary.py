from dataclasses import dataclass

import pytest

from utilkit import binary
from utilkit.binary import BIG_ENDIAN, LITTLE_ENDIAN, Codec, DecodeError

BYTEORDERS = ["little", "big"]

FLOAT32_MAX = 3.4028234663852886e38


@dataclass
class User:
    name: str
    age: int
    url: str


@pytest.mark.parametrize("byteorder", BYTEORDERS)
@pytest.mark.parametrize(
    ("kind", "value"),
    [
        ("int8", -99),
        ("int16", 123),
        ("int32", -199),
        ("int64", 123),
        ("uint", 123),
        ("uint8", 123),
        ("uint16", 9999),
        ("uint32", 123),
        ("uint64", 123),
        ("float64", 123.456),
    ],
)
def test_fixed_width_round_trip(byteorder, kind, value):
    codec = Codec(byteorder)
    encoded = getattr(codec, f"encode_{kind}")(value)
    padded = codec.encode_by_length(len(encoded), encoded)
    assert padded == encoded
    decoder = getattr(codec, f"decode_to_{kind}")
    assert decoder(encoded) == value
    assert decoder(padded) == value


@pytest.mark.parametrize("byteorder", BYTEORDERS)
def test_float32_round_trip(byteorder):
    codec = Codec(byteorder)
    encoded = codec.encode_float32(123.456)
    assert len(encoded) == 4
    decoded = codec.decode_to_float32(encoded)
    assert decoded == pytest.approx(123.456, rel=1e-6)
    assert codec.encode_float32(decoded) == encoded


@pytest.mark.parametrize("byteorder", BYTEORDERS)
@pytest.mark.parametrize("value", [123, 127, 32767, 2147483647, 255, 65535])
def test_generic_int_round_trip(byteorder, value):
    codec = Codec(byteorder)
    encoded = codec.encode(value)
    assert codec.decode_to_int(encoded) == value
    assert codec.decode_to_int(codec.encode_by_length(len(encoded), value)) == value


@pytest.mark.parametrize("byteorder", BYTEORDERS)
@pytest.mark.parametrize("value", [True, False])
def test_generic_bool_round_trip(byteorder, value):
    codec = Codec(byteorder)
    encoded = codec.encode(value)
    assert encoded == (b"\x01" if value else b"\x00")
    assert codec.decode_to_bool(encoded) is value
    assert codec.decode_to_bool(codec.encode_by_length(len(encoded), value)) is value


@pytest.mark.parametrize("byteorder", BYTEORDERS)
def test_generic_string_round_trip(byteorder):
    codec = Codec(byteorder)
    encoded = codec.encode("hehe haha")
    assert codec.decode_to_string(encoded) == "hehe haha"
    assert codec.decode_to_string(codec.encode_by_length(len(encoded), "hehe haha")) == "hehe haha"


@pytest.mark.parametrize("byteorder", BYTEORDERS)
@pytest.mark.parametrize("value", [123.456, FLOAT32_MAX])
def test_generic_float_round_trip(byteorder, value):
    codec = Codec(byteorder)
    encoded = codec.encode(value)
    assert len(encoded) == 8
    assert codec.decode_to_float64(encoded) == value
    assert codec.decode_to_float64(codec.encode_by_length(len(encoded), value)) == value


@pytest.mark.parametrize("byteorder", BYTEORDERS)
def test_generic_bytes_round_trip(byteorder):
    codec = Codec(byteorder)
    value = b"hehe haha"
    encoded = codec.encode(value)
    assert encoded == value
    assert codec.decode(encoded, len(encoded)) == (value,)


@pytest.mark.parametrize("byteorder", BYTEORDERS)
def test_encode_struct(byteorder):
    codec = Codec(byteorder)
    user = User("wenzi1", 999, "www.baidu.com")
    assert codec.decode_to_string(codec.encode(user)) == "{wenzi1 999 www.baidu.com}"


def test_module_encode_struct():
    user = User("wenzi1", 999, "www.baidu.com")
    assert binary.decode_to_string(binary.encode(user)) == "{wenzi1 999 www.baidu.com}"


def test_le_encode_int():
    assert LITTLE_ENDIAN.encode(123456) == b"\x40\xe2\x01\x00"


def test_be_encode_int():
    assert BIG_ENDIAN.encode(123456) == b"\x00\x01\xe2\x40"


def test_module_functions_are_little_endian():
    assert binary.encode(123456) == b"\x40\xe2\x01\x00"
    assert binary.encode_by_length(6, 123456) == b"\x40\xe2\x01\x00\x00\x00"
    assert binary.decode(b"\x01\x00", "uint16") == (1,)


def test_encode_stops_at_none():
    assert LITTLE_ENDIAN.encode(1, None, 2) == b"\x01"


def test_encode_by_length_pads_and_truncates():
    assert LITTLE_ENDIAN.encode_by_length(4, "ab") == b"ab\x00\x00"
    assert BIG_ENDIAN.encode_by_length(4, "ab") == b"ab\x00\x00"
    assert LITTLE_ENDIAN.encode_by_length(1, "ab") == b"a"


def test_encode_int_negative_uses_one_byte():
    assert LITTLE_ENDIAN.encode_int(-1) == b"\xff"
    assert LITTLE_ENDIAN.decode_to_int(b"\xff") == 255
    assert LITTLE_ENDIAN.decode_to_int8(b"\xff") == -1


def test_encode_uint_widths():
    assert LITTLE_ENDIAN.encode_uint(255) == b"\xff"
    assert LITTLE_ENDIAN.encode_uint(256) == b"\x00\x01"
    assert BIG_ENDIAN.encode_uint(65536) == b"\x00\x01\x00\x00"
    assert len(BIG_ENDIAN.encode_uint(2**32)) == 8


def test_decode_to_int_eight_bytes_is_signed():
    assert LITTLE_ENDIAN.decode_to_int(b"\xff" * 8) == -1
    assert LITTLE_ENDIAN.decode_to_uint(b"\xff" * 8) == 2**64 - 1


def test_fill_up_size():
    assert LITTLE_ENDIAN.fill_up_size(b"\x01", 2) == b"\x01\x00"
    assert BIG_ENDIAN.fill_up_size(b"\x01", 2) == b"\x00\x01"
    assert BIG_ENDIAN.fill_up_size(b"\x01\x02\x03", 2) == b"\x01\x02"


def test_short_data_is_padded_on_decode():
    assert BIG_ENDIAN.decode_to_uint16(b"\x05") == 5
    assert LITTLE_ENDIAN.decode_to_uint32(b"\x05") == 5


@pytest.mark.parametrize("byteorder", BYTEORDERS)
def test_decode_to_bool_values(byteorder):
    codec = Codec(byteorder)
    assert codec.decode_to_bool(b"") is False
    assert codec.decode_to_bool(b"\x00\x00") is False
    assert codec.decode_to_bool(b"\x00\x02") is True


def test_empty_data_raises_int8():
    with pytest.raises(ValueError):
        LITTLE_ENDIAN.decode_to_int8(b"")


def test_empty_data_raises_uint8():
    with pytest.raises(ValueError):
        LITTLE_ENDIAN.decode_to_uint8(b"")


def test_empty_data_raises_int():
    with pytest.raises(ValueError):
        LITTLE_ENDIAN.decode_to_int(b"")


def test_decode_several_values():
    data = b"\x01\x00\x02\x01"
    assert LITTLE_ENDIAN.decode(data, "uint16", "uint8", "bool") == (1, 2, True)
    assert BIG_ENDIAN.decode(data, "uint16", 2) == (256, b"\x02\x01")


def test_decode_not_enough_data():
    with pytest.raises(DecodeError, match="unexpected EOF"):
        LITTLE_ENDIAN.decode(b"\x01", "uint16")
    with pytest.raises(DecodeError, match="EOF"):
        LITTLE_ENDIAN.decode(b"", "int8")


def test_decode_invalid_type():
    with pytest.raises(DecodeError):
        LITTLE_ENDIAN.decode(b"\x01\x02\x03\x04", "int")


def test_encode_float32_overflow_becomes_infinity():
    assert LITTLE_ENDIAN.decode_to_float32(LITTLE_ENDIAN.encode_float32(1e300)) == float("inf")


def test_invalid_byteorder():
    with pytest.raises(ValueError):
        Codec("middle")