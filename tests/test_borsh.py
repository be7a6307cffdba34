import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.borsh import BorshError, deserialize, from_bytes, serialize
from fixeduint.utils import mask

SIZES = [0, 1, 2, 8, 16, 31, 32, 63, 64, 65, 127, 128, 129, 255, 256, 257, 512]

LIMBS_1234 = 1 | (2 << 64) | (3 << 128) | (4 << 192)
EXPECTED_33 = [
    1, 1, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0,
    0, 0, 0, 0,
]


@st.composite
def sized_values(draw):
    bits = draw(st.sampled_from(SIZES))
    return bits, draw(st.integers(0, mask(bits)))


def _serialize_record(flag, value, bits):
    return bytes([int(flag)]) + serialize(value, bits)


def _deserialize_record(data, bits):
    stream = io.BytesIO(data)
    flag = bool(stream.read(1)[0])
    return flag, deserialize(stream, bits)


def test_uint():
    buf = _serialize_record(True, LIMBS_1234, 256)
    assert list(buf) == EXPECTED_33
    assert serialize(LIMBS_1234, 256) == buf[1:]
    assert _deserialize_record(buf, 256) == (True, LIMBS_1234)


def test_deser_invalid_value():
    with pytest.raises(BorshError) as info:
        deserialize(io.BytesIO(b"\xff" * 4), 31)
    assert info.value.kind == "invalid data"
    assert str(info.value) == "value is too large for the type"


def test_roundtrip_trailing_zeroes():
    buf = serialize(1, 64) + b"\x01"
    assert list(buf) == [1, 0, 0, 0, 0, 0, 0, 0, 1]
    stream = io.BytesIO(buf)
    assert deserialize(stream, 64) == 1
    assert stream.read() == b"\x01"


@given(sized_values())
def test_roundtrip(sized):
    bits, value = sized
    assert from_bytes(serialize(value, bits), bits) == value


def test_short_input():
    with pytest.raises(BorshError) as info:
        deserialize(io.BytesIO(b"\x01\x02"), 64)
    assert info.value.kind == "unexpected eof"


def test_from_bytes_trailing_data():
    with pytest.raises(BorshError) as info:
        from_bytes(b"\x01\x00", 8)
    assert str(info.value) == "Not all bytes read"


def test_serialize_rejects_oversized():
    with pytest.raises(ValueError):
        serialize(2**31, 31)