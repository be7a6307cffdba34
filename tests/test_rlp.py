import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.rlp import (
    RlpError,
    RlpErrorKind,
    decode,
    decode_prefix,
    encode,
    encoded_length,
    max_encoded_length,
)

SIZES = [0, 1, 2, 8, 16, 32, 64, 128, 160, 192, 256, 384, 512, 4096]


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "80"),
        (15, "0f"),
        (1024, "820400"),
        (0x1234_5678, "8412345678"),
    ],
)
def test_rlp(value, expected):
    assert encode(value) == bytes.fromhex(expected)


def test_zero_width_zero():
    assert encode(0) == bytes.fromhex("80")
    assert decode(bytes.fromhex("80"), 0) == 0


def test_long_string_form():
    value = 1 << (8 * 59)
    encoded = encode(value)
    assert encoded == b"\xb8\x3c\x01" + b"\x00" * 59
    assert decode(encoded, 480) == value


@given(st.data())
def test_roundtrip(data):
    bits = data.draw(st.sampled_from(SIZES))
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    serialized = encode(value)
    assert len(serialized) == encoded_length(value)
    assert len(serialized) <= max_encoded_length(bits)
    decoded, rest = decode_prefix(serialized, bits)
    assert rest == b""
    assert decoded == value


@pytest.mark.parametrize(
    "hex_data, kind",
    [
        ("820000", RlpErrorKind.LEADING_ZERO),
        ("00", RlpErrorKind.LEADING_ZERO),
        ("8100", RlpErrorKind.NON_CANONICAL_SINGLE_BYTE),
        ("817f", RlpErrorKind.NON_CANONICAL_SINGLE_BYTE),
        ("8133", RlpErrorKind.NON_CANONICAL_SINGLE_BYTE),
    ],
)
def test_invalid_uints(hex_data, kind):
    with pytest.raises(RlpError) as info:
        decode(bytes.fromhex(hex_data), 256)
    assert info.value.kind is kind


def test_overflow():
    with pytest.raises(RlpError) as info:
        decode(bytes.fromhex("820100"), 8)
    assert info.value.kind is RlpErrorKind.OVERFLOW


def test_empty_input():
    with pytest.raises(RlpError) as info:
        decode(b"", 256)
    assert info.value.kind is RlpErrorKind.INPUT_TOO_SHORT


def test_truncated_payload():
    with pytest.raises(RlpError) as info:
        decode(bytes.fromhex("8204"), 256)
    assert info.value.kind is RlpErrorKind.INPUT_TOO_SHORT


def test_list_rejected():
    with pytest.raises(RlpError) as info:
        decode(bytes.fromhex("c0"), 256)
    assert info.value.kind is RlpErrorKind.UNEXPECTED_LIST


def test_non_canonical_long_size():
    with pytest.raises(RlpError) as info:
        decode(b"\xb8\x05" + b"\x01" * 5, 256)
    assert info.value.kind is RlpErrorKind.NON_CANONICAL_SIZE


def test_long_size_with_leading_zero():
    with pytest.raises(RlpError) as info:
        decode(b"\xb9\x00\x38" + b"\x01" * 56, 4096)
    assert info.value.kind is RlpErrorKind.LEADING_ZERO


def test_trailing_data_rejected():
    with pytest.raises(RlpError) as info:
        decode(bytes.fromhex("0f80"), 256)
    assert info.value.kind is RlpErrorKind.UNEXPECTED_LENGTH


def test_decode_prefix_returns_rest():
    assert decode_prefix(bytes.fromhex("0f80"), 256) == (15, b"\x80")


@pytest.mark.parametrize("bits, expected", [(0, 1), (8, 2), (64, 9), (256, 33), (4096, 515)])
def test_max_encoded_length(bits, expected):
    assert max_encoded_length(bits) == expected


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        encode(-1)


def test_error_message():
    with pytest.raises(RlpError, match="leading zero"):
        decode(bytes.fromhex("00"), 8)