"""ASN.1 DER INTEGER encoding of fixed-width unsigned integers."""

from __future__ import annotations

from .utils import fits, nbytes

_TAG_INTEGER = 0x02


class DerError(ValueError):
    """Raised when DER data is not a valid encoding of the requested integer."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind


def _trimmed_be(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value.to_bytes(nbytes(value.bit_length()), "big")


def _encode_length(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    size = length.to_bytes(nbytes(length.bit_length()), "big")
    return bytes([0x80 | len(size)]) + size


def _read_length(data: bytes, pos: int) -> tuple[int, int]:
    if pos >= len(data):
        raise DerError("incomplete")
    first = data[pos]
    if first < 0x80:
        return first, pos + 1
    count = first & 0x7F
    if count == 0 or count > 4:
        raise DerError("length")
    size = data[pos + 1 : pos + 1 + count]
    if len(size) < count:
        raise DerError("incomplete")
    length = int.from_bytes(size, "big")
    if size[0] == 0 or length < 0x80:
        raise DerError("noncanonical")
    return length, pos + 1 + count


def value_length(value: int) -> int:
    """Length of the INTEGER content octets for ``value``."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return 1 + value.bit_length() // 8


def to_int_bytes(value: int) -> bytes:
    """Two's-complement content octets: a zero byte is prepended when the top bit is set."""
    data = _trimmed_be(value)
    if not data or data[0] >= 0x80:
        return b"\x00" + data
    return data


def to_uint_bytes(value: int) -> bytes:
    """Unsigned content octets without a sign byte; zero is a single zero byte."""
    return _trimmed_be(value) or b"\x00"


def encode(value: int) -> bytes:
    """Encode ``value`` as a complete DER INTEGER (tag, length, content)."""
    content = to_int_bytes(value)
    return bytes([_TAG_INTEGER]) + _encode_length(len(content)) + content


def _from_be(data: bytes, bits: int) -> int:
    value = int.from_bytes(data, "big")
    if not fits(value, bits):
        raise DerError("noncanonical")
    return value


def from_int_bytes(data: bytes, bits: int) -> int:
    """Decode signed INTEGER content octets that must hold a non-negative value."""
    data = bytes(data)
    if not data:
        raise DerError("length")
    if data[0] == 0:
        if len(data) > 1 and data[1] < 0x80:
            raise DerError("noncanonical")
        data = data[1:]
    elif data[0] >= 0x80:
        raise DerError("value")
    return _from_be(data, bits)


def from_uint_bytes(data: bytes, bits: int) -> int:
    """Decode unsigned content octets, whose sign byte has been removed."""
    data = bytes(data)
    if not data:
        raise DerError("length")
    if data == b"\x00":
        return 0
    if data[0] == 0:
        raise DerError("noncanonical")
    return _from_be(data, bits)


def decode(data: bytes, bits: int) -> int:
    """Decode a complete DER INTEGER of width ``bits``; no trailing data allowed."""
    data = bytes(data)
    if not data:
        raise DerError("incomplete")
    if data[0] != _TAG_INTEGER:
        raise DerError("tag")
    length, offset = _read_length(data, 1)
    if length > nbytes(bits) + 1:
        raise DerError("noncanonical")
    end = offset + length
    if len(data) < end:
        raise DerError("incomplete")
    if len(data) > end:
        raise DerError("trailing data")
    return from_int_bytes(data[offset:end], bits)