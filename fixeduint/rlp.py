"""RLP encoding of fixed-width unsigned integers."""

from __future__ import annotations

import enum

from .utils import fits, nbytes

EMPTY_STRING_CODE = 0x80
_SHORT_LIMIT = 55


class RlpErrorKind(enum.Enum):
    """The ways RLP decoding of an integer can fail."""

    OVERFLOW = "overflow"
    LEADING_ZERO = "leading zero"
    INPUT_TOO_SHORT = "input too short"
    NON_CANONICAL_SINGLE_BYTE = "non-canonical single byte"
    NON_CANONICAL_SIZE = "non-canonical size"
    UNEXPECTED_LENGTH = "unexpected length"
    UNEXPECTED_LIST = "unexpected list"


class RlpError(ValueError):
    """Raised when RLP data is not a valid encoding of the requested integer."""

    def __init__(self, kind: RlpErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _as_uint(value: int) -> int:
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value


def _length_of_length(payload_length: int) -> int:
    if payload_length <= _SHORT_LIMIT:
        return 1
    return 1 + nbytes(payload_length.bit_length())


def _string_header(payload_length: int) -> bytes:
    if payload_length <= _SHORT_LIMIT:
        return bytes([EMPTY_STRING_CODE + payload_length])
    size = payload_length.to_bytes(nbytes(payload_length.bit_length()), "big")
    return bytes([0xB7 + len(size)]) + size


def encode(value: int) -> bytes:
    """Encode a non-negative integer as an RLP string."""
    value = _as_uint(value)
    if value == 0:
        return bytes([EMPTY_STRING_CODE])
    if value < 0x80:
        return bytes([value])
    payload = value.to_bytes(nbytes(value.bit_length()), "big")
    return _string_header(len(payload)) + payload


def encoded_length(value: int) -> int:
    """Length in bytes of ``encode(value)``."""
    bits = _as_uint(value).bit_length()
    if bits <= 7:
        return 1
    payload_length = nbytes(bits)
    return payload_length + _length_of_length(payload_length)


def max_encoded_length(bits: int) -> int:
    """Upper bound on the encoded length of a ``bits``-wide integer."""
    payload_length = nbytes(bits)
    return payload_length + _length_of_length(payload_length)


def _long_length(data: bytes, length_of_length: int) -> int:
    size = data[1 : 1 + length_of_length]
    if len(size) < length_of_length:
        raise RlpError(RlpErrorKind.INPUT_TOO_SHORT)
    if size[0] == 0:
        raise RlpError(RlpErrorKind.LEADING_ZERO)
    length = int.from_bytes(size, "big")
    if length <= _SHORT_LIMIT:
        raise RlpError(RlpErrorKind.NON_CANONICAL_SIZE)
    return length


def _read_header(data: bytes) -> tuple[bool, int, int]:
    """Return (is_list, payload_start, payload_length) for the item at the front."""
    if not data:
        raise RlpError(RlpErrorKind.INPUT_TOO_SHORT)
    first = data[0]
    if first < 0x80:
        return False, 0, 1
    if first <= 0xB7:
        length = first - 0x80
        if length == 1:
            if len(data) < 2:
                raise RlpError(RlpErrorKind.INPUT_TOO_SHORT)
            if data[1] < 0x80:
                raise RlpError(RlpErrorKind.NON_CANONICAL_SINGLE_BYTE)
        return False, 1, length
    if first <= 0xBF:
        length_of_length = first - 0xB7
        return False, 1 + length_of_length, _long_length(data, length_of_length)
    if first <= 0xF7:
        return True, 1, first - 0xC0
    length_of_length = first - 0xF7
    return True, 1 + length_of_length, _long_length(data, length_of_length)


def decode_prefix(data: bytes, bits: int) -> tuple[int, bytes]:
    """Decode one integer from the front of ``data``; return it and the rest."""
    data = bytes(data)
    is_list, start, length = _read_header(data)
    if is_list:
        raise RlpError(RlpErrorKind.UNEXPECTED_LIST)
    end = start + length
    if len(data) < end:
        raise RlpError(RlpErrorKind.INPUT_TOO_SHORT)
    payload = data[start:end]
    if payload and payload[0] == 0:
        raise RlpError(RlpErrorKind.LEADING_ZERO)
    value = int.from_bytes(payload, "big")
    if not fits(value, bits):
        raise RlpError(RlpErrorKind.OVERFLOW)
    return value, data[end:]


def decode(data: bytes, bits: int) -> int:
    """Decode ``data``, which must hold exactly one RLP integer of width ``bits``."""
    value, rest = decode_prefix(data, bits)
    if rest:
        raise RlpError(RlpErrorKind.UNEXPECTED_LENGTH)
    return value