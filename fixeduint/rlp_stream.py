"""RLP encoding of integers and fixed-size bit strings, stream-decoder flavour.

Integers are encoded as their big-endian bytes with leading zeros stripped.
Fixed-size bit strings keep every byte, leading zeros included. Decoding
reads the first item of the input and ignores anything after it.
"""

from __future__ import annotations

from .utils import fits, nbytes

_EMPTY_STRING_CODE = 0x80
_SHORT_LIMIT = 55
_TOO_LARGE = "RLP integer value too large for Uint."


class RlpDecoderError(ValueError):
    """Raised when RLP data cannot be decoded into the requested value."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _encode_bytes(payload: bytes) -> bytes:
    if len(payload) == 1 and payload[0] < 0x80:
        return payload
    if len(payload) <= _SHORT_LIMIT:
        return bytes([_EMPTY_STRING_CODE + len(payload)]) + payload
    size = len(payload).to_bytes(nbytes(len(payload).bit_length()), "big")
    return bytes([0xB7 + len(size)]) + size + payload


def _payload(data: bytes) -> bytes:
    """Return the payload of the byte string at the front of ``data``."""
    data = bytes(data)
    if not data:
        raise RlpDecoderError("RlpIsTooShort")
    first = data[0]
    if first < 0x80:
        return data[:1]
    if first <= 0xB7:
        end = 1 + first - 0x80
        if len(data) < end:
            raise RlpDecoderError("RlpInconsistentLengthAndData")
        payload = data[1:end]
        if first == 0x81 and payload[0] < 0x80:
            raise RlpDecoderError("RlpInvalidIndirection")
        return payload
    if first <= 0xBF:
        begin = 1 + first - 0xB7
        if len(data) < begin:
            raise RlpDecoderError("RlpIsTooShort")
        size = data[1:begin]
        if size[0] == 0:
            raise RlpDecoderError("RlpDataLenWithZeroPrefix")
        end = begin + int.from_bytes(size, "big")
        if len(data) < end:
            raise RlpDecoderError("RlpInconsistentLengthAndData")
        return data[begin:end]
    raise RlpDecoderError("RlpExpectedToBeData")


def encode(value: int) -> bytes:
    """Encode a non-negative integer with leading zero bytes stripped."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return _encode_bytes(value.to_bytes(nbytes(value.bit_length()), "big"))


def decode(data: bytes, bits: int) -> int:
    """Decode an integer of width ``bits`` from the first RLP item in ``data``."""
    value = int.from_bytes(_payload(data), "big")
    if not fits(value, bits):
        raise RlpDecoderError(_TOO_LARGE)
    return value


def encode_fixed(value: int, bits: int) -> bytes:
    """Encode ``value`` as a bit string of exactly ``nbytes(bits)`` bytes."""
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return _encode_bytes(value.to_bytes(nbytes(bits), "big"))


def decode_fixed(data: bytes, bits: int) -> int:
    """Decode a bit string whose payload must be exactly ``nbytes(bits)`` long."""
    payload = _payload(data)
    expected = nbytes(bits)
    if len(payload) < expected:
        raise RlpDecoderError("RlpIsTooShort")
    if len(payload) > expected:
        raise RlpDecoderError("RlpIsTooBig")
    value = int.from_bytes(payload, "big")
    if not fits(value, bits):
        raise RlpDecoderError("RlpIsTooBig")
    return value