"""SSZ encoding of fixed-width unsigned integers: little-endian, fixed length."""

from __future__ import annotations

from .utils import fits, nbytes


class SszError(ValueError):
    """Raised when SSZ input has the wrong byte length."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(f"invalid byte length {length}, expected {expected}")
        self.length = length
        self.expected = expected


def fixed_length(bits: int) -> int:
    """The encoded length of every value of width ``bits``."""
    return nbytes(bits)


def encode(value: int, bits: int) -> bytes:
    """Encode ``value`` as ``nbytes(bits)`` little-endian bytes."""
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value.to_bytes(nbytes(bits), "little")


def decode(data: bytes, bits: int) -> int:
    """Decode little-endian ``data``; shorter input is zero-extended."""
    expected = nbytes(bits)
    if len(data) > expected:
        raise SszError(len(data), expected)
    value = int.from_bytes(bytes(data), "little")
    if not fits(value, bits):
        raise ValueError(f"value too large for {bits} bits")
    return value