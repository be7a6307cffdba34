"""Borsh serialization of fixed-width unsigned integers: little-endian, fixed length."""

from __future__ import annotations

import io
from typing import BinaryIO

from .utils import fits, nbytes


class BorshError(ValueError):
    """Raised when Borsh input cannot be read as the requested integer."""

    def __init__(self, message: str, kind: str) -> None:
        super().__init__(message)
        self.kind = kind


def serialize(value: int, bits: int) -> bytes:
    """Serialize ``value`` as ``nbytes(bits)`` little-endian bytes."""
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value.to_bytes(nbytes(bits), "little")


def deserialize(stream: BinaryIO, bits: int) -> int:
    """Read exactly ``nbytes(bits)`` bytes from ``stream`` and decode them."""
    size = nbytes(bits)
    data = stream.read(size)
    if len(data) < size:
        raise BorshError("failed to fill whole buffer", "unexpected eof")
    value = int.from_bytes(data, "little")
    if not fits(value, bits):
        raise BorshError("value is too large for the type", "invalid data")
    return value


def from_bytes(data: bytes, bits: int) -> int:
    """Decode ``data``, which must hold exactly one serialized value."""
    stream = io.BytesIO(bytes(data))
    value = deserialize(stream, bits)
    if stream.read(1):
        raise BorshError("Not all bytes read", "invalid data")
    return value