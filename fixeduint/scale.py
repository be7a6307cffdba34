"""SCALE codec for fixed-width unsigned integers, plain and compact."""

from __future__ import annotations

from .utils import fits, mask, nbytes, nlimbs

COMPACT_BITS_LIMIT = 536
_OUT_OF_RANGE = "out of range Uint decoding"
_TOO_LARGE = "value is larger than fits the Uint"
_LENGTH_OUT_OF_RANGE = "out of range decoding Compact<u32>"

# Big-integer mode with these payload sizes must exceed the given value.
_FIXED_THRESHOLDS = {
    4: (1 << 32) - 1 >> 2,
    8: (1 << 64) - 1 >> 8,
    16: (1 << 128) - 1 >> 8,
}


class ScaleError(ValueError):
    """Raised when SCALE input cannot be decoded into the requested integer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class _Input:
    """A cursor over the bytes being decoded."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ScaleError("Not enough data to fill buffer")
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def read_int(self, count: int) -> int:
        return int.from_bytes(self.read(count), "little")


def _check_fits(value: int, bits: int) -> None:
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")


def _check_compact_supported(bits: int) -> None:
    if bits >= COMPACT_BITS_LIMIT:
        raise ValueError("compact encoding is supported only for 0-(2**536-1) values")


def _compact(value: int) -> bytes:
    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    payload = value.to_bytes(nbytes(value.bit_length()), "little")
    return bytes([0b11 + ((len(payload) - 4) << 2)]) + payload


def _decode_length(source: _Input) -> int:
    prefix = source.read_int(1)
    mode = prefix & 0b11
    if mode == 0:
        return prefix >> 2
    if mode == 1:
        length = (prefix | source.read_int(1) << 8) >> 2
        if length > 0x3F:
            return length
    elif mode == 2:
        length = (prefix | source.read_int(3) << 8) >> 2
        if length > 0x3FFF:
            return length
    elif prefix >> 2 == 0:
        length = source.read_int(4)
        if length > 0x3FFF_FFFF:
            return length
    raise ScaleError(_LENGTH_OUT_OF_RANGE)


def encode(value: int, bits: int) -> bytes:
    """Encode as a length-prefixed byte string of ``nbytes(bits)`` little-endian bytes."""
    _check_fits(value, bits)
    payload = value.to_bytes(nbytes(bits), "little")
    return _compact(len(payload)) + payload


def decode(data: bytes, bits: int) -> int:
    """Decode a length-prefixed little-endian byte string; trailing data is ignored."""
    source = _Input(data)
    payload = source.read(_decode_length(source))
    value = int.from_bytes(payload, "little")
    if not fits(value, bits):
        raise ScaleError(_TOO_LARGE)
    return value


def max_encoded_length(bits: int) -> int:
    """The in-memory size of a ``bits``-wide integer, in bytes."""
    return nlimbs(bits) * 8


def compact_size_hint(value: int) -> int:
    """Expected length of the compact encoding of ``value``."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    bit_len = value.bit_length()
    if bit_len <= 6:
        return 1
    if bit_len <= 14:
        return 2
    if bit_len <= 30:
        return 4
    return nbytes(bit_len) + 1


def encode_compact(value: int, bits: int) -> bytes:
    """Encode ``value`` with the SCALE compact integer encoding."""
    _check_compact_supported(bits)
    _check_fits(value, bits)
    return _compact(value)


def decode_compact(data: bytes, bits: int) -> int:
    """Decode a compact integer of width ``bits``; trailing data is ignored."""
    _check_compact_supported(bits)
    source = _Input(data)
    prefix = source.read_int(1)
    mode = prefix % 4
    if mode == 0:
        value = prefix >> 2
    elif mode == 1:
        value = (prefix | source.read_int(1) << 8) >> 2
        if not 0x3F <= value <= 0x3FFF:
            raise ScaleError(_OUT_OF_RANGE)
    elif mode == 2:
        value = (prefix | source.read_int(3) << 8) >> 2
        if not 0x3FFF <= value <= 0x3FFF_FFFF:
            raise ScaleError(_OUT_OF_RANGE)
    else:
        size = (prefix >> 2) + 4
        value = source.read_int(size)
        threshold = _FIXED_THRESHOLDS.get(size)
        if threshold is None:
            if not fits(value, bits):
                raise ScaleError(_TOO_LARGE)
            threshold = mask(size * 8) >> ((69 - size) * 8)
        if value <= threshold:
            raise ScaleError(_OUT_OF_RANGE)
    if not fits(value, bits):
        raise ScaleError(_OUT_OF_RANGE)
    return value