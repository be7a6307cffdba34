"""Primitive-integer style bit operations on fixed-width unsigned integers.

Every value is a plain non-negative ``int`` together with its width in bits.
Shifts by at least the width produce zero, or all ones for a sign-extending
right shift of a value whose top bit is set.
"""

from __future__ import annotations

from .utils import fits, mask, nbytes


def _check(value: int, bits: int) -> int:
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value


def _check_shift(n: int) -> int:
    if n < 0:
        raise ValueError(f"shift amount must be non-negative, got {n}")
    return n


def unsigned_shl(value: int, bits: int, n: int) -> int:
    """Shift left, discarding bits shifted past the width."""
    _check(value, bits)
    if _check_shift(n) >= bits:
        return 0
    return (value << n) & mask(bits)


def signed_shl(value: int, bits: int, n: int) -> int:
    """Shift left; identical to :func:`unsigned_shl`."""
    return unsigned_shl(value, bits, n)


def unsigned_shr(value: int, bits: int, n: int) -> int:
    """Logical shift right, filling with zeros."""
    _check(value, bits)
    if _check_shift(n) >= bits:
        return 0
    return value >> n


def signed_shr(value: int, bits: int, n: int) -> int:
    """Arithmetic shift right, filling with copies of the top bit."""
    _check(value, bits)
    _check_shift(n)
    if bits == 0:
        return value
    full = mask(bits)
    negative = (value >> (bits - 1)) & 1 == 1
    if n >= bits:
        return full if negative else 0
    result = value >> n
    if negative:
        result |= full ^ (full >> n)
    return result


def rotate_left(value: int, bits: int, n: int) -> int:
    """Rotate left by ``n`` modulo the width."""
    _check(value, bits)
    _check_shift(n)
    if bits == 0:
        return value
    n %= bits
    if n == 0:
        return value
    return ((value << n) | (value >> (bits - n))) & mask(bits)


def rotate_right(value: int, bits: int, n: int) -> int:
    """Rotate right by ``n`` modulo the width."""
    _check(value, bits)
    _check_shift(n)
    if bits == 0:
        return value
    return rotate_left(value, bits, bits - n % bits)


def swap_bytes(value: int, bits: int) -> int:
    """Reverse the byte order; fails if the result does not fit the width."""
    _check(value, bits)
    swapped = int.from_bytes(value.to_bytes(nbytes(bits), "big"), "little")
    if not fits(swapped, bits):
        raise ValueError(f"byte-swapped value does not fit in {bits} bits")
    return swapped


def reverse_bits(value: int, bits: int) -> int:
    """Reverse the order of all ``bits`` bits."""
    _check(value, bits)
    if bits == 0:
        return 0
    return int(format(value, f"0{bits}b")[::-1], 2)


def count_ones(value: int) -> int:
    """Number of set bits."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value.bit_count()


def count_zeros(value: int, bits: int) -> int:
    """Number of clear bits within the width."""
    return bits - count_ones(_check(value, bits))


def leading_zeros(value: int, bits: int) -> int:
    """Number of clear bits above the highest set bit."""
    return bits - _check(value, bits).bit_length()


def leading_ones(value: int, bits: int) -> int:
    """Number of set bits from the top down to the first clear bit."""
    return leading_zeros(mask(bits) ^ _check(value, bits), bits)


def trailing_zeros(value: int, bits: int) -> int:
    """Number of clear bits below the lowest set bit; the width for zero."""
    _check(value, bits)
    if value == 0:
        return bits
    return (value & -value).bit_length() - 1


def trailing_ones(value: int) -> int:
    """Number of set bits from the bottom up to the first clear bit."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return (~value & (value + 1)).bit_length() - 1


def _from_bytes(data: bytes, bits: int, order: str) -> int:
    value = int.from_bytes(bytes(data), order)  # type: ignore[arg-type]
    if not fits(value, bits):
        raise ValueError(f"value too large for {bits} bits")
    return value


def from_le_bytes(data: bytes, bits: int) -> int:
    """Decode little-endian bytes of any length whose value fits the width."""
    return _from_bytes(data, bits, "little")


def from_be_bytes(data: bytes, bits: int) -> int:
    """Decode big-endian bytes of any length whose value fits the width."""
    return _from_bytes(data, bits, "big")


def to_le_bytes(value: int, bits: int) -> bytes:
    """Little-endian bytes of length ``nbytes(bits)``."""
    return _check(value, bits).to_bytes(nbytes(bits), "little")


def to_be_bytes(value: int, bits: int) -> bytes:
    """Big-endian bytes of length ``nbytes(bits)``."""
    return _check(value, bits).to_bytes(nbytes(bits), "big")