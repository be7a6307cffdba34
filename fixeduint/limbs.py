"""Conversions between fixed-width unsigned integers and other representations.

Values are plain non-negative ``int`` objects paired with a width in bits.
Limbs are 64-bit words, least significant first.
"""

from __future__ import annotations

import secrets
from typing import Iterable, Optional, Protocol

from .utils import fits, mask, nlimbs

_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class _RandomBits(Protocol):
    def getrandbits(self, k: int) -> int: ...


class ToUintError(ValueError):
    """Raised when a value cannot be converted to a ``bits``-wide unsigned integer.

    ``wrapped`` holds the value reduced to the width, where one is defined.
    """

    def __init__(self, message: str, bits: int, wrapped: Optional[int] = None) -> None:
        super().__init__(message)
        self.bits = bits
        self.wrapped = wrapped


class ValueNegativeError(ToUintError):
    """Raised when the value to convert is negative."""

    def __init__(self, bits: int, wrapped: int) -> None:
        super().__init__(f"Value is negative for Uint<{bits}>", bits, wrapped)


class ValueTooLargeError(ToUintError):
    """Raised when the value to convert does not fit the width."""

    def __init__(self, bits: int, wrapped: int) -> None:
        super().__init__(f"Value is too large for Uint<{bits}>", bits, wrapped)


def _check(value: int, bits: int) -> int:
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value


def to_limbs(value: int, bits: int) -> list[int]:
    """Split ``value`` into ``nlimbs(bits)`` 64-bit limbs, least significant first."""
    _check(value, bits)
    return [(value >> (index * _LIMB_BITS)) & _LIMB_MASK for index in range(nlimbs(bits))]


def from_limbs(limbs: Iterable[int], bits: int) -> int:
    """Join exactly ``nlimbs(bits)`` 64-bit limbs, least significant first."""
    limbs = list(limbs)
    expected = nlimbs(bits)
    if len(limbs) != expected:
        raise ValueError(f"expected {expected} limbs for {bits} bits, got {len(limbs)}")
    value = 0
    for index, limb in enumerate(limbs):
        if not 0 <= limb <= _LIMB_MASK:
            raise ValueError(f"limb {limb} is not a 64-bit unsigned value")
        value |= limb << (index * _LIMB_BITS)
    if not fits(value, bits):
        raise ValueError("Value too large for this Uint")
    return value


def from_int(value: int, bits: int) -> int:
    """Convert an arbitrary integer, raising if it is negative or too large."""
    wrapped = abs(value) & mask(bits)
    if value < 0:
        raise ValueNegativeError(bits, wrapped)
    if not fits(value, bits):
        raise ValueTooLargeError(bits, wrapped)
    return value


def from_hex(text: str, bits: int) -> int:
    """Parse hexadecimal text with an optional ``0x`` prefix; ``_`` is ignored."""
    body = text[2:] if text[:2] in ("0x", "0X") else text
    digits = body.replace("_", "")
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise ToUintError(f"Value is not a number: {text!r}", bits)
    value = int(digits, 16) if digits else 0
    if not fits(value, bits):
        raise ValueTooLargeError(bits, 0)
    return value


def random(bits: int, rng: Optional[_RandomBits] = None) -> int:
    """A uniformly random ``bits``-wide value, by default from a cryptographic source."""
    source = rng if rng is not None else secrets.SystemRandom()
    limbs = [source.getrandbits(_LIMB_BITS) for _ in range(nlimbs(bits))]
    value = 0
    for index, limb in enumerate(limbs):
        value |= limb << (index * _LIMB_BITS)
    return value & mask(bits)