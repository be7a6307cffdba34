"""Small helpers shared by the fixed-width unsigned integer codecs."""

from __future__ import annotations

from itertools import takewhile
from typing import Any, Sequence, TypeVar

S = TypeVar("S", bound=Sequence[Any])


def _check_bits(bits: int) -> int:
    if bits < 0:
        raise ValueError(f"bit width must be non-negative, got {bits}")
    return bits


def rem_up(a: int, b: int) -> int:
    """Return ``a % b``, but ``b`` instead of ``0``."""
    rem = a % b
    return rem if rem > 0 else b


def trim_end(seq: S, value: Any) -> S:
    """Return ``seq`` without the trailing run of items equal to ``value``."""
    trailing = sum(1 for _ in takewhile(lambda item: item == value, reversed(seq)))
    return seq[: len(seq) - trailing]


def nbytes(bits: int) -> int:
    """Number of bytes needed to hold ``bits`` bits."""
    return (_check_bits(bits) + 7) // 8


def nlimbs(bits: int) -> int:
    """Number of 64-bit limbs needed to hold ``bits`` bits."""
    return (_check_bits(bits) + 63) // 64


def mask(bits: int) -> int:
    """The largest value representable in ``bits`` bits."""
    return (1 << _check_bits(bits)) - 1


def fits(value: int, bits: int) -> bool:
    """Whether ``value`` is a valid unsigned integer of width ``bits``."""
    return 0 <= value <= mask(bits)