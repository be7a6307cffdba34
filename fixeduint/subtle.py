"""Comparison and selection on fixed-width unsigned integers, limb by limb.

The operations walk every 64-bit limb without stopping early, combining
per-limb results with bit masks instead of branching on the data.
"""

from __future__ import annotations

from typing import Iterator

from .utils import fits, mask, nlimbs

_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1


def _check(value: int, bits: int) -> int:
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value


def _check_choice(choice: int) -> int:
    choice = int(choice)
    if choice not in (0, 1):
        raise ValueError(f"choice must be 0 or 1, got {choice}")
    return choice


def _limbs_high_first(value: int, bits: int) -> Iterator[int]:
    for index in reversed(range(nlimbs(bits))):
        yield (value >> (index * _LIMB_BITS)) & _LIMB_MASK


def _eq_bit(a: int, b: int) -> int:
    diff = a ^ b
    return 1 ^ ((diff | -diff) >> _LIMB_BITS & 1 if diff else 0) if diff else 1


def _limb_eq(a: int, b: int) -> int:
    # 1 when equal: (a ^ b) - 1 borrows out of 64 bits only for zero.
    return (((a ^ b) - 1) >> _LIMB_BITS) & 1


def _limb_lt(a: int, b: int) -> int:
    # 1 when a < b: the subtraction borrows past 64 bits.
    return ((a - b) >> _LIMB_BITS) & 1


def bit_ct(value: int, bits: int, index: int) -> bool:
    """Whether bit ``index`` is set; ``index`` must be below ``bits``."""
    _check(value, bits)
    if not 0 <= index < bits:
        raise IndexError(f"bit index {index} out of range for {bits} bits")
    limb = (value >> (index // _LIMB_BITS * _LIMB_BITS)) & _LIMB_MASK
    flag = 1 << (index % _LIMB_BITS)
    return _limb_eq(limb & flag, flag) == 1


def conditional_select(a: int, b: int, choice: int, bits: int) -> int:
    """Return ``b`` when ``choice`` is 1 and ``a`` when it is 0."""
    _check(a, bits)
    _check(b, bits)
    selector = mask(bits) * _check_choice(choice)
    return (a & ~selector & mask(bits)) | (b & selector)


def conditional_negate(value: int, bits: int, choice: int) -> int:
    """Return the wrapping negation of ``value`` when ``choice`` is 1."""
    _check(value, bits)
    negated = -value & mask(bits)
    return conditional_select(value, negated, choice, bits)


def ct_eq(a: int, b: int, bits: int) -> bool:
    """Whether ``a == b``, comparing every limb."""
    _check(a, bits)
    _check(b, bits)
    equal = 1
    for left, right in zip(_limbs_high_first(a, bits), _limbs_high_first(b, bits)):
        equal &= _limb_eq(left, right)
    return equal == 1


def ct_gt(a: int, b: int, bits: int) -> bool:
    """Whether ``a > b``, comparing every limb from the most significant."""
    _check(a, bits)
    _check(b, bits)
    equal, greater = 1, 0
    for left, right in zip(_limbs_high_first(a, bits), _limbs_high_first(b, bits)):
        greater |= equal & _limb_lt(right, left)
        equal &= _limb_eq(left, right)
    return greater == 1


def ct_lt(a: int, b: int, bits: int) -> bool:
    """Whether ``a < b``, comparing every limb from the most significant."""
    _check(a, bits)
    _check(b, bits)
    equal, less = 1, 0
    for left, right in zip(_limbs_high_first(a, bits), _limbs_high_first(b, bits)):
        less |= equal & _limb_lt(left, right)
        equal &= _limb_eq(left, right)
    return less == 1