"""Human-readable and binary serialization of fixed-width unsigned integers.

Human-readable form is a ``0x``-prefixed lower-case hex string; binary form is
the big-endian bytes, leading zeros included.
"""

from __future__ import annotations

from typing import Any

from .utils import fits, nbytes

ZERO_STR = "0x0"

_PREFIXES = {"0x": 16, "0X": 16, "0o": 8, "0O": 8, "0b": 2, "0B": 2}
_DIGITS = {
    **{ch: i for i, ch in enumerate("0123456789abcdefghijklmnopqrstuvwxyz")},
    **{ch: i for i, ch in enumerate("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ")},
}


class SerializeError(ValueError):
    """Raised when input cannot be read as the requested integer."""


def _expecting(bits: int) -> str:
    return f"a {nbytes(bits)} byte hex string"


def parse(text: str, bits: int) -> int:
    """Parse decimal, or ``0x``/``0o``/``0b`` prefixed text; ``_`` is ignored."""
    radix = _PREFIXES.get(text[:2])
    body = text if radix is None else text[2:]
    radix = radix or 10
    digits = []
    for ch in body:
        if ch == "_":
            continue
        digit = _DIGITS.get(ch)
        if digit is None or digit >= radix:
            raise SerializeError(f"invalid digit {ch!r}")
        digits.append(ch)
    value = int("".join(digits), radix) if digits else 0
    if not fits(value, bits):
        raise SerializeError(f"value too large for Uint<{bits}>")
    return value


def to_human(value: int) -> str:
    """Minimal hex form: ``0x0`` for zero, otherwise no leading zeros."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return f"{value:#x}"


def to_human_full(value: int, bits: int) -> str:
    """Full-width hex form with ``2 * nbytes(bits)`` digits."""
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    if bits == 0:
        return ZERO_STR
    return "0x" + value.to_bytes(nbytes(bits), "big").hex()


def from_human(obj: Any, bits: int) -> int:
    """Read a non-negative integer or a numeric string into a ``bits``-wide value."""
    if isinstance(obj, bool) or not isinstance(obj, (int, str)) or (
        isinstance(obj, int) and obj < 0
    ):
        raise SerializeError(f"invalid type: {obj!r}, expected {_expecting(bits)}")
    if isinstance(obj, int):
        if not fits(obj, bits):
            raise SerializeError(
                f"invalid value: integer `{obj}`, expected {_expecting(bits)}"
            )
        return obj
    if obj == ZERO_STR:
        return 0
    invalid = SerializeError(f"invalid value: string {obj!r}, expected {_expecting(bits)}")
    if bits == 0:
        raise invalid
    try:
        return parse(obj, bits)
    except SerializeError as exc:
        raise invalid from exc


def to_binary(value: int, bits: int) -> bytes:
    """Big-endian bytes of length ``nbytes(bits)``."""
    if not fits(value, bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value.to_bytes(nbytes(bits), "big")


def from_binary(data: bytes, bits: int) -> int:
    """Decode big-endian bytes, which must be exactly ``nbytes(bits)`` long."""
    data = bytes(data)
    if len(data) != nbytes(bits):
        raise SerializeError(
            f"invalid length {len(data)}, expected {bits} bits of binary data "
            "in big endian order"
        )
    value = int.from_bytes(data, "big")
    if not fits(value, bits):
        raise SerializeError(f"invalid value: too large for Uint<{bits}>")
    return value