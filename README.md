# fixeduint

Unsigned integers of a fixed bit width, and the wire formats commonly used
for them. A value is a plain non-negative Python `int`; each function takes
the width as a separate `bits` argument and checks that the value fits.

## Modules

- `fixeduint.utils`: helpers `nbytes`, `nlimbs`, `mask`, `fits`, `rem_up`
  and `trim_end`.
- `fixeduint.rlp`: canonical RLP integer encoding with `encode`, `decode`,
  `decode_prefix`, `encoded_length` and `max_encoded_length`. Failures raise
  `RlpError`, whose `kind` is an `RlpErrorKind` (for example `LEADING_ZERO`,
  `NON_CANONICAL_SINGLE_BYTE`, `OVERFLOW`). `decode` rejects trailing data.
  `decode_prefix` returns the value together with the remaining bytes.
- `fixeduint.rlp_stream`: RLP for integers (`encode`, `decode`) and for
  fixed-size byte strings that keep their leading zeros (`encode_fixed`,
  `decode_fixed`). Decoding reads the first item and ignores anything after
  it. Failures raise `RlpDecoderError`.
- `fixeduint.der`: ASN.1 DER `INTEGER` values with `encode`, `decode` and
  `value_length`, plus content-octet helpers `to_int_bytes`, `to_uint_bytes`,
  `from_int_bytes` and `from_uint_bytes`. Failures raise `DerError`.
- `fixeduint.ssz`: SSZ fixed-length little-endian encoding with `encode`,
  `decode` and `fixed_length`. Shorter input is zero-extended. Longer input
  raises `SszError`.
- `fixeduint.borsh`: Borsh little-endian encoding with `serialize`,
  `deserialize` (reads from a binary stream) and `from_bytes` (rejects
  trailing data). Failures raise `BorshError`.
- `fixeduint.scale`: the SCALE codec. `encode` and `decode` handle the
  length-prefixed byte form. `encode_compact`, `decode_compact` and
  `compact_size_hint` handle the compact integer form, which is limited to
  widths below 536 bits. `max_encoded_length` is also here. Failures raise
  `ScaleError`.
- `fixeduint.serialize`: human-readable `0x` hex strings and big-endian bytes
  with `to_human`, `to_human_full`, `from_human`, `parse`, `to_binary` and
  `from_binary`. `parse` accepts decimal text and `0x`, `0o` and `0b`
  prefixes, and ignores `_`. Failures raise `SerializeError`.
- `fixeduint.primint`: bit operations within a width:
  - shifts: `signed_shl`, `signed_shr`, `unsigned_shl`, `unsigned_shr`
  - rotations: `rotate_left`, `rotate_right`
  - reversal: `swap_bytes`, `reverse_bits`
  - bit counts: `count_ones`, `count_zeros`, `leading_zeros`, `leading_ones`,
    `trailing_zeros`, `trailing_ones`
  - byte conversion: `from_le_bytes`, `from_be_bytes`, `to_le_bytes`,
    `to_be_bytes`
- `fixeduint.subtle`: comparisons and selection that walk every 64-bit limb
  without stopping early: `ct_eq`, `ct_lt`, `ct_gt`, `bit_ct`,
  `conditional_select` and `conditional_negate`.
- `fixeduint.limbs`: conversion to and from 64-bit limbs, least significant
  first, with `to_limbs` and `from_limbs`. It also has checked conversion from
  `int` and hex text with `from_int` and `from_hex`, which raise
  `ToUintError`, `ValueNegativeError` or `ValueTooLargeError`. `random` gives
  uniformly random values and uses a cryptographic source unless given an
  object with `getrandbits`.

## Example

```python
from fixeduint import rlp, der, primint

rlp.encode(1024)                      # b"\x82\x04\x00"
rlp.decode(b"\x82\x04\x00", 256)      # 1024

der.decode(der.encode(0x80), 256)     # 128

primint.signed_shr(0xFEDCBA9876543210, 64, 12)  # 0xFFFFEDCBA9876543
```

## What it does not do

There is no integer class with overloaded arithmetic operators. Ordinary
arithmetic is done on plain `int` values. Wrapping to a width is done with
`utils.mask(bits)`.

## Running the tests

```
pip install -e ".[test]"
pytest
```