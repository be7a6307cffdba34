"""Fixed bit-width unsigned integers as plain ints, with RLP, DER, SSZ, Borsh, SCALE and hex codecs."""

__version__ = "1.14.0"

__all__ = [
    "borsh",
    "der",
    "limbs",
    "primint",
    "rlp",
    "rlp_stream",
    "scale",
    "serialize",
    "ssz",
    "subtle",
    "utils",
]