import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint import subtle

SIZES = [0, 1, 2, 7, 8, 63, 64, 65, 127, 128, 129, 256, 384, 512]
NON_ZERO = [size for size in SIZES if size]


@st.composite
def uint_pair(draw, sizes=SIZES):
    bits = draw(st.sampled_from(sizes))
    values = st.integers(min_value=0, max_value=(1 << bits) - 1)
    a = draw(values)
    b = draw(st.one_of(st.just(a), values))
    return bits, a, b


@st.composite
def uint_and_index(draw):
    bits = draw(st.sampled_from(NON_ZERO))
    value = draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    index = draw(st.integers(min_value=0, max_value=bits - 1))
    return bits, value, index


@given(uint_and_index())
def test_bit(case):
    bits, value, index = case
    assert subtle.bit_ct(value, bits, index) == bool((value >> index) & 1)


def test_bit_pinned():
    assert subtle.bit_ct(1 << 70, 128, 70) is True
    assert subtle.bit_ct(1 << 70, 128, 69) is False


def test_bit_out_of_range():
    with pytest.raises(IndexError):
        subtle.bit_ct(0, 64, 64)


@given(uint_pair(), st.booleans())
def test_select(case, choice):
    bits, a, b = case
    expected = b if choice else a
    assert subtle.conditional_select(a, b, int(choice), bits) == expected


def test_select_rejects_bad_choice():
    with pytest.raises(ValueError):
        subtle.conditional_select(1, 2, 2, 8)


@given(uint_pair(), st.booleans())
def test_negate(case, choice):
    bits, a, _ = case
    expected = (-a) % (1 << bits) if choice else a
    assert subtle.conditional_negate(a, bits, int(choice)) == expected


def test_negate_pinned():
    assert subtle.conditional_negate(1, 8, 1) == 0xFF
    assert subtle.conditional_negate(1, 8, 0) == 1


@given(uint_pair())
def test_eq(case):
    bits, a, b = case
    assert subtle.ct_eq(a, b, bits) == (a == b)


@given(uint_pair())
def test_lt(case):
    bits, a, b = case
    assert subtle.ct_lt(a, b, bits) == (a < b)


@given(uint_pair())
def test_gt(case):
    bits, a, b = case
    assert subtle.ct_gt(a, b, bits) == (a > b)


def test_compare_across_limbs():
    high = 1 << 64
    low = (1 << 64) - 1
    assert subtle.ct_gt(high, low, 128) is True
    assert subtle.ct_lt(low, high, 128) is True
    assert subtle.ct_eq(high, high, 128) is True


def test_zero_width():
    assert subtle.ct_eq(0, 0, 0) is True
    assert subtle.ct_lt(0, 0, 0) is False
    assert subtle.ct_gt(0, 0, 0) is False


def test_value_out_of_range():
    with pytest.raises(ValueError):
        subtle.ct_eq(256, 0, 8)