import math

import pytest

from ultrakit import arith

PAIRS = [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (100, 7), (-100, 7), (5, 9)]
U64_MAX = 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("num,denom", PAIRS)
def test_ldiv_reconstructs_dividend(num, denom):
    result = arith.ldiv(num, denom)
    assert result.quot * denom + result.rem == num


@pytest.mark.parametrize("num,denom", PAIRS)
def test_lldiv_reconstructs_dividend(num, denom):
    result = arith.lldiv(num, denom)
    assert result.quot * denom + result.rem == num


def test_ldiv_negative_quotient_positive_remainder_is_adjusted():
    result = arith.ldiv(7, -2)
    assert result.rem > 0
    assert result.quot * -2 + result.rem == 7
    assert abs(result.rem) >= 2


def test_ldiv_positive_operands_match_floor_division():
    assert arith.ldiv(100, 7) == (100 // 7, 100 % 7)


def test_ldiv_wraps_to_32_bits():
    assert arith.ldiv(-(2**31), -1).quot == -(2**31)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        arith.ldiv(1, 0)
    with pytest.raises(ZeroDivisionError):
        arith.lldiv(1, 0)
    with pytest.raises(ZeroDivisionError):
        arith.ll_div(1, 0)


def test_unsigned_division_treats_negative_as_large():
    assert arith.ull_div(-1, 1) == U64_MAX
    assert arith.ull_rem(-1, U64_MAX) == 0


def test_ull_rshift_is_logical():
    assert arith.ull_rshift(-1, 63) == 1


def test_ll_rshift_is_arithmetic():
    assert arith.ll_rshift(-1, 10) == -1
    assert arith.ll_rshift(1 << 62, 62) == 1


def test_ll_lshift_discards_high_bits():
    assert arith.ll_lshift(1, 63) == 1 << 63
    assert arith.ll_lshift(1 << 63, 1) == 0


def test_ll_mul_wraps():
    assert arith.ll_mul(2**32, 2**32) == 0
    assert arith.ll_mul(3, 5) == 15


@pytest.mark.parametrize("a,b", [(-7, 2), (7, -2), (17, 5), (-17, -5)])
def test_ll_div_rounds_towards_zero(a, b):
    assert arith.ll_div(a, b) == -arith.ll_div(-a, b)
    assert abs(arith.ll_div(a, b)) == abs(a) // abs(b)


@pytest.mark.parametrize("a,b", [(-7, 2), (7, -2), (17, 5), (-17, -5), (0, 3)])
def test_ll_mod_takes_sign_of_divisor(a, b):
    result = arith.ll_mod(a, b)
    assert result == a % b
    assert result == 0 or (result > 0) == (b > 0)


def test_ll_rem_uses_unsigned_operands():
    assert arith.ll_rem(-1, U64_MAX) == 0
    assert arith.ll_rem(10, 3) == 10 % 3


def test_ull_divremi_reconstructs_value():
    value = 0x123456789ABCDEF0
    result = arith.ull_divremi(value, 1000)
    assert result.quot * 1000 + result.rem == value
    assert 0 <= result.rem < 1000


def test_ull_divremi_divisor_is_16_bit():
    with pytest.raises(ZeroDivisionError):
        arith.ull_divremi(5, 0x10000)


def test_bit_numbering_starts_at_most_significant_bit():
    assert arith.ull_bit_extract([1 << 63], 0, 1) == 1
    assert arith.ull_bit_extract([1], 63, 1) == 1


def test_bit_insert_then_extract_round_trip():
    words = [0, 0]
    stored = arith.ll_bit_insert(words, 70, 5, 0b10110)
    assert stored == 0b10110
    assert arith.ull_bit_extract(words, 70, 5) == 0b10110
    assert words[0] == 0


def test_bit_insert_truncates_value_and_keeps_neighbours():
    words = [U64_MAX]
    stored = arith.ll_bit_insert(words, 8, 4, 0xF0)
    assert stored == 0
    assert arith.ull_bit_extract(words, 8, 4) == 0
    assert arith.ull_bit_extract(words, 0, 8) == 0xFF
    assert arith.ull_bit_extract(words, 12, 52) == (1 << 52) - 1


def test_ll_bit_extract_full_word_is_signed():
    assert arith.ll_bit_extract([U64_MAX], 0, 64) == -1
    assert arith.ull_bit_extract([U64_MAX], 0, 64) == U64_MAX


def test_bit_field_crossing_word_raises():
    with pytest.raises(ValueError):
        arith.ull_bit_extract([0, 0], 60, 8)
    with pytest.raises(ValueError):
        arith.ll_bit_insert([0], 0, 0, 1)


def test_float_to_int_truncates():
    assert arith.d_to_ll(-2.7) == -2
    assert arith.d_to_ull(3.99) == 3


def test_float_conversion_errors():
    with pytest.raises(ValueError):
        arith.d_to_ll(math.nan)
    with pytest.raises(OverflowError):
        arith.d_to_ull(-1.0)
    with pytest.raises(OverflowError):
        arith.d_to_ll(2.0**63)


def test_single_precision_rounding():
    assert arith.f_to_ull(16777217.0) == 2**24
    assert arith.ll_to_f(2**24 + 1) == float(2**24)
    assert arith.ull_to_f(2**24 + 3) == float(2**24 + 4)


def test_int_to_double():
    assert arith.ll_to_d(-5) == -5.0
    assert arith.ull_to_d(U64_MAX) == 2.0**64
    assert arith.ll_to_d(U64_MAX) == -1.0