"""Fixed-width integer arithmetic, bit fields and conversions with C semantics.

Signed values wrap to two's complement and unsigned values wrap modulo 2**N,
as 32-bit ``long`` and 64-bit ``long long`` values do on the target machine.
Shift counts use their low six bits, as the hardware shifters do.
"""

from __future__ import annotations

import math
import struct
from typing import MutableSequence, NamedTuple, Sequence

_U16 = 0xFFFF
_U64 = (1 << 64) - 1
_S64_MIN = -(1 << 63)
_S64_MAX = (1 << 63) - 1
_F32_MANTISSA_BITS = 24


class DivResult(NamedTuple):
    """Quotient and remainder of an integer division."""

    quot: int
    rem: int


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _s32(value: int) -> int:
    return _wrap_signed(value, 32)


def _s64(value: int) -> int:
    return _wrap_signed(value, 64)


def _u64(value: int) -> int:
    return value & _U64


def _shift(count: int) -> int:
    return count & 63


def _trunc_div(num: int, denom: int) -> int:
    """Divide rounding towards zero, as C integer division does."""
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(num) // abs(denom)
    return -quot if (num < 0) != (denom < 0) else quot


def _adjusted_div(num: int, denom: int, wrap) -> DivResult:
    quot = wrap(_trunc_div(num, denom))
    rem = wrap(num - denom * quot)
    if quot < 0 and rem > 0:
        quot = wrap(quot + 1)
        rem = wrap(rem - denom)
    return DivResult(quot, rem)


def ldiv(num: int, denom: int) -> DivResult:
    """Divide two 32-bit signed integers, returning quotient and remainder."""
    return _adjusted_div(_s32(num), _s32(denom), _s32)


def lldiv(num: int, denom: int) -> DivResult:
    """Divide two 64-bit signed integers, returning quotient and remainder."""
    return _adjusted_div(_s64(num), _s64(denom), _s64)


def ull_rshift(a: int, b: int) -> int:
    """Logical right shift of an unsigned 64-bit value."""
    return _u64(a) >> _shift(b)


def ull_rem(a: int, b: int) -> int:
    """Remainder of unsigned 64-bit division."""
    return _u64(a) % _u64(b)


def ull_div(a: int, b: int) -> int:
    """Quotient of unsigned 64-bit division."""
    return _u64(a) // _u64(b)


def ll_lshift(a: int, b: int) -> int:
    """Left shift of a 64-bit value, discarding bits shifted out."""
    return _u64(_u64(a) << _shift(b))


def ll_rem(a: int, b: int) -> int:
    """Remainder of an unsigned dividend by a divisor taken as unsigned, as a signed result."""
    return _s64(_u64(a) % _u64(b))


def ll_div(a: int, b: int) -> int:
    """Quotient of signed 64-bit division, rounding towards zero."""
    return _s64(_trunc_div(_s64(a), _s64(b)))


def ll_mul(a: int, b: int) -> int:
    """Product of two 64-bit values, modulo 2**64."""
    return _u64(_u64(a) * _u64(b))


def ull_divremi(value: int, divisor: int) -> DivResult:
    """Divide an unsigned 64-bit value by an unsigned 16-bit divisor."""
    dividend = _u64(value)
    divisor &= _U16
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    return DivResult(dividend // divisor, dividend % divisor)


def ll_mod(a: int, b: int) -> int:
    """Signed 64-bit modulus whose result takes the sign of the divisor."""
    a, b = _s64(a), _s64(b)
    tmp = a - b * _trunc_div(a, b)
    if (tmp < 0 and b > 0) or (tmp > 0 and b < 0):
        tmp += b
    return _s64(tmp)


def ll_rshift(a: int, b: int) -> int:
    """Arithmetic right shift of a signed 64-bit value."""
    return _s64(a) >> _shift(b)


def _field(start_bit: int, length: int) -> tuple[int, int, int, int]:
    if start_bit < 0:
        raise ValueError("start_bit must not be negative")
    if not 1 <= length <= 64:
        raise ValueError("length must be between 1 and 64")
    index = start_bit >> 6
    lbits = start_bit & 63
    rbits = 64 - (lbits + length)
    if rbits < 0:
        raise ValueError("bit field crosses a 64-bit word boundary")
    mask = ((1 << length) - 1) << rbits
    return index, lbits, rbits, mask


def ull_bit_extract(words: Sequence[int], start_bit: int, length: int) -> int:
    """Read an unsigned bit field; bit 0 is the most significant bit of words[0]."""
    index, _, rbits, mask = _field(start_bit, length)
    return (_u64(words[index]) & mask) >> rbits


def ll_bit_extract(words: Sequence[int], start_bit: int, length: int) -> int:
    """Read a bit field and reinterpret the 64-bit result as signed."""
    return _s64(ull_bit_extract(words, start_bit, length))


def ll_bit_insert(words: MutableSequence[int], start_bit: int, length: int, value: int) -> int:
    """Store the low ``length`` bits of value into words in place; return the stored bits."""
    index, lbits, rbits, mask = _field(start_bit, length)
    field = _u64(_u64(value) << (64 - length)) >> lbits
    words[index] = (_u64(words[index]) & ~mask & _U64) | field
    return field >> rbits


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _float_to_int(value: float, low: int, high: int) -> int:
    if math.isnan(value):
        raise ValueError("cannot convert NaN to an integer")
    if math.isinf(value):
        raise OverflowError("cannot convert infinity to an integer")
    result = math.trunc(value)
    if not low <= result <= high:
        raise OverflowError(f"{value!r} is out of range for the target integer type")
    return result


def _int_to_f32(value: int) -> float:
    magnitude = abs(value)
    bits = magnitude.bit_length()
    if bits <= _F32_MANTISSA_BITS:
        return float(value)
    drop = bits - _F32_MANTISSA_BITS
    quot, rem = divmod(magnitude, 1 << drop)
    half = 1 << (drop - 1)
    if rem > half or (rem == half and quot & 1):
        quot += 1
    result = float(quot << drop)
    return -result if value < 0 else result


def d_to_ll(value: float) -> int:
    """Truncate a double to a signed 64-bit integer."""
    return _float_to_int(value, _S64_MIN, _S64_MAX)


def f_to_ll(value: float) -> int:
    """Round to single precision, then truncate to a signed 64-bit integer."""
    return _float_to_int(_to_f32(value), _S64_MIN, _S64_MAX)


def d_to_ull(value: float) -> int:
    """Truncate a double to an unsigned 64-bit integer."""
    return _float_to_int(value, 0, _U64)


def f_to_ull(value: float) -> int:
    """Round to single precision, then truncate to an unsigned 64-bit integer."""
    return _float_to_int(_to_f32(value), 0, _U64)


def ll_to_d(value: int) -> float:
    """Convert a signed 64-bit integer to the nearest double."""
    return float(_s64(value))


def ll_to_f(value: int) -> float:
    """Convert a signed 64-bit integer to the nearest single-precision value."""
    return _int_to_f32(_s64(value))


def ull_to_d(value: int) -> float:
    """Convert an unsigned 64-bit integer to the nearest double."""
    return float(_u64(value))


def ull_to_f(value: int) -> float:
    """Convert an unsigned 64-bit integer to the nearest single-precision value."""
    return _int_to_f32(_u64(value))