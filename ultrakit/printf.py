"""Formatted output with the conversions, flags and rounding of the console printf.

Supported conversions are ``d i u o x X c s p n e E f g G %``, the flags
``space + - # 0``, field width and precision (either may be ``*``), and the
length modifiers ``h``, ``l``, ``L`` and ``ll``.  Plain and ``l`` integers
are 32 bits wide; ``L`` and ``ll`` integers are 64 bits wide.
"""

from __future__ import annotations

import math
import operator
import re
import struct
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Iterator

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF
_U64 = (1 << 64) - 1
_MAX_PAD = 32
_ATOI_LIMIT = 999
_MAX_GEN_DIGITS = 19
_DIGIT_GROUP = 8
_DEFAULT_PRECISION = 6

# Ten raised to successive powers of two, applied one per set bit of the scale.
_POWS = (1e1, 1e2, 1e4, 1e8, 1e16, 1e32, 1e64, 1e128, 1e256)

_SPEC = re.compile(
    r"(?P<flags>[ +\-#0]*)"
    r"(?P<width>\*|\d*)"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>ll|[hlL])?"
    r"(?P<conv>.)",
    re.DOTALL,
)


class _Flag(IntFlag):
    NONE = 0
    SPACE = 1
    PLUS = 2
    MINUS = 4
    HASH = 8
    ZERO = 16


_FLAG_CHARS = {
    " ": _Flag.SPACE,
    "+": _Flag.PLUS,
    "-": _Flag.MINUS,
    "#": _Flag.HASH,
    "0": _Flag.ZERO,
}


@dataclass
class _Spec:
    flags: _Flag
    width: int
    precision: int
    length: str

    @property
    def zero_padded(self) -> bool:
        return self.flags & (_Flag.ZERO | _Flag.MINUS) == _Flag.ZERO


@dataclass
class _Field:
    """One converted field: prefix, zeros, body, zeros, tail, zeros."""

    prefix: str = ""
    leading_zeros: int = 0
    body: str = ""
    mid_zeros: int = 0
    tail: str = ""
    trailing_zeros: int = 0

    @property
    def size(self) -> int:
        return (
            len(self.prefix)
            + self.leading_zeros
            + len(self.body)
            + self.mid_zeros
            + len(self.tail)
            + self.trailing_zeros
        )


class _Stopped(Exception):
    """Raised when the output callable refuses more text."""


class _Output:
    def __init__(self, write: Callable[[str], Any]) -> None:
        self._write = write
        self.size = 0

    def put(self, text: str) -> None:
        if not text:
            return
        if self._write(text) is False:
            raise _Stopped
        self.size += len(text)

    def pad(self, char: str, count: int) -> None:
        while count > 0:
            chunk = min(count, _MAX_PAD)
            self.put(char * chunk)
            count -= chunk


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _trunc_div(num: int, denom: int) -> int:
    quot = abs(num) // abs(denom)
    return -quot if (num < 0) != (denom < 0) else quot


def _atoi(digits: str) -> int:
    value = 0
    for ch in digits:
        if value < _ATOI_LIMIT:
            value = value * 10 + int(ch)
    return value


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(args: Iterator[Any]) -> int:
    return operator.index(_next(args))


def _sign_prefix(negative: bool, flags: _Flag) -> str:
    if negative:
        return "-"
    if flags & _Flag.PLUS:
        return "+"
    if flags & _Flag.SPACE:
        return " "
    return ""


def _integer(value: int, conv: str, spec: _Spec, prefix: str) -> _Field:
    magnitude = value & _U64
    if conv in "di" and value < 0:
        magnitude = -value & _U64
    if magnitude == 0 and spec.precision == 0:
        body = ""
    else:
        body = format(magnitude, {"o": "o", "x": "x", "X": "X"}.get(conv, "d"))
    field = _Field(prefix=prefix, body=body)
    if len(body) < spec.precision:
        field.leading_zeros = spec.precision - len(body)
    if spec.precision < 0 and spec.zero_padded:
        extra = spec.width - len(prefix) - field.leading_zeros - len(body)
        if extra > 0:
            field.leading_zeros += extra
    return field


def _scale(value: float, exp: int) -> tuple[float, int]:
    """Bring value near 10**8 by a power of ten; return it and the adjusted exponent."""
    if exp < 0:
        n = (3 - exp) & ~3
        exp = -n
        for power in _POWS:
            if n <= 0:
                break
            if n & 1:
                value *= power
            n >>= 1
    elif exp > 0:
        exp &= ~3
        factor = 1.0
        n = exp
        for power in _POWS:
            if n <= 0:
                break
            if n & 1:
                factor *= power
            n >>= 1
        value /= factor
    return value, exp


def _digits(value: float, conv: str, precision: int) -> tuple[str, int, int]:
    """Generate rounded significant digits: (digits, count, decimal exponent)."""
    bits = struct.unpack(">Q", struct.pack(">d", value))[0]
    xchar = (bits >> 52) & 0x7FF
    if xchar == 0:
        return "", 0, 0

    ldval, exp = _scale(abs(value), _trunc_div((xchar - 0x3FE) * 30103, 100000) - 4)

    gen = min((exp + 10 if conv == "f" else 6) + precision, _MAX_GEN_DIGITS)
    groups = []
    while gen > 0 and ldval > 0:
        lo = int(ldval)
        gen -= _DIGIT_GROUP
        if gen > 0:
            ldval = (ldval - lo) * 1.0e8
        groups.append(f"{lo % 10**_DIGIT_GROUP:08d}")

    raw = "".join(groups)
    stripped = len(raw) - len(raw.lstrip("0"))
    gen = len(raw) - stripped
    exp += 7 - stripped
    chars = list("0" + raw)
    start = 1 + stripped

    if conv == "f":
        nsig = exp + 1 + precision
    elif conv in "eE":
        nsig = 1 + precision
    else:
        nsig = precision
    nsig = min(nsig, gen)

    if nsig > 0:
        drop = "9" if nsig < gen and chars[start + nsig] > "4" else "0"
        n = nsig - 1
        while chars[start + n] == drop:
            nsig -= 1
            n -= 1
        if drop == "9":
            chars[start + n] = chr(ord(chars[start + n]) + 1)
        if n < 0:
            start -= 1
            nsig += 1
            exp += 1

    return "".join(chars[start:]), nsig, exp


def _layout(code: str, p: str, nsig: int, xexp: int, precision: int, spec: _Spec, prefix: str) -> _Field:
    hashed = bool(spec.flags & _Flag.HASH)
    field = _Field(prefix=prefix)
    if nsig <= 0:
        nsig, p = 1, "0"

    if code == "f" or (code in "gG" and -4 <= xexp < precision):
        xexp += 1
        if code != "f":
            if not hashed and nsig < precision:
                precision = nsig
            precision = max(precision - xexp, 0)
        point = "." if precision > 0 or hashed else ""
        if xexp <= 0:
            field.body = "0" + point
            if precision < -xexp:
                xexp = -precision
            field.mid_zeros = -xexp
            precision += xexp
            nsig = min(nsig, precision)
            field.tail = p[:nsig]
            field.trailing_zeros = precision - nsig
        elif nsig < xexp:
            field.body = p[:nsig]
            field.mid_zeros = xexp - nsig
            field.tail = point
            field.trailing_zeros = precision
        else:
            nsig = min(nsig - xexp, precision)
            field.body = p[:xexp] + point + p[xexp : xexp + nsig]
            field.mid_zeros = precision - nsig
    else:
        if code in "gG":
            if nsig < precision:
                precision = nsig
            precision = max(precision - 1, 0)
            code = "e" if code == "g" else "E"
        body = p[0]
        if precision > 0 or hashed:
            body += "."
        if precision > 0:
            nsig = min(nsig - 1, precision)
            body += p[1 : 1 + nsig]
            field.mid_zeros = precision - nsig
        field.body = body
        sign = "+" if xexp >= 0 else "-"
        field.tail = f"{code}{sign}{abs(xexp):02d}"

    if spec.zero_padded and field.size < spec.width:
        field.leading_zeros = spec.width - field.size
    return field


def _real(value: float, conv: str, spec: _Spec, prefix: str) -> _Field:
    precision = spec.precision
    if precision < 0:
        precision = _DEFAULT_PRECISION
    elif precision == 0 and conv in "gG":
        precision = 1
    if math.isnan(value):
        return _Field(prefix=prefix, body="NaN")
    if math.isinf(value):
        return _Field(prefix=prefix, body="Inf")
    digits, nsig, exp = _digits(value, conv, precision)
    return _layout(conv, digits, nsig, exp, precision, spec, prefix)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires an int or a single character")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _convert(conv: str, spec: _Spec, args: Iterator[Any], written: int) -> _Field:
    if conv == "c":
        return _Field(prefix=_char(_next(args)))

    if conv in "di":
        raw = _int_arg(args)
        value = _wrap_signed(raw, 64 if spec.length == "L" else 32)
        if spec.length == "h":
            value = _wrap_signed(value, 16)
        return _integer(value, conv, spec, _sign_prefix(value < 0, spec.flags))

    if conv in "xXuo":
        raw = _int_arg(args)
        value = _wrap_signed(raw, 64 if spec.length == "L" else 32)
        if spec.length == "h":
            value &= _U16
        elif spec.length == "":
            value &= _U32
        prefix = ""
        if spec.flags & _Flag.HASH:
            prefix = "0" + (conv if conv in "xX" else "")
        return _integer(value, conv, spec, prefix)

    if conv in "eEfgG":
        value = float(_next(args))
        negative = math.copysign(1.0, value) < 0
        return _real(value, conv, spec, _sign_prefix(negative, spec.flags))

    if conv == "n":
        store = _next(args)
        if not callable(store):
            raise TypeError("%n requires a callable to receive the count")
        mask = {"h": _U16, "L": _U64}.get(spec.length, _U32)
        store(written & mask)
        return _Field()

    if conv == "p":
        return _integer(_wrap_signed(_int_arg(args), 32), "x", spec, "")

    if conv == "s":
        text = _next(args)
        if not isinstance(text, str):
            raise TypeError("%s requires a str")
        if spec.precision >= 0:
            text = text[: spec.precision]
        return _Field(body=text)

    return _Field(prefix=conv)


def _parse(match: re.Match[str], args: Iterator[Any]) -> _Spec:
    flags = _Flag.NONE
    for ch in match["flags"]:
        flags |= _FLAG_CHARS[ch]

    if match["width"] == "*":
        width = _int_arg(args)
        if width < 0:
            width = -width
            flags |= _Flag.MINUS
    else:
        width = _atoi(match["width"])

    precision_text = match["precision"]
    if precision_text is None:
        precision = -1
    elif precision_text == "*":
        precision = _int_arg(args)
    else:
        precision = _atoi(precision_text)

    length = match["length"] or ""
    if length == "ll":
        length = "L"
    return _Spec(flags, width, precision, length)


def _emit(out: _Output, field: _Field, spec: _Spec) -> None:
    padding = spec.width - field.size
    left = bool(spec.flags & _Flag.MINUS)
    if not left:
        out.pad(" ", padding)
    out.put(field.prefix)
    out.pad("0", field.leading_zeros)
    out.put(field.body)
    out.pad("0", field.mid_zeros)
    out.put(field.tail)
    out.pad("0", field.trailing_zeros)
    if left:
        out.pad(" ", padding)


def xprintf(write: Callable[[str], Any], fmt: str, *args: Any) -> int:
    """Format args by fmt, passing each piece of output to write.

    Returns the number of characters written.  If write returns False the
    output stops there and the count of characters accepted so far is returned.
    A format that ends inside a conversion raises ValueError; too few
    arguments raise TypeError.
    """
    out = _Output(write)
    remaining = iter(args)
    pos = 0
    try:
        while True:
            pct = fmt.find("%", pos)
            if pct < 0:
                out.put(fmt[pos:])
                break
            out.put(fmt[pos:pct])
            match = _SPEC.match(fmt, pct + 1)
            if match is None:
                raise ValueError(f"incomplete conversion at index {pct} of format")
            spec = _parse(match, remaining)
            field = _convert(match["conv"], spec, remaining, out.size)
            _emit(out, field, spec)
            pos = match.end()
    except _Stopped:
        pass
    return out.size


def sprintf(fmt: str, *args: Any) -> str:
    """Return args formatted by fmt."""
    pieces: list[str] = []
    xprintf(pieces.append, fmt, *args)
    return "".join(pieces)