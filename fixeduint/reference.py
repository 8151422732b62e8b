"""Independent reference algorithms and cross-checks for the arithmetic."""

from __future__ import annotations

import sys

from fixeduint.types import U256, U512
from fixeduint.uint import Uint
from fixeduint.words import WORD_MASK, div_mod_word

__all__ = [
    "div_mod_word_halves",
    "binary_isqrt",
    "check_div_mod",
    "check_div_mod_word",
    "check_isqrt",
]

_TWO32 = 1 << 32
_HALF_MASK = _TWO32 - 1


def _split(word: int) -> tuple[int, int]:
    return word >> 32, word & _HALF_MASK


def div_mod_word_halves(hi: int, lo: int, divisor: int) -> tuple[int, int]:
    """Divide ``hi:lo`` by a word using only 64-bit steps on 32-bit halves.

    Returns ``(quotient, remainder)``; ``hi`` must be smaller than ``divisor``.
    """
    for name, word in (("hi", hi), ("lo", lo), ("divisor", divisor)):
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"{name} {word} does not fit in 64 bits")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if hi >= divisor:
        raise ValueError("the high word must be smaller than the divisor")

    s = 64 - divisor.bit_length()
    y = (divisor << s) & WORD_MASK
    yn1, yn0 = _split(y)
    un32 = ((hi << s) & WORD_MASK) | (lo >> (64 - s) if s else 0)
    un10 = (lo << s) & WORD_MASK
    un1, un0 = _split(un10)

    q1 = un32 // yn1
    rhat = un32 - q1 * yn1
    while q1 >= _TWO32 or q1 * yn0 > _TWO32 * rhat + un1:
        q1 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    un21 = (un32 * _TWO32 + un1 - q1 * y) & WORD_MASK
    q0 = un21 // yn1
    rhat = (un21 - q0 * yn1) & WORD_MASK
    while q0 >= _TWO32 or q0 * yn0 > _TWO32 * rhat + un0:
        q0 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    rem = (un21 * _TWO32 + un0 - y * q0) & WORD_MASK
    return q1 * _TWO32 + q0, rem >> s


def binary_isqrt(value: Uint) -> Uint:
    """Integer square root by the digit-by-digit binary method."""
    if not isinstance(value, Uint):
        raise TypeError(f"expected a fixed-width integer, got {type(value).__name__}")
    cls = type(value)
    one = cls.one()
    if value <= one:
        return value
    remaining = value
    shift = (cls.BITS - 1 - remaining.leading_zeros()) & ~1
    bit = one << shift
    result = cls.zero()
    while not bit.is_zero():
        candidate = result + bit
        result >>= 1
        if remaining >= candidate:
            remaining -= candidate
            result += bit
        bit >>= 2
    return result


def check_div_mod(data: bytes) -> bool:
    """Compare 512-bit ``div_mod`` with exact integer division.

    ``data`` holds two little-endian 64-byte operands. Returns ``False`` when
    the input does not apply (wrong length or zero divisor) and ``True`` when
    the results agree; raises ``AssertionError`` when they differ.
    """
    if len(data) != 128:
        return False
    x = U512.from_little_endian(data[:64])
    y = U512.from_little_endian(data[64:])
    if y.is_zero():
        return False
    q_ref, r_ref = divmod(int.from_bytes(data[:64], "little"), int.from_bytes(data[64:], "little"))
    expected = (U512(q_ref), U512(r_ref))
    got = x.div_mod(y)
    if got != expected:
        raise AssertionError(f"div_mod mismatch: {got!r} != {expected!r}")
    return True


def check_div_mod_word(data: bytes) -> bool:
    """Compare the half-word division with the direct 128-bit division.

    ``data`` holds three native-endian 64-bit words ``hi``, ``lo`` and
    ``divisor``. Returns ``False`` when the input does not apply.
    """
    if len(data) != 24:
        return False
    hi, lo, divisor = (
        int.from_bytes(data[start:start + 8], sys.byteorder) for start in (0, 8, 16)
    )
    if hi >= divisor:
        return False
    got = div_mod_word_halves(hi, lo, divisor)
    expected = div_mod_word(hi, lo, divisor)
    if got != expected:
        raise AssertionError(f"div_mod_word mismatch: {got} != {expected}")
    return True


def check_isqrt(data: bytes) -> bool:
    """Compare ``integer_sqrt`` with the binary method on a 256-bit value.

    ``data`` holds 32 little-endian bytes. Returns ``False`` when the input
    does not apply.
    """
    if len(data) != 32:
        return False
    x = U256.from_little_endian(data)
    expected = binary_isqrt(x)
    got = x.integer_sqrt()
    if got != expected:
        raise AssertionError(f"integer_sqrt mismatch: {got!r} != {expected!r}")
    return True