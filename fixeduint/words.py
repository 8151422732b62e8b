"""Operations on little-endian sequences of 64-bit words."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fixeduint.errors import ArithmeticOverflow

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1

__all__ = [
    "WORD_BITS",
    "WORD_MASK",
    "split_u128",
    "mul_u64",
    "div_mod_word",
    "to_words",
    "from_words",
    "full_mul",
    "overflowing_binop",
]


def _check_word(value: int, name: str = "word") -> int:
    if not 0 <= value <= WORD_MASK:
        raise ValueError(f"{name} {value} does not fit in 64 bits")
    return value


def split_u128(value: int) -> tuple[int, int]:
    """Split a 128-bit value into its ``(high, low)`` 64-bit halves."""
    if not 0 <= value < 1 << (2 * WORD_BITS):
        raise ValueError(f"{value} does not fit in 128 bits")
    return value >> WORD_BITS, value & WORD_MASK


def mul_u64(a: int, b: int, carry: int) -> tuple[int, int]:
    """Compute ``a * b + carry`` and return it as ``(low, high)`` words."""
    _check_word(a, "a")
    _check_word(b, "b")
    _check_word(carry, "carry")
    hi, lo = split_u128(a * b + carry)
    return lo, hi


def div_mod_word(hi: int, lo: int, divisor: int) -> tuple[int, int]:
    """Divide the 128-bit value ``hi:lo`` by a word, returning ``(quotient, remainder)``.

    ``hi`` must be smaller than ``divisor`` so that the quotient fits in a word.
    """
    _check_word(hi, "hi")
    _check_word(lo, "lo")
    _check_word(divisor, "divisor")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if hi >= divisor:
        raise ValueError("the high word must be smaller than the divisor")
    return divmod((hi << WORD_BITS) | lo, divisor)


def to_words(value: int, n_words: int) -> tuple[int, ...]:
    """Split a non-negative integer into ``n_words`` little-endian words."""
    if n_words < 1:
        raise ValueError("at least one word is required")
    if value < 0:
        raise ValueError("Unsigned integer can't be created from negative value")
    if value >> (WORD_BITS * n_words):
        raise ArithmeticOverflow(f"integer overflow: value does not fit in {n_words} words")
    return tuple((value >> (WORD_BITS * shift)) & WORD_MASK for shift in range(n_words))


def from_words(words: Iterable[int]) -> int:
    """Join little-endian 64-bit words into a single integer."""
    result = 0
    for position, word in enumerate(words):
        result |= _check_word(word) << (WORD_BITS * position)
    return result


def full_mul(left: Sequence[int], right: Sequence[int]) -> tuple[int, ...]:
    """Multiply two word sequences without loss, giving ``len(left) + len(right)`` words."""
    if not left or not right:
        raise ValueError("operands must have at least one word")
    product = from_words(left) * from_words(right)
    return to_words(product, len(left) + len(right))


def overflowing_binop(
    left: Sequence[int], right: Sequence[int], subtract: bool
) -> tuple[tuple[int, ...], bool]:
    """Add or subtract word sequences with carry propagation.

    Returns the wrapped result and whether the operation overflowed
    (for subtraction: underflowed).
    """
    if len(left) != len(right):
        raise ValueError("operands must have the same number of words")
    if not left:
        raise ValueError("operands must have at least one word")
    result = []
    carry = 0
    for a, b in zip(left, right):
        _check_word(a)
        _check_word(b)
        raw = a - b - carry if subtract else a + b + carry
        result.append(raw & WORD_MASK)
        carry = 1 if (raw < 0 or raw > WORD_MASK) else 0
    return tuple(result), bool(carry)