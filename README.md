# fixeduint

Unsigned integers of a fixed number of 64-bit words, with the overflow
behaviour of machine integers: checked operators, plus `overflowing_*`,
`checked_*` and `saturating_*` variants. Values are immutable.

## Installing

```
pip install .
```

For the test suite: `pip install ".[test]"` and run `pytest`.

## Ready-made types

`fixeduint.types` provides `U128`, `U256` and `U512`. Further widths are
made with `fixeduint.uint.construct_uint(name, n_words)`, or by subclassing
`fixeduint.uint.Uint` with an `N_WORDS` class attribute. Every type has
`N_WORDS`, `BITS`, `BYTES` and `MAX`.

```python
from fixeduint.types import U256, U512

p = U256.from_dec_str(
    "38873241744847760218045702002058062581688990428170398542849190507947196700873"
)
(p - 1) % p                                   # p - 1
(p + 1) % p                                   # 1
q, r = U256(1000).div_mod(U256(7))            # (U256(142), U256(6))

x = U512.from_hex_str("0xff")
x.to_big_endian()                             # 64 bytes, most significant first
U256.max_value().overflowing_add(U256(1))     # (U256(0), True)
U256.max_value().checked_add(U256(1))         # None
U256(10).pow(U256(3))                         # U256(1000)
U256(99).integer_sqrt()                       # U256(9)

wide = U256.max_value().full_mul(U256.max_value())   # an exact U512 product
```

A value is built from a non-negative `int`, from big-endian `bytes`, from a
hex string, or from words with `from_words`. Operands of the operators may
be values of the same type or plain `int`s; mixing two different widths
raises `TypeError`.

Operators: `+`, `-`, `*`, `//`, `%`, `divmod`, `**`, `&`, `|`, `^`, `~`,
`<<`, `>>` and comparisons. `+`, `-`, `*` and `**` raise
`fixeduint.errors.ArithmeticOverflow` when the result does not fit.
Division by zero raises `ZeroDivisionError`. Shifts by the full width or
more give zero.

Inspection and conversion: `bits`, `bit`, `byte`, `leading_zeros`,
`trailing_zeros`, `is_zero`, `words`, `low_u32`, `low_u64`, `low_u128`,
`as_u32`, `as_u64`, `as_u128`, `as_usize`, `to_int(bits, signed)`,
`to_big_endian`, `to_little_endian`, `int()` and `format()`. The checked
conversions raise `ArithmeticOverflow` when the value does not fit.

`fixeduint.words` holds the word-level helpers (`to_words`, `from_words`,
`full_mul`, `overflowing_binop`, `div_mod_word`, `mul_u64`, `split_u128`).

## Parsing

`from_dec_str`, `from_hex_str` (an optional `0x` prefix is accepted) and
`from_str_radix(text, radix)` for radix 10 or 16. Failures raise
`FromDecStrErr`, `FromHexError` or `FromStrRadixErr`, all subclasses of
`ValueError`; each carries a `FromStrRadixErrKind` telling an invalid
character from an invalid length or an unsupported radix. The empty
decimal string parses as zero.

## Modular arithmetic demo

`fixeduint.modular` has `add_mod` and `mul_small_mod` and a demo that
checks a few identities modulo a 256-bit prime and prints them. Run it with:

```
fixeduint-modular
```

## Reference checks

`fixeduint.reference` holds independent implementations (`div_mod_word_halves`,
word division by 32-bit halves; `binary_isqrt`, a bitwise integer square
root) and `check_div_mod`, `check_div_mod_word` and `check_isqrt`, which
compare them against the main types for a given byte string. They return
`False` when the input does not apply, `True` when the results agree, and
raise `AssertionError` when they differ.