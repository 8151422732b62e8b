"""Fixed-width unsigned integers built from little-endian 64-bit words."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import ClassVar, TypeVar

from fixeduint.errors import (
    ArithmeticOverflow,
    FromDecStrErr,
    FromHexError,
    FromStrRadixErr,
    FromStrRadixErrKind,
)
from fixeduint.words import WORD_BITS, WORD_MASK, from_words, to_words

__all__ = ["Uint", "construct_uint"]

_U = TypeVar("_U", bound="Uint")

_USIZE_BITS = 64
_INT_WIDTHS = (8, 16, 32, 64, 128)
_HEX_DIGITS = {ord(ch): int(ch, 16) for ch in "0123456789abcdefABCDEF"}


class Uint:
    """An unsigned integer of a fixed number of 64-bit words.

    Concrete types are made with :func:`construct_uint` or by subclassing
    with an ``N_WORDS`` class attribute. Values are immutable; arithmetic
    raises :class:`ArithmeticOverflow` when a result does not fit.
    """

    __slots__ = ("_value",)

    N_WORDS: ClassVar[int]
    BITS: ClassVar[int]
    BYTES: ClassVar[int]
    MAX: ClassVar[Uint]
    _MASK: ClassVar[int]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        n_words = getattr(cls, "N_WORDS", None)
        if n_words is None:
            return
        if not isinstance(n_words, int) or isinstance(n_words, bool) or n_words < 1:
            raise ValueError("N_WORDS must be a positive integer")
        cls.BITS = n_words * WORD_BITS
        cls.BYTES = n_words * 8
        cls._MASK = (1 << cls.BITS) - 1
        cls.MAX = cls._make(cls._MASK)

    def __init__(self, value: int | bytes | bytearray | str | Uint = 0) -> None:
        if getattr(type(self), "N_WORDS", None) is None:
            raise TypeError("Uint has no width; create a type with construct_uint")
        if type(value) is type(self):
            self._value = value._value
        elif isinstance(value, Uint):
            raise TypeError(f"cannot convert {type(value).__name__} to {type(self).__name__}")
        elif isinstance(value, int):
            self._value = from_words(to_words(value, self.N_WORDS))
        elif isinstance(value, (bytes, bytearray)):
            self._value = type(self).from_big_endian(value)._value
        elif isinstance(value, str):
            self._value = type(self).from_hex_str(value)._value
        else:
            raise TypeError(f"cannot convert {type(value).__name__} to {type(self).__name__}")

    @classmethod
    def _make(cls: type[_U], value: int) -> _U:
        obj = object.__new__(cls)
        obj._value = value
        return obj

    def _coerce(self, other: object) -> int:
        if type(other) is type(self):
            return other._value  # type: ignore[attr-defined]
        if isinstance(other, Uint) or not isinstance(other, int):
            raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
        return type(self)(other)._value

    def _operand(self, other: object) -> int | None:
        if type(other) is type(self):
            return other._value  # type: ignore[attr-defined]
        if isinstance(other, Uint) or not isinstance(other, int):
            return None
        return type(self)(other)._value

    def _compared(self, other: object) -> int | None:
        if type(other) is type(self):
            return other._value  # type: ignore[attr-defined]
        if isinstance(other, Uint) or not isinstance(other, int):
            return None
        return other

    # construction

    @classmethod
    def from_words(cls: type[_U], words: Iterable[int]) -> _U:
        """Build a value from exactly ``N_WORDS`` little-endian words."""
        words = tuple(words)
        if len(words) != cls.N_WORDS:
            raise ValueError(f"expected {cls.N_WORDS} words, got {len(words)}")
        return cls._make(from_words(words))

    @classmethod
    def from_str_radix(cls: type[_U], txt: str, radix: int) -> _U:
        """Parse a string in base 10 or 16."""
        if radix == 10:
            try:
                return cls.from_dec_str(txt)
            except FromDecStrErr as exc:
                raise FromStrRadixErr.from_dec_error(exc) from exc
        if radix == 16:
            try:
                return cls.from_hex_str(txt)
            except FromHexError as exc:
                raise FromStrRadixErr.from_hex_error(exc) from exc
        raise FromStrRadixErr.unsupported()

    @classmethod
    def from_dec_str(cls: type[_U], value: str) -> _U:
        """Parse a decimal string; the empty string is zero."""
        result = 0
        for byte in value.encode("utf-8"):
            digit = byte - 0x30
            if not 0 <= digit <= 9:
                raise FromDecStrErr(FromStrRadixErrKind.INVALID_CHARACTER)
            result = result * 10 + digit
            if result > cls._MASK:
                raise FromDecStrErr(FromStrRadixErrKind.INVALID_LENGTH)
        return cls._make(result)

    @classmethod
    def from_hex_str(cls: type[_U], value: str) -> _U:
        """Parse a hexadecimal string with an optional ``0x`` prefix."""
        text = value[2:] if value.startswith("0x") else value
        encoded = text.encode("utf-8")
        if len(encoded) > 2 * cls.BYTES:
            raise FromHexError(FromStrRadixErrKind.INVALID_LENGTH)
        if len(encoded) % 2:
            encoded = b"0" + encoded
        result = 0
        for index, byte in enumerate(encoded):
            digit = _HEX_DIGITS.get(byte)
            if digit is None:
                raise FromHexError(FromStrRadixErrKind.INVALID_CHARACTER, chr(byte), index)
            result = (result << 4) | digit
        return cls._make(result)

    @classmethod
    def from_big_endian(cls: type[_U], data: bytes | bytearray) -> _U:
        """Read a big-endian byte string of at most ``BYTES`` bytes."""
        if len(data) > cls.BYTES:
            raise ValueError(f"at most {cls.BYTES} bytes fit in {cls.__name__}")
        return cls._make(int.from_bytes(bytes(data), "big"))

    @classmethod
    def from_little_endian(cls: type[_U], data: bytes | bytearray) -> _U:
        """Read a little-endian byte string of at most ``BYTES`` bytes."""
        if len(data) > cls.BYTES:
            raise ValueError(f"at most {cls.BYTES} bytes fit in {cls.__name__}")
        return cls._make(int.from_bytes(bytes(data), "little"))

    @classmethod
    def zero(cls: type[_U]) -> _U:
        """The additive identity."""
        return cls._make(0)

    @classmethod
    def one(cls: type[_U]) -> _U:
        """The multiplicative identity."""
        return cls._make(1)

    @classmethod
    def max_value(cls: type[_U]) -> _U:
        """The largest value of the type."""
        return cls._make(cls._MASK)

    @classmethod
    def exp10(cls: type[_U], n: int) -> _U:
        """``10 ** n`` as this type; raises if it does not fit."""
        if n < 0:
            raise ValueError("exponent must not be negative")
        if n > cls.BITS:
            raise ArithmeticOverflow()
        result = 10**n
        if result > cls._MASK:
            raise ArithmeticOverflow()
        return cls._make(result)

    # conversions

    def words(self) -> tuple[int, ...]:
        """The little-endian 64-bit words of the value."""
        return to_words(self._value, self.N_WORDS)

    def low_u32(self) -> int:
        """The lowest 32 bits."""
        return self._value & 0xFFFF_FFFF

    def low_u64(self) -> int:
        """The lowest word."""
        return self._value & WORD_MASK

    def low_u128(self) -> int:
        """The lowest two words."""
        return self._value & ((1 << 128) - 1)

    def _checked(self, bits: int, name: str) -> int:
        if self._value >> bits:
            raise ArithmeticOverflow(f"Integer overflow when casting to {name}")
        return self._value

    def as_u32(self) -> int:
        """The value as a 32-bit integer; raises if it does not fit."""
        return self._checked(32, "u32")

    def as_u64(self) -> int:
        """The value as a 64-bit integer; raises if it does not fit."""
        return self._checked(64, "u64")

    def as_u128(self) -> int:
        """The value as a 128-bit integer; raises if it does not fit."""
        return self._checked(128, "u128")

    def as_usize(self) -> int:
        """The value as a machine-size integer; raises if it does not fit."""
        return self._checked(_USIZE_BITS, "usize")

    def to_int(self, bits: int, signed: bool = False) -> int:
        """The value as a primitive integer of ``bits`` width; raises if it does not fit."""
        if bits not in _INT_WIDTHS:
            raise ValueError(f"unsupported integer width {bits}")
        name = f"{'i' if signed else 'u'}{bits}"
        limit = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1
        if self._value > limit:
            raise ArithmeticOverflow(f"integer overflow when casting to {name}")
        return self._value

    # inspection

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self._value == 0

    def bits(self) -> int:
        """The least number of bits needed to represent the value."""
        return self._value.bit_length()

    def bit(self, index: int) -> bool:
        """Whether bit ``index`` is set."""
        if not 0 <= index < self.BITS:
            raise IndexError(f"bit index {index} out of range")
        return bool((self._value >> index) & 1)

    def leading_zeros(self) -> int:
        """The number of leading zero bits."""
        return self.BITS - self._value.bit_length()

    def trailing_zeros(self) -> int:
        """The number of trailing zero bits."""
        if self._value == 0:
            return self.BITS
        return (self._value & -self._value).bit_length() - 1

    def byte(self, index: int) -> int:
        """Byte ``index``, counting from the least significant."""
        if not 0 <= index < self.BYTES:
            raise IndexError(f"byte index {index} out of range")
        return (self._value >> (8 * index)) & 0xFF

    def to_big_endian(self) -> bytes:
        """The value as ``BYTES`` big-endian bytes."""
        return self._value.to_bytes(self.BYTES, "big")

    def to_little_endian(self) -> bytes:
        """The value as ``BYTES`` little-endian bytes."""
        return self._value.to_bytes(self.BYTES, "little")

    # arithmetic

    def div_mod(self: _U, other: _U | int) -> tuple[_U, _U]:
        """Return ``(self // other, self % other)``."""
        divisor = self._coerce(other)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        quotient, remainder = divmod(self._value, divisor)
        return self._make(quotient), self._make(remainder)

    def integer_sqrt(self: _U) -> _U:
        """The largest ``n`` with ``n * n <= self``."""
        return self._make(math.isqrt(self._value))

    def pow(self: _U, expon: _U | int) -> _U:
        """``self ** expon``; raises if the result overflows."""
        result, overflow = self.overflowing_pow(expon)
        if overflow:
            raise ArithmeticOverflow()
        return result

    def overflowing_pow(self: _U, expon: _U | int) -> tuple[_U, bool]:
        """``self ** expon`` wrapped to the width, and whether it overflowed."""
        exponent = self._coerce(expon)
        base = self._value
        if exponent == 0:
            return self._make(1), False
        if base < 2:
            return self, False
        if exponent >= self.BITS:
            return self._make(pow(base, exponent, 1 << self.BITS)), True
        full = base**exponent
        return self._make(full & self._MASK), full > self._MASK

    def checked_pow(self: _U, expon: _U | int) -> _U | None:
        """``self ** expon``, or ``None`` on overflow."""
        result, overflow = self.overflowing_pow(expon)
        return None if overflow else result

    def overflowing_add(self: _U, other: _U | int) -> tuple[_U, bool]:
        """Wrapping addition and whether it overflowed."""
        total = self._value + self._coerce(other)
        return self._make(total & self._MASK), total > self._MASK

    def saturating_add(self: _U, other: _U | int) -> _U:
        """Addition that stops at the maximum value."""
        result, overflow = self.overflowing_add(other)
        return self.max_value() if overflow else result

    def checked_add(self: _U, other: _U | int) -> _U | None:
        """Addition, or ``None`` on overflow."""
        result, overflow = self.overflowing_add(other)
        return None if overflow else result

    def overflowing_sub(self: _U, other: _U | int) -> tuple[_U, bool]:
        """Wrapping subtraction and whether it underflowed."""
        difference = self._value - self._coerce(other)
        return self._make(difference & self._MASK), difference < 0

    def saturating_sub(self: _U, other: _U | int) -> _U:
        """Subtraction that stops at zero."""
        result, overflow = self.overflowing_sub(other)
        return self.zero() if overflow else result

    def checked_sub(self: _U, other: _U | int) -> _U | None:
        """Subtraction, or ``None`` on underflow."""
        result, overflow = self.overflowing_sub(other)
        return None if overflow else result

    def abs_diff(self: _U, other: _U | int) -> _U:
        """The absolute difference of the two values."""
        return self._make(abs(self._value - self._coerce(other)))

    def overflowing_mul(self: _U, other: _U | int) -> tuple[_U, bool]:
        """Wrapping multiplication and whether it overflowed."""
        product = self._value * self._coerce(other)
        return self._make(product & self._MASK), product > self._MASK

    def saturating_mul(self: _U, other: _U | int) -> _U:
        """Multiplication that stops at the maximum value."""
        result, overflow = self.overflowing_mul(other)
        return self.max_value() if overflow else result

    def checked_mul(self: _U, other: _U | int) -> _U | None:
        """Multiplication, or ``None`` on overflow."""
        result, overflow = self.overflowing_mul(other)
        return None if overflow else result

    def checked_div(self: _U, other: _U | int) -> _U | None:
        """Division, or ``None`` when dividing by zero."""
        divisor = self._coerce(other)
        return None if divisor == 0 else self._make(self._value // divisor)

    def checked_rem(self: _U, other: _U | int) -> _U | None:
        """Remainder, or ``None`` when dividing by zero."""
        divisor = self._coerce(other)
        return None if divisor == 0 else self._make(self._value % divisor)

    def overflowing_neg(self: _U) -> tuple[_U, bool]:
        """Two's complement negation and whether it overflowed."""
        if self._value == 0:
            return self, False
        return self._make(-self._value & self._MASK), True

    def checked_neg(self: _U) -> _U | None:
        """Negation, which only succeeds for zero."""
        result, overflow = self.overflowing_neg()
        return None if overflow else result

    # operators

    def __add__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        total = self._value + value
        if total > self._MASK:
            raise ArithmeticOverflow()
        return self._make(total)

    __radd__ = __add__

    def __sub__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if value > self._value:
            raise ArithmeticOverflow()
        return self._make(self._value - value)

    def __rsub__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if self._value > value:
            raise ArithmeticOverflow()
        return self._make(value - self._value)

    def __mul__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        product = self._value * value
        if product > self._MASK:
            raise ArithmeticOverflow()
        return self._make(product)

    __rmul__ = __mul__

    def __floordiv__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self.div_mod(value)[0]

    def __rfloordiv__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._make(value).div_mod(self)[0]

    def __mod__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self.div_mod(value)[1]

    def __rmod__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._make(value).div_mod(self)[1]

    def __divmod__(self: _U, other: object) -> tuple[_U, _U]:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self.div_mod(value)

    def __pow__(self: _U, expon: object, modulo: object = None) -> _U:
        if modulo is not None:
            return NotImplemented
        value = self._operand(expon)
        if value is None:
            return NotImplemented
        return self.pow(value)

    def __and__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._make(self._value & value)

    __rand__ = __and__

    def __or__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._make(self._value | value)

    __ror__ = __or__

    def __xor__(self: _U, other: object) -> _U:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._make(self._value ^ value)

    __rxor__ = __xor__

    def __invert__(self: _U) -> _U:
        return self._make(self._value ^ self._MASK)

    def _shift(self, shift: object) -> int | None:
        if type(shift) is type(self):
            return shift._value  # type: ignore[attr-defined]
        if isinstance(shift, Uint) or not isinstance(shift, int):
            return None
        if shift < 0:
            raise ValueError("negative shift count")
        return shift

    def __lshift__(self: _U, shift: object) -> _U:
        amount = self._shift(shift)
        if amount is None:
            return NotImplemented
        if amount >= self.BITS:
            return self._make(0)
        return self._make((self._value << amount) & self._MASK)

    def __rshift__(self: _U, shift: object) -> _U:
        amount = self._shift(shift)
        if amount is None:
            return NotImplemented
        if amount >= self.BITS:
            return self._make(0)
        return self._make(self._value >> amount)

    # comparison and conversion protocols

    def __eq__(self, other: object) -> bool:
        value = self._compared(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: object) -> bool:
        value = self._compared(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: object) -> bool:
        value = self._compared(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: object) -> bool:
        value = self._compared(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: object) -> bool:
        value = self._compared(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, spec: str) -> str:
        return format(self._value, spec) if spec else str(self._value)


def construct_uint(name: str, n_words: int) -> type[Uint]:
    """Create an unsigned integer type of ``n_words`` 64-bit words."""
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"{name!r} is not a valid type name")
    if not isinstance(n_words, int) or isinstance(n_words, bool) or n_words < 1:
        raise ValueError("n_words must be a positive integer")
    namespace = {
        "N_WORDS": n_words,
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"Little-endian unsigned integer of {n_words} 64-bit words.",
    }
    return type(name, (Uint,), namespace)