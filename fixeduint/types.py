"""Ready-made unsigned integer types of common widths."""

from __future__ import annotations

from fixeduint.uint import Uint
from fixeduint.words import full_mul as _full_mul

__all__ = ["U128", "U256", "U512"]


class U128(Uint):
    """Little-endian unsigned integer of 2 64-bit words."""

    __slots__ = ()
    N_WORDS = 2


class U512(Uint):
    """Little-endian unsigned integer of 8 64-bit words."""

    __slots__ = ()
    N_WORDS = 8


class U256(Uint):
    """Little-endian unsigned integer of 4 64-bit words."""

    __slots__ = ()
    N_WORDS = 4

    def full_mul(self, other: U256) -> U512:
        """The exact product of two 256-bit values as a 512-bit value."""
        if type(other) is not U256:
            raise TypeError(f"cannot multiply U256 by {type(other).__name__}")
        return U512.from_words(_full_mul(self.words(), other.words()))