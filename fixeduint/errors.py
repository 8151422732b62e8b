"""Error types raised when parsing or operating on fixed-width integers."""

from __future__ import annotations

import enum


class FromStrRadixErrKind(enum.Enum):
    """Categories of errors encountered when parsing numbers."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_LENGTH = "invalid_length"
    UNSUPPORTED_RADIX = "unsupported_radix"

    @property
    def message(self) -> str:
        return _KIND_MESSAGES[self]


_KIND_MESSAGES = {
    FromStrRadixErrKind.UNSUPPORTED_RADIX: "the given radix is not supported",
    FromStrRadixErrKind.INVALID_CHARACTER: "input contains an invalid character",
    FromStrRadixErrKind.INVALID_LENGTH: "length not supported for radix or type",
}

_DEC_MESSAGES = {
    FromStrRadixErrKind.INVALID_CHARACTER: "a character is not in the range 0-9",
    FromStrRadixErrKind.INVALID_LENGTH: "the number is too large for the type",
}


class FromDecStrErr(ValueError):
    """A decimal string could not be converted.

    ``kind`` is either ``INVALID_CHARACTER`` (a character outside 0-9) or
    ``INVALID_LENGTH`` (the value does not fit the type).
    """

    def __init__(self, kind: FromStrRadixErrKind) -> None:
        if kind not in _DEC_MESSAGES:
            raise ValueError(f"{kind} is not a decimal parsing error")
        self.kind = kind
        super().__init__(_DEC_MESSAGES[kind])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FromDecStrErr):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash((FromDecStrErr, self.kind))


class FromHexError(ValueError):
    """A hexadecimal string could not be converted.

    With ``character`` and ``index`` given the error names the offending
    character; otherwise it reports an invalid string length.
    """

    def __init__(
        self,
        kind: FromStrRadixErrKind,
        character: str | None = None,
        index: int | None = None,
    ) -> None:
        if kind is FromStrRadixErrKind.INVALID_CHARACTER:
            if character is None or index is None:
                raise ValueError("an invalid character error needs the character and its index")
            message = f"Invalid character {character!r} at position {index}"
        elif kind is FromStrRadixErrKind.INVALID_LENGTH:
            message = "Invalid string length"
        else:
            raise ValueError(f"{kind} is not a hex parsing error")
        self.kind = kind
        self.character = character
        self.index = index
        super().__init__(message)


class FromStrRadixErr(ValueError):
    """The error raised when parsing a number in a given radix."""

    def __init__(
        self,
        kind: FromStrRadixErrKind,
        source: FromDecStrErr | FromHexError | None = None,
    ) -> None:
        self.kind = kind
        self.source = source
        super().__init__(str(source) if source is not None else kind.message)
        self.__cause__ = source

    @classmethod
    def unsupported(cls) -> FromStrRadixErr:
        """An error for a radix other than 10 or 16."""
        return cls(FromStrRadixErrKind.UNSUPPORTED_RADIX)

    @classmethod
    def from_dec_error(cls, error: FromDecStrErr) -> FromStrRadixErr:
        """Wrap a decimal parsing error, keeping its category."""
        return cls(error.kind, error)

    @classmethod
    def from_hex_error(cls, error: FromHexError) -> FromStrRadixErr:
        """Wrap a hexadecimal parsing error, keeping its category."""
        return cls(error.kind, error)


class ArithmeticOverflow(OverflowError):
    """An arithmetic operation overflowed the fixed width of the type."""

    def __init__(self, message: str = "arithmetic operation overflow") -> None:
        super().__init__(message)