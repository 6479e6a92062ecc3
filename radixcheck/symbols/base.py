"""Numeral bases a variable can be declared in."""

import re
from enum import StrEnum

from radixcheck.lexer import TokenKind


class Base(StrEnum):
    BIN = "bin"
    OCT = "oct"
    HEX = "hex"

    @staticmethod
    def from_keyword(kind: TokenKind) -> "Base":
        """Map a base keyword token kind to its Base.

        Raises if called with a non-keyword TokenKind.
        """
        match kind:
            case TokenKind.BIN:
                return Base.BIN
            case TokenKind.OCT:
                return Base.OCT
            case TokenKind.HEX:
                return Base.HEX
            case _:
                raise ValueError(f"Not a base keyword token kind: {kind!r}")

    def accepts(self, literal: str) -> bool:
        """True when every character of `literal` is a digit of this base."""
        return _DIGITS[self].fullmatch(literal) is not None


_DIGITS: dict[Base, re.Pattern[str]] = {
    Base.BIN: re.compile(r"[01]+"),
    Base.OCT: re.compile(r"[0-7]+"),
    Base.HEX: re.compile(r"[0-9A-F]+", re.IGNORECASE),
}
