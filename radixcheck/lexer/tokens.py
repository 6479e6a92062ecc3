"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from radixcheck.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    INVALID = 2  # one unrecognized character

    # -------------------------
    # Operators
    # -------------------------
    PLUS = 10  # +
    MINUS = 11  # -
    MULTIPLY = 12  # *
    DIVIDE = 13  # /

    # -------------------------
    # Punctuation
    # -------------------------
    LPAREN = 20  # (
    RPAREN = 21  # )
    SEMICOLON = 22  # ;

    # -------------------------
    # Base keywords (case-insensitive)
    # -------------------------
    BIN = 30
    OCT = 31
    HEX = 32

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 40
    BINARY_NUMBER = 41
    OCTAL_NUMBER = 42
    HEXADECIMAL_NUMBER = 43

    @property
    def is_operator(self) -> bool:
        return self in (
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.MULTIPLY,
            TokenKind.DIVIDE,
        )

    @property
    def is_keyword(self) -> bool:
        return self in (TokenKind.BIN, TokenKind.OCT, TokenKind.HEX)

    @property
    def is_number(self) -> bool:
        return self in (
            TokenKind.BINARY_NUMBER,
            TokenKind.OCTAL_NUMBER,
            TokenKind.HEXADECIMAL_NUMBER,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token: its kind, the exact matched text and where it sits in the line."""

    kind: TokenKind
    text: str
    range: TextRange
