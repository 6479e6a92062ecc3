"""Lexer."""

import re
from typing import Final
import unicodedata

from radixcheck.diagnostics import LEXER_INVALID_CHARACTER, Diagnostic, make_diagnostic
from radixcheck.lexer.tokens import Token, TokenKind
from radixcheck.text import TextRange, TextSize, slice_text_range


def _pattern(source: str) -> re.Pattern[str]:
    return re.compile(source, re.IGNORECASE)


# Priority order matters: the first pattern that matches at the current
# position wins, so keywords shadow identifiers and identifiers shadow
# numbers, and binary shadows octal shadows hex (`101` is always binary).
# Word-bounded patterns only check the trailing edge; anything before the
# current position has already been consumed.
TOKEN_PATTERNS: Final[tuple[tuple[TokenKind, re.Pattern[str]], ...]] = (
    (TokenKind.PLUS, _pattern(r"\+")),
    (TokenKind.MINUS, _pattern(r"-")),
    (TokenKind.MULTIPLY, _pattern(r"\*")),
    (TokenKind.DIVIDE, _pattern(r"/")),
    (TokenKind.LPAREN, _pattern(r"\(")),
    (TokenKind.RPAREN, _pattern(r"\)")),
    (TokenKind.SEMICOLON, _pattern(r";")),
    (TokenKind.BIN, _pattern(r"bin\b")),
    (TokenKind.OCT, _pattern(r"oct\b")),
    (TokenKind.HEX, _pattern(r"hex\b")),
    (TokenKind.IDENTIFIER, _pattern(r"[a-zA-Z_][a-zA-Z0-9_]*\b")),
    (TokenKind.BINARY_NUMBER, _pattern(r"[01]+\b")),
    (TokenKind.OCTAL_NUMBER, _pattern(r"[0-7]+\b")),
    (TokenKind.HEXADECIMAL_NUMBER, _pattern(r"[0-9A-F]+\b")),
)


class Lexer:
    """Priority-ordered pattern lexer over a single line.

    Whitespace is skipped. Characters that no pattern accepts become
    one-character INVALID tokens, so lexing never fails.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """One LEXER_INVALID_CHARACTER diagnostic per INVALID token."""
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def next_token(self) -> Token:
        self._skip_whitespace()
        start = self._position

        if self.is_eof:
            return Token(TokenKind.EOF, "", TextRange.empty(TextSize.from_int(start)))

        for kind, pattern in TOKEN_PATTERNS:
            match = pattern.match(self._source, start)
            if match is not None:
                self._position = match.end()
                return Token(kind, match.group(), TextRange(start, self._position))

        self._position += 1
        range = TextRange(start, self._position)
        self._diagnostics.append(
            make_diagnostic(
                LEXER_INVALID_CHARACTER,
                range,
                message=f"Unrecognized character {self._source[start]!r}.",
            )
        )
        return Token(TokenKind.INVALID, self._source[start], range)

    def _skip_whitespace(self) -> None:
        while not self.is_eof and is_whitespace(self._source[self._position]):
            self._position += 1


# Separator categories plus the C0/C1 layout controls. Unlike str.isspace this
# excludes the information separators \x1c-\x1f, which lex as INVALID.
_WHITESPACE_CONTROLS: Final[frozenset[str]] = frozenset("\t\n\v\f\r\x85")


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE_CONTROLS or unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def tokenize(source: str) -> list[Token]:
    """Lex a whole line. The result always ends with exactly one EOF token."""
    return Lexer(source).lex()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
