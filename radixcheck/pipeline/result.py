"""Lex carrier shared by the declaration and expression entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from radixcheck.diagnostics import Diagnostic, has_errors
from radixcheck.lexer import Lexer, Token, TokenKind


@dataclass(frozen=True, slots=True)
class LexResult:
    """One lexed line: the source, its tokens (EOF-terminated) and lexer diagnostics."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def identifiers(self) -> list[Token]:
        return [token for token in self.tokens if token.kind == TokenKind.IDENTIFIER]


def lex_result(text: str) -> LexResult:
    lexer = Lexer(text)
    tokens = lexer.lex()
    return LexResult(source_text=text, tokens=tokens, diagnostics=list(lexer.diagnostics))
