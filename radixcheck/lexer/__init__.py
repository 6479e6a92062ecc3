"""Lexer."""

from radixcheck.lexer.lexer import TOKEN_PATTERNS, Lexer, dump_tokens, is_whitespace, token_text, tokenize
from radixcheck.lexer.tokens import Token, TokenKind

__all__ = [
    "TOKEN_PATTERNS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_whitespace",
    "token_text",
    "tokenize",
]
