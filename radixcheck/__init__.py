"""Lexer, declaration validator and symbol table for bin/oct/hex variable declarations."""

from radixcheck.checker import (
    DeclarationOutcome,
    DeclarationResult,
    ExpressionCheckMode,
    ExpressionResult,
    check_expression,
    validate_declaration,
)
from radixcheck.lexer import Lexer, Token, TokenKind, tokenize
from radixcheck.session import Session, SessionOptions, SessionResult, run_session
from radixcheck.symbols import Base, SymbolTable

__all__ = [
    "Base",
    "DeclarationOutcome",
    "DeclarationResult",
    "ExpressionCheckMode",
    "ExpressionResult",
    "Lexer",
    "Session",
    "SessionOptions",
    "SessionResult",
    "SymbolTable",
    "Token",
    "TokenKind",
    "check_expression",
    "run_session",
    "tokenize",
    "validate_declaration",
]
