"""Declaration grammar check: `<base> <identifier> <literal>;`."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from radixcheck.diagnostics import (
    DECLARATION_DUPLICATE,
    DECLARATION_GRAMMAR_MISMATCH,
    DECLARATION_INVALID_VALUE,
    Diagnostic,
    make_diagnostic,
)
from radixcheck.lexer import Token, TokenKind
from radixcheck.symbols import Base, SymbolTable
from radixcheck.text import ZERO, TextRange

# base keyword, identifier, literal, semicolon, EOF
MIN_DECLARATION_TOKENS = 5


class DeclarationOutcome(StrEnum):
    ACCEPTED = "accepted"
    REJECTED_GRAMMAR = "rejected_grammar"
    REJECTED_DUPLICATE_OR_INVALID_VALUE = "rejected_duplicate_or_invalid_value"


@dataclass(frozen=True, slots=True)
class DeclarationResult:
    """Outcome of one declaration line.

    `name`, `base` and `value` are set whenever the grammar matched, including
    duplicate / invalid value rejections, so callers can report them.
    """

    outcome: DeclarationOutcome
    name: str | None = None
    base: Base | None = None
    value: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.outcome == DeclarationOutcome.ACCEPTED


def matches_declaration_grammar(tokens: Sequence[Token]) -> bool:
    """Positional shape check only. Anything after the semicolon is ignored."""
    if len(tokens) < MIN_DECLARATION_TOKENS:
        return False
    return (
        tokens[0].kind.is_keyword
        and tokens[1].kind == TokenKind.IDENTIFIER
        and tokens[2].kind.is_number
        and tokens[3].kind == TokenKind.SEMICOLON
    )


def validate_declaration(tokens: Sequence[Token], table: SymbolTable) -> DeclarationResult:
    """Check one lexed declaration and record it in `table` when it is accepted.

    The literal is re-checked against the declared base rather than trusting
    the literal kind the lexer picked (`bin x 17;` lexes 17 as octal and is
    rejected here). `table` is only mutated on acceptance.
    """
    if not matches_declaration_grammar(tokens):
        return DeclarationResult(
            outcome=DeclarationOutcome.REJECTED_GRAMMAR,
            diagnostics=[make_diagnostic(DECLARATION_GRAMMAR_MISMATCH, _line_range(tokens))],
        )

    base = Base.from_keyword(tokens[0].kind)
    name_token = tokens[1]
    value_token = tokens[2]
    name = name_token.text
    value = value_token.text

    if table.is_declared(name):
        return DeclarationResult(
            outcome=DeclarationOutcome.REJECTED_DUPLICATE_OR_INVALID_VALUE,
            name=name,
            base=base,
            value=value,
            diagnostics=[
                make_diagnostic(
                    DECLARATION_DUPLICATE,
                    name_token.range,
                    message=f"Variable {name} was already declared.",
                )
            ],
        )

    if not base.accepts(value):
        return DeclarationResult(
            outcome=DeclarationOutcome.REJECTED_DUPLICATE_OR_INVALID_VALUE,
            name=name,
            base=base,
            value=value,
            diagnostics=[
                make_diagnostic(
                    DECLARATION_INVALID_VALUE,
                    value_token.range,
                    message=f"Value '{value}' is not valid for type {base.name}.",
                )
            ],
        )

    table.declare(name, base)
    return DeclarationResult(
        outcome=DeclarationOutcome.ACCEPTED,
        name=name,
        base=base,
        value=value,
    )


def _line_range(tokens: Sequence[Token]) -> TextRange:
    if not tokens:
        return TextRange.empty(ZERO)
    return tokens[0].range.cover(tokens[-1].range)
