"""Expression check: every identifier must name a declared variable."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from radixcheck.checker.options import ExpressionCheckMode
from radixcheck.diagnostics import EXPRESSION_UNDECLARED_VARIABLE, Diagnostic, make_diagnostic
from radixcheck.lexer import Token, TokenKind
from radixcheck.symbols import SymbolTable


@dataclass(frozen=True, slots=True)
class ExpressionResult:
    """Undeclared names in order of appearance; empty when the expression is valid."""

    undeclared: tuple[str, ...] = ()
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.undeclared


def check_expression(
    tokens: Sequence[Token],
    table: SymbolTable,
    *,
    mode: ExpressionCheckMode = ExpressionCheckMode.FIRST_UNDECLARED,
) -> ExpressionResult:
    """Look up every IDENTIFIER token in `table`.

    Operators, parentheses, literals and INVALID tokens are not validated.
    In FIRST_UNDECLARED mode the scan stops at the first unknown name.
    """
    undeclared: list[str] = []
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        if token.kind != TokenKind.IDENTIFIER or table.is_declared(token.text):
            continue
        undeclared.append(token.text)
        diagnostics.append(
            make_diagnostic(
                EXPRESSION_UNDECLARED_VARIABLE,
                token.range,
                message=f"Variable {token.text} was not declared.",
            )
        )
        if mode == ExpressionCheckMode.FIRST_UNDECLARED:
            break
    return ExpressionResult(undeclared=tuple(undeclared), diagnostics=diagnostics)
