"""Entrypoints that take one line of text and run it through lexing and a check."""

from __future__ import annotations

from radixcheck.checker import ExpressionCheckMode, check_expression, validate_declaration
from radixcheck.diagnostics import collect_diagnostics
from radixcheck.pipeline.result import LexResult, lex_result
from radixcheck.pipeline.results import DeclarationRunResult, ExpressionRunResult
from radixcheck.symbols import SymbolTable


def run_declaration(
    text: str,
    table: SymbolTable,
    *,
    lexed: LexResult | None = None,
) -> DeclarationRunResult:
    """Lex and validate one declaration line, recording it in `table` on success."""
    resolved_lex = _resolve_lex(text, lexed)
    declaration = validate_declaration(resolved_lex.tokens, table)
    return DeclarationRunResult(
        lex=resolved_lex,
        declaration=declaration,
        diagnostics=collect_diagnostics(resolved_lex.diagnostics, declaration.diagnostics),
    )


def run_expression(
    text: str,
    table: SymbolTable,
    *,
    mode: ExpressionCheckMode = ExpressionCheckMode.FIRST_UNDECLARED,
    lexed: LexResult | None = None,
) -> ExpressionRunResult:
    """Lex the expression line and check that every identifier in it is declared.

    Lexer diagnostics are carried along but do not make the expression invalid.
    """
    resolved_lex = _resolve_lex(text, lexed)
    expression = check_expression(resolved_lex.tokens, table, mode=mode)
    return ExpressionRunResult(
        lex=resolved_lex,
        expression=expression,
        diagnostics=collect_diagnostics(resolved_lex.diagnostics, expression.diagnostics),
    )


def _resolve_lex(text: str, lexed: LexResult | None) -> LexResult:
    if lexed is not None:
        if lexed.source_text != text:
            raise ValueError("Provided lex result must come from the same text")
        return lexed
    return lex_result(text)
