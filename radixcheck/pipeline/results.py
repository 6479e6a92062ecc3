"""Run result carriers for the pipeline entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from radixcheck.checker import DeclarationResult, ExpressionResult
from radixcheck.diagnostics import Diagnostic
from radixcheck.pipeline.result import LexResult


@dataclass(frozen=True, slots=True)
class DeclarationRunResult:
    """Result of lexing and validating one declaration line."""

    lex: LexResult
    declaration: DeclarationResult
    diagnostics: list[Diagnostic]

    @property
    def accepted(self) -> bool:
        return self.declaration.accepted


@dataclass(frozen=True, slots=True)
class ExpressionRunResult:
    """Result of lexing and checking the expression line."""

    lex: LexResult
    expression: ExpressionResult
    diagnostics: list[Diagnostic]

    @property
    def valid(self) -> bool:
        return self.expression.valid
