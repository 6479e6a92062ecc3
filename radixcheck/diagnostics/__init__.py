"""Diagnostics."""

from radixcheck.diagnostics.codes import (
    DECLARATION_DUPLICATE,
    DECLARATION_GRAMMAR_MISMATCH,
    DECLARATION_INVALID_VALUE,
    EXPRESSION_UNDECLARED_VARIABLE,
    LEXER_INVALID_CHARACTER,
    SESSION_MISSING_EXPRESSION,
    DiagnosticSpec,
)
from radixcheck.diagnostics.diagnostic import Diagnostic, Severity
from radixcheck.diagnostics.report import collect_diagnostics, has_errors, make_diagnostic

__all__ = [
    "DECLARATION_DUPLICATE",
    "DECLARATION_GRAMMAR_MISMATCH",
    "DECLARATION_INVALID_VALUE",
    "EXPRESSION_UNDECLARED_VARIABLE",
    "LEXER_INVALID_CHARACTER",
    "SESSION_MISSING_EXPRESSION",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "make_diagnostic",
]
