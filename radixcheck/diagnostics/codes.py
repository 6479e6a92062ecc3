"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_CHARACTER",
    message="Unrecognized character.",
    severity="error",
    category="lexer",
)

DECLARATION_GRAMMAR_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECLARATION_GRAMMAR_MISMATCH",
    message="Error in variable declaration.",
    hint="Declarations look like `bin var1 1010;` (base keyword, name, value, semicolon).",
    severity="error",
    category="declaration",
)

DECLARATION_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECLARATION_INVALID_VALUE",
    message="Value is not valid for the declared base.",
    hint="bin accepts 0-1, oct accepts 0-7, hex accepts 0-9 and A-F.",
    severity="error",
    category="declaration",
)

DECLARATION_DUPLICATE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECLARATION_DUPLICATE",
    message="Variable was already declared.",
    hint="Each variable can be declared only once per session.",
    severity="error",
    category="declaration",
)

EXPRESSION_UNDECLARED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPRESSION_UNDECLARED_VARIABLE",
    message="Variable was not declared.",
    severity="error",
    category="expression",
)

SESSION_MISSING_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SESSION_MISSING_EXPRESSION",
    message="Input ended before an expression was supplied.",
    hint="Finish the declarations with the sentinel line and then enter one expression.",
    severity="error",
    category="session",
)
