"""User-facing message text for declaration and expression results."""

from __future__ import annotations

from typing import Final

from radixcheck.checker import DeclarationOutcome
from radixcheck.diagnostics import DECLARATION_GRAMMAR_MISMATCH, DECLARATION_INVALID_VALUE, Diagnostic
from radixcheck.pipeline import DeclarationRunResult, ExpressionRunResult

EXPRESSION_PROMPT: Final[str] = "Enter an expression to analyze:"
VALID_EXPRESSION: Final[str] = "Valid expression."


def declarations_prompt(sentinel: str) -> str:
    return f"Enter variable declarations (example: bin var1 1010;), finish with '{sentinel}'"


def declaration_messages(result: DeclarationRunResult) -> list[str]:
    declaration = result.declaration
    match declaration.outcome:
        case DeclarationOutcome.ACCEPTED:
            return [f"Variable {declaration.name} declared successfully."]
        case DeclarationOutcome.REJECTED_GRAMMAR:
            return [DECLARATION_GRAMMAR_MISMATCH.message]
        case _:
            lines = [
                f"Error: {d.message[0].lower()}{d.message[1:]}"
                for d in declaration.diagnostics
                if d.code == DECLARATION_INVALID_VALUE.code
            ]
            lines.append(f"Error: variable {declaration.name} was already declared or has an invalid value.")
            return lines


def expression_messages(result: ExpressionRunResult) -> list[str]:
    if result.valid:
        return [VALID_EXPRESSION]
    return [f"Error: variable {name} was not declared." for name in result.expression.undeclared]


def diagnostic_message(diagnostic: Diagnostic) -> str:
    return f"Error: {diagnostic.message}" if diagnostic.severity == "error" else diagnostic.message
