"""Declaration and expression checks against a symbol table."""

from radixcheck.checker.declaration import (
    MIN_DECLARATION_TOKENS,
    DeclarationOutcome,
    DeclarationResult,
    matches_declaration_grammar,
    validate_declaration,
)
from radixcheck.checker.expression import ExpressionResult, check_expression
from radixcheck.checker.options import ExpressionCheckMode

__all__ = [
    "MIN_DECLARATION_TOKENS",
    "DeclarationOutcome",
    "DeclarationResult",
    "ExpressionCheckMode",
    "ExpressionResult",
    "check_expression",
    "matches_declaration_grammar",
    "validate_declaration",
]
