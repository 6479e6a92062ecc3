"""Line-level entrypoints and their result carriers."""

from radixcheck.pipeline.entrypoints import run_declaration, run_expression
from radixcheck.pipeline.result import LexResult, lex_result
from radixcheck.pipeline.results import DeclarationRunResult, ExpressionRunResult

__all__ = [
    "DeclarationRunResult",
    "ExpressionRunResult",
    "LexResult",
    "lex_result",
    "run_declaration",
    "run_expression",
]
