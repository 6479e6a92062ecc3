"""Expression check modes."""

from enum import StrEnum


class ExpressionCheckMode(StrEnum):
    """How far the expression check scans after an undeclared identifier."""

    FIRST_UNDECLARED = "first"
    ALL_UNDECLARED = "all"
