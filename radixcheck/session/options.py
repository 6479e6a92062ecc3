"""Session modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from radixcheck.checker import ExpressionCheckMode

DEFAULT_SENTINEL = "END"


class SessionMode(StrEnum):
    """Top-level session behavior profile."""

    INTERACTIVE = "interactive"
    BATCH = "batch"


@dataclass(frozen=True, slots=True)
class SessionOptions:
    """Sentinel line, expression check mode and whether prompts are emitted."""

    sentinel: str = DEFAULT_SENTINEL
    expression_mode: ExpressionCheckMode = ExpressionCheckMode.FIRST_UNDECLARED
    prompts: bool = True

    def __post_init__(self) -> None:
        if not self.sentinel:
            raise ValueError("Session sentinel cannot be empty")

    @staticmethod
    def for_mode(mode: SessionMode, *, sentinel: str = DEFAULT_SENTINEL) -> "SessionOptions":
        if mode == SessionMode.BATCH:
            return SessionOptions(sentinel=sentinel, prompts=False)

        return SessionOptions(sentinel=sentinel, prompts=True)
