"""Sequential declare-then-check session over an injected line source and message sink."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from radixcheck.diagnostics import SESSION_MISSING_EXPRESSION, Diagnostic, has_errors, make_diagnostic
from radixcheck.pipeline import DeclarationRunResult, ExpressionRunResult, run_declaration, run_expression
from radixcheck.session.messages import (
    EXPRESSION_PROMPT,
    declaration_messages,
    declarations_prompt,
    diagnostic_message,
    expression_messages,
)
from radixcheck.session.options import SessionOptions
from radixcheck.symbols import SymbolTable
from radixcheck.text import ZERO, TextRange

MessageSink = Callable[[str], None]


def _discard(_message: str) -> None:
    return None


class SessionState(StrEnum):
    AWAITING_DECLARATIONS = "awaiting_declarations"
    AWAITING_EXPRESSION = "awaiting_expression"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class SessionResult:
    table: SymbolTable
    declarations: list[DeclarationRunResult]
    expression: ExpressionRunResult | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return self.expression is not None and self.expression.valid

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


class Session:
    """One run: declarations until the sentinel line, then exactly one expression.

    The session owns its symbol table. Every message is pushed to `sink` as
    soon as it is produced; nothing is printed directly.
    """

    def __init__(self, options: SessionOptions | None = None, sink: MessageSink | None = None) -> None:
        self._options = options if options is not None else SessionOptions()
        self._sink = sink if sink is not None else _discard
        self._table = SymbolTable()
        self._state = SessionState.AWAITING_DECLARATIONS
        self._declarations: list[DeclarationRunResult] = []
        self._expression: ExpressionRunResult | None = None
        self._diagnostics: list[Diagnostic] = []
        self._started = False

    @property
    def options(self) -> SessionOptions:
        return self._options

    @property
    def table(self) -> SymbolTable:
        return self._table

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state == SessionState.DONE

    def start(self) -> None:
        """Emit the opening prompt. Idempotent; `feed` calls it implicitly."""
        if self._started:
            return
        self._started = True
        if self._options.prompts:
            self._sink(declarations_prompt(self._options.sentinel))

    def feed(self, line: str) -> None:
        self.start()
        match self._state:
            case SessionState.AWAITING_DECLARATIONS:
                if line == self._options.sentinel:
                    self._state = SessionState.AWAITING_EXPRESSION
                    if self._options.prompts:
                        self._sink(EXPRESSION_PROMPT)
                    return
                result = run_declaration(line, self._table)
                self._declarations.append(result)
                self._diagnostics.extend(result.diagnostics)
                self._emit(declaration_messages(result))
            case SessionState.AWAITING_EXPRESSION:
                result = run_expression(line, self._table, mode=self._options.expression_mode)
                self._expression = result
                self._diagnostics.extend(result.diagnostics)
                self._emit(expression_messages(result))
                self._state = SessionState.DONE
            case SessionState.DONE:
                raise ValueError("Session is already done; start a new session")

    def finish(self) -> SessionResult:
        """Close the session. Ending before the expression line is reported, not raised."""
        self.start()
        if self._state != SessionState.DONE:
            diagnostic = make_diagnostic(SESSION_MISSING_EXPRESSION, TextRange.empty(ZERO))
            self._diagnostics.append(diagnostic)
            self._emit([diagnostic_message(diagnostic)])
            self._state = SessionState.DONE
        return SessionResult(
            table=self._table,
            declarations=list(self._declarations),
            expression=self._expression,
            diagnostics=list(self._diagnostics),
        )

    def _emit(self, messages: Iterable[str]) -> None:
        for message in messages:
            self._sink(message)


def run_session(
    lines: Iterable[str],
    sink: MessageSink | None = None,
    options: SessionOptions | None = None,
) -> SessionResult:
    """Drive a session from `lines` until it is done or the lines run out.

    Lines after the expression line are not consumed.
    """
    session = Session(options=options, sink=sink)
    session.start()
    for line in lines:
        session.feed(line)
        if session.is_done:
            break
    return session.finish()
