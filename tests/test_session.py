import pytest

from radixcheck.checker import ExpressionCheckMode
from radixcheck.session import (
    Session,
    SessionMode,
    SessionOptions,
    SessionState,
    run_session,
)
from radixcheck.symbols import Base

BATCH = SessionOptions(prompts=False)


def _run(lines: list[str], options: SessionOptions = BATCH) -> tuple[list[str], bool]:
    messages: list[str] = []
    result = run_session(lines, sink=messages.append, options=options)
    return messages, result.valid


def test_declarations_then_valid_expression() -> None:
    messages, valid = _run(["bin a 10;", "oct b 17;", "END", "a + b"])

    assert messages == [
        "Variable a declared successfully.",
        "Variable b declared successfully.",
        "Valid expression.",
    ]
    assert valid is True


def test_undeclared_variable_ends_the_session() -> None:
    messages, valid = _run(["bin a 10;", "oct b 17;", "END", "a + c"])

    assert messages[-1] == "Error: variable c was not declared."
    assert valid is False


def test_all_undeclared_mode_reports_each_name() -> None:
    options = SessionOptions(prompts=False, expression_mode=ExpressionCheckMode.ALL_UNDECLARED)

    messages, valid = _run(["END", "x - y"], options)

    assert messages == [
        "Error: variable x was not declared.",
        "Error: variable y was not declared.",
    ]
    assert valid is False


def test_rejected_declarations_print_their_errors_and_continue() -> None:
    messages, valid = _run(["bin x 1010;", "oct x 17;", "bin z 17;", "hex y 1Z;", "END", "x"])

    assert messages == [
        "Variable x declared successfully.",
        "Error: variable x was already declared or has an invalid value.",
        "Error: value '17' is not valid for type BIN.",
        "Error: variable z was already declared or has an invalid value.",
        "Error in variable declaration.",
        "Valid expression.",
    ]
    assert valid is True


def test_prompts_are_emitted_in_interactive_mode() -> None:
    options = SessionOptions.for_mode(SessionMode.INTERACTIVE)

    messages, _ = _run(["END", ""], options)

    assert messages == [
        "Enter variable declarations (example: bin var1 1010;), finish with 'END'",
        "Enter an expression to analyze:",
        "Valid expression.",
    ]


def test_sentinel_must_match_exactly() -> None:
    messages, valid = _run(["end", "END ", "STOP", "a"], SessionOptions(sentinel="STOP", prompts=False))

    assert messages == [
        "Error in variable declaration.",
        "Error in variable declaration.",
        "Error: variable a was not declared.",
    ]
    assert valid is False


def test_lines_after_expression_are_not_consumed() -> None:
    lines = iter(["END", "", "bin late 1;"])

    run_session(lines, options=BATCH)

    assert next(lines) == "bin late 1;"


def test_missing_expression_is_reported() -> None:
    messages: list[str] = []

    result = run_session(["bin a 1;"], sink=messages.append, options=BATCH)

    assert messages[-1] == "Error: Input ended before an expression was supplied."
    assert result.valid is False
    assert result.expression is None
    assert [d.code for d in result.diagnostics] == ["SESSION_MISSING_EXPRESSION"]
    assert result.table.base_of("a") == Base.BIN


def test_session_state_machine() -> None:
    session = Session(options=BATCH)

    assert session.state == SessionState.AWAITING_DECLARATIONS
    session.feed("hex h 1f;")
    session.feed("END")
    assert session.state == SessionState.AWAITING_EXPRESSION
    session.feed("h / h")
    assert session.is_done

    with pytest.raises(ValueError, match="already done"):
        session.feed("h")

    result = session.finish()
    assert result.valid
    assert result.has_errors is False
    assert len(result.declarations) == 1


def test_session_result_collects_all_diagnostics() -> None:
    result = run_session(["bin q 2;", "END", "q"], options=BATCH)

    assert [d.code for d in result.diagnostics] == [
        "DECLARATION_INVALID_VALUE",
        "EXPRESSION_UNDECLARED_VARIABLE",
    ]
    assert result.has_errors is True


def test_empty_sentinel_is_rejected() -> None:
    with pytest.raises(ValueError, match="sentinel"):
        SessionOptions(sentinel="")


def test_batch_mode_disables_prompts() -> None:
    options = SessionOptions.for_mode(SessionMode.BATCH, sentinel="DONE")

    assert options.prompts is False
    assert options.sentinel == "DONE"
    assert options.expression_mode == ExpressionCheckMode.FIRST_UNDECLARED
