import io
from pathlib import Path
import sys

import pytest

from radixcheck.cli import main


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "session.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_reads_session_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bin a 10;\r\noct b 17;\r\nEND\r\na + b\r\n")

    exit_code = main([str(path)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Variable a declared successfully.",
        "Variable b declared successfully.",
        "Valid expression.",
    ]


def test_cli_exit_code_for_undeclared_variable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bin a 10;\nEND\na + c + d\n")

    exit_code = main([str(path)])

    assert exit_code == 1
    assert capsys.readouterr().out.splitlines()[-1] == "Error: variable c was not declared."


def test_cli_report_all(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "END\nc + d\n")

    main([str(path), "--report-all"])

    assert capsys.readouterr().out.splitlines() == [
        "Error: variable c was not declared.",
        "Error: variable d was not declared.",
    ]


def test_cli_reads_stdin_with_custom_sentinel(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("hex h 1f;\nDONE\nh\n"))

    exit_code = main(["--sentinel", "DONE"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Variable h declared successfully.",
        "Valid expression.",
    ]


def test_cli_dump_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bin a 101;\nEND\na\n")

    main([str(path), "--dump-tokens"])

    out = capsys.readouterr().out
    assert "BINARY_NUMBER" in out
    assert "text='101'" in out


def test_cli_missing_expression(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bin a 1;\n")

    assert main([str(path)]) == 1
    assert "Input ended before an expression was supplied." in capsys.readouterr().out


def test_cli_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Invalid input file"):
        main([str(tmp_path / "nope.txt")])


def test_cli_rejects_file_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "session.txt"
    path.write_bytes(b"bin a 1;\n\xff\xfe\nEND\na\n")

    with pytest.raises(SystemExit, match="not UTF-8"):
        main([str(path)])


def test_cli_dump_tokens_includes_expression_equal_to_sentinel(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _write(tmp_path, "bin a 1;\nEND\nEND\n")

    main([str(path), "--dump-tokens"])

    out = capsys.readouterr().out
    assert out.count("text='END'") == 1
    assert "Error: variable END was not declared." in out
