"""Console front end: feed stdin (or a file) through a session and print its messages."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from pathlib import Path
import sys
from typing import TextIO

from radixcheck.checker import ExpressionCheckMode
from radixcheck.lexer import Lexer, dump_tokens
from radixcheck.session import DEFAULT_SENTINEL, SessionMode, SessionOptions, run_session


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines lazily with their line terminator removed."""
    for line in stream:
        yield line.rstrip("\r\n")


def _dumping(lines: Iterable[str], sentinel: str) -> Iterator[str]:
    # Only the first sentinel ends the declarations; later lines are always dumped.
    seen_sentinel = False
    for line in lines:
        if line == sentinel and not seen_sentinel:
            seen_sentinel = True
        else:
            lexer = Lexer(line)
            dump_tokens(lexer.lex(), lexer.diagnostics)
        yield line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixcheck",
        description="Declare bin/oct/hex variables, then check an expression only uses declared ones",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="Session file (declarations, sentinel line, expression). Reads stdin when omitted",
    )
    parser.add_argument(
        "--sentinel",
        type=str,
        default=DEFAULT_SENTINEL,
        help=f"Line that ends the declarations (default: {DEFAULT_SENTINEL})",
    )
    parser.add_argument(
        "--report-all",
        action="store_true",
        help="Report every undeclared variable instead of stopping at the first one",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print input prompts",
    )
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print the tokens of every line before it is checked",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.sentinel:
        raise SystemExit("Invalid --sentinel: cannot be empty")

    interactive = args.input is None and sys.stdin.isatty() and not args.quiet
    options = replace(
        SessionOptions.for_mode(
            SessionMode.INTERACTIVE if interactive else SessionMode.BATCH,
            sentinel=args.sentinel,
        ),
        expression_mode=ExpressionCheckMode.ALL_UNDECLARED if args.report_all else ExpressionCheckMode.FIRST_UNDECLARED,
    )

    def _run(stream: TextIO) -> bool:
        lines: Iterable[str] = read_lines(stream)
        if args.dump_tokens:
            lines = _dumping(lines, options.sentinel)
        return run_session(lines, sink=print, options=options).valid

    if args.input is None:
        valid = _run(sys.stdin)
    else:
        input_path: Path = args.input
        if not input_path.is_file():
            raise SystemExit(f"Invalid input file: {input_path}")
        try:
            with input_path.open(encoding="utf-8") as stream:
                valid = _run(stream)
        except UnicodeDecodeError as exc:
            raise SystemExit(f"Invalid input file: {input_path} is not UTF-8 ({exc.reason})") from exc

    return 0 if valid else 1
