#!/usr/bin/env python
import argparse
from pathlib import Path

from radixcheck.lexer import Lexer, Token


def format_token(idx: int, token: Token) -> str:
    return f"[{idx}] kind={token.kind.name} text={token.text!r} range={token.range.as_tuple()}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the tokens of every line of a session file")
    parser.add_argument("input", type=Path, help="Session file to lex line by line")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("out/tokens.txt"),
        help="Where to write the token listing (default: out/tokens.txt)",
    )
    args = parser.parse_args()

    input_path: Path = args.input
    output_path: Path = args.output

    lines = input_path.read_text(encoding="utf-8").splitlines()

    output_path.parent.mkdir(parents=True, exist_ok=True)

    total = 0
    with output_path.open("w", encoding="utf-8") as f:
        for line_no, line in enumerate(lines, start=1):
            lexer = Lexer(line)
            tokens = lexer.lex()
            total += len(tokens)
            f.write(f"# line {line_no}: {line!r}\n")
            for idx, token in enumerate(tokens):
                f.write(format_token(idx, token) + "\n")
            for diagnostic in lexer.diagnostics:
                f.write(f"! {diagnostic.code} range={diagnostic.range.as_tuple()} {diagnostic.message}\n")

    print(f"Wrote {total} tokens from {len(lines)} lines to {output_path}")


if __name__ == "__main__":
    main()
