#!/usr/bin/env python3
"""Per-line throughput of lexing and validating generated declaration lines."""

from __future__ import annotations

import argparse
from collections import Counter
import random
import time

from tqdm import tqdm

from radixcheck.checker import DeclarationOutcome, validate_declaration
from radixcheck.lexer import tokenize
from radixcheck.symbols import Base, SymbolTable

_DIGITS = {Base.BIN: "01", Base.OCT: "01234567", Base.HEX: "0123456789abcdefABCDEF"}


def generate_declarations(count: int, *, seed: int = 0, duplicate_rate: float = 0.1) -> list[str]:
    """Build `count` declaration lines, mostly valid, some redeclaring an earlier name.

    Hex values always start with a digit so they lex as literals, not identifiers.
    """
    rng = random.Random(seed)
    lines: list[str] = []
    names: list[str] = []
    for index in range(count):
        base = rng.choice(list(Base))
        if names and rng.random() < duplicate_rate:
            name = rng.choice(names)
        else:
            name = f"v{index}"
            names.append(name)
        value = rng.choice("01") + "".join(rng.choice(_DIGITS[base]) for _ in range(rng.randint(0, 15)))
        keyword = base.value.upper() if rng.random() < 0.5 else base.value
        lines.append(f"{keyword} {name} {value};")
    return lines


def time_declarations(lines: list[str], *, show_progress: bool = False) -> tuple[float, Counter[DeclarationOutcome]]:
    """Lex and validate every line into one fresh table; return elapsed seconds and outcome counts."""
    table = SymbolTable()
    outcomes: Counter[DeclarationOutcome] = Counter()
    iterator = tqdm(lines, desc="declarations", unit="line") if show_progress else lines
    start = time.perf_counter()
    for line in iterator:
        outcomes[validate_declaration(tokenize(line), table).outcome] += 1
    return time.perf_counter() - start, outcomes


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark tokenize + validate_declaration per line")
    parser.add_argument("--lines", type=int, default=100_000, help="Generated declaration lines")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for line generation")
    parser.add_argument(
        "--duplicate-rate",
        type=float,
        default=0.1,
        help="Share of lines that redeclare an earlier name (default: 0.1)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    args = parser.parse_args()

    if args.lines <= 0:
        raise SystemExit(f"Invalid --lines: {args.lines}")

    lines = generate_declarations(args.lines, seed=args.seed, duplicate_rate=args.duplicate_rate)
    duration, outcomes = time_declarations(lines, show_progress=not args.no_progress)

    print(f"Lines: {len(lines)}")
    for outcome in DeclarationOutcome:
        print(f"  {outcome.value}: {outcomes[outcome]}")
    print(f"Elapsed: {duration:.4f}s")
    print(f"Lines/s: {len(lines) / duration:.1f}")
    print(f"us/line: {duration / len(lines) * 1e6:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
