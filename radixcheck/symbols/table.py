"""Symbol table for one session."""

from __future__ import annotations

from collections.abc import Iterator

from radixcheck.symbols.base import Base


class SymbolTable:
    """Declared variable names (case-sensitive) and the base each was declared in.

    A name is declared at most once. Entries are never removed or rebound.
    """

    def __init__(self) -> None:
        self._bases: dict[str, Base] = {}

    def is_declared(self, name: str) -> bool:
        return name in self._bases

    def base_of(self, name: str) -> Base | None:
        return self._bases.get(name)

    def declare(self, name: str, base: Base) -> None:
        if name in self._bases:
            raise ValueError(f"Variable {name!r} is already declared")
        self._bases[name] = base

    def names(self) -> tuple[str, ...]:
        return tuple(self._bases)

    def items(self) -> tuple[tuple[str, Base], ...]:
        return tuple(self._bases.items())

    def __contains__(self, name: object) -> bool:
        return name in self._bases

    def __len__(self) -> int:
        return len(self._bases)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bases)

    def __repr__(self) -> str:
        entries = ", ".join(f"{name}={base.value}" for name, base in self._bases.items())
        return f"SymbolTable({entries})"
