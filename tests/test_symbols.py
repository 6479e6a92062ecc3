import pytest

from radixcheck.lexer import TokenKind
from radixcheck.symbols import Base, SymbolTable


def test_new_table_is_empty() -> None:
    table = SymbolTable()

    assert len(table) == 0
    assert not table.is_declared("x")
    assert table.base_of("x") is None


def test_declare_records_base_and_keeps_declaration_order() -> None:
    table = SymbolTable()
    table.declare("b", Base.OCT)
    table.declare("a", Base.BIN)

    assert table.is_declared("a")
    assert "b" in table
    assert table.base_of("b") == Base.OCT
    assert table.names() == ("b", "a")
    assert list(table) == ["b", "a"]
    assert table.items() == (("b", Base.OCT), ("a", Base.BIN))


def test_names_are_case_sensitive() -> None:
    table = SymbolTable()
    table.declare("Value", Base.HEX)

    assert table.is_declared("Value")
    assert not table.is_declared("value")


def test_redeclaring_raises_and_keeps_original_base() -> None:
    table = SymbolTable()
    table.declare("x", Base.BIN)

    with pytest.raises(ValueError, match="already declared"):
        table.declare("x", Base.HEX)

    assert table.base_of("x") == Base.BIN
    assert len(table) == 1


def test_repr_lists_entries() -> None:
    table = SymbolTable()
    table.declare("x", Base.BIN)

    assert repr(table) == "SymbolTable(x=bin)"


@pytest.mark.parametrize(
    ("kind", "base"),
    [(TokenKind.BIN, Base.BIN), (TokenKind.OCT, Base.OCT), (TokenKind.HEX, Base.HEX)],
)
def test_base_from_keyword(kind: TokenKind, base: Base) -> None:
    assert Base.from_keyword(kind) is base


def test_base_from_non_keyword_raises() -> None:
    with pytest.raises(ValueError, match="Not a base keyword"):
        Base.from_keyword(TokenKind.IDENTIFIER)


@pytest.mark.parametrize(
    ("base", "literal", "expected"),
    [
        (Base.BIN, "1010", True),
        (Base.BIN, "102", False),
        (Base.OCT, "01234567", True),
        (Base.OCT, "8", False),
        (Base.HEX, "09afAF", True),
        (Base.HEX, "1G", False),
        (Base.HEX, "", False),
    ],
)
def test_base_accepts_only_its_digits(base: Base, literal: str, expected: bool) -> None:
    assert base.accepts(literal) is expected
