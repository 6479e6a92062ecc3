"""Symbol table and numeral bases."""

from radixcheck.symbols.base import Base
from radixcheck.symbols.table import SymbolTable

__all__ = [
    "Base",
    "SymbolTable",
]
