"""Symbol table for declared variables, constants and functions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

MAX_SYMBOLS = 100
NAME_LIMIT = 49
TYPE_LIMIT = 19


class SymbolError(Exception):
    """Raised when a symbol cannot be added to the table."""


@dataclass(frozen=True)
class Symbol:
    """One entry of the symbol table."""

    name: str
    type_name: str
    is_const: bool
    line: int


class SymbolTable:
    """An ordered, bounded table of declared symbols."""

    def __init__(self, capacity: int = MAX_SYMBOLS) -> None:
        self.capacity = capacity
        self._symbols: list[Symbol] = []

    def _find(self, name: str) -> Symbol | None:
        return next((sym for sym in self._symbols if sym.name == name), None)

    def add(self, name: str, type_name: str, is_const: bool, line: int) -> Symbol:
        """Declare a symbol; raise SymbolError if the table is full or the name is taken."""
        if len(self._symbols) >= self.capacity:
            raise SymbolError("Table des symboles pleine")
        if self.exists(name):
            raise SymbolError(f"Symbole '{name}' déjà déclaré")
        symbol = Symbol(
            name=name[:NAME_LIMIT],
            type_name=type_name[:TYPE_LIMIT],
            is_const=bool(is_const),
            line=line,
        )
        self._symbols.append(symbol)
        return symbol

    def exists(self, name: str) -> bool:
        """Return True if a symbol with this name has been declared."""
        return self._find(name) is not None

    def type_of(self, name: str) -> str | None:
        """Return the declared type of a symbol, or None if it is unknown."""
        symbol = self._find(name)
        return symbol.type_name if symbol else None

    def is_const(self, name: str) -> bool:
        """Return True if the symbol is declared as a constant."""
        symbol = self._find(name)
        return symbol.is_const if symbol else False

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)