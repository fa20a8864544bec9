"""Interning of items as small integer symbols."""

from __future__ import annotations

from typing import Generic, Hashable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

Symbol = int


class SymbolsFactory:
    """Hands out consecutive symbols starting at zero."""

    def __init__(self) -> None:
        self._counter = 0

    def next(self) -> Symbol:
        symbol = self._counter
        self._counter += 1
        return symbol


class SymbolsMap(Generic[T]):
    """A two-way mapping between items and the symbols assigned to them."""

    def __init__(self, factory: SymbolsFactory) -> None:
        self._factory = factory
        self._items: dict[Symbol, T] = {}
        self._symbols: dict[T, Symbol] = {}

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, item: object) -> bool:
        return item in self._symbols

    def insert(self, item: T) -> Symbol:
        """Return the symbol of ``item``, assigning a fresh one if it has none."""
        existing = self._symbols.get(item)
        if existing is not None:
            return existing
        symbol = self._factory.next()
        self._items[symbol] = item
        self._symbols[item] = symbol
        return symbol

    def lookup(self, item: T) -> Optional[Symbol]:
        """Return the symbol of ``item``, or None if it was never inserted."""
        return self._symbols.get(item)

    def item(self, symbol: Symbol) -> Optional[T]:
        """Return the item behind ``symbol``, or None if it is unknown."""
        return self._items.get(symbol)