"""A bounded table of identifier names in order of first appearance."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 100


class SymbolTable:
    """Stores distinct names up to a fixed capacity; extra names are ignored."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._names: list[str] = []

    def clear(self) -> None:
        """Remove every entry."""
        self._names.clear()

    def find(self, name: str) -> int | None:
        """Return the position of ``name``, or None if absent."""
        try:
            return self._names.index(name)
        except ValueError:
            return None

    def insert(self, name: str) -> int | None:
        """Add ``name`` if new and there is room; return its position.

        Returns None when the name is absent and the table is full.
        """
        position = self.find(name)
        if position is None and len(self._names) < self.capacity:
            self._names.append(name)
            return len(self._names) - 1
        return position

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def format(self) -> str:
        """Render the table as a numbered listing."""
        lines = "".join(f"{i}: {name}\n" for i, name in enumerate(self._names))
        return "\nTabela de Símbolos:\n" + lines