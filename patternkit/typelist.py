"""An immutable ordered list of types with lookup helpers."""

from __future__ import annotations

from typing import Any, Iterator

NPOS = 2**64 - 1
"""Index reported for an item that is not in the list."""


class TypeList:
    """Immutable sequence of types; modifying operations return new lists."""

    __slots__ = ("_items",)

    def __init__(self, *items: Any) -> None:
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        names = ", ".join(getattr(item, "__name__", repr(item)) for item in self._items)
        return f"TypeList({names})"

    def get(self, index: int) -> Any:
        """Return the item at ``index``; only non-negative indexes are allowed."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for TypeList of size {len(self._items)}")
        return self._items[index]

    def contains(self, item: object) -> bool:
        """Return whether ``item`` is in the list."""
        return item in self._items

    def index_of(self, item: object) -> int:
        """Return the first position of ``item``, or :data:`NPOS` if absent."""
        try:
            return self._items.index(item)
        except ValueError:
            return NPOS

    def append(self, item: Any) -> TypeList:
        """Return a new list with ``item`` added at the end."""
        return TypeList(*self._items, item)

    def prepend(self, item: Any) -> TypeList:
        """Return a new list with ``item`` added at the front."""
        return TypeList(item, *self._items)