"""An integer set that switches storage strategy as it grows and shrinks."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Union

SWITCH_THRESHOLD = 10
"""Largest size kept in the array backend; larger sets use the hash backend."""


class ArrayBackend:
    """Stores elements in a list, in insertion order; suited to small sets."""

    name = "array"

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._data: list[int] = []
        for element in elements:
            self.add(element)

    def add(self, element: int) -> bool:
        """Add ``element``; return False if it was already present."""
        if element in self._data:
            return False
        self._data.append(element)
        return True

    def remove(self, element: int) -> bool:
        """Remove ``element``; return False if it was not present."""
        if element not in self._data:
            return False
        self._data = [item for item in self._data if item != element]
        return True

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._data))


class HashBackend:
    """Stores elements in a hash set; suited to large sets."""

    name = "hash"

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._data: set[int] = set()
        for element in elements:
            self.add(element)

    def add(self, element: int) -> bool:
        """Add ``element``; return False if it was already present."""
        if element in self._data:
            return False
        self._data.add(element)
        return True

    def remove(self, element: int) -> bool:
        """Remove ``element``; return False if it was not present."""
        if element not in self._data:
            return False
        self._data.discard(element)
        return True

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._data))


_Backend = Union[ArrayBackend, HashBackend]


class AdaptiveSet:
    """A set of integers backed by a list when small and a hash set when large.

    The backend is re-chosen around every change by looking at the size the
    set would have after it, so the switch points follow the size
    immediately before and after each operation.
    """

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._backend: _Backend = ArrayBackend()
        for element in elements:
            self.add(element)

    def __contains__(self, element: object) -> bool:
        return element in self._backend

    def __len__(self) -> int:
        return len(self._backend)

    def __iter__(self) -> Iterator[int]:
        return iter(self._backend)

    def __repr__(self) -> str:
        return f"AdaptiveSet({list(self._backend)!r})"

    def add(self, element: int) -> None:
        """Add ``element``; adding one that is present changes nothing."""
        self._migrate_for(len(self) + 1)
        self._backend.add(element)
        self._migrate_for(len(self) - 1)

    def remove(self, element: int) -> bool:
        """Remove ``element``; return whether it was present."""
        removed = self._backend.remove(element)
        self._migrate_for(len(self) - 1)
        return removed

    def backend_name(self) -> str:
        """Return ``"array"`` or ``"hash"`` for the backend in use."""
        return self._backend.name

    def union(self, other: AdaptiveSet) -> AdaptiveSet:
        """Return a new set with the elements of both sets."""
        result = AdaptiveSet()
        for element in self:
            result.add(element)
        for element in other:
            result.add(element)
        return result

    def intersection(self, other: AdaptiveSet) -> AdaptiveSet:
        """Return a new set with the elements present in both sets."""
        result = AdaptiveSet()
        for element in self:
            if element in other:
                result.add(element)
        return result

    def _migrate_for(self, new_size: int) -> None:
        large = new_size > SWITCH_THRESHOLD
        if isinstance(self._backend, ArrayBackend) and large:
            self._backend = HashBackend(self._backend)
        elif isinstance(self._backend, HashBackend) and not large:
            self._backend = ArrayBackend(self._backend)


def main(argv: list[str] | None = None) -> int:
    """Grow a set past the switch point and print union and intersection sizes."""
    out = sys.stdout
    numbers = AdaptiveSet()
    for i in range(1, 16):
        numbers.add(i)
        label = "array" if i <= SWITCH_THRESHOLD else "hash"
        out.write(f"Added {i}, size: {len(numbers)}, using {label}\n")

    others = AdaptiveSet()
    for value in (10, 15, 20):
        others.add(value)

    out.write(f"Union size: {len(numbers.union(others))}\n")
    out.write(f"Intersection size: {len(numbers.intersection(others))}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())