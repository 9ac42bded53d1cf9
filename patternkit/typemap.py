"""A map from key types to optional values of associated value types."""

from __future__ import annotations

from typing import Any

from patternkit.typelist import NPOS, TypeList


class ValueMissingError(LookupError):
    """The key is known but holds no value."""


class TypeMap:
    """Storage with one optional slot per declared key.

    Built from alternating key and value-type arguments:
    ``TypeMap(int, int, str, bytes)`` declares keys ``int`` and ``str``.
    """

    def __init__(self, *pairs: Any) -> None:
        if len(pairs) % 2:
            raise TypeError(
                "TypeMap requires even number of template parameters (key-value pairs)"
            )
        self._keys = TypeList(*pairs[0::2])
        self._value_types = TypeList(*pairs[1::2])
        self._storage: dict[int, Any] = {}

    def _slot(self, key: Any) -> int:
        index = self._keys.index_of(key)
        if index == NPOS:
            raise KeyError("Key not found in TypeMap")
        return index

    def add_value(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, converting it to the value type if needed."""
        index = self._slot(key)
        value_type = self._value_types.get(index)
        if isinstance(value_type, type) and not isinstance(value, value_type):
            value = value_type(value)
        self._storage[index] = value

    def get_value(self, key: Any) -> Any:
        """Return the value stored under ``key``."""
        index = self._slot(key)
        try:
            return self._storage[index]
        except KeyError:
            raise ValueMissingError("Value not present") from None

    def contains(self, key: Any) -> bool:
        """Return whether a value is stored under ``key``."""
        return self._slot(key) in self._storage

    def remove_value(self, key: Any) -> None:
        """Clear the value stored under ``key``, if any."""
        self._storage.pop(self._slot(key), None)