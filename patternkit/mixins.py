"""Mixins that derive comparisons from ``<`` and count live instances."""

from __future__ import annotations

from typing import Any


class LessThanComparable:
    """Derive ``>``, ``<=``, ``>=``, ``==`` and ``!=`` from ``__lt__``.

    Subclasses define only ``__lt__``; two objects are equal when neither
    is less than the other.
    """

    __slots__ = ()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return other < self

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not (other < self)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not (self < other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not (self < other) and not (other < self)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result


class Counted:
    """Keep a count of the live instances of each class that mixes this in.

    Every class that lists :class:`Counted` directly among its bases gets a
    counter of its own, shared with its subclasses. Copies count as new
    instances; an instance stops counting once it is destroyed.
    """

    _instances: int = 0

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if Counted in cls.__bases__:
            cls._counted_root = cls
            cls._instances = 0

    def __new__(cls, *args: Any, **kwargs: Any) -> Counted:
        instance = super().__new__(cls)
        cls._counted_root._instances += 1
        return instance

    def __del__(self) -> None:
        type(self)._counted_root._instances -= 1

    @classmethod
    def count(cls) -> int:
        """Return the number of live instances counted for this class."""
        return cls._counted_root._instances


Counted._counted_root = Counted


class Number(LessThanComparable, Counted):
    """An integer value that compares by value and is counted while alive."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: int) -> None:
        self.value = value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.value < other.value

    def __repr__(self) -> str:
        return f"Number({self.value!r})"