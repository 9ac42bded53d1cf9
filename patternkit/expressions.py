"""Arithmetic expression trees with shared, interned leaf nodes."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Mapping

PRECREATED_MIN = -5
PRECREATED_MAX = 256


class Expression(ABC):
    """A node that evaluates to a number given variable values."""

    @abstractmethod
    def calculate(self, context: Mapping[str, float]) -> float:
        """Evaluate the expression with variables taken from ``context``."""


@dataclass(frozen=True, eq=False)
class Constant(Expression):
    """A fixed number; obtain instances from :class:`ExpressionFactory`."""

    value: float
    precreated: bool = False

    def calculate(self, context: Mapping[str, float]) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, eq=False)
class Variable(Expression):
    """A named value looked up in the context; obtain from the factory."""

    name: str

    def calculate(self, context: Mapping[str, float]) -> float:
        try:
            return context[self.name]
        except KeyError:
            raise KeyError(f"Variable not found: {self.name}") from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Addition(Expression):
    """The sum of two sub-expressions."""

    left: Expression
    right: Expression

    def calculate(self, context: Mapping[str, float]) -> float:
        return self.left.calculate(context) + self.right.calculate(context)

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


class ExpressionFactory:
    """Hands out shared constants and variables.

    Integral constants from -5 to 256 are created up front and live as long
    as the factory. Other constants and all variables are shared while some
    expression still refers to them and forgotten once nothing does.
    """

    _instance: ClassVar[ExpressionFactory | None] = None

    def __init__(self) -> None:
        self._precreated = {
            i: Constant(float(i), precreated=True)
            for i in range(PRECREATED_MIN, PRECREATED_MAX + 1)
        }
        self._constants: weakref.WeakValueDictionary = weakref.WeakValueDictionary()
        self._variables: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    @classmethod
    def instance(cls) -> ExpressionFactory:
        """Return the shared factory, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_constant(self, value: float) -> Constant:
        """Return the constant for ``value``, reusing an existing one if possible."""
        value = float(value)
        if value.is_integer() and PRECREATED_MIN <= value <= PRECREATED_MAX:
            return self._precreated[int(value)]
        constant = self._constants.get(value)
        if constant is None:
            constant = Constant(value)
            self._constants[value] = constant
        return constant

    def create_variable(self, name: str) -> Variable:
        """Return the variable called ``name``, reusing an existing one if possible."""
        variable = self._variables.get(name)
        if variable is None:
            variable = Variable(name)
            self._variables[name] = variable
        return variable