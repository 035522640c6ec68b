"""Named constants, functions and operators available to an expression."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

MIN_PRIORITY = 0
MAX_PRIORITY = 9
LOW_PRIORITY_DEFAULT = 3
HIGH_PRIORITY_DEFAULT = 6


@dataclass(frozen=True)
class Constant:
    """A named numeric value."""

    name: str
    value: float


@dataclass(frozen=True)
class Function:
    """A named function of one argument, called as ``name(expr)``."""

    name: str
    func: Callable[[float], float]


@dataclass(frozen=True)
class Operator:
    """A binary operator written with ``symbol``.

    Higher priorities bind tighter. Priorities at or above MAX_PRIORITY are
    applied immediately, left to right, as soon as the right operand is read.
    """

    symbol: str
    priority: int
    func: Callable[[float, float], float]

    def __post_init__(self) -> None:
        if not 0 <= self.priority <= 255:
            raise ValueError(f"operator priority out of range: {self.priority}")


@dataclass(frozen=True)
class Context:
    """The constants, functions and operators an expression may refer to."""

    constants: tuple[Constant, ...] = field(default=())
    functions: tuple[Function, ...] = field(default=())
    operators: tuple[Operator, ...] = field(default=())

    def __post_init__(self) -> None:
        for name in ("constants", "functions", "operators"):
            items: Iterable = getattr(self, name) or ()
            object.__setattr__(self, name, tuple(items))

    def resolve_function(self, name: str) -> Function | None:
        """Return the first function called ``name``, or None."""
        return next((f for f in self.functions if f.name == name), None)

    def resolve_constant(self, name: str) -> Constant | None:
        """Return the first constant called ``name``, or None."""
        return next((c for c in self.constants if c.name == name), None)

    def resolve_operator(self, symbol: str) -> Operator | None:
        """Return the first operator written ``symbol``, or None."""
        return next((o for o in self.operators if o.symbol == symbol), None)


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero gives an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)