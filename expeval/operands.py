"""The operand chain that collects values and operators and reduces them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from expeval.context import MAX_PRIORITY
from expeval.errors import ExpevalError, ResultCode

BinaryOperation = Callable[[float, float], float]


@dataclass
class Operand:
    """A value with the operator that joins it to the following value."""

    value: float
    operation: BinaryOperation | None = None
    priority: int = 0


@dataclass
class OperandChain:
    """Values and operators of one bracket level, in reading order.

    Operators with priority at or above MAX_PRIORITY are applied as soon as
    their right operand is pushed; the rest are applied by ``result`` from
    the highest priority to the lowest, left to right within a priority.
    """

    _operands: list[Operand] = field(default_factory=list)
    _levels: set[int] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self._operands)

    def push(self, value: float) -> None:
        """Append a value to the chain, applying a pending immediate operator."""
        value = float(value)
        if self._operands:
            last = self._operands[-1]
            if last.operation is None:
                raise ExpevalError(ResultCode.INTERNAL_ERROR, 0)
            if last.priority >= MAX_PRIORITY:
                last.value = float(last.operation(last.value, value))
                last.operation = None
                last.priority = 0
                return
        self._operands.append(Operand(value))

    def attach_operator(self, operation: BinaryOperation, priority: int) -> None:
        """Join the last value to the next one with ``operation``."""
        if not self._operands:
            raise ExpevalError(ResultCode.INTERNAL_ERROR, 0)
        last = self._operands[-1]
        last.operation = operation
        last.priority = priority
        level = min(priority, MAX_PRIORITY)
        if level < MAX_PRIORITY:
            self._levels.add(level)

    def result(self) -> float:
        """Reduce the chain to one value; an empty chain gives 0.0."""
        if not self._operands:
            return 0.0
        if not self._levels:
            return self._operands[0].value

        nodes = [replace(operand) for operand in self._operands]
        for level in sorted(self._levels, reverse=True):
            survivors: list[Operand] = []
            for node, following in zip(nodes, [*nodes[1:], None]):
                if following is not None and node.priority == level:
                    if node.operation is None:
                        raise ExpevalError(ResultCode.INTERNAL_ERROR, 0)
                    following.value = float(node.operation(node.value, following.value))
                else:
                    survivors.append(node)
            nodes = survivors
        return nodes[-1].value