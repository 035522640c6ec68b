"""Evaluating arithmetic expressions against an optional context."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from expeval.context import (
    HIGH_PRIORITY_DEFAULT,
    LOW_PRIORITY_DEFAULT,
    Constant,
    Context,
    Function,
    Operator,
    add,
    divide,
    multiply,
    subtract,
)
from expeval.errors import ExpevalError, ResultCode
from expeval.numbers import DIGITS, NAME_CHARS, OPERATOR_CHARS, SPACE_CHARS, parse_number
from expeval.operands import OperandChain

# Longest identifier or operator symbol accepted.
_MAX_TOKEN = 63

_BUILTIN_OPERATORS = {
    "+": (add, LOW_PRIORITY_DEFAULT),
    "-": (subtract, LOW_PRIORITY_DEFAULT),
    "/": (divide, HIGH_PRIORITY_DEFAULT),
    "*": (multiply, HIGH_PRIORITY_DEFAULT),
}

_SYMBOL_BREAK = OPERATOR_CHARS | NAME_CHARS | DIGITS | SPACE_CHARS | {"(", ")", "."}


class _Element(Enum):
    NONE = auto()
    OPERAND = auto()
    OPERATOR = auto()


def _push(chain: OperandChain, value: float, position: int) -> None:
    try:
        chain.push(value)
    except ExpevalError as exc:
        raise ExpevalError(exc.code, position) from None


def _attach(chain: OperandChain, operation, priority: int, position: int) -> None:
    try:
        chain.attach_operator(operation, priority)
    except ExpevalError as exc:
        raise ExpevalError(exc.code, position) from None


class _Parser:
    """Reads one expression, a bracket level at a time."""

    def __init__(self, text: str, context: Context | None) -> None:
        self.text = text
        self.pos = 0
        self.context = context

    def parse_level(self, depth: int) -> float:
        text = self.text
        start = self.pos
        chain = OperandChain()
        last = _Element.NONE
        last_operator_pos = 0
        negate = False
        pending_func: Function | None = None
        closed = False

        while self.pos < len(text):
            at = self.pos
            c = text[at]
            self.pos += 1

            if c in SPACE_CHARS:
                continue

            if c in DIGITS or c == ".":
                if last not in (_Element.OPERATOR, _Element.NONE):
                    raise ExpevalError(ResultCode.OPERATOR_EXPECTED, at)
                value, self.pos = parse_number(text, at)
                if negate:
                    value, negate = -value, False
                _push(chain, value, at)
                last = _Element.OPERAND
                continue

            if c in OPERATOR_CHARS:
                if last is not _Element.OPERAND:
                    if c == "-" and not negate:
                        negate = True
                        continue
                    raise ExpevalError(ResultCode.VALUE_EXPECTED, at)
                operation, priority = _BUILTIN_OPERATORS[c]
                _attach(chain, operation, priority, at)
                last = _Element.OPERATOR
                last_operator_pos = at
                continue

            if c == "(":
                if last not in (_Element.OPERATOR, _Element.NONE) and pending_func is None:
                    raise ExpevalError(ResultCode.OPERATOR_EXPECTED, at)
                value = self.parse_level(depth + 1)
                if pending_func is not None:
                    value = float(pending_func.func(value))
                    pending_func = None
                if negate:
                    value, negate = -value, False
                _push(chain, value, at)
                last = _Element.OPERAND
                continue

            if c == ")":
                if depth == 0:
                    raise ExpevalError(ResultCode.UNEXPECTED_CLOSING_BRACKET, at)
                closed = True
                break

            if c in NAME_CHARS:
                if last not in (_Element.OPERATOR, _Element.NONE):
                    raise ExpevalError(ResultCode.OPERATOR_EXPECTED, at)
                name, is_func = self._read_name(at)
                if is_func:
                    function = self.context.resolve_function(name) if self.context else None
                    if function is None:
                        raise ExpevalError(ResultCode.IDENTIFIER_NOT_FOUND, at)
                    pending_func = function
                else:
                    constant = self.context.resolve_constant(name) if self.context else None
                    if constant is None:
                        raise ExpevalError(ResultCode.IDENTIFIER_NOT_FOUND, at)
                    value = float(constant.value)
                    if negate:
                        value, negate = -value, False
                    _push(chain, value, at)
                last = _Element.OPERAND
                continue

            symbol = self._read_symbol(at)
            operator = self.context.resolve_operator(symbol) if self.context else None
            if operator is None:
                raise ExpevalError(ResultCode.INVALID_CHAR, at)
            if last is not _Element.OPERAND:
                raise ExpevalError(ResultCode.VALUE_EXPECTED, at)
            _attach(chain, operator.func, operator.priority, at)
            last = _Element.OPERATOR
            last_operator_pos = at

        if depth > 0 and not closed:
            raise ExpevalError(ResultCode.BRACKET_NOT_CLOSED, start - 1)
        if last is _Element.OPERATOR:
            raise ExpevalError(ResultCode.HANGING_OPERATOR, last_operator_pos)
        return chain.result()

    def _read_name(self, at: int) -> tuple[str, bool]:
        """Read an identifier; the flag tells whether a '(' follows at once."""
        text = self.text
        chars = [text[at]]
        while self.pos < len(text):
            c = text[self.pos]
            if c == "(":
                return "".join(chars), True
            if c not in NAME_CHARS and c not in DIGITS:
                break
            if len(chars) >= _MAX_TOKEN:
                raise ExpevalError(ResultCode.IDENTIFIER_TOO_LONG, at)
            chars.append(c)
            self.pos += 1
        return "".join(chars), False

    def _read_symbol(self, at: int) -> str:
        """Read a run of characters that may name a custom operator."""
        text = self.text
        chars = [text[at]]
        while self.pos < len(text):
            if len(chars) >= _MAX_TOKEN:
                raise ExpevalError(ResultCode.INVALID_CHAR, at)
            c = text[self.pos]
            if c in _SYMBOL_BREAK:
                break
            chars.append(c)
            self.pos += 1
        return "".join(chars)


def evaluate(expression: str, context: Context | None = None) -> float:
    """Evaluate ``expression`` and return its value.

    Names and custom operators are looked up in ``context``. Raises
    ExpevalError with the code and position of the first problem found.
    """
    text = expression.split("\0", 1)[0]
    return _Parser(text, context).parse_level(0)


def evaluate_with(
    expression: str,
    constants: Iterable[Constant] | None = None,
    functions: Iterable[Function] | None = None,
    operators: Iterable[Operator] | None = None,
) -> float:
    """Evaluate ``expression`` with the given constants, functions and operators."""
    context = Context(
        constants=tuple(constants or ()),
        functions=tuple(functions or ()),
        operators=tuple(operators or ()),
    )
    return evaluate(expression, context)