"""Result codes and the exception raised when an expression cannot be evaluated."""

from __future__ import annotations

from enum import IntEnum


class ResultCode(IntEnum):
    """Outcome of an evaluation; every non-OK code is reported by ExpevalError."""

    UNKNOWN = -1
    OK = 0
    INVALID_CHAR = 1
    NUMBER_TOO_BIG = 2
    INVALID_NUMBER = 3
    MEMORY_ALLOCATION_IMPOSSIBLE = 4
    EXPECTED_OPENING_BRACKET = 5
    UNEXPECTED_CLOSING_BRACKET = 6
    BRACKET_NOT_CLOSED = 7
    HANGING_OPERATOR = 8
    VALUE_EXPECTED = 9
    OPERATOR_EXPECTED = 10
    INTERNAL_ERROR = 11
    IDENTIFIER_NOT_FOUND = 12
    IDENTIFIER_TOO_LONG = 13

    @classmethod
    def _missing_(cls, value: object) -> ResultCode:
        return cls.UNKNOWN


class ExpevalError(ValueError):
    """An expression could not be evaluated.

    ``code`` tells what went wrong and ``position`` is the index in the
    expression where the problem was found.
    """

    def __init__(self, code: ResultCode | int, position: int) -> None:
        self.code = ResultCode(code)
        self.position = position
        super().__init__(f"{self.code.name} at position {position}")