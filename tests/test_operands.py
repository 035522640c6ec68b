import math

import pytest

from expeval.context import (
    HIGH_PRIORITY_DEFAULT,
    LOW_PRIORITY_DEFAULT,
    MAX_PRIORITY,
    add,
    divide,
    multiply,
    subtract,
)
from expeval.errors import ExpevalError, ResultCode
from expeval.operands import OperandChain


def _modulo(a, b):
    return float(int(a) % int(b))


def _build(*items):
    """Values at even places, (operation, priority) pairs at odd places."""
    chain = OperandChain()
    for index, item in enumerate(items):
        if index % 2:
            chain.attach_operator(*item)
        else:
            chain.push(item)
    return chain


ADD = (add, LOW_PRIORITY_DEFAULT)
SUB = (subtract, LOW_PRIORITY_DEFAULT)
MUL = (multiply, HIGH_PRIORITY_DEFAULT)
DIV = (divide, HIGH_PRIORITY_DEFAULT)
POW = (math.pow, MAX_PRIORITY)
MOD = (_modulo, HIGH_PRIORITY_DEFAULT + 1)


def test_empty_chain_is_zero():
    assert OperandChain().result() == 0.0


def test_single_value():
    chain = _build(80)
    assert chain.result() == 80


def test_multiplication_before_addition():
    assert _build(2, ADD, 2, MUL, 2).result() == 2 + 2 * 2


def test_left_associative_subtraction():
    assert _build(100, ADD, 200, ADD, 300, ADD, 400, SUB, 5, ADD, 5, SUB, 5).result() == (
        100 + 200 + 300 + 400 - 5 + 5 - 5
    )


def test_left_associative_division():
    assert _build(17.0, DIV, 8.0, MUL, 13.0, MUL, 84.0, DIV, 3.0).result() == 17.0 / 8.0 * 13.0 * 84.0 / 3.0


def test_mixed_priorities():
    assert _build(13, SUB, 9743.0, MUL, 80, MUL, 14).result() == 13 - 9743.0 * 80 * 14


def test_immediate_operator_merges_on_push():
    chain = _build(10, POW, 2, POW, 3)
    assert len(chain) == 1
    assert chain.result() == math.pow(math.pow(10, 2), 3)


def test_immediate_operator_within_lower_ones():
    assert _build(686, DIV, 7, POW, 3, SUB, 11).result() == 686 / math.pow(7, 3) - 11


def test_custom_priority_between_defaults():
    assert _build(219, MOD, 32, DIV, 6, MOD, 18, SUB, 14, MUL, 21, MOD, 7).result() == (
        (219 % 32) / (6 % 18) - 14 * (21 % 7)
    )


def test_lowest_priority_operator():
    assert _build(2, MUL, 3, (math.atan2, 0), 2, ADD, 10).result() == math.atan2(2 * 3, 2 + 10)


def test_priority_above_maximum_is_immediate():
    chain = _build(10, (math.pow, 200), 2)
    assert len(chain) == 1
    assert chain.result() == math.pow(10, 2)


def test_result_does_not_consume_chain():
    chain = _build(11, SUB, 80, MUL, 2)
    first = chain.result()
    assert chain.result() == first
    assert len(chain) == 3


def test_push_without_operator_is_internal_error():
    chain = _build(1)
    with pytest.raises(ExpevalError) as info:
        chain.push(2)
    assert info.value.code is ResultCode.INTERNAL_ERROR


def test_attach_on_empty_chain_is_internal_error():
    with pytest.raises(ExpevalError) as info:
        OperandChain().attach_operator(add, LOW_PRIORITY_DEFAULT)
    assert info.value.code is ResultCode.INTERNAL_ERROR


def test_trailing_operator_leaves_last_value():
    chain = _build(5, ADD, 1, ADD)
    assert chain.result() == 5 + 1