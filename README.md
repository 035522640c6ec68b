# expeval

A small evaluator for arithmetic expressions. It has no dependencies. Numbers,
the four basic operators, brackets and unary minus work without any setup. You
can add your own named constants, one-argument functions and binary operators,
each operator with a priority of your choosing.

It is a library only. It has no command-line tool.

## Installation

```
pip install expeval
```

## Evaluating an expression

```python
from expeval.parser import evaluate

evaluate("2 + 2 * 2")                   # 6.0
evaluate("-5 - -4 + -18 * (-11 + 4)")   # 125.0
evaluate("1,2,3,4e+0 - 234")            # 1000.0
evaluate("")                            # 0.0
evaluate("()")                          # 0.0
```

Numbers can take these forms:

- a decimal point, as in `.5` or `100.`
- an exponent, as in `2e+1` or `.1e-1`
- commas as digit group separators, as in `400,000`. Commas may appear only before any decimal point or exponent, and never two in a row.

Spaces, tabs and line breaks between tokens are ignored.

A `-` where a value is expected negates the value that follows. That value can be a number, a constant, a bracket or a function call.

`*` and `/` bind more tightly than `+` and `-`. Operators of equal priority are applied left to right. Division by zero does not raise an error. It gives an infinity or NaN, as IEEE arithmetic does.

## Constants, functions and operators

A `Context` holds the names that an expression may use. There are two ways to supply them:

- pass a `Context` as the second argument to `evaluate`;
- hand the three collections straight to `evaluate_with`.

If a name appears more than once, the first entry wins.

```python
import math

from expeval.context import Constant, Context, Function, Operator
from expeval.parser import evaluate, evaluate_with

context = Context(
    constants=[Constant("one", 1), Constant("two", 2)],
    functions=[Function("sqrt", math.sqrt), Function("sin", math.sin)],
    operators=[
        Operator("^", 9, math.pow),
        Operator("%", 7, lambda a, b: int(a) % int(b)),
    ],
)

evaluate("sqrt(49) + two * 2", context)   # 11.0
evaluate("10 ^ 2 ^ 3", context)           # 1000000.0
evaluate("100. / 24 % 22", context)       # 50.0

evaluate_with("one + two", constants=[Constant("one", 1), Constant("two", 2)])  # 3.0
```

The rules for names and symbols:

- Identifiers start with a letter or `_` and may go on with letters, digits and `_`.
- A function name must be followed directly by `(`. For example, `sqrt (64)` is rejected because of the space.
- A custom operator symbol is a run of characters that are not letters, digits, `_`, spaces, brackets, `.` or one of `+-*/`.

Higher operator priorities bind more tightly:

| Priority | Meaning |
| --- | --- |
| 0 to 8 | Applied from the highest priority to the lowest |
| 3 | Built-in `+` and `-` |
| 6 | Built-in `*` and `/` |
| 9 or more | Applied at once, left to right, as soon as the right operand has been read |

A priority must lie between 0 and 255. Any other value makes `Operator` raise `ValueError`.

`expeval.context` also exposes the arithmetic behind the built-in operators as `add`, `subtract`, `multiply` and `divide`. You can reuse them in your own operator tables. `Context` has the lookup methods `resolve_constant`, `resolve_function` and `resolve_operator`. Each returns the matching entry, or `None` if there is none.

## Errors

Any expression that cannot be evaluated raises `ExpevalError`, a subclass of `ValueError`, defined in `expeval.errors`. The exception has two attributes:

- `code` is a member of `ResultCode` that names the problem.
- `position` is the index in the expression where the problem was found.

| Code | Raised for |
| --- | --- |
| `INVALID_CHAR` | an unknown character or operator symbol |
| `INVALID_NUMBER` | a malformed number, such as `5e` or `55.123.1` |
| `NUMBER_TOO_BIG` | a number longer than 63 characters |
| `UNEXPECTED_CLOSING_BRACKET` | a `)` with no matching `(` |
| `BRACKET_NOT_CLOSED` | a `(` that is never closed |
| `HANGING_OPERATOR` | an operator with nothing after it |
| `VALUE_EXPECTED` | an operator where a value should be |
| `OPERATOR_EXPECTED` | two values side by side |
| `IDENTIFIER_NOT_FOUND` | a constant or function name that is not in the context |
| `IDENTIFIER_TOO_LONG` | a name longer than 63 characters |

```python
from expeval.errors import ExpevalError
from expeval.parser import evaluate

try:
    evaluate("3 + (129-1))")
except ExpevalError as err:
    print(err.code.name, err.position)   # UNEXPECTED_CLOSING_BRACKET 11
```