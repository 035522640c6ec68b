"""Reading numeric literals out of an expression."""

from __future__ import annotations

import re

from expeval.errors import ExpevalError, ResultCode

DIGITS = frozenset("0123456789")
SPACE_CHARS = frozenset("\n \t\r")
NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
OPERATOR_CHARS = frozenset("+-/*")

# Longest literal kept, group separators excluded.
_MAX_LENGTH = 63

_FLOAT_PREFIX = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_float(text: str) -> float:
    """Convert the longest valid leading float of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_number(text: str, start: int) -> tuple[float, int]:
    """Read the number starting at ``text[start]``.

    Commas may separate digit groups before any dot or exponent. Returns the
    value and the index just after the literal. Raises ExpevalError with
    position ``start`` when the literal is malformed or too long.
    """
    first = text[start]
    if first not in DIGITS and first != ".":
        raise ValueError(f"no number starts at index {start}")

    seen_dot = empty = first == "."
    seen_e = e_sign = e_digits = delim_last = invalid = False
    chars = [first]
    pos = start + 1

    while pos < len(text):
        c = text[pos]
        if c == ".":
            if seen_dot or seen_e:
                invalid = True
                break
            seen_dot = True
        elif c in DIGITS:
            empty = False
            if e_sign or seen_e:
                e_digits = True
        elif c == ",":
            if seen_e or seen_dot or delim_last:
                invalid = True
                break
            delim_last = True
            pos += 1
            continue
        elif c in "eE":
            if seen_e:
                invalid = True
                break
            seen_e = True
        elif c in "+-":
            if not seen_e or e_digits:
                break
            if e_sign:
                invalid = True
                break
            e_sign = True
        else:
            break

        if len(chars) >= _MAX_LENGTH:
            raise ExpevalError(ResultCode.NUMBER_TOO_BIG, start)
        chars.append(c)
        delim_last = False
        pos += 1

    if empty or (seen_e and not e_digits) or delim_last:
        invalid = True
    if invalid:
        raise ExpevalError(ResultCode.INVALID_NUMBER, start)

    return _leading_float("".join(chars)), pos