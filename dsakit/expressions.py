"""Evaluation of postfix and prefix expressions and infix-to-postfix conversion.

Operands are single decimal digits; operators are ``+ - * / ^``.
Whitespace is ignored.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable


class ExpressionError(ValueError):
    """Raised for a malformed or unevaluable expression."""


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(base**exponent)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}

_PRIORITY = {"(": 0, "-": 1, "+": 2, "/": 3, "*": 4, "^": 5}


def _operand(char: str) -> int:
    if char.isascii() and char.isdigit():
        return int(char)
    raise ExpressionError(f"invalid operand {char!r}")


def _evaluate(chars: Iterable[str], *, postfix: bool) -> int:
    stack: list[int] = []
    for char in chars:
        if char.isspace():
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            stack.append(_operand(char))
            continue
        if len(stack) < 2:
            raise ExpressionError(f"operator {char!r} is missing an operand")
        first = stack.pop()
        second = stack.pop()
        left, right = (second, first) if postfix else (first, second)
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression such as ``"23+4*"``."""
    return _evaluate(expression, postfix=True)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression such as ``"*+234"``."""
    return _evaluate(reversed(expression), postfix=False)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix.

    Operands are ASCII letters or digits. Operator precedence, from lowest to
    highest, is ``- + / * ^``; an operator pops every stacked operator of
    equal or higher precedence.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise ExpressionError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif char in _PRIORITY:
            while stack and _PRIORITY[stack[-1]] >= _PRIORITY[char]:
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)