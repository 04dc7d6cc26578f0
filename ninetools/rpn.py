"""Evaluate expressions in reverse Polish notation over single digits."""

from __future__ import annotations

import re
import sys

_EXPRESSION = re.compile(r"[0-9] [0-9]( [*/+-] [0-9])* [*/+-]")
_OPERATORS = "+-*/"


class RPNError(ValueError):
    """Raised for a malformed or unevaluable expression."""


def validate_expression(expression: str) -> str:
    """Require the expression to contain a well-formed operand/operator run."""
    if not _EXPRESSION.search(expression):
        raise RPNError("FormatInvalid")
    return expression


def _divide(left: int, right: int) -> int:
    if left == 0 or right == 0:
        return 0
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: str) -> int:
    """Evaluate ``expression`` and return the single value left on the stack."""
    stack: list[int] = []
    for char in expression:
        if char == " ":
            continue
        if char.isdigit() and char in "0123456789":
            stack.append(int(char))
        elif char in _OPERATORS:
            if len(stack) < 2:
                break
            right = stack.pop()
            left = stack.pop()
            if char == "+":
                stack.append(left + right)
            elif char == "-":
                stack.append(left - right)
            elif char == "*":
                stack.append(left * right)
            else:
                stack.append(_divide(left, right))
        else:
            raise RPNError("Erreur")
    if len(stack) != 1:
        raise RPNError("Erreur")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    """Command entry point: evaluate the single expression argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise RPNError("Argument not correct")
        validate_expression(args[0])
    except RPNError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 0
    try:
        print(evaluate(args[0]))
    except RPNError as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())