"""
Postfix evaluation.

PostfixEvaluator reduces a postfix token sequence to a single integer using
a value stack. Unlike a naive stack machine it checks operand counts on
every operator and requires exactly one value at the end.
"""

import structlog

from rpn_calc.errors import DivisionByZeroError, MalformedExpressionError
from rpn_calc.models import BraceToken, NumberToken, OperatorToken, Token, format_int

logger = structlog.get_logger()


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero (``-7 / 2 == -3``)."""
    if b == 0:
        raise DivisionByZeroError(a)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def apply_operator(op: str, a: int, b: int) -> int:
    """Compute ``a op b``."""
    match op:
        case "+":
            return a + b
        case "-":
            return a - b
        case "*":
            return a * b
        case "/":
            return truncating_divide(a, b)
    raise ValueError(f"Unknown operator: {op}")


class PostfixEvaluator:
    """Stack machine over postfix tokens."""

    def __init__(self):
        self._stack: list[int] = []
        self._stray_braces = 0

    def feed(self, token: Token) -> None:
        match token:
            case NumberToken(value=value):
                self._stack.append(value)
            case OperatorToken(value=op):
                if len(self._stack) < 2:
                    raise MalformedExpressionError(
                        f"operator {op!r} is missing an operand"
                    )
                b = self._stack.pop()
                a = self._stack.pop()
                self._stack.append(apply_operator(op, a, b))
            case BraceToken():
                # No stack effect; only unbalanced input leaves braces here
                self._stray_braces += 1

    def feed_all(self, tokens: list[Token]) -> "PostfixEvaluator":
        for token in tokens:
            self.feed(token)
        return self

    def result(self) -> int:
        """Return the single remaining value."""
        if self._stray_braces:
            raise MalformedExpressionError("unbalanced parentheses")
        if not self._stack:
            raise MalformedExpressionError("no value to return")
        if len(self._stack) > 1:
            raise MalformedExpressionError(
                f"{len(self._stack)} values left without an operator"
            )
        return self._stack[0]


def evaluate(postfix: list[Token]) -> int:
    """
    Evaluate a postfix token sequence.

    Raises DivisionByZeroError when a divisor is zero and
    MalformedExpressionError when operands and operators do not balance.
    """
    value = PostfixEvaluator().feed_all(postfix).result()
    logger.debug("Evaluated postfix", result=format_int(value))
    return value
