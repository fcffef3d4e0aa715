"""
Infix to postfix conversion (shunting-yard).

PostfixConverter consumes tokens one at a time, keeping pending operators
and open braces on a stack, and emits the postfix sequence on finish().
"""

import structlog

from rpn_calc.models import BraceToken, NumberToken, OperatorToken, Token

logger = structlog.get_logger()

PRIORITY: dict[str, int] = {
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}


def priority(op: OperatorToken) -> int:
    """Binding strength of an operator; higher binds tighter."""
    return PRIORITY[op.value]


class PostfixConverter:
    """
    Incremental shunting-yard converter.

    Feed infix tokens in source order, then call finish() once to obtain
    the postfix sequence. Equal-priority operators are emitted left to right.
    """

    def __init__(self):
        self._output: list[Token] = []
        self._stack: list[OperatorToken | BraceToken] = []
        self._finished = False

    def feed(self, token: Token) -> None:
        """Process a single infix token."""
        if self._finished:
            raise RuntimeError("Converter already finished")

        match token:
            case NumberToken():
                self._output.append(token)
            case BraceToken(value="("):
                self._stack.append(token)
            case BraceToken(value=")"):
                self._close_brace(token)
            case OperatorToken():
                self._push_operator(token)

    def feed_all(self, tokens: list[Token]) -> "PostfixConverter":
        for token in tokens:
            self.feed(token)
        return self

    def finish(self) -> list[Token]:
        """Flush the remaining stack (LIFO) and return the postfix sequence."""
        if self._finished:
            raise RuntimeError("Converter already finished")
        self._finished = True

        while self._stack:
            self._output.append(self._stack.pop())

        logger.debug("Converted to postfix", count=len(self._output))
        return self._output

    def _close_brace(self, token: BraceToken) -> None:
        while self._stack:
            match self._stack.pop():
                case BraceToken():
                    # Only "(" is ever pushed
                    return
                case op:
                    self._output.append(op)

        # No matching "(": keep the brace in the output so evaluation
        # reports the imbalance instead of silently dropping it.
        logger.debug("Unmatched closing brace")
        self._output.append(token)

    def _push_operator(self, op: OperatorToken) -> None:
        while self._stack:
            match self._stack[-1]:
                case OperatorToken() as top if priority(top) >= priority(op):
                    self._output.append(self._stack.pop())
                case _:
                    break
        self._stack.append(op)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert an infix token sequence into postfix order."""
    return PostfixConverter().feed_all(tokens).finish()
