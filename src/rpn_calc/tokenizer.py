"""
Tokenizer for infix arithmetic expressions.

Splits raw text into number, brace and operator tokens. Only ASCII digits,
the four operators, parentheses and space/tab/newline/carriage-return are
accepted; anything else aborts the whole attempt.
"""

import re

import structlog

from rpn_calc.errors import InvalidCharacterError, NumberTooLongError
from rpn_calc.models import BraceToken, NumberToken, OperatorToken, Token

logger = structlog.get_logger()

WHITESPACE = frozenset(" \t\n\r")
BRACES = frozenset("()")
OPERATORS = frozenset("+-*/")

_DIGITS = re.compile(r"[0-9]+")


class Tokenizer:
    """Converts an expression string into an ordered token list."""

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        pos = 0

        while pos < len(text):
            char = text[pos]

            if char in WHITESPACE:
                pos += 1
                continue

            match = _DIGITS.match(text, pos)
            if match:
                try:
                    value = int(match.group())
                except ValueError:
                    raise NumberTooLongError(len(match.group()), pos) from None
                tokens.append(NumberToken(value=value))
                pos = match.end()
                continue

            if char in BRACES:
                tokens.append(BraceToken(value=char))
            elif char in OPERATORS:
                tokens.append(OperatorToken(value=char))
            else:
                logger.debug("Invalid character", char=char, position=pos)
                raise InvalidCharacterError(char, pos)
            pos += 1

        logger.debug("Tokenized expression", count=len(tokens))
        return tokens


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text``; raises InvalidCharacterError on foreign characters."""
    return Tokenizer().tokenize(text)
