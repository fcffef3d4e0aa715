"""
rpn-calc - Integer Expression Calculator

Converts infix arithmetic over non-negative integer literals, the four
binary operators and parentheses into postfix (Reverse Polish) order with
the shunting-yard algorithm, then evaluates the postfix sequence.
"""

from rpn_calc.converter import PostfixConverter, to_postfix
from rpn_calc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EvalError,
    InvalidCharacterError,
    LexError,
    MalformedExpressionError,
    NumberTooLongError,
)
from rpn_calc.evaluator import PostfixEvaluator, evaluate
from rpn_calc.log import ensure_logging
from rpn_calc.models import (
    BraceToken,
    Evaluation,
    NumberToken,
    OperatorToken,
    Token,
    dump_tokens,
    load_tokens,
)
from rpn_calc.pipeline import calculate, calculate_many
from rpn_calc.renderer import render, render_rich
from rpn_calc.tokenizer import Tokenizer, tokenize

ensure_logging()

__version__ = "1.0.0"

__all__ = [
    "BraceToken",
    "CalculatorError",
    "DivisionByZeroError",
    "EvalError",
    "Evaluation",
    "InvalidCharacterError",
    "LexError",
    "MalformedExpressionError",
    "NumberToken",
    "NumberTooLongError",
    "OperatorToken",
    "PostfixConverter",
    "PostfixEvaluator",
    "Token",
    "Tokenizer",
    "calculate",
    "calculate_many",
    "dump_tokens",
    "evaluate",
    "load_tokens",
    "render",
    "render_rich",
    "to_postfix",
    "tokenize",
]
