"""
Expression pipeline for rpn-calc.

Chains tokenizer, converter and evaluator:

    text -> tokens -> postfix tokens -> integer

Every call works on fresh state, so independent expressions can be
calculated concurrently.
"""

from concurrent.futures import ThreadPoolExecutor

import structlog

from rpn_calc.converter import to_postfix
from rpn_calc.errors import CalculatorError, EvalError, LexError
from rpn_calc.evaluator import evaluate
from rpn_calc.log import ensure_logging
from rpn_calc.models import Evaluation, format_int
from rpn_calc.tokenizer import tokenize

logger = structlog.get_logger()


def calculate(expression: str) -> Evaluation:
    """
    Calculate an infix expression.

    Raises LexError or EvalError; no partial result is returned.
    """
    ensure_logging()

    try:
        tokens = tokenize(expression)
    except LexError as e:
        logger.warning("Tokenizing failed", expression=expression, error=str(e))
        raise

    postfix = to_postfix(tokens)

    try:
        result = evaluate(postfix)
    except EvalError as e:
        logger.warning("Evaluation failed", expression=expression, error=str(e))
        raise

    logger.info("Calculated expression", expression=expression, result=format_int(result))
    return Evaluation(
        expression=expression,
        tokens=tokens,
        postfix=postfix,
        result=result,
    )


def _calculate_or_error(expression: str) -> Evaluation | CalculatorError:
    try:
        return calculate(expression)
    except CalculatorError as e:
        return e


def calculate_many(
    expressions: list[str],
    workers: int | None = None,
) -> list[Evaluation | CalculatorError]:
    """
    Calculate independent expressions on a thread pool.

    Outcomes keep the input order; a failed expression yields the
    CalculatorError it raised instead of an Evaluation.
    """
    ensure_logging()

    if not expressions:
        return []

    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(_calculate_or_error, expressions))

    failed = sum(1 for o in outcomes if isinstance(o, CalculatorError))
    logger.info("Batch calculated", total=len(outcomes), failed=failed)
    return outcomes
