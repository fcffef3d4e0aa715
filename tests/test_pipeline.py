"""
End-to-end tests for the expression pipeline.
"""

import random

import pytest
import structlog

from rpn_calc.converter import to_postfix
from rpn_calc.errors import (
    CalculatorError,
    DivisionByZeroError,
    InvalidCharacterError,
    MalformedExpressionError,
    NumberTooLongError,
)
from rpn_calc.evaluator import evaluate
from rpn_calc.models import Evaluation
from rpn_calc.pipeline import calculate, calculate_many
from rpn_calc.renderer import render
from rpn_calc.tokenizer import tokenize


class TestCalculate:
    """Test full text-to-integer evaluation."""

    def test_priority_without_parentheses(self):
        assert calculate("10 - 2 * 3").result == 4

    def test_parentheses(self):
        assert calculate("(10 - 2) * 3").result == 24

    def test_division_priority(self):
        assert calculate("7 - 10 / 3").result == 4

    def test_truncates_toward_zero(self):
        assert calculate("(0 - 7) / 2").result == -3

    def test_left_associativity(self):
        assert calculate("100 / 10 / 5").result == 2
        assert calculate("10 - 4 - 3").result == 3

    def test_complex_expression(self):
        assert calculate("((10 + 5) * 2) / 3").result == 10

    def test_evaluation_carries_intermediate_forms(self):
        evaluation = calculate("3 + 4 * 2")
        assert evaluation.expression == "3 + 4 * 2"
        assert render(evaluation.tokens) == "3 + 4 * 2"
        assert render(evaluation.postfix) == "3 4 2 * +"
        assert evaluation.result == 11

    def test_matches_core_functions(self):
        expression = "(1 + 2) * (3 + 4) - 5"
        assert calculate(expression).result == evaluate(to_postfix(tokenize(expression)))

    def test_repeated_runs_are_identical(self):
        first = calculate("(12 + 30) / 4 - 1")
        second = calculate("(12 + 30) / 4 - 1")
        assert first == second


class TestCalculateErrors:
    """Test error propagation from each stage."""

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError):
            calculate("2 + a")

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            calculate("5 / 0")

    def test_division_by_zero_expression(self):
        with pytest.raises(DivisionByZeroError):
            calculate("1 / (2 - 2)")

    @pytest.mark.parametrize(
        "expression",
        ["", "   ", "1 +", "1 2", "* 3", "(1 + 2", "1 + 2)", "()"],
    )
    def test_malformed(self, expression):
        with pytest.raises(MalformedExpressionError):
            calculate(expression)

    def test_unary_minus_is_not_supported(self):
        with pytest.raises(MalformedExpressionError):
            calculate("-5")


class TestCalculateMany:
    """Test concurrent evaluation of independent expressions."""

    def test_results_keep_input_order(self):
        expressions = [f"{i} * {i}" for i in range(50)]
        outcomes = calculate_many(expressions, workers=8)
        assert [o.result for o in outcomes] == [i * i for i in range(50)]

    def test_errors_are_returned_in_place(self):
        outcomes = calculate_many(["1 + 1", "5 / 0", "x", "2 * 3"], workers=2)
        assert isinstance(outcomes[0], Evaluation)
        assert isinstance(outcomes[1], DivisionByZeroError)
        assert isinstance(outcomes[2], InvalidCharacterError)
        assert outcomes[3].result == 6
        assert all(isinstance(o, (Evaluation, CalculatorError)) for o in outcomes)

    def test_empty_input(self):
        assert calculate_many([]) == []


def _random_expression(rng: random.Random, depth: int = 0) -> str:
    if depth > 3 or rng.random() < 0.3:
        return str(rng.randint(0, 99))
    left = _random_expression(rng, depth + 1)
    right = _random_expression(rng, depth + 1)
    expression = f"{left} {rng.choice('+-*')} {right}"
    if rng.random() < 0.4:
        expression = f"({expression})"
    return expression


class TestAgainstPythonArithmetic:
    """
    Division-free expressions must agree with Python's own integer
    arithmetic, which uses the same precedence and left-associativity.
    """

    @pytest.mark.parametrize("seed", range(25))
    def test_random_expression(self, seed):
        rng = random.Random(seed)
        expression = _random_expression(rng)
        assert calculate(expression).result == eval(expression, {"__builtins__": {}}, {})


HUGE_PRODUCT = " * ".join(["9" * 1000] * 5)


class TestHugeNumbers:
    """Test inputs and results past the int-to-str conversion limit."""

    def test_too_long_literal(self):
        with pytest.raises(NumberTooLongError):
            calculate("1" * 5000 + " - 1")

    def test_too_long_literal_in_batch(self):
        outcomes = calculate_many(["1 + 1", "9" * 5000], workers=2)
        assert outcomes[0].result == 2
        assert isinstance(outcomes[1], NumberTooLongError)

    def test_huge_result(self):
        assert calculate(HUGE_PRODUCT).result == (10 ** 1000 - 1) ** 5

    def test_division_by_huge_zero_message(self):
        with pytest.raises(DivisionByZeroError, match="digit integer"):
            calculate(f"{HUGE_PRODUCT} / 0")


class TestDefaultLogging:

    def test_library_use_prints_nothing(self, capsys):
        structlog.reset_defaults()
        calculate("1 + 2")
        out, err = capsys.readouterr()
        assert out == ""
        assert err == ""
        assert structlog.is_configured()
