import pytest
import structlog

from rpn_calc.models import BraceToken, NumberToken, OperatorToken


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def num(value: int) -> NumberToken:
    return NumberToken(value=value)


def op(char: str) -> OperatorToken:
    return OperatorToken(value=char)


def brace(char: str) -> BraceToken:
    return BraceToken(value=char)
