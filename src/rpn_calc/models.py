"""
Core data models for rpn-calc.

Defines the token variants produced by the tokenizer and consumed by the
converter, evaluator and renderer, plus the record returned by the pipeline.
"""

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# =============================================================================
# Tokens
# =============================================================================

BraceChar = Literal["(", ")"]
OperatorChar = Literal["+", "-", "*", "/"]


class NumberToken(BaseModel):
    """A non-negative integer literal."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int = Field(..., ge=0)

    @property
    def literal(self) -> str:
        return str(self.value)


class BraceToken(BaseModel):
    """An opening or closing parenthesis."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["brace"] = "brace"
    value: BraceChar

    @property
    def literal(self) -> str:
        return self.value


class OperatorToken(BaseModel):
    """One of the four binary arithmetic operators."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    value: OperatorChar

    @property
    def literal(self) -> str:
        return self.value


Token = Annotated[
    Union[NumberToken, BraceToken, OperatorToken],
    Field(discriminator="kind"),
]

_token_list_adapter = TypeAdapter(list[Token])


def format_int(value: int) -> str:
    """
    Decimal text of ``value``, or a digit-count summary when the interpreter
    refuses to convert an integer that long.
    """
    try:
        return str(value)
    except ValueError:
        digits = int(abs(value).bit_length() * math.log10(2)) + 1
        sign = "-" if value < 0 else ""
        return f"<{sign}~{digits}-digit integer>"


def dump_tokens(tokens: list[Token]) -> list[dict[str, Any]]:
    """Serialize tokens to ``{"kind": ..., "value": ...}`` dicts."""
    return _token_list_adapter.dump_python(tokens, mode="json")


def load_tokens(data: list[dict[str, Any]]) -> list[Token]:
    """
    Build tokens from their external representation.

    Raises pydantic.ValidationError for unknown kinds or values outside
    a variant's alphabet.
    """
    return _token_list_adapter.validate_python(data)


# =============================================================================
# Pipeline Results
# =============================================================================

class Evaluation(BaseModel):
    """Everything produced while calculating a single expression."""
    model_config = ConfigDict(frozen=True)

    expression: str
    tokens: list[Token] = Field(default_factory=list)
    postfix: list[Token] = Field(default_factory=list)
    result: int
