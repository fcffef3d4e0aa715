"""Exceptions raised by the rpn-calc pipeline."""

from rpn_calc.models import format_int


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class LexError(CalculatorError):
    """Raised when the input text cannot be split into tokens."""
    pass


class InvalidCharacterError(LexError):
    """Raised on a character that is not a digit, brace, operator or whitespace."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class NumberTooLongError(LexError):
    """Raised on a digit run longer than the interpreter will convert to int."""

    def __init__(self, digits: int, position: int):
        self.digits = digits
        self.position = position
        super().__init__(f"Number with {digits} digits at position {position} is too long")


class EvalError(CalculatorError):
    """Raised when a postfix sequence cannot be reduced to a single value."""
    pass


class DivisionByZeroError(EvalError):
    """Raised when attempting to divide by zero."""

    def __init__(self, dividend: int):
        self.dividend = dividend
        super().__init__(f"Division by zero: {format_int(dividend)} / 0")


class MalformedExpressionError(EvalError):
    """Raised when operators and operands do not balance."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed expression: {reason}")
