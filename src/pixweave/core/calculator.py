"""Four-function calculator on single-precision floats.

Arithmetic uses 32-bit IEEE floats, so dividing by zero gives ``inf`` or
``NaN`` instead of raising.
"""

from __future__ import annotations

import re

import numpy as np

OPERATORS = ("+", "-", "*", "x", "X", "/")

# Plain decimal, exponent, inf or nan; no whitespace or digit separators.
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class InvalidInputError(ValueError):
    """Raised when calculator input cannot be evaluated."""

    pass


class OperandParseError(InvalidInputError):
    """Operand is not a decimal number."""

    def __init__(self, text: str):
        super().__init__(f"Invalid number: {text!r}")
        self.text = text


class UnsupportedOperatorError(InvalidInputError):
    """Operator is not one of the supported symbols."""

    def __init__(self, operator: str):
        super().__init__(
            f"Invalid operator used: {operator!r} (expected one of {' '.join(OPERATORS)})"
        )
        self.operator = operator


def parse_operand(text: str) -> np.float32:
    """Parse a decimal number into a 32-bit float.

    Raises:
        OperandParseError: If text is not a number
    """
    if not NUMBER_PATTERN.fullmatch(text):
        raise OperandParseError(text)

    value = float(text)

    with np.errstate(over="ignore"):
        return np.float32(value)


def parse_operator(text: str) -> str:
    """Validate an operator symbol.

    Raises:
        UnsupportedOperatorError: If text is not a supported operator
    """
    if text not in OPERATORS:
        raise UnsupportedOperatorError(text)
    return text


def operate(operator: str, first: np.float32, second: np.float32) -> np.float32:
    """Apply an operator to two operands."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if operator == "+":
            return first + second
        if operator == "-":
            return first - second
        if operator in ("*", "x", "X"):
            return first * second
        if operator == "/":
            return first / second

    raise UnsupportedOperatorError(operator)


def format_number(value: np.float32) -> str:
    """Render a float with the fewest digits that identify it.

    Whole numbers have no decimal point and large values are never written
    in exponent form.

    Examples:
        >>> format_number(np.float32(7))
        '7'
        >>> format_number(np.float32(2.5))
        '2.5'
    """
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(np.float32(value), trim="-")


def format_result(
    first: np.float32, operator: str, second: np.float32, result: np.float32
) -> str:
    """Format a calculation as ``"<first> <operator> <second> = <result>"``."""
    return (
        f"{format_number(first)} {operator} {format_number(second)}"
        f" = {format_number(result)}"
    )


def run_calculation(first: str, operator: str, second: str) -> str:
    """Parse, evaluate and format one expression.

    Args:
        first: First operand as typed
        operator: One of ``+ - * x X /``
        second: Second operand as typed

    Returns:
        The formatted result line

    Raises:
        InvalidInputError: If an operand or the operator is invalid

    Examples:
        >>> run_calculation("10", "/", "4")
        '10 / 4 = 2.5'
        >>> run_calculation("5", "x", "2")
        '5 x 2 = 10'
    """
    a = parse_operand(first)
    op = parse_operator(operator)
    b = parse_operand(second)

    return format_result(a, op, b, operate(op, a, b))
