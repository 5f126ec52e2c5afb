"""
Two-number console calculator.

Reads two floating point values and one of ``+ - * /``, then prints
``x op y is result``. Division follows IEEE-754, so dividing by zero gives
an infinity or NaN rather than an error. An unknown operator prints nothing.
"""

import math
from enum import Enum
from typing import Optional

import structlog

from ..utils.console import Console, format_number

logger = structlog.get_logger()


class Operator(Enum):
    """Supported arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def parse_operator(symbol: str) -> Optional[Operator]:
    """Return the operator for a symbol, or None if it is not supported."""
    try:
        return Operator(symbol)
    except ValueError:
        return None


def _divide(x: float, y: float) -> float:
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def calculate(x: float, op: Operator, y: float) -> float:
    """Apply an operator to two values."""
    if op is Operator.ADD:
        return x + y
    if op is Operator.SUBTRACT:
        return x - y
    if op is Operator.MULTIPLY:
        return x * y
    return _divide(x, y)


def format_result(x: float, op: Operator, y: float, result: float) -> str:
    return f"{format_number(x)} {op.value} {format_number(y)} is {format_number(result)}"


def run(console: Console) -> Optional[float]:
    """Run the calculator against a console. Returns the result, if any."""
    console.prompt("Enter a double value: ")
    x = console.read_float()
    console.prompt("Enter a double value: ")
    y = console.read_float()
    console.prompt("Enter +, -, *, or /: ")
    symbol = console.read_char()

    op = parse_operator(symbol)
    if op is None:
        logger.info("Unsupported operator", symbol=symbol)
        return None

    result = calculate(x, op, y)
    console.print(format_result(x, op, y, result))
    return result
