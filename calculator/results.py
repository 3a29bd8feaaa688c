"""Calculator results: the result cards computed for a pair of operands.

Pure functions only. Core failures (division by zero, log of zero) are
translated into display strings here so the view never sees them.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import complex_number as cn
from complex_number import Complex


UNDEFINED_DIVISION = "Undefined (Division by zero)"
UNDEFINED_LOG = "Undefined (log of zero)"


class ResultCard(NamedTuple):
    """One result tile.

    Attributes:
        title: Short heading, e.g. "Addition" or "|z₁|".
        value: Display string.
        description: Secondary caption.
        number: Raw scalar for cards whose value can be tweened, else None.
    """

    title: str
    value: str
    description: str = ""
    number: float | None = None


def parse_operand(text: str) -> float:
    """Parse one numeric input field.

    Raises:
        ValueError: for empty, non-numeric, NaN or infinite input.
    """
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


def _modulus_card(title: str, z: Complex, description: str) -> ResultCard:
    r = cn.modulus(z)
    return ResultCard(title, f"{r:.3f}", description, number=r)


def compute_results(z1: Complex, z2: Complex) -> list[ResultCard]:
    """Compute all result cards for z1 and z2, in display order."""
    try:
        division = str(cn.divide(z1, z2))
    except cn.DivisionByZeroError:
        division = UNDEFINED_DIVISION

    try:
        logarithm = str(cn.log(z1))
    except cn.UndefinedLogarithmError:
        logarithm = UNDEFINED_LOG

    return [
        ResultCard("Addition", str(cn.add(z1, z2)), "z₁ + z₂"),
        ResultCard("Subtraction", str(cn.subtract(z1, z2)), "z₁ - z₂"),
        ResultCard("Multiplication", str(cn.multiply(z1, z2)), "z₁ × z₂"),
        ResultCard("Division", division, "z₁ ÷ z₂"),
        ResultCard("Conjugate z₁", str(cn.conjugate(z1)), "z̄₁"),
        ResultCard("Conjugate z₂", str(cn.conjugate(z2)), "z̄₂"),
        _modulus_card("|z₁|", z1, "Modulus of z₁"),
        _modulus_card("|z₂|", z2, "Modulus of z₂"),
        ResultCard("Arg(z₁)", cn.format_degrees(cn.argument(z1)), "Argument of z₁"),
        ResultCard("Arg(z₂)", cn.format_degrees(cn.argument(z2)), "Argument of z₂"),
        ResultCard("z₁²", str(cn.power(z1, 2)), "z₁ squared"),
        ResultCard("√z₁", str(cn.sqrt(z1)), "Square root of z₁"),
        ResultCard("e^z₁", str(cn.exp(z1)), "Exponential of z₁"),
        ResultCard("ln(z₁)", logarithm, "Natural log of z₁"),
        ResultCard("Polar z₁", cn.format_polar(z1), "Polar form of z₁"),
        ResultCard("Polar z₂", cn.format_polar(z2), "Polar form of z₂"),
    ]
