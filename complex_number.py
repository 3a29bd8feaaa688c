"""Complex number arithmetic engine.

Immutable Complex value type plus pure free functions for the elementary
operations. Every operation returns a new value. divide() and log() are
the only operations that can fail; everything else is total over finite
floats and lets NaN/Inf propagate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


class ComplexMathError(ArithmeticError):
    """Base class for undefined complex operations."""


class DivisionByZeroError(ComplexMathError, ZeroDivisionError):
    """Raised when dividing by a complex number of modulus zero."""


class UndefinedLogarithmError(ComplexMathError, ValueError):
    """Raised when taking the logarithm of zero."""


@dataclass(frozen=True)
class Complex:
    """A complex number ``real + imag*i``."""

    real: float = 0.0
    imag: float = 0.0

    def __add__(self, other: Complex) -> Complex:
        return add(self, other)

    def __sub__(self, other: Complex) -> Complex:
        return subtract(self, other)

    def __mul__(self, other: Complex) -> Complex:
        return multiply(self, other)

    def __truediv__(self, other: Complex) -> Complex:
        return divide(self, other)

    def __neg__(self) -> Complex:
        return negate(self)

    def __abs__(self) -> float:
        return modulus(self)

    def __pow__(self, n: float) -> Complex:
        return power(self, n)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return format_rectangular(self)


ZERO = Complex(0.0, 0.0)


def _real_pow(base: float, exponent: float) -> float:
    """IEEE power: 0**-1 is inf and overflow is inf instead of raising."""
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def _real_exp(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.exp(np.float64(x)))


def _times(a: float, b: float) -> float:
    """Product where inf * 0 is NaN rather than an exception."""
    with np.errstate(all="ignore"):
        return float(np.float64(a) * np.float64(b))


# ---------------------------------------------------------------------------
# Basic operations
# ---------------------------------------------------------------------------

def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imag + b.imag)


def subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.real - b.real, a.imag - b.imag)


def negate(a: Complex) -> Complex:
    return Complex(-a.real, -a.imag)


def multiply(a: Complex, b: Complex) -> Complex:
    real = a.real * b.real - a.imag * b.imag
    imag = a.real * b.imag + a.imag * b.real
    return Complex(real, imag)


def divide(a: Complex, b: Complex) -> Complex:
    """Divide a by b.

    Raises:
        DivisionByZeroError: if ``b.real**2 + b.imag**2`` is exactly zero.
    """
    denominator = b.real * b.real + b.imag * b.imag
    if denominator == 0:
        raise DivisionByZeroError("Division by zero")
    real = (a.real * b.real + a.imag * b.imag) / denominator
    imag = (a.imag * b.real - a.real * b.imag) / denominator
    return Complex(real, imag)


# ---------------------------------------------------------------------------
# Advanced operations
# ---------------------------------------------------------------------------

def conjugate(a: Complex) -> Complex:
    return Complex(a.real, -a.imag)


def modulus(a: Complex) -> float:
    return math.hypot(a.real, a.imag)


def argument(a: Complex) -> float:
    """Principal argument in (-pi, pi].

    The origin has argument 0, the two-argument arctangent convention.
    """
    if a.real == 0 and a.imag == 0:
        return 0.0
    theta = math.atan2(a.imag, a.real)
    # atan2(-0.0, x<0) gives -pi; the principal range excludes it
    if theta == -math.pi:
        return math.pi
    return theta


def from_polar(r: float, theta: float) -> Complex:
    # non-finite theta gives NaN components rather than a domain error
    with np.errstate(all="ignore"):
        cos_t = float(np.cos(np.float64(theta)))
        sin_t = float(np.sin(np.float64(theta)))
    return Complex(_times(r, cos_t), _times(r, sin_t))


def power(a: Complex, n: float) -> Complex:
    """Raise a to the real power n via the polar form.

    At the origin a non-positive exponent yields inf/NaN components
    (or 1 for n == 0); these are returned as-is.
    """
    new_r = _real_pow(modulus(a), n)
    new_theta = n * argument(a)
    return from_polar(new_r, new_theta)


def sqrt(a: Complex) -> Complex:
    """Principal square root: half the argument, root of the modulus."""
    new_r = math.sqrt(modulus(a))
    new_theta = argument(a) / 2
    return from_polar(new_r, new_theta)


def exp(a: Complex) -> Complex:
    exp_real = _real_exp(a.real)
    return Complex(
        _times(exp_real, math.cos(a.imag)),
        _times(exp_real, math.sin(a.imag)),
    )


def log(a: Complex) -> Complex:
    """Principal natural logarithm.

    Raises:
        UndefinedLogarithmError: if a is zero.
    """
    r = modulus(a)
    if r == 0:
        raise UndefinedLogarithmError("Logarithm of zero is undefined")
    return Complex(math.log(r), argument(a))


def isclose(a: Complex, b: Complex, abs_tol: float = 1e-9) -> bool:
    """Component-wise closeness within an absolute tolerance."""
    return (
        math.isclose(a.real, b.real, rel_tol=0.0, abs_tol=abs_tol)
        and math.isclose(a.imag, b.imag, rel_tol=0.0, abs_tol=abs_tol)
    )


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _fixed(value: float, digits: int) -> str:
    # + 0.0 turns -0.0 into 0.0
    return f"{round(value, digits) + 0.0:.{digits}f}"


def format_rectangular(a: Complex, digits: int = 3) -> str:
    """Format as ``"x + yi"`` or ``"x - yi"`` with a fixed number of decimals."""
    if a.imag >= 0:
        return f"{_fixed(a.real, digits)} + {_fixed(a.imag, digits)}i"
    return f"{_fixed(a.real, digits)} - {_fixed(abs(a.imag), digits)}i"


def format_number(value: float) -> str:
    """Shortest plain rendering of an entered value: 1234567, 2.5, 1e-07."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_degrees(theta: float) -> str:
    return f"{_fixed(math.degrees(theta), 2)}°"


def format_polar(a: Complex) -> str:
    """Format as ``"r ∠ deg°"``: modulus to 3 decimals, angle to 2."""
    return f"{_fixed(modulus(a), 3)} ∠ {format_degrees(argument(a))}"
