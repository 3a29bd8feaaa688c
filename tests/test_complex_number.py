"""Tests for complex_number.py: arithmetic, failure cases, formatting."""

import cmath
import math

import numpy as np
import pytest

import complex_number as cn
from complex_number import (
    Complex, DivisionByZeroError, UndefinedLogarithmError, ComplexMathError,
)


SAMPLES = [
    Complex(3.0, 2.0),
    Complex(1.0, 4.0),
    Complex(-2.5, 0.75),
    Complex(-1.0, -1.0),
    Complex(0.3, -7.0),
    Complex(0.0, 1.0),
    Complex(-4.0, 0.0),
]

# One value per quadrant plus each half-axis
QUADRANTS_AND_AXES = [
    Complex(2.0, 3.0),
    Complex(-2.0, 3.0),
    Complex(-2.0, -3.0),
    Complex(2.0, -3.0),
    Complex(4.0, 0.0),
    Complex(-4.0, 0.0),
    Complex(0.0, 4.0),
    Complex(0.0, -4.0),
]


def assert_complex_close(actual, expected, atol=1e-9):
    np.testing.assert_allclose(
        [actual.real, actual.imag], [expected.real, expected.imag], atol=atol,
    )


class TestBasicOperations:
    """add / subtract / multiply / divide on known values."""

    def test_add(self):
        assert cn.add(Complex(3, 2), Complex(1, 4)) == Complex(4, 6)

    def test_subtract(self):
        assert cn.subtract(Complex(3, 2), Complex(1, 4)) == Complex(2, -2)

    def test_multiply(self):
        assert cn.multiply(Complex(3, 2), Complex(1, 4)) == Complex(-5, 14)

    def test_divide(self):
        result = cn.divide(Complex(3, 2), Complex(1, 4))
        assert result.real == pytest.approx(11 / 17)
        assert result.imag == pytest.approx(-10 / 17)

    def test_operators_delegate(self):
        a, b = Complex(3, 2), Complex(1, 4)
        assert a + b == cn.add(a, b)
        assert a - b == cn.subtract(a, b)
        assert a * b == cn.multiply(a, b)
        assert a / b == cn.divide(a, b)
        assert -a == Complex(-3, -2)
        assert abs(a) == cn.modulus(a)
        assert a ** 2 == cn.power(a, 2)

    def test_matches_builtin_complex(self):
        a, b = Complex(-2.5, 0.75), Complex(0.3, -7.0)
        assert complex(a / b) == pytest.approx(complex(a) / complex(b))

    @pytest.mark.parametrize("a", SAMPLES)
    def test_add_negation_is_zero(self, a):
        assert cn.add(a, cn.negate(a)) == Complex(0.0, 0.0)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_times_conjugate_is_modulus_squared(self, a):
        result = cn.multiply(a, cn.conjugate(a))
        assert_complex_close(result, Complex(cn.modulus(a) ** 2, 0.0))

    @pytest.mark.parametrize("a", SAMPLES)
    def test_divide_by_self_is_one(self, a):
        assert_complex_close(cn.divide(a, a), Complex(1.0, 0.0))

    def test_value_is_immutable(self):
        z = Complex(1.0, 2.0)
        with pytest.raises(AttributeError):
            z.real = 5.0


class TestDivisionByZero:
    """divide() fails exactly when the denominator is zero."""

    @pytest.mark.parametrize("a", SAMPLES + [Complex(0.0, 0.0)])
    def test_raises(self, a):
        with pytest.raises(DivisionByZeroError):
            cn.divide(a, Complex(0.0, 0.0))

    def test_error_hierarchy(self):
        with pytest.raises(ZeroDivisionError):
            cn.divide(Complex(1, 1), Complex(0, 0))
        assert issubclass(DivisionByZeroError, ComplexMathError)

    def test_negative_zero_denominator(self):
        with pytest.raises(DivisionByZeroError):
            cn.divide(Complex(1, 1), Complex(-0.0, -0.0))

    def test_tiny_denominator_does_not_raise(self):
        result = cn.divide(Complex(1e-10, 0.0), Complex(1e-10, 0.0))
        assert_complex_close(result, Complex(1.0, 0.0))


class TestModulusArgument:

    def test_modulus(self):
        assert cn.modulus(Complex(3, 4)) == 5.0
        assert cn.modulus(Complex(3, 2)) == pytest.approx(3.606, abs=1e-3)

    def test_modulus_non_negative(self):
        for a in SAMPLES:
            assert cn.modulus(a) >= 0

    def test_argument(self):
        theta = cn.argument(Complex(3, 2))
        assert theta == pytest.approx(0.588, abs=1e-3)
        assert math.degrees(theta) == pytest.approx(33.69, abs=1e-2)

    def test_argument_at_origin_is_zero(self):
        assert cn.argument(Complex(0.0, 0.0)) == 0.0
        assert cn.argument(Complex(-0.0, -0.0)) == 0.0

    def test_argument_negative_real_axis_is_pi(self):
        assert cn.argument(Complex(-1.0, 0.0)) == math.pi
        assert cn.argument(Complex(-1.0, -0.0)) == math.pi

    @pytest.mark.parametrize("a", QUADRANTS_AND_AXES)
    def test_argument_range(self, a):
        theta = cn.argument(a)
        assert -math.pi < theta <= math.pi


class TestPowerAndRoots:

    @pytest.mark.parametrize("a", SAMPLES + [Complex(0.0, 0.0)])
    def test_square_matches_multiply(self, a):
        assert_complex_close(cn.power(a, 2), cn.multiply(a, a))

    def test_power_origin_positive_exponent(self):
        assert cn.power(Complex(0.0, 0.0), 2) == Complex(0.0, 0.0)
        assert cn.power(Complex(0.0, 0.0), 0.5) == Complex(0.0, 0.0)

    def test_power_origin_negative_exponent_passes_through(self):
        result = cn.power(Complex(0.0, 0.0), -1)
        assert math.isinf(result.real)
        assert math.isnan(result.imag)

    def test_power_origin_zero_exponent(self):
        assert cn.power(Complex(0.0, 0.0), 0) == Complex(1.0, 0.0)

    def test_power_overflow_is_inf(self):
        result = cn.power(Complex(1e200, 0.0), 3)
        assert math.isinf(result.real)

    def test_power_huge_exponent_angle_overflow_is_nan(self):
        # n * arg overflows to inf; the trig terms become NaN
        result = cn.power(Complex(-1.0, 0.0), 1e308)
        assert math.isnan(result.real)
        assert math.isnan(result.imag)

    def test_from_polar_non_finite_angle(self):
        result = cn.from_polar(1.0, math.inf)
        assert math.isnan(result.real)
        assert math.isnan(result.imag)

    def test_fractional_power(self):
        result = cn.power(Complex(0.0, 4.0), 0.5)
        assert complex(result) == pytest.approx(cmath.sqrt(4j))

    @pytest.mark.parametrize("a", QUADRANTS_AND_AXES)
    def test_sqrt_squared_reconstructs(self, a):
        root = cn.sqrt(a)
        assert_complex_close(cn.multiply(root, root), a)
        assert_complex_close(cn.power(root, 2), a)

    @pytest.mark.parametrize("a", QUADRANTS_AND_AXES)
    def test_sqrt_principal_branch(self, a):
        root = cn.sqrt(a)
        assert root.real >= -1e-12
        assert complex(root) == pytest.approx(cmath.sqrt(complex(a)))

    def test_sqrt_of_negative_real(self):
        assert_complex_close(cn.sqrt(Complex(-4.0, 0.0)), Complex(0.0, 2.0))


class TestExpLog:

    def test_exp_zero(self):
        assert cn.exp(Complex(0.0, 0.0)) == Complex(1.0, 0.0)

    def test_exp_euler(self):
        assert_complex_close(cn.exp(Complex(0.0, math.pi)), Complex(-1.0, 0.0))

    def test_exp_overflow_is_inf(self):
        assert math.isinf(cn.exp(Complex(1000.0, 0.0)).real)

    def test_log_known_values(self):
        assert_complex_close(cn.log(Complex(math.e, 0.0)), Complex(1.0, 0.0))
        assert_complex_close(cn.log(Complex(-1.0, 0.0)), Complex(0.0, math.pi))

    @pytest.mark.parametrize("a", SAMPLES)
    def test_exp_inverts_log(self, a):
        assert_complex_close(cn.exp(cn.log(a)), a)

    def test_log_of_zero_raises(self):
        with pytest.raises(UndefinedLogarithmError):
            cn.log(Complex(0.0, 0.0))

    def test_log_error_is_value_error(self):
        with pytest.raises(ValueError):
            cn.log(Complex(0.0, 0.0))


class TestPolar:

    def test_from_polar(self):
        assert_complex_close(cn.from_polar(2.0, math.pi / 2), Complex(0.0, 2.0))

    @pytest.mark.parametrize("a", QUADRANTS_AND_AXES)
    def test_round_trip(self, a):
        assert_complex_close(cn.from_polar(cn.modulus(a), cn.argument(a)), a)

    def test_isclose(self):
        assert cn.isclose(Complex(1.0, 2.0), Complex(1.0 + 1e-12, 2.0))
        assert not cn.isclose(Complex(1.0, 2.0), Complex(1.0, 2.1))


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (1234567.0, "1234567"),
        (3.0, "3"),
        (-2.0, "-2"),
        (-0.0, "0"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (1e-7, "1e-07"),
        (1e22, "1e+22"),
    ])
    def test_plain_rendering(self, value, expected):
        assert cn.format_number(value) == expected


class TestFormatting:

    def test_positive_imag(self):
        assert str(Complex(3, 2)) == "3.000 + 2.000i"

    def test_negative_imag(self):
        assert str(Complex(1, -2.5)) == "1.000 - 2.500i"

    def test_zero_imag_uses_plus(self):
        assert cn.format_rectangular(Complex(-1.25, 0.0)) == "-1.250 + 0.000i"

    def test_negative_zero_renders_plain(self):
        assert cn.format_rectangular(Complex(-0.0, -0.0)) == "0.000 + 0.000i"

    def test_tiny_negative_rounds_to_plain_zero(self):
        assert cn.format_rectangular(Complex(-0.0004, 1.0)) == "0.000 + 1.000i"

    def test_rounding(self):
        assert cn.format_rectangular(Complex(0.6470588, -0.5882353)) == "0.647 - 0.588i"

    def test_polar(self):
        assert cn.format_polar(Complex(3, 2)) == "3.606 ∠ 33.69°"
        assert cn.format_polar(Complex(-1, 0)) == "1.000 ∠ 180.00°"

    def test_polar_origin(self):
        assert cn.format_polar(Complex(0, 0)) == "0.000 ∠ 0.00°"

    def test_degrees(self):
        assert cn.format_degrees(-math.pi / 2) == "-90.00°"


class TestConcreteScenarios:
    """Worked examples for a = 3 + 2i, b = 1 + 4i and a = 0."""

    def test_three_plus_two_i(self):
        a, b = Complex(3, 2), Complex(1, 4)
        assert cn.add(a, b) == Complex(4, 6)
        assert cn.multiply(a, b) == Complex(-5, 14)
        quotient = cn.divide(a, b)
        assert quotient.real == pytest.approx(0.647, abs=1e-3)
        assert quotient.imag == pytest.approx(-0.588, abs=1e-3)
        assert cn.modulus(a) == pytest.approx(3.606, abs=1e-3)
        assert cn.argument(a) == pytest.approx(0.588, abs=1e-3)

    def test_origin(self):
        zero = Complex(0.0, 0.0)
        assert cn.modulus(zero) == 0.0
        assert cn.argument(zero) == 0.0
        with pytest.raises(UndefinedLogarithmError):
            cn.log(zero)
        assert cn.power(zero, 2) == Complex(0.0, 0.0)
