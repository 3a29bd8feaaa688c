"""Tests for plane/demo.py: operation lookup and demo playback schedule."""

import pytest

from complex_number import Complex, DivisionByZeroError
from plane.demo import (
    DemoStep, build_demo_schedule, build_operation_steps, operation_result,
    CLEAR, PLOT, OPERAND1_COLOR, OPERAND2_COLOR, RESULT_COLOR,
    RESULT_DELAY_MS, DEMO_Z1, DEMO_Z2,
)


class TestOperationResult:

    def test_add(self):
        assert operation_result(Complex(3, 2), Complex(1, 4), "add") == Complex(4, 6)

    def test_multiply(self):
        assert operation_result(Complex(3, 2), Complex(1, 4), "multiply") == Complex(-5, 14)

    def test_subtract(self):
        assert operation_result(Complex(3, 2), Complex(1, 4), "subtract") == Complex(2, -2)

    def test_unknown_operation(self):
        with pytest.raises(ValueError, match="Unknown operation"):
            operation_result(Complex(1, 1), Complex(1, 1), "power")

    def test_divide_by_zero_propagates(self):
        with pytest.raises(DivisionByZeroError):
            operation_result(Complex(1, 1), Complex(0, 0), "divide")


class TestOperationSteps:

    def test_structure(self):
        steps = build_operation_steps(Complex(3, 2), Complex(1, 4), "add", start_ms=1000)
        assert [s.action for s in steps] == [CLEAR, PLOT, PLOT, PLOT]
        assert [s.at_ms for s in steps] == [1000, 1000, 1000, 1000 + RESULT_DELAY_MS]
        assert [s.color for s in steps[1:]] == [OPERAND1_COLOR, OPERAND2_COLOR, RESULT_COLOR]
        assert steps[-1].value == Complex(4, 6)


class TestDemoSchedule:

    def test_default_operands(self):
        assert DEMO_Z1 == Complex(3, 2)
        assert DEMO_Z2 == Complex(1, 4)

    def test_sorted_by_time(self):
        times = [s.at_ms for s in build_demo_schedule()]
        assert times == sorted(times)

    def test_opening_steps(self):
        steps = build_demo_schedule()
        assert steps[0] == DemoStep(0, CLEAR)
        assert steps[1] == DemoStep(0, PLOT, DEMO_Z1, OPERAND1_COLOR)
        assert steps[2] == DemoStep(500, PLOT, DEMO_Z2, OPERAND2_COLOR)

    def test_results_plotted_in_gold(self):
        results = [s for s in build_demo_schedule() if s.color == RESULT_COLOR]
        assert [(s.at_ms, s.value) for s in results] == [
            (2000, Complex(4, 6)),
            (4000, Complex(-5, 14)),
        ]

    def test_each_operation_clears_first(self):
        clears = [s.at_ms for s in build_demo_schedule() if s.action == CLEAR]
        assert clears == [0, 1000, 3000]

    def test_step_count(self):
        assert len(build_demo_schedule()) == 11

    def test_custom_operands(self):
        steps = build_demo_schedule(Complex(1, 0), Complex(0, 1))
        results = [s.value for s in steps if s.color == RESULT_COLOR]
        assert results == [Complex(1, 1), Complex(0, 1)]
