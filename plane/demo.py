"""Demo playback schedule for the plane visualizer.

The "demonstrate operations" sequence is a plain list of timed steps.
The view plays it with single-shot timers; nothing here touches Qt.
"""

from __future__ import annotations

from typing import NamedTuple

import complex_number as cn
from complex_number import Complex


# Colors used by the demo
OPERAND1_COLOR = "#ff6b6b"
OPERAND2_COLOR = "#4ecdc4"
RESULT_COLOR = "#ffd700"

# Delay between plotting the operands and plotting the result
RESULT_DELAY_MS = 1000

DEMO_Z1 = Complex(3.0, 2.0)
DEMO_Z2 = Complex(1.0, 4.0)

OPERATIONS = {
    "add": cn.add,
    "subtract": cn.subtract,
    "multiply": cn.multiply,
    "divide": cn.divide,
}

# Step actions
CLEAR = "clear"
PLOT = "plot"


class DemoStep(NamedTuple):
    """One timed action. at_ms is relative to the start of playback."""

    at_ms: int
    action: str
    value: Complex | None = None
    color: str | None = None


def operation_result(z1: Complex, z2: Complex, name: str) -> Complex:
    """Apply a named binary operation.

    Raises:
        ValueError: for an unknown operation name.
        DivisionByZeroError: for "divide" with z2 == 0.
    """
    try:
        fn = OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown operation: {name!r}") from None
    return fn(z1, z2)


def build_operation_steps(
    z1: Complex, z2: Complex, name: str, start_ms: int = 0,
) -> list[DemoStep]:
    """Steps that animate one operation: clear, both operands, then result."""
    result = operation_result(z1, z2, name)
    return [
        DemoStep(start_ms, CLEAR),
        DemoStep(start_ms, PLOT, z1, OPERAND1_COLOR),
        DemoStep(start_ms, PLOT, z2, OPERAND2_COLOR),
        DemoStep(start_ms + RESULT_DELAY_MS, PLOT, result, RESULT_COLOR),
    ]


def build_demo_schedule(
    z1: Complex = DEMO_Z1, z2: Complex = DEMO_Z2,
) -> list[DemoStep]:
    """Full demo: show both operands, then animate add and multiply.

    Returned steps are sorted by at_ms; steps sharing a time keep their
    list order.
    """
    steps = [
        DemoStep(0, CLEAR),
        DemoStep(0, PLOT, z1, OPERAND1_COLOR),
        DemoStep(500, PLOT, z2, OPERAND2_COLOR),
    ]
    steps += build_operation_steps(z1, z2, "add", start_ms=1000)
    steps += build_operation_steps(z1, z2, "multiply", start_ms=3000)
    return sorted(steps, key=lambda step: step.at_ms)
