"""Plane mapper: ViewState and pixel <-> complex-plane transforms.

All functions are pure. A ViewState is never mutated; zoom() and
recenter() return updated copies. Screen y grows downward while the
imaginary axis grows upward, so the vertical axis is flipped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import NamedTuple

import numpy as np

from complex_number import Complex, argument, format_rectangular, modulus


# Zoom limits (pixels per unit)
MIN_SCALE = 5.0
MAX_SCALE = 100.0
WHEEL_ZOOM_IN = 1.1
WHEEL_ZOOM_OUT = 0.9

# Initial scale is min(width, height) / INITIAL_SCALE_DIVISOR
INITIAL_SCALE_DIVISOR = 20

# Grid and axis label layout
GRID_LINE_COUNT = 30       # lines 1..29 on each side of an axis
AXIS_LABEL_RANGE = 10      # integer labels -10..10


@dataclass(frozen=True)
class ViewState:
    """Scale, origin position and display flags of the plane canvas."""

    scale: float = 30.0
    center_x: float = 0.0
    center_y: float = 0.0
    show_grid: bool = True
    show_polar: bool = False
    show_trail: bool = False


class PolarInfo(NamedTuple):
    """Polar form of a point, with its radius in pixels for drawing."""

    r: float
    theta: float
    radius_px: float
    label: str


class AxisTick(NamedTuple):
    value: int
    position: float  # pixel x for real ticks, pixel y for imaginary ticks


def clamp_scale(scale: float) -> float:
    return max(MIN_SCALE, min(MAX_SCALE, scale))


def to_pixel(c: Complex, view: ViewState) -> tuple[float, float]:
    """Convert a complex value to canvas pixel coordinates."""
    x = view.center_x + c.real * view.scale
    y = view.center_y - c.imag * view.scale
    return x, y


def to_complex(x: float, y: float, view: ViewState) -> Complex:
    """Convert canvas pixel coordinates to a complex value.

    Exact inverse of to_pixel().

    Raises:
        ValueError: if the view has a zero scale.
    """
    if view.scale == 0:
        raise ValueError("ViewState.scale must be non-zero")
    real = (x - view.center_x) / view.scale
    imag = -(y - view.center_y) / view.scale
    return Complex(real, imag)


def zoom(view: ViewState, factor: float) -> ViewState:
    """Multiply the scale by factor, clamped to [MIN_SCALE, MAX_SCALE]."""
    return replace(view, scale=clamp_scale(view.scale * factor))


def wheel_factor(delta_y: float) -> float:
    """Zoom factor for one wheel step.

    Follows the browser convention: positive delta (scroll down) zooms out.
    """
    return WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN


def touch_distance(p1: tuple[float, float], p2: tuple[float, float]) -> float:
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def pinch_factor(previous_distance: float, current_distance: float) -> float:
    """Zoom factor for a pinch update: current over previous finger distance."""
    if previous_distance <= 0:
        return 1.0
    return current_distance / previous_distance


def recenter(view: ViewState, width: float, height: float) -> ViewState:
    """Move the origin to the middle of a width x height canvas; keep scale."""
    return replace(view, center_x=width / 2, center_y=height / 2)


def initial_view(width: float, height: float, **flags) -> ViewState:
    """Fresh view for a newly (re)initialized canvas."""
    scale = clamp_scale(min(width, height) / INITIAL_SCALE_DIVISOR)
    return ViewState(
        scale=scale, center_x=width / 2, center_y=height / 2, **flags,
    )


def polar_info(c: Complex, view: ViewState) -> PolarInfo:
    r = modulus(c)
    theta = argument(c)
    label = f"r={r:.2f}, θ={math.degrees(theta):.1f}°"
    return PolarInfo(r=r, theta=theta, radius_px=r * view.scale, label=label)


def point_label(c: Complex) -> str:
    """Short on-canvas label with 2 decimals."""
    return format_rectangular(c, digits=2)


def grid_offsets(view: ViewState, count: int = GRID_LINE_COUNT) -> np.ndarray:
    """Pixel offsets from an axis of the grid lines on one side.

    Lines are drawn at center +/- offset for each returned offset.
    """
    return np.arange(1, count, dtype=np.float64) * view.scale


def axis_ticks(
    view: ViewState, width: float, height: float,
) -> tuple[list[AxisTick], list[AxisTick]]:
    """Integer tick labels on the real and imaginary axes.

    Returns (real_ticks, imag_ticks). Only ticks strictly inside the
    canvas are kept. Imaginary tick values are positive above the real
    axis.
    """
    real_ticks: list[AxisTick] = []
    imag_ticks: list[AxisTick] = []
    for i in range(-AXIS_LABEL_RANGE, AXIS_LABEL_RANGE + 1):
        if i == 0:
            continue
        x = view.center_x + i * view.scale
        y = view.center_y + i * view.scale
        if 0 < x < width:
            real_ticks.append(AxisTick(i, x))
        if 0 < y < height:
            imag_ticks.append(AxisTick(-i, y))
    return real_ticks, imag_ticks
