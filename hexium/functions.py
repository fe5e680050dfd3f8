"""Small numeric helpers for stepping and interpolation."""

from __future__ import annotations

from typing import Callable, Sequence


def derivative(y2: float, y1: float, t2: float, t1: float) -> float:
    """Return the finite-difference slope between two samples."""
    return (y2 - y1) / (t2 - t1)


def euler_step(y: float, dydt: float, dt: float) -> float:
    """Advance ``y`` by one explicit Euler step."""
    return y + dydt * dt


def numerical_derivative(
    f: Callable[[float], float], x: float, h: float = 1e-5
) -> float:
    """Return the central-difference derivative of ``f`` at ``x``."""
    return (f(x + h) - f(x - h)) / (2 * h)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Limit ``value`` to the range ``[min_val, max_val]``."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return a + t * (b - a)


def euler_step_vec(
    y: Sequence[float], dydt: Sequence[float], dt: float
) -> list[float]:
    """Return the state ``y`` advanced by one Euler step along ``dydt``.

    Raises ValueError when the two sequences differ in length.
    """
    return [value + rate * dt for value, rate in zip(y, dydt, strict=True)]