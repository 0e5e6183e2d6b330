"""Scalar helpers consumed by :class:`vector3d.vector.Vector3`."""
from __future__ import annotations

import math
import numbers
from typing import Optional

import numpy as np

from .config import load_tolerance_settings

# //1.- Resolve the shared tolerance once when the package is imported.
EPSILON: float = load_tolerance_settings().epsilon


# //2.- Compare floats with a tolerance that is absolute near zero and relative elsewhere.
def approx_eq(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    tolerance = EPSILON if epsilon is None else epsilon
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


# //3.- Bound a value to the inclusive range [minimum, maximum].
def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


# //4.- Interpolation parameters are limited to the unit interval.
def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


# //5.- Round a number to single precision while handing back a plain Python float.
def to_single(value: float) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    return float(np.float32(value))


# //6.- Shortest text that round-trips the single precision value, e.g. "0.1" or "1.0".
def format_single(value: float) -> str:
    return np.format_float_positional(np.float32(value), trim="0")


__all__ = ["EPSILON", "approx_eq", "clamp", "clamp01", "to_single", "format_single"]
