"""Three dimensional vector math.

The package provides a single value type, :class:`Vector3`, together with
the scalar helpers and tolerance settings it relies on.
"""

from .config import DEFAULT_EPSILON, ToleranceSettings, load_tolerance_settings
from .mathf import EPSILON, approx_eq, clamp, clamp01
from .vector import Vector3

__all__ = [
    "Vector3",
    "EPSILON",
    "DEFAULT_EPSILON",
    "ToleranceSettings",
    "load_tolerance_settings",
    "approx_eq",
    "clamp",
    "clamp01",
]
