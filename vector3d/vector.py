"""Three component vector value type.

Components are kept at single precision and compared approximately, so
two vectors are "equal" when every component agrees within
:data:`vector3d.mathf.EPSILON`. Geometric operations never raise on
degenerate input: normalizing a near-zero vector or projecting onto a
near-zero normal quietly yields the zero vector instead.

Most operations return new vectors. ``normalize``, ``ortho_normalize``
and the in-place operators (``+=``, ``-=``, ``*=``, ``/=``) mutate the
vectors they are given; sharing one instance between threads that mutate
it is the caller's responsibility.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from . import mathf

LOGGER = logging.getLogger(__name__)

Scalar = Union[int, float]


class _Constant:
    """Class-level constant that hands out a fresh vector on every read."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self._components = (x, y, z)

    def __get__(self, instance: object, owner: type) -> "Vector3":
        return owner(*self._components)


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(eq=False, repr=False)
class Vector3:
    """Mutable 3D vector with single precision components."""

    x: float
    y: float
    z: float

    ZERO = _Constant(0.0, 0.0, 0.0)
    ONE = _Constant(1.0, 1.0, 1.0)
    FORWARD = _Constant(0.0, 0.0, 1.0)
    RIGHT = _Constant(1.0, 0.0, 0.0)
    UP = _Constant(0.0, 1.0, 0.0)

    __hash__ = None  # type: ignore[assignment]
    # Make numpy scalars defer to our reflected operators, e.g. np.float32(2) * v.
    __array_ufunc__ = None

    def __setattr__(self, name: str, value: float) -> None:
        super().__setattr__(name, mathf.to_single(value))

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector3":
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(f"Vector3 requires exactly three components, got {len(components)}")
        x, y, z = components
        return Vector3(x, y, z)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def _assign(self, other: "Vector3") -> None:
        self.x = other.x
        self.y = other.y
        self.z = other.z

    # Magnitude and normalization

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalize(self) -> None:
        """Scale this vector to unit length in place.

        Vectors no longer than EPSILON become the zero vector.
        """
        self._assign(self.normalized())

    def normalized(self) -> "Vector3":
        mag = self.magnitude()
        if mag > mathf.EPSILON:
            return self / mag
        LOGGER.debug("Normalizing near-zero vector %s, falling back to zero", self)
        return Vector3.ZERO

    # Products and metrics

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def scale(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def distance(self, other: "Vector3") -> float:
        return (self - other).magnitude()

    def angle(self, other: "Vector3") -> float:
        """Unsigned angle between the two vectors in radians.

        A zero vector normalizes to zero, so any angle involving one is
        reported as pi / 2.
        """
        cosine = mathf.clamp(self.normalized().dot(other.normalized()), -1.0, 1.0)
        return math.acos(cosine)

    # Clamping and projection

    def clamp_magnitude(self, max_length: float) -> "Vector3":
        if self.sqr_magnitude() > max_length * max_length:
            return self.normalized() * max_length
        return self.copy()

    def project(self, normal: "Vector3") -> "Vector3":
        """Project onto the direction of ``normal``, which need not be unit length."""
        denominator = normal.dot(normal)
        if denominator < mathf.EPSILON:
            LOGGER.debug("Projecting %s onto near-zero normal %s, falling back to zero", self, normal)
            return Vector3.ZERO
        return normal * (self.dot(normal) / denominator)

    def project_on_segment(self, start: "Vector3", end: "Vector3") -> "Vector3":
        """Project onto the segment direction, relative to ``start``.

        The result is clamped to the segment length. There is no lower
        clamp, so points behind ``start`` are not pulled back onto it.
        """
        segment = end - start
        projected = self.project(segment.normalized())
        return (projected - start).clamp_magnitude(segment.magnitude())

    def project_on_plane(self, normal: "Vector3") -> "Vector3":
        return self - self.project(normal)

    def reflect(self, normal: "Vector3") -> "Vector3":
        """Mirror across the plane through the origin with unit ``normal``."""
        return -2.0 * normal.dot(self) * normal + self

    # Interpolation

    def lerp(self, end: "Vector3", t: float) -> "Vector3":
        return self.lerp_unclamped(end, mathf.clamp01(t))

    def lerp_unclamped(self, end: "Vector3", t: float) -> "Vector3":
        return Vector3(
            self.x + (end.x - self.x) * t,
            self.y + (end.y - self.y) * t,
            self.z + (end.z - self.z) * t,
        )

    def slerp(self, end: "Vector3", t: float) -> "Vector3":
        return self.slerp_unclamped(end, mathf.clamp01(t))

    def slerp_unclamped(self, end: "Vector3", t: float) -> "Vector3":
        """Rotate along the great circle towards ``end``; both should be unit vectors.

        Opposite vectors have no defined arc. Their relative direction
        normalizes to zero and the result shrinks along ``self``.
        """
        cosine = mathf.clamp(self.dot(end), -1.0, 1.0)
        theta = math.acos(cosine) * t
        relative = (end - self * cosine).normalized()
        return self * math.cos(theta) + relative * math.sin(theta)

    def ortho_normalize(self, other: "Vector3") -> None:
        """Normalize this vector and make ``other`` a unit vector orthogonal to it.

        Both vectors are modified in place. When they are parallel the
        cross product vanishes and ``other`` becomes the zero vector.
        Passing the receiver itself as ``other`` also yields the zero vector.
        """
        self.normalize()
        other._assign(self.cross(other))
        other.normalize()

    # Equality and formatting

    def approx_eq(self, other: "Vector3", epsilon: Optional[float] = None) -> bool:
        return (
            mathf.approx_eq(self.x, other.x, epsilon)
            and mathf.approx_eq(self.y, other.y, epsilon)
            and mathf.approx_eq(self.z, other.z, epsilon)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.approx_eq(other)

    def __str__(self) -> str:
        return "({}, {}, {})".format(*(mathf.format_single(value) for value in self))

    def __repr__(self) -> str:
        return "Vector3({}, {}, {})".format(*(mathf.format_single(value) for value in self))

    # Operators

    def __add__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if _is_scalar(other):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other: Scalar) -> "Vector3":
        if _is_scalar(other):
            return self + other
        return NotImplemented

    def __sub__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if _is_scalar(other):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, Vector3):
            return self.scale(other)
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Vector3":
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Scalar) -> "Vector3":
        if _is_scalar(other):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __isub__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __imul__(self, other: Scalar) -> "Vector3":
        if not _is_scalar(other):
            return NotImplemented
        self._assign(self * other)
        return self

    def __itruediv__(self, other: Scalar) -> "Vector3":
        if not _is_scalar(other):
            return NotImplemented
        self._assign(self / other)
        return self


__all__ = ["Vector3"]
