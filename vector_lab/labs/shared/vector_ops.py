"""Closed-form vector math used by the vector operations lab.

Every function is pure and returns a new Vector3. Dot product, magnitude and
normalize work in the xy-plane only; z is ignored even when non-zero.
"""

from __future__ import annotations

import math

from .math3d import ZERO, Vector3

DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero."


class DivisionByZero(ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(a: Vector3, k: float) -> Vector3:
    return Vector3(a.x * k, a.y * k, a.z * k)


def divide(a: Vector3, k: float) -> Vector3:
    if k == 0:
        raise DivisionByZero(DIVIDE_BY_ZERO_MESSAGE)
    return Vector3(a.x / k, a.y / k, a.z / k)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y


def magnitude(a: Vector3) -> float:
    return math.sqrt(a.x * a.x + a.y * a.y)


def normalize(a: Vector3) -> Vector3:
    """Unit vector in the xy-plane; the zero vector maps to itself."""
    m = magnitude(a)
    if m == 0:
        return ZERO
    return Vector3(a.x / m, a.y / m, 0.0)


def cross(a: Vector3, b: Vector3) -> Vector3:
    # Both inputs lie in z=0, so only the z component survives.
    return Vector3(0.0, 0.0, a.x * b.y - a.y * b.x)


def angle_degrees(a: Vector3, b: Vector3) -> float:
    """Angle between a and b in degrees; 0 when either has zero length."""
    mag = magnitude(a) * magnitude(b)
    if mag == 0:
        return 0.0
    cos_theta = max(-1.0, min(1.0, dot(a, b) / mag))
    return math.degrees(math.acos(cos_theta))


def triangle_area(a: Vector3, b: Vector3) -> float:
    return 0.5 * abs(cross(a, b).z)


__all__ = [
    "DIVIDE_BY_ZERO_MESSAGE",
    "DivisionByZero",
    "add",
    "sub",
    "scale",
    "divide",
    "dot",
    "magnitude",
    "normalize",
    "cross",
    "angle_degrees",
    "triangle_area",
]
