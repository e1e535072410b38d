from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Vector3:
    """Immutable (x, y, z) triple.

    User-entered vectors always have z == 0; z only carries the result of a
    cross product.
    """

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_xy(cls, x: float, y: float) -> "Vector3":
        return cls(float(x), float(y), 0.0)

    @property
    def elements(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


ZERO = Vector3(0.0, 0.0, 0.0)
