from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from . import vector_ops
from .math3d import Vector3

NO_OPERATION_MESSAGE = "No valid operation selected."


class Operation(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    ANGLE = "angle"
    MAGNITUDE = "magnitude"
    NORMALIZE = "normalize"
    AREA = "area"

    @classmethod
    def parse(cls, tag: Union["Operation", str, None]) -> Optional["Operation"]:
        """Resolve a host-supplied tag; unknown tags give None."""
        if isinstance(tag, Operation):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None


OPERATION_LABELS: Dict[Operation, str] = {
    Operation.ADD: "Add",
    Operation.SUB: "Subtract",
    Operation.MUL: "Multiply",
    Operation.DIV: "Divide",
    Operation.ANGLE: "Angle between",
    Operation.MAGNITUDE: "Magnitude",
    Operation.NORMALIZE: "Normalize",
    Operation.AREA: "Area",
}


@dataclass
class OperationResult:
    """Vectors to draw in the result colour plus lines for the host's log."""

    operation: Optional[Operation]
    vectors: List[Vector3] = field(default_factory=list)
    values: Dict[str, float] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)


def format_vector(v: Vector3) -> str:
    return "[" + ", ".join(f"{c + 0.0:g}" for c in v.elements) + "]"


def _add(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    total = vector_ops.add(v1, v2)
    return OperationResult(Operation.ADD, [total], lines=[f"v1 + v2 = {format_vector(total)}"])


def _sub(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    diff = vector_ops.sub(v1, v2)
    return OperationResult(Operation.SUB, [diff], lines=[f"v1 - v2 = {format_vector(diff)}"])


def _mul(v1: Vector3, v2: Vector3, k: float) -> OperationResult:
    s1 = vector_ops.scale(v1, k)
    s2 = vector_ops.scale(v2, k)
    return OperationResult(
        Operation.MUL,
        [s1, s2],
        lines=[f"v1 * {k:g} = {format_vector(s1)}", f"v2 * {k:g} = {format_vector(s2)}"],
    )


def _div(v1: Vector3, v2: Vector3, k: float) -> OperationResult:
    d1 = vector_ops.divide(v1, k)
    d2 = vector_ops.divide(v2, k)
    return OperationResult(
        Operation.DIV,
        [d1, d2],
        lines=[f"v1 / {k:g} = {format_vector(d1)}", f"v2 / {k:g} = {format_vector(d2)}"],
    )


def _angle(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    angle = vector_ops.angle_degrees(v1, v2)
    return OperationResult(Operation.ANGLE, values={"angle": angle}, lines=[f"Angle: {angle:.3f}"])


def _magnitude(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    m1 = vector_ops.magnitude(v1)
    m2 = vector_ops.magnitude(v2)
    return OperationResult(
        Operation.MAGNITUDE,
        values={"v1": m1, "v2": m2},
        lines=[f"Magnitude v1: {m1:.3f}", f"Magnitude v2: {m2:.3f}"],
    )


def _normalize(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    n1 = vector_ops.normalize(v1)
    n2 = vector_ops.normalize(v2)
    return OperationResult(
        Operation.NORMALIZE,
        [n1, n2],
        lines=[f"norm(v1) = {format_vector(n1)}", f"norm(v2) = {format_vector(n2)}"],
    )


def _area(v1: Vector3, v2: Vector3, _k: float) -> OperationResult:
    area = vector_ops.triangle_area(v1, v2)
    return OperationResult(Operation.AREA, values={"area": area}, lines=[f"Area of triangle: {area:.3f}"])


_HANDLERS: Dict[Operation, Callable[[Vector3, Vector3, float], OperationResult]] = {
    Operation.ADD: _add,
    Operation.SUB: _sub,
    Operation.MUL: _mul,
    Operation.DIV: _div,
    Operation.ANGLE: _angle,
    Operation.MAGNITUDE: _magnitude,
    Operation.NORMALIZE: _normalize,
    Operation.AREA: _area,
}


def evaluate(
    operation: Union[Operation, str, None],
    v1: Vector3,
    v2: Vector3,
    scalar: float = 1.0,
) -> OperationResult:
    """Apply one operation to v1 and v2.

    Unknown tags are a no-op that only reports NO_OPERATION_MESSAGE.
    Raises vector_ops.DivisionByZero for "div" with a zero scalar, before any
    result is produced.
    """
    op = Operation.parse(operation)
    if op is None:
        return OperationResult(None, lines=[NO_OPERATION_MESSAGE])
    return _HANDLERS[op](v1, v2, float(scalar))


__all__ = [
    "NO_OPERATION_MESSAGE",
    "OPERATION_LABELS",
    "Operation",
    "OperationResult",
    "evaluate",
    "format_vector",
]
