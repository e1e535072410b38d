"""Synchronous compute-then-render cycles driven by the host.

The host (lab widget or CLI) parses its inputs and calls one of the two
entry points with an explicit surface. Nothing here keeps state between
calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from PyQt6 import QtGui

from diagnostics.logging_setup import get_logger

from .renderkit import primitives
from .renderkit.primitives import VISUAL_SCALE
from .shared import operations
from .shared.math3d import Vector3
from .shared.operations import OperationResult
from .shared.vector_ops import DivisionByZero

logger = get_logger("draw_cycle")


@dataclass(frozen=True)
class DrawPalette:
    background: str = "black"
    v1: str = "red"
    v2: str = "blue"
    result: str = "green"


@dataclass(frozen=True)
class DrawRequest:
    v1: Vector3
    v2: Vector3
    operation: str
    scalar: float = 1.0

    @classmethod
    def from_components(
        cls,
        v1x: float,
        v1y: float,
        v2x: float,
        v2y: float,
        operation: str,
        scalar: float = 1.0,
    ) -> "DrawRequest":
        return cls(Vector3.from_xy(v1x, v1y), Vector3.from_xy(v2x, v2y), operation, float(scalar))


@dataclass
class DrawOutcome:
    request: DrawRequest
    result: Optional[OperationResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def lines(self) -> List[str]:
        if self.error is not None:
            return [self.error]
        return list(self.result.lines) if self.result else []


def draw_inputs(
    surface: QtGui.QImage,
    v1: Vector3,
    v2: Vector3,
    palette: DrawPalette = DrawPalette(),
    *,
    scale: float = VISUAL_SCALE,
) -> None:
    """Clear the surface and draw the two source vectors."""
    primitives.clear(surface, palette.background)
    primitives.draw_vector(surface, v1, palette.v1, scale=scale)
    primitives.draw_vector(surface, v2, palette.v2, scale=scale)


def draw_operation(
    surface: QtGui.QImage,
    request: DrawRequest,
    palette: DrawPalette = DrawPalette(),
    *,
    scale: float = VISUAL_SCALE,
) -> DrawOutcome:
    """Redraw the source vectors, apply the operation and draw its result.

    A zero divisor aborts before the result is drawn; the source vectors
    stay on the surface and the outcome carries the error message.
    """
    draw_inputs(surface, request.v1, request.v2, palette, scale=scale)
    logger.info(
        "operation=%s v1=%s v2=%s scalar=%s",
        request.operation,
        operations.format_vector(request.v1),
        operations.format_vector(request.v2),
        request.scalar,
    )
    try:
        result = operations.evaluate(request.operation, request.v1, request.v2, request.scalar)
    except DivisionByZero as exc:
        logger.error("operation=%s aborted: %s", request.operation, exc)
        return DrawOutcome(request, error=str(exc))

    if result.operation is None:
        logger.warning("unknown operation tag %r ignored", request.operation)
    for vec in result.vectors:
        primitives.draw_vector(surface, vec, palette.result, scale=scale)
    return DrawOutcome(request, result)


__all__ = [
    "DrawOutcome",
    "DrawPalette",
    "DrawRequest",
    "draw_inputs",
    "draw_operation",
]
