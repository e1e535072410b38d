import logging

import pytest
from PyQt6 import QtGui

from vector_lab.labs import draw_cycle
from vector_lab.labs.draw_cycle import DrawPalette, DrawRequest
from vector_lab.labs.renderkit import primitives
from vector_lab.labs.shared.math3d import Vector3

from _pixels import color_near


@pytest.fixture()
def surface(qapp) -> QtGui.QImage:
    return primitives.create_surface(200, 200)


def _snapshot(surface: QtGui.QImage) -> QtGui.QImage:
    return surface.copy()


def test_request_from_components() -> None:
    request = DrawRequest.from_components(1, 2, 3, 4, "add", 2)
    assert request.v1 == Vector3(1.0, 2.0, 0.0)
    assert request.v2 == Vector3(3.0, 4.0, 0.0)
    assert request.scalar == 2.0


def test_draw_inputs_uses_palette(surface) -> None:
    draw_cycle.draw_inputs(surface, Vector3(1.0, 0.0), Vector3(-1.0, 0.0))
    assert surface.pixelColor(0, 0).name() == "#000000"
    assert color_near(surface, 110, 100, "red")
    assert color_near(surface, 90, 100, "blue")


def test_draw_operation_draws_result(surface) -> None:
    request = DrawRequest.from_components(0, 2, 0, 0, "mul", 2.0)
    outcome = draw_cycle.draw_operation(surface, request)
    assert outcome.ok
    assert outcome.lines == ["v1 * 2 = [0, 4, 0]", "v2 * 2 = [0, 0, 0]"]
    # result extends past v1's tip at (100, 60)
    assert color_near(surface, 100, 30, "green")


def test_divide_by_zero_keeps_source_vectors(surface, caplog) -> None:
    palette = DrawPalette()
    draw_cycle.draw_inputs(surface, Vector3(2.0, 2.0), Vector3(-1.0, 0.0), palette)
    before = _snapshot(surface)

    request = DrawRequest.from_components(2, 2, -1, 0, "div", 0.0)
    with caplog.at_level(logging.ERROR, logger="vectorlab"):
        outcome = draw_cycle.draw_operation(surface, request, palette)

    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error == "Cannot divide by zero."
    assert outcome.lines == ["Cannot divide by zero."]
    assert surface == before
    assert any("aborted" in record.getMessage() for record in caplog.records)


def test_unknown_operation_draws_only_sources(surface, caplog) -> None:
    draw_cycle.draw_inputs(surface, Vector3(1.0, 1.0), Vector3(0.0, -1.0))
    before = _snapshot(surface)
    with caplog.at_level(logging.WARNING, logger="vectorlab"):
        outcome = draw_cycle.draw_operation(surface, DrawRequest.from_components(1, 1, 0, -1, "bogus"))
    assert outcome.ok
    assert outcome.lines == ["No valid operation selected."]
    assert surface == before
    assert any("bogus" in record.getMessage() for record in caplog.records)


def test_each_cycle_clears_stale_results(surface) -> None:
    draw_cycle.draw_operation(surface, DrawRequest.from_components(0, 2, 0, 0, "mul", 2.0))
    draw_cycle.draw_operation(surface, DrawRequest.from_components(0, 2, 0, 0, "angle"))
    assert not color_near(surface, 100, 30, "green")


def test_each_cycle_logs_its_operation(surface, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="vectorlab"):
        draw_cycle.draw_operation(surface, DrawRequest.from_components(3, 4, 0, 0, "add"))
    infos = [r for r in caplog.records if r.levelno == logging.INFO and r.name == "vectorlab.draw_cycle"]
    assert len(infos) == 1
    assert infos[0].getMessage().startswith("operation=add v1=[3, 4, 0] v2=[0, 0, 0]")
