import pytest

from vector_lab.labs import registry
from vector_lab.labs.vector_ops_lab import VectorOpsLabWidget
from vector_lab.main import MainWindow

from _pixels import color_near

CONFIG = {
    "visual_scale": 20.0,
    "background": "black",
    "v1_color": "red",
    "v2_color": "blue",
    "result_color": "green",
    "defaults": {"v1": [1.0, 0.0], "v2": [0.0, 1.0], "scalar": 1.0, "operation": "add"},
}


@pytest.fixture()
def widget(qapp) -> VectorOpsLabWidget:
    exits = []
    w = VectorOpsLabWidget(lambda: exits.append(True), dict(CONFIG))
    w.exits = exits
    return w


def test_registry_lists_vector_lab() -> None:
    labs = registry.list_labs()
    assert "vector_ops" in labs
    assert registry.get_lab("vector_ops").title == "Vector Operations Lab"
    assert registry.get_lab("missing") is None


def test_initial_draw_shows_defaults(widget) -> None:
    surface = widget.canvas.surface
    assert color_near(surface, 210, 200, "red")
    assert color_near(surface, 200, 190, "blue")
    assert widget.operation.currentData() == "add"


def test_current_request_reflects_fields(widget) -> None:
    widget.set_inputs(3, 4, -1, 2, operation="div", scalar=2.5)
    request = widget.current_request()
    assert (request.v1.x, request.v1.y, request.v2.x, request.v2.y) == (3.0, 4.0, -1.0, 2.0)
    assert request.operation == "div"
    assert request.scalar == 2.5


def test_draw_operation_logs_result(widget) -> None:
    widget.set_inputs(1, 0, 0, 1, operation="angle")
    outcome = widget._on_draw_operation()
    assert outcome is not None and outcome.ok
    assert widget.log_view.toPlainText().splitlines()[-1] == "Angle: 90.000"
    assert "Angle: 90.000" in widget.result_label.text()


def test_divide_by_zero_reports_error(widget) -> None:
    widget.set_inputs(2, 2, 0, 1, operation="div", scalar=0.0)
    outcome = widget._on_draw_operation()
    assert outcome is not None and not outcome.ok
    assert widget.result_label.text() == "Error: Cannot divide by zero."
    assert widget.log_view.toPlainText().splitlines()[-1] == "Cannot divide by zero."
    assert color_near(widget.canvas.surface, 210, 190, "red")


def test_back_button_calls_on_exit(widget) -> None:
    widget._handle_back()
    assert widget.exits == [True]


def test_main_window_hosts_lab(qapp) -> None:
    window = MainWindow(config=dict(CONFIG))
    assert window.windowTitle() == "Vector Operations Lab"
    assert isinstance(window.lab_widget, VectorOpsLabWidget)
    with pytest.raises(KeyError):
        MainWindow("nope", config=dict(CONFIG))
