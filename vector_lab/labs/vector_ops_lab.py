from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from PyQt6 import QtWidgets

from diagnostics.logging_setup import get_logger
from vector_lab import config as ui_config

from .base import LabPlugin
from .draw_cycle import DrawOutcome, DrawRequest, draw_inputs, draw_operation
from .renderkit import SurfaceCanvas
from .shared.operations import OPERATION_LABELS, Operation

logger = get_logger("vector_ops_lab")

SPIN_LIMIT = 1000.0


class VectorOpsLabPlugin(LabPlugin):
    id = "vector_ops"
    title = "Vector Operations Lab"

    def create_widget(
        self,
        on_exit: Callable[[], None],
        config: Optional[dict] = None,
    ) -> "VectorOpsLabWidget":
        return VectorOpsLabWidget(on_exit, config)


def _spin(value: float) -> QtWidgets.QDoubleSpinBox:
    spin = QtWidgets.QDoubleSpinBox()
    spin.setRange(-SPIN_LIMIT, SPIN_LIMIT)
    spin.setDecimals(3)
    spin.setValue(float(value))
    return spin


class VectorOpsLabWidget(QtWidgets.QWidget):
    def __init__(self, on_exit: Callable[[], None], config: Optional[Dict] = None):
        super().__init__()
        self.on_exit = on_exit
        config = config if config is not None else ui_config.load_ui_config()
        self.palette_colors = ui_config.get_palette(config)
        self.visual_scale = ui_config.get_visual_scale(config)
        defaults = ui_config.get_default_inputs(config)

        layout = QtWidgets.QVBoxLayout(self)
        header = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel("Vector Operations")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        back_btn = QtWidgets.QPushButton("Back")
        back_btn.clicked.connect(self._handle_back)
        header.addWidget(back_btn)
        layout.addLayout(header)

        v1 = list(defaults.get("v1") or (0.0, 0.0))
        v2 = list(defaults.get("v2") or (0.0, 0.0))
        grid = QtWidgets.QGridLayout()
        self.v1x = _spin(v1[0])
        self.v1y = _spin(v1[1])
        self.v2x = _spin(v2[0])
        self.v2y = _spin(v2[1])
        grid.addWidget(QtWidgets.QLabel("v1:"), 0, 0)
        grid.addWidget(self.v1x, 0, 1)
        grid.addWidget(self.v1y, 0, 2)
        grid.addWidget(QtWidgets.QLabel("v2:"), 1, 0)
        grid.addWidget(self.v2x, 1, 1)
        grid.addWidget(self.v2y, 1, 2)
        self.draw_btn = QtWidgets.QPushButton("Draw")
        self.draw_btn.clicked.connect(self._on_draw)
        grid.addWidget(self.draw_btn, 0, 3, 2, 1)
        layout.addLayout(grid)

        op_row = QtWidgets.QHBoxLayout()
        op_row.addWidget(QtWidgets.QLabel("Operation:"))
        self.operation = QtWidgets.QComboBox()
        for op, label in OPERATION_LABELS.items():
            self.operation.addItem(label, op.value)
        self._select_operation(str(defaults.get("operation", Operation.ADD.value)))
        op_row.addWidget(self.operation)
        op_row.addWidget(QtWidgets.QLabel("Scalar:"))
        self.scalar = _spin(float(defaults.get("scalar", 1.0)))
        op_row.addWidget(self.scalar)
        self.draw_op_btn = QtWidgets.QPushButton("Draw operation")
        self.draw_op_btn.clicked.connect(self._on_draw_operation)
        op_row.addWidget(self.draw_op_btn)
        op_row.addStretch()
        layout.addLayout(op_row)

        self.canvas = SurfaceCanvas(background=self.palette_colors.background)
        layout.addWidget(self.canvas)

        self.result_label = QtWidgets.QLabel("Result: pending")
        layout.addWidget(self.result_label)
        self.log_view = QtWidgets.QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumBlockCount(500)
        layout.addWidget(self.log_view)

        self._on_draw()

    # -- host-facing helpers ----------------------------------------------
    def set_inputs(
        self,
        v1x: float,
        v1y: float,
        v2x: float,
        v2y: float,
        *,
        operation: Optional[str] = None,
        scalar: Optional[float] = None,
    ) -> None:
        for spin, value in ((self.v1x, v1x), (self.v1y, v1y), (self.v2x, v2x), (self.v2y, v2y)):
            spin.setValue(float(value))
        if operation is not None:
            self._select_operation(operation)
        if scalar is not None:
            self.scalar.setValue(float(scalar))

    def current_request(self) -> DrawRequest:
        return DrawRequest.from_components(
            self.v1x.value(),
            self.v1y.value(),
            self.v2x.value(),
            self.v2y.value(),
            self.operation.currentData(),
            self.scalar.value(),
        )

    def _select_operation(self, tag: str) -> None:
        index = self.operation.findData(tag)
        if index >= 0:
            self.operation.setCurrentIndex(index)

    # -- slots --------------------------------------------------------------
    def _handle_back(self) -> None:
        self.on_exit()

    def _on_draw(self) -> None:
        try:
            request = self.current_request()
            draw_inputs(
                self.canvas.surface,
                request.v1,
                request.v2,
                self.palette_colors,
                scale=self.visual_scale,
            )
            self.result_label.setText("Result: vectors drawn")
        except Exception as exc:
            logger.exception("draw failed")
            self.result_label.setText(f"Error: {exc}")
        self.canvas.update()

    def _on_draw_operation(self) -> Optional[DrawOutcome]:
        outcome = None
        try:
            outcome = draw_operation(
                self.canvas.surface,
                self.current_request(),
                self.palette_colors,
                scale=self.visual_scale,
            )
            self._append_log(outcome.lines)
            if outcome.ok:
                self.result_label.setText(f"Result: {'; '.join(outcome.lines)}")
            else:
                self.result_label.setText(f"Error: {outcome.error}")
        except Exception as exc:
            logger.exception("operation failed")
            self.result_label.setText(f"Error: {exc}")
        self.canvas.update()
        return outcome

    def _append_log(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.log_view.appendPlainText(line)
