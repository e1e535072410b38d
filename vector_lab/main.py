from __future__ import annotations

import sys
from typing import Optional

from PyQt6 import QtWidgets

from diagnostics.logging_setup import configure_logging, get_logger
from vector_lab import config as ui_config
from vector_lab.labs import registry as lab_registry

DEFAULT_LAB_ID = "vector_ops"

logger = get_logger("main")


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, lab_id: str = DEFAULT_LAB_ID, config: Optional[dict] = None):
        super().__init__()
        plugin = lab_registry.get_lab(lab_id)
        if plugin is None:
            raise KeyError(f"unknown lab: {lab_id}")
        self.lab_widget = plugin.create_widget(self.close, config)
        self.setCentralWidget(self.lab_widget)
        self.setWindowTitle(plugin.title)


def main() -> None:
    info = configure_logging()
    logger.info("startup log_path=%s", info["log_path"])
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(config=ui_config.load_ui_config())
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
