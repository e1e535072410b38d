from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt6 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture()
def roaming_dir(tmp_path, monkeypatch) -> Iterator[Path]:
    """Run with data/roaming rooted in a temp directory."""
    monkeypatch.chdir(tmp_path)
    from vector_lab import config as ui_config

    monkeypatch.setattr(ui_config, "CONFIG_PATH", tmp_path / "data/roaming/vector_lab_config.json")
    yield tmp_path / "data/roaming"


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    yield
    from diagnostics import logging_setup

    logging_setup.shutdown_logging()
