from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from PyQt6 import QtWidgets


class LabPlugin(ABC):
    id: str
    title: str

    @abstractmethod
    def create_widget(
        self,
        on_exit: Callable[[], None],
        config: Optional[dict] = None,
    ) -> QtWidgets.QWidget:
        ...
