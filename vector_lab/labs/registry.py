from __future__ import annotations

from typing import Dict, Optional

from .base import LabPlugin
from .vector_ops_lab import VectorOpsLabPlugin

_REGISTRY: Dict[str, LabPlugin] = {}


def _register(plugin: LabPlugin) -> None:
    _REGISTRY[plugin.id] = plugin


_register(VectorOpsLabPlugin())


def get_lab(lab_id: str) -> Optional[LabPlugin]:
    return _REGISTRY.get(lab_id)


def list_labs() -> Dict[str, LabPlugin]:
    return dict(_REGISTRY)
