# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Config loading (defaults/roaming)
# [NAV-20] Public getters
# [NAV-99] End
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Dict

from vector_lab.labs.draw_cycle import DrawPalette
from vector_lab.labs.renderkit.primitives import VISUAL_SCALE

CONFIG_PATH = Path("data/roaming/vector_lab_config.json")
_DEFAULT_UI_CONFIG = {
    "visual_scale": VISUAL_SCALE,
    "background": "black",
    "v1_color": "red",
    "v2_color": "blue",
    "result_color": "green",
    "defaults": {
        "v1": [2.25, 2.25],
        "v2": [0.0, 0.0],
        "scalar": 1.0,
        "operation": "add",
    },
}


# === [NAV-10] Config loading (defaults/roaming) ==============================
def load_ui_config(path: Path | None = None) -> Dict:
    path = path or CONFIG_PATH
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(_DEFAULT_UI_CONFIG, indent=2), encoding="utf-8")
        return copy.deepcopy(_DEFAULT_UI_CONFIG)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return copy.deepcopy(_DEFAULT_UI_CONFIG)
    if not isinstance(data, dict):
        return copy.deepcopy(_DEFAULT_UI_CONFIG)
    for key, value in _DEFAULT_UI_CONFIG.items():
        data.setdefault(key, copy.deepcopy(value))
    if isinstance(data.get("defaults"), dict):
        for key, value in _DEFAULT_UI_CONFIG["defaults"].items():
            data["defaults"].setdefault(key, value)
    else:
        data["defaults"] = copy.deepcopy(_DEFAULT_UI_CONFIG["defaults"])
    return data


def save_ui_config(data: Dict, path: Path | None = None) -> None:
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# === [NAV-20] Public getters ==================================================
def get_visual_scale(config: Dict | None = None) -> float:
    config = config if config is not None else load_ui_config()
    try:
        value = float(config.get("visual_scale", VISUAL_SCALE))
    except (TypeError, ValueError):
        return VISUAL_SCALE
    return value if value > 0 else VISUAL_SCALE


def get_palette(config: Dict | None = None) -> DrawPalette:
    config = config if config is not None else load_ui_config()
    return DrawPalette(
        background=str(config.get("background", "black")),
        v1=str(config.get("v1_color", "red")),
        v2=str(config.get("v2_color", "blue")),
        result=str(config.get("result_color", "green")),
    )


def get_default_inputs(config: Dict | None = None) -> Dict:
    config = config if config is not None else load_ui_config()
    defaults = config.get("defaults") or {}
    return {**_DEFAULT_UI_CONFIG["defaults"], **defaults}


# === [NAV-99] End =============================================================
__all__ = [
    "CONFIG_PATH",
    "load_ui_config",
    "save_ui_config",
    "get_visual_scale",
    "get_palette",
    "get_default_inputs",
]
