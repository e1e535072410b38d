from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from PyQt6 import QtGui  # noqa: E402

from diagnostics.logging_setup import configure_logging  # noqa: E402
from vector_lab import config as ui_config  # noqa: E402
from vector_lab.labs.draw_cycle import DrawRequest, draw_operation  # noqa: E402
from vector_lab.labs.renderkit import primitives  # noqa: E402


def _ensure_gui_app() -> QtGui.QGuiApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtGui.QGuiApplication.instance()
    if app is None:
        app = QtGui.QGuiApplication([])
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run one vector operation draw cycle offscreen and print the report."
    )
    parser.add_argument("--v1", nargs=2, type=float, metavar=("X", "Y"), required=True)
    parser.add_argument("--v2", nargs=2, type=float, metavar=("X", "Y"), required=True)
    parser.add_argument("--op", default="add", help="add, sub, mul, div, angle, magnitude, normalize or area")
    parser.add_argument("--scalar", type=float, default=1.0)
    parser.add_argument("--size", nargs=2, type=int, metavar=("W", "H"), default=(400, 400))
    parser.add_argument("--out", type=Path, help="Save the rendered surface as PNG.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data/roaming"),
        help="Roaming data root; logs go to DATA_DIR/logs/vectorlab.log.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=(
            "Config JSON (default DATA_DIR/vector_lab_config.json). "
            "A missing file is created with the default settings."
        ),
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.data_dir)
    config = ui_config.load_ui_config(args.config or args.data_dir / ui_config.CONFIG_PATH.name)

    _ensure_gui_app()
    surface = primitives.create_surface(*args.size)
    request = DrawRequest.from_components(args.v1[0], args.v1[1], args.v2[0], args.v2[1], args.op, args.scalar)
    outcome = draw_operation(
        surface,
        request,
        ui_config.get_palette(config),
        scale=ui_config.get_visual_scale(config),
    )

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        if not surface.save(str(args.out), "PNG"):
            print(f"error: could not write {args.out}", file=sys.stderr)
            return 1

    if not outcome.ok:
        print(f"error: {outcome.error}", file=sys.stderr)
        return 2
    for line in outcome.lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
