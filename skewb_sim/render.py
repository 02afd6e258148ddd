"""Raster rendering of an unfolded Skewb."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from .actions import CORNER_SLOTS, FACE_ORDER

if TYPE_CHECKING:
    from .engine import Skewb

matplotlib.use("Agg")

CANVAS_WIDTH = 490
CANVAS_HEIGHT = 430
MARGIN = 10
DPI = 100
LINE_WIDTH_PX = 3.0
OUTLINE = "#000000FF"

# Unfolded net: U on top, L F R B in a row, D below F.
# Corner slot -> one triangle per sticker, in triple order.
CORNER_TRIANGLES = {
    "UFR": (((180, 90), (300, 90), (240, 120)), ((180, 90), (240, 120), (240, 195)), ((240, 120), (300, 90), (240, 195))),
    "URB": (((300, 30), (360, 60), (300, 90)), ((300, 90), (360, 60), (360, 135)), ((360, 60), (420, 30), (360, 135))),
    "ULF": (((120, 60), (180, 30), (180, 90)), ((60, 30), (120, 135), (120, 60)), ((120, 60), (180, 90), (120, 135))),
    "UBL": (((180, 30), (240, 0), (300, 30)), ((420, 30), (480, 0), (480, 75)), ((0, 0), (60, 30), (0, 75))),
    "DRF": (((180, 240), (240, 270), (240, 345)), ((240, 195), (300, 240), (240, 270)), ((240, 195), (240, 270), (180, 240))),
    "DBR": (((240, 345), (240, 420), (180, 390)), ((360, 135), (420, 180), (360, 210)), ((300, 240), (360, 135), (360, 210))),
    "DFL": (((120, 210), (180, 240), (120, 285)), ((120, 135), (180, 240), (120, 210)), ((120, 135), (120, 210), (60, 180))),
    "DLB": (((120, 285), (180, 390), (120, 360)), ((0, 75), (60, 180), (0, 150)), ((420, 180), (480, 75), (480, 150))),
}

CENTER_QUADS = {
    "U": ((180, 90), (180, 30), (300, 30), (300, 90)),
    "F": ((120, 135), (180, 90), (240, 195), (180, 240)),
    "R": ((240, 195), (300, 90), (360, 135), (300, 240)),
    "B": ((360, 135), (420, 30), (480, 75), (420, 180)),
    "L": ((0, 75), (60, 30), (120, 135), (60, 180)),
    "D": ((180, 240), (240, 345), (180, 390), (120, 285)),
}


def _patch(points, color) -> Polygon:
    shifted = [(x + MARGIN, y + MARGIN) for x, y in points]
    return Polygon(
        shifted,
        closed=True,
        facecolor=color,
        edgecolor=OUTLINE,
        linewidth=LINE_WIDTH_PX * 72.0 / DPI,
        joinstyle="round",
        capstyle="round",
    )


def output_path(file_name: str | Path) -> Path:
    path = Path(file_name)
    if path.suffix.lower() != ".png":
        path = path.with_name(path.name + ".png")
    return path


def draw(skewb: Skewb, file_name: str | Path) -> Path:
    """Render ``skewb`` to ``<file_name>.png`` and return the written path."""
    fig = plt.figure(figsize=(CANVAS_WIDTH / DPI, CANVAS_HEIGHT / DPI), dpi=DPI)
    try:
        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        ax.set_xlim(0, CANVAS_WIDTH)
        ax.set_ylim(CANVAS_HEIGHT, 0)
        ax.set_axis_off()

        for slot in CORNER_SLOTS:
            for triangle, color in zip(CORNER_TRIANGLES[slot], skewb.corner_colors(slot)):
                ax.add_patch(_patch(triangle, color))
        for face in FACE_ORDER:
            ax.add_patch(_patch(CENTER_QUADS[face], skewb.center_color(face)))

        out = output_path(file_name)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out, dpi=DPI, transparent=True)
    finally:
        plt.close(fig)
    return out
