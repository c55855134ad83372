from __future__ import annotations

from typing import Sequence, Tuple


def canvas_to_scene(
    point: Sequence[float],
    canvas: Sequence[float],
    frame_width: float = 14.0,
) -> Tuple[float, float, float]:
    """Map a canvas point (SVG coordinates, y down) into scene coordinates.

    The canvas center lands on the scene origin and the canvas width spans
    `frame_width` scene units. Returns (x, y, 0).
    """
    cx, cy, cw, ch = canvas
    unit = frame_width / cw if cw else 1.0
    x = (point[0] - (cx + cw / 2)) * unit
    y = -(point[1] - (cy + ch / 2)) * unit
    return (float(x), float(y), 0.0)


def scene_width_for_scale(scale: float, frame_width: float = 14.0) -> float:
    """Camera frame width showing the canvas at zoom `scale`."""
    return frame_width / max(scale, 1e-6)
