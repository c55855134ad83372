"""
Viewport framing.

A `Zoomer` lives for one playback step. Every element the scheduler draws or
erases is offered to it; the bounding boxes of animated transitions are
accumulated into a single pan/zoom target for the backend.
"""

from __future__ import annotations

from .config import PlaybackConfig, ZOOM_DURATION
from .geometry import BoundingBox, Vector
from .instant import Instant


class Zoomer:
    """
    Accumulates a pan/zoom target over the elements touched in one step.

    Attributes:
        canvas: Bounds of the full canvas
        box: Union of the included bounding boxes
    """

    ZOOM_DURATION = ZOOM_DURATION

    def __init__(self, canvas: BoundingBox, config: PlaybackConfig | None = None):
        self.canvas = canvas
        self.config = config or PlaybackConfig()
        self.box = BoundingBox(Vector.NULL, Vector.NULL)
        self._included = 0

    def include(self, bounding_box: BoundingBox, from_: Instant, to: Instant, draw: bool, should_animate: bool) -> None:
        """
        Offer an element's box to the framing target.

        Only animated transitions move the viewport; elements that appear or
        vanish without animation leave the target untouched.
        """
        if not should_animate or bounding_box is None or bounding_box.is_null():
            return
        self.box = self.box.union(bounding_box)
        self._included += 1

    @property
    def center(self) -> Vector:
        if self._included == 0:
            return self.canvas.center
        return self.box.center

    @property
    def scale(self) -> float:
        if self._included == 0:
            return 1.0
        padding = 2 * self.config.zoom_padding
        width = self.box.width + padding
        height = self.box.height + padding
        scale = min(self.canvas.width / width, self.canvas.height / height)
        return max(1.0, min(self.config.zoom_max_scale, scale))

    @property
    def duration(self) -> float:
        return self.config.zoom_duration if self._included > 0 else 0.0
