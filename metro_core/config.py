"""
Configuration objects for the playback engine.

Fixed layout constants live at module level; tunable playback parameters are
grouped in `PlaybackConfig` so experiments and the CLI can override them
without editing core logic.
"""

from __future__ import annotations
from dataclasses import dataclass


LINE_DISTANCE: float = 6
"""Spacing between two parallel tracks at a station."""

DEFAULT_STOP_DIMEN: float = 10
"""Diameter of a stop marker."""

LABEL_DISTANCE: float = 0
"""Clearance between a stop marker and its label."""

ZOOM_DURATION: float = 1.0
"""Seconds a viewport pan/zoom takes."""

ZOOM_MAX_SCALE: float = 3.0
"""Upper bound for the viewport scale."""

ZOOM_PADDING: float = 40.0
"""Margin kept around framed content."""


@dataclass
class PlaybackConfig:
    """
    Configuration for `Network` playback behavior.

    Defaults reproduce the module constants above, so a `Network` built
    without a config behaves exactly like the documented engine.
    """

    # Viewport framing
    zoom_duration: float = ZOOM_DURATION
    zoom_max_scale: float = ZOOM_MAX_SCALE
    zoom_padding: float = ZOOM_PADDING

    # Line drawing speed in canvas units per second
    line_speed: float = 100.0

    # Layout relaxation (off unless explicitly enabled)
    gravitator_enabled: bool = False
    gravitator_iterations: int = 50
    gravitator_duration: float = 1.5
    gravitator_tolerance: float = 0.5
    gravitator_seed: int = 0
