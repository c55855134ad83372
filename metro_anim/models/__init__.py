from .events import (
    InstantPlayed,
    EpochShown,
    ElementDrawn,
    ElementErased,
    StationDrawn,
    StationMoved,
    ZoomChanged,
    SceneStep,
)
from .diagram import DiagramSpec, ElementSpec, StationSpec
