from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class InstantPlayed:
    epoch: int
    second: int
    delay: float


@dataclass(frozen=True)
class EpochShown:
    label: str


@dataclass(frozen=True)
class ElementDrawn:
    name: str
    kind: str
    delay: float
    duration: float = 0.0
    path: List[Point] = field(default_factory=list)
    text: Optional[str] = None
    box: Optional[Tuple[float, float, float, float]] = None
    key: Optional[int] = None


@dataclass(frozen=True)
class ElementErased:
    name: str
    kind: str
    delay: float
    duration: float = 0.0
    reverse: bool = False
    key: Optional[int] = None


@dataclass(frozen=True)
class StationDrawn:
    station_id: str
    delay: float
    boundaries: Dict[str, Tuple[int, int]] = field(default_factory=dict)


@dataclass(frozen=True)
class StationMoved:
    station_id: str
    x: float
    y: float
    delay: float
    duration: float


@dataclass(frozen=True)
class ZoomChanged:
    center_x: float
    center_y: float
    scale: float
    duration: float


Event = Union[
    InstantPlayed,
    EpochShown,
    ElementDrawn,
    ElementErased,
    StationDrawn,
    StationMoved,
    ZoomChanged,
]


@dataclass(frozen=True)
class SceneStep:
    idx: int
    duration: float
    events: List[Event]
