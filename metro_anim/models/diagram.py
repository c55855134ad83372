from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class StationSpec:
    id: str
    x: float
    y: float
    dir: str = "n"
    label_dir: str = "e"


@dataclass(frozen=True)
class ElementSpec:
    type: str
    name: str
    from_: str = ""
    to: str = ""
    stops: List[str] = field(default_factory=list)
    weight: float = 1.0
    text: str = ""
    station: Optional[str] = None
    box: Optional[Tuple[float, float, float, float]] = None
    duration: float = 0.0


@dataclass(frozen=True)
class DiagramSpec:
    canvas: Tuple[float, float, float, float]
    stations: List[StationSpec]
    elements: Optional[List[ElementSpec]]
