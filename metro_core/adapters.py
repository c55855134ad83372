"""
Boundary contracts between the playback core and a rendering backend.

The core never paints anything itself. A backend implements these abstract
classes around its native elements (SVG nodes, Manim mobjects, in-memory
records, ...) and hands them to the core. Adapters are borrowed handles: the
core only relies on them for the duration of a single call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from .geometry import BoundingBox, Rotation, Vector
from .instant import Instant

if TYPE_CHECKING:
    from .network import Network
    from .station import Station, Stop

BoundaryProvider = Callable[[], Dict[str, Tuple[int, int]]]


class StationAdapter(ABC):
    """Native handle of a station marker."""

    id: str
    base_coords: Vector
    rotation: Rotation
    label_dir: Rotation

    @abstractmethod
    def draw(self, delay_seconds: float, get_position_boundaries: BoundaryProvider) -> None:
        ...

    def move(self, delay_seconds: float, animation_seconds: float, coords: Vector) -> None:
        """Visually displace the station; backends without relaxation ignore it."""


class TimedAdapter(ABC):
    """Fields every timed element exposes."""

    name: str
    from_: Instant
    to: Instant
    bounding_box: BoundingBox


class LineAdapter(TimedAdapter):
    stops: List["Stop"]
    weight: float

    @abstractmethod
    def draw(self, delay_seconds: float, animation_seconds: float, path: List[Vector], length: float) -> None:
        ...

    @abstractmethod
    def erase(self, delay_seconds: float, animation_seconds: float, reverse: bool, length: float) -> None:
        ...


class LabelAdapter(TimedAdapter):
    text: str
    for_station: Optional[str]

    @abstractmethod
    def draw(self, delay_seconds: float, text_coords: Optional[Vector], label_dir: Rotation) -> None:
        ...

    @abstractmethod
    def erase(self, delay_seconds: float) -> None:
        ...


class GenericAdapter(TimedAdapter):
    @abstractmethod
    def draw(self, delay_seconds: float, animate: bool) -> float:
        ...

    @abstractmethod
    def erase(self, delay_seconds: float, animate: bool, reverse: bool) -> float:
        ...


class StationProvider(ABC):
    """Gives drawables access to stations by identifier."""

    @abstractmethod
    def station_by_id(self, station_id: str) -> Optional["Station"]:
        ...

    @abstractmethod
    def create_virtual_stop(self, station_id: str, base_coords: Vector, rotation: Rotation) -> "Station":
        ...


class NetworkAdapter(ABC):
    """Capability set a rendering backend offers to the `Network`."""

    @property
    @abstractmethod
    def canvas_size(self) -> BoundingBox:
        ...

    @abstractmethod
    def initialize(self, network: "Network") -> None:
        """Enumerate native elements once and register them via `network.add_to_index`."""

    @abstractmethod
    def station_by_id(self, station_id: str) -> Optional["Station"]:
        ...

    @abstractmethod
    def create_virtual_stop(self, station_id: str, base_coords: Vector, rotation: Rotation) -> "Station":
        ...

    @abstractmethod
    def draw_epoch(self, epoch: str) -> None:
        ...

    @abstractmethod
    def zoom_to(self, zoom_center: Vector, zoom_scale: float, animation_duration_seconds: float) -> None:
        ...
