"""
Timed drawables: diagram elements that appear and disappear over time.

Every drawable wraps a backend adapter and exposes a closed variant tag
(`DrawableKind`) together with the `contributes_edge` capability, which the
scheduler uses to decide whether a drawn element feeds the layout relaxer.

- Line: A path through stations, laid out on station tracks
- Label: Text placed beside a station
- GenericTimedDrawable: Anything else the backend mirrors
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .adapters import GenericAdapter, LabelAdapter, LineAdapter, StationProvider
from .config import PlaybackConfig
from .enums import Axis, DrawableKind
from .geometry import BoundingBox, Rotation, Vector
from .instant import Instant
from .station import Station, Stop

logger = logging.getLogger(__name__)


class TimedDrawable:
    """
    Base class for everything registered in the timeline index.

    Attributes:
        kind: Variant tag
        contributes_edge: Whether drawing this element adds a layout edge
    """

    kind: DrawableKind = DrawableKind.GENERIC
    contributes_edge: bool = False

    def __init__(self, adapter):
        self.adapter = adapter

    @property
    def name(self) -> str:
        return self.adapter.name

    @property
    def from_(self) -> Instant:
        return self.adapter.from_

    @property
    def to(self) -> Instant:
        return self.adapter.to

    @property
    def bounding_box(self) -> BoundingBox:
        return self.adapter.bounding_box

    def draw(self, delay: float, animate: bool) -> float:
        raise NotImplementedError

    def erase(self, delay: float, animate: bool, reverse: bool) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, from={self.from_}, to={self.to})"


class Line(TimedDrawable):
    """
    A transit line drawn as a polyline through its stops.

    At every stop the line keeps the axis and track of an already registered
    line with the same name, or is assigned a fresh track according to the
    stop's preference.
    """

    kind = DrawableKind.LINE
    contributes_edge = True

    def __init__(self, adapter: LineAdapter, provider: StationProvider, config: PlaybackConfig | None = None):
        super().__init__(adapter)
        self.provider = provider
        self.config = config or PlaybackConfig()
        self.path: List[Vector] = []

    @property
    def stops(self) -> List[Stop]:
        return list(self.adapter.stops)

    @property
    def weight(self) -> float:
        return float(getattr(self.adapter, "weight", 1.0) or 1.0)

    @property
    def termini(self) -> List[str]:
        """Station ids of the first and last stop."""
        stops = self.stops
        if not stops:
            return []
        return [stops[0].station_id, stops[-1].station_id]

    @property
    def bounding_box(self) -> BoundingBox:
        if self.path:
            return BoundingBox.from_points(self.path)
        coords = [s.base_coords for s in self._stations()]
        return BoundingBox.from_points(coords)

    @property
    def length(self) -> float:
        return sum(a.delta(b).length for a, b in zip(self.path, self.path[1:]))

    def _stations(self) -> List[Station]:
        stations = []
        for stop in self.stops:
            station = self.provider.station_by_id(stop.station_id)
            if station is None:
                logger.warning("Line %s references unknown station %s", self.name, stop.station_id)
                continue
            stations.append(station)
        return stations

    def _animation_duration(self, animate: bool) -> float:
        if not animate or self.config.line_speed <= 0:
            return 0.0
        return self.length / self.config.line_speed

    def create_path(self) -> List[Vector]:
        """Resolve stations, assign tracks and return the projected polyline."""
        resolved = [
            (stop, self.provider.station_by_id(stop.station_id)) for stop in self.stops
        ]
        missing = [stop.station_id for stop, station in resolved if station is None]
        if missing:
            logger.warning("Line %s references unknown stations %s", self.name, missing)
        resolved = [(stop, station) for stop, station in resolved if station is not None]

        path: List[Vector] = []
        for i, (stop, station) in enumerate(resolved):
            if i + 1 < len(resolved):
                direction = station.base_coords.delta(resolved[i + 1][1].base_coords)
            elif i > 0:
                direction = resolved[i - 1][1].base_coords.delta(station.base_coords)
            else:
                direction = Vector.NULL
            relative_dir = station.rotation.delta(direction.inclination())
            path.append(self._track_coordinates(station, stop, relative_dir))
        return path

    def _track_coordinates(self, station: Station, stop: Stop, relative_dir: Rotation) -> Vector:
        existing = station.axis_and_track_for_existing_line(self.name)
        if existing is not None:
            axis, track = existing.axis, existing.track
        else:
            axis = Axis.X if relative_dir.is_vertical() else Axis.Y
            track = station.assign_track(axis, stop.preferred_track)
        station.add_line(self, axis, track)
        # tracks on the y axis are laid out for a line crossing horizontally
        travel = Rotation(0) if axis is Axis.X else Rotation(90)
        return station.rotated_track_coordinates(travel, track)

    def draw(self, delay: float, animate: bool) -> float:
        self.path = self.create_path()
        duration = self._animation_duration(animate)
        self.adapter.draw(delay, duration, list(self.path), self.length)
        return duration

    def erase(self, delay: float, animate: bool, reverse: bool) -> float:
        duration = self._animation_duration(animate)
        self.adapter.erase(delay, duration, reverse, self.length)
        for station in self._stations():
            station.remove_line(self)
        return duration


class Label(TimedDrawable):
    """Text annotation, placed beside its station when it has one."""

    kind = DrawableKind.LABEL

    def __init__(self, adapter: LabelAdapter, provider: StationProvider):
        super().__init__(adapter)
        self.provider = provider

    @property
    def text(self) -> str:
        return self.adapter.text

    def _station(self) -> Optional[Station]:
        if not self.adapter.for_station:
            return None
        return self.provider.station_by_id(self.adapter.for_station)

    def text_coords(self, station: Station) -> Vector:
        """Anchor of the text: just outside the station body in label direction."""
        label_dir = Vector.UNIT.rotate(station.label_dir)
        offset = Vector(
            station.station_size_for_axis(Axis.X, label_dir.x),
            station.station_size_for_axis(Axis.Y, label_dir.y),
        )
        return station.base_coords.add(offset.rotate(station.rotation))

    def draw(self, delay: float, animate: bool) -> float:
        station = self._station()
        if station is None:
            self.adapter.draw(delay, None, Rotation(0))
            return 0
        station.draw(delay)
        self.adapter.draw(delay, self.text_coords(station), station.label_dir.add(station.rotation))
        return 0

    def erase(self, delay: float, animate: bool, reverse: bool) -> float:
        self.adapter.erase(delay)
        return 0


class GenericTimedDrawable(TimedDrawable):
    """Pass-through drawable; the adapter decides how long its transitions take."""

    kind = DrawableKind.GENERIC

    def __init__(self, adapter: GenericAdapter):
        super().__init__(adapter)

    def draw(self, delay: float, animate: bool) -> float:
        return self.adapter.draw(delay, animate)

    def erase(self, delay: float, animate: bool, reverse: bool) -> float:
        return self.adapter.erase(delay, animate, reverse)
