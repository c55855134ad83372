"""
Station geometry model.

A station lays out the lines passing through it on two orthogonal axes. On
each axis every line occupies a signed integer track: 0 is the station's
center line, tracks grow outwards and the sign selects the side. This module
keeps the per-axis registries, computes occupancy boundaries, assigns new
tracks and projects tracks into canvas coordinates.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from . import config
from .adapters import StationAdapter
from .enums import Axis
from .geometry import Rotation, Vector, approx_equals

if TYPE_CHECKING:
    from .drawables import Line


@dataclass(frozen=True)
class PreferredTrack:
    """
    Track preference of a line at one stop.

    The document notation is a sign optionally followed by a track number:
    ``"+"`` and ``"-"`` ask for the next free track on that side, ``"+2"``
    or ``"-1"`` pin an explicit track. An empty preference means ``"+"``.
    """

    value: str = "+"

    @classmethod
    def parse(cls, text: str | None) -> "PreferredTrack":
        text = (text or "").strip()
        if not text:
            return cls("+")
        if text[0] not in "+-":
            text = "+" + text
        return cls(text)

    def has_track_number(self) -> bool:
        return len(self.value) > 1

    @property
    def track_number(self) -> int:
        return int(self.value)

    def is_positive(self) -> bool:
        return self.value[0] == "+"


_STOP_PATTERN = re.compile(r"^\s*(\S+)(?:\s+([+-]?\d*))?\s*$")


@dataclass(frozen=True)
class Stop:
    """A station a line passes through, with the line's track preference there."""

    station_id: str
    preferred_track: PreferredTrack = PreferredTrack()

    @classmethod
    def parse(cls, text: str) -> "Stop":
        """Parse ``"<station> [track]"``, e.g. ``"alex +1"``."""
        match = _STOP_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Malformed stop: {text!r}")
        return cls(match.group(1), PreferredTrack.parse(match.group(2)))


@dataclass
class LineAtStation:
    """Result of a track lookup at a station."""

    line: Optional["Line"]
    axis: Axis
    track: int


@dataclass
class _TrackEntry:
    line: "Line"
    track: int


class Station:
    """
    A junction point of the network.

    Base coordinates, rotation and label direction are read once from the
    adapter; the per-axis track registries are mutated as lines are drawn
    and erased.

    Attributes:
        id: Station identifier
        base_coords: Canvas position of the center line
        rotation: Orientation of the station's track axes
        label_dir: Direction in which the station label is placed
    """

    LINE_DISTANCE = config.LINE_DISTANCE
    DEFAULT_STOP_DIMEN = config.DEFAULT_STOP_DIMEN
    LABEL_DISTANCE = config.LABEL_DISTANCE

    def __init__(self, adapter: StationAdapter):
        self._adapter = adapter
        self.id: str = adapter.id
        self.base_coords: Vector = adapter.base_coords
        self.rotation: Rotation = adapter.rotation
        self.label_dir: Rotation = adapter.label_dir
        self._existing_lines: Dict[Axis, List[_TrackEntry]] = {Axis.X: [], Axis.Y: []}

    # ----- registry -----
    def add_line(self, line: "Line", axis: str, track: int) -> None:
        """Register `line` on `track` of `axis`; a line appears at most once per axis."""
        entries = self._existing_lines[Axis(axis)]
        if any(e.line is line for e in entries):
            return
        entries.append(_TrackEntry(line, track))

    def remove_line(self, line: "Line") -> None:
        """Deregister `line` from both axes."""
        for axis, entries in self._existing_lines.items():
            self._existing_lines[axis] = [e for e in entries if e.line is not line]

    def axis_and_track_for_existing_line(self, line_name: str) -> Optional[LineAtStation]:
        """
        Find the axis and track of a registered line by name.

        The x registry is searched before the y registry and the first match
        wins. Matching by name lets a distinct instance of the same line
        re-resolve the track its predecessor used.

        Args:
            line_name: Name of the line

        Returns:
            LineAtStation or None when no line of that name is registered
        """
        for axis in (Axis.X, Axis.Y):
            for entry in self._existing_lines[axis]:
                if entry.line.name == line_name:
                    return LineAtStation(entry.line, axis, entry.track)
        return None

    def lines_at_axis(self, axis: str) -> List[Tuple["Line", int]]:
        return [(e.line, e.track) for e in self._existing_lines[Axis(axis)]]

    # ----- track assignment -----
    def assign_track(self, axis: str, preferred_track: PreferredTrack) -> int:
        """
        Choose the track a new line takes on `axis`.

        An explicit track number is used verbatim. Otherwise the line takes
        the first slot outside current occupancy on the preferred side, so
        new tracks never collide with existing ones.
        """
        if preferred_track.has_track_number():
            return preferred_track.track_number
        left, right = self.position_boundaries()[Axis(axis).value]
        return right + 1 if preferred_track.is_positive() else left - 1

    def rotated_track_coordinates(self, incoming_dir: Rotation, assigned_track: int) -> Vector:
        """Canvas position of `assigned_track` for a line travelling along `incoming_dir`."""
        if incoming_dir.degrees % 180 == 0:
            new_coord = Vector(assigned_track * self.LINE_DISTANCE, 0)
        else:
            new_coord = Vector(0, assigned_track * self.LINE_DISTANCE)
        new_coord = new_coord.rotate(self.rotation)
        return self.base_coords.add(new_coord)

    # ----- boundaries -----
    def position_boundaries(self) -> Dict[str, Tuple[int, int]]:
        return {
            Axis.X.value: self._position_boundaries_for_axis(self._existing_lines[Axis.X]),
            Axis.Y.value: self._position_boundaries_for_axis(self._existing_lines[Axis.Y]),
        }

    @staticmethod
    def _position_boundaries_for_axis(entries: List[_TrackEntry]) -> Tuple[int, int]:
        # (1, -1) is the empty interval: the first line on either side lands on 0
        if not entries:
            return (1, -1)
        left = 0
        right = 0
        for e in entries:
            right = max(right, e.track)
            left = min(left, e.track)
        return (left, right)

    def station_size_for_axis(self, axis: str, vector: float) -> float:
        """
        How far the station body extends along `axis` in the direction of `vector`.

        Returns 0 for a (nearly) null direction. Otherwise the outermost track
        on that side, scaled by the track spacing, plus the stop marker and
        label clearance in the direction of travel.
        """
        if approx_equals(vector, 0):
            return 0
        boundaries = self._position_boundaries_for_axis(self._existing_lines[Axis(axis)])
        size = boundaries[0 if vector < 0 else 1] * self.LINE_DISTANCE
        return size + math.copysign(1, vector) * (self.DEFAULT_STOP_DIMEN + self.LABEL_DISTANCE)

    # ----- rendering -----
    def draw(self, delay_seconds: float) -> None:
        self._adapter.draw(delay_seconds, self.position_boundaries)

    def move(self, delay_seconds: float, animation_seconds: float, coords: Vector) -> None:
        self._adapter.move(delay_seconds, animation_seconds, coords)

    def __repr__(self) -> str:
        return f"Station({self.id!r}, {self.base_coords}, {self.rotation.name})"
