"""
Playback scheduler for the animated transit map.

The `Network` owns the timeline index, the station cache and the layout
relaxer. It is driven one Instant at a time: `draw_timed_drawables_at`
draws or erases every element active at that instant, frames the viewport
and returns the simulated animation delay the step consumes. Time is never
waited for here; the caller schedules the next instant after that delay.

Per step:
1. Display the epoch label (except for the origin sentinel)
2. Walk the elements indexed at the instant in registration order
3. Draw appearing elements; buffer retiring ones into same-name erase batches
4. Flush erase batches last-in-first-out before any draw and at the end
5. Relax the layout and pan/zoom the viewport
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .adapters import NetworkAdapter, StationProvider
from .config import PlaybackConfig
from .drawables import TimedDrawable
from .enums import InstantFlag
from .geometry import Rotation, Vector
from .gravitator import Gravitator
from .instant import Instant
from .station import Station
from .timeline import TimelineIndex
from .zoomer import Zoomer

logger = logging.getLogger(__name__)


class Network(StationProvider):
    """
    Single-timeline playback engine.

    Attributes:
        adapter: Rendering backend
        config: Playback tunables
        index: Timeline index of all registered elements
        gravitator: Layout relaxer fed with drawn lines
    """

    def __init__(self, adapter: NetworkAdapter, config: PlaybackConfig | None = None):
        self.adapter = adapter
        self.config = config or PlaybackConfig()
        self.index = TimelineIndex()
        self.gravitator = Gravitator(self, self.config)
        self._stations: Dict[str, Station] = {}
        self._erase_buffer: List[TimedDrawable] = []

    def initialize(self) -> None:
        """Let the backend discover its elements and register them in the index."""
        self.adapter.initialize(self)
        logger.info("Network initialized with %d indexed slots", len(self.index))

    # ----- stations -----
    def station_by_id(self, station_id: str) -> Optional[Station]:
        """Cached station lookup; asks the backend on first use, None when unknown."""
        if station_id not in self._stations:
            station = self.adapter.station_by_id(station_id)
            if station is None:
                return None
            self._stations[station_id] = station
        return self._stations[station_id]

    def create_virtual_stop(self, station_id: str, base_coords: Vector, rotation: Rotation) -> Station:
        stop = self.adapter.create_virtual_stop(station_id, base_coords, rotation)
        self._stations[station_id] = stop
        return stop

    # ----- timeline -----
    def add_to_index(self, element: TimedDrawable) -> None:
        self.index.add_to_index(element)

    def is_epoch_existing(self, epoch: int) -> bool:
        return self.index.is_epoch_existing(epoch)

    def timed_drawables_at(self, now: Instant) -> List[TimedDrawable]:
        return self.index.timed_drawables_at(now)

    def next_instant(self, now: Instant) -> Optional[Instant]:
        return self.index.next_instant(now)

    def first_instant(self) -> Optional[Instant]:
        return self.index.first_instant()

    # ----- playback -----
    def draw_timed_drawables_at(self, now: Instant, animate: bool) -> float:
        """
        Play one instant of the timeline.

        Args:
            now: Instant to play
            animate: Whether transitions should animate (subject to instant flags)

        Returns:
            float: Total simulated delay of this step, including the zoom
        """
        zoomer = Zoomer(self.adapter.canvas_size, self.config)
        self._display_instant(now)
        elements = self.timed_drawables_at(now)
        delay = self.config.zoom_duration
        try:
            for element in elements:
                delay = self._draw_or_erase_element(element, delay, animate, now, zoomer)
            delay = self._flush_erase_buffer(delay, animate, zoomer)
        finally:
            # the buffer is empty whenever a step ends, also on error
            self._erase_buffer = []
        logger.debug("Played %s: %d elements, delay %.3f", now, len(elements), delay)
        delay = self.gravitator.gravitate(delay, animate)
        self.adapter.zoom_to(zoomer.center, zoomer.scale, zoomer.duration)
        return delay

    def _display_instant(self, now: Instant) -> None:
        if now != Instant.BIG_BANG:
            self.adapter.draw_epoch(str(now.epoch))

    def _draw_or_erase_element(self, element: TimedDrawable, delay: float, animate: bool, now: Instant, zoomer: Zoomer) -> float:
        if now == element.to and element.from_ != element.to:
            if self._erase_buffer and self._erase_buffer[-1].name != element.name:
                delay = self._flush_erase_buffer(delay, animate, zoomer)
            self._erase_buffer.append(element)
            return delay
        delay = self._flush_erase_buffer(delay, animate, zoomer)
        should_animate = self._should_animate(element.from_, animate)
        delay += self._draw_element(element, delay, should_animate)
        zoomer.include(element.bounding_box, element.from_, element.to, True, should_animate)
        return delay

    def _flush_erase_buffer(self, delay: float, animate: bool, zoomer: Zoomer) -> float:
        # last pushed is erased first
        for element in reversed(self._erase_buffer):
            should_animate = self._should_animate(element.to, animate)
            delay += self._erase_element(element, delay, should_animate)
            zoomer.include(element.bounding_box, element.from_, element.to, False, should_animate)
        self._erase_buffer = []
        return delay

    def _draw_element(self, element: TimedDrawable, delay: float, animate: bool) -> float:
        if element.contributes_edge:
            self.gravitator.add_edge(element)
        logger.debug("Draw %s %r at delay %.3f (animate=%s)", element.kind.value, element, delay, animate)
        return element.draw(delay, animate)

    def _erase_element(self, element: TimedDrawable, delay: float, animate: bool) -> float:
        logger.debug("Erase %s %r at delay %.3f (animate=%s)", element.kind.value, element, delay, animate)
        return element.erase(delay, animate, element.to.flag is InstantFlag.REVERSE)

    @staticmethod
    def _should_animate(instant: Instant, animate: bool) -> bool:
        if not animate:
            return False
        if instant.flag is InstantFlag.NOANIM:
            return False
        return animate
