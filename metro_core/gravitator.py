"""
Layout relaxation over the drawn network.

Every drawn line registers an edge between its terminal stations. When
enabled, a relaxation pass runs a NetworkX spring layout seeded with the
current station positions, so stations joined by heavier lines (larger
`weight`) pull together more strongly, and animates the stations towards
the relaxed positions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

import networkx as nx
import numpy as np

from .config import PlaybackConfig
from .geometry import Vector

if TYPE_CHECKING:
    from .adapters import StationProvider
    from .drawables import Line

logger = logging.getLogger(__name__)


class Gravitator:
    """
    Post-draw relaxation of station positions.

    Attributes:
        graph: Undirected NetworkX graph of stations joined by drawn lines
    """

    def __init__(self, provider: "StationProvider", config: PlaybackConfig | None = None):
        self.provider = provider
        self.config = config or PlaybackConfig()
        self.graph = nx.Graph()
        self._positions: Dict[str, np.ndarray] = {}

    def add_edge(self, line: "Line") -> None:
        """Register `line` as an edge between its first and last station."""
        termini = line.termini
        if len(termini) < 2 or termini[0] == termini[1]:
            return
        src, dst = termini
        if self.graph.has_edge(src, dst):
            return
        self.graph.add_edge(src, dst, weight=line.weight)

    def gravitate(self, delay: float, animate: bool) -> float:
        """
        Run one relaxation pass.

        Args:
            delay: Delay accumulated so far in this playback step
            animate: Whether station moves should be animated

        Returns:
            float: The delay after relaxation (unchanged when nothing moved)
        """
        if not self.config.gravitator_enabled or self.graph.number_of_edges() == 0:
            return delay

        positions = self._current_positions()
        if len(positions) < 2:
            return delay

        ids: List[str] = list(positions)
        coords = np.array([positions[i] for i in ids], dtype=float)
        center = coords.mean(axis=0)
        extent = float(np.abs(coords - center).max()) or 1.0

        relaxed = nx.spring_layout(
            self.graph.subgraph(ids),
            pos={i: (positions[i] - center) / extent for i in ids},
            weight="weight",
            iterations=self.config.gravitator_iterations,
            seed=self.config.gravitator_seed,
            scale=extent,
            center=center,
        )

        duration = self.config.gravitator_duration if animate else 0.0
        moved = 0
        for station_id in ids:
            target = np.asarray(relaxed[station_id], dtype=float)
            if np.linalg.norm(target - positions[station_id]) <= self.config.gravitator_tolerance:
                continue
            station = self.provider.station_by_id(station_id)
            if station is None:
                continue
            station.move(delay, duration, Vector(float(target[0]), float(target[1])))
            self._positions[station_id] = target
            moved += 1

        logger.debug("Gravitator moved %d of %d stations", moved, len(ids))
        if moved and animate:
            return delay + duration
        return delay

    def _current_positions(self) -> Dict[str, np.ndarray]:
        positions: Dict[str, np.ndarray] = {}
        for station_id in self.graph.nodes:
            if station_id in self._positions:
                positions[station_id] = self._positions[station_id]
                continue
            station = self.provider.station_by_id(station_id)
            if station is None:
                continue
            positions[station_id] = np.array([station.base_coords.x, station.base_coords.y], dtype=float)
        return positions
