"""
Two-level time index over timed drawables.

Elements are bucketed by epoch and then by second. Each level keeps its keys
sorted so the successor of an instant is found by binary search instead of
scanning every bucket.
"""

from __future__ import annotations

from bisect import bisect_right, insort
from typing import Dict, Iterator, List, Optional

from .drawables import TimedDrawable
from .instant import Instant


class TimelineIndex:
    """
    Mapping ``epoch -> second -> [TimedDrawable]`` in registration order.

    An element is indexed at its `from_` instant and, unless its `to` is the
    origin sentinel or equal to `from_`, also at its `to` instant.
    """

    def __init__(self):
        self._slots: Dict[int, Dict[int, List[TimedDrawable]]] = {}
        self._epochs: List[int] = []
        self._seconds: Dict[int, List[int]] = {}

    def add_to_index(self, element: TimedDrawable) -> None:
        self._set_slot(element.from_, element)
        if element.to != Instant.BIG_BANG and element.to != element.from_:
            self._set_slot(element.to, element)

    def _set_slot(self, instant: Instant, element: TimedDrawable) -> None:
        if instant.epoch not in self._slots:
            self._slots[instant.epoch] = {}
            self._seconds[instant.epoch] = []
            insort(self._epochs, instant.epoch)
        seconds = self._slots[instant.epoch]
        if instant.second not in seconds:
            seconds[instant.second] = []
            insort(self._seconds[instant.epoch], instant.second)
        seconds[instant.second].append(element)

    def is_epoch_existing(self, epoch: int) -> bool:
        return epoch in self._slots

    def timed_drawables_at(self, instant: Instant) -> List[TimedDrawable]:
        """Elements active at `instant`; empty when nothing is indexed there."""
        if not self.is_epoch_existing(instant.epoch):
            return []
        return list(self._slots[instant.epoch].get(instant.second, []))

    def next_instant(self, now: Instant) -> Optional[Instant]:
        """
        Smallest indexed instant strictly after `now`.

        A larger second within the current epoch wins; only when there is none
        does the search move on to the next epoch and its smallest second.

        Returns:
            The successor, or None at the end of the timeline
        """
        second = self._smallest_above(now.second, self._seconds.get(now.epoch))
        if second is not None:
            return Instant(now.epoch, second)
        epoch = self._smallest_above(now.epoch, self._epochs)
        if epoch is None:
            return None
        second = self._smallest_above(-1, self._seconds[epoch])
        if second is None:
            return None
        return Instant(epoch, second)

    @staticmethod
    def _smallest_above(threshold: int, keys: Optional[List[int]]) -> Optional[int]:
        if not keys:
            return None
        i = bisect_right(keys, threshold)
        return keys[i] if i < len(keys) else None

    def first_instant(self) -> Optional[Instant]:
        """Earliest indexed instant, or None for an empty index."""
        if not self._epochs:
            return None
        epoch = self._epochs[0]
        return Instant(epoch, self._seconds[epoch][0])

    def instants(self) -> Iterator[Instant]:
        for epoch in self._epochs:
            for second in self._seconds[epoch]:
                yield Instant(epoch, second)

    def __len__(self) -> int:
        return sum(len(elements) for seconds in self._slots.values() for elements in seconds.values())
