from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from metro_core.instant import Instant
from metro_core.network import Network

from metro_anim.adapters.document import EventRecorder
from metro_anim.models.events import InstantPlayed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackStep:
    instant: Instant
    delay: float


def play(
    network: Network,
    animate: bool = True,
    start: Optional[Instant] = None,
    max_instants: Optional[int] = None,
    wait: Optional[Callable[[float], None]] = None,
    recorder: Optional[EventRecorder] = None,
) -> List[PlaybackStep]:
    """Play the network's timeline from `start` (default: first instant) to its end.

    `wait` is the host's frame loop: it receives each step's delay before the
    next instant is requested. When a recorder is given, an `InstantPlayed`
    marker is recorded after every step.
    """
    steps: List[PlaybackStep] = []
    now = start if start is not None else network.first_instant()
    while now is not None:
        if max_instants is not None and len(steps) >= max_instants:
            break
        delay = network.draw_timed_drawables_at(now, animate)
        steps.append(PlaybackStep(now, delay))
        if recorder is not None:
            recorder.record(InstantPlayed(now.epoch, now.second, delay))
        logger.info("Instant %s took %.2fs", now, delay)
        if wait is not None:
            wait(delay)
        now = network.next_instant(now)
    return steps
