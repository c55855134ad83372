from __future__ import annotations

from typing import Iterable, List

from metro_anim.models.events import Event, InstantPlayed, SceneStep


def compile_events_to_steps(events: Iterable[Event], default_step_duration: float = 0.5) -> List[SceneStep]:
    """Group recorded events into one scene step per played instant.

    The backend records an instant's events while the instant is being played
    and the `InstantPlayed` marker after it, so each marker closes a step whose
    duration is the delay the engine reported.
    """
    steps: List[SceneStep] = []
    current_events: List[Event] = []

    for ev in events:
        current_events.append(ev)
        if isinstance(ev, InstantPlayed):
            steps.append(SceneStep(idx=len(steps), duration=float(max(0.0, ev.delay)), events=current_events))
            current_events = []

    if current_events:
        # flush tail
        steps.append(SceneStep(idx=len(steps), duration=float(default_step_duration), events=current_events))

    return steps
