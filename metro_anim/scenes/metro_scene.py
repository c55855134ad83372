from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

import numpy as np
from manim import (
    UR,
    WHITE,
    GREY_B,
    Animation,
    Create,
    FadeIn,
    FadeOut,
    MovingCameraScene,
    Rectangle,
    Text,
    Uncreate,
    VMobject,
)

from metro_core.enums import DrawableKind

from metro_anim.models.events import (
    ElementDrawn,
    ElementErased,
    EpochShown,
    SceneStep,
    ZoomChanged,
)
from metro_anim.script.compiler import compile_events_to_steps
from metro_anim.utils.easing import ease_in_out_cubic
from metro_anim.utils.layout import canvas_to_scene, scene_width_for_scale

DEFAULT_CANVAS = (0.0, 0.0, 800.0, 600.0)
MIN_RUN_TIME = 0.1


class MetroMapScene(MovingCameraScene):
    """Replays recorded playback events as a Manim animation."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._element_viz: Dict[Any, Any] = {}
        self._epoch_label: Text | None = None

    def construct(self):
        events = list(getattr(self, "_events", []))
        self._canvas = tuple(getattr(self, "_canvas", DEFAULT_CANVAS))
        self._frame_width = float(self.camera.frame.width)
        steps = compile_events_to_steps(events, default_step_duration=0.5)
        self.run_script(steps)

    @staticmethod
    def _viz_key(ev) -> Any:
        # names are not unique; events without a key fall back to the name
        return ev.key if ev.key is not None else ev.name

    def _point(self, p: Sequence[float]) -> np.ndarray:
        return np.array(canvas_to_scene(p, self._canvas, self._frame_width))

    def _line_mobject(self, ev: ElementDrawn) -> VMobject:
        line = VMobject(color=WHITE, stroke_width=4)
        points = [self._point(p) for p in ev.path]
        if len(points) == 1:
            points = points * 2
        line.set_points_as_corners(points)
        return line

    def _box_mobject(self, box) -> Rectangle:
        tl = self._point((box[0], box[1]))
        br = self._point((box[2], box[3]))
        rect = Rectangle(width=abs(br[0] - tl[0]) or 0.05, height=abs(br[1] - tl[1]) or 0.05, color=GREY_B)
        rect.move_to((tl + br) / 2)
        return rect

    def apply_step(self, step: SceneStep) -> Iterable[Animation]:
        anims: List[Animation] = []
        for ev in step.events:
            if isinstance(ev, ElementDrawn):
                anims.extend(self._draw(ev))
            elif isinstance(ev, ElementErased):
                mob = self._element_viz.pop(self._viz_key(ev), None)
                if mob is not None:
                    anims.append(Uncreate(mob) if ev.kind == DrawableKind.LINE.value else FadeOut(mob))
            elif isinstance(ev, EpochShown):
                self._show_epoch(ev.label)
            elif isinstance(ev, ZoomChanged):
                center = self._point((ev.center_x, ev.center_y))
                width = scene_width_for_scale(ev.scale, self._frame_width)
                anims.append(self.camera.frame.animate.move_to(center).set(width=width))
        return anims

    def _draw(self, ev: ElementDrawn) -> List[Animation]:
        if ev.kind == DrawableKind.LINE.value and ev.path:
            mob = self._line_mobject(ev)
            self._element_viz[self._viz_key(ev)] = mob
            return [Create(mob)]
        if ev.kind == DrawableKind.LABEL.value and ev.text:
            mob = Text(ev.text, font_size=14, color=WHITE)
            if ev.box is not None:
                mob.move_to(self._point((ev.box[0], ev.box[3])), aligned_edge=np.array([-1, -1, 0]))
            self._element_viz[self._viz_key(ev)] = mob
            return [FadeIn(mob)]
        if ev.box is not None:
            mob = self._box_mobject(ev.box)
            self._element_viz[self._viz_key(ev)] = mob
            return [FadeIn(mob)]
        return []

    def _show_epoch(self, label: str) -> None:
        if self._epoch_label is not None:
            self.remove(self._epoch_label)
        self._epoch_label = Text(label, font_size=28, color=GREY_B).to_corner(UR)
        self.add(self._epoch_label)

    def run_script(self, script: Iterable[SceneStep]) -> None:
        for step in script:
            anims = list(self.apply_step(step))
            run_time = max(MIN_RUN_TIME, step.duration)
            if anims:
                self.play(*anims, run_time=run_time, rate_func=ease_in_out_cubic)
            else:
                self.wait(run_time)
