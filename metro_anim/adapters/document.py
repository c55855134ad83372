from __future__ import annotations

import logging
from typing import Dict, List, Optional

from metro_core.adapters import (
    BoundaryProvider,
    GenericAdapter,
    LabelAdapter,
    LineAdapter,
    NetworkAdapter,
    StationAdapter,
)
from metro_core.drawables import GenericTimedDrawable, Label, Line, TimedDrawable
from metro_core.enums import DrawableKind
from metro_core.geometry import BoundingBox, Rotation, Vector
from metro_core.instant import Instant
from metro_core.network import Network
from metro_core.station import Station, Stop

from metro_anim.models.diagram import DiagramSpec, ElementSpec, StationSpec
from metro_anim.models.events import (
    ElementDrawn,
    ElementErased,
    EpochShown,
    Event,
    StationDrawn,
    StationMoved,
    ZoomChanged,
)

logger = logging.getLogger(__name__)

LABEL_FONT_SIZE = 12.0
LABEL_CHAR_WIDTH_RATIO = 0.6


class EventRecorder:
    """Collects the events a document backend emits during playback."""

    def __init__(self):
        self.events: List[Event] = []

    def record(self, event: Event) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class DocumentStation(StationAdapter):
    def __init__(self, spec: StationSpec, recorder: EventRecorder):
        self.id = spec.id
        self.base_coords = Vector(spec.x, spec.y)
        self.rotation = Rotation.from_name(spec.dir)
        self.label_dir = Rotation.from_name(spec.label_dir)
        self.recorder = recorder

    def draw(self, delay_seconds: float, get_position_boundaries: BoundaryProvider) -> None:
        self.recorder.record(StationDrawn(self.id, delay_seconds, dict(get_position_boundaries())))

    def move(self, delay_seconds: float, animation_seconds: float, coords: Vector) -> None:
        self.recorder.record(StationMoved(self.id, coords.x, coords.y, delay_seconds, animation_seconds))


class _DocumentElement:
    """Shared fields of the element adapters; `key` is the position in the diagram."""

    kind: DrawableKind = DrawableKind.GENERIC

    def __init__(self, spec: ElementSpec, key: int, recorder: EventRecorder):
        self.spec = spec
        self.key = key
        self.name = spec.name
        self.from_ = Instant.from_string(spec.from_)
        self.to = Instant.from_string(spec.to)
        self.recorder = recorder
        if spec.box:
            x1, y1, x2, y2 = spec.box
            self.bounding_box = BoundingBox.from_points([Vector(x1, y1), Vector(x2, y2)])
        else:
            self.bounding_box = BoundingBox(Vector.NULL, Vector.NULL)


class DocumentLine(_DocumentElement, LineAdapter):
    kind = DrawableKind.LINE

    def __init__(self, spec: ElementSpec, key: int, recorder: EventRecorder):
        super().__init__(spec, key, recorder)
        self.stops = [Stop.parse(s) for s in spec.stops]
        self.weight = spec.weight

    def draw(self, delay_seconds: float, animation_seconds: float, path: List[Vector], length: float) -> None:
        self.recorder.record(ElementDrawn(
            self.name, self.kind.value, delay_seconds, animation_seconds,
            path=[(p.x, p.y) for p in path], key=self.key,
        ))

    def erase(self, delay_seconds: float, animation_seconds: float, reverse: bool, length: float) -> None:
        self.recorder.record(ElementErased(self.name, self.kind.value, delay_seconds, animation_seconds, reverse, key=self.key))


class DocumentLabel(_DocumentElement, LabelAdapter):
    kind = DrawableKind.LABEL

    def __init__(self, spec: ElementSpec, key: int, recorder: EventRecorder):
        super().__init__(spec, key, recorder)
        self.text = spec.text or spec.name
        self.for_station = spec.station

    def draw(self, delay_seconds: float, text_coords: Optional[Vector], label_dir: Rotation) -> None:
        if text_coords is not None:
            width = len(self.text) * LABEL_FONT_SIZE * LABEL_CHAR_WIDTH_RATIO
            self.bounding_box = BoundingBox(
                Vector(text_coords.x, text_coords.y - LABEL_FONT_SIZE),
                Vector(text_coords.x + width, text_coords.y),
            )
        box = self.bounding_box
        self.recorder.record(ElementDrawn(
            self.name, self.kind.value, delay_seconds, 0.0, text=self.text,
            box=None if box.is_null() else (box.tl.x, box.tl.y, box.br.x, box.br.y), key=self.key,
        ))

    def erase(self, delay_seconds: float) -> None:
        self.recorder.record(ElementErased(self.name, self.kind.value, delay_seconds, key=self.key))


class DocumentGeneric(_DocumentElement, GenericAdapter):
    kind = DrawableKind.GENERIC

    def draw(self, delay_seconds: float, animate: bool) -> float:
        duration = self.spec.duration if animate else 0.0
        box = self.bounding_box
        self.recorder.record(ElementDrawn(
            self.name, self.kind.value, delay_seconds, duration,
            box=None if box.is_null() else (box.tl.x, box.tl.y, box.br.x, box.br.y), key=self.key,
        ))
        return duration

    def erase(self, delay_seconds: float, animate: bool, reverse: bool) -> float:
        duration = self.spec.duration if animate else 0.0
        self.recorder.record(ElementErased(self.name, self.kind.value, delay_seconds, duration, reverse, key=self.key))
        return duration


class DocumentNetwork(NetworkAdapter):
    """
    Rendering backend over a `DiagramSpec`.

    Nothing is painted: every backend call is recorded as an event, which can
    be exported to JSONL or replayed by a Manim scene.
    """

    def __init__(self, spec: DiagramSpec, recorder: EventRecorder | None = None):
        self.spec = spec
        self.recorder = recorder or EventRecorder()
        self._station_specs: Dict[str, StationSpec] = {s.id: s for s in spec.stations}
        self.current_epoch: Optional[str] = None
        self.current_zoom_center: Vector = self.canvas_size.center
        self.current_zoom_scale: float = 1.0

    @property
    def canvas_size(self) -> BoundingBox:
        x, y, w, h = self.spec.canvas
        return BoundingBox(Vector(x, y), Vector(x + w, y + h))

    def initialize(self, network: Network) -> None:
        if self.spec.elements is None:
            logger.error('Please define the "elements" section.')
            return
        for key, element_spec in enumerate(self.spec.elements):
            network.add_to_index(self._mirror_element(element_spec, key, network))

    def _mirror_element(self, spec: ElementSpec, key: int, network: Network) -> TimedDrawable:
        kind = DrawableKind(spec.type)
        if kind is DrawableKind.LINE:
            return Line(DocumentLine(spec, key, self.recorder), network, network.config)
        if kind is DrawableKind.LABEL:
            return Label(DocumentLabel(spec, key, self.recorder), network)
        return GenericTimedDrawable(DocumentGeneric(spec, key, self.recorder))

    def station_by_id(self, station_id: str) -> Optional[Station]:
        spec = self._station_specs.get(station_id)
        if spec is None:
            return None
        return Station(DocumentStation(spec, self.recorder))

    def create_virtual_stop(self, station_id: str, base_coords: Vector, rotation: Rotation) -> Station:
        spec = StationSpec(station_id, base_coords.x, base_coords.y, rotation.name)
        self._station_specs[station_id] = spec
        return Station(DocumentStation(spec, self.recorder))

    def draw_epoch(self, epoch: str) -> None:
        self.current_epoch = epoch
        self.recorder.record(EpochShown(epoch))

    def zoom_to(self, zoom_center: Vector, zoom_scale: float, animation_duration_seconds: float) -> None:
        logger.debug("Zoom to %s x%.2f over %.2fs", zoom_center, zoom_scale, animation_duration_seconds)
        self.current_zoom_center = zoom_center
        self.current_zoom_scale = zoom_scale
        self.recorder.record(ZoomChanged(zoom_center.x, zoom_center.y, zoom_scale, animation_duration_seconds))
