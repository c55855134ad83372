from __future__ import annotations

import json
from dataclasses import asdict
from typing import Iterable, Iterator

from metro_anim.models.events import (
    Event,
    InstantPlayed,
    EpochShown,
    ElementDrawn,
    ElementErased,
    StationDrawn,
    StationMoved,
    ZoomChanged,
)


_TYPE_MAP = {
    "InstantPlayed": InstantPlayed,
    "EpochShown": EpochShown,
    "ElementDrawn": ElementDrawn,
    "ElementErased": ElementErased,
    "StationDrawn": StationDrawn,
    "StationMoved": StationMoved,
    "ZoomChanged": ZoomChanged,
}


def write_events(path: str, events: Iterable[Event]) -> int:
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for ev in events:
            obj = {"type": type(ev).__name__, **asdict(ev)}
            f.write(json.dumps(obj) + "\n")
            count += 1
    return count


class JsonlEventSource:
    def __init__(self, path: str):
        self.path = path

    def stream_events(self) -> Iterator[Event]:
        with open(self.path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                obj = json.loads(line)
                typ = obj.pop("type", None)
                cls = _TYPE_MAP.get(typ)
                if cls is None:
                    continue
                if "path" in obj:
                    obj["path"] = [tuple(p) for p in obj["path"]]
                if obj.get("box") is not None:
                    obj["box"] = tuple(obj["box"])
                if "boundaries" in obj:
                    obj["boundaries"] = {k: tuple(v) for k, v in obj["boundaries"].items()}
                yield cls(**obj)
