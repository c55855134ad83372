"""
Unit tests for JSONL export and replay of recorded events.
"""

import json

from metro_anim.adapters.jsonl import JsonlEventSource, write_events
from metro_anim.models.events import (
    ElementDrawn,
    ElementErased,
    EpochShown,
    InstantPlayed,
    StationDrawn,
    StationMoved,
    ZoomChanged,
)


def test_events_survive_export(tmp_path):
    events = [
        EpochShown("2020"),
        ElementDrawn("L1", "line", 1.0, 2.0, path=[(0.0, 0.0), (100.0, 6.0)], key=0),
        ElementDrawn("T1", "label", 3.0, text="Alex", box=(104.0, 88.0, 132.8, 100.0)),
        StationDrawn("a", 3.0, {"x": (1, -1), "y": (0, 0)}),
        StationMoved("a", 12.5, 20.0, 3.0, 1.5),
        ElementErased("L1", "line", 4.0, 2.0, reverse=True, key=0),
        ZoomChanged(200.0, 94.0, 2.5, 1.0),
        InstantPlayed(2020, 0, 5.0),
    ]
    path = tmp_path / "events.jsonl"

    assert write_events(str(path), events) == len(events)
    replayed = list(JsonlEventSource(str(path)).stream_events())

    assert replayed == events


def test_lines_are_tagged_with_event_type(tmp_path):
    path = tmp_path / "events.jsonl"
    write_events(str(path), [EpochShown("2020")])
    obj = json.loads(path.read_text(encoding="utf-8").strip())
    assert obj == {"type": "EpochShown", "label": "2020"}


def test_unknown_types_and_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "events.jsonl"
    path.write_text(
        '{"type": "Mystery", "x": 1}\n'
        "\n"
        '{"type": "EpochShown", "label": "2021"}\n',
        encoding="utf-8",
    )
    assert list(JsonlEventSource(str(path)).stream_events()) == [EpochShown("2021")]
