"""
Tests for the metro-anim command line runner, using the bundled sample diagram.
"""

import json
import os

from metro_anim.adapters.jsonl import JsonlEventSource
from metro_anim.models.events import InstantPlayed
from metro_anim.runner.render import build_config, main, parse_args

SAMPLE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "diagrams", "sample.yaml")
SAMPLE_INSTANTS = ["0 0", "2020 1", "2020 2", "2021 0", "2022 0"]


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "0.1.0"


def test_missing_yaml_argument(capsys):
    assert main([]) == 2
    assert "missing YAML path" in capsys.readouterr().err


def test_unreadable_yaml(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_list_instants(capsys):
    assert main([SAMPLE, "--list-instants"]) == 0
    assert json.loads(capsys.readouterr().out) == SAMPLE_INSTANTS


def test_summary_on_stdout(capsys):
    assert main([SAMPLE]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert [s["instant"] for s in summary["instants"]] == SAMPLE_INSTANTS
    assert summary["total_delay"] == round(sum(s["delay"] for s in summary["instants"]), 4)
    assert summary["events"] > 0


def test_start_and_max_instants(capsys):
    assert main([SAMPLE, "--start", "2020 2", "--max-instants", "2"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert [s["instant"] for s in summary["instants"]] == ["2020 2", "2021 0"]


def test_outputs_to_files(tmp_path):
    out = tmp_path / "summary.json"
    events_out = tmp_path / "events.jsonl"

    assert main([SAMPLE, "--no-animate", "--out", str(out), "--events-out", str(events_out)]) == 0

    summary = json.loads(out.read_text(encoding="utf-8"))
    events = list(JsonlEventSource(str(events_out)).stream_events())
    assert summary["events"] == len(events)
    assert sum(isinstance(e, InstantPlayed) for e in events) == len(SAMPLE_INSTANTS)
    # without animation every step costs exactly the zoom duration
    assert all(s["delay"] == 1.0 for s in summary["instants"])


def test_build_config_overrides():
    args = parse_args(["x.yaml", "--zoom-duration", "0.5", "--line-speed", "250", "--gravitate"])
    cfg = build_config(args)
    assert cfg.zoom_duration == 0.5
    assert cfg.line_speed == 250.0
    assert cfg.gravitator_enabled is True


def _write(tmp_path, text):
    path = tmp_path / "diagram.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_unparsable_yaml_exits_cleanly(tmp_path, capsys):
    assert main([_write(tmp_path, "elements: [\n")]) == 2
    assert "invalid diagram" in capsys.readouterr().err


def test_non_mapping_document_exits_cleanly(tmp_path, capsys):
    assert main([_write(tmp_path, "- a\n- b\n")]) == 2
    assert "must be a mapping" in capsys.readouterr().err


def test_non_numeric_station_coordinate_exits_cleanly(tmp_path, capsys):
    assert main([_write(tmp_path, "stations:\n  - {id: a, x: east, y: 0}\nelements: []\n")]) == 2
    assert "invalid diagram" in capsys.readouterr().err


def test_bad_start_exits_cleanly(capsys):
    assert main([SAMPLE, "--start", "x"]) == 2
    assert "invalid --start" in capsys.readouterr().err


def test_element_with_bad_instant_is_skipped(tmp_path, capsys):
    path = _write(
        tmp_path,
        "elements:\n"
        "  - {type: label, name: good, from: '2020 1'}\n"
        "  - {type: label, name: bad, from: 'spring 2020'}\n",
    )
    assert main([path, "--list-instants"]) == 0
    assert json.loads(capsys.readouterr().out) == ["2020 1"]
