#!/usr/bin/env python3
"""
Metro animation CLI

Usage modes:
- Default run: load a YAML diagram, play its whole timeline, print a summary
- Export: write the recorded playback events as JSONL
- Utility: list the timeline's instants, show version
- Render: replay the playback through the Manim scene (needs the anim extra)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Tuple

import yaml

from metro_core import __version__
from metro_core.config import PlaybackConfig
from metro_core.instant import Instant
from metro_core.network import Network

from metro_anim.adapters.document import DocumentNetwork, EventRecorder
from metro_anim.adapters.jsonl import write_events
from metro_anim.models.diagram import DiagramSpec
from metro_anim.runner.player import play
from metro_anim.script.loader import compile_from_file


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Play an animated transit map diagram and dump its playback",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Utilities / meta
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    p.add_argument("--list-instants", action="store_true", help="Print the timeline's instants and exit")

    # Primary input
    p.add_argument("yaml", nargs="?", help="Path to YAML diagram")

    # Playback
    p.add_argument("--no-animate", action="store_true", help="Play without animations")
    p.add_argument("--start", type=str, default="", help="Instant to start from, e.g. '2020 1'")
    p.add_argument("--max-instants", type=int, default=None, help="Stop after this many instants")

    # Config overrides
    p.add_argument("--zoom-duration", type=float, default=None, help="Viewport animation seconds")
    p.add_argument("--line-speed", type=float, default=None, help="Line drawing speed (units/s)")
    p.add_argument("--gravitate", action="store_true", help="Enable layout relaxation")

    # Output
    p.add_argument("--out", type=str, default="", help="Optional output JSON summary path")
    p.add_argument("--events-out", type=str, default="", help="Optional JSONL path for recorded events")
    p.add_argument("--render", action="store_true", help="Render the playback with Manim")

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> PlaybackConfig:
    cfg = PlaybackConfig()
    if args.zoom_duration is not None:
        cfg.zoom_duration = float(args.zoom_duration)
    if args.line_speed is not None:
        cfg.line_speed = float(args.line_speed)
    cfg.gravitator_enabled = args.gravitate
    return cfg


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def build_network(spec: DiagramSpec, config: PlaybackConfig | None = None) -> Tuple[Network, EventRecorder]:
    recorder = EventRecorder()
    network = Network(DocumentNetwork(spec, recorder), config)
    network.initialize()
    return network, recorder


def render_events(spec: DiagramSpec, events) -> None:
    from metro_anim.scenes.metro_scene import MetroMapScene

    scene = MetroMapScene()
    setattr(scene, "_events", list(events))
    setattr(scene, "_canvas", spec.canvas)
    scene.render()


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.version:
        print(__version__)
        return 0

    if not args.yaml:
        print("error: missing YAML path", file=sys.stderr)
        return 2

    logging.info("Loading diagram from %s", args.yaml)
    try:
        spec = compile_from_file(args.yaml)
    except OSError as exc:
        print(f"error: cannot read {args.yaml}: {exc}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError) as exc:
        print(f"error: invalid diagram {args.yaml}: {exc}", file=sys.stderr)
        return 2

    cfg = build_config(args)
    try:
        network, recorder = build_network(spec, cfg)
    except ValueError as exc:
        print(f"error: invalid diagram {args.yaml}: {exc}", file=sys.stderr)
        return 2

    if args.list_instants:
        print(json.dumps([str(i) for i in network.index.instants()], indent=2))
        return 0

    try:
        start = Instant.from_string(args.start) if args.start else None
    except ValueError as exc:
        print(f"error: invalid --start {args.start!r}: {exc}", file=sys.stderr)
        return 2
    steps = play(
        network,
        animate=not args.no_animate,
        start=start,
        max_instants=args.max_instants,
        recorder=recorder,
    )

    if args.events_out:
        count = write_events(args.events_out, recorder.events)
        logging.info("Wrote %d events to %s", count, args.events_out)

    summary: Dict[str, Any] = {
        "instants": [{"instant": str(s.instant), "delay": round(s.delay, 4)} for s in steps],
        "total_delay": round(sum(s.delay for s in steps), 4),
        "events": len(recorder.events),
    }
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2)
    else:
        print(json.dumps(summary, indent=2))

    if args.render:
        render_events(spec, recorder.events)

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
