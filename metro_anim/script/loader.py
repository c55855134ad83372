"""
YAML diagram loader.

This module compiles a YAML diagram description into a `DiagramSpec` that the
document backend plays.

YAML schema (minimal):

canvas: [0, 0, 800, 600]        # x, y, width, height
stations:
  - id: alex
    x: 400
    y: 300
    dir: n                       # rotation of the track axes (compass name)
    label_dir: e                 # label placement, relative to dir
elements:
  - type: line
    name: U5
    stops: ["alex", "jann +1"]   # "<station> [preferred track]"
    from: "2020 1"               # "<epoch> <second> [noanim|reverse]"
    to: "2022 0 reverse"
    weight: 2
  - type: label
    name: alex-label
    text: Alexanderplatz
    station: alex
    from: "2020 1"
  - type: generic
    name: river
    box: [0, 250, 800, 280]      # x1, y1, x2, y2
    duration: 1.5
    from: "2019 0"

Notes:
- Entries without an id (stations) or a type (elements) are skipped.
- Elements with a malformed instant, stop, box or number are skipped.
- Elements without `from`/`to` are present from the origin sentinel on.
- A document without an `elements` section yields `elements=None`, which the
  document backend reports as a missing element container.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import yaml

from metro_core.enums import DrawableKind
from metro_core.instant import Instant
from metro_core.station import Stop

from metro_anim.models.diagram import DiagramSpec, ElementSpec, StationSpec

logger = logging.getLogger(__name__)

ELEMENT_TYPES = tuple(kind.value for kind in DrawableKind)


def _instant_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def _station_from_dict(entry: Dict[str, Any]) -> Optional[StationSpec]:
    if not isinstance(entry, dict):
        logger.warning("Skipping station entry that is not a mapping: %r", entry)
        return None
    sid = entry.get("id")
    if not sid:
        logger.warning("Skipping station without id: %r", entry)
        return None
    return StationSpec(
        id=str(sid),
        x=float(entry.get("x", 0.0)),
        y=float(entry.get("y", 0.0)),
        dir=str(entry.get("dir", "n")),
        label_dir=str(entry.get("label_dir", "e")),
    )


def _element_from_dict(entry: Dict[str, Any], position: int) -> Optional[ElementSpec]:
    if not isinstance(entry, dict):
        logger.warning("Skipping element entry that is not a mapping: %r", entry)
        return None
    typ = str(entry.get("type", "")).lower()
    if typ not in ELEMENT_TYPES:
        logger.warning("Skipping element with unknown type %r", entry.get("type"))
        return None
    name = str(entry.get("name") or f"{typ}-{position}")
    from_ = _instant_text(entry.get("from"))
    to = _instant_text(entry.get("to"))
    stops = [str(s) for s in entry.get("stops", []) or []]
    box = entry.get("box")
    try:
        Instant.from_string(from_)
        Instant.from_string(to)
        for stop in stops:
            Stop.parse(stop)
        box = tuple(float(v) for v in box) if box else None
        if box is not None and len(box) != 4:
            raise ValueError(f"box needs 4 values, got {len(box)}")
        weight = float(entry.get("weight", 1.0))
        duration = float(entry.get("duration", 0.0))
    except (TypeError, ValueError) as exc:
        logger.warning("Skipping malformed element %r: %s", name, exc)
        return None
    return ElementSpec(
        type=typ,
        name=name,
        from_=from_,
        to=to,
        stops=stops,
        weight=weight,
        text=str(entry.get("text", "")),
        station=entry.get("station"),
        box=box,
        duration=duration,
    )


def compile_from_dict(spec: Dict[str, Any]) -> DiagramSpec:
    """
    Compile a YAML-parsed dictionary into a `DiagramSpec`.

    Args:
        spec: Parsed YAML dictionary

    Returns:
        DiagramSpec: The compiled diagram
    """
    canvas = spec.get("canvas") or [0, 0, 800, 600]
    stations: List[StationSpec] = []
    for entry in spec.get("stations", []) or []:
        station = _station_from_dict(entry)
        if station is not None:
            stations.append(station)

    elements: Optional[List[ElementSpec]] = None
    if "elements" in spec:
        elements = []
        for i, entry in enumerate(spec.get("elements") or []):
            element = _element_from_dict(entry, i)
            if element is not None:
                elements.append(element)

    return DiagramSpec(
        canvas=tuple(float(v) for v in canvas),
        stations=stations,
        elements=elements,
    )


def compile_from_yaml(yaml_text: str) -> DiagramSpec:
    """Compile from YAML text into a `DiagramSpec`."""
    data = yaml.safe_load(yaml_text) or {}
    if not isinstance(data, dict):
        raise ValueError("diagram document must be a mapping")
    return compile_from_dict(data)


def compile_from_file(path: str) -> DiagramSpec:
    """Compile from a YAML file path into a `DiagramSpec`."""
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return compile_from_yaml(txt)
