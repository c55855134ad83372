"""
Core enumerations for the transit-map playback engine.

This module defines the small closed vocabularies shared by the timeline,
the drawables and the station geometry model.
"""

from enum import Enum


class InstantFlag(Enum):
    """
    Metadata carried by an Instant.

    Flags never take part in ordering or equality; they only modify how the
    transition happening at that instant is animated:
    - NONE: Regular transition
    - NOANIM: Force animation off for this transition
    - REVERSE: Erase in the reverse drawing direction
    """

    NONE = ""
    """Regular transition."""

    NOANIM = "noanim"
    """Suppress animation for transitions at this instant."""

    REVERSE = "reverse"
    """Erase elements retiring at this instant in reverse direction."""


class DrawableKind(Enum):
    """
    Closed set of timed drawable variants.

    - LINE: A path between stations; contributes an edge to the layout relaxer
    - LABEL: A text annotation, usually attached to a station
    - GENERIC: Any other element the backend mirrors
    """

    LINE = "line"
    """Path between stations."""

    LABEL = "label"
    """Text annotation."""

    GENERIC = "generic"
    """Catch-all element."""


class Axis(str, Enum):
    """The two orthogonal track axes of a station."""

    X = "x"
    Y = "y"
