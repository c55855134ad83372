"""
Metro Core Package.

This package contains the temporal playback engine of the animated transit
map, including:

- Timeline coordinates (Instant) and the two-level timeline index
- Station geometry (tracks on orthogonal axes, boundaries, projection)
- Timed drawables (lines, labels, generic elements)
- The playback scheduler (Network) with erase batching and delay accounting
- Viewport framing (Zoomer) and layout relaxation (Gravitator)

Rendering is delegated to a backend implementing the contracts in
`metro_core.adapters`.
"""

__version__ = "0.1.0"

from .enums import Axis, DrawableKind, InstantFlag
from .config import PlaybackConfig
from .geometry import BoundingBox, Rotation, Vector
from .instant import Instant
from .station import PreferredTrack, Station, Stop
from .drawables import GenericTimedDrawable, Label, Line, TimedDrawable
from .timeline import TimelineIndex
from .zoomer import Zoomer
from .gravitator import Gravitator
from .network import Network
