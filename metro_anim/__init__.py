"""
Metro map animation package.

This package provides:
- A YAML diagram loader
- A document rendering backend that records playback events
- JSONL export/import of recorded events
- The playback loop and an event-to-scene-step compiler
- A Manim scene replaying recorded playback, and the command line runner
"""

__all__ = [
    # Subpackages will be imported lazily by users
]
