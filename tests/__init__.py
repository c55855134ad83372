"""
Tests Package.

This package contains test suites for the transit-map playback engine,
including unit tests for the timeline index, station geometry and the
playback scheduler, and integration tests driving the document backend and
the command line runner.
"""

# Tests Package
