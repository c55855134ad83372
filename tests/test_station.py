"""
Unit tests for the station geometry model.

Covers the per-axis track registries, name-based lookup, track assignment,
boundary conventions, station size and rotated track projection.
"""

import pytest

from metro_core.adapters import StationAdapter
from metro_core.enums import Axis
from metro_core.geometry import Rotation, Vector
from metro_core.station import PreferredTrack, Station, Stop


class FakeStationAdapter(StationAdapter):
    def __init__(self, station_id='s', coords=Vector(0, 0), rotation=Rotation(0), label_dir=Rotation(90)):
        self.id = station_id
        self.base_coords = coords
        self.rotation = rotation
        self.label_dir = label_dir
        self.drawn = []

    def draw(self, delay_seconds, get_position_boundaries):
        self.drawn.append((delay_seconds, get_position_boundaries()))


class FakeLine:
    def __init__(self, name):
        self.name = name


def make_station(**kwargs) -> Station:
    return Station(FakeStationAdapter(**kwargs))


class TestRegistry:
    def test_station_reads_adapter_once(self):
        adapter = FakeStationAdapter('alex', Vector(10, 20), Rotation(45), Rotation(-90))
        station = Station(adapter)
        assert station.id == 'alex'
        assert station.base_coords == Vector(10, 20)
        assert station.rotation.degrees == 45
        assert station.label_dir.degrees == -90

    def test_add_and_remove_line_by_identity(self):
        station = make_station()
        u1 = FakeLine('U1')
        u1_twin = FakeLine('U1')
        station.add_line(u1, 'x', 0)
        station.add_line(u1_twin, 'y', 2)

        station.remove_line(u1)

        assert station.lines_at_axis('x') == []
        assert station.lines_at_axis('y') == [(u1_twin, 2)]

    def test_line_registered_once_per_axis(self):
        station = make_station()
        u1 = FakeLine('U1')
        station.add_line(u1, 'x', 0)
        station.add_line(u1, 'x', 3)
        assert station.lines_at_axis(Axis.X) == [(u1, 0)]

    def test_lookup_by_name_prefers_x_axis(self):
        station = make_station()
        on_y = FakeLine('U1')
        on_x = FakeLine('U1')
        station.add_line(on_y, 'y', -1)
        station.add_line(on_x, 'x', 2)

        found = station.axis_and_track_for_existing_line('U1')

        assert found is not None
        assert found.line is on_x
        assert found.axis == 'x'
        assert found.track == 2

    def test_lookup_miss_returns_none(self):
        station = make_station()
        station.add_line(FakeLine('U1'), 'x', 0)
        assert station.axis_and_track_for_existing_line('U9') is None


class TestTrackAssignment:
    def _station_with_x_tracks(self, tracks):
        station = make_station()
        for i, track in enumerate(tracks):
            station.add_line(FakeLine(f'L{i}'), 'x', track)
        return station

    def test_positive_and_negative_grow_outward(self):
        station = self._station_with_x_tracks([-2, -1, 0, 1, 3])
        assert station.assign_track('x', PreferredTrack.parse('+')) == 4
        assert station.assign_track('x', PreferredTrack.parse('-')) == -3

    def test_explicit_track_used_verbatim(self):
        station = self._station_with_x_tracks([0, 1])
        assert station.assign_track('x', PreferredTrack.parse('+1')) == 1
        assert station.assign_track('x', PreferredTrack.parse('-5')) == -5

    def test_first_line_lands_on_center(self):
        station = make_station()
        assert station.assign_track('y', PreferredTrack.parse('+')) == 0
        assert station.assign_track('y', PreferredTrack.parse('-')) == 0


class TestBoundaries:
    def test_empty_axis_is_inverted_interval(self):
        station = make_station()
        station.add_line(FakeLine('U1'), 'x', 2)
        boundaries = station.position_boundaries()
        assert boundaries['y'] == (1, -1)
        assert boundaries['x'] == (0, 2)

    def test_station_size_on_empty_axis(self):
        station = make_station()
        assert station.station_size_for_axis('y', 1) == pytest.approx(-1 * 6 + 10)
        assert station.station_size_for_axis('y', -0.5) == pytest.approx(1 * 6 - 10)

    def test_station_size_uses_side_of_travel(self):
        station = make_station()
        station.add_line(FakeLine('A'), 'x', -2)
        station.add_line(FakeLine('B'), 'x', 3)
        assert station.station_size_for_axis('x', 1) == pytest.approx(3 * 6 + 10)
        assert station.station_size_for_axis('x', -1) == pytest.approx(-2 * 6 - 10)

    def test_station_size_zero_for_null_direction(self):
        station = make_station()
        assert station.station_size_for_axis('x', 0) == 0
        assert station.station_size_for_axis('x', 1e-9) == 0

    def test_draw_passes_live_boundary_provider(self):
        adapter = FakeStationAdapter()
        station = Station(adapter)
        station.add_line(FakeLine('U1'), 'y', -1)
        station.draw(2.5)
        assert adapter.drawn == [(2.5, {'x': (1, -1), 'y': (-1, 0)})]


class TestRotatedTrackCoordinates:
    def test_vertical_travel_offsets_on_x(self):
        station = make_station(coords=Vector(100, 100))
        point = station.rotated_track_coordinates(Rotation(0), 2)
        assert point.x == pytest.approx(112)
        assert point.y == pytest.approx(100)

    def test_horizontal_travel_offsets_on_y(self):
        station = make_station(coords=Vector(100, 100))
        point = station.rotated_track_coordinates(Rotation(90), 2)
        assert point.x == pytest.approx(100)
        assert point.y == pytest.approx(112)

    def test_offset_follows_station_rotation(self):
        station = make_station(coords=Vector(100, 100), rotation=Rotation(90))
        point = station.rotated_track_coordinates(Rotation(180), 1)
        assert point.x == pytest.approx(100)
        assert point.y == pytest.approx(106)


class TestStopNotation:
    def test_preferred_track_parsing(self):
        assert PreferredTrack.parse('').is_positive()
        assert not PreferredTrack.parse('').has_track_number()
        assert not PreferredTrack.parse('-').is_positive()
        assert PreferredTrack.parse('-2').track_number == -2
        assert PreferredTrack.parse('3').track_number == 3

    def test_stop_parsing(self):
        assert Stop.parse('alex') == Stop('alex', PreferredTrack('+'))
        assert Stop.parse('jann -1') == Stop('jann', PreferredTrack('-1'))
        assert Stop.parse('ostb -').preferred_track == PreferredTrack('-')

    def test_malformed_stop_raises(self):
        with pytest.raises(ValueError):
            Stop.parse('')
