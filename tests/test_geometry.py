"""
Unit tests for the planar geometry primitives.
"""

import math

import pytest

from metro_core.geometry import BoundingBox, Rotation, Vector, approx_equals


class TestRotation:
    def test_normalization(self):
        assert Rotation(270).degrees == -90
        assert Rotation(-180).degrees == 180
        assert Rotation(540).degrees == 180
        assert Rotation(-45).degrees == -45

    def test_from_name_and_name(self):
        assert Rotation.from_name("e").degrees == 90
        assert Rotation.from_name("SW").degrees == -135
        assert Rotation.from_name(None).degrees == 0
        assert Rotation(135).name == "se"
        assert Rotation(-90).name == "w"

    def test_delta_is_signed_smallest(self):
        assert Rotation(170).delta(Rotation(-170)).degrees == 20
        assert Rotation(-170).delta(Rotation(170)).degrees == -20
        assert Rotation(0).delta(Rotation(90)).degrees == 90

    def test_vertical(self):
        assert Rotation(0).is_vertical()
        assert Rotation(180).is_vertical()
        assert not Rotation(90).is_vertical()


class TestVector:
    def test_rotate_north_to_east(self):
        east = Vector.UNIT.rotate(Rotation(90))
        assert east.x == pytest.approx(1.0)
        assert east.y == pytest.approx(0.0, abs=1e-12)

    def test_inclination(self):
        assert Vector(1, 0).inclination().degrees == pytest.approx(90)
        assert Vector(0, 1).inclination().degrees == pytest.approx(180)
        assert Vector(-1, -1).inclination().degrees == pytest.approx(-45)
        assert Vector.NULL.inclination().degrees == 0

    def test_arithmetic(self):
        a = Vector(1, 2)
        b = Vector(4, 6)
        assert a.add(b) == Vector(5, 8)
        assert a.delta(b) == Vector(3, 4)
        assert a.delta(b).length == 5
        assert a.between(b, 0.5) == Vector(2.5, 4)


class TestBoundingBox:
    def test_from_points(self):
        box = BoundingBox.from_points([Vector(3, 1), Vector(-1, 4), Vector(2, 2)])
        assert box.tl == Vector(-1, 1)
        assert box.br == Vector(3, 4)
        assert box.width == 4
        assert box.height == 3
        assert box.center == Vector(1, 2.5)

    def test_null_box_is_neutral_for_union(self):
        null = BoundingBox(Vector.NULL, Vector.NULL)
        box = BoundingBox(Vector(10, 10), Vector(20, 30))
        assert null.is_null()
        assert null.union(box) == box
        assert box.union(null) == box
        assert box.union(BoundingBox(Vector(0, 15), Vector(12, 40))) == BoundingBox(Vector(0, 10), Vector(20, 40))


def test_approx_equals_tolerance():
    assert approx_equals(0.0, 0.00001)
    assert not approx_equals(0.0, 0.001)
    assert approx_equals(math.sin(math.pi), 0.0)
