"""Tests for low-level geometry helpers."""

import numpy as np
import pytest

from planar_ik.geometry import ORIGIN, Geometry, Point2D


class TestHeading:
    def test_zero_degrees_points_right(self):
        h = Geometry.heading(0.0)
        assert h.x == pytest.approx(1.0)
        assert h.y == pytest.approx(0.0, abs=1e-12)

    def test_ninety_degrees_points_up(self):
        h = Geometry.heading(90.0)
        assert h.x == pytest.approx(0.0, abs=1e-12)
        assert h.y == pytest.approx(1.0)


    def test_array_of_angles_gives_rows(self):
        rows = Geometry.heading(np.array([0.0, 90.0, 180.0]))
        assert rows.shape == (3, 2)
        np.testing.assert_allclose(rows, [[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0]], atol=1e-12)

    def test_empty_array(self):
        assert Geometry.heading(np.array([])).shape == (0, 2)


class TestDistanceAndClamp:
    def test_distance(self):
        assert Geometry.distance(ORIGIN, (3.0, 4.0)) == pytest.approx(5.0)

    def test_point_is_a_tuple(self):
        p = Point2D(1.0, 2.0)
        assert p == (1.0, 2.0)
        assert p.x == 1.0 and p.y == 2.0

    def test_clamp_inside_radius_unchanged(self):
        assert Geometry.clamp_to_radius((30.0, 40.0), 100.0) == (30.0, 40.0)

    def test_clamp_outside_radius_keeps_direction(self):
        p = Geometry.clamp_to_radius((300.0, 400.0), 100.0)
        assert p.x == pytest.approx(60.0)
        assert p.y == pytest.approx(80.0)
