import math

import pytest

from tilerogue.ui.geometry import PointF, QuadF, SizeF


def test_point_zero():
    assert PointF.zero().is_zero()
    assert not PointF(0.0, 1.0).is_zero()


@pytest.mark.parametrize("x, y", [(math.inf, 0.0), (0.0, math.nan), (-math.inf, 1.0)])
def test_point_invalid_when_not_finite(x, y):
    assert not PointF(x, y).is_valid()


def test_point_valid():
    assert PointF(-3.5, 2.0).is_valid()


def test_quad_zero_and_validity():
    zero = QuadF.zero()
    assert zero.is_zero()
    assert zero.is_empty()
    assert not zero.is_valid()
    assert QuadF(0.0, 0.0, 1.0, 1.0).is_valid()


def test_quad_area():
    assert QuadF(5.0, 5.0, 2.0, 3.0).area() == 6.0
    assert QuadF(0.0, 0.0, -2.0, 3.0).area() == 0.0


def test_quad_contains_half_open():
    q = QuadF(10.0, 20.0, 5.0, 5.0)
    assert q.contains(10.0, 20.0)
    assert q.contains(14.9, 24.9)
    assert not q.contains(15.0, 22.0)
    assert not q.contains(12.0, 25.0)
    assert not q.contains(9.9, 22.0)


def test_size_zero_and_validity():
    assert SizeF.zero().is_zero()
    assert not SizeF.zero().is_valid()
    assert SizeF(1.0, 2.0).is_valid()
    assert not SizeF(1.0, 0.0).is_valid()


def test_size_to_quad_round_trip():
    size = SizeF(7.0, 8.0)
    pos = PointF(1.5, 2.5)
    quad = size.to_quad(pos)
    assert quad == QuadF(1.5, 2.5, 7.0, 8.0)
    assert quad.contains(pos.x, pos.y)


def test_geometry_is_mutable():
    q = QuadF.zero()
    q.y = 10.0
    assert q == QuadF(0.0, 10.0, 0.0, 0.0)