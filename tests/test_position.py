import pytest

from tilerogue.position import POSITION_INVALID, Position


def test_negative_coordinates_rejected():
    with pytest.raises(ValueError):
        Position(-1, 0)
    with pytest.raises(ValueError):
        Position(0, -1)


def test_is_valid_bounds():
    p = Position(3, 4)
    assert p.is_valid(4, 5)
    assert not p.is_valid(3, 5)
    assert not p.is_valid(4, 4)


def test_invalid_position_is_never_valid():
    assert not POSITION_INVALID.is_valid(1000, 1000)


def test_distance_pythagorean():
    assert Position(0, 0).distance_to(Position(3, 4)) == 5


def test_distance_symmetric_and_zero():
    a, b = Position(2, 7), Position(9, 1)
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0


def test_distance_rounds_down():
    a, b = Position(0, 0), Position(1, 1)
    assert a.distance_to(b) == 1
    assert not a.in_range(b, 1)


def test_in_range_consistent_with_distance():
    a, b = Position(0, 0), Position(3, 4)
    d = a.distance_to(b)
    assert a.in_range(b, d)
    assert not a.in_range(b, d - 1)


def test_cardinal_round_trips():
    p = Position(5, 5)
    assert p.north().south() == p
    assert p.east().west() == p
    assert p.south_east().north_west() == p


def test_edges_return_none():
    origin = Position(0, 0)
    assert origin.north() is None
    assert origin.west() is None
    assert origin.north_west() is None
    assert origin.south_west() is None
    assert origin.north_east() is None


def test_north_east_at_top_row_is_invalid():
    with pytest.raises(ValueError):
        Position(5, 0).north_east()


def test_positions_around_origin():
    origin = Position(0, 0)
    assert origin.positions_around() == [
        origin.east(),
        origin.south(),
        origin.south_east(),
    ]


def test_positions_hashable_and_equal():
    assert {Position(1, 2), Position(1, 2)} == {Position(1, 2)}