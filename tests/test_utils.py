import pytest

from pathfinding.utils import constrain, in_direction, move_in_direction, uint_sqrt


def test_uint_sqrt():
    assert uint_sqrt(100) == 10
    assert uint_sqrt(10) is None
    assert uint_sqrt(0) == 0


def test_uint_sqrt_negative():
    with pytest.raises(ValueError):
        uint_sqrt(-4)


def test_move_in_direction_doc():
    board = (8, 8)
    assert move_in_direction((5, 5), (-1, -2), board) == (4, 3)
    assert move_in_direction((1, 1), (-1, -2), board) is None


def test_in_direction_doc():
    assert list(in_direction((0, 0), (1, 2), (8, 8))) == [(1, 2), (2, 4), (3, 6)]


def test_in_direction_start_oob():
    assert move_in_direction((8, 8), (-1, -1), (8, 8)) is None
    assert next(in_direction((8, 8), (-1, -1), (8, 8)), None) is None


def test_in_direction_end_oob():
    assert move_in_direction((0, 0), (-1, -1), (8, 8)) is None
    assert next(in_direction((0, 0), (-1, -1), (8, 8)), None) is None
    assert move_in_direction((7, 0), (1, -1), (8, 8)) is None
    assert next(in_direction((0, 7), (-1, 1), (8, 8)), None) is None


def test_in_direction_invalid():
    assert next(in_direction((0, 8), (-1, 1), (8, 8)), None) is None
    assert next(in_direction((8, 0), (-1, 1), (8, 8)), None) is None
    assert next(in_direction((0, 7), (0, 0), (8, 8)), None) is None


def test_in_direction_valid():
    assert move_in_direction((1, 1), (1, 3), (2, 4)) is None
    assert list(in_direction((1, 1), (1, 3), (8, 8))) == [(2, 4), (3, 7)]


@pytest.mark.parametrize(
    "value, upper, expected",
    [(5, 7, 5), (30, 7, 2), (-30, 7, 5), (0, 7, 0), (-7, 7, 0)],
)
def test_constrain(value, upper, expected):
    assert constrain(value, upper) == expected


def test_constrain_zero_upper():
    with pytest.raises(ZeroDivisionError):
        constrain(3, 0)