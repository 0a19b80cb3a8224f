import pytest

from pathfinding.matrix import Matrix, matrix
from pathfinding.matrix_base import EmptyRowError, WrongIndexError, WrongLengthError


def square3():
    return Matrix.square_from_vec([1, 2, 3, 4, 5, 6, 7, 8, 9])


def rect():
    return Matrix.from_vec(2, 3, [1, 2, 3, 4, 5, 6])


def test_transpose_square_large():
    m = Matrix.square_from_vec(list(range(100 * 100)))
    m.transpose()
    assert m[(3, 7)] == 7 * 100 + 3
    m.transpose()
    assert m == Matrix.square_from_vec(list(range(100 * 100)))


def test_transpose_non_square_large():
    m = Matrix.from_vec(1000, 10, list(range(100 * 100)))
    m.transpose()
    assert (m.rows, m.columns) == (10, 1000)
    assert m[(4, 250)] == 250 * 10 + 4
    m.transpose()
    assert m == Matrix.from_vec(1000, 10, list(range(100 * 100)))


def test_transposed_rect():
    t = rect().transposed()
    assert list(t) == [[1, 4], [2, 5], [3, 6]]
    assert list(rect()) == [[1, 2, 3], [4, 5, 6]]


def test_transposed_empty_rows_rejected():
    with pytest.raises(ValueError):
        Matrix.new_empty(3).transposed()
    with pytest.raises(ValueError):
        Matrix.new_empty(3).transpose()


def test_rotate_non_square_rejected():
    with pytest.raises(ValueError):
        rect().rotate_cw(1)


def test_rotated_rect():
    assert list(rect().rotated_cw(1)) == [[4, 1], [5, 2], [6, 3]]
    assert list(rect().rotated_cw(2)) == [[6, 5, 4], [3, 2, 1]]
    assert list(rect().rotated_cw(3)) == [[3, 6], [2, 5], [1, 4]]
    assert rect().rotated_cw(4) == rect()
    assert rect().rotated_ccw(1) == rect().rotated_cw(3)


def test_rotated_square_four_times_identity():
    m = square3()
    assert m.rotated_cw(1).rotated_cw(1).rotated_cw(1).rotated_cw(1) == m
    assert m.rotated_ccw(2) == m.rotated_cw(2)


def test_flips():
    assert list(rect().flipped_lr()) == [[3, 2, 1], [6, 5, 4]]
    assert list(rect().flipped_ud()) == [[4, 5, 6], [1, 2, 3]]
    m = square3()
    m.flip_ud()
    assert list(m) == [[7, 8, 9], [4, 5, 6], [1, 2, 3]]


def test_slice():
    s = square3().slice(range(1, 3), range(0, 2))
    assert list(s) == [[4, 5], [7, 8]]


def test_slice_out_of_bounds():
    with pytest.raises(WrongIndexError):
        square3().slice(range(0, 4), range(0, 2))


def test_set_slice_clipped():
    m = Matrix(3, 3, 0)
    m.set_slice((2, 2), Matrix(2, 2, 1))
    assert list(m) == [[0, 0, 0], [0, 0, 0], [0, 0, 1]]
    m.set_slice((0, 1), Matrix.from_vec(1, 2, [5, 6]))
    assert list(m) == [[0, 5, 6], [0, 0, 0], [0, 0, 1]]


def test_neg_and_map():
    assert list(-rect()) == [[-1, -2, -3], [-4, -5, -6]]
    assert list(rect().map(str)) == [["1", "2", "3"], ["4", "5", "6"]]


def test_swap():
    m = Matrix.square_from_vec([1, 2, 10, 20])
    m.swap((0, 0), (0, 1))
    assert m == Matrix.square_from_vec([2, 1, 10, 20])


def test_matrix_helper():
    m1 = matrix([10, 20, 30], [40, 50, 60])
    assert (m1.rows, m1.columns) == (2, 3)
    assert m1 == Matrix.from_vec(2, 3, [10, 20, 30, 40, 50, 60])
    assert matrix().is_empty()


def test_matrix_helper_errors():
    with pytest.raises(WrongLengthError):
        matrix([1, 2], [3])
    with pytest.raises(EmptyRowError):
        matrix([])


GRID = [".#.", ".#.", "..."]


def open_cell(m):
    return lambda pos: m[pos] == "."


def test_bfs_reachable():
    m = Matrix.from_rows(GRID)
    reached = m.bfs_reachable((0, 0), False, open_cell(m))
    assert reached == {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)}


def test_dfs_reachable():
    m = Matrix.from_rows(GRID)
    reached = m.dfs_reachable((0, 0), False, open_cell(m))
    assert reached == {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)}


def test_reachable_diagonals():
    m = Matrix.from_rows([".#", "#."])
    assert m.bfs_reachable((0, 0), False, open_cell(m)) == {(0, 0)}
    assert m.bfs_reachable((0, 0), True, open_cell(m)) == {(0, 0), (1, 1)}
    assert m.dfs_reachable((0, 0), True, open_cell(m)) == {(0, 0), (1, 1)}


def test_reachable_predicate_false_keeps_start():
    m = Matrix(3, 3, 0)
    assert m.bfs_reachable((1, 1), True, lambda _: False) == {(1, 1)}
    assert m.dfs_reachable((1, 1), True, lambda _: False) == {(1, 1)}