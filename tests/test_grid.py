import numpy as np

from falling_blocks.game import GameGrid


def test_clear_on_board_without_full_rows_is_noop():
    grid = GameGrid(10, 20)
    grid.grid[19, :9] = 1
    grid.grid[10, 3] = 5
    before = grid.clone_state()
    assert grid.clear_full_lines() == 0
    assert np.array_equal(grid.grid, before)


def test_clear_two_separate_rows():
    grid = GameGrid(10, 20)
    for r in range(20):
        grid.grid[r, r % 10] = (r % 7) + 1
    grid.grid[2, :] = 1
    grid.grid[5, :] = 2
    before = grid.clone_state()

    assert grid.clear_full_lines() == 2

    kept = [r for r in range(20) if r not in (2, 5)]
    expected = np.vstack((np.zeros((2, 10), dtype=np.int8), before[kept]))
    assert np.array_equal(grid.grid, expected)
    assert not grid.grid[:2].any()
    assert np.array_equal(grid.grid[6:], before[6:])
    assert np.array_equal(grid.grid[4:6], before[3:5])
    assert np.array_equal(grid.grid[2:4], before[0:2])


def test_clear_adjacent_bottom_rows():
    grid = GameGrid(10, 20)
    grid.grid[18:, :] = 3
    grid.grid[17, 0] = 6
    assert grid.clear_full_lines() == 2
    assert grid.grid[19, 0] == 6
    assert int(np.count_nonzero(grid.grid)) == 1


def test_clear_keeps_array_identity_and_shape():
    grid = GameGrid(10, 20)
    ref = grid.grid
    grid.grid[19, :] = 1
    grid.clear_full_lines()
    assert grid.grid is ref
    assert grid.grid.shape == (20, 10)


def test_reset_empties_board():
    grid = GameGrid(10, 20)
    grid.grid[3, 3] = 1
    grid.reset()
    assert not grid.grid.any()
