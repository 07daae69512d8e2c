import pytest

from knapsack_dp.backtracking.basic.maze import DEAD_END, PATH, WALL, MazeSolver
from knapsack_dp.errors import InvalidInput


def _bordered_map():
    grid = [[1] * 8] + [[1] + [0] * 6 + [1] for _ in range(6)] + [[1] * 8]
    grid[3][1] = grid[3][2] = 1
    return grid


CORRIDOR = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def test_down_right_up_left_on_bordered_map():
    grid = _bordered_map()
    result = MazeSolver().execute(grid, (1, 1), (6, 6))
    assert result.solved
    assert result.steps == 11
    assert result.dead_ends == 0
    assert result.grid[6][3:7] == [PATH] * 4
    assert result.grid[3][3] == PATH
    # 输入的地图保持不变
    assert grid == _bordered_map()


def test_up_first_order_also_reaches_end():
    result = MazeSolver(["up", "right", "down", "left"]).execute(_bordered_map(), (1, 1), (6, 6))
    assert result.solved
    assert result.steps == 11


def test_backtracking_marks_dead_ends():
    result = MazeSolver(["right", "down", "up", "left"]).execute(CORRIDOR, (1, 1), (3, 3))
    assert result.solved
    assert result.steps == 5
    assert result.dead_ends == 2
    assert result.grid[1][2] == DEAD_END
    assert result.grid[1][3] == DEAD_END


def test_shortest_strategy_avoids_detours():
    solver = MazeSolver(["right", "down", "up", "left"])
    best = solver.shortest_strategy(CORRIDOR, (1, 1), (3, 3))
    assert best.solved
    assert best.steps == 5
    assert best.dead_ends == 0
    assert best.directions[0] == "down"


def test_unreachable_end():
    grid = [row[:] for row in CORRIDOR]
    grid[3][2] = WALL
    result = MazeSolver().execute(grid, (1, 1), (3, 3))
    assert not result.solved
    assert result.steps == 0
    assert result.grid[3][3] == 0
    assert not MazeSolver().shortest_strategy(grid, (1, 1), (3, 3)).solved


def test_walls_beyond_the_grid_edge():
    result = MazeSolver().execute([[0, 0], [0, 0]], (0, 0), (1, 1))
    assert result.solved
    assert result.steps == 3


def test_start_equals_end():
    result = MazeSolver().execute([[0]], (0, 0), (0, 0))
    assert result.solved
    assert result.steps == 1


def test_start_on_wall():
    assert not MazeSolver().execute(CORRIDOR, (0, 0), (3, 3)).solved


@pytest.mark.parametrize(
    "grid, start, end",
    [
        ([[0, 0], [0]], (0, 0), (0, 1)),
        ([[0, 2]], (0, 0), (0, 1)),
        ([[0, True]], (0, 0), (0, 1)),
        ([[0, 0]], (0, 0), (1, 0)),
        ([[0, 0]], (-1, 0), (0, 1)),
    ],
)
def test_invalid_maze(grid, start, end):
    with pytest.raises(InvalidInput):
        MazeSolver().execute(grid, start, end)


def test_directions_must_be_a_permutation():
    with pytest.raises(InvalidInput):
        MazeSolver(["down", "down", "up", "left"])
