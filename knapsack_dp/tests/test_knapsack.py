import re
import threading

import numpy as np
import pytest

from knapsack_dp.dynamic_programming.basic.knapsack import KnapsackTable, TableKnapsack, solve_table
from knapsack_dp.errors import InvalidInput, SolveCancelled


WEIGHTS = [1, 2, 1]
VALUES = [500, 5000, 3000]


def test_reference_scenario():
    result = solve_table(WEIGHTS, VALUES, 3)
    assert isinstance(result, KnapsackTable)
    assert result.max_value == 8000
    assert result.table == [
        [0, 0, 0, 0],
        [0, 500, 500, 500],
        [0, 500, 5000, 5500],
        [0, 3000, 5000, 8000],
    ]


def test_table_dimensions():
    result = solve_table([4, 3, 2, 5], [1, 2, 3, 4], 7)
    assert result.rows == 5
    assert result.columns == 8
    assert result.max_value == result.table[-1][-1]


def test_row_and_column_zero_are_zero():
    table = solve_table([2, 3, 4, 5], [3, 4, 5, 6], 5).table
    assert all(cell == 0 for cell in table[0])
    assert all(row[0] == 0 for row in table)


@pytest.mark.parametrize("seed", range(30))
def test_table_is_monotonic(seed, random_instance):
    table = solve_table(*random_instance(4000 + seed)).table
    for i in range(len(table)):
        for j in range(len(table[i]) - 1):
            assert table[i][j] <= table[i][j + 1]
    for i in range(len(table) - 1):
        for j in range(len(table[i])):
            assert table[i][j] <= table[i + 1][j]


def test_empty_items():
    result = solve_table([], [], 5)
    assert result.max_value == 0
    assert result.table == [[0] * 6]


def test_zero_capacity():
    result = solve_table([1, 2], [10, 20], 0)
    assert result.max_value == 0
    assert result.columns == 1


def test_zero_weight_item_always_counts():
    assert solve_table([0, 2], [7, 5], 0).max_value == 7
    assert solve_table([0, 2], [7, 5], 2).max_value == 12
    assert solve_table([0, 1, 0], [4, 9, 6], 0).max_value == 10


def test_item_heavier_than_capacity_is_skipped():
    assert solve_table([10], [100], 9).max_value == 0


def test_same_input_same_table():
    first = solve_table([2, 2, 2], [3, 3, 3], 4)
    second = solve_table([2, 2, 2], [3, 3, 3], 4)
    assert first == second
    assert first.max_value == 6


def test_format_renders_each_row():
    text = solve_table(WEIGHTS, VALUES, 3).format()
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0] == "    0     0     0     0"
    assert lines[-1].split() == ["0", "3000", "5000", "8000"]


@pytest.mark.parametrize(
    "weights, values, capacity, message",
    [
        ([1, 2], [1], 3, "same length"),
        ([1, -2], [1, 2], 3, "weights[1]"),
        ([1, 2], [1, -5], 3, "values[1]"),
        ([1, 2], [1, 2], -1, "capacity"),
        ([1, 2.5], [1, 2], 3, "weights[1]"),
        ([1, 2], [1, 2], 3.0, "capacity"),
        ([True], [1], 3, "weights[0]"),
        (None, [1], 3, "weights"),
    ],
)
def test_invalid_input(weights, values, capacity, message):
    with pytest.raises(InvalidInput, match=re.escape(message)):
        solve_table(weights, values, capacity)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        solve_table([1], [1, 2], 1)


def test_cancel_event_stops_solve():
    event = threading.Event()
    event.set()
    with pytest.raises(SolveCancelled):
        TableKnapsack().execute([1, 2], [3, 4], 5, cancel_event=event)


def test_unset_cancel_event_is_ignored():
    event = threading.Event()
    result = TableKnapsack().execute(WEIGHTS, VALUES, 3, cancel_event=event)
    assert result.max_value == 8000


def test_performance_stats_count_successful_runs():
    solver = TableKnapsack()
    assert solver.get_performance_stats() == {"execution_count": 0}
    solver.execute(WEIGHTS, VALUES, 3)
    solver.execute(WEIGHTS, VALUES, 2)
    with pytest.raises(InvalidInput):
        solver.execute(WEIGHTS, VALUES, -1)
    stats = solver.get_performance_stats()
    assert stats["execution_count"] == 2
    assert stats["algorithm_name"] == "TableKnapsack"


def test_monotonic_with_zero_weight_items():
    table = solve_table([0, 3, 0, 1], [4, 7, 2, 3], 5).table
    assert table[1] == [4] * 6
    for i in range(len(table) - 1):
        for j in range(len(table[i]) - 1):
            assert table[i][j] <= table[i][j + 1]
            assert table[i][j] <= table[i + 1][j]


def test_numpy_integers_are_accepted():
    weights = np.array([1, 2, 1])
    values = np.array([500, 5000, 3000])
    result = solve_table(weights, values, np.int64(3))
    assert result.max_value == 8000
    assert type(result.max_value) is int
    assert all(type(cell) is int for row in result.table for cell in row)
