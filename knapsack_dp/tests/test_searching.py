import random

import pytest

from knapsack_dp.searching.basic.binary_search import BinarySearch
from knapsack_dp.searching.basic.fibonacci_search import FibonacciSearch, fibonacci_numbers


def test_duplicate_target_returns_first_hit():
    data = [1, 8, 10, 89, 100, 100, 123]
    index = BinarySearch().execute(data, 100)
    assert index == 5
    assert data[index] == 100


@pytest.mark.parametrize("target, expected", [(1, 0), (3, 1), (5, 2), (7, 3), (9, 4)])
def test_binary_search_found(target, expected):
    assert BinarySearch().execute([1, 3, 5, 7, 9], target) == expected


@pytest.mark.parametrize("target", [0, 2, 10])
def test_binary_search_not_found(target):
    assert BinarySearch().execute([1, 3, 5, 7, 9], target) == -1


def test_search_empty_list():
    assert BinarySearch().execute([], 1) == -1


def test_search_large_sequence():
    data = list(range(0, 200000, 2))
    searcher = BinarySearch()
    assert searcher.execute(data, 123456) == 61728
    assert searcher.execute(data, 123457) == -1


def test_search_type_error():
    with pytest.raises(TypeError):
        BinarySearch().execute(None, 1)


def test_fibonacci_duplicate_target_returns_first_hit():
    data = [1, 8, 10, 89, 100, 100, 123]
    assert FibonacciSearch().execute(data, 100) == 4
    assert FibonacciSearch().execute(data, 123) == 6


@pytest.mark.parametrize("target, expected", [(1, 0), (3, 1), (5, 2), (7, 3), (9, 4)])
def test_fibonacci_search_found(target, expected):
    assert FibonacciSearch().execute([1, 3, 5, 7, 9], target) == expected


@pytest.mark.parametrize("target", [0, 2, 8, 10])
def test_fibonacci_search_not_found(target):
    assert FibonacciSearch().execute([1, 3, 5, 7, 9], target) == -1


@pytest.mark.parametrize("data", [[], [4], [4, 6]])
def test_fibonacci_search_short_sequences(data):
    searcher = FibonacciSearch()
    for index, value in enumerate(data):
        assert searcher.execute(data, value) == index
    assert searcher.execute(data, 5) == -1
    assert searcher.execute(data, 7) == -1


def test_fibonacci_match_lands_in_padding():
    # 长度 6 时分割点会越过最后一个下标
    assert FibonacciSearch().execute([1, 2, 3, 4, 5, 6], 6) == 5


@pytest.mark.parametrize("seed", range(20))
def test_fibonacci_agrees_with_membership(seed):
    rng = random.Random(seed)
    data = sorted(rng.sample(range(200), rng.randint(0, 40)))
    searcher = FibonacciSearch()
    for target in range(-1, 201):
        index = searcher.execute(data, target)
        if target in data:
            assert data[index] == target
        else:
            assert index == -1


def test_fibonacci_large_sequence():
    data = list(range(0, 200000, 2))
    assert FibonacciSearch().execute(data, 123456) == 61728
    assert FibonacciSearch().execute(data, 123457) == -1


def test_fibonacci_numbers_cover_last_index():
    assert fibonacci_numbers(-1) == [1, 1]
    assert fibonacci_numbers(6) == [1, 1, 2, 3, 5, 8]
