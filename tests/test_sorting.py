import random

import pytest

from dsakit.sorting import merge_sort, partition, quick_sort

SAMPLES = [
    [],
    [1],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 4, 4],
    [3, -1, 0, -7, 12, 3, 3],
    list(range(20)),
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_sorts_do_not_modify_input():
    values = [9, 2, 7, 1]
    merge_sort(values)
    quick_sort(values)
    assert values == [9, 2, 7, 1]


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
        assert merge_sort(values) == sorted(values)
        assert quick_sort(values) == sorted(values)


def test_large_sorted_input_quick_sort():
    values = list(range(3000))
    assert quick_sort(values) == values


def test_merge_sort_accepts_iterables():
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 9, 2], [1, 1, 0, 2, 1], [7, 6, 5, 4], [1, 2, 3]])
def test_partition_invariant(values):
    items = list(values)
    pivot = items[0]
    index = partition(items, 0, len(items) - 1)
    assert items[index] == pivot
    assert all(v <= pivot for v in items[:index])
    assert all(v > pivot for v in items[index + 1 :])
    assert sorted(items) == sorted(values)


def test_partition_subrange_leaves_rest_untouched():
    items = [100, 5, 3, 8, 1, -100]
    index = partition(items, 1, 4)
    assert items[0] == 100 and items[-1] == -100
    assert items[index] == 5
    assert all(v <= 5 for v in items[1:index])
    assert all(v > 5 for v in items[index + 1 : 5])