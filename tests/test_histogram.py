import pytest

from dsakit.histogram import (
    find_celebrity,
    largest_rectangle_area,
    max_rectangle,
    next_smaller,
    next_smaller_indices,
    prev_smaller_indices,
)

SAMPLES = [
    [2, 1, 4, 3],
    [5, 5, 5],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [3, 0, 7, 2, 9, 1, 6],
    [],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_next_smaller_values_are_smaller_and_later(values):
    result = next_smaller(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        later = values[i + 1 :]
        if found == -1:
            assert all(v >= values[i] for v in later)
        else:
            assert found < values[i]
            first = next(v for v in later if v < values[i])
            assert found == first


@pytest.mark.parametrize("values", SAMPLES)
def test_next_smaller_indices_invariant(values):
    result = next_smaller_indices(values)
    for i, j in enumerate(result):
        if j == -1:
            assert all(v >= values[i] for v in values[i + 1 :])
        else:
            assert j > i
            assert values[j] < values[i]
            assert all(v >= values[i] for v in values[i + 1 : j])


@pytest.mark.parametrize("values", SAMPLES)
def test_prev_smaller_indices_invariant(values):
    result = prev_smaller_indices(values)
    for i, j in enumerate(result):
        if j == -1:
            assert all(v >= values[i] for v in values[:i])
        else:
            assert j < i
            assert values[j] < values[i]
            assert all(v >= values[i] for v in values[j + 1 : i])


def test_next_smaller_indices_match_values():
    values = [3, 0, 7, 2, 9, 1, 6]
    indices = next_smaller_indices(values)
    assert next_smaller(values) == [values[j] if j != -1 else -1 for j in indices]


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("heights", [h for h in SAMPLES if h])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_uniform():
    assert largest_rectangle_area([5, 5, 5]) == 5 * 3


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


def _matrix_with_celebrity(n, celeb):
    return [[1 if (j == celeb and i != celeb) else 0 for j in range(n)] for i in range(n)]


@pytest.mark.parametrize("celeb", [0, 1, 3])
def test_find_celebrity(celeb):
    assert find_celebrity(_matrix_with_celebrity(4, celeb)) == celeb


def test_no_celebrity_when_celebrity_knows_someone():
    matrix = _matrix_with_celebrity(3, 1)
    matrix[1][0] = 1
    assert find_celebrity(matrix) is None


def test_no_celebrity_when_everyone_knows_everyone():
    matrix = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert find_celebrity(matrix) is None


def test_single_person_is_celebrity():
    assert find_celebrity([[0]]) == 0


def test_find_celebrity_empty():
    assert find_celebrity([]) is None


def test_max_rectangle_all_ones():
    matrix = [[1] * 4 for _ in range(3)]
    assert max_rectangle(matrix) == 4 * 3


def test_max_rectangle_all_zeros():
    assert max_rectangle([[0, 0], [0, 0]]) == 0


def test_max_rectangle_worked_example():
    matrix = [
        [0, 1, 1, 0],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 0, 0],
    ]
    assert max_rectangle(matrix) == 8


def test_max_rectangle_single_row_matches_histogram():
    row = [1, 1, 0, 1, 1, 1]
    assert max_rectangle([row]) == largest_rectangle_area(row)


def test_max_rectangle_ragged_raises():
    with pytest.raises(ValueError):
        max_rectangle([[1, 1], [1]])


def test_max_rectangle_empty():
    assert max_rectangle([]) == 0