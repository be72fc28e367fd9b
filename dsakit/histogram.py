"""Monotonic-stack problems: next smaller elements, histograms, celebrity."""

from __future__ import annotations

from collections.abc import Sequence


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each value, the nearest strictly smaller value to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i in reversed(range(len(values))):
        current = values[i]
        while stack and stack[-1] >= current:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(current)
    return result


def _smaller_indices(values: Sequence[int], order: range) -> list[int]:
    result = [-1] * len(values)
    stack: list[int] = []
    for i in order:
        current = values[i]
        while stack and values[stack[-1]] >= current:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_smaller_indices(values: Sequence[int]) -> list[int]:
    """For each position, the index of the nearest strictly smaller value to the right, or -1."""
    return _smaller_indices(values, range(len(values) - 1, -1, -1))


def prev_smaller_indices(values: Sequence[int]) -> list[int]:
    """For each position, the index of the nearest strictly smaller value to the left, or -1."""
    return _smaller_indices(values, range(len(values)))


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram; 0 if empty."""
    n = len(heights)
    following = next_smaller_indices(heights)
    preceding = prev_smaller_indices(heights)
    best = 0
    for height, right, left in zip(heights, following, preceding):
        if right == -1:
            right = n
        best = max(best, height * (right - left - 1))
    return best


def find_celebrity(matrix: Sequence[Sequence[int]]) -> int | None:
    """Return the index of the person everyone knows who knows nobody, or None.

    matrix[a][b] == 1 means that a knows b.
    """
    n = len(matrix)
    if n == 0:
        return None
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if matrix[a][b] == 1 else a)
    candidate = candidates[0]
    knows_nobody = all(matrix[candidate][i] == 0 for i in range(n))
    known_by_all = sum(1 for i in range(n) if matrix[i][candidate] == 1) == n - 1
    return candidate if knows_nobody and known_by_all else None


def max_rectangle(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a binary matrix."""
    if not matrix:
        return 0
    width = len(matrix[0])
    heights = [0] * width
    best = 0
    for row in matrix:
        if len(row) != width:
            raise ValueError("all rows must have the same length")
        heights = [h + 1 if cell != 0 else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best