"""Dynamic programming routines over sequences, grids and histograms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

from daily_algorithms.bits import MOD


def max_dot_product(first: Sequence[int], second: Sequence[int]) -> int:
    """Largest dot product of two equal-length, non-empty subsequences."""
    if not first or not second:
        raise ValueError("both sequences must be non-empty")
    if len(first) < len(second):
        first, second = second, first
    width = len(second)
    prev: list[float] = [-math.inf] * (width + 1)
    for a in first:
        curr: list[float] = [-math.inf] * (width + 1)
        for j, b in enumerate(second, start=1):
            combo = a * b
            curr[j] = max(combo, combo + prev[j - 1], prev[j], curr[j - 1])
        prev = curr
    return int(prev[width])


def number_of_stable_arrays(zero: int, one: int, limit: int) -> int:
    """Count binary arrays with the given numbers of 0s and 1s and no run longer than ``limit``."""
    # ends[i][j] = (arrays ending in 0, arrays ending in 1) using i zeros and j ones
    ends = [[[0, 0] for _ in range(one + 1)] for _ in range(zero + 1)]
    for i in range(1, min(zero, limit) + 1):
        ends[i][0][0] = 1
    for j in range(1, min(one, limit) + 1):
        ends[0][j][1] = 1

    for i in range(1, zero + 1):
        for j in range(1, one + 1):
            with_zero = ends[i - 1][j][0] + ends[i - 1][j][1]
            if i > limit:
                with_zero -= ends[i - limit - 1][j][1]
            with_one = ends[i][j - 1][0] + ends[i][j - 1][1]
            if j > limit:
                with_one -= ends[i][j - limit - 1][0]
            ends[i][j] = [with_zero % MOD, with_one % MOD]

    return sum(ends[zero][one]) % MOD


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Area of the largest rectangle under a histogram."""
    bars = [*heights, 0]
    stack: list[int] = []
    best = 0
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] >= height:
            top = bars[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, top * width)
        stack.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str | int]]) -> int:
    """Area of the largest all-ones rectangle in a binary matrix."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" or cell == 1 else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def max_side_length(matrix: Sequence[Sequence[int]], threshold: int) -> int:
    """Largest side of a square block whose sum does not exceed ``threshold``."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])
    prefix = [[0] * (cols + 1)]
    for row in matrix:
        above = prefix[-1]
        running = [0, *accumulate(row)]
        prefix.append([a + r for a, r in zip(above, running)])

    def block_sum(r: int, c: int, side: int) -> int:
        return (
            prefix[r + side][c + side]
            - prefix[r][c + side]
            - prefix[r + side][c]
            + prefix[r][c]
        )

    def fits(side: int) -> bool:
        return any(
            block_sum(r, c, side) <= threshold
            for r in range(rows - side + 1)
            for c in range(cols - side + 1)
        )

    low, high, answer = 1, min(rows, cols), 0
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def maximize_square_area(
    m: int, n: int, h_fences: Iterable[int], v_fences: Iterable[int]
) -> int:
    """Largest square area (modulo MOD) left after removing fences, or -1 if none exists."""
    horizontal = sorted([*h_fences, 1, m])
    vertical = sorted([*v_fences, 1, n])
    h_gaps = {b - a for a, b in combinations(horizontal, 2)}
    common = [b - a for a, b in combinations(vertical, 2) if b - a in h_gaps]
    if not common:
        return -1
    side = max(common)
    return (side * side) % MOD


def min_path_cost_with_teleports(grid: Sequence[Sequence[int]], k: int) -> int:
    """Least cost from top-left to bottom-right moving right/down, with up to ``k`` teleports.

    Moving into a cell costs its value; a teleport to a cell of no greater value is free.
    Returns -1 when the corner cannot be reached.
    """
    rows, cols = len(grid), len(grid[0])
    layer = [[math.inf] * cols for _ in range(rows)]
    layer[0][0] = 0
    best = math.inf
    distinct = sorted({v for row in grid for v in row}, reverse=True)

    for used in range(k + 1):
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                if i > 0:
                    layer[i][j] = min(layer[i][j], layer[i - 1][j] + value)
                if j > 0:
                    layer[i][j] = min(layer[i][j], layer[i][j - 1] + value)
        best = min(best, layer[rows - 1][cols - 1])

        if used < k:
            cheapest: dict[int, float] = {}
            for row, costs in zip(grid, layer):
                for value, cost in zip(row, costs):
                    cheapest[value] = min(cheapest.get(value, math.inf), cost)
            reach: dict[int, float] = {}
            running = math.inf
            for value in distinct:
                running = min(running, cheapest[value])
                reach[value] = running
            layer = [[reach[value] for value in row] for row in grid]

    return -1 if best == math.inf else int(best)