"""Array search, partition and scanning routines."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def minimum_cost_three_split(nums: Sequence[int]) -> int:
    """Least cost to cut ``nums`` into three parts, costing the sum of each part's first element."""
    if len(nums) < 3:
        raise ValueError("nums must hold at least three values")
    return nums[0] + sum(heapq.nsmallest(2, nums[1:]))


def is_trionic(nums: Sequence[int]) -> bool:
    """Whether ``nums`` strictly rises, then strictly falls, then strictly rises to its end."""
    n = len(nums)
    if n < 3:
        return False

    def run_end(start: int, rising: bool) -> int:
        index = start
        while index + 1 < n and (
            nums[index] < nums[index + 1] if rising else nums[index] > nums[index + 1]
        ):
            index += 1
        return index

    peak = run_end(0, rising=True)
    if peak == 0 or peak == n - 1:
        return False
    valley = run_end(peak, rising=False)
    if valley == peak or valley == n - 1:
        return False
    end = run_end(valley, rising=True)
    return end > valley and end == n - 1


def min_removal(nums: Iterable[int], k: int) -> int:
    """Fewest removals so that the largest remaining value is at most ``k`` times the smallest."""
    values = sorted(nums)
    n = len(values)
    keep = 0
    right = 0
    for left, smallest in enumerate(values):
        while right < n and values[right] <= smallest * k:
            right += 1
        keep = max(keep, right - left)
    return n - keep


def longest_balanced_subarray(nums: Sequence[int]) -> int:
    """Longest subarray holding as many distinct even values as distinct odd values."""
    best = 0
    for start in range(len(nums)):
        evens: set[int] = set()
        odds: set[int] = set()
        for length, value in enumerate(nums[start:], start=1):
            (evens if value % 2 == 0 else odds).add(value)
            if len(evens) == len(odds):
                best = max(best, length)
    return best


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, found without merging them."""
    if len(first) > len(second):
        first, second = second, first
    m, n = len(first), len(second)
    if m + n == 0:
        raise ValueError("at least one sequence must be non-empty")

    low, high = 0, m
    while low <= high:
        cut_x = (low + high) // 2
        cut_y = (m + n + 1) // 2 - cut_x

        max_left_x = first[cut_x - 1] if cut_x > 0 else float("-inf")
        min_right_x = first[cut_x] if cut_x < m else float("inf")
        max_left_y = second[cut_y - 1] if cut_y > 0 else float("-inf")
        min_right_y = second[cut_y] if cut_y < n else float("inf")

        if max_left_x <= min_right_y and max_left_y <= min_right_x:
            left = max(max_left_x, max_left_y)
            if (m + n) % 2 == 0:
                return (left + min(min_right_x, min_right_y)) / 2.0
            return float(left)
        if max_left_x > min_right_y:
            high = cut_x - 1
        else:
            low = cut_x + 1
    raise ValueError("sequences must be sorted in ascending order")


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the signed 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """The distinct values of a sorted sequence, in their original order."""
    return [value for value, _ in groupby(nums)]


def minimum_pair_removal(nums: Iterable[int]) -> int:
    """Merges of the leftmost minimum-sum adjacent pair needed to make the values non-decreasing."""
    values = list(nums)
    operations = 0
    while len(values) > 1 and any(a > b for a, b in pairwise(values)):
        left = min(range(len(values) - 1), key=lambda i: (values[i] + values[i + 1], i))
        values[left : left + 2] = [values[left] + values[left + 1]]
        operations += 1
    return operations


def min_pair_sum(nums: Iterable[int]) -> int:
    """Smallest possible largest sum when the values are paired up."""
    values = sorted(nums)
    half = len(values) // 2
    return max([0, *(a + b for a, b in zip(values[:half], reversed(values)))])


def minimum_difference(nums: Iterable[int], k: int) -> int:
    """Smallest gap between the highest and lowest of any ``k`` chosen values."""
    if k == 1:
        return 0
    values = sorted(nums)
    if not 1 <= k <= len(values):
        raise ValueError("k must be between 1 and the number of values")
    return min(values[i + k - 1] - values[i] for i in range(len(values) - k + 1))


def minimum_abs_difference(values: Iterable[int]) -> list[list[int]]:
    """All pairs of values, ascending, whose difference is the smallest found."""
    ordered = sorted(values)
    result: list[list[int]] = []
    smallest: int | None = None
    for a, b in pairwise(ordered):
        gap = b - a
        if smallest is None or gap < smallest:
            smallest = gap
            result = [[a, b]]
        elif gap == smallest:
            result.append([a, b])
    return result