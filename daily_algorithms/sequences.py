"""Sequence optimisation routines built on ordered containers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from sortedcontainers import SortedList


class _SmallestSum:
    """Multiset that tracks the sum of its ``size`` smallest members."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.low = SortedList()
        self.high = SortedList()
        self.total = 0

    def _rebalance(self) -> None:
        while len(self.low) < self.size and self.high:
            value = self.high.pop(0)
            self.low.add(value)
            self.total += value
        while len(self.low) > self.size:
            value = self.low.pop()
            self.high.add(value)
            self.total -= value

    def add(self, value: int) -> None:
        if self.low and value < self.low[-1]:
            self.low.add(value)
            self.total += value
        else:
            self.high.add(value)
        self._rebalance()

    def remove(self, value: int) -> None:
        if value in self.low:
            self.low.remove(value)
            self.total -= value
        else:
            self.high.remove(value)
        self._rebalance()


def minimum_cost_k_split(nums: Sequence[int], k: int, dist: int) -> int:
    """Least cost to split ``nums`` into k parts whose later starts lie within ``dist``.

    The cost of a split is the sum of the first element of every part.
    """
    n = len(nums)
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and len(nums)")
    need = k - 1
    window = _SmallestSum(need)
    for value in nums[1 : dist + 2]:
        window.add(value)
    best = nums[0] + window.total
    for start in range(2, n - need + 1):
        window.remove(nums[start - 1])
        if start + dist < n:
            window.add(nums[start + dist])
        best = min(best, nums[0] + window.total)
    return best


def max_sum_trionic(nums: Sequence[int]) -> int:
    """Largest sum of a subarray that rises, falls, then rises again."""
    n = len(nums)
    before_peak: list[int | None] = [None] * n
    for i in range(1, n):
        if nums[i] > nums[i - 1]:
            rising = i - 1 > 0 and nums[i - 1] > nums[i - 2]
            prev = before_peak[i - 1] if rising else 0
            before_peak[i] = max(nums[i - 1], prev + nums[i - 1])

    after_valley: list[int | None] = [None] * n
    for i in range(n - 2, -1, -1):
        if nums[i] < nums[i + 1]:
            rising = i + 1 < n - 1 and nums[i + 1] < nums[i + 2]
            nxt = after_valley[i + 1] if rising else 0
            after_valley[i] = max(nums[i + 1], nxt + nums[i + 1])

    best: int | None = None
    for i in range(1, n - 2):
        head = before_peak[i]
        if head is None:
            continue
        falling_sum = nums[i]
        for j in range(i + 1, n - 1):
            if nums[j] >= nums[j - 1]:
                break
            falling_sum += nums[j]
            tail = after_valley[j]
            if tail is not None:
                total = head + falling_sum + tail
                if best is None or total > best:
                    best = total
    if best is None:
        raise ValueError("sequence has no trionic subarray")
    return best


def minimum_pair_removal_fast(nums: Sequence[int]) -> int:
    """Operations needed to sort ``nums`` by repeatedly merging the leftmost minimum-sum pair."""
    n = len(nums)
    if n < 2:
        return 0
    values = list(nums)
    prev: list[int | None] = [None, *range(n - 1)]
    nxt: list[int | None] = [*range(1, n), None]
    pairs = SortedList((values[i] + values[i + 1], i) for i in range(n - 1))
    inverted = sum(a > b for a, b in pairwise(values))

    operations = 0
    while inverted > 0 and pairs:
        merged, left = pairs.pop(0)
        right = nxt[left]
        before = prev[left]
        after = nxt[right]

        if before is not None and values[before] > values[left]:
            inverted -= 1
        if values[left] > values[right]:
            inverted -= 1
        if after is not None and values[right] > values[after]:
            inverted -= 1

        if before is not None:
            pairs.remove((values[before] + values[left], before))
        if after is not None:
            pairs.remove((values[right] + values[after], right))

        values[left] = merged
        nxt[left] = after
        if after is not None:
            prev[after] = left

        if before is not None and values[before] > values[left]:
            inverted += 1
        if after is not None and values[left] > values[after]:
            inverted += 1

        if before is not None:
            pairs.add((values[before] + values[left], before))
        if after is not None:
            pairs.add((values[left] + values[after], left))

        operations += 1
    return operations