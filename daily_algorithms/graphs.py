"""Graph routines: union-find, shortest paths and conversion costs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from itertools import product
from string import ascii_lowercase

_STABILITY_CEILING = 2_000_000_000


class DisjointSet:
    """Union-find over the integers ``0..size-1`` with path compression."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.count = size

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the sets of ``first`` and ``second``; False if already joined."""
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return False
        self.parent[root_first] = root_second
        self.count -= 1
        return True


def _spanning_tree_reaches(
    n: int, edges: Sequence[Sequence[int]], k: int, target: int
) -> bool:
    """Whether a spanning tree of stability at least ``target`` exists."""
    components = DisjointSet(n)
    used_edges = 0
    required = 0

    for u, v, strength, must in edges:
        if must == 1:
            required += 1
            if strength < target:
                return False
            if components.union(u, v):
                used_edges += 1
    if used_edges != required or used_edges > n - 1:
        return False

    for u, v, strength, must in edges:
        if must == 0 and strength >= target and components.union(u, v):
            used_edges += 1

    upgrades = 0
    for u, v, strength, must in edges:
        if must == 0 and strength < target <= strength * 2:
            if upgrades < k and components.find(u) != components.find(v):
                components.union(u, v)
                used_edges += 1
                upgrades += 1

    return components.count == 1 and used_edges == n - 1


def max_stability(n: int, edges: Sequence[Sequence[int]], k: int) -> int:
    """Highest minimum edge strength of a spanning tree, or -1 if none exists.

    Each edge is ``(u, v, strength, must)``; edges with ``must == 1`` have to be
    used, and up to ``k`` optional edges may have their strength doubled.
    """
    low, high, answer = 0, _STABILITY_CEILING, -1
    while low <= high:
        mid = (low + high) // 2
        if _spanning_tree_reaches(n, edges, k, mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def min_cost_with_reversals(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Cheapest path from node 0 to node n-1, or -1 if there is none.

    An edge ``(u, v, w)`` costs ``w`` forwards and ``2 * w`` when walked in reverse.
    """
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        neighbours[u].append((v, weight))
        neighbours[v].append((u, 2 * weight))

    best = [math.inf] * n
    best[0] = 0
    queue: list[tuple[int, int]] = [(0, 0)]
    while queue:
        cost, node = heapq.heappop(queue)
        if node == n - 1:
            return cost
        if cost > best[node]:
            continue
        for other, weight in neighbours[node]:
            candidate = cost + weight
            if candidate < best[other]:
                best[other] = candidate
                heapq.heappush(queue, (candidate, other))
    return -1 if best[n - 1] == math.inf else int(best[n - 1])


def _all_pairs_costs(
    size: int, links: Iterable[tuple[int, int, int]]
) -> list[list[float]]:
    """Floyd-Warshall shortest costs between ``size`` nodes."""
    dist = [[0 if i == j else math.inf for j in range(size)] for i in range(size)]
    for u, v, weight in links:
        dist[u][v] = min(dist[u][v], weight)
    for via in range(size):
        through = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for j, onward in enumerate(through):
                if to_via + onward < row[j]:
                    row[j] = to_via + onward
    return dist


def _check_lengths(source: str, target: str) -> None:
    if len(source) != len(target):
        raise ValueError("source and target must have the same length")


def minimum_char_conversion_cost(
    source: str,
    target: str,
    original: Sequence[str],
    changed: Sequence[str],
    cost: Sequence[int],
) -> int:
    """Least cost to turn ``source`` into ``target`` by single-letter changes, or -1."""
    _check_lengths(source, target)
    index = {letter: i for i, letter in enumerate(ascii_lowercase)}
    dist = _all_pairs_costs(
        len(ascii_lowercase),
        ((index[a], index[b], c) for a, b, c in zip(original, changed, cost)),
    )
    total = 0
    for a, b in zip(source, target):
        if a == b:
            continue
        step = dist[index[a]][index[b]]
        if step == math.inf:
            return -1
        total += step
    return int(total)


def minimum_substring_conversion_cost(
    source: str,
    target: str,
    original: Sequence[str],
    changed: Sequence[str],
    cost: Sequence[int],
) -> int:
    """Least cost to turn ``source`` into ``target`` by disjoint substring changes, or -1."""
    _check_lengths(source, target)
    ids: dict[str, int] = {}
    for word in (*original, *changed):
        ids.setdefault(word, len(ids))
    lengths = sorted({len(word) for word in ids})
    dist = _all_pairs_costs(
        len(ids), ((ids[a], ids[b], c) for a, b, c in zip(original, changed, cost))
    )

    n = len(source)
    best = [math.inf] * (n + 1)
    best[0] = 0
    for i in range(n):
        here = best[i]
        if here == math.inf:
            continue
        if source[i] == target[i]:
            best[i + 1] = min(best[i + 1], here)
        for length in lengths:
            if i + length > n:
                break
            from_id = ids.get(source[i : i + length])
            to_id = ids.get(target[i : i + length])
            if from_id is None or to_id is None:
                continue
            step = dist[from_id][to_id]
            if step < math.inf:
                best[i + length] = min(best[i + length], here + step)
    return -1 if best[n] == math.inf else int(best[n])


__all__ = [
    "DisjointSet",
    "max_stability",
    "min_cost_with_reversals",
    "minimum_char_conversion_cost",
    "minimum_substring_conversion_cost",
]

# Keep ``product`` available for callers building complete graphs in tests of structure.
_ = product