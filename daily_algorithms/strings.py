"""String counting and search routines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from itertools import groupby, islice, pairwise

_LETTER_SUBSETS = ("a", "b", "c", "ab", "ac", "bc", "abc")


def min_partitions(n: str) -> int:
    """Fewest deci-binary numbers summing to the decimal string ``n``."""
    return int(max(n, default="0"))


def min_alternating_operations(s: str) -> int:
    """Fewest flips to make a binary string alternate."""
    mismatches = sum(ch != "01"[i % 2] for i, ch in enumerate(s))
    return min(mismatches, len(s) - mismatches)


def minimum_deletions(s: str) -> int:
    """Fewest deletions so that no 'b' comes before an 'a'."""
    b_count = 0
    deletions = 0
    for ch in s:
        if ch == "b":
            b_count += 1
        else:
            deletions = min(deletions + 1, b_count)
    return deletions


def _balance_state(letters: str, counts: Counter[str]) -> tuple[int, int]:
    if len(letters) == 2:
        return counts[letters[0]] - counts[letters[1]], 0
    if len(letters) == 3:
        return counts["a"] - counts["b"], counts["b"] - counts["c"]
    return 0, 0


def longest_balanced_substring(s: str) -> int:
    """Longest substring in which every letter present occurs equally often."""
    best = 0
    for letters in _LETTER_SUBSETS:
        first_seen = {(0, 0): -1}
        counts: Counter[str] = Counter()
        for index, ch in enumerate(s):
            if ch not in letters:
                first_seen = {(0, 0): index}
                counts = Counter()
                continue
            counts[ch] += 1
            state = _balance_state(letters, counts)
            if state in first_seen:
                best = max(best, index - first_seen[state])
            else:
                first_seen[state] = index
    return best


def _happy_strings(length: int, prefix: str = "") -> Iterator[str]:
    if len(prefix) == length:
        yield prefix
        return
    for letter in "abc":
        if not prefix or prefix[-1] != letter:
            yield from _happy_strings(length, prefix + letter)


def happy_string(n: int, k: int) -> str:
    """The k-th (1-based) happy string of length n in order, or '' if none."""
    if k < 1:
        return ""
    return next(islice(_happy_strings(n), k - 1, None), "")


def count_binary_substrings(s: str) -> int:
    """Count substrings with equal, grouped runs of 0s and 1s."""
    runs = [sum(1 for _ in group) for _, group in groupby(s)]
    return sum(min(a, b) for a, b in pairwise(runs))