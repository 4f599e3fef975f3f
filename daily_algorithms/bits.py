"""Bit manipulation routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
_WORD_BITS = 32


def concatenated_binary(n: int) -> int:
    """Value of the binary forms of 1..n written one after another, modulo MOD."""
    result = 0
    for value in range(1, n + 1):
        result = ((result << value.bit_length()) | value) % MOD
    return result


def bitwise_complement(n: int) -> int:
    """Flip every bit of ``n`` below its highest set bit; 0 maps to 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    return n ^ ((1 << n.bit_length()) - 1)


def reverse_bits(n: int) -> int:
    """Reverse the bits of an unsigned 32-bit integer."""
    if not 0 <= n < 1 << _WORD_BITS:
        raise ValueError("n must fit in an unsigned 32-bit word")
    return int(format(n, f"0{_WORD_BITS}b")[::-1], 2)


def has_alternating_bits(n: int) -> bool:
    """Whether every pair of adjacent bits in ``n`` differs."""
    x = n ^ (n >> 1)
    return (x & (x + 1)) == 0


def _clear_top_of_lowest_run(value: int) -> int:
    """Clear the highest bit of the lowest run of set bits."""
    if value < 0:
        raise ValueError("values must be non-negative")
    lowest = value & -value
    top = ((value + lowest) & ~value) >> 1
    return value ^ top


def min_bitwise_array(nums: Iterable[int]) -> list[int]:
    """Smallest x with ``x | (x + 1) == v`` for each v, or -1 where none exists."""
    return [-1 if value % 2 == 0 else _clear_top_of_lowest_run(value) for value in nums]


def min_bitwise_array_primes(nums: Iterable[int]) -> list[int]:
    """Like :func:`min_bitwise_array` for primes: only 2 has no answer."""
    return [-1 if value == 2 else _clear_top_of_lowest_run(value) for value in nums]


def read_binary_watch(turned_on: int) -> list[str]:
    """All times a binary watch can show with ``turned_on`` LEDs lit."""
    return [
        f"{hour}:{minute:02d}"
        for hour in range(12)
        for minute in range(60)
        if hour.bit_count() + minute.bit_count() == turned_on
    ]


def sort_by_bits(values: Iterable[int]) -> list[int]:
    """Sort by number of set bits, then by value."""
    mask = (1 << _WORD_BITS) - 1
    return sorted(values, key=lambda v: ((v & mask).bit_count(), v))


def find_different_binary_string(strings: Sequence[str]) -> str:
    """A binary string of the same length that differs from every given one."""
    return "".join("1" if s[i] == "0" else "0" for i, s in enumerate(strings))