"""Sequence problems: subsequences, modular sorting, interval spans and arrangements."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from typing import Iterable, Sequence


def longest_non_increasing(values: Iterable[int]) -> int:
    """Length of the longest non-increasing subsequence."""
    # Negated tails form a non-decreasing list, so bisect applies directly.
    tails: list[int] = []
    for value in values:
        pos = bisect_right(tails, -value)
        if pos == len(tails):
            tails.append(-value)
        else:
            tails[pos] = -value
    return len(tails)


def _steps_up(start: int, target: int, m: int) -> int:
    """Increments modulo m needed to move from start to target."""
    if start <= target:
        return target - start
    return m - start + target


def _feasible(values: Sequence[int], m: int, budget: int) -> bool:
    previous = 0
    for value in values:
        candidates: list[int] = []
        if value >= previous:
            candidates.append(value)
        if budget:
            bumped = (value + 1) % m
            if bumped >= previous:
                candidates.append(bumped)
            if _steps_up(bumped, previous, m) + 1 <= budget:
                candidates.append(previous)
        if not candidates:
            return False
        previous = min(candidates)
    return True


def min_operations_non_decreasing(values: Sequence[int], m: int) -> int:
    """Fewest operations (each raising chosen elements by one modulo m) to make values non-decreasing."""
    if m < 1:
        raise ValueError("modulus must be positive")
    values = list(values)
    low, high = -1, m
    while high - low > 1:
        mid = (low + high) // 2
        if _feasible(values, m, mid):
            high = mid
        else:
            low = mid
    return high


def covered_span(intervals: Iterable[tuple[int, int]]) -> int:
    """Total of all lengths plus the gaps left uncovered between the earliest start and the last end.

    Each interval is given as (start, length).
    """
    intervals = list(intervals)
    if not intervals:
        return 0

    total = sum(length for _, length in intervals)
    previous = min(start for start, _ in intervals)
    events: Counter[tuple[int, int]] = Counter()
    for start, length in intervals:
        events[(start, -1)] += 1
        events[(start + length, 1)] += 1

    open_count = 0
    for (position, kind), count in sorted(events.items()):
        if open_count == 0:
            total += max(0, position - previous)
        open_count -= kind * count
        previous = max(previous, position)
    return total


def zigzag_arrange(values: Sequence[int]) -> list[int]:
    """Place values from last to first, alternating between the left and right ends."""
    backwards = list(values)[::-1]
    left = backwards[0::2]
    right = backwards[1::2]
    return left + right[::-1]