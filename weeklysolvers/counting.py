"""Counting problems: subsets avoiding a fixed difference and bottle consolidation."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

MOD = 998_244_353


def count_gapped_subsets(values: Iterable[int], k: int) -> int:
    """Count non-empty index subsets with no two chosen values differing by k, modulo 998244353."""
    if k < 1:
        raise ValueError("k must be positive")
    counts = Counter(values)
    ways_ending: dict[int, int] = {}
    total = 1
    for start in sorted(counts):
        if start in ways_ending:
            continue
        x = start
        while x in counts:
            choices = pow(2, counts[x], MOD) - 1
            ways = total * choices
            if x - k in counts:
                ways -= ways_ending[x - k] * choices
            ways %= MOD
            ways_ending[x] = ways
            total = (total + ways) % MOD
            x += k
    return (total - 1) % MOD


def min_bottles(
    amounts: Sequence[int], capacities: Sequence[int]
) -> tuple[int, int] | None:
    """Fewest bottles that can hold all the liquid, and the least amount poured to get there.

    Returns (bottles, poured), or None when no choice of bottles holds a positive total.
    """
    if len(amounts) != len(capacities):
        raise ValueError("amounts and capacities differ in length")
    total = sum(amounts)
    # best[k][c]: largest kept amount over k bottles with capacity c (capped at total)
    best: list[list[int | None]] = [
        [None] * (total + 1) for _ in range(len(amounts) + 1)
    ]
    best[0][0] = 0

    for seen, (amount, capacity) in enumerate(zip(amounts, capacities)):
        for k in range(seen, -1, -1):
            source, target = best[k], best[k + 1]
            for held, kept in enumerate(source):
                if kept is None:
                    continue
                slot = min(total, held + capacity)
                candidate = kept + amount
                if target[slot] is None or candidate > target[slot]:
                    target[slot] = candidate

    for k, row in enumerate(best):
        kept = row[total]
        if kept is not None and kept > 0:
            return k, total - kept
    return None