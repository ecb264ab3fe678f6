"""Seat allocation over a row of positions using a lazy segment tree of free runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class _Run:
    """Summary of a range: free prefix, free suffix, longest free run, all free."""

    prefix: int
    suffix: int
    best: int
    full: bool


_IDENTITY = _Run(0, 0, 0, True)
_OCCUPIED = _Run(0, 0, 0, False)


def _free(length: int) -> _Run:
    return _Run(length, length, length, True)


def _merge(a: _Run, b: _Run) -> _Run:
    return _Run(
        prefix=a.prefix + (b.prefix if a.full else 0),
        suffix=b.suffix + (a.suffix if b.full else 0),
        best=max(a.best, b.best, a.suffix + b.prefix),
        full=a.full and b.full,
    )


class SeatTree:
    """Positions 1..n, each free or occupied, all free at the start."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of positions must be non-negative")
        self.n = n
        size = 4 * max(n, 1)
        self._runs: list[_Run] = [_OCCUPIED] * size
        self._pending: list[bool | None] = [None] * size
        if n:
            self._apply(1, 1, n, True)

    def __len__(self) -> int:
        return self.n

    @property
    def longest_run(self) -> int:
        """Length of the longest block of consecutive free positions."""
        return self._runs[1].best if self.n else 0

    def _apply(self, node: int, lo: int, hi: int, free: bool) -> None:
        self._runs[node] = _free(hi - lo + 1) if free else _OCCUPIED
        self._pending[node] = free

    def _push(self, node: int, lo: int, hi: int) -> None:
        flag = self._pending[node]
        if flag is None:
            return
        self._pending[node] = None
        if lo == hi:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node, lo, mid, flag)
        self._apply(2 * node + 1, mid + 1, hi, flag)

    def _update(
        self, node: int, lo: int, hi: int, left: int, right: int, free: bool
    ) -> None:
        if hi < left or lo > right:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, free)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, free)
        self._update(2 * node + 1, mid + 1, hi, left, right, free)
        self._runs[node] = _merge(self._runs[2 * node], self._runs[2 * node + 1])

    def assign(self, left: int, right: int, free: bool) -> None:
        """Mark positions left..right (inclusive, clipped to 1..n) free or occupied."""
        left = max(left, 1)
        right = min(right, self.n)
        if left > right:
            return
        self._update(1, 1, self.n, left, right, free)

    def first_fit(self, k: int) -> int | None:
        """Last position of the leftmost block of k free positions, or None."""
        if k < 1:
            raise ValueError("block length must be at least 1")
        if not self.n or self._runs[1].best < k:
            return None

        node, lo, hi = 1, 1, self.n
        acc = _IDENTITY
        while lo < hi:
            self._push(node, lo, hi)
            mid = (lo + hi) // 2
            candidate = _merge(acc, self._runs[2 * node])
            if candidate.best >= k:
                node, hi = 2 * node, mid
            else:
                acc = candidate
                node, lo = 2 * node + 1, mid + 1
        return hi


def count_rejected(n: int, requests: Iterable[Sequence]) -> int:
    """Process ("A", k) seat requests and ("L", l, r) releases; count rejected requests."""
    tree = SeatTree(n)
    rejected = 0
    for kind, *args in requests:
        if kind == "A":
            (k,) = args
            if k == 0:
                continue
            end = tree.first_fit(k)
            if end is None:
                rejected += 1
            else:
                tree.assign(end - k + 1, end, False)
        elif kind == "L":
            left, right = args
            tree.assign(left, right, True)
    return rejected