"""Disjoint set union with union by size and path compression."""

from __future__ import annotations

from typing import Iterable


class DSU:
    """Disjoint sets over the elements 0 .. n-1."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self._parent_or_size = [-1] * n

    def __len__(self) -> int:
        return self._n

    def _check(self, a: int) -> None:
        if not 0 <= a < self._n:
            raise IndexError(f"element {a} out of range 0..{self._n - 1}")

    def leader(self, a: int) -> int:
        """Return the representative of the set holding a."""
        self._check(a)
        root = a
        while self._parent_or_size[root] >= 0:
            root = self._parent_or_size[root]
        while a != root:
            self._parent_or_size[a], a = root, self._parent_or_size[a]
        return root

    def merge(self, a: int, b: int) -> int:
        """Join the sets of a and b and return the new representative."""
        self._check(a)
        self._check(b)
        x, y = self.leader(a), self.leader(b)
        if x == y:
            return x
        if -self._parent_or_size[x] < -self._parent_or_size[y]:
            x, y = y, x
        self._parent_or_size[x] += self._parent_or_size[y]
        self._parent_or_size[y] = x
        return x

    def same(self, a: int, b: int) -> bool:
        """Return True when a and b are in the same set."""
        self._check(a)
        self._check(b)
        return self.leader(a) == self.leader(b)

    def size(self, a: int) -> int:
        """Return the size of the set holding a."""
        self._check(a)
        return -self._parent_or_size[self.leader(a)]

    def groups(self) -> list[list[int]]:
        """Return all sets, ordered by representative, members ascending."""
        by_leader: dict[int, list[int]] = {}
        for element in range(self._n):
            by_leader.setdefault(self.leader(element), []).append(element)
        return [by_leader[root] for root in sorted(by_leader)]


def largest_component(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Size of the largest connected component; vertices are numbered from 1."""
    dsu = DSU(n)
    for u, v in edges:
        dsu.merge(u - 1, v - 1)
    return max((len(group) for group in dsu.groups()), default=0)