"""Planar geometry: collinearity, triangle counting and face areas of segment drawings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence

Point = tuple[int, int]

_AREA_EPSILON = 1e-9


def is_collinear(a: Point, b: Point, c: Point) -> bool:
    """Return True when the three points lie on one straight line."""
    (ax, ay), (bx, by), (cx, cy) = a, b, c
    return ax * (by - cy) + bx * (cy - ay) + cx * (ay - by) == 0


def count_triangles(points: Sequence[Point]) -> int:
    """Count the triples of points that form a non-degenerate triangle."""
    return sum(
        1 for a, b, c in combinations(points, 3) if not is_collinear(a, b, c)
    )


@dataclass
class _HalfEdge:
    to: int
    angle: float
    rev: int = 0
    used: bool = False


class PlanarSubdivision:
    """A drawing of straight segments whose bounded faces can be measured."""

    def __init__(self) -> None:
        self._vertex_ids: dict[Point, int] = {}
        self.points: list[Point] = []
        self.edges: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self.edges)

    def _vertex(self, x: int, y: int) -> int:
        key = (x, y)
        vertex_id = self._vertex_ids.get(key)
        if vertex_id is None:
            vertex_id = len(self.points)
            self.points.append(key)
            self._vertex_ids[key] = vertex_id
        return vertex_id

    def add_edge(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Add the segment from (x1, y1) to (x2, y2)."""
        self.edges.append((self._vertex(x1, y1), self._vertex(x2, y2)))

    def _half_edges(self) -> list[list[_HalfEdge]]:
        adjacency: list[list[_HalfEdge]] = [[] for _ in self.points]
        for u, v in self.edges:
            (ax, ay), (bx, by) = self.points[u], self.points[v]
            adjacency[u].append(_HalfEdge(v, math.atan2(by - ay, bx - ax)))
            adjacency[v].append(_HalfEdge(u, math.atan2(ay - by, ax - bx)))

        for outgoing in adjacency:
            outgoing.sort(key=lambda half: half.angle)

        position: dict[tuple[int, int], int] = {}
        for u, outgoing in enumerate(adjacency):
            for index, half in enumerate(outgoing):
                position[(u, half.to)] = index

        for u, outgoing in enumerate(adjacency):
            for half in outgoing:
                half.rev = position[(half.to, u)]
        return adjacency

    def _signed_area(self, face: list[int]) -> float:
        corners = [self.points[v] for v in face]
        twice = sum(
            ax * by - ay * bx
            for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1])
        )
        return twice / 2.0

    def face_areas(self) -> list[float]:
        """Return the areas of the bounded faces, in traversal order."""
        adjacency = self._half_edges()
        areas: list[float] = []

        for u, outgoing in enumerate(adjacency):
            for i, start in enumerate(outgoing):
                if start.used:
                    continue

                face: list[int] = []
                cu, ci = u, i
                while True:
                    half = adjacency[cu][ci]
                    if half.used:
                        break
                    half.used = True
                    face.append(cu)
                    nxt = half.to
                    ci = (half.rev - 1) % len(adjacency[nxt])
                    cu = nxt
                    if cu == u and ci == i:
                        break

                if len(face) < 3:
                    continue
                area = self._signed_area(face)
                if area > _AREA_EPSILON:
                    areas.append(area)

        return areas


def sum_of_squared_areas(segments: Iterable[tuple[int, int, int, int]]) -> float:
    """Sum the squares of the bounded face areas formed by the segments."""
    subdivision = PlanarSubdivision()
    for x1, y1, x2, y2 in segments:
        subdivision.add_edge(x1, y1, x2, y2)
    return sum(area * area for area in subdivision.face_areas())