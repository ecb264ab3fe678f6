"""Command line front end: read a problem's input and print its answer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterator

from .counting import count_gapped_subsets, min_bottles
from .dsu import largest_component
from .geometry import count_triangles, sum_of_squared_areas
from .number_theory import (
    binomial_divisor_count,
    has_distinct_square_sum,
    lucas,
    min_steps_to_equal,
    smallest_zeckendorf_term,
)
from .segment_tree import count_rejected
from .sequences import (
    covered_span,
    longest_non_increasing,
    min_operations_non_decreasing,
    zigzag_arrange,
)
from .strings import count_segmentations, longest_a_to_z


class _EndOfInput(ValueError):
    pass


class _Reader:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]


def _triangles(reader: _Reader) -> list[str]:
    n = reader.integer()
    return [str(count_triangles(reader.pairs(n)))]


def _segmentations(reader: _Reader) -> list[str]:
    text = reader.word()
    k = reader.integer()
    words = [reader.word() for _ in range(k)]
    return [str(count_segmentations(text, words))]


def _a_to_z(reader: _Reader) -> list[str]:
    return [str(longest_a_to_z(reader.word()))]


def _non_increasing(reader: _Reader) -> list[str]:
    n = reader.integer()
    return [str(longest_non_increasing(reader.integers(n)))]


def _zeckendorf(reader: _Reader) -> list[str]:
    return [str(smallest_zeckendorf_term(reader.integer()))]


def _modular_sort(reader: _Reader) -> list[str]:
    n, m = reader.integer(), reader.integer()
    return [str(min_operations_non_decreasing(reader.integers(n), m))]


def _equal_steps(reader: _Reader) -> list[str]:
    cases = reader.integer()
    return [str(min_steps_to_equal(*reader.pairs(1)[0])) for _ in range(cases)]


def _binomial_divisors(reader: _Reader) -> list[str]:
    lines = []
    while True:
        try:
            n, k = reader.integer(), reader.integer()
        except ValueError:
            break
        lines.append(str(binomial_divisor_count(n, k)))
    return lines


def _span(reader: _Reader) -> list[str]:
    n = reader.integer()
    return [str(covered_span(reader.pairs(n)))]


def _zigzag(reader: _Reader) -> list[str]:
    n = reader.integer()
    return [" ".join(map(str, zigzag_arrange(reader.integers(n))))]


def _face_areas(reader: _Reader) -> list[str]:
    n = reader.integer()
    segments = [tuple(reader.integers(4)) for _ in range(n)]
    return [f"{sum_of_squared_areas(segments):.6f}"]


def _seats(reader: _Reader) -> list[str]:
    n, m = reader.integer(), reader.integer()
    requests: list[tuple] = []
    for _ in range(m):
        kind = reader.word()
        if kind == "A":
            requests.append((kind, reader.integer()))
        elif kind == "L":
            requests.append((kind, reader.integer(), reader.integer()))
    return [str(count_rejected(n, requests))]


def _gapped_subsets(reader: _Reader) -> list[str]:
    cases = reader.integer()
    lines = []
    for _ in range(cases):
        n, k = reader.integer(), reader.integer()
        lines.append(str(count_gapped_subsets(reader.integers(n), k)))
    return lines


def _bottles(reader: _Reader) -> list[str]:
    n = reader.integer()
    amounts = reader.integers(n)
    capacities = reader.integers(n)
    answer = min_bottles(amounts, capacities)
    if answer is None:
        return []
    bottles, poured = answer
    return [f"{bottles} {poured}"]


def _lucas(reader: _Reader) -> list[str]:
    return [str(lucas(reader.integer()))]


def _components(reader: _Reader) -> list[str]:
    n, m = reader.integer(), reader.integer()
    return [str(largest_component(n, reader.pairs(m)))]


def _square_sum(reader: _Reader) -> list[str]:
    n = reader.integer()
    found = has_distinct_square_sum(n)
    verdict = "YES" if found else "NO"
    return [verdict]


_PROBLEMS: dict[str, Callable[[_Reader], list[str]]] = {
    "1A": _triangles,
    "1B": _segmentations,
    "1C": _a_to_z,
    "1D": _non_increasing,
    "1E": _zeckendorf,
    "1G": _modular_sort,
    "1H": _equal_steps,
    "1I": _binomial_divisors,
    "1J": _span,
    "2B": _zigzag,
    "2C": _face_areas,
    "2D": _seats,
    "2E": _gapped_subsets,
    "2F": _bottles,
    "2G": _lucas,
    "2H": _components,
    "2J": _square_sum,
}


def solve(problem: str, text: str) -> str:
    """Answer the named problem (such as "1A" or "2E") for the given input text."""
    handler = _PROBLEMS.get(problem.upper())
    if handler is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(f"{line}\n" for line in handler(_Reader(text)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weeklysolvers", description="Solve one of the weekly problems."
    )
    parser.add_argument("problem", type=str.upper, choices=sorted(_PROBLEMS))
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        result = solve(args.problem, text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(result)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())