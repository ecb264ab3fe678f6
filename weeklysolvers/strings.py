"""String problems: dictionary segmentation counting and A-to-Z substrings."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator

MOD = 1_000_000_007


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    count: int = 0
    ends: int = 0


class Trie:
    """A prefix tree that counts how many times each word was inserted."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add one occurrence of the word."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1
        node.ends += 1

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.ends > 0

    def _matches(self, text: str, start: int) -> Iterator[tuple[int, int]]:
        """Yield (end, occurrences) for each stored word equal to text[start:end]."""
        node = self._root
        for end, ch in enumerate(islice(text, start, None), start + 1):
            node = node.children.get(ch)
            if node is None:
                return
            if node.ends:
                yield end, node.ends


def count_segmentations(text: str, words: Iterable[str]) -> int:
    """Count the ways to split text into dictionary words, modulo 1e9+7."""
    trie = Trie(words)
    ways = [0] * (len(text) + 1)
    ways[0] = 1
    for start in range(len(text)):
        if not ways[start]:
            continue
        for end, occurrences in trie._matches(text, start):
            ways[end] = (ways[end] + ways[start] * occurrences) % MOD
    return ways[-1]


def longest_a_to_z(text: str) -> int:
    """Length of the longest substring starting with 'A' and ending with 'Z', or 0."""
    first = text.find("A")
    last = text.rfind("Z")
    if first == -1 or last == -1 or first > last:
        return 0
    return last - first + 1