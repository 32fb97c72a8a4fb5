"""Trie index for approximate (bounded edit distance) string lookup.

The search walks the trie depth-first carrying one row of the Levenshtein
DP table per node, which acts as a lazily expanded Levenshtein automaton:
a subtree is abandoned as soon as the smallest entry in its row exceeds
the distance bound, since no extension of that prefix can get closer.
"""

from typing import Iterable


class _Node:
    __slots__ = ("children", "indices")

    def __init__(self) -> None:
        self.children: dict[str, "_Node"] = {}
        self.indices: list[int] = []  # positions of strings ending here


class LevenshteinTrie:
    """Prefix tree mapping strings to every position they were inserted at."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "LevenshteinTrie":
        """Index each string under its position in ``strings``."""
        trie = cls()
        for index, word in enumerate(strings):
            trie.insert(word, index)
        return trie

    def __len__(self) -> int:
        return self._size

    def insert(self, word: str, index: int) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.indices.append(index)
        self._size += 1

    def search(self, query: str, max_dist: int) -> list[tuple[int, int]]:
        """Find every indexed string within ``max_dist`` edits of ``query``.

        Args:
            query: String to match.
            max_dist: Inclusive maximum Levenshtein distance.

        Returns:
            Unordered list of (index, distance) pairs, one per inserted
            position, including the query itself if it was indexed.
        """
        n = len(query)
        first_row = list(range(n + 1))
        results: list[tuple[int, int]] = []

        # Empty string sits at the root
        if first_row[n] <= max_dist:
            results.extend((i, first_row[n]) for i in self._root.indices)

        stack = [(child, ch, first_row) for ch, child in self._root.children.items()]
        while stack:
            node, ch, prev = stack.pop()

            row = [prev[0] + 1]
            for j in range(1, n + 1):
                cost = 0 if query[j - 1] == ch else 1
                row.append(min(row[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))

            if node.indices and row[n] <= max_dist:
                results.extend((i, row[n]) for i in node.indices)

            if min(row) <= max_dist:
                stack.extend((child, c, row) for c, child in node.children.items())

        return results
