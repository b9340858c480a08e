"""Compressed prefix tree answering "which stored words start with this?"."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from hinttree.node import HintNode

log = logging.getLogger("hinttree.tree")


class HintTree:
    """Stores words so that every word starting with a query can be found fast.

    Words are grouped by first character; each group is a radix tree whose
    nodes hold the longest common prefix of their subtree.

    Empty words, ``None`` and anything containing a space are ignored by
    both :meth:`insert` and :meth:`search`.
    """

    def __init__(self):
        self.roots: dict[str, HintNode] = {}

    @staticmethod
    def accepts(word: str | None) -> bool:
        """True if ``word`` passes the input filter."""
        return bool(word) and " " not in word

    def insert(self, word: str | None) -> None:
        if not self.accepts(word):
            log.debug("Skipping %r", word)
            return
        root = self.roots.get(word[0])
        if root is None:
            self.roots[word[0]] = HintNode(word)
        else:
            root.split(word)

    def insert_all(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def search(self, query: str | None) -> list[str]:
        """Stored words starting with ``query``, in lexicographic order."""
        if not self.accepts(query):
            return []
        root = self.roots.get(query[0])
        if root is None:
            return []
        return root.find_hints(query)

    def words(self) -> Iterator[str]:
        """Every stored word, in lexicographic order."""
        for key in sorted(self.roots):
            hints: list[str] = []
            self.roots[key].collect_hints("", hints)
            yield from hints

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __len__(self) -> int:
        return sum(1 for _ in self.words())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word in self.search(word)

    def __str__(self) -> str:
        lines: list[str] = []
        for key in sorted(self.roots):
            stack = [(self.roots[key], 0)]
            while stack:
                node, depth = stack.pop()
                label = "$" if not node.text else node.text
                lines.append("  " * depth + label)
                stack.extend(
                    (child, depth + 1) for child in reversed(node.ordered_children())
                )
        return "\n".join(lines)
