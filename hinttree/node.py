"""Edge-compressed node of the hint tree."""

from __future__ import annotations

import enum


class Terminator(enum.Enum):
    """Child key marking that the path ending at the parent is a stored word."""

    END = 0


TERMINATOR = Terminator.END


def common_prefix(s1: str, s2: str) -> str:
    """Longest common prefix of two strings."""
    n = min(len(s1), len(s2))
    for i in range(n):
        if s1[i] != s2[i]:
            return s1[:i]
    return s1[:n]


class HintNode:
    """One segment of the tree.

    ``text`` is the longest common prefix of every word in this subtree.
    A node without children holds the last part of exactly one word.
    ``children`` is keyed by the first character of each child's text, or by
    ``TERMINATOR`` for the empty marker node that says ``text`` ends a word
    even though longer words continue below.
    """

    __slots__ = ("text", "children")

    def __init__(self, text: str):
        self.text = text
        self.children: dict[str | Terminator, HintNode] = {}

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_word_end(self) -> bool:
        """True if the path ending at this node's text is a stored word."""
        return self.is_leaf or TERMINATOR in self.children

    def ordered_children(self) -> list[HintNode]:
        """Children with the terminator first, then by ascending key."""
        keys = sorted(k for k in self.children if k is not TERMINATOR)
        if TERMINATOR in self.children:
            keys.insert(0, TERMINATOR)
        return [self.children[k] for k in keys]

    # insertion

    def split(self, text: str) -> None:
        """Merge ``text`` into this subtree, splitting this node if needed.

        ``text`` must share its first character with ``self.text``.
        """
        if text == self.text and self.is_word_end:
            return
        if not text or not self.text or text[0] != self.text[0]:
            raise RuntimeError(
                f"cannot split node {self.text!r} with unrelated text {text!r}"
            )

        common = common_prefix(text, self.text)
        old_rest = self.text[len(common):]
        new_rest = text[len(common):]

        if not old_rest:
            # old text was a whole word and is now a branching point too
            if not self.children:
                self.children[TERMINATOR] = HintNode("")
        else:
            moved = HintNode(old_rest)
            moved.children = self.children
            self.children = {old_rest[0]: moved}

        if not new_rest:
            self.children[TERMINATOR] = HintNode("")
        else:
            child = self.children.get(new_rest[0])
            if child is not None:
                child.split(new_rest)
            else:
                self.children[new_rest[0]] = HintNode(new_rest)

        self.text = common

    # search

    def find_hints(self, query: str) -> list[str]:
        """All words in this subtree starting with ``query``."""
        hints: list[str] = []
        node: HintNode | None = self
        matched = ""
        remaining = query
        while node is not None:
            if node.text.startswith(remaining):
                node.collect_hints(matched, hints)
                break
            if not remaining.startswith(node.text):
                break
            matched += node.text
            remaining = remaining[len(node.text):]
            node = node.children.get(remaining[0])
        return hints

    def collect_hints(self, prefix: str, hints: list[str]) -> None:
        """Append every word below this node, each prefixed with ``prefix``."""
        stack = [(self, prefix)]
        while stack:
            node, before = stack.pop()
            word = before + node.text
            if node.is_leaf:
                hints.append(word)
                continue
            # reversed so that pops come out in ascending order
            stack.extend((child, word) for child in reversed(node.ordered_children()))

    def __repr__(self) -> str:
        keys = ["$" if k is TERMINATOR else k for k in self.children]
        return f"HintNode({self.text!r}, children={keys})"
