"""Hint tree -- in-memory prefix search over a word list."""

from hinttree.node import TERMINATOR, HintNode, Terminator
from hinttree.tree import HintTree
from hinttree.dictionary import Dictionary

__all__ = [
    "TERMINATOR",
    "Dictionary",
    "HintNode",
    "HintTree",
    "Terminator",
]
