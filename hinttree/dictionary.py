"""Word list loading into a hint tree."""

from __future__ import annotations

import logging
import os

from hinttree import constants
from hinttree.tree import HintTree

log = logging.getLogger("hinttree")


class Dictionary:
    """Word set plus the hint tree built from it."""

    def __init__(self, dict_path: str | None = None):
        self.words: set[str] = set()
        self.tree = HintTree()
        self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(constants.DICT_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                with open(path, "r", encoding="utf-8") as f:
                    for line in f:
                        self.add(line.strip())
                if self.words:
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
                    return
                log.debug("No usable words in %s", path)

        log.warning("No word list found -- using built-in minimal word list.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        for word in constants.DEFAULT_WORDS:
            self.add(word)

    def add(self, word: str) -> bool:
        """Insert ``word``; False if the tree filter rejects it."""
        if not HintTree.accepts(word):
            return False
        self.words.add(word)
        self.tree.insert(word)
        return True

    def hints(self, query: str | None) -> list[str]:
        return self.tree.search(query)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)
