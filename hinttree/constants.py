"""Hint tree configuration values."""

from __future__ import annotations

import os

# Vocabulary used when no word list file is found.
DEFAULT_WORDS: tuple[str, ...] = (
    "cat",
    "car",
    "carpet",
    "cactus",
    "java",
    "javascript",
    "internet",
)

# Word list files tried in order, after any explicit --dict path.
DICT_SEARCH_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

PROMPT = "  hint> "
