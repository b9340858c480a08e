#!/usr/bin/env python3
"""
Hint Search

Loads a word list into a compressed prefix tree and lists the stored
words that start with each query, either from the command line or an
interactive prompt.
"""

from __future__ import annotations

import argparse
import logging

from hinttree.cli import run_cli
from hinttree.dictionary import Dictionary

log = logging.getLogger("hinttree")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Hint Search -- lists stored words starting with a prefix",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--query", "-q", action="append", default=None,
                        help="Prefix to search for (repeatable); skips the prompt")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    dictionary = Dictionary(args.dict)
    log.debug("Tree holds %d words", len(dictionary.tree))
    run_cli(dictionary, args.query)


if __name__ == "__main__":
    main()
