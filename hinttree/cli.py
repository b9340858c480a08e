"""CLI / terminal mode for the hint tree."""

from __future__ import annotations

import logging
import time

from hinttree.constants import PROMPT
from hinttree.dictionary import Dictionary

log = logging.getLogger("hinttree")


def print_hints(dictionary: Dictionary, query: str) -> list[str]:
    """Search one query and print the hints found."""
    t0 = time.time()
    hints = dictionary.hints(query)
    elapsed = time.time() - t0

    if not hints:
        print(f"  No hints for '{query}'.")
        return hints

    print(f"  {len(hints)} hint(s) for '{query}' in {elapsed * 1000:.2f}ms:")
    for hint in hints:
        print(f"    {hint}")
    return hints


def run_cli(dictionary: Dictionary, queries: list[str] | None = None) -> None:
    """Answer ``queries``, or run the interactive prompt if none are given."""
    if queries:
        for query in queries:
            print_hints(dictionary, query)
        return

    print("\n" + "=" * 60)
    print("  HINT TREE -- Prefix Search")
    print("=" * 60)
    print()
    print("Commands:")
    print("  PREFIX                -- list stored words starting with PREFIX")
    print("  add WORD              -- store another word")
    print("  show                  -- print the tree structure")
    print("  quit                  -- leave")
    print()

    while True:
        try:
            inp = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd = inp.lower()
        if cmd in ("quit", "done"):
            break
        if cmd == "show":
            print(dictionary.tree)
            continue

        parts = inp.split()
        if parts[0].lower() == "add":
            if len(parts) == 2 and dictionary.add(parts[1]):
                print(f"  Added '{parts[1]}'")
            else:
                print("  Format: add WORD")
            continue
        if len(parts) > 1:
            print("  Queries are single words (no spaces).")
            continue

        print_hints(dictionary, inp)

    log.debug("Session ended with %d words", len(dictionary))
