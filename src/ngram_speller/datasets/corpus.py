from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_tokens(path: Path) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text file, line by line."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            yield from line.split()


def read_words(path: Path) -> list[str]:
    """Read a dictionary word list (any whitespace layout), lowercased, in file order."""
    return [w.lower() for w in iter_tokens(path)]
