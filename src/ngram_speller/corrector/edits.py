from __future__ import annotations

import string

ALPHABET = string.ascii_lowercase


def possible_edits(segment: str) -> list[str]:
    """All strings one transposition, deletion, substitution or insertion away.

    Duplicates are kept; generation order is position by position.
    """
    edits: list[str] = []
    for i in range(len(segment)):
        left, right = segment[:i], segment[i:]
        if len(right) >= 2:
            edits.append(left + right[1] + right[0] + right[2:])
        edits.append(left + right[1:])
        edits.extend(left + c + right[1:] for c in ALPHABET)
        edits.extend(left + c + right for c in ALPHABET)
    # insertion after the last character
    edits.extend(segment + c for c in ALPHABET)
    return edits


def expand_candidates(segment: str, max_edits: int = 2) -> dict[str, dict[str, int]]:
    """Recursively apply `possible_edits` up to `max_edits` levels deep.

    Returns {expanded string: {edit: depth}}. Each string is expanded at
    most once, at whichever depth reaches it first in depth-first order,
    so a depth label can exceed the true edit distance.
    """
    expanded: dict[str, dict[str, int]] = {}

    def _expand(seg: str, depth: int) -> None:
        if depth > max_edits or seg in expanded:
            return
        level: dict[str, int] = {}
        expanded[seg] = level
        for edit in possible_edits(seg):
            level.setdefault(edit, depth)
            _expand(edit, depth + 1)

    _expand(segment, 1)
    return expanded


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance (insert, delete, substitute) between two strings.

    Each call works on its own rows, so nothing carries over between pairs.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]
