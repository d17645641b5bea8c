from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

_NON_LETTER = re.compile(r"[^a-z]")


def normalize(token: str) -> str:
    # lowercase, letters only
    return _NON_LETTER.sub("", token.lower())


@dataclass(frozen=True)
class NGram:
    """Immutable window of consecutive normalized tokens."""

    tokens: tuple[str, ...]

    @staticmethod
    def of(tokens: Iterable[str], n: int) -> "NGram":
        """Build a window that must hold exactly `n` tokens."""
        tokens = tuple(tokens)
        if len(tokens) != n:
            raise ValueError(f"expected {n} tokens, got {len(tokens)}: {tokens!r}")
        return NGram(tokens)

    @staticmethod
    def from_text(text: str, n: Optional[int] = None) -> "NGram":
        """Normalize `text`; with `n`, keep only its last `n` tokens.

        Text with fewer than `n` tokens gives a shorter window, which no
        model of order `n` contains.
        """
        words = tuple(w for w in (normalize(t) for t in text.split()) if w)
        if n is not None:
            words = words[-n:] if n > 0 else ()
        return NGram(words)

    def next(self, token: str) -> "NGram":
        """Drop the oldest token and append `token`."""
        return NGram(self.tokens[1:] + (token,))

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return " ".join(self.tokens)
