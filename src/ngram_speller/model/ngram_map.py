from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, Iterable, MutableMapping, Optional

from ngram_speller.datasets.corpus import iter_tokens
from ngram_speller.datastructures.priority_queue import PQElement
from ngram_speller.model.ngram import NGram, normalize
from ngram_speller.sorts.topk import top_k_sort

logger = logging.getLogger(__name__)

CountMap = MutableMapping[str, int]
MapFactory = Callable[[], MutableMapping[NGram, CountMap]]
InnerFactory = Callable[[], CountMap]


class NGramMap:
    """Counts of which token follows each window of `n` tokens.

    Built once from a token stream, then queried read-only. The outer and
    inner mappings come from the given factories, so any MutableMapping
    implementation can back the model.
    """

    def __init__(
        self,
        tokens: Iterable[str],
        n: int,
        map_factory: MapFactory = dict,
        inner_factory: InnerFactory = dict,
        rng: Optional[random.Random] = None,
    ):
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        self.n = n
        self.map = map_factory()
        self.inner = inner_factory
        self.rng = rng if rng is not None else random.Random()
        self._ingest(tokens)

    @classmethod
    def from_file(cls, path: Path, n: int, **kwargs) -> "NGramMap":
        return cls(iter_tokens(path), n, **kwargs)

    def _ingest(self, tokens: Iterable[str]) -> None:
        window: list[str] = []
        ngram: Optional[NGram] = None
        observed = 0
        for raw in tokens:
            tok = normalize(raw)
            if not tok:
                continue
            if ngram is None:
                window.append(tok)
                if len(window) == self.n:
                    ngram = NGram.of(window, self.n)
                continue
            self.update_count(ngram, tok)
            ngram = ngram.next(tok)
            observed += 1
        if ngram is None:
            logger.debug("stream ended after %d of %d context tokens", len(window), self.n)
        logger.info("ingested %d continuations over %d contexts (n=%d)", observed, len(self.map), self.n)

    def update_count(self, ngram: NGram, token: str) -> None:
        if len(ngram) != self.n:
            raise ValueError(f"context {str(ngram)!r} has {len(ngram)} tokens, model expects {self.n}")
        follows = self.map.get(ngram)
        if follows is None:
            follows = self.inner()
            self.map[ngram] = follows
        follows[token] = follows.get(token, 0) + 1

    def random_next(self, ngram: NGram) -> Optional[str]:
        """Pick a continuation of `ngram` uniformly among distinct tokens.

        Counts are ignored. Returns None for an unseen context.
        """
        follows = self.map.get(ngram)
        if not follows:
            return None
        idx = self.rng.randrange(len(follows))
        for i, token in enumerate(follows):
            if i == idx:
                return token
        raise RuntimeError("continuation index out of range")

    def counts_after(self, ngram: NGram) -> Optional[list[PQElement[str]]]:
        follows = self.map.get(ngram)
        if follows is None:
            return None
        return [PQElement(token, count) for token, count in follows.items()]

    def words_after(self, ngram: NGram, k: int) -> list[str]:
        """Return up to `k` continuations of `ngram`, most frequent first.

        Equal counts may come back in any order.
        """
        counts = self.counts_after(ngram)
        if counts is None:
            return []
        k = min(k, len(counts))
        top_k_sort(counts, k)
        return [counts[i].data for i in range(k)]

    def __contains__(self, ngram: NGram) -> bool:
        return ngram in self.map

    def __len__(self) -> int:
        return len(self.map)

    def __repr__(self) -> str:
        return f"NGramMap(n={self.n}, contexts={len(self.map)})"
