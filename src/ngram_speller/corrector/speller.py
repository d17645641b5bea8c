from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ngram_speller.corrector.edits import edit_distance, expand_candidates
from ngram_speller.datasets.corpus import read_words
from ngram_speller.datastructures.trie import AutoCompleteTrie, PrefixDictionary
from ngram_speller.model.ngram import NGram, normalize
from ngram_speller.model.ngram_map import NGramMap

logger = logging.getLogger(__name__)

MAX_EDITS = 2
UNRANKED = -1


@dataclass(frozen=True)
class CorrectionChoice:
    word: str
    edit_distance: int
    dictionary_rank: int = UNRANKED


def _rank_key(rank: int) -> float:
    # unranked words lose rank ties
    return float("inf") if rank < 0 else float(rank)


def _better(a: CorrectionChoice, b: CorrectionChoice) -> bool:
    """True if `a` beats `b`: smaller distance, then smaller dictionary rank."""
    if a.edit_distance != b.edit_distance:
        return a.edit_distance < b.edit_distance
    return _rank_key(a.dictionary_rank) < _rank_key(b.dictionary_rank)


class SpellingCorrector:
    """Dictionary-backed corrector with n-gram context ranking.

    Corrections come from the context model's most frequent continuations
    when any lies within `max_edits` of the misspelling; otherwise every
    dictionary word reachable by up to `max_edits` edits is scored.
    """

    def __init__(self, dictionary: PrefixDictionary, max_edits: int = MAX_EDITS):
        self.dictionary = dictionary
        self.max_edits = max_edits

    @classmethod
    def from_words(cls, words: Iterable[str], **kwargs) -> "SpellingCorrector":
        return cls(AutoCompleteTrie().build(w for w in words if w), **kwargs)

    @classmethod
    def from_file(cls, path: Path, **kwargs) -> "SpellingCorrector":
        return cls.from_words(read_words(path), **kwargs)

    def is_misspelled(self, word: str) -> bool:
        return word not in self.dictionary

    def autocomplete(self, prefix: str) -> Optional[str]:
        """Complete `prefix` only if exactly one dictionary word starts with it."""
        matches = self.dictionary.autocomplete(prefix)
        if len(matches) == 1:
            return matches[0]
        return None

    def possible_corrections(self, segment: str) -> list[CorrectionChoice]:
        """Dictionary words within `max_edits` generated edits of `segment`.

        Each word's distance is its Levenshtein distance to `segment`, capped
        by the fewest generated edits that reached it. A transposition counts
        as one edit there but two in Levenshtein, so the result follows the
        optimal string alignment distance and never exceeds `max_edits`.
        """
        expanded = expand_candidates(segment, self.max_edits)
        pooled: dict[str, int] = {}
        for level in expanded.values():
            for word, depth in level.items():
                if depth < pooled.get(word, depth + 1):
                    pooled[word] = depth

        # pooled is keyed by word, so each word appears once at its smallest depth
        corrections: list[CorrectionChoice] = []
        for word, depth in pooled.items():
            rank = self.dictionary.get(word)
            if rank is None:
                continue
            corrections.append(CorrectionChoice(word, min(depth, edit_distance(word, segment)), rank))
        logger.debug(
            "%r: %d generated strings, %d dictionary corrections", segment, len(pooled), len(corrections)
        )
        return corrections

    def best_correction(
        self,
        ngrams: Optional[NGramMap],
        text: str,
        segment: str,
        num_considered: int,
    ) -> Optional[str]:
        """Pick the best replacement for `segment` given the preceding `text`.

        The closest of the `num_considered` most frequent continuations wins
        (earlier, more frequent entries win ties). If none is within
        `max_edits`, or no model is given, fall back to the closest dictionary
        correction, ties going to the smaller dictionary rank.
        """
        best: Optional[CorrectionChoice] = None
        if ngrams is not None:
            context = NGram.from_text(text, ngrams.n)
            for word in ngrams.words_after(context, num_considered):
                distance = edit_distance(word, segment)
                if distance > self.max_edits:
                    continue
                if best is None or distance < best.edit_distance:
                    rank = self.dictionary.get(word)
                    best = CorrectionChoice(word, distance, UNRANKED if rank is None else rank)

        if best is None:
            logger.debug("no context suggestion for %r, scoring dictionary candidates", segment)
            for choice in self.possible_corrections(segment):
                if best is None or _better(choice, best):
                    best = choice

        return None if best is None else best.word

    def correct_text(self, ngrams: Optional[NGramMap], text: str, num_considered: int) -> str:
        """Correct each misspelled word of `text` using the words before it as context.

        Words are normalized first; a word with no available correction is kept.
        """
        words = [w for w in (normalize(t) for t in text.split()) if w]
        out: list[str] = []
        for word in words:
            if self.is_misspelled(word):
                fixed = self.best_correction(ngrams, " ".join(out), word, num_considered)
                if fixed is not None:
                    word = fixed
            out.append(word)
        return " ".join(out)
