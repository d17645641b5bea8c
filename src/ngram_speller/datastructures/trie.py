from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Optional


class PrefixDictionary(ABC):
    @abstractmethod
    def __contains__(self, word: str) -> bool:
        ...

    @abstractmethod
    def get(self, word: str) -> Optional[int]:
        """Return the dictionary rank of `word`, or None if absent."""

    @abstractmethod
    def autocomplete(self, prefix: str) -> list[str]:
        """Return every stored word that starts with `prefix`."""


@dataclass
class TrieNode:
    children: dict[str, "TrieNode"] = field(default_factory=dict)
    rank: Optional[int] = None


class AutoCompleteTrie(PrefixDictionary):
    """Character trie mapping each word to the order it was first added in."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def add(self, word: str) -> None:
        if not word:
            return
        node = self.root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        if node.rank is None:
            node.rank = self._size
            self._size += 1

    def build(self, words: Iterable[str]) -> "AutoCompleteTrie":
        for w in words:
            self.add(w)
        return self

    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.get(word) is not None

    def __len__(self) -> int:
        return self._size

    def get(self, word: str) -> Optional[int]:
        node = self._find(word)
        return None if node is None else node.rank

    def autocomplete(self, prefix: str) -> list[str]:
        start = self._find(prefix)
        if start is None:
            return []
        out: list[str] = []
        stack = [(prefix, start)]
        while stack:
            word, node = stack.pop()
            if node.rank is not None:
                out.append(word)
            for ch, child in node.children.items():
                stack.append((word + ch, child))
        return out
