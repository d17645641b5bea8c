import pytest

from ngram_speller.datastructures.priority_queue import HeapInvariantError, MinHeap, PQElement
from ngram_speller.datastructures.trie import AutoCompleteTrie


def test_min_heap_orders_by_priority():
    heap = MinHeap()
    for word, p in [("b", 5), ("a", 1), ("c", 3)]:
        heap.enqueue(PQElement(word, p))
    assert heap.peek().data == "a"
    assert [heap.dequeue().data for _ in range(3)] == ["a", "c", "b"]
    assert len(heap) == 0


def test_min_heap_empty_is_an_invariant_error():
    heap = MinHeap()
    with pytest.raises(HeapInvariantError):
        heap.dequeue()
    with pytest.raises(HeapInvariantError):
        heap.peek()


def test_trie_ranks_follow_insertion_order():
    trie = AutoCompleteTrie().build(["the", "then", "cat", "the"])
    assert len(trie) == 3
    assert trie.get("the") == 0
    assert trie.get("then") == 1
    assert trie.get("cat") == 2
    assert trie.get("th") is None
    assert "then" in trie
    assert "ca" not in trie


def test_trie_autocomplete():
    trie = AutoCompleteTrie().build(["apple", "application", "banana"])
    assert sorted(trie.autocomplete("app")) == ["apple", "application"]
    assert trie.autocomplete("ban") == ["banana"]
    assert trie.autocomplete("x") == []
