from ngram_speller.corrector.edits import edit_distance, expand_candidates, possible_edits


def test_edit_distance_known_values():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("flaw", "lawn") == 2
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("same", "same") == 0


def test_edit_distance_symmetric():
    pairs = [("kitten", "sitting"), ("thier", "there"), ("a", "xyz"), ("teh", "the")]
    for a, b in pairs:
        assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_independent_calls():
    # unrelated pairs back to back must not share state
    assert edit_distance("abcdef", "azcdef") == 1
    assert edit_distance("xy", "yx") == 2
    assert edit_distance("abcdef", "azcdef") == 1


def test_possible_edits_counts():
    edits = possible_edits("abc")
    # 2 transpositions, 3 deletions, 3*26 substitutions, 4*26 insertions
    assert len(edits) == 2 + 3 + 78 + 104
    assert "bac" in edits
    assert "ab" in edits
    assert "abcz" in edits
    assert "zabc" in edits
    assert "azc" in edits


def test_possible_edits_transposition():
    assert "the" in possible_edits("teh")


def test_possible_edits_empty_segment():
    assert possible_edits("") == list("abcdefghijklmnopqrstuvwxyz")


def test_expand_candidates_depths():
    expanded = expand_candidates("ab", max_edits=1)
    assert list(expanded) == ["ab"]
    assert set(expanded["ab"].values()) == {1}

    expanded = expand_candidates("ab", max_edits=2)
    assert "ab" in expanded
    assert "ba" in expanded
    # second-level edits are labelled with depth 2
    assert expanded["ba"]["ab"] == 2
    assert expanded["ab"]["ba"] == 1


def test_expand_candidates_zero_edits():
    assert expand_candidates("ab", max_edits=0) == {}
