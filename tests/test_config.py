import pytest

from ngram_speller.utils.config import SpellerConfig, load_speller_config


def test_defaults_without_file():
    assert load_speller_config(None) == SpellerConfig()


def test_load_yaml_overrides(tmp_path):
    p = tmp_path / "speller.yaml"
    p.write_text("n: 3\nnum_considered: 10\nseed: 4\n", encoding="utf-8")
    cfg = load_speller_config(p)
    assert cfg == SpellerConfig(n=3, max_edits=2, num_considered=10, seed=4)


def test_empty_yaml_is_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_speller_config(p) == SpellerConfig()


def test_invalid_value(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("n: 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_speller_config(p)
