import io
import logging

import pytest

from speller import ConfigurationError, DataSourceError, FrequencyModel, build, load, read_corpus


def test_build_lowercases_and_counts():
    model = build("The the THE, cat_1 dog-dog 42")
    assert dict(model) == {"the": 3, "cat_1": 1, "dog": 2, "42": 1}
    assert model.total == 7


def test_build_unicode_word_characters():
    model = build("Café café naïve")
    assert model["café"] == 2
    assert "naïve" in model


def test_build_empty_text():
    model = build("  ... !!! ")
    assert len(model) == 0
    assert model.total == 0


def test_absent_words_are_not_stored():
    model = build("alpha beta alpha")
    assert "gamma" not in model
    with pytest.raises(KeyError):
        model["gamma"]


def test_custom_pattern():
    model = build("ab12 cd", pattern=r"[a-z]+")
    assert dict(model) == {"ab": 1, "cd": 1}


def test_pattern_with_empty_matches_skips_them():
    model = build("a b", pattern=r"\w*")
    assert dict(model) == {"a": 1, "b": 1}


def test_bad_pattern_is_configuration_error():
    with pytest.raises(ConfigurationError):
        build("text", pattern="(")


def test_zero_counts_dropped_and_negative_rejected():
    model = FrequencyModel({"a": 0, "b": 2})
    assert "a" not in model
    assert len(model) == 1
    with pytest.raises(ConfigurationError):
        FrequencyModel({"a": -1})


def test_keys_lowercased_and_merged():
    model = FrequencyModel({"Teh": 100, "the": 1, "THE": 2})
    assert dict(model) == {"teh": 100, "the": 3}
    assert model.total == 103
    assert "Teh" not in model


def test_most_common_orders_by_count_then_word():
    model = FrequencyModel({"b": 2, "a": 2, "c": 5})
    assert model.most_common() == [("c", 5), ("a", 2), ("b", 2)]
    assert model.most_common(1) == [("c", 5)]


def test_read_corpus_from_path(corpus_file):
    assert "spelling corpus" in read_corpus(corpus_file)
    assert "spelling corpus" in read_corpus(str(corpus_file))


def test_read_corpus_from_handles():
    assert read_corpus(io.StringIO("hello")) == "hello"
    assert read_corpus(io.BytesIO("héllo".encode("utf-8"))) == "héllo"


def test_read_corpus_closed_handle():
    fp = io.StringIO("hello")
    fp.close()
    with pytest.raises(DataSourceError):
        read_corpus(fp)


def test_read_corpus_missing_file(tmp_path):
    with pytest.raises(DataSourceError):
        read_corpus(tmp_path / "missing.txt")


def test_read_corpus_undecodable_bytes(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok \xff\xfe\xff")
    with pytest.raises(DataSourceError):
        read_corpus(path)
    with pytest.raises(DataSourceError):
        read_corpus(io.BytesIO(b"\xff"))


def test_read_corpus_unknown_encoding(corpus_file):
    with pytest.raises(ConfigurationError):
        read_corpus(corpus_file, encoding="no-such-codec")


def test_load_checks_pattern_before_reading(tmp_path):
    with pytest.raises(ConfigurationError):
        load(tmp_path / "missing.txt", pattern="[")


def test_load_logs_model_size(corpus_file, caplog):
    caplog.set_level(logging.INFO, logger="speller.model")
    model = load(corpus_file)
    assert model["the"] == 4
    assert any("words" in r.getMessage() for r in caplog.records)
