from pathlib import Path

import pytest

from speech_analysis.config import ConfigError, LexiconSource
from speech_analysis.lexicons import (
    NRC_LABELS,
    BinaryLexicon,
    CategoricalLexicon,
    ScoreLexicon,
    load_lexicon,
    load_lexicon_csv,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_binary_csv(tmp_path):
    path = _write(tmp_path / "bing.csv", "term,label\nFreedom,positive\nwar, Negative\n")

    lexicon = load_lexicon_csv(path, name="bing", kind="binary")

    assert isinstance(lexicon, BinaryLexicon)
    assert lexicon.labels == {"freedom": "positive", "war": "negative"}


def test_signed_csv(tmp_path):
    path = _write(tmp_path / "afinn.csv", "term,score\ngood,3\nbad,-3\n")

    lexicon = load_lexicon_csv(path, name="afinn", kind="signed")

    assert isinstance(lexicon, ScoreLexicon)
    assert lexicon.scores == {"good": 3, "bad": -3}


def test_categorical_csv_groups_labels(tmp_path):
    path = _write(
        tmp_path / "nrc.csv", "term,label\nfreedom,positive\nfreedom,joy\nwar,negative\n"
    )

    lexicon = load_lexicon_csv(path, name="nrc", kind="categorical")

    assert isinstance(lexicon, CategoricalLexicon)
    assert lexicon.categories["freedom"] == frozenset({"positive", "joy"})


def test_invalid_values_raise_config_error(tmp_path):
    bad_label = _write(tmp_path / "bing.csv", "term,label\nfreedom,great\n")
    bad_score = _write(tmp_path / "afinn.csv", "term,score\nfreedom,9\n")
    missing = _write(tmp_path / "other.csv", "word,label\nfreedom,positive\n")

    with pytest.raises(ConfigError):
        load_lexicon_csv(bad_label, name="bing", kind="binary")
    with pytest.raises(ConfigError):
        load_lexicon_csv(bad_score, name="afinn", kind="signed")
    with pytest.raises(ConfigError, match="missing column"):
        load_lexicon_csv(missing, name="bing", kind="binary")


def test_load_lexicon_from_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_lexicon(LexiconSource("bing", tmp_path / "nope.csv"), [])


def test_lexicon_validation():
    with pytest.raises(ValueError):
        ScoreLexicon("afinn", {"x": 6})
    with pytest.raises(ValueError):
        CategoricalLexicon("nrc", {"x": frozenset({"bliss"})})


def test_builtin_afinn_scores_known_terms():
    pytest.importorskip("afinn")

    lexicon = load_lexicon(LexiconSource("afinn"), ["good", "bad", "table"])

    assert lexicon.scores["good"] > 0
    assert lexicon.scores["bad"] < 0
    assert "table" not in lexicon.scores


def test_fractional_scores_are_rejected(tmp_path):
    path = _write(tmp_path / "afinn.csv", "term,score\ngood,3\nokay,2.5\n")

    with pytest.raises(ConfigError, match="not an integer"):
        load_lexicon_csv(path, name="afinn", kind="signed")


def test_whole_number_scores_with_decimal_point_are_accepted(tmp_path):
    path = _write(tmp_path / "afinn.csv", "term,score\ngood,3.0\nbad,-2\n")

    lexicon = load_lexicon_csv(path, name="afinn", kind="signed")

    assert lexicon.scores == {"good": 3, "bad": -2}


class _OpinionLexiconStub:
    def positive(self):
        return ["freedom", "envious", "happy"]

    def negative(self):
        return ["war", "envious"]


def test_builtin_bing_negative_wins_on_overlap(monkeypatch):
    pytest.importorskip("nltk")
    monkeypatch.setattr("speech_analysis.lexicons.ensure_nltk_resource", lambda *args: None)
    monkeypatch.setattr("nltk.corpus.opinion_lexicon", _OpinionLexiconStub())

    lexicon = load_lexicon(LexiconSource("bing"), [])

    assert isinstance(lexicon, BinaryLexicon)
    assert lexicon.labels == {
        "freedom": "positive",
        "happy": "positive",
        "envious": "negative",
        "war": "negative",
    }


def test_builtin_nrc_labels_known_terms():
    pytest.importorskip("nrclex")

    lexicon = load_lexicon(LexiconSource("nrc"), ["freedom", "war", "xyzzy"])

    assert isinstance(lexicon, CategoricalLexicon)
    assert "positive" in lexicon.categories["freedom"]
    assert "negative" in lexicon.categories["war"]
    assert "xyzzy" not in lexicon.categories
    assert all(labels <= NRC_LABELS for labels in lexicon.categories.values())
