import pytest

from speech_analysis.corpus import Corpus, Document, build_corpus, normalize_text, split_paragraphs


def test_each_non_empty_line_becomes_a_document():
    corpus = build_corpus(["First Line", "", "   ", "Second LINE"])

    assert len(corpus) == 2
    assert [d.index for d in corpus] == [1, 2]
    assert corpus.texts == ["first line", "second line"]


def test_blank_line_rule_joins_paragraph_lines():
    lines = ["One", "two", "", "", "Three"]

    assert split_paragraphs(lines, "blank-line") == ["One two", "Three"]


def test_unknown_paragraph_rule_is_rejected():
    with pytest.raises(ValueError):
        split_paragraphs(["x"], "sentence")


def test_empty_input_yields_empty_corpus():
    assert len(build_corpus([])) == 0


def test_typographic_apostrophes_are_folded():
    assert normalize_text("We’ve Come") == "we've come"


def test_with_texts_keeps_indexes_and_count():
    corpus = Corpus((Document(3, "a"), Document(7, "b")))

    updated = corpus.with_texts(["", "c"])

    assert [d.index for d in updated] == [3, 7]
    assert updated.texts == ["", "c"]
    assert corpus.texts == ["a", "b"]

    with pytest.raises(ValueError):
        corpus.with_texts(["only one"])
