import pytest

from speech_analysis.corpus import Corpus, Document, build_corpus
from speech_analysis.filters import build_filter_pipeline, clean_corpus, load_extended_stopwords
from speech_analysis.frequency import aggregate_frequencies, build_term_document_matrix


def _corpus(*texts: str) -> Corpus:
    return Corpus(tuple(Document(i, t) for i, t in enumerate(texts, start=1)))


def test_reference_example_top_entry_is_freedom():
    stages = build_filter_pipeline((), load_extended_stopwords(), ())
    cleaned = clean_corpus(
        build_corpus(["Freedom and justice for all.", "We have a dream of freedom."]), stages
    )

    _matrix, table = aggregate_frequencies(cleaned)

    assert table.entries[0].term == "freedom"
    assert table.entries[0].count == 2


def test_counts_are_conserved(speech_lines, stages):
    cleaned = clean_corpus(build_corpus(speech_lines), stages)

    matrix, table = aggregate_frequencies(cleaned)

    assert table.total == matrix.total()
    assert table.total == sum(len(text.split()) for text in cleaned.texts)


def test_terms_are_unique_and_sorted(speech_lines, stages):
    _matrix, table = aggregate_frequencies(clean_corpus(build_corpus(speech_lines), stages))

    counts = [e.count for e in table]
    assert len(set(table.terms)) == len(table)
    assert counts == sorted(counts, reverse=True)


def test_ties_keep_first_encountered_order():
    _matrix, table = aggregate_frequencies(_corpus("b a", "a c", "d"))

    assert [(e.term, e.count) for e in table] == [("a", 2), ("b", 1), ("c", 1), ("d", 1)]


def test_empty_corpus_yields_empty_table():
    matrix, table = aggregate_frequencies(_corpus("", ""))

    assert len(table) == 0
    assert matrix.terms == ()
    assert matrix.document_indexes == (1, 2)


def test_matrix_vectors_and_frame():
    matrix = build_term_document_matrix(_corpus("dream dream", "", "dream freedom"))

    assert matrix.vector("dream").tolist() == [2.0, 0.0, 1.0]
    assert matrix.vector("absent").tolist() == [0.0, 0.0, 0.0]

    frame = matrix.to_frame()
    assert list(frame.columns) == [1, 2, 3]
    assert frame.loc["freedom"].tolist() == [0, 0, 1]


def test_min_term_length_drops_short_terms():
    _matrix, table = aggregate_frequencies(_corpus("we go far away"), min_term_length=3)

    assert table.terms == ("far", "away")


def test_table_helpers():
    _matrix, table = aggregate_frequencies(_corpus("a b a", "c a"))

    assert table.count("a") == 3
    assert table.count("zzz") == 0
    assert [e.term for e in table.top(2)] == ["a", "b"]
    assert table.as_dict() == {"a": 3, "b": 1, "c": 1}
    assert table.to_frame().to_dict(orient="records")[0] == {"term": "a", "count": 3}


def test_matrix_counts_are_read_only():
    matrix = build_term_document_matrix(_corpus("a b a", "b"))

    with pytest.raises(TypeError):
        matrix.counts["a"][2] = 5
    with pytest.raises(TypeError):
        matrix.counts["z"] = {1: 1}

    assert dict(matrix.counts["a"]) == {1: 2}
