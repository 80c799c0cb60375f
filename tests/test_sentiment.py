import pytest

from speech_analysis.frequency import FrequencyEntry, FrequencyTable
from speech_analysis.lexicons import BinaryLexicon, CategoricalLexicon, ScoreLexicon
from speech_analysis.sentiment import (
    score_binary,
    score_categorical,
    score_sentiment,
    score_signed,
)


@pytest.fixture
def table() -> FrequencyTable:
    return FrequencyTable(
        (
            FrequencyEntry("freedom", 2),
            FrequencyEntry("dream", 1),
            FrequencyEntry("injustice", 1),
            FrequencyEntry("nation", 1),
        )
    )


def test_binary_reference_example(table):
    lexicon = BinaryLexicon(
        "bing", {"freedom": "positive", "dream": "positive", "injustice": "negative"}
    )

    summary = score_binary(table, lexicon)

    assert summary.totals == {"positive": 3, "negative": 1}
    assert summary.net == 2
    assert summary.net == summary.positive - summary.negative
    assert [r.term for r in summary] == ["freedom", "dream", "injustice"]


def test_signed_sums_scores_not_frequencies():
    table = FrequencyTable((FrequencyEntry("bad", 5), FrequencyEntry("good", 2), FrequencyEntry("meh", 3)))
    lexicon = ScoreLexicon("afinn", {"good": 3, "bad": -2, "meh": 0})

    summary = score_signed(table, lexicon)

    assert summary.totals == {"positive": 3, "negative": -2}
    assert summary.net == 1
    assert summary.net == summary.positive - abs(summary.negative)
    assert [(r.term, r.sentiment, r.score) for r in summary] == [
        ("bad", "negative", -2),
        ("good", "positive", 3),
    ]
    assert list(summary.to_frame().columns) == ["term", "frequency", "sentiment", "score"]


def test_categorical_keeps_only_positive_and_negative(table):
    lexicon = CategoricalLexicon(
        "nrc",
        {
            "freedom": frozenset({"positive", "joy", "trust"}),
            "injustice": frozenset({"anger", "negative"}),
            "nation": frozenset({"trust"}),
            "dream": frozenset({"positive", "negative"}),
        },
    )

    summary = score_categorical(table, lexicon)

    assert [(r.term, r.sentiment) for r in summary] == [
        ("freedom", "positive"),
        ("dream", "positive"),
        ("dream", "negative"),
        ("injustice", "negative"),
    ]
    assert summary.totals == {"positive": 3, "negative": 2}
    assert summary.net == 1


def test_empty_join_is_explicit_zero(table):
    summary = score_sentiment(table, BinaryLexicon("bing", {"hope": "positive"}))

    assert len(summary) == 0
    assert summary.totals == {"positive": 0, "negative": 0}
    assert summary.net == 0
    assert summary.to_frame().empty


def test_dispatch_by_lexicon_type(table):
    assert score_sentiment(table, ScoreLexicon("afinn", {"freedom": 2})).kind == "signed"
    assert score_sentiment(table, CategoricalLexicon("nrc", {})).kind == "categorical"

    with pytest.raises(TypeError):
        score_sentiment(table, {"freedom": "positive"})
