from speech_analysis.lexicons import BinaryLexicon, ScoreLexicon
from speech_analysis.pipeline import analyze_lines


def test_analyze_lines_runs_every_stage(speech_lines, stages):
    seen: list[tuple[str, ...]] = []

    def resolve(terms):
        seen.append(tuple(terms))
        return [
            BinaryLexicon("bing", {"freedom": "positive", "happy": "positive", "bankrupt": "negative"}),
            ScoreLexicon("afinn", {"happy": 3, "free": 1, "bankrupt": -3}),
        ]

    result = analyze_lines(
        speech_lines,
        stages=stages,
        correlation_terms=["freedom", "liberty"],
        threshold=0.0,
        resolve_lexicons=resolve,
    )

    assert len(result.cleaned) == len(result.corpus) == 8
    assert result.frequencies.entries[0].term == "freedom"
    assert result.frequencies.count("freedom") == 3
    assert seen == [result.frequencies.terms]

    assert set(result.associations) == {"freedom", "liberty"}
    assert len(result.associations["liberty"]) == 0
    assert "ring" in [a.term for a in result.associations["freedom"]]

    bing = result.sentiment["bing"]
    assert (bing.positive, bing.negative, bing.net) == (4, 1, 3)
    afinn = result.sentiment["afinn"]
    assert (afinn.positive, afinn.negative, afinn.net) == (4, -3, 1)


def test_analyze_lines_without_lexicons(stages):
    result = analyze_lines(["Freedom rings"], stages=stages)

    assert result.sentiment == {}
    assert result.associations == {}
    assert result.source is None
