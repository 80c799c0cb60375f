from pathlib import Path

import pytest

from speech_analysis.config import ConfigError, LexiconSource, find_config_path, load_config


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "speech.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_minimal_config_uses_defaults(tmp_path):
    config = load_config(_write_config(tmp_path, "input: speech.txt\n"))

    assert config.input == (tmp_path / "speech.txt").resolve()
    assert config.outdir == (tmp_path / "output").resolve()
    assert config.outfile == (tmp_path / "report.ods").resolve()
    assert config.paragraphs == "line"
    assert config.filters.general_stopwords is True
    assert config.correlation.threshold == 0.3
    assert [s.name for s in config.sentiment.lexicons] == ["bing", "afinn", "nrc"]
    assert config.report.top_n == 10


def test_full_config(tmp_path):
    config = load_config(
        _write_config(
            tmp_path,
            "\n".join(
                [
                    "input: data/speech.odt",
                    "outdir: figures",
                    "outfile: out/report.ods",
                    "paragraphs: blank-line",
                    "filters:",
                    "  extended_stopwords: false",
                    "  custom_stopwords: [Applause, applause, laughter]",
                    "  min_term_length: 3",
                    "correlation:",
                    "  terms: [Freedom]",
                    "  threshold: -0.5",
                    "sentiment:",
                    "  lexicons:",
                    "    bing: lexicons/bing.csv",
                    "    afinn: builtin",
                    "report:",
                    "  top_n: 5",
                    "  max_words: 50",
                ]
            ),
        )
    )

    assert config.paragraphs == "blank-line"
    assert config.filters.extended_stopwords is False
    assert config.filters.custom_stopwords == ("applause", "laughter")
    assert config.filters.min_term_length == 3
    assert config.correlation.terms == ("freedom",)
    assert config.correlation.threshold == -0.5
    assert config.sentiment.lexicons == (
        LexiconSource("bing", (tmp_path / "lexicons/bing.csv").resolve()),
        LexiconSource("afinn"),
    )
    assert config.sentiment.lexicons[1].kind == "signed"
    assert config.report.max_words == 50


@pytest.mark.parametrize(
    "text, message",
    [
        ("outdir: x\n", "input"),
        ("input: a.txt\nparagraphs: sentence\n", "paragraphs"),
        ("input: a.txt\ncorrelation:\n  threshold: 1.5\n", "threshold"),
        ("input: a.txt\nfilters:\n  min_term_length: 0\n", "min_term_length"),
        ("input: a.txt\nsentiment:\n  lexicons:\n    vader: builtin\n", "Unknown lexicon"),
        ("input: a.txt\nreport:\n  top_n: -1\n", "top_n"),
        ("- just\n- a list\n", "mapping"),
    ],
)
def test_invalid_config(tmp_path, text, message):
    with pytest.raises(ConfigError, match=message):
        load_config(_write_config(tmp_path, text))


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="template"):
        load_config(tmp_path / "speech.yaml")


def test_find_config_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert find_config_path(None).resolve() == (tmp_path / "speech.yaml").resolve()
    assert find_config_path("other.yaml") == Path("other.yaml")
