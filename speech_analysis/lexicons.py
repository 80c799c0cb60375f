# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Sentiment lexicons.

Three lexicon shapes are supported:

- `BinaryLexicon`: term -> `positive` | `negative` (Bing Liu's opinion lexicon)
- `ScoreLexicon`: term -> integer score in [-5, 5] (AFINN)
- `CategoricalLexicon`: term -> set of emotion labels (NRC emotion lexicon)

Builtin lexicons come from `nltk`, `afinn` and `nrclex`. Any of them can be
replaced by a CSV file with a `term` column and a `label` (binary,
categorical) or `score` (signed) column.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from speech_analysis.config import ConfigError, LexiconSource
from speech_analysis.nltk_resources import ensure_nltk_resource


POSITIVE = "positive"
NEGATIVE = "negative"
SENTIMENT_LABELS = (POSITIVE, NEGATIVE)

NRC_LABELS = frozenset(
    {
        "anger",
        "anticipation",
        "disgust",
        "fear",
        "joy",
        "negative",
        "positive",
        "sadness",
        "surprise",
        "trust",
    }
)


@dataclass(frozen=True)
class BinaryLexicon:
    name: str
    labels: dict[str, str]

    def __post_init__(self) -> None:
        bad = sorted({v for v in self.labels.values() if v not in SENTIMENT_LABELS})
        if bad:
            raise ValueError(f"Lexicon '{self.name}' has unsupported labels: {', '.join(bad)}")


@dataclass(frozen=True)
class ScoreLexicon:
    name: str
    scores: dict[str, int]

    def __post_init__(self) -> None:
        for term, score in self.scores.items():
            if not isinstance(score, int) or isinstance(score, bool) or not -5 <= score <= 5:
                raise ValueError(
                    f"Lexicon '{self.name}' has score {score!r} for '{term}' (expected integer in [-5, 5])"
                )


@dataclass(frozen=True)
class CategoricalLexicon:
    name: str
    categories: dict[str, frozenset[str]]

    def __post_init__(self) -> None:
        bad = sorted({c for cats in self.categories.values() for c in cats} - NRC_LABELS)
        if bad:
            raise ValueError(f"Lexicon '{self.name}' has unsupported labels: {', '.join(bad)}")


Lexicon = Union[BinaryLexicon, ScoreLexicon, CategoricalLexicon]


def load_bing_lexicon() -> BinaryLexicon:
    """Bing Liu's opinion lexicon as shipped with NLTK.

    A handful of words are listed as both positive and negative; the negative
    label wins.
    """

    from nltk.corpus import opinion_lexicon

    ensure_nltk_resource("corpora/opinion_lexicon", "opinion_lexicon")

    labels: dict[str, str] = {}
    for word in opinion_lexicon.positive():
        labels[word] = POSITIVE
    for word in opinion_lexicon.negative():
        labels[word] = NEGATIVE
    return BinaryLexicon("bing", labels)


def load_afinn_lexicon(terms: Iterable[str]) -> ScoreLexicon:
    """AFINN scores for the given terms.

    AFINN is consulted term by term; terms without an entry are left out.
    """

    from afinn import Afinn

    afinn = Afinn(language="en")
    scores: dict[str, int] = {}
    for term in terms:
        matched = afinn.scores(term)
        if len(matched) == 1:
            scores[term] = int(matched[0])
    return ScoreLexicon("afinn", scores)


def load_nrc_lexicon(terms: Iterable[str]) -> CategoricalLexicon:
    """NRC emotion labels for the given terms.

    Terms are passed to `nrclex` as ready-made tokens, one at a time.
    """

    from nrclex import NRCLex

    nrc = NRCLex()
    categories: dict[str, frozenset[str]] = {}
    for term in terms:
        nrc.load_token_list([term])
        affects = frozenset(nrc.affect_list) & NRC_LABELS
        if affects:
            categories[term] = affects
    return CategoricalLexicon("nrc", categories)


def _integer_score(value: object) -> int:
    number = float(value)  # type: ignore[arg-type]
    if not number.is_integer():
        raise ValueError(f"score {value!r} is not an integer")
    return int(number)


def load_lexicon_csv(path: Path, *, name: str, kind: str) -> Lexicon:
    """Load a lexicon from a CSV file.

    Args:
        path:
            CSV file with a header row.
        name:
            Lexicon name used in reports.
        kind:
            `binary`, `signed` or `categorical`.

    Raises:
        ConfigError:
            If the file cannot be read or its columns/values are invalid.
    """

    value_column = "score" if kind == "signed" else "label"
    try:
        frame = pd.read_csv(path, dtype={"term": str})
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read lexicon file '{path}': {exc}") from exc

    missing = [c for c in ("term", value_column) if c not in frame.columns]
    if missing:
        raise ConfigError(f"Lexicon file '{path}' is missing column(s): {', '.join(missing)}")

    frame = frame.dropna(subset=["term", value_column])
    terms = frame["term"].str.strip().str.lower()

    try:
        if kind == "signed":
            return ScoreLexicon(name, {t: _integer_score(s) for t, s in zip(terms, frame[value_column])})

        values = frame[value_column].astype(str).str.strip().str.lower()
        if kind == "binary":
            return BinaryLexicon(name, dict(zip(terms, values)))

        categories: dict[str, set[str]] = {}
        for term, label in zip(terms, values):
            categories.setdefault(term, set()).add(label)
        return CategoricalLexicon(name, {t: frozenset(c) for t, c in categories.items()})
    except ValueError as exc:
        raise ConfigError(f"Invalid lexicon file '{path}': {exc}") from exc


def load_lexicon(source: LexiconSource, terms: Iterable[str]) -> Lexicon:
    """Load the lexicon described by `source`.

    Args:
        source:
            Lexicon name and optional CSV path.
        terms:
            Vocabulary to look up for lexicons that are queried term by term.
    """

    if source.path is not None:
        if not source.path.is_file():
            raise ConfigError(f"Lexicon file not found: {source.path}")
        return load_lexicon_csv(source.path, name=source.name, kind=source.kind)

    if source.name == "bing":
        return load_bing_lexicon()
    if source.name == "afinn":
        return load_afinn_lexicon(terms)
    if source.name == "nrc":
        return load_nrc_lexicon(terms)

    raise ConfigError(f"Unknown lexicon: {source.name}")
