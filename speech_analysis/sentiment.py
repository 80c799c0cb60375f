# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Sentiment scoring.

The frequency table is inner-joined with a lexicon on the term. How the joined
rows are aggregated depends on the lexicon shape:

- binary and categorical: totals are the summed *frequencies* per label,
  `net = positive - negative`
- signed: totals are the summed *scores* per label (derived from the sign,
  zero scores dropped), `net = positive - abs(negative)`

An empty join yields zero totals and a net sentiment of 0.
"""

from dataclasses import dataclass
from typing import Iterator

import pandas as pd

from speech_analysis.frequency import FrequencyTable
from speech_analysis.lexicons import (
    NEGATIVE,
    POSITIVE,
    SENTIMENT_LABELS,
    BinaryLexicon,
    CategoricalLexicon,
    Lexicon,
    ScoreLexicon,
)


@dataclass(frozen=True)
class SentimentRow:
    """
    One joined row.

    Attributes:
        term:
            Term from the frequency table.
        frequency:
            Total count of the term.
        sentiment:
            `positive` or `negative`.
        score:
            Lexicon score (signed lexicons only).
    """

    term: str
    frequency: int
    sentiment: str
    score: int | None = None


@dataclass(frozen=True)
class SentimentSummary:
    lexicon: str
    kind: str
    rows: tuple[SentimentRow, ...]
    totals: dict[str, int]
    net: int

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[SentimentRow]:
        return iter(self.rows)

    @property
    def positive(self) -> int:
        return self.totals.get(POSITIVE, 0)

    @property
    def negative(self) -> int:
        return self.totals.get(NEGATIVE, 0)

    def to_frame(self) -> pd.DataFrame:
        columns = ["term", "frequency", "sentiment"]
        if self.kind == "signed":
            columns.append("score")
        return pd.DataFrame(
            [{c: getattr(r, c) for c in columns} for r in self.rows],
            columns=columns,
        )


def _label_totals(rows: list[SentimentRow], *, use_scores: bool) -> dict[str, int]:
    totals = {label: 0 for label in SENTIMENT_LABELS}
    for row in rows:
        totals[row.sentiment] += int(row.score or 0) if use_scores else row.frequency
    return totals


def score_binary(table: FrequencyTable, lexicon: BinaryLexicon) -> SentimentSummary:
    rows = [
        SentimentRow(e.term, e.count, lexicon.labels[e.term])
        for e in table
        if e.term in lexicon.labels
    ]
    totals = _label_totals(rows, use_scores=False)
    return SentimentSummary(
        lexicon=lexicon.name,
        kind="binary",
        rows=tuple(rows),
        totals=totals,
        net=totals[POSITIVE] - totals[NEGATIVE],
    )


def score_signed(table: FrequencyTable, lexicon: ScoreLexicon) -> SentimentSummary:
    rows: list[SentimentRow] = []
    for e in table:
        score = lexicon.scores.get(e.term, 0)
        if score == 0:
            continue
        rows.append(SentimentRow(e.term, e.count, POSITIVE if score > 0 else NEGATIVE, score))

    totals = _label_totals(rows, use_scores=True)
    return SentimentSummary(
        lexicon=lexicon.name,
        kind="signed",
        rows=tuple(rows),
        totals=totals,
        net=totals[POSITIVE] - abs(totals[NEGATIVE]),
    )


def score_categorical(table: FrequencyTable, lexicon: CategoricalLexicon) -> SentimentSummary:
    """Join with the positive/negative categories only.

    A term listed under both labels yields one row per label.
    """

    rows: list[SentimentRow] = []
    for e in table:
        categories = lexicon.categories.get(e.term, frozenset())
        for label in SENTIMENT_LABELS:
            if label in categories:
                rows.append(SentimentRow(e.term, e.count, label))

    totals = _label_totals(rows, use_scores=False)
    return SentimentSummary(
        lexicon=lexicon.name,
        kind="categorical",
        rows=tuple(rows),
        totals=totals,
        net=totals[POSITIVE] - totals[NEGATIVE],
    )


def score_sentiment(table: FrequencyTable, lexicon: Lexicon) -> SentimentSummary:
    """Dispatch to the scorer matching the lexicon shape."""

    if isinstance(lexicon, BinaryLexicon):
        return score_binary(table, lexicon)
    if isinstance(lexicon, ScoreLexicon):
        return score_signed(table, lexicon)
    if isinstance(lexicon, CategoricalLexicon):
        return score_categorical(table, lexicon)

    raise TypeError(f"Unsupported lexicon type: {type(lexicon).__name__}")
