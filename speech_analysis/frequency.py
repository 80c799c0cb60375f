# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Term counting.

The cleaned corpus is turned into a sparse term-document matrix (term ->
document index -> count) and reduced to a frequency table with one row per
term. Terms keep the order in which they were first encountered; the frequency
table is sorted by count descending with that order as tie breaker.
"""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

import numpy as np
import pandas as pd

from speech_analysis.corpus import Corpus


@dataclass(frozen=True)
class TermDocumentMatrix:
    """
    Sparse term-document counts.

    Attributes:
        terms:
            Distinct terms in first-encountered order.
        document_indexes:
            Document indexes (1-based) of the corpus the matrix was built from,
            including empty documents.
        counts:
            term -> {document index -> count}. Absent entries are zero.
            Read-only once the matrix is built.
    """

    terms: tuple[str, ...]
    document_indexes: tuple[int, ...]
    counts: Mapping[str, Mapping[int, int]]

    def __post_init__(self) -> None:
        frozen = {term: MappingProxyType(dict(row)) for term, row in self.counts.items()}
        object.__setattr__(self, "counts", MappingProxyType(frozen))

    def __contains__(self, term: object) -> bool:
        return term in self.counts

    def vector(self, term: str) -> np.ndarray:
        """Per-document counts of `term` in document order (zeros if absent)."""

        row = self.counts.get(term, {})
        return np.array([row.get(idx, 0) for idx in self.document_indexes], dtype=float)

    def total(self) -> int:
        return sum(sum(row.values()) for row in self.counts.values())

    def to_frame(self) -> pd.DataFrame:
        """Dense view with terms as rows and document indexes as columns."""

        frame = pd.DataFrame(
            0,
            index=pd.Index(list(self.terms), name="term", dtype=object),
            columns=pd.Index(list(self.document_indexes), name="document"),
            dtype=int,
        )
        for term, row in self.counts.items():
            for idx, count in row.items():
                frame.at[term, idx] = count
        return frame


@dataclass(frozen=True)
class FrequencyEntry:
    term: str
    count: int


@dataclass(frozen=True)
class FrequencyTable:
    """Term totals sorted by count descending."""

    entries: tuple[FrequencyEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self.entries)

    @property
    def terms(self) -> tuple[str, ...]:
        return tuple(e.term for e in self.entries)

    @property
    def total(self) -> int:
        return sum(e.count for e in self.entries)

    def count(self, term: str) -> int:
        for entry in self.entries:
            if entry.term == term:
                return entry.count
        return 0

    def top(self, n: int) -> tuple[FrequencyEntry, ...]:
        return self.entries[: max(0, n)]

    def as_dict(self) -> dict[str, int]:
        return {e.term: e.count for e in self.entries}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"term": e.term, "count": e.count} for e in self.entries],
            columns=["term", "count"],
        )


def build_term_document_matrix(corpus: Corpus, *, min_term_length: int = 1) -> TermDocumentMatrix:
    """Count the whitespace separated terms of every document.

    Args:
        corpus:
            Cleaned corpus.
        min_term_length:
            Terms with fewer characters are ignored.
    """

    counts: dict[str, dict[int, int]] = {}
    for doc in corpus:
        per_doc = Counter(t for t in doc.text.split() if len(t) >= min_term_length)
        for term, count in per_doc.items():
            counts.setdefault(term, {})[doc.index] = count

    return TermDocumentMatrix(
        terms=tuple(counts),
        document_indexes=tuple(doc.index for doc in corpus),
        counts=counts,
    )


def build_frequency_table(matrix: TermDocumentMatrix) -> FrequencyTable:
    """Sum each term's row and sort by total count, descending.

    `sorted` is stable, so equal counts keep the matrix's first-encountered
    term order.
    """

    entries = [FrequencyEntry(term, sum(matrix.counts[term].values())) for term in matrix.terms]
    return FrequencyTable(tuple(sorted(entries, key=lambda e: -e.count)))


def aggregate_frequencies(
    corpus: Corpus, *, min_term_length: int = 1
) -> tuple[TermDocumentMatrix, FrequencyTable]:
    matrix = build_term_document_matrix(corpus, min_term_length=min_term_length)
    return matrix, build_frequency_table(matrix)
