# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Term associations.

For a target term, every other term of the term-document matrix is compared by
the Pearson correlation of their per-document counts. Correlations are rounded
to two decimals before the threshold is applied.

A term whose count vector has zero variance (for example, it appears exactly
once in every document, or the corpus has a single document) has no defined
correlation and is left out of the result. If the target itself has zero
variance, the result is empty, as it is when the target is not in the matrix.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np
import pandas as pd

from speech_analysis.frequency import TermDocumentMatrix


@dataclass(frozen=True)
class Association:
    term: str
    correlation: float


@dataclass(frozen=True)
class AssociationResult:
    """Terms correlated with `target`, sorted by correlation descending."""

    target: str
    threshold: float
    associations: tuple[Association, ...] = ()

    def __len__(self) -> int:
        return len(self.associations)

    def __iter__(self) -> Iterator[Association]:
        return iter(self.associations)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"target": self.target, "term": a.term, "correlation": a.correlation}
                for a in self.associations
            ],
            columns=["target", "term", "correlation"],
        )


def pearson(x: np.ndarray, y: np.ndarray) -> float | None:
    """Pearson correlation of two equally long vectors.

    Returns:
        The correlation in [-1, 1], or None if either vector has zero variance.
    """

    if len(x) != len(y):
        raise ValueError("Vectors must have the same length")
    if len(x) == 0:
        return None

    xc = x - x.mean()
    yc = y - y.mean()
    denom = math.sqrt(float(np.dot(xc, xc)) * float(np.dot(yc, yc)))
    if denom == 0.0:
        return None

    return max(-1.0, min(1.0, float(np.dot(xc, yc)) / denom))


def find_correlated_terms(
    matrix: TermDocumentMatrix, target: str, threshold: float
) -> AssociationResult:
    """Find terms whose occurrence correlates with `target`.

    Args:
        matrix:
            Term-document matrix.
        target:
            Term to compare against.
        threshold:
            Minimum correlation, in [-1, 1].

    Returns:
        Matching terms. Empty if the target is absent or has zero variance.

    Raises:
        ValueError:
            If the threshold is outside [-1, 1].
    """

    if not -1.0 <= threshold <= 1.0:
        raise ValueError(f"Correlation threshold must be between -1 and 1, got {threshold}")

    empty = AssociationResult(target=target, threshold=threshold)
    if target not in matrix:
        return empty

    target_vec = matrix.vector(target)
    found: list[Association] = []
    for term in matrix.terms:
        if term == target:
            continue
        r = pearson(target_vec, matrix.vector(term))
        if r is None:
            continue
        r = round(r, 2)
        if r >= threshold:
            found.append(Association(term, r))

    found.sort(key=lambda a: -a.correlation)
    return AssociationResult(target=target, threshold=threshold, associations=tuple(found))


def find_associations(
    matrix: TermDocumentMatrix, targets: Iterable[str], threshold: float
) -> dict[str, AssociationResult]:
    """Run `find_correlated_terms` for several targets, keyed by target."""

    return {t: find_correlated_terms(matrix, t, threshold) for t in targets}
