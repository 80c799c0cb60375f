# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Analysis orchestration.

Runs the complete chain for one transcript:

    lines -> corpus -> cleaned corpus -> matrix/frequencies -> associations,
    sentiment

`analyze_lines` is the pure part and takes all reference data as arguments.
`run_analysis` reads the configured input and loads stop words and lexicons
before delegating to it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Sequence

from speech_analysis.config import FilterConfig, SpeechConfig
from speech_analysis.corpus import Corpus, build_corpus
from speech_analysis.correlation import AssociationResult, find_associations
from speech_analysis.filters import (
    FilterStage,
    build_filter_pipeline,
    clean_corpus,
    load_extended_stopwords,
    load_general_stopwords,
)
from speech_analysis.frequency import FrequencyTable, TermDocumentMatrix, aggregate_frequencies
from speech_analysis.lexicons import Lexicon, load_lexicon
from speech_analysis.readers import read_source_lines
from speech_analysis.sentiment import SentimentSummary, score_sentiment


# Receives the vocabulary (frequency table terms) and returns the lexicons
# to score against.
LexiconResolver = Callable[[Sequence[str]], Iterable[Lexicon]]


@dataclass(frozen=True)
class AnalysisResult:
    """
    All tables derived from one transcript.

    Attributes:
        corpus:
            Normalized, uncleaned corpus.
        cleaned:
            Corpus after the cleaning pipeline (same document count).
        matrix:
            Term-document matrix of the cleaned corpus.
        frequencies:
            Term totals, sorted by count descending.
        associations:
            Correlated terms per configured target term.
        sentiment:
            One summary per lexicon, keyed by lexicon name.
        source:
            Transcript file, if the lines came from a file.
    """

    corpus: Corpus
    cleaned: Corpus
    matrix: TermDocumentMatrix
    frequencies: FrequencyTable
    associations: dict[str, AssociationResult] = field(default_factory=dict)
    sentiment: dict[str, SentimentSummary] = field(default_factory=dict)
    source: Path | None = None


def analyze_lines(
    lines: Iterable[str],
    *,
    stages: Sequence[FilterStage],
    paragraph_rule: str = "line",
    min_term_length: int = 1,
    correlation_terms: Iterable[str] = (),
    threshold: float = 0.3,
    resolve_lexicons: LexiconResolver | None = None,
    source: Path | None = None,
) -> AnalysisResult:
    """Run the analysis over raw text lines.

    Args:
        lines:
            Raw transcript lines.
        stages:
            Cleaning pipeline, see `build_filter_pipeline`.
        paragraph_rule:
            `line` or `blank-line`.
        min_term_length:
            Shortest term that is counted.
        correlation_terms:
            Target terms for associations.
        threshold:
            Minimum correlation for associations.
        resolve_lexicons:
            Called once with the vocabulary; returns the lexicons to score.
            No sentiment is computed when omitted.
        source:
            Transcript path recorded in the result.
    """

    corpus = build_corpus(lines, paragraph_rule=paragraph_rule)
    cleaned = clean_corpus(corpus, stages)
    matrix, frequencies = aggregate_frequencies(cleaned, min_term_length=min_term_length)

    associations = find_associations(matrix, correlation_terms, threshold)

    sentiment: dict[str, SentimentSummary] = {}
    if resolve_lexicons is not None:
        for lexicon in resolve_lexicons(frequencies.terms):
            sentiment[lexicon.name] = score_sentiment(frequencies, lexicon)

    return AnalysisResult(
        corpus=corpus,
        cleaned=cleaned,
        matrix=matrix,
        frequencies=frequencies,
        associations=associations,
        sentiment=sentiment,
        source=source,
    )


def build_stages_for(filters: FilterConfig) -> tuple[FilterStage, ...]:
    """Build the cleaning pipeline described by the `filters` config section."""

    general = load_general_stopwords() if filters.general_stopwords else frozenset()
    extended = load_extended_stopwords() if filters.extended_stopwords else frozenset()
    return build_filter_pipeline(general, extended, filters.custom_stopwords)


def run_analysis(config: SpeechConfig) -> AnalysisResult:
    """Analyze the transcript configured in `config`.

    Raises:
        ConfigError:
            If the input cannot be read or a lexicon cannot be loaded.
    """

    print(f"Loading input: {config.input}")
    lines = read_source_lines(config.input)

    def _resolve(terms: Sequence[str]) -> list[Lexicon]:
        lexicons: list[Lexicon] = []
        for source in config.sentiment.lexicons:
            print(f"Loading lexicon: {source.name}")
            lexicons.append(load_lexicon(source, terms))
        return lexicons

    result = analyze_lines(
        lines,
        stages=build_stages_for(config.filters),
        paragraph_rule=config.paragraphs,
        min_term_length=config.filters.min_term_length,
        correlation_terms=config.correlation.terms,
        threshold=config.correlation.threshold,
        resolve_lexicons=_resolve,
        source=config.input,
    )

    print(
        f"Analyzed {len(result.corpus)} document(s): {result.frequencies.total} term(s), "
        f"{len(result.frequencies)} distinct"
    )
    return result
