# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Figure rendering.

All figures are written as PNG files with the non-interactive `Agg` backend.
Renderers return the written path, or None if there was nothing to draw.
"""

import re
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib import colors as mcolors
from wordcloud import WordCloud

from speech_analysis.correlation import AssociationResult
from speech_analysis.frequency import FrequencyTable
from speech_analysis.lexicons import NEGATIVE, POSITIVE, SENTIMENT_LABELS
from speech_analysis.pipeline import AnalysisResult
from speech_analysis.sentiment import SentimentSummary


_LABEL_COLORS = {
    POSITIVE: "#2e7d32",
    NEGATIVE: "#c62828",
}


def _safe_file_part(value: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "_", value).strip("_") or "x"


def _save(fig: plt.Figure, outpath: Path) -> Path:
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150)
    plt.close(fig)
    print(f"Wrote figure: {outpath}")
    return outpath


def _frequency_color_func(freq: dict[str, int]):
    """Light blue for rare words, deep blue for the most frequent ones."""

    max_freq = max(freq.values())
    min_freq = min(freq.values())

    def color_func(word, font_size, position, orientation, random_state=None, **kwargs):
        norm = (freq.get(word, min_freq) - min_freq) / (max_freq - min_freq + 1e-5)
        return mcolors.to_hex((0.658 * (1 - norm), 0.792 * (1 - norm) + 0.2 * norm, 1 - 0.8 * norm))

    return color_func


def plot_top_terms(table: FrequencyTable, outpath: Path, *, top_n: int = 10) -> Path | None:
    """Bar chart of the `top_n` most frequent terms."""

    top = table.top(top_n)
    if not top:
        print(f"No terms to plot for {outpath}")
        return None

    fig, ax = plt.subplots(figsize=(max(6, len(top) * 0.7), 5))
    ax.bar([e.term for e in top], [e.count for e in top], color="skyblue", edgecolor="black")
    ax.set_ylabel("Frequency")
    ax.set_title(f"Top {len(top)} most frequent words")
    ax.tick_params(axis="x", rotation=45)
    return _save(fig, outpath)


def plot_wordcloud(table: FrequencyTable, outpath: Path, *, max_words: int = 100) -> Path | None:
    """Word cloud sized by term frequency."""

    freq = {e.term: e.count for e in table.top(max_words)}
    if not freq:
        print(f"No terms to plot for {outpath}")
        return None

    wc = WordCloud(
        width=1200,
        height=900,
        background_color="white",
        max_words=max_words,
        collocations=False,
        random_state=1234,
        color_func=_frequency_color_func(freq),
    ).generate_from_frequencies(freq)

    fig = plt.figure(figsize=(10, 8))
    plt.imshow(wc, interpolation="bilinear")
    plt.axis("off")
    return _save(fig, outpath)


def plot_associations(result: AssociationResult, outpath: Path) -> Path | None:
    """Point plot of the terms correlated with the target."""

    if not len(result):
        print(f"No associations for '{result.target}', skipping {outpath}")
        return None

    terms = [a.term for a in result][::-1]
    values = [a.correlation for a in result][::-1]

    fig, ax = plt.subplots(figsize=(6, max(3, len(terms) * 0.35)))
    ax.scatter(values, range(len(terms)), color="#003366")
    ax.set_yticks(range(len(terms)))
    ax.set_yticklabels(terms)
    ax.set_xlim(min(0.0, result.threshold, min(values)) - 0.05, 1.05)
    ax.set_xlabel("Correlation")
    ax.set_title(f"Words associated with '{result.target}'")
    ax.grid(axis="x", linestyle=":", linewidth=0.5)
    return _save(fig, outpath)


def plot_sentiment(summary: SentimentSummary, outpath: Path) -> Path | None:
    """Bar chart of the positive/negative totals of one lexicon."""

    if not len(summary):
        print(f"No lexicon matches for '{summary.lexicon}', skipping {outpath}")
        return None

    values = [summary.totals.get(label, 0) for label in SENTIMENT_LABELS]
    fig, ax = plt.subplots(figsize=(4, 5))
    ax.bar(
        list(SENTIMENT_LABELS),
        values,
        color=[_LABEL_COLORS[label] for label in SENTIMENT_LABELS],
        edgecolor="black",
    )
    ax.axhline(0, lw=1, color="gray")
    ax.set_ylabel("Score sum" if summary.kind == "signed" else "Word count")
    ax.set_title(f"{summary.lexicon} sentiment (net {summary.net})")
    return _save(fig, outpath)


def plot_comparison_cloud(
    summary: SentimentSummary, outpath: Path, *, max_words: int = 100
) -> Path | None:
    """Single word cloud with positive and negative words in contrasting colors."""

    freq: dict[str, int] = {}
    label_of: dict[str, str] = {}
    for row in summary:
        if row.term in freq:
            continue
        freq[row.term] = row.frequency
        label_of[row.term] = row.sentiment
        if len(freq) >= max_words:
            break

    if not freq:
        print(f"No lexicon matches for '{summary.lexicon}', skipping {outpath}")
        return None

    def color_func(word, font_size, position, orientation, random_state=None, **kwargs):
        return _LABEL_COLORS.get(label_of.get(word, POSITIVE), "#444444")

    wc = WordCloud(
        width=1200,
        height=900,
        background_color="white",
        max_words=max_words,
        collocations=False,
        random_state=1234,
        color_func=color_func,
    ).generate_from_frequencies(freq)

    fig = plt.figure(figsize=(10, 8))
    plt.imshow(wc, interpolation="bilinear")
    plt.axis("off")
    plt.title(f"Positive vs. negative words ({summary.lexicon})")
    return _save(fig, outpath)


def render_all(result: AnalysisResult, outdir: Path, *, top_n: int = 10, max_words: int = 100) -> list[Path]:
    """Render every figure for an analysis result into `outdir`."""

    written: list[Path | None] = [
        plot_top_terms(result.frequencies, outdir / "top_terms.png", top_n=top_n),
        plot_wordcloud(result.frequencies, outdir / "wordcloud.png", max_words=max_words),
    ]

    for target, assoc in result.associations.items():
        written.append(plot_associations(assoc, outdir / f"assoc_{_safe_file_part(target)}.png"))

    for name, summary in result.sentiment.items():
        written.append(plot_sentiment(summary, outdir / f"sentiment_{_safe_file_part(name)}.png"))

    binary = next((s for s in result.sentiment.values() if s.kind == "binary"), None)
    if binary is not None:
        written.append(
            plot_comparison_cloud(binary, outdir / "comparison_cloud.png", max_words=max_words)
        )

    return [p for p in written if p is not None]
