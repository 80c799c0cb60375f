# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Cleaning pipeline.

The corpus is cleaned by a fixed, ordered list of named stages:

1. `remove-numbers`
2. `remove-stopwords-general` (dictionary A, NLTK English stop words)
3. `remove-stopwords-extended` (dictionary B, wordcloud STOPWORDS)
4. `remove-punctuation`
5. `strip-whitespace`
6. `remove-custom-words`

Stop words are removed before punctuation because the dictionaries contain
contractions in their apostrophe form ("you'll", "we've"). Every stage maps a
corpus to a new corpus with the same number of documents; documents may end up
empty but are never dropped.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from wordcloud import STOPWORDS

from speech_analysis.corpus import Corpus
from speech_analysis.nltk_resources import ensure_nltk_resource


_DIGITS_RE = re.compile(r"\d+")

# Everything that is neither a word character nor whitespace, plus underscore
# (which `\w` accepts).
_PUNCTUATION_RE = re.compile(r"[^\w\s]|_")


@dataclass(frozen=True)
class FilterStage:
    """A named text transformation applied to every document."""

    name: str
    transform: Callable[[str], str]

    def apply(self, corpus: Corpus) -> Corpus:
        return corpus.with_texts(self.transform(doc.text) for doc in corpus)


def remove_numbers(text: str) -> str:
    return _DIGITS_RE.sub("", text)


def remove_punctuation(text: str) -> str:
    return _PUNCTUATION_RE.sub("", text)


def strip_whitespace(text: str) -> str:
    return " ".join(text.split())


def word_remover(words: Iterable[str]) -> Callable[[str], str]:
    """Build a transform that deletes whole-word occurrences of `words`.

    Longer entries are tried first so that "you'll" is removed as a whole
    before "you" could match its prefix. Surrounding whitespace is left in
    place.
    """

    unique = sorted({w for w in words if w}, key=lambda w: (-len(w), w))
    if not unique:
        return lambda text: text

    pattern = re.compile(
        r"(?<!\w)(?:" + "|".join(re.escape(w) for w in unique) + r")(?!\w)"
    )
    return lambda text: pattern.sub("", text)


def build_filter_pipeline(
    general_stopwords: Iterable[str] = (),
    extended_stopwords: Iterable[str] = (),
    custom_words: Iterable[str] = (),
) -> tuple[FilterStage, ...]:
    """Compose the six cleaning stages in their fixed order.

    Args:
        general_stopwords:
            Dictionary A. Pass an empty collection to keep the stage as a no-op.
        extended_stopwords:
            Dictionary B.
        custom_words:
            Caller supplied exclusion list, removed last.

    Returns:
        The ordered stages.
    """

    remove_custom = word_remover(frozenset(w.lower() for w in custom_words))

    return (
        FilterStage("remove-numbers", remove_numbers),
        FilterStage("remove-stopwords-general", word_remover(frozenset(general_stopwords))),
        FilterStage("remove-stopwords-extended", word_remover(frozenset(extended_stopwords))),
        FilterStage("remove-punctuation", remove_punctuation),
        FilterStage("strip-whitespace", strip_whitespace),
        # Removing words opens up double spaces again.
        FilterStage("remove-custom-words", lambda text: strip_whitespace(remove_custom(text))),
    )


def clean_corpus(corpus: Corpus, stages: Iterable[FilterStage]) -> Corpus:
    """Run all stages over the corpus, in order."""

    for stage in stages:
        corpus = stage.apply(corpus)
    return corpus


def load_general_stopwords(language: str = "english") -> frozenset[str]:
    """Return NLTK's stop word list for `language`."""

    from nltk.corpus import stopwords

    ensure_nltk_resource("corpora/stopwords", "stopwords")
    return frozenset(w.lower() for w in stopwords.words(language))


def load_extended_stopwords() -> frozenset[str]:
    """Return the broader stop word list shipped with `wordcloud`."""

    return frozenset(w.lower() for w in STOPWORDS)
