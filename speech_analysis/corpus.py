# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Corpus model and text normalization.

A corpus is the ordered list of documents (paragraphs) of one transcript.
Documents keep their 1-based position from the source for their whole life,
even when cleaning leaves them empty.
"""

import unicodedata
from dataclasses import dataclass
from typing import Iterable, Iterator


# Typographic quotes are folded to ASCII so that contractions like "we’ve"
# match the stop word dictionaries.
_QUOTE_TABLE = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‛": "'",
        "′": "'",
        "“": '"',
        "”": '"',
        "„": '"',
        "‟": '"',
    }
)


@dataclass(frozen=True)
class Document:
    """One paragraph of the transcript."""

    index: int
    text: str


@dataclass(frozen=True)
class Corpus:
    """Ordered, immutable sequence of documents."""

    documents: tuple[Document, ...] = ()

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    @property
    def texts(self) -> list[str]:
        return [doc.text for doc in self.documents]

    def with_texts(self, texts: Iterable[str]) -> Corpus:
        """Return a new corpus with the same document indexes and new texts.

        Raises:
            ValueError:
                If the number of texts differs from the number of documents.
        """

        new_texts = list(texts)
        if len(new_texts) != len(self.documents):
            raise ValueError(
                f"Expected {len(self.documents)} document text(s), got {len(new_texts)}"
            )

        return Corpus(
            tuple(Document(index=doc.index, text=text) for doc, text in zip(self.documents, new_texts))
        )


def normalize_text(text: str) -> str:
    """Lower-case a text and fold Unicode compatibility forms and quotes."""

    return unicodedata.normalize("NFKC", text).translate(_QUOTE_TABLE).lower()


def split_paragraphs(lines: Iterable[str], rule: str = "line") -> list[str]:
    """Split raw lines into paragraphs.

    Args:
        lines:
            Raw text lines in source order.
        rule:
            `line`: every non-empty line is one paragraph.
            `blank-line`: consecutive non-empty lines are joined with a space;
            blank lines separate paragraphs.

    Returns:
        Paragraph texts, stripped, never empty.

    Raises:
        ValueError:
            For an unknown rule.
    """

    if rule == "line":
        return [line.strip() for line in lines if line.strip()]

    if rule != "blank-line":
        raise ValueError(f"Unknown paragraph rule: {rule}")

    paragraphs: list[str] = []
    current: list[str] = []
    for line in lines:
        if not line.strip():
            if current:
                paragraphs.append(" ".join(current))
                current = []
            continue
        current.append(line.strip())

    if current:
        paragraphs.append(" ".join(current))

    return paragraphs


def build_corpus(lines: Iterable[str], *, paragraph_rule: str = "line") -> Corpus:
    """Turn raw lines into a normalized corpus numbered from 1."""

    return Corpus(
        tuple(
            Document(index=idx, text=normalize_text(paragraph))
            for idx, paragraph in enumerate(split_paragraphs(lines, paragraph_rule), start=1)
        )
    )
