from pathlib import Path

import pytest

from speech_analysis.filters import build_filter_pipeline


SPEECH = """I am happy to join with you today in what will go down in history.

Five score years ago, a great American signed the Emancipation Proclamation.
But 100 years later, the Negro still is not free.
We've come to our nation's capital to cash a check. (Applause)
Now is the time to make real the promises of democracy.
We refuse to believe that the bank of justice is bankrupt.
Let freedom ring, and when this happens, freedom will ring from every village.
I have a dream that freedom and justice will prevail.
"""


# A compact function-word list, enough for the sample sentences.
GENERAL_STOPWORDS = frozenset(
    {
        "a", "all", "am", "and", "but", "for", "from", "go", "have", "i", "in", "is",
        "not", "now", "of", "our", "still", "that", "the", "this", "to", "we", "what",
        "when", "will", "with", "you", "we've", "you'll", "don't", "t",
    }
)


@pytest.fixture
def speech_lines() -> list[str]:
    return SPEECH.splitlines()


@pytest.fixture
def stages():
    return build_filter_pipeline(GENERAL_STOPWORDS, (), ["applause"])


@pytest.fixture
def speech_file(tmp_path: Path) -> Path:
    path = tmp_path / "speech.txt"
    path.write_text(SPEECH, encoding="utf-8")
    return path
