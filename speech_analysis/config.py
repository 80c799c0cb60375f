# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `speech.yaml`, validating its keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


PARAGRAPH_RULES = ("line", "blank-line")

# Lexicon name -> table shape it produces.
LEXICON_KINDS = {
    "bing": "binary",
    "afinn": "signed",
    "nrc": "categorical",
}


@dataclass(frozen=True)
class FilterConfig:
    """
    Settings for the cleaning pipeline.

    Attributes:
        general_stopwords:
            Remove the general function-word dictionary (NLTK English).
        extended_stopwords:
            Remove the broader supplementary dictionary (wordcloud STOPWORDS).
        custom_stopwords:
            Additional terms removed as the last cleaning step.
        min_term_length:
            Terms shorter than this are not counted.
    """

    general_stopwords: bool = True
    extended_stopwords: bool = True
    custom_stopwords: tuple[str, ...] = ()
    min_term_length: int = 1


@dataclass(frozen=True)
class CorrelationConfig:
    """
    Settings for term associations.

    Attributes:
        terms:
            Target terms whose correlated terms are reported.
        threshold:
            Minimum Pearson correlation in [-1, 1].
    """

    terms: tuple[str, ...] = ()
    threshold: float = 0.3


@dataclass(frozen=True)
class LexiconSource:
    """A sentiment lexicon and where to load it from (`None` means builtin)."""

    name: str
    path: Path | None = None

    @property
    def kind(self) -> str:
        return LEXICON_KINDS[self.name]


@dataclass(frozen=True)
class SentimentConfig:
    lexicons: tuple[LexiconSource, ...] = (
        LexiconSource("bing"),
        LexiconSource("afinn"),
        LexiconSource("nrc"),
    )


@dataclass(frozen=True)
class ReportConfig:
    """
    Settings for figures and the spreadsheet report.

    Attributes:
        top_n:
            Number of terms shown in the bar chart and printed summaries.
        max_words:
            Maximum number of words drawn into word clouds.
    """

    top_n: int = 10
    max_words: int = 100


@dataclass(frozen=True)
class SpeechConfig:
    """
    Parsed configuration for a speech analysis run.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths are resolved against.
        input:
            Transcript file to analyze.
        outdir:
            Directory for rendered figures.
        outfile:
            Target ODS path for the report.
        paragraphs:
            Paragraph rule used to split the transcript into documents.
    """

    config_path: Path
    base_dir: Path
    input: Path
    outdir: Path
    outfile: Path
    paragraphs: str = "line"
    filters: FilterConfig = field(default_factory=FilterConfig)
    correlation: CorrelationConfig = field(default_factory=CorrelationConfig)
    sentiment: SentimentConfig = field(default_factory=SentimentConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration or the input it points to is missing,
    invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "speech.yaml"


def load_config(path: Path) -> SpeechConfig:
    """
    Load and validate a `speech.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated SpeechConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or
            contains invalid values.
    """

    if not path.exists():
        raise ConfigError(
            "No speech.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    base_dir = path.parent.resolve()
    return parse_config(raw, config_path=path.resolve(), base_dir=base_dir)


def parse_config(raw: dict[str, Any], *, config_path: Path, base_dir: Path) -> SpeechConfig:
    """
    Validate an already parsed YAML mapping.

    Relative paths are interpreted against `base_dir`.
    """

    input_value = raw.get("input")
    if not isinstance(input_value, str) or not input_value.strip():
        raise ConfigError("'input' must be a non-empty string")

    outdir = _optional_string(raw, "outdir", "output")
    outfile = _optional_string(raw, "outfile", "report.ods")

    paragraphs = _optional_string(raw, "paragraphs", "line").lower()
    if paragraphs not in PARAGRAPH_RULES:
        raise ConfigError(f"'paragraphs' must be one of: {', '.join(PARAGRAPH_RULES)}")

    return SpeechConfig(
        config_path=config_path,
        base_dir=base_dir,
        input=(base_dir / input_value.strip()).resolve(),
        outdir=(base_dir / outdir).resolve(),
        outfile=(base_dir / outfile).resolve(),
        paragraphs=paragraphs,
        filters=_parse_filters(raw.get("filters")),
        correlation=_parse_correlation(raw.get("correlation")),
        sentiment=_parse_sentiment(raw.get("sentiment"), base_dir=base_dir),
        report=_parse_report(raw.get("report")),
    )


def _optional_string(raw: dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string if provided")
    return value.strip()


def _parse_word_list(value: Any, *, context: str) -> tuple[str, ...]:
    """Parse a list of words, lower-cased and de-duplicated in order."""

    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError(f"{context} must be a list of strings")

    out: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"{context}[{idx}] must be a non-empty string")
        word = item.strip().lower()
        if word not in out:
            out.append(word)
    return tuple(out)


def _parse_filters(value: Any) -> FilterConfig:
    """
    Parse and validate the optional `filters` section.

    Args:
        value:
            Raw YAML value for the `filters` key.

    Returns:
        A FilterConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return FilterConfig()

    if not isinstance(value, dict):
        raise ConfigError("'filters' must be a mapping if provided")

    general = value.get("general_stopwords", FilterConfig.general_stopwords)
    extended = value.get("extended_stopwords", FilterConfig.extended_stopwords)
    min_term_length = value.get("min_term_length", FilterConfig.min_term_length)

    if not isinstance(general, bool):
        raise ConfigError("filters.general_stopwords must be a boolean")
    if not isinstance(extended, bool):
        raise ConfigError("filters.extended_stopwords must be a boolean")
    if not isinstance(min_term_length, int) or isinstance(min_term_length, bool):
        raise ConfigError("filters.min_term_length must be an integer")
    if min_term_length < 1:
        raise ConfigError("filters.min_term_length must be >= 1")

    return FilterConfig(
        general_stopwords=general,
        extended_stopwords=extended,
        custom_stopwords=_parse_word_list(
            value.get("custom_stopwords"), context="filters.custom_stopwords"
        ),
        min_term_length=min_term_length,
    )


def _parse_correlation(value: Any) -> CorrelationConfig:
    """
    Parse and validate the optional `correlation` section.

    Raises:
        ConfigError:
            If the threshold is not a number in [-1, 1] or the terms are not
            strings.
    """

    if value is None:
        return CorrelationConfig()

    if not isinstance(value, dict):
        raise ConfigError("'correlation' must be a mapping if provided")

    threshold = value.get("threshold", CorrelationConfig.threshold)
    if not isinstance(threshold, (int, float)) or isinstance(threshold, bool):
        raise ConfigError("correlation.threshold must be a number")
    if not -1.0 <= float(threshold) <= 1.0:
        raise ConfigError("correlation.threshold must be between -1 and 1")

    return CorrelationConfig(
        terms=_parse_word_list(value.get("terms"), context="correlation.terms"),
        threshold=float(threshold),
    )


def _parse_sentiment(value: Any, *, base_dir: Path) -> SentimentConfig:
    """
    Parse and validate the optional `sentiment` section.

    Each entry under `lexicons` maps a lexicon name (`bing`, `afinn`, `nrc`) to
    either `builtin` or a CSV file path.
    """

    if value is None:
        return SentimentConfig()

    if not isinstance(value, dict):
        raise ConfigError("'sentiment' must be a mapping if provided")

    lexicons = value.get("lexicons")
    if lexicons is None:
        return SentimentConfig()
    if not isinstance(lexicons, dict):
        raise ConfigError("sentiment.lexicons must be a mapping of lexicon name to source")

    sources: list[LexiconSource] = []
    for name, source in lexicons.items():
        key = str(name).strip().lower()
        if key not in LEXICON_KINDS:
            raise ConfigError(
                f"Unknown lexicon '{name}' (supported: {', '.join(LEXICON_KINDS)})"
            )
        if not isinstance(source, str) or not source.strip():
            raise ConfigError(f"sentiment.lexicons.{key} must be 'builtin' or a file path")

        if source.strip().lower() == "builtin":
            sources.append(LexiconSource(key))
        else:
            sources.append(LexiconSource(key, (base_dir / source.strip()).resolve()))

    return SentimentConfig(lexicons=tuple(sources))


def _parse_report(value: Any) -> ReportConfig:
    if value is None:
        return ReportConfig()

    if not isinstance(value, dict):
        raise ConfigError("'report' must be a mapping if provided")

    top_n = value.get("top_n", ReportConfig.top_n)
    max_words = value.get("max_words", ReportConfig.max_words)

    for key, number in (("top_n", top_n), ("max_words", max_words)):
        if not isinstance(number, int) or isinstance(number, bool):
            raise ConfigError(f"report.{key} must be an integer")
        if number <= 0:
            raise ConfigError(f"report.{key} must be > 0")

    return ReportConfig(top_n=top_n, max_words=max_words)
