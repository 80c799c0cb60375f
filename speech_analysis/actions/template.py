# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `speech.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from speech_analysis.config import ConfigError, SpeechConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template speech.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Transcript to analyze (.txt, .md or .odt)",
            "input: speech.txt",
            "",
            "# Directory for rendered figures",
            "outdir: ./output",
            "",
            "# Spreadsheet report",
            "outfile: report.ods",
            "",
            "# How the transcript is split into documents:",
            "#   line: every non-empty line is one document",
            "#   blank-line: paragraphs are separated by empty lines",
            "paragraphs: line",
            "",
            "# Cleaning options (optional; defaults shown)",
            "filters:",
            "  # NLTK English stop words",
            "  general_stopwords: true",
            "  # Broader stop word list shipped with wordcloud",
            "  extended_stopwords: true",
            "  # Additional words removed after all other cleaning steps",
            "  custom_stopwords: [applause, laughter]",
            "  # Shorter terms are not counted",
            "  min_term_length: 1",
            "",
            "# Word associations (optional)",
            "correlation:",
            "  terms: [freedom]",
            "  # Minimum Pearson correlation, between -1 and 1",
            "  threshold: 0.3",
            "",
            "# Sentiment lexicons (optional; defaults shown)",
            "# Each lexicon is either 'builtin' or a CSV file with a header row:",
            "#   bing, nrc: term,label",
            "#   afinn:     term,score",
            "sentiment:",
            "  lexicons:",
            "    bing: builtin",
            "    afinn: builtin",
            "    nrc: builtin",
            "",
            "# Figures and report (optional; defaults shown)",
            "report:",
            "  top_n: 10",
            "  max_words: 100",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="speech.yaml",
            help="Destination path for the template (default: ./speech.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: SpeechConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        self._write_template(dest, force=bool(args.force))
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        """
        Write a template YAML configuration file.

        Args:
            dest:
                Destination path for the template.
            force:
                If True, overwrite an existing file.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
            OSError:
                If the file cannot be written.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
