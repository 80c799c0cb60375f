# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Analysis action.

Runs the cleaning/counting pipeline and prints the most frequent terms, the
associations of the configured (or given) terms, and the sentiment totals of
every lexicon.
"""

import argparse
from dataclasses import dataclass, replace

from speech_analysis.config import ConfigError, SpeechConfig
from speech_analysis.pipeline import AnalysisResult, run_analysis


@dataclass(frozen=True)
class AnalyzeAction:
    """
    `analyze` subcommand.

    Prints a plain-text summary of the analysis to stdout.
    """

    name: str = "analyze"
    help: str = "Print word frequencies, associations and sentiment"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--top",
            type=int,
            default=None,
            help="Number of frequent terms to print (default: report.top_n)",
        )
        parser.add_argument(
            "--term",
            action="append",
            default=None,
            help="Target term for associations (repeatable; overrides correlation.terms)",
        )
        parser.add_argument(
            "--threshold",
            type=float,
            default=None,
            help="Minimum correlation (overrides correlation.threshold)",
        )

    def run(self, args: argparse.Namespace, config: SpeechConfig | None) -> None:
        """
        Execute the analysis and print its tables.

        Raises:
            ConfigError:
                If command line overrides are invalid or the input cannot be
                analyzed.
        """

        if config is None:
            raise RuntimeError("AnalyzeAction requires a config, but none was provided")

        config = self._apply_overrides(config, args)
        top_n = args.top if args.top is not None else config.report.top_n
        if top_n <= 0:
            raise ConfigError("--top must be > 0")

        result = run_analysis(config)
        self._print_result(result, top_n=top_n)

    def _apply_overrides(self, config: SpeechConfig, args: argparse.Namespace) -> SpeechConfig:
        correlation = config.correlation
        if args.term:
            terms = tuple(dict.fromkeys(t.strip().lower() for t in args.term if t.strip()))
            correlation = replace(correlation, terms=terms)
        if args.threshold is not None:
            if not -1.0 <= args.threshold <= 1.0:
                raise ConfigError("--threshold must be between -1 and 1")
            correlation = replace(correlation, threshold=float(args.threshold))
        return replace(config, correlation=correlation)

    def _print_result(self, result: AnalysisResult, *, top_n: int) -> None:
        print("")
        print(f"Top {top_n} terms:")
        top = result.frequencies.top(top_n)
        if not top:
            print("  (no terms left after cleaning)")
        width = max((len(e.term) for e in top), default=0)
        for entry in top:
            print(f"  {entry.term:<{width}}  {entry.count}")

        for target, assoc in result.associations.items():
            print("")
            print(f"Associations for '{target}' (>= {assoc.threshold:.2f}):")
            if not len(assoc):
                print("  (none)")
            for a in assoc:
                print(f"  {a.term:<20} {a.correlation:.2f}")

        for name, summary in result.sentiment.items():
            print("")
            print(
                f"Sentiment ({name}, {summary.kind}): positive {summary.positive}, "
                f"negative {summary.negative}, net {summary.net} "
                f"[{len(summary)} matched row(s)]"
            )
