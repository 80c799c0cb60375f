# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Figure rendering action.

Writes the bar chart, word cloud, association plots, sentiment charts and the
positive/negative comparison cloud into the configured `outdir`.
"""

import argparse
from dataclasses import dataclass

from speech_analysis.config import SpeechConfig
from speech_analysis.pipeline import run_analysis
from speech_analysis.plots import render_all


@dataclass(frozen=True)
class PlotAction:
    """`plot` subcommand."""

    name: str = "plot"
    help: str = "Render word clouds and charts"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, config: SpeechConfig | None) -> None:
        if config is None:
            raise RuntimeError("PlotAction requires a config, but none was provided")

        _ = args
        result = run_analysis(config)
        written = render_all(
            result,
            config.outdir,
            top_n=config.report.top_n,
            max_words=config.report.max_words,
        )
        print(f"Wrote {len(written)} figure(s) to: {config.outdir}")
