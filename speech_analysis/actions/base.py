from __future__ import annotations

"""
Subcommand protocol.

`template`, `analyze`, `plot` and `write-output` are small frozen dataclasses
that satisfy `Action`; `app.py` registers their arguments and runs the selected
one with the loaded `speech.yaml` (if the command needs it).
"""

import argparse
from typing import Protocol

from speech_analysis.config import SpeechConfig


class Action(Protocol):
    """
    One `speech-analysis` subcommand.

    Attributes:
        name:
            Subcommand name on the command line.
        help:
            One-line description shown by `speech-analysis --help`.
        requires_config:
            Whether `--config` is offered and a `speech.yaml` must load before
            `run` is called. Only `template` works without one.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add the subcommand's own options (e.g. `--top`, `--force`)."""

    def run(self, args: argparse.Namespace, config: SpeechConfig | None) -> None:
        """
        Run the subcommand.

        Args:
            args:
                Parsed command line, including the subcommand's own options.
            config:
                Validated analysis settings; `None` for `template`.

        Raises:
            ConfigError:
                For invalid options, unreadable input or lexicons, or an
                output file that must not be overwritten.
        """
