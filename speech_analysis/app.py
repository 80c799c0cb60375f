from __future__ import annotations

"""
`speech-analysis` command line.

    speech-analysis template [PATH] [--force]
    speech-analysis analyze [--config PATH] [--top N] [--term T ...] [--threshold X]
    speech-analysis plot [--config PATH]
    speech-analysis write-output [--config PATH] [--force]

Every command except `template` loads `speech.yaml` first. Configuration and
input problems are reported as `error: ...` with exit code 2.
"""

import argparse
import sys
from dotenv import load_dotenv

from speech_analysis.actions.analyze import AnalyzeAction
from speech_analysis.actions.plot import PlotAction
from speech_analysis.actions.template import TemplateAction
from speech_analysis.actions.write_output import WriteOutputAction
from speech_analysis.config import ConfigError, find_config_path, load_config


def _action_repository():
    """Subcommand name -> action, in the order shown by `--help`."""

    actions = [
        TemplateAction(),
        AnalyzeAction(),
        PlotAction(),
        WriteOutputAction(),
    ]
    return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the top-level argument parser.

    The parser uses subcommands (similar to `git`) where each action registers its
    own arguments.

    Returns:
        The configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="speech-analysis",
        description=(
            "Word frequencies, word associations and lexicon sentiment for a speech transcript."
        ),
    )

    actions = _action_repository()

    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument(
        "--config",
        "-c",
        help=(
            "Path to speech.yaml. If omitted, ./speech.yaml in the current directory is used."
        ),
    )

    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

    for name, action in actions.items():
        parents = [config_parent] if action.requires_config else []
        sub = subparsers.add_parser(name, help=action.help, parents=parents)
        action.add_arguments(sub)
        sub.set_defaults(_action_name=name)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv:
            Optional argument list (without program name). If omitted, argparse
            reads from sys.argv.

    Returns:
        Process exit code. `0` on success, `2` on configuration, input or
        usage errors.
    """
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        actions = _action_repository()
        action_name = getattr(args, "_action_name", None)
        if not action_name or action_name not in actions:
            parser.error("Unknown or missing command")
            return 2

        action = actions[action_name]

        config = None
        if action.requires_config:
            config_path = find_config_path(getattr(args, "config", None))
            config = load_config(config_path)

        action.run(args, config)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
