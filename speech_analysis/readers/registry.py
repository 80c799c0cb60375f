# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Source reader registry."""

from pathlib import Path

from speech_analysis.config import ConfigError
from speech_analysis.readers.base import ReaderError, SourceReader
from speech_analysis.readers.odt_reader import OdtSourceReader
from speech_analysis.readers.text_reader import TextSourceReader


_READERS: list[SourceReader] = [
    OdtSourceReader(),
    TextSourceReader(),
]


def get_source_reader(path: Path) -> SourceReader:
    """Select a source reader based on the file.

    Args:
        path:
            Transcript file path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    supported = ", ".join(sorted({".odt", ".txt", ".md"}))
    raise ConfigError(f"Unsupported transcript format: {path} (supported: {supported})")


def read_source_lines(path: Path) -> list[str]:
    """Read a transcript and normalize errors to ConfigError."""

    if not path.exists():
        raise ConfigError(f"Input file not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Input path is not a file: {path}")

    reader = get_source_reader(path)
    try:
        return reader.read_lines(path)
    except ReaderError as exc:
        raise ConfigError(str(exc)) from exc
