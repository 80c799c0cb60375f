"""Transcript readers.

The analysis can read transcripts from different source formats. Each reader
converts the source file into the raw list of text lines. Splitting lines into
documents and normalizing them is handled by `speech_analysis.corpus`.
"""

from speech_analysis.readers.base import ReaderError, SourceReader
from speech_analysis.readers.registry import get_source_reader, read_source_lines

__all__ = [
    "ReaderError",
    "SourceReader",
    "get_source_reader",
    "read_source_lines",
]
