# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown source reader."""

from pathlib import Path

from speech_analysis.readers.base import ReaderError


class TextSourceReader:
    """Read .txt and .md transcripts line by line."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_lines(self, path: Path) -> list[str]:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ReaderError(f"Failed to read text file: {exc}", path=path) from exc

        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            line = raw[: exc.start].count(b"\n") + 1
            excerpt = raw[max(0, exc.start - 40) : exc.end + 40].decode("utf-8", errors="replace")
            raise ReaderError(
                "File is not valid UTF-8 text",
                path=path,
                line=line,
                excerpt=excerpt,
            ) from exc

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return text.split("\n")
