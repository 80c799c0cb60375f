# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Source reader interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class SourceReader(Protocol):
    """Interface for transcript file reading.

    Implementations must only perform raw text extraction. Paragraph splitting
    and normalization remain outside the reader.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_lines(self, path: Path) -> list[str]:
        """Return the text lines of the given transcript file."""

        raise NotImplementedError


@dataclass(frozen=True)
class ReaderError(RuntimeError):
    """Raised for transcript reading errors."""

    message: str
    path: Path | None = None
    line: int | None = None
    excerpt: str | None = None

    def __str__(self) -> str:
        parts: list[str] = []

        if self.path is not None:
            if self.line is not None:
                parts.append(f"{self.path}:{self.line}: {self.message}")
            else:
                parts.append(f"{self.path}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)
