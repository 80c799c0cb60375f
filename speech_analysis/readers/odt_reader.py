# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT source reader."""

from pathlib import Path

from odfdo import Document

from speech_analysis.readers.base import ReaderError


class OdtSourceReader:
    """Read ODT files, one line per paragraph or heading."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_lines(self, path: Path) -> list[str]:
        """Extract plain-text paragraphs from an ODT document.

        Empty paragraphs are kept as empty lines so that blank-line paragraph
        splitting behaves like it does for text files.
        """

        try:
            doc = Document(path)
            body = doc.body

            def _node_text(node: object) -> str:
                # odfdo Paragraph objects often expose richer text via
                # `inner_text`/`text_recursive` than via `.text`.
                for attr in ("inner_text", "text_recursive", "text"):
                    if hasattr(node, attr):
                        value = getattr(node, attr)
                        if callable(value):
                            value = value()
                        if value is not None:
                            return str(value)
                return str(node)

            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())

            return [" ".join(_node_text(n).split()) for n in nodes]
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to parse ODT file: {exc}", path=path) from exc
