# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Output writer action.

This action runs the analysis and writes a `.ods` report.

The output contains:
    - A summary sheet with corpus statistics and the sentiment totals.
    - A sheet with the full frequency table.
    - A sheet with the associations of all configured target terms.
    - One sheet per sentiment lexicon with the joined rows.
"""

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.config_elements import ConfigItem, ConfigItemMapEntry
from odfdo.element import Element
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from speech_analysis.cli_io import is_interactive_tty, prompt_overwrite
from speech_analysis.config import ConfigError, SpeechConfig
from speech_analysis.hash_utils import md5_file, md5_text
from speech_analysis.pipeline import AnalysisResult, run_analysis


_XML_ILLEGAL_CHARS_RE = re.compile(
    # XML 1.0 disallows most C0 control chars except TAB, LF, CR.
    r"[\x00-\x08\x0B\x0C\x0E-\x1F]"
    # Surrogates are never valid Unicode scalar values.
    r"|[\uD800-\uDFFF]"
    # Noncharacters.
    r"|[\uFFFE\uFFFF]"
)

# (row key, header title, cell type)
ColumnSpec = tuple[str, str, str]


def _xml_safe_text(value: Any) -> str:
    """Return a string that is safe to embed in XML/ODS.

    lxml (used by odfdo) rejects NULL bytes and some control characters.
    """

    if value is None:
        return ""

    text = str(value)
    if not text:
        return ""

    return _XML_ILLEGAL_CHARS_RE.sub("", text)


def _make_style_name(prefix: str, scope: str, *, suffix: str = "") -> str:
    """Return a stable, ODF-friendly style name."""

    scope_key = re.sub(r"[^A-Za-z0-9_]", "_", scope or "")
    scope_key = scope_key.strip("_")[:40] or "x"
    digest = md5_text(scope)[:8]
    if suffix:
        suffix = re.sub(r"[^A-Za-z0-9_]", "_", suffix)
    parts = [prefix, scope_key, digest]
    if suffix:
        parts.append(suffix)
    return "_".join(p for p in parts if p)


def _insert_automatic_style(doc: Document, style: Style | None) -> Style | None:
    """Insert style into document automatic-styles so viewers can apply it."""

    if style is None:
        return None
    try:
        doc.insert_style(style, automatic=True)
        return style
    except Exception:  # noqa: BLE001
        return None


def _set_config_item(entry: Element, *, name: str, config_type: str, value: str | int | bool) -> None:
    existing = None
    for item in entry.get_elements("config:config-item"):
        if isinstance(item, ConfigItem) and item.name == name:
            existing = item
            break
    if existing is None:
        existing = ConfigItem(name=name, config_type=config_type, value=value)
        entry.append(existing)
    else:
        existing.config_type = config_type
        existing.value = value


def _freeze_first_row_in_settings(doc: Document) -> None:
    """Best-effort: configure view settings to freeze the first row in each sheet.

    LibreOffice/Calc stores freeze pane configuration in settings.xml under
    ooo:view-settings -> Views -> Tables.
    """

    try:
        table_names = [t.name for t in doc.body.tables if getattr(t, "name", None)]
        if not table_names:
            return

        view_settings = doc.settings.get_element(
            '//config:config-item-set[@config:name="ooo:view-settings"]'
        )
        if view_settings is None:
            return

        views = view_settings.get_element('config:config-item-map-indexed[@config:name="Views"]')
        if views is None:
            return

        view_entry = views.get_element("config:config-item-map-entry")
        if view_entry is None:
            return

        tables_map = view_entry.get_element('config:config-item-map-named[@config:name="Tables"]')
        if tables_map is None:
            return

        template = tables_map.get_element("config:config-item-map-entry")
        if template is None:
            return
        template_entry = cast(ConfigItemMapEntry, template)

        for child in list(tables_map.children):
            tables_map.delete(child)

        for name in table_names:
            entry = cast(ConfigItemMapEntry, template_entry.clone)
            entry.name = name

            # Freeze first row (row index 1), no frozen columns.
            _set_config_item(entry, name="HorizontalSplitMode", config_type="short", value=0)
            _set_config_item(entry, name="HorizontalSplitPosition", config_type="int", value=0)
            _set_config_item(entry, name="VerticalSplitMode", config_type="short", value=2)
            _set_config_item(entry, name="VerticalSplitPosition", config_type="int", value=1)

            tables_map.append(entry)
    except Exception:  # noqa: BLE001
        # Never fail report generation because of viewer-specific settings.
        return


def _col_letters(index_1_based: int) -> str:
    """Convert 1-based column index to spreadsheet letters (A, B, ..., AA, ...)."""

    if index_1_based <= 0:
        return "A"
    n = index_1_based
    out: list[str] = []
    while n:
        n, rem = divmod(n - 1, 26)
        out.append(chr(ord("A") + rem))
    return "".join(reversed(out))


def _quote_sheet_name_for_range(name: str) -> str:
    # ODF range addresses use single quotes around sheet names.
    safe = (name or "").replace("'", "''")
    return f"'{safe}'"


def _enable_autofilter(doc: Document, sheet_ranges: list[tuple[str, int, int]]) -> None:
    """Best-effort: enable auto filter dropdowns for each sheet.

    A database range per sheet covers A1 through the last used cell and is
    marked as having headers.
    """

    try:
        if not sheet_ranges:
            return

        for existing in doc.body.get_elements("table:database-ranges"):
            doc.body.delete(existing)

        db_ranges = Element.from_tag("table:database-ranges")

        for sheet_name, ncols, nrows in sheet_ranges:
            if not sheet_name or ncols <= 0 or nrows <= 0:
                continue

            addr = (
                f"{_quote_sheet_name_for_range(sheet_name)}.A1:"
                f"{_col_letters(ncols)}{max(1, int(nrows))}"
            )

            db = Element.from_tag("table:database-range")
            db.set_attribute("table:name", _make_style_name("db", sheet_name))
            db.set_attribute("table:target-range-address", addr)
            db.set_attribute("table:display-filter-buttons", "true")
            db.set_attribute("table:contains-header", "true")

            flt = Element.from_tag("table:filter")
            flt.set_attribute("table:display-filter-buttons", "true")
            db.append(flt)

            db_ranges.append(db)

        doc.body.append(db_ranges)
    except Exception:  # noqa: BLE001
        return


def _unique_sheet_name(name: str, used: set[str]) -> str:
    """Return a sheet name of at most 31 characters not yet in `used`."""

    candidate = _xml_safe_text(name).replace("\n", " ").replace("\r", " ")[:31]
    if candidate not in used:
        used.add(candidate)
        return candidate

    idx = 2
    while True:
        suffix = f"_{idx}"
        trimmed = candidate[: max(1, 31 - len(suffix))] + suffix
        if trimmed not in used:
            used.add(trimmed)
            return trimmed
        idx += 1


def summary_rows(result: AnalysisResult) -> list[dict[str, Any]]:
    """Key/value rows for the summary sheet."""

    rows: list[dict[str, Any]] = []
    if result.source is not None:
        rows.append({"key": "Source", "value": str(result.source)})
        if result.source.is_file():
            rows.append({"key": "Source MD5", "value": md5_file(result.source)})

    rows.extend(
        [
            {"key": "Documents", "value": len(result.corpus)},
            {"key": "Terms", "value": result.frequencies.total},
            {"key": "Distinct terms", "value": len(result.frequencies)},
        ]
    )

    for name, summary in result.sentiment.items():
        rows.extend(
            [
                {"key": f"{name} positive", "value": summary.positive},
                {"key": f"{name} negative", "value": summary.negative},
                {"key": f"{name} net", "value": summary.net},
            ]
        )
    return rows


@dataclass(frozen=True)
class WriteOutputAction:
    """
    `write-output` subcommand.

    Writes the `.ods` report with all analysis tables.
    """

    name: str = "write-output"
    help: str = "Write the output file (.ods)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `write-output` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite the output file if it already exists",
        )

    def run(self, args: argparse.Namespace, config: SpeechConfig | None) -> None:
        """
        Execute output writing.

        Raises:
            ConfigError:
                If the output exists and cannot be overwritten, or if the
                analysis fails.
        """

        if config is None:
            raise RuntimeError("WriteOutputAction requires a config, but none was provided")

        outfile = config.outfile
        if outfile.exists() and not bool(getattr(args, "force", False)):
            if not is_interactive_tty():
                raise ConfigError(
                    f"Output file already exists: {outfile}. Refusing to overwrite in non-interactive mode. "
                    "Use --force to overwrite."
                )
            if not prompt_overwrite(outfile):
                print(f"Keeping existing file: {outfile}")
                return

        result = run_analysis(config)
        self.write_report(result, outfile)

    def write_report(self, result: AnalysisResult, outfile: Path) -> None:
        """Build the spreadsheet for `result` and save it to `outfile`."""

        print(f"Building ODS report: {outfile}")
        doc = Document("spreadsheet")

        # odfdo creates a default empty sheet; only our sheets should remain.
        for table in list(doc.body.tables):
            doc.body.delete(table)

        used: set[str] = set()
        sheet_ranges: list[tuple[str, int, int]] = []

        sheet_ranges.append(
            self._append_sheet(
                doc,
                _unique_sheet_name("Summary", used),
                [("key", "Item", "text"), ("value", "Value", "auto")],
                summary_rows(result),
            )
        )

        sheet_ranges.append(
            self._append_sheet(
                doc,
                _unique_sheet_name("Frequencies", used),
                [("term", "Term", "text"), ("count", "Count", "int")],
                [{"term": e.term, "count": e.count} for e in result.frequencies],
            )
        )

        assoc_rows = [
            {"target": target, "term": a.term, "correlation": a.correlation}
            for target, assoc in result.associations.items()
            for a in assoc
        ]
        sheet_ranges.append(
            self._append_sheet(
                doc,
                _unique_sheet_name("Associations", used),
                [
                    ("target", "Target", "text"),
                    ("term", "Term", "text"),
                    ("correlation", "Correlation", "float"),
                ],
                assoc_rows,
            )
        )

        for name, summary in result.sentiment.items():
            columns: list[ColumnSpec] = [
                ("term", "Term", "text"),
                ("frequency", "Frequency", "int"),
                ("sentiment", "Sentiment", "text"),
            ]
            if summary.kind == "signed":
                columns.append(("score", "Score", "int"))
            rows = summary.to_frame().to_dict(orient="records")
            sheet_ranges.append(
                self._append_sheet(doc, _unique_sheet_name(f"Sentiment {name}", used), columns, rows)
            )

        _freeze_first_row_in_settings(doc)
        _enable_autofilter(doc, sheet_ranges)

        outfile.parent.mkdir(parents=True, exist_ok=True)
        doc.save(outfile)
        print(f"Wrote ODS report: {outfile}")

    def _append_sheet(
        self,
        doc: Document,
        sheet_name: str,
        columns: list[ColumnSpec],
        rows: list[dict[str, Any]],
    ) -> tuple[str, int, int]:
        """
        Add one sheet with a bold header row to the ODS document.

        Args:
            doc:
                ODF spreadsheet document.
            sheet_name:
                Unique sheet name.
            columns:
                Column specs `(key, title, type)`; type is `text`, `int`,
                `float` or `auto` (numbers stay numeric, everything else text).
            rows:
                Row mappings keyed by column key.

        Returns:
            (sheet name, columns, rows) including the header row.
        """

        print(f"Writing sheet: {sheet_name}")
        table = Table(sheet_name)

        try:
            header_style = cast(
                Style,
                Style(
                    "table-cell",
                    name=_make_style_name("hdr", sheet_name),
                    area="text",
                    bold=True,
                ),
            )
        except Exception:  # noqa: BLE001
            header_style = None
        header_style = _insert_automatic_style(doc, header_style)

        # Column widths from the longest content (0.12 cm per character).
        col_max_chars = [len(title) for _key, title, _kind in columns]
        for r in rows:
            for c_idx, (key, _title, _kind) in enumerate(columns):
                col_max_chars[c_idx] = max(col_max_chars[c_idx], len(_xml_safe_text(r.get(key, ""))))

        for c_idx, chars in enumerate(col_max_chars, start=1):
            width_cm = max(3.0, min(chars * 0.12, 24.0))
            col_style = _insert_automatic_style(
                doc,
                Style(
                    "table-column",
                    name=_make_style_name("col", sheet_name, suffix=str(c_idx)),
                    area="table-column",
                    width=f"{width_cm:.2f}cm",
                ),
            )
            if col_style is not None:
                table.append(Column(style=col_style.name))

        header = Row()
        for _key, title, _kind in columns:
            cell = Cell(value=_xml_safe_text(title))
            if header_style is not None:
                cell.style = header_style.name
            header.append_cell(cell)
        table.append_row(header)

        for r in rows:
            row = Row()
            for key, _title, kind in columns:
                row.append_cell(self._make_cell(r.get(key), kind))
            table.append_row(row)

        doc.body.append(table)
        return (sheet_name, len(columns), 1 + len(rows))

    def _make_cell(self, value: Any, kind: str) -> Cell:
        if value is None:
            return Cell(text="")
        if kind == "int":
            return Cell(value=int(value))
        if kind == "float":
            return Cell(value=float(value))
        if kind == "auto" and isinstance(value, (int, float)) and not isinstance(value, bool):
            return Cell(value=value)
        return Cell(value=_xml_safe_text(value))
