#!/usr/bin/env python3
"""Minimal markdown subset renderer for the slide deck.

Two input shapes are supported:

- a pipe table (header row, alignment divider, body rows) rendered to ``<table>``;
- a risks document of headings, bullets and paragraphs, rendered either as a
  two-column Actors/Methods grid or, when those sections are missing, as flat
  headings/lists/paragraphs.

Nothing here raises for malformed input. The worst case is ``None`` from
``parse_table`` or the flat fallback from ``render_risks_columns``.
"""

from __future__ import annotations

import argparse
import enum
import html
import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple


LINE_SPLIT_RE = re.compile(r"\r?\n")
DIVIDER_RE = re.compile(r"^\|?\s*[:\-]+")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
BULLET_RE = re.compile(r"^[-*]\s+(.+)$")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*")

SECTION_LEVEL = 3
SECTION_NAMES = ("Actors", "Methods")


@dataclass
class TableStructure:
    header_cells: List[str]
    rows: List[List[str]] = field(default_factory=list)


class ParserState(enum.Enum):
    NONE = "none"
    IN_LIST = "in_list"


def escape_html(text: str) -> str:
    return html.escape(str(text), quote=True)


def format_inline(text: str) -> str:
    """Escape ``text`` and expand ``**bold**`` spans afterwards."""
    return BOLD_RE.sub(r"<strong>\1</strong>", escape_html(text))


def split_lines(markdown: str) -> List[str]:
    return LINE_SPLIT_RE.split(markdown or "")


def split_cells(line: str) -> List[str]:
    # empty cells are dropped, including interior ones from "||"
    return [cell.strip() for cell in line.split("|") if cell.strip()]


# ---------- table ----------

def extract_table(markdown: str) -> Optional[TableStructure]:
    """Return the first pipe table found in ``markdown``, or None."""
    lines = split_lines(markdown)
    for i in range(len(lines) - 1):
        header = lines[i].strip()
        divider = lines[i + 1].strip()
        if "|" not in header or "|" not in divider:
            continue
        if not DIVIDER_RE.match(divider):
            continue

        header_cells = split_cells(header)
        divider_cells = split_cells(divider)
        if not header_cells or not divider_cells:
            continue

        rows: List[List[str]] = []
        for raw in lines[i + 2:]:
            row_line = raw.strip()
            if "|" not in row_line:
                break
            row_cells = split_cells(row_line)
            if not row_cells:
                break
            rows.append(row_cells)
        return TableStructure(header_cells=header_cells, rows=rows)
    return None


def _header_cell(cell: str, logos: Mapping[str, Mapping[str, str]]) -> str:
    logo = logos.get(cell)
    if not logo:
        return f"<th>{escape_html(cell)}</th>"
    return (
        '<th><div class="table-head">'
        f'<img class="table-logo" src="{escape_html(logo.get("src", ""))}" alt="{escape_html(logo.get("alt", cell))}" />'
        f"<span>{escape_html(cell)}</span>"
        "</div></th>"
    )


def render_table(table: TableStructure, logos: Mapping[str, Mapping[str, str]] | None = None) -> str:
    logos = logos or {}
    header_html = "".join(_header_cell(cell, logos) for cell in table.header_cells)
    body_html = "".join(
        "<tr>" + "".join(f"<td>{escape_html(cell)}</td>" for cell in row) + "</tr>"
        for row in table.rows
    )
    return f"<table><thead><tr>{header_html}</tr></thead><tbody>{body_html}</tbody></table>"


def parse_table(markdown: str, logos: Mapping[str, Mapping[str, str]] | None = None) -> Optional[str]:
    table = extract_table(markdown)
    if table is None:
        return None
    return render_table(table, logos)


# ---------- risks ----------

def parse_risks_markdown(markdown: str) -> str:
    """Render headings, bullets and paragraphs in document order.

    Below a heading of level 3 or deeper, bare lines count as list items
    until the next blank line or heading.
    """
    parts: List[str] = []
    state = ParserState.NONE
    list_mode = False

    for line in split_lines(markdown):
        trimmed = line.strip()

        if not trimmed:
            if state is ParserState.IN_LIST:
                parts.append("</ul>")
                state = ParserState.NONE
            list_mode = False
            continue

        heading = HEADING_RE.match(trimmed)
        if heading:
            if state is ParserState.IN_LIST:
                parts.append("</ul>")
                state = ParserState.NONE
            level = len(heading.group(1))
            parts.append(f"<h{level}>{format_inline(heading.group(2))}</h{level}>")
            list_mode = level >= SECTION_LEVEL
            continue

        bullet = BULLET_RE.match(trimmed)
        if bullet or list_mode:
            item = bullet.group(1) if bullet else trimmed
            if state is ParserState.NONE:
                parts.append("<ul>")
                state = ParserState.IN_LIST
            parts.append(f"<li>{format_inline(item)}</li>")
            continue

        if state is ParserState.IN_LIST:
            parts.append("</ul>")
            state = ParserState.NONE
        parts.append(f"<p>{format_inline(trimmed)}</p>")

    if state is ParserState.IN_LIST:
        parts.append("</ul>")
    return "".join(parts)


def collect_sections(markdown: str) -> Dict[str, List[str]]:
    sections: Dict[str, List[str]] = {name: [] for name in SECTION_NAMES}
    current: Optional[str] = None

    for line in split_lines(markdown):
        trimmed = line.strip()
        if not trimmed:
            continue

        heading = HEADING_RE.match(trimmed)
        if heading:
            title = heading.group(2).strip()
            if len(heading.group(1)) == SECTION_LEVEL and title in sections:
                current = title
            else:
                current = None
            continue

        bullet = BULLET_RE.match(trimmed)
        item = bullet.group(1).strip() if bullet else trimmed
        if current and item:
            sections[current].append(item)
    return sections


def has_columns(sections: Mapping[str, List[str]]) -> bool:
    return all(sections.get(name) for name in SECTION_NAMES)


def _plain_list(items: List[str]) -> str:
    # column items are escaped only, bold markers stay literal
    return "".join(f"<li>{escape_html(item)}</li>" for item in items)


def render_risks(markdown: str) -> Tuple[str, str]:
    """Return ``(html, layout)`` where layout is ``"columns"`` or ``"fallback"``."""
    sections = collect_sections(markdown)
    if not has_columns(sections):
        return f'<div class="risks-fallback">{parse_risks_markdown(markdown)}</div>', "fallback"

    panels = "".join(
        f"<div><h3>{name}</h3><ul>{_plain_list(sections[name])}</ul></div>"
        for name in SECTION_NAMES
    )
    return f'<div class="risks-grid">{panels}</div>', "columns"


def render_risks_columns(markdown: str) -> str:
    return render_risks(markdown)[0]


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render deck markdown fragments to HTML")
    parser.add_argument("--table-md", default="")
    parser.add_argument("--risks-md", default="")
    return parser


def main() -> int:
    args = build_cli().parse_args()
    out: Dict[str, object] = {"ok": True}
    if args.table_md:
        out["table_html"] = parse_table(Path(args.table_md).read_text(encoding="utf-8"))
    if args.risks_md:
        out["risks_html"] = render_risks_columns(Path(args.risks_md).read_text(encoding="utf-8"))
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
