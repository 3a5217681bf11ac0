"""Markdown formatting primitives."""

from __future__ import annotations

import re
from typing import List, Sequence

_SEPARATOR_PATTERN = re.compile(r"^[-_]*(.)")
_INNER_SEPARATOR_PATTERN = re.compile(r"[-_]+(.)")
_UNESCAPED_PIPE_PATTERN = re.compile(r"(?<!\\)((?:\\\\)*)\|")


def sanitize_for_table(text: str | None) -> str:
    """Make ``text`` safe to place inside a Markdown table cell.

    CRLF and lone CR line endings are normalised first. A pipe is escaped unless an
    odd run of backslashes already escapes it; paragraph breaks become
    ``<br/><br/>`` and remaining newlines collapse to spaces. Already-sanitized
    text is left unchanged.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    escaped = _UNESCAPED_PIPE_PATTERN.sub(r"\1\\|", text)
    return escaped.replace("\n\n", "<br/><br/>").replace("\n", " ")


def as_code(text: str) -> str:
    return f"`{text}`"


def new_paragraph(text: str) -> str:
    return f"{text}\n\n"


def header(level: int, text: str) -> str:
    return f"{'#' * level} {text}"


def first_paragraph_of(text: str) -> str:
    return text.split("\n\n", 1)[0]


def title_case(segment: str) -> str:
    """Turn a path segment such as ``place_building_blocks`` into a title."""
    result = _SEPARATOR_PATTERN.sub(lambda m: m.group(1).upper(), segment, count=1)
    return _INNER_SEPARATOR_PATTERN.sub(lambda m: " " + m.group(1).upper(), result)


def markdown_table(rows: Sequence[Sequence[str]]) -> str:
    """Render rows (header first) as an aligned GitHub-flavoured table."""
    if not rows:
        return ""
    column_count = max(len(row) for row in rows)
    normalised = [list(row) + [""] * (column_count - len(row)) for row in rows]
    widths = [
        max(3, *(len(row[index]) for row in normalised)) for index in range(column_count)
    ]

    def format_row(cells: Sequence[str]) -> str:
        padded = [cell.ljust(widths[index]) for index, cell in enumerate(cells)]
        return "| " + " | ".join(padded) + " |"

    lines: List[str] = [format_row(normalised[0])]
    lines.append(format_row(["-" * width for width in widths]))
    lines.extend(format_row(row) for row in normalised[1:])
    return "\n".join(lines)


__all__ = [
    "as_code",
    "first_paragraph_of",
    "header",
    "markdown_table",
    "new_paragraph",
    "sanitize_for_table",
    "title_case",
]
