"""Markdown table-of-contents generation.

Headings are collected from the text that follows a ``gen:toc`` directive.
Anchor ids follow a narrow allow-list: hyphens, digits and the configured
letter class survive, everything else is dropped. Ids are unique within a
single table; collisions get ``-1``, ``-2``, ... suffixes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdgen.exceptions import SlugPatternError

DEFAULT_SLUG_LETTERS = "a-zа-яё"

_HEADING_RE = re.compile(r"^(#+)\s+(.*)$")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class TocEntry:
    level: int
    name: str
    id: str


def slug_strip_pattern(letters: str = DEFAULT_SLUG_LETTERS) -> re.Pattern[str]:
    """Compile the class of characters removed from anchors."""
    try:
        return re.compile(rf"[^-0-9{letters}]", re.IGNORECASE)
    except re.error as exc:
        raise SlugPatternError(letters, str(exc)) from exc


def heading_slug(name: str, letters: str = DEFAULT_SLUG_LETTERS) -> str:
    return _slug(name, slug_strip_pattern(letters))


def _slug(name: str, strip_re: re.Pattern[str]) -> str:
    slug = _WHITESPACE_RE.sub("-", name.strip().lower())
    return strip_re.sub("", slug)


def _dedup_id(base: str, ids: set[str]) -> str:
    candidate = base
    counter = 0
    while candidate in ids:
        counter += 1
        candidate = f"{base}-{counter}"
    ids.add(candidate)
    return candidate


def collect_toc_entries(
    text: str, letters: str = DEFAULT_SLUG_LETTERS
) -> list[TocEntry]:
    strip_re = slug_strip_pattern(letters)
    ids: set[str] = set()
    entries: list[TocEntry] = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line.startswith("#"):
            continue
        match = _HEADING_RE.match(line)
        if match is None:
            continue
        nesting, name = match.groups()
        entries.append(
            TocEntry(
                level=len(nesting),
                name=name,
                id=_dedup_id(_slug(name, strip_re), ids),
            )
        )
    if entries:
        min_level = min(entry.level for entry in entries)
        for entry in entries:
            entry.level -= min_level
    return entries


def render_toc(entries: list[TocEntry]) -> str:
    lines = []
    for entry in entries:
        bullet = "-" if entry.level % 2 == 0 else "*"
        lines.append(f"{'  ' * entry.level}{bullet} [{entry.name}](#{entry.id})")
    return "\n" + "\n".join(lines) + "\n"


def generate_table_of_contents(
    text: str, letters: str = DEFAULT_SLUG_LETTERS
) -> str:
    return render_toc(collect_toc_entries(text, letters))
