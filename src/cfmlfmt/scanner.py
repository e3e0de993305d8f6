"""Per-line tag scanner.

One compiled pattern recognizes the four tag shapes that can appear in a
line: HTML comments, CDATA sections, doctype declarations and generic
``<...>`` tags. Scanning is restartable at any offset so the formatter can
skip over verbatim regions.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

TAG_PATTERN = re.compile(
    r"<(?:!--[\s\S]*?--|!\[CDATA\[[\s\S]*?\]\]|!DOCTYPE[^>]*|[^>]+)>",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class TagMatch:
    """A tag found in a line, with its [start, end) offsets."""

    text: str
    start: int
    end: int


def next_tag(line: str, pos: int = 0) -> TagMatch | None:
    """Find the first tag at or after pos, or None."""
    m = TAG_PATTERN.search(line, pos)
    if m is None:
        return None
    return TagMatch(m.group(0), m.start(), m.end())


def iter_tags(line: str, pos: int = 0) -> Iterator[TagMatch]:
    """Lazily yield every tag in line from pos onwards, in order."""
    match = next_tag(line, pos)
    while match is not None:
        yield match
        match = next_tag(line, match.end)


@lru_cache(maxsize=64)
def closing_tag_pattern(tag_name: str) -> re.Pattern[str]:
    """Pattern for the closing tag of tag_name (case-insensitive)."""
    return re.compile(rf"</{re.escape(tag_name)}\s*>", re.IGNORECASE)


def find_closing_tag(line: str, tag_name: str, pos: int = 0) -> int:
    """Offset of the first closing tag for tag_name at or after pos, or -1."""
    m = closing_tag_pattern(tag_name).search(line, pos)
    return m.start() if m else -1


__all__ = [
    "TAG_PATTERN",
    "TagMatch",
    "closing_tag_pattern",
    "find_closing_tag",
    "iter_tags",
    "next_tag",
]
