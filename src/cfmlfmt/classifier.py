"""Tag classifier.

Turns one raw tag string into a TagInfo: its lexical shape (comment,
doctype, opening, closing, self-closing) and its role (block or not,
templating or markup). Only the tag name token is looked at; attributes
are never parsed.

Thread Safety:
classify() is a pure function and TagInfo is frozen.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from cfmlfmt.vocabulary import DEFAULT_VOCABULARY, Vocabulary

# First run of letters/digits after "<" or "</"
_OPEN_NAME = re.compile(r"<([a-zA-Z][a-zA-Z0-9]*)")
_CLOSE_NAME = re.compile(r"</([a-zA-Z][a-zA-Z0-9]*)")


class Dialect(Enum):
    """Which tag vocabulary a tag name belongs to."""

    NONE = auto()  # Comments, doctypes, unnamed tags
    MARKUP = auto()
    TEMPLATING = auto()


@dataclass(frozen=True, slots=True)
class TagInfo:
    """Classification of a single tag occurrence.

    Exactly one of is_comment, is_doctype, is_closing, is_opening is set
    for anything shaped like a tag; is_opening also covers self-closing
    forms. Comments and doctypes report is_block but never touch the
    indent stack.

    """

    raw_text: str
    is_comment: bool = False
    is_doctype: bool = False
    is_closing: bool = False
    is_opening: bool = False
    is_self_closing: bool = False
    is_block: bool = False
    tag_name: str = ""
    dialect: Dialect = Dialect.NONE

    @property
    def is_templating(self) -> bool:
        return self.dialect is Dialect.TEMPLATING

    @property
    def opens_block(self) -> bool:
        """Opening, non-self-closing, block-level tag."""
        return self.is_opening and self.is_block and not self.is_self_closing

    @property
    def closes_block(self) -> bool:
        return self.is_closing and self.is_block


def classify(tag_text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> TagInfo:
    """Classify a raw tag string.

    Never fails on malformed input: text that does not look like a named
    tag yields a TagInfo with an empty tag_name and is_block False.

    Args:
        tag_text: Tag text including angle brackets, e.g. '<cfif x GT 1>'
        vocabulary: Tag-name sets used for the block/self-closing lookups

    Returns:
        TagInfo for this occurrence

    Example:
        >>> info = classify("</CFIF>")
        >>> info.is_closing, info.tag_name, info.is_block
        (True, 'cfif', True)

    """
    trimmed = tag_text.strip()

    # "<!--" also covers the CFML "<!---" comment form
    if trimmed.startswith("<!--"):
        return TagInfo(trimmed, is_comment=True, is_block=True)

    if trimmed[:9].lower() == "<!doctype":
        return TagInfo(trimmed, is_doctype=True, is_block=True)

    if trimmed.startswith("</"):
        match = _CLOSE_NAME.match(trimmed)
        name = match.group(1).lower() if match else ""
        is_closing, is_opening, is_self_closing = True, False, False
    else:
        match = _OPEN_NAME.match(trimmed)
        name = match.group(1).lower() if match else ""
        is_closing, is_opening = False, True
        is_self_closing = trimmed.endswith("/>") or vocabulary.is_self_closing(name)

    dialect = Dialect.NONE
    is_block = False
    if name:
        templating = name.startswith(vocabulary.templating_prefix)
        dialect = Dialect.TEMPLATING if templating else Dialect.MARKUP
        is_block = name in vocabulary.block_set(templating)

    return TagInfo(
        trimmed,
        is_closing=is_closing,
        is_opening=is_opening,
        is_self_closing=is_self_closing,
        is_block=is_block,
        tag_name=name,
        dialect=dialect,
    )


__all__ = [
    "Dialect",
    "TagInfo",
    "classify",
]
