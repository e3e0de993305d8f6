"""Indent stack of currently open block tags.

Closing tags are matched by name against the innermost open entry, not by
position, so a stray unclosed tag deeper in the document does not throw
off the alignment of the tags around it.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OpenTag:
    """An open block tag and the indent level of the line that opened it."""

    tag_name: str
    indent_level: int


class IndentStack:
    """LIFO of OpenTag records, local to one format call.

    Usage:
        >>> stack = IndentStack()
        >>> stack.push("cfif", 0)
        >>> stack.push("div", 1)
        >>> stack.find("cfif").indent_level
        0
        >>> stack.remove("cfif").tag_name
        'cfif'
        >>> stack.next_level()
        2

    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[OpenTag] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, tag_name: str, indent_level: int) -> None:
        self._entries.append(OpenTag(tag_name, indent_level))

    def top(self) -> OpenTag | None:
        return self._entries[-1] if self._entries else None

    def _index(self, tag_name: str) -> int:
        for i in range(len(self._entries) - 1, -1, -1):
            if self._entries[i].tag_name == tag_name:
                return i
        return -1

    def find(self, tag_name: str) -> OpenTag | None:
        """Innermost open entry named tag_name, or None."""
        i = self._index(tag_name)
        return self._entries[i] if i >= 0 else None

    def remove(self, tag_name: str) -> OpenTag | None:
        """Remove and return the innermost entry named tag_name.

        Entries opened after it stay on the stack.
        """
        i = self._index(tag_name)
        if i < 0:
            return None
        return self._entries.pop(i)

    def next_level(self) -> int:
        """Running indent level implied by the current top entry."""
        top = self.top()
        return top.indent_level + 1 if top else 0

    def names(self) -> list[str]:
        return [entry.tag_name for entry in self._entries]


__all__ = [
    "IndentStack",
    "OpenTag",
]
