"""LineBuffer for O(n) output assembly.

Collects indented output lines in a list and joins them once at the end
instead of growing a string line by line.

Thread Safety:
LineBuffer instances are local to each format() call.
No shared mutable state.

"""

from __future__ import annotations


class LineBuffer:
    """Accumulator of indented output lines.

    Usage:
            >>> buf = LineBuffer("  ")
            >>> buf.append_line(0, "<ul>")
            >>> buf.append_line(1, "<li>one</li>")
            >>> buf.append_line(0, "</ul>")
            >>> buf.build()
            '<ul>\\n  <li>one</li>\\n</ul>'

    """

    __slots__ = ("_indent_unit", "_lines")

    def __init__(self, indent_unit: str) -> None:
        self._indent_unit = indent_unit
        self._lines: list[str] = []

    def append_line(self, level: int, content: str) -> None:
        """Append content indented by level units (negative levels clamp to 0).

        Empty content is skipped.
        """
        if content:
            self._lines.append(self._indent_unit * max(0, level) + content)

    def append_verbatim(self, line: str) -> None:
        """Append a line exactly as given, blank lines included."""
        self._lines.append(line)

    def build(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)


__all__ = ["LineBuffer"]
