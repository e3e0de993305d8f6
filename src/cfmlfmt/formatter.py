"""Line formatter: the indentation and alignment engine.

Re-renders mixed CFML/HTML text one physical line at a time. Each line is
scanned twice:

- Pass A looks only at the line's first tag. A closing block tag pulls
  the whole line back to the level its opener was printed at, and a branch
  tag (``<cfelse>``) to the level of its parent block. This has to happen
  before anything on the line is emitted.
- Pass B walks every tag in order, rebuilding the line content and
  updating the indent stack and the running level for the lines after it.

Line breaks are never added or moved: the formatter only re-indents the
lines it is given, drops blank ones and normalizes whitespace between
tags and text.

Thread Safety:
Formatter holds only immutable options and vocabulary. All scan state is
created per format() call.

"""

from __future__ import annotations

from collections.abc import Mapping

from cfmlfmt.classifier import classify
from cfmlfmt.config import FormatOptions
from cfmlfmt.linebuffer import LineBuffer
from cfmlfmt.scanner import find_closing_tag, next_tag
from cfmlfmt.stack import IndentStack
from cfmlfmt.utils.logger import get_logger
from cfmlfmt.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = get_logger(__name__)


class _ScanState:
    """Mutable state of one format() call."""

    __slots__ = ("raw_tag", "running", "stack")

    def __init__(self) -> None:
        self.stack = IndentStack()
        # Indent level for the next line
        self.running = 0
        # Whitespace-preserving tag whose interior is being copied verbatim
        self.raw_tag: str | None = None


class _ContentJoiner:
    """Joins the tags and text runs of one line.

    Text runs are trimmed and collapsed to single spaces; tags are copied
    as-is. Neighbouring pieces get one space between them only if the
    source had whitespace there.
    """

    __slots__ = ("_parts", "_space")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._space = False

    def _add(self, piece: str) -> None:
        if self._parts and self._space:
            self._parts.append(" ")
        self._parts.append(piece)
        self._space = False

    def text(self, run: str) -> None:
        if not run:
            return
        words = run.split()
        if not words:
            self._space = True
            return
        if run[0].isspace():
            self._space = True
        self._add(" ".join(words))
        self._space = run[-1].isspace()

    def tag(self, tag_text: str) -> None:
        self._add(tag_text)

    def verbatim(self, run: str) -> None:
        if run:
            self._parts.append(run)
            self._space = False

    def build(self) -> str:
        return "".join(self._parts)


class Formatter:
    """Reusable formatter bound to one set of options and one vocabulary.

    Usage:
        >>> fmt = Formatter(FormatOptions(indent_size=2))
        >>> print(fmt.format("<cfif x>\\n<cfset y = 1>\\n</cfif>"))
        <cfif x>
          <cfset y = 1>
        </cfif>

    """

    __slots__ = ("_options", "_vocabulary")

    def __init__(
        self,
        options: FormatOptions | Mapping[str, object] | None = None,
        vocabulary: Vocabulary | None = None,
    ) -> None:
        self._options = FormatOptions.coerce(options)
        self._vocabulary = vocabulary or DEFAULT_VOCABULARY

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def format(self, text: str) -> str:
        """Reformat text, returning it unchanged if anything goes wrong."""
        try:
            return self._format(text)
        except Exception:
            # The caller always gets text back; the failure is only logged
            logger.warning("Formatting failed, returning input unchanged", exc_info=True)
            return text

    def _format(self, text: str) -> str:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = text.split("\n")
        state = _ScanState()
        out = LineBuffer(self._options.indent_unit)

        for line in lines:
            if state.raw_tag is not None:
                self._format_raw_line(line, state, out)
                continue
            stripped = line.strip()
            if not stripped:
                continue
            level, content = self._format_line(stripped, state)
            out.append_line(level, content)

        logger.debug(
            "Formatted %d line(s) into %d, %d block(s) left open",
            len(lines),
            len(out),
            len(state.stack),
        )
        return out.build()

    def _format_raw_line(self, line: str, state: _ScanState, out: LineBuffer) -> None:
        """Handle a line inside a whitespace-preserving tag."""
        raw_tag = state.raw_tag
        assert raw_tag is not None
        close = find_closing_tag(line, raw_tag)
        if close < 0:
            out.append_verbatim(line)
            return

        state.raw_tag = None
        prefix = line[:close]
        if not prefix.strip():
            # Closing tag starts the line: align it like any other
            out.append_line(*self._format_line(line.strip(), state))
            return

        # Keep the interior verbatim, then format from the closing tag on
        _, content = self._format_line(line[close:].strip(), state)
        head = prefix.rstrip()
        sep = " " if len(head) < len(prefix) and content else ""
        out.append_verbatim(head + sep + content)

    def _format_line(self, line: str, state: _ScanState) -> tuple[int, str]:
        """Format one trimmed, non-blank line.

        Returns:
            (indent level for this line, line content)
        """
        vocab = self._vocabulary
        stack = state.stack
        line_level = state.running

        # Pass A: does the first tag pull this line back to an opener?
        first = next_tag(line)
        if first is not None:
            info = classify(first.text, vocab)
            if info.closes_block:
                entry = stack.find(info.tag_name)
                if entry is not None:
                    line_level = state.running = entry.indent_level
            elif info.opens_block:
                parent_name = vocab.branch_parent(info.tag_name)
                parent = stack.find(parent_name) if parent_name else None
                if parent is not None:
                    line_level = parent.indent_level

        # Pass B: rebuild content and update the stack
        joiner = _ContentJoiner()
        pos = 0
        match = first
        while match is not None:
            joiner.text(line[pos : match.start])
            joiner.tag(match.text)
            pos = match.end

            info = classify(match.text, vocab)
            if info.closes_block:
                if stack.remove(info.tag_name) is not None:
                    state.running = stack.next_level()
            elif info.opens_block:
                parent_name = vocab.branch_parent(info.tag_name)
                if parent_name is None:
                    stack.push(info.tag_name, line_level)
                    state.running = line_level + 1
                else:
                    parent = stack.find(parent_name)
                    if parent is not None:
                        state.running = parent.indent_level + 1

            if (
                info.is_opening
                and not info.is_self_closing
                and info.tag_name in vocab.preserve_whitespace
            ):
                close = find_closing_tag(line, info.tag_name, pos)
                if close < 0:
                    joiner.verbatim(line[pos:])
                    state.raw_tag = info.tag_name
                    pos = len(line)
                    break
                joiner.verbatim(line[pos:close])
                pos = close

            match = next_tag(line, pos)

        joiner.text(line[pos:])
        return line_level, joiner.build()


def format_document(
    text: str,
    options: FormatOptions | Mapping[str, object] | None = None,
    *,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Reformat a whole document.

    Never raises: on any failure (bad options included) the input is
    returned unchanged and the error is logged.

    Args:
        text: Document text
        options: FormatOptions, an editor-style mapping such as
            ``{"indentSize": 2, "insertSpaces": True}``, or None for the
            current context options
        vocabulary: Tag vocabulary (defaults to CFML + HTML)

    Returns:
        Reformatted text

    Example:
        >>> format_document("<div>\\n<p>Hi</p>\\n</div>", {"indentSize": 2})
        '<div>\\n  <p>Hi</p>\\n</div>'

    """
    try:
        formatter = Formatter(options, vocabulary)
    except Exception:
        logger.warning("Invalid formatting options, returning input unchanged", exc_info=True)
        return text
    return formatter.format(text)


def format_range(
    text: str,
    options: FormatOptions | Mapping[str, object] | None = None,
    *,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Reformat a range cut out of a larger document.

    The range is formatted on its own, starting at indent level 0; the
    caller replaces the original range with the result.
    """
    return format_document(text, options, vocabulary=vocabulary)


__all__ = [
    "Formatter",
    "format_document",
    "format_range",
]
