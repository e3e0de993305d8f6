"""Command line interface.

Formats files in place (or stdin to stdout), optionally only a range of
lines, and lists the snippet catalog.

Usage:
    cfmlfmt page.cfm                   # rewrite page.cfm in place
    cfmlfmt --check src/*.cfm          # exit 1 if anything would change
    cfmlfmt --lines 10:42 page.cfm     # reformat lines 10..42 only
    cat page.cfm | cfmlfmt --tabs -    # stdin -> stdout
    cfmlfmt --snippets cf              # list snippets triggered by "cf..."
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cfmlfmt import __version__
from cfmlfmt.config import DEFAULT_INDENT_SIZE, FormatOptions
from cfmlfmt.errors import CfmlFmtError
from cfmlfmt.formatter import Formatter
from cfmlfmt.snippets import find_snippets
from cfmlfmt.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_line_range(value: str) -> tuple[int, int]:
    start_s, sep, end_s = value.partition(":")
    try:
        start = int(start_s)
        end = int(end_s) if sep else start
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START:END, got {value!r}") from None
    if start < 1 or end < start:
        raise argparse.ArgumentTypeError(f"invalid line range {value!r}")
    return start, end


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfmlfmt",
        description="Re-indent mixed CFML/HTML markup.",
    )
    parser.add_argument("paths", nargs="*", help="files to format ('-' or none for stdin)")
    parser.add_argument(
        "--indent-size",
        type=int,
        default=DEFAULT_INDENT_SIZE,
        help="spaces per indent level (default: %(default)s)",
    )
    parser.add_argument("--tabs", action="store_true", help="indent with tabs")
    parser.add_argument(
        "--check",
        action="store_true",
        help="do not write; exit 1 if any file would change",
    )
    parser.add_argument(
        "--lines",
        type=_parse_line_range,
        metavar="START:END",
        help="only format this 1-based, inclusive line range",
    )
    parser.add_argument(
        "--snippets",
        nargs="?",
        const="",
        metavar="PREFIX",
        help="list snippets whose trigger starts with PREFIX and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_lines(formatter: Formatter, text: str, start: int, end: int) -> str:
    """Reformat lines start..end (1-based, inclusive) of text in place."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    # The empty piece after a final newline is not a line
    if text.endswith(("\n", "\r")):
        end = min(end, len(lines) - 1)
    head = lines[: start - 1]
    body = lines[start - 1 : end]
    tail = lines[end:]
    if not body:
        return text
    formatted = formatter.format("\n".join(body))
    replacement = formatted.split("\n") if formatted else []
    return "\n".join(head + replacement + tail)


def _format_text(formatter: Formatter, text: str, line_range: tuple[int, int] | None) -> str:
    if line_range is not None:
        return format_lines(formatter, text, *line_range)
    result = formatter.format(text)
    # Files keep their final newline
    if result and text.endswith(("\n", "\r")) and not result.endswith("\n"):
        result += "\n"
    return result


def _list_snippets(prefix: str) -> int:
    matches = find_snippets(prefix)
    for snippet in matches:
        print(f"{snippet.filter_text:<28} {snippet.label}")
    return 0 if matches else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface; returns the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.snippets is not None:
        return _list_snippets(args.snippets)

    try:
        formatter = Formatter(FormatOptions(indent_size=args.indent_size, insert_spaces=not args.tabs))
    except CfmlFmtError as e:
        print(f"cfmlfmt: {e}", file=sys.stderr)
        return 2

    paths = args.paths or ["-"]
    changed: list[str] = []
    status = 0

    for name in paths:
        if name == "-":
            source = sys.stdin.read()
            result = _format_text(formatter, source, args.lines)
            if args.check:
                if result != source:
                    changed.append("<stdin>")
            else:
                sys.stdout.write(result)
            continue

        path = Path(name)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"cfmlfmt: cannot read {name}: {e}", file=sys.stderr)
            status = 2
            continue

        result = _format_text(formatter, source, args.lines)
        if result == source:
            logger.debug("%s unchanged", name)
            continue
        changed.append(name)
        if not args.check:
            path.write_text(result, encoding="utf-8")
            logger.info("Reformatted %s", name)

    if args.check:
        for name in changed:
            print(f"would reformat {name}")
        if changed and status == 0:
            status = 1
    return status


__all__ = [
    "build_parser",
    "format_lines",
    "main",
]
