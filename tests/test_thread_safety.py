"""Concurrent formatting tests.

format_document allocates all scan state per call, so many threads can
format different documents, with different options, at the same time.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from cfmlfmt import FormatOptions, Formatter, format_document


def _document(depth: int) -> str:
    opens = [f"<div id='d{i}'>" for i in range(depth)]
    closes = ["</div>"] * depth
    return "\n".join(["<cfoutput>", *opens, "#x#", *closes, "</cfoutput>"])


def _expected(depth: int, unit: str) -> str:
    lines = ["<cfoutput>"]
    lines += [unit * (i + 1) + f"<div id='d{i}'>" for i in range(depth)]
    lines.append(unit * (depth + 1) + "#x#")
    lines += [unit * (i + 1) + "</div>" for i in reversed(range(depth))]
    lines.append("</cfoutput>")
    return "\n".join(lines)


class TestConcurrentFormatting:
    def test_parallel_documents_do_not_interfere(self) -> None:
        cases = [(depth, size) for depth in range(1, 12) for size in (1, 2, 4)]
        errors: list[str] = []

        def run(depth: int, size: int) -> None:
            for _ in range(20):
                result = format_document(_document(depth), FormatOptions(indent_size=size))
                if result != _expected(depth, " " * size):
                    errors.append(f"depth={depth} size={size}")
                    return

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(run, d, s) for d, s in cases]
            for future in as_completed(futures):
                future.result()

        assert errors == []

    def test_shared_formatter_instance(self) -> None:
        formatter = Formatter({"insertSpaces": False})

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda d: (d, formatter.format(_document(d))), range(1, 30)))

        for depth, result in results:
            assert result == _expected(depth, "\t")
