"""Exception classes for cfmlfmt.

The formatting entry points never raise these to their callers; they are
raised when a vocabulary or option set is built from bad data, and surface
through the command line interface.
"""

from __future__ import annotations


class CfmlFmtError(Exception):
    """Base exception for all cfmlfmt errors."""

    pass


class VocabularyError(CfmlFmtError):
    """Tag vocabulary data violates a classification invariant.

    Raised when a vocabulary is constructed, e.g. a name listed as both
    block-level and self-closing, or a templating name without the
    templating prefix.
    """

    def __init__(self, message: str, names: frozenset[str] | None = None) -> None:
        """Initialize vocabulary error.

        Args:
            message: Description of the violated rule
            names: Offending tag names (optional)
        """
        self.names = names or frozenset()
        if self.names:
            message = f"{message}: {', '.join(sorted(self.names))}"
        super().__init__(message)


class ConfigError(CfmlFmtError):
    """Invalid formatting options.

    Raised when FormatOptions receives a value it cannot use.
    """

    def __init__(self, option: str, value: object, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "indent_size")
            value: The rejected value
            message: Description of the problem
        """
        self.option = option
        self.value = value
        super().__init__(f"Option '{option}' = {value!r}: {message}")
