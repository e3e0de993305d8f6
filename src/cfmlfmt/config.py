"""ContextVar-based formatting options for cfmlfmt.

FormatOptions holds what an editor passes along with a formatting request:
the indent size and whether to indent with spaces or tabs. Explicit options
always win; when a call passes none, the options of the current context are
used.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and one thread's defaults never leak into another's.

Usage:
    # Explicit options
    format_document(text, FormatOptions(indent_size=2))

    # Editor-style mapping
    format_document(text, {"indentSize": 2, "insertSpaces": False})

    # Temporary context default
    with format_options_context(FormatOptions(insert_spaces=False)):
        format_document(text)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from cfmlfmt.errors import ConfigError

DEFAULT_INDENT_SIZE = 4

# Editor (camelCase) option names -> FormatOptions field names
_OPTION_ALIASES = {
    "indentSize": "indent_size",
    "insertSpaces": "insert_spaces",
}


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable formatting options.

    Attributes:
        indent_size: Spaces per indent level (ignored when insert_spaces is False)
        insert_spaces: Indent with spaces; False selects a single tab per level

    """

    indent_size: int = DEFAULT_INDENT_SIZE
    insert_spaces: bool = True

    def __post_init__(self) -> None:
        # Tabs never read indent_size
        if not self.insert_spaces:
            return
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ConfigError("indent_size", self.indent_size, "must be an integer")
        if self.indent_size < 1:
            raise ConfigError("indent_size", self.indent_size, "must be positive")

    @property
    def indent_unit(self) -> str:
        """String emitted once per indent level."""
        return " " * self.indent_size if self.insert_spaces else "\t"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> "FormatOptions":
        """Create FormatOptions from a dictionary.

        Accepts both field names and the camelCase names editors send
        (``indentSize``, ``insertSpaces``). Unknown keys are silently
        ignored. A missing, None or zero indent size falls back to the
        default, and insert_spaces is only False when given as False.

        Example:
            >>> FormatOptions.from_dict({"indentSize": 2, "tabSize": 8})
            FormatOptions(indent_size=2, insert_spaces=True)

        """
        values: dict[str, object] = {}
        for key, value in config_dict.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in ("indent_size", "insert_spaces"):
                values[name] = value

        indent_size = values.get("indent_size") or DEFAULT_INDENT_SIZE
        insert_spaces = values.get("insert_spaces") is not False
        return cls(indent_size=indent_size, insert_spaces=insert_spaces)  # type: ignore[arg-type]

    @classmethod
    def coerce(cls, options: "FormatOptions | Mapping[str, object] | None") -> "FormatOptions":
        """Normalize whatever a caller passed into FormatOptions."""
        if options is None:
            return get_format_options()
        if isinstance(options, FormatOptions):
            return options
        return cls.from_dict(options)


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: FormatOptions = FormatOptions()

_format_options: ContextVar[FormatOptions] = ContextVar(
    "format_options",
    default=_DEFAULT_OPTIONS,
)


def get_format_options() -> FormatOptions:
    """Get the formatting options of the current context."""
    return _format_options.get()


def set_format_options(options: FormatOptions) -> None:
    """Set formatting options for the current context.

    Args:
        options: FormatOptions used by calls that pass no explicit options.

    """
    _format_options.set(options)


def reset_format_options() -> None:
    """Reset the current context to the default options."""
    _format_options.set(_DEFAULT_OPTIONS)


@contextmanager
def format_options_context(options: FormatOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Example:
        >>> with format_options_context(FormatOptions(indent_size=2)):
        ...     get_format_options().indent_size
        2
        >>> get_format_options().indent_size
        4

    Thread Safety:
        Only affects the current context. Restores the previous options
        even if an exception is raised.

    """
    previous = _format_options.get()
    _format_options.set(options)
    try:
        yield
    finally:
        _format_options.set(previous)


__all__ = [
    "DEFAULT_INDENT_SIZE",
    "FormatOptions",
    "format_options_context",
    "get_format_options",
    "reset_format_options",
    "set_format_options",
]
