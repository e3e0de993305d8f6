"""
cfmlfmt — Indentation formatter for mixed CFML/HTML markup

Re-indents documents that interleave CFML templating tags and HTML tags,
pairing every closing block tag with its own opener by name. Pure
text-in/text-out, zero runtime dependencies.

Quick Start:
    >>> from cfmlfmt import format_document
    >>> print(format_document("<cfif x>\\n<cfset y = 1>\\n<cfelse>\\n<cfset y = 2>\\n</cfif>"))
    <cfif x>
        <cfset y = 1>
    <cfelse>
        <cfset y = 2>
    </cfif>

    >>> # Editor-style options
    >>> format_document("<div>\\n<p>Hi</p>\\n</div>", {"insertSpaces": False})
    '<div>\\n\\t<p>Hi</p>\\n</div>'

Custom Vocabularies:
    >>> from cfmlfmt import DEFAULT_VOCABULARY
    >>> vocab = DEFAULT_VOCABULARY.extend(block_markup=["widget"])
    >>> formatted = format_document(source, vocabulary=vocab)
"""

__version__ = "0.1.0"

from cfmlfmt.classifier import Dialect, TagInfo, classify
from cfmlfmt.config import (
    FormatOptions,
    format_options_context,
    get_format_options,
    reset_format_options,
    set_format_options,
)
from cfmlfmt.errors import CfmlFmtError, ConfigError, VocabularyError
from cfmlfmt.formatter import Formatter, format_document, format_range
from cfmlfmt.scanner import TagMatch, iter_tags, next_tag
from cfmlfmt.snippets import SNIPPETS, Snippet, expand_snippet, find_snippets, get_snippet
from cfmlfmt.stack import IndentStack, OpenTag
from cfmlfmt.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "DEFAULT_VOCABULARY",
    "SNIPPETS",
    "CfmlFmtError",
    "ConfigError",
    "Dialect",
    "FormatOptions",
    "Formatter",
    "IndentStack",
    "OpenTag",
    "Snippet",
    "TagInfo",
    "TagMatch",
    "Vocabulary",
    "VocabularyError",
    "__version__",
    "classify",
    "expand_snippet",
    "find_snippets",
    "format_document",
    "format_options_context",
    "format_range",
    "get_format_options",
    "get_snippet",
    "iter_tags",
    "next_tag",
    "reset_format_options",
    "set_format_options",
]
