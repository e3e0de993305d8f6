"""Tag vocabularies for classification.

The formatter never hardcodes tag names: everything it knows about a tag
comes from a Vocabulary. The default one covers CFML (``cf``-prefixed
templating tags) and HTML; hosts can extend or replace it with plain data.

Thread Safety:
Vocabulary is frozen and holds only frozensets, so one instance can be
shared by any number of concurrent format calls.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cfmlfmt.errors import VocabularyError

# Tags that never carry a body, whatever their syntax
SELF_CLOSING_TEMPLATING_TAGS = frozenset(
    {
        "cfset",
        "cfparam",
        "cfargument",
        "cfreturn",
        "cfinclude",
        "cflocation",
        "cfabort",
        "cfdump",
        "cfthrow",
        "cfbreak",
        "cfcontinue",
        "cfheader",
        "cfcookie",
        "cfcontent",
        "cfflush",
        "cfimport",
        "cfprocessingdirective",
        "cfqueryparam",
        "cfhttpparam",
        "cfinput",
        "cfselect",
        "cfoption",
    }
)

# HTML void elements
SELF_CLOSING_MARKUP_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

BLOCK_TEMPLATING_TAGS = frozenset(
    {
        "cffunction",
        "cfcomponent",
        "cfif",
        "cfelseif",
        "cfelse",
        "cfloop",
        "cfquery",
        "cftry",
        "cfcatch",
        "cffinally",
        "cfscript",
        "cfoutput",
        "cfmail",
        "cfhttp",
        "cftransaction",
        "cflock",
        "cfthread",
        "cfcase",
        "cfdefaultcase",
        "cfswitch",
        "cfdocument",
        "cfsavecontent",
        "cfsilent",
        "cfform",
        "cfmodule",
        "cfprocparam",
        "cfinvoke",
        "cfobject",
    }
)

# "embed" is a void element and lives only in SELF_CLOSING_MARKUP_TAGS
BLOCK_MARKUP_TAGS = frozenset(
    {
        "html",
        "head",
        "body",
        "title",
        "style",
        "script",
        "div",
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "section",
        "article",
        "header",
        "footer",
        "nav",
        "main",
        "aside",
        "form",
        "fieldset",
        "legend",
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "td",
        "th",
        "caption",
        "colgroup",
        "blockquote",
        "pre",
        "address",
        "figure",
        "figcaption",
        "details",
        "summary",
        "dialog",
        "template",
        "canvas",
        "svg",
        "video",
        "audio",
        "picture",
        "iframe",
        "object",
        "noscript",
        "select",
        "optgroup",
        "option",
        "textarea",
        "button",
        "label",
        "output",
        "progress",
        "meter",
    }
)

INLINE_MARKUP_TAGS = frozenset(
    {
        "a",
        "span",
        "strong",
        "em",
        "b",
        "i",
        "small",
        "sub",
        "sup",
        "code",
        "kbd",
        "samp",
        "var",
        "time",
        "mark",
        "del",
        "ins",
        "abbr",
        "acronym",
        "cite",
        "dfn",
        "q",
        "bdi",
        "bdo",
        "ruby",
        "rt",
        "rp",
        "data",
        "wbr",
    }
)

# Interior content of these is copied verbatim
PRESERVE_WHITESPACE_TAGS = frozenset({"pre", "script", "style", "textarea"})

# Branch tags continue their parent block instead of nesting inside it
BRANCH_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "cfelse": "cfif",
        "cfelseif": "cfif",
    }
)

TEMPLATING_PREFIX = "cf"


def _names(values: Iterable[str]) -> frozenset[str]:
    return frozenset(v.lower() for v in values)


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Immutable set of tag names driving classification.

    Attributes:
        self_closing_templating: Templating tags that never have a body
        self_closing_markup: Markup void elements
        block_templating: Templating tags that open a nesting scope
        block_markup: Markup tags that open a nesting scope
        inline_markup: Markup tags that never affect indentation
        preserve_whitespace: Tags whose interior is passed through verbatim
        branch_tags: Branch tag -> parent block tag (e.g. cfelse -> cfif)
        templating_prefix: Name prefix that marks a templating tag

    """

    self_closing_templating: frozenset[str] = SELF_CLOSING_TEMPLATING_TAGS
    self_closing_markup: frozenset[str] = SELF_CLOSING_MARKUP_TAGS
    block_templating: frozenset[str] = BLOCK_TEMPLATING_TAGS
    block_markup: frozenset[str] = BLOCK_MARKUP_TAGS
    inline_markup: frozenset[str] = INLINE_MARKUP_TAGS
    preserve_whitespace: frozenset[str] = PRESERVE_WHITESPACE_TAGS
    branch_tags: Mapping[str, str] = field(default_factory=lambda: BRANCH_TAGS)
    templating_prefix: str = TEMPLATING_PREFIX

    def __post_init__(self) -> None:
        # Accept any iterable of names but store lowercase frozensets
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name == "branch_tags":
                mapping = {k.lower(): v.lower() for k, v in dict(value).items()}
                object.__setattr__(self, f.name, MappingProxyType(mapping))
            elif f.name == "templating_prefix":
                if isinstance(value, str):
                    object.__setattr__(self, f.name, value.lower())
            else:
                object.__setattr__(self, f.name, _names(value))
        self._validate()

    def _validate(self) -> None:
        overlap = self.block_templating & self.self_closing_templating
        if overlap:
            raise VocabularyError("templating tags both block and self-closing", overlap)
        overlap = self.block_markup & self.self_closing_markup
        if overlap:
            raise VocabularyError("markup tags both block and self-closing", overlap)

        prefix = self.templating_prefix
        if isinstance(prefix, str):
            templating = self.block_templating | self.self_closing_templating
            unprefixed = frozenset(n for n in templating if not n.startswith(prefix))
            if unprefixed:
                raise VocabularyError(
                    f"templating tags missing the '{prefix}' prefix", unprefixed
                )
            markup = self.block_markup | self.self_closing_markup | self.inline_markup
            prefixed = frozenset(n for n in markup if n.startswith(prefix))
            if prefixed:
                raise VocabularyError(
                    f"markup tags carrying the '{prefix}' prefix", prefixed
                )

        for branch, parent in self.branch_tags.items():
            if branch not in self.block_templating or parent not in self.block_templating:
                raise VocabularyError(
                    f"branch tag '{branch}' and parent '{parent}' must be templating block tags"
                )

    def block_set(self, templating: bool) -> frozenset[str]:
        """Block-level names for one dialect."""
        return self.block_templating if templating else self.block_markup

    def is_self_closing(self, name: str) -> bool:
        return name in self.self_closing_templating or name in self.self_closing_markup

    def branch_parent(self, name: str) -> str | None:
        """Parent block a branch tag continues, or None if not a branch tag."""
        return self.branch_tags.get(name)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Vocabulary:
        """Create a Vocabulary from plain data (e.g. parsed JSON or YAML).

        Only keys that are Vocabulary fields are used; unknown keys are
        silently ignored. Missing keys keep their defaults.

        Example:
            >>> vocab = Vocabulary.from_dict({
            ...     "block_templating": ["cfif", "cfloop", "cfelse", "cfelseif"],
            ...     "comment": "ignored",
            ... })
            >>> "cfoutput" in vocab.block_templating
            False

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    def extend(self, **extra: Iterable[str] | Mapping[str, str]) -> Vocabulary:
        """Return a copy with extra names added to the given fields.

        Example:
            >>> vocab = DEFAULT_VOCABULARY.extend(block_markup=["widget"])

        """
        changes: dict[str, object] = {}
        for name, values in extra.items():
            current = getattr(self, name)
            if name == "branch_tags":
                changes[name] = {**current, **dict(values)}  # type: ignore[arg-type]
            else:
                changes[name] = current | _names(values)  # type: ignore[arg-type]
        return dataclasses.replace(self, **changes)


DEFAULT_VOCABULARY: Vocabulary = Vocabulary()


__all__ = [
    "BLOCK_MARKUP_TAGS",
    "BLOCK_TEMPLATING_TAGS",
    "BRANCH_TAGS",
    "DEFAULT_VOCABULARY",
    "INLINE_MARKUP_TAGS",
    "PRESERVE_WHITESPACE_TAGS",
    "SELF_CLOSING_MARKUP_TAGS",
    "SELF_CLOSING_TEMPLATING_TAGS",
    "TEMPLATING_PREFIX",
    "Vocabulary",
]
