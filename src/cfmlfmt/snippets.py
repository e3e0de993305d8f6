"""Static CFML/HTML snippet catalog.

Each Snippet maps one or more trigger strings to a template body using
``$1``..``$9`` tab-stop placeholders and ``$0`` for the final cursor
position, the syntax editors expect for snippet completion.

Example:
    >>> from cfmlfmt.snippets import get_snippet, expand_snippet
    >>> expand_snippet(get_snippet("cfset"), {1: "total", 2: "0"})
    '<cfset total = 0>'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

_PLACEHOLDER = re.compile(r"\$(\d)")


@dataclass(frozen=True, slots=True)
class Snippet:
    """One catalog entry.

    Attributes:
        prefixes: Trigger strings, first one is the canonical trigger
        label: Short title shown in completion lists
        body: Template text with $N placeholders
        documentation: One-line description

    """

    prefixes: tuple[str, ...]
    label: str
    body: str
    documentation: str

    @property
    def filter_text(self) -> str:
        """Space-joined triggers, for completion filtering."""
        return " ".join(self.prefixes)

    @property
    def placeholders(self) -> tuple[int, ...]:
        """Distinct placeholder numbers in order of first appearance."""
        seen: dict[int, None] = {}
        for m in _PLACEHOLDER.finditer(self.body):
            seen.setdefault(int(m.group(1)), None)
        return tuple(seen)


def _lines(*lines: str) -> str:
    return "\n".join(lines)


SNIPPETS: tuple[Snippet, ...] = (
    # Components and functions
    Snippet(
        ("cfcomp", "cfcomponent"),
        "cfcomponent - Create CFML Component",
        _lines(
            '<cfcomponent displayname="$1" hint="$2">',
            "",
            '    <cffunction name="$3" access="public" returntype="$4" hint="$5">',
            '        <cfargument name="$6" type="$7" required="$8" hint="$9">',
            "        ",
            "        $0",
            "        ",
            "        <cfreturn>",
            "    </cffunction>",
            "",
            "</cfcomponent>",
        ),
        "Creates a basic CFML component structure",
    ),
    Snippet(
        ("cffunction", "cffunc"),
        "cffunction - Create CFML Function",
        _lines(
            '<cffunction name="$1" access="$2" returntype="$3" hint="$4">',
            '    <cfargument name="$5" type="$6" required="$7" hint="$8">',
            "    ",
            "    $0",
            "    ",
            "    <cfreturn>",
            "</cffunction>",
        ),
        "Creates a CFML function with arguments",
    ),
    # Queries
    Snippet(
        ("cfquery", "cfq"),
        "cfquery - Database Query",
        _lines('<cfquery name="$1" datasource="$2">', "    $0", "</cfquery>"),
        "Creates a basic CFML database query",
    ),
    Snippet(
        ("cfqueryparams", "cfqp"),
        "cfquery - Query with Parameters",
        _lines(
            '<cfquery name="$1" datasource="$2">',
            "    SELECT $3",
            "    FROM $4",
            '    WHERE $5 = <cfqueryparam value="#$6#" cfsqltype="$7">',
            "</cfquery>",
        ),
        "Creates a parameterized CFML query for security",
    ),
    # Loops and flow control
    Snippet(
        ("cfloop", "cfl"),
        "cfloop - Basic Loop",
        _lines("<cfloop $1>", "    $0", "</cfloop>"),
        "Creates a basic CFML loop",
    ),
    Snippet(
        ("cfloopquery", "cflq"),
        "cfloop - Query Loop",
        _lines('<cfloop query="$1">', "    $0", "</cfloop>"),
        "Creates a CFML query loop",
    ),
    Snippet(
        ("cfif",),
        "cfif - Conditional Statement",
        _lines(
            "<cfif $1>",
            "    $2",
            "<cfelseif $3>",
            "    $4",
            "<cfelse>",
            "    $0",
            "</cfif>",
        ),
        "Creates a complete CFML conditional statement",
    ),
    Snippet(
        ("cftry", "cftrycatch"),
        "cftry - Error Handling",
        _lines(
            "<cftry>",
            "    $1",
            '<cfcatch type="$2">',
            '    <cfdump var="#cfcatch#">',
            "    $0",
            "</cfcatch>",
            "</cftry>",
        ),
        "Creates CFML error handling block",
    ),
    Snippet(
        ("cfscript", "cfs"),
        "cfscript - Script Block",
        _lines("<cfscript>", "    $0", "</cfscript>"),
        "Creates a CFML script block",
    ),
    Snippet(
        ("cfoutput", "cfo"),
        "cfoutput - Output Block",
        _lines("<cfoutput$1>", "    $0", "</cfoutput>"),
        "Creates a CFML output block",
    ),
    # Page layouts
    Snippet(
        ("html5", "htmlboilerplate"),
        "HTML5 - Complete Boilerplate",
        _lines(
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '    <meta charset="UTF-8">',
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            "    <title>$1</title>",
            '    <link rel="stylesheet" href="$2">',
            "</head>",
            "<body>",
            "    $0",
            '    <script src="$3"></script>',
            "</body>",
            "</html>",
        ),
        "Creates a complete HTML5 boilerplate",
    ),
    Snippet(
        ("bootstrap", "bs"),
        "Bootstrap - Container Layout",
        _lines(
            '<div class="container">',
            '    <div class="row">',
            '        <div class="col-md-$1">',
            "            $0",
            "        </div>",
            "    </div>",
            "</div>",
        ),
        "Creates Bootstrap responsive layout",
    ),
    # One-liners
    Snippet(
        ("cfparam",),
        "cfparam - Parameter Definition",
        '<cfparam name="$1" default="$2" type="$3">',
        "Creates a CFML parameter with default value",
    ),
    Snippet(
        ("cfset",),
        "cfset - Variable Assignment",
        "<cfset $1 = $2>",
        "Sets a CFML variable",
    ),
    Snippet(
        ("cfinclude",),
        "cfinclude - Include Template",
        '<cfinclude template="$1">',
        "Includes another CFML template",
    ),
    Snippet(
        ("cflocation",),
        "cflocation - Redirect",
        '<cflocation url="$1" addtoken="$2">',
        "Redirects to another page",
    ),
    Snippet(
        ("cfdump",),
        "cfdump - Debug Output",
        '<cfdump var="#$1#" label="$2">',
        "Outputs variable contents for debugging",
    ),
    Snippet(
        ("cfabort",),
        "cfabort - Stop Processing",
        '<cfabort showError="$1">',
        "Stops page processing",
    ),
    # HTML structures
    Snippet(
        ("form",),
        "HTML - Form Element",
        _lines(
            '<form action="$1" method="$2">',
            '    <div class="form-group">',
            '        <label for="$3">$4</label>',
            '        <input type="$5" id="$3" name="$3" class="form-control" required>',
            "    </div>",
            '    <button type="submit" class="btn btn-primary">$6</button>',
            "</form>",
        ),
        "Creates an HTML form with Bootstrap styling",
    ),
    Snippet(
        ("table",),
        "HTML - Table Structure",
        _lines(
            '<table class="table table-striped">',
            "    <thead>",
            "        <tr>",
            "            <th>$1</th>",
            "            <th>$2</th>",
            "        </tr>",
            "    </thead>",
            "    <tbody>",
            "        <tr>",
            "            <td>$3</td>",
            "            <td>$4</td>",
            "        </tr>",
            "    </tbody>",
            "</table>",
        ),
        "Creates an HTML table with Bootstrap styling",
    ),
)


def find_snippets(text: str) -> list[Snippet]:
    """Snippets with a trigger starting with text (case-insensitive).

    An empty text matches the whole catalog. Results keep catalog order.
    """
    needle = text.lower()
    return [s for s in SNIPPETS if any(p.startswith(needle) for p in s.prefixes)]


def get_snippet(trigger: str) -> Snippet | None:
    """Snippet whose trigger is exactly trigger, or None."""
    needle = trigger.lower()
    for snippet in SNIPPETS:
        if needle in snippet.prefixes:
            return snippet
    return None


def expand_snippet(snippet: Snippet, values: Mapping[int, str] | None = None) -> str:
    """Fill in $N placeholders; unfilled ones become empty strings."""
    values = values or {}
    return _PLACEHOLDER.sub(lambda m: values.get(int(m.group(1)), ""), snippet.body)


__all__ = [
    "SNIPPETS",
    "Snippet",
    "expand_snippet",
    "find_snippets",
    "get_snippet",
]
