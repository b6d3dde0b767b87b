"""Pattern library for attribute extraction.

Every stage of the pipeline is a regular expression applied to the
output of the previous one:

    markup: ELEMENT_RE -> VALUED_ATTRIBUTE_RE -> TERNARY_RE
    macro:  macro_invocation_pattern() -> MACRO_ATTRIBUTE_BLOCK_RE
            -> MACRO_ATTRIBUTE_RE

All patterns are compiled once at import time and hold no state, so they
are safe to share between concurrent extraction calls.
"""

import re
from functools import lru_cache

# Characters allowed in an attribute name. Includes the `%-.` range
# (% & ' ( ) * + , - .) so names like `!p-2` or `gap-1.5` survive.
_ATTRIBUTE_NAME = r"[a-zA-Z0-9\u00A0-\uFFFF\-_:!%-.]+"

# Separators used to split a value into selector tokens.
SPLITTER_RE = re.compile(r"[\s'\"`;]+")

# An opening tag: `<` + tag name + whitespace, then the attribute area up
# to the closing `>`. Quoted and braced spans are consumed whole so a `>`
# inside them does not end the tag. A quote or brace with no closing
# partner later in the text is a plain character. Each character can match
# only one alternative, so a failed search stays polynomial.
ELEMENT_RE = re.compile(
    r"<\w(?=.*>)[\w:.$-]*\s("
    r"(?:\"[^\"]*\"|\"(?![^\"]*\")"
    r"|'[^']*'|'(?![^']*')"
    r"|`[^`]*`|`(?![^`]*`)"
    r"|\{[^}]*\}|\{(?![^}]*\})"
    r"|[^>\"'`{])*?"
    r")>",
    re.DOTALL,
)

# A single attribute inside an attribute area: a bare name, or a name with
# a double-quoted, single-quoted or braced value (groups 2, 3 and 4).
# Names may not start with a digit, `--` or `-<digit>`.
VALUED_ATTRIBUTE_RE = re.compile(
    r"([?]|(?!\d|-{2}|-\d)" + _ATTRIBUTE_NAME + r")"
    r"=?(?:\"([^\"]*)\"|'([^']*)'|\{([^}]*)\})?",
    re.MULTILINE | re.DOTALL,
)

# Quoted literals that follow `?` or `:` in a ternary expression, e.g.
# `active ? 'bg-red' : 'bg-blue'`. Group 2 is the literal.
TERNARY_RE = re.compile(r"(?:[?:].*?)([\"'])(.*?)\1", re.DOTALL)

# A module import line (`use std::fmt;`, `use crate::*;`). Only used as a
# hint that the source may embed UI macros.
IMPORT_STATEMENT_RE = re.compile(
    r"^use (?:(?:[A-Za-z_][A-Za-z0-9_]*|\*)(?:::|;$))*",
    re.MULTILINE,
)

# A brace-delimited block of `"key": value,` pairs. Values are a quoted
# literal or an if/else expression with two quoted branches. Text content
# and nested elements must come after the attributes of a block.
MACRO_ATTRIBUTE_BLOCK_RE = re.compile(
    r"\w*\s?\{\s*("
    r"(?:\"?[^\"]*\"?:\s?"
    r"(?:\"[^\"]+\"|if [^ {]+ \{ \"\w*\" \} else \{ \"\w*\" \})*"
    r",\s*)*)",
    re.MULTILINE,
)

# One `"key": value` pair inside an attribute block. Group 2 is a literal
# value (format strings starting with `{` are skipped); groups 3 and 4 are
# the branches of an if/else value.
MACRO_ATTRIBUTE_RE = re.compile(
    r"\"(" + _ATTRIBUTE_NAME + r")\":\s?"
    r"(?:\"(?!\{)([^\"]*)\""
    r"|if [^ {]*\s?\{\s\"([^\"]*)\"\s?\}\s?else\s?\{\s?\"([^\"]*)\"\s?\})",
    re.MULTILINE,
)


@lru_cache(maxsize=None)
def macro_invocation_pattern(macro_name: str) -> "re.Pattern[str]":
    """Pattern for the body of `<macro_name>!( ... })` invocations.

    The body is matched greedily up to the last `}` followed by `)`; braces
    are not balanced, so several invocations in one file collapse into a
    single span and brace-like text inside string literals can shift the
    end of the span.
    """
    return re.compile(re.escape(macro_name) + r"!\((.*)\}\s*\)", re.DOTALL)
