"""Selector synthesis.

Turns AttributeRecords into selector strings:

    class="p-2 m-1"           -> "p-2", "m-1"
    data-state="open"         -> '[data-state~="open"]'
    disabled                  -> '[disabled=""]' (and '[disabled="true"]')
    :foo="a ? 'x' : 'y'"      -> '[foo~="x"]', '[foo~="y"]'

Every function here is stateless; the caller collects results into a set.
"""

import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from attributify.constants import (
    CLASS_ATTRIBUTES,
    MACRO_CLASS_ATTRIBUTE,
    STRIPPED_PREFIXES,
)
from attributify.options import ExtractionOptions
from attributify.patterns import SPLITTER_RE, TERNARY_RE
from attributify.records import AttributeRecord

logger = logging.getLogger(__name__)

SelectorPredicate = Callable[[str], bool]

# Word characters plus the punctuation utility classes use
# (`hover:bg-red-500`, `w-1/2`, `p-[3px]`, `!m-0`, `#fff`). Braces, quotes,
# `$`, `<`, `=` and `>` never appear in a usable class token.
_VALID_SELECTOR_RE = re.compile(r"[\w\u00A0-\uFFFF%&()*+,./:;?\[\]!#@~^|-]+")


def is_valid_selector(token: str) -> bool:
    """Default class-token check used when the host supplies none.

    Rejects tokens containing braces, quotes, backticks, `$`, `\\`, `<`,
    `=` or `>`.
    """
    return bool(token) and _VALID_SELECTOR_RE.fullmatch(token) is not None


def strip_prefix(name: str, prefixes: Sequence[str] = STRIPPED_PREFIXES) -> str:
    """Remove the first matching binding prefix (`v-bind:`, `:`) from a name."""
    for prefix in prefixes:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def split_values(value: str) -> List[str]:
    """Split a value on whitespace, quotes, backticks and `;`, dropping empties."""
    return [token for token in SPLITTER_RE.split(value) if token]


def extract_ternary_values(content: str) -> Optional[List[str]]:
    """Tokens of the quoted literals after `?` / `:` in a ternary expression.

    Returns None when the content has no such literal, so the caller can
    fall back to splitting the whole content. An empty list means literals
    were found but all of them were empty.
    """
    literals = [match.group(2) for match in TERNARY_RE.finditer(content)]
    if not literals:
        return None
    return [token for literal in literals for token in split_values(literal)]


def attribute_selector(name: str, token: str) -> str:
    return f'[{name}~="{token}"]'


def presence_selectors(name: str, true_to_non_valued: bool = False) -> List[str]:
    selectors = [f'[{name}=""]']
    if true_to_non_valued:
        selectors.append(f'[{name}="true"]')
    return selectors


def markup_selectors(
    record: AttributeRecord,
    options: ExtractionOptions,
    is_valid: SelectorPredicate = is_valid_selector,
) -> Iterator[str]:
    """Selectors for one attribute found in a markup tag."""
    name = record.name

    if not record.has_value:
        if options.non_valued_attribute and is_valid(name):
            yield from presence_selectors(name, options.true_to_non_valued)
        return

    if name in CLASS_ATTRIBUTES:
        yield from (token for token in split_values(record.value) if is_valid(token))
        return

    if options.prefixed_only and options.prefix and not name.startswith(options.prefix):
        return

    tokens = extract_ternary_values(record.value)
    if tokens is None:
        tokens = split_values(record.value)

    for token in tokens:
        yield attribute_selector(name, token)


def macro_selectors(
    record: AttributeRecord,
    is_valid: SelectorPredicate = is_valid_selector,
    diagnostics: Optional[logging.Logger] = None,
) -> Iterator[str]:
    """Selectors for one attribute found in a macro attribute block.

    Tokens from if/else branches are not passed through `is_valid`.
    """
    name = record.name

    if record.has_value:
        tokens = split_values(record.value)
        if name == MACRO_CLASS_ATTRIBUTE:
            yield from (token for token in tokens if is_valid(token))
        else:
            yield from (attribute_selector(name, token) for token in tokens)
        return

    if record.has_branches:
        tokens = _union(split_values(branch) for branch in record.branch_values)
        if name == MACRO_CLASS_ATTRIBUTE:
            yield from tokens
        else:
            yield from (attribute_selector(name, token) for token in tokens)
        return

    (diagnostics or logger).warning(f"Found an attribute with no value: {name}")


def _union(groups: Iterable[List[str]]) -> List[str]:
    seen: List[str] = []
    for group in groups:
        for token in group:
            if token not in seen:
                seen.append(token)
    return seen
