"""Markup attribute extractor.

Scans tag-like syntax (`<div class="..." :foo="..." disabled>`) in HTML,
Vue, Svelte, JSX and similar templates. Works on raw text: tags that do
not match simply produce no records.
"""

from typing import AbstractSet, Iterator

from attributify.patterns import ELEMENT_RE, VALUED_ATTRIBUTE_RE
from attributify.records import AttributeRecord
from attributify.synthesizer import strip_prefix


def iter_attribute_areas(code: str) -> Iterator[str]:
    """Yield the text between each tag name and its closing `>`."""
    for match in ELEMENT_RE.finditer(code):
        yield match.group(1) or ""


def extract_records(
    code: str, ignore_attributes: AbstractSet[str]
) -> Iterator[AttributeRecord]:
    """Yield one record per attribute found in an opening tag.

    Values in double quotes, single quotes and braces are supported.
    Unquoted values (`<a href=foo>`) are not: `href` becomes a valueless
    attribute and `foo` a separate one.
    """
    for area in iter_attribute_areas(code):
        for match in VALUED_ATTRIBUTE_RE.finditer(area):
            name, *contents = match.groups()
            content = "".join(c for c in contents if c)

            if name in ignore_attributes:
                continue

            name = strip_prefix(name)
            if not name or name in ignore_attributes:
                continue

            yield AttributeRecord(name=name, value=content or None)
