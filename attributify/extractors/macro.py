"""Macro attribute extractor.

Scans UI macro invocations embedded in source code, e.g.

    rsx!(
        div {
            "class": if active { "flex" } else { "hidden" },
            "data-state": "open",
            "Hello"
        }
    )

Known limitations of the pattern-based approach:
- Invocation bodies are not brace-balanced (see patterns.macro_invocation_pattern).
- Each attribute must be followed by a comma, and attributes must come
  before text content and nested elements of the same block.
"""

from typing import AbstractSet, Iterator

from attributify.constants import DEFAULT_MACRO_NAME
from attributify.patterns import (
    MACRO_ATTRIBUTE_BLOCK_RE,
    MACRO_ATTRIBUTE_RE,
    macro_invocation_pattern,
)
from attributify.records import AttributeRecord
from attributify.synthesizer import strip_prefix


def iter_invocation_bodies(code: str, macro_name: str = DEFAULT_MACRO_NAME) -> Iterator[str]:
    """Yield the body of every `<macro_name>!( ... )` span."""
    for match in macro_invocation_pattern(macro_name).finditer(code):
        yield match.group(1) or ""


def iter_attribute_blocks(body: str) -> Iterator[str]:
    """Yield the `"key": value,` sequences of each brace-delimited block."""
    for match in MACRO_ATTRIBUTE_BLOCK_RE.finditer(body):
        yield match.group(1) or ""


def extract_records(
    code: str,
    ignore_attributes: AbstractSet[str],
    macro_name: str = DEFAULT_MACRO_NAME,
) -> Iterator[AttributeRecord]:
    """Yield one record per `"key": value` pair in macro attribute blocks.

    A literal value becomes `value`; an if/else value becomes
    `branch_values` when at least one branch is non-empty. Anything else
    yields a record with neither, which the synthesizer reports.
    """
    for body in iter_invocation_bodies(code, macro_name):
        for block in iter_attribute_blocks(body):
            for match in MACRO_ATTRIBUTE_RE.finditer(block):
                name, value, first_branch, second_branch = match.groups()

                if name in ignore_attributes:
                    continue

                name = strip_prefix(name)
                if not name or name in ignore_attributes:
                    continue

                if value:
                    yield AttributeRecord(name=name, value=value)
                elif first_branch or second_branch:
                    yield AttributeRecord(
                        name=name,
                        branch_values=(first_branch or "", second_branch or ""),
                    )
                else:
                    yield AttributeRecord(name=name)
