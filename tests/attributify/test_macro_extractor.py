"""Tests for the macro attribute extractor."""

from attributify.constants import DEFAULT_IGNORE_ATTRIBUTES
from attributify.extractors.macro import (
    extract_records,
    iter_attribute_blocks,
    iter_invocation_bodies,
)
from attributify.records import AttributeRecord

APP = '''
use dioxus::prelude::*;

fn app(cx: Scope) -> Element {
    cx.render(rsx!(
        div {
            "class": "flex p-2",
            "data-state": if open { "open" } else { "closed" },
            "placeholder": "ignored",
            "Hello"
        }
    ))
}
'''


def records(code, ignore=DEFAULT_IGNORE_ATTRIBUTES, macro_name="rsx"):
    return list(extract_records(code, ignore, macro_name))


class TestInvocationBodies:

    def test_body_found(self):
        bodies = list(iter_invocation_bodies(APP))
        assert len(bodies) == 1
        assert '"class": "flex p-2",' in bodies[0]

    def test_no_macro(self):
        assert list(iter_invocation_bodies('div { "class": "a", }')) == []


class TestAttributeBlocks:

    def test_block_stops_before_text_content(self):
        body = next(iter_invocation_bodies(APP))
        blocks = list(iter_attribute_blocks(body))
        assert '"Hello"' not in blocks[0]
        assert '"placeholder": "ignored",' in blocks[0]

    def test_nested_element_gets_own_block(self):
        body = 'div { "class": "a", span { "class": "b", } '
        blocks = [b for b in iter_attribute_blocks(body) if b]
        assert blocks == ['"class": "a", ', '"class": "b", ']


class TestExtractRecords:
    """Records from macro attribute blocks."""

    def test_literal_and_branch_values(self):
        assert records(APP) == [
            AttributeRecord(name="class", value="flex p-2"),
            AttributeRecord(name="data-state", branch_values=("open", "closed")),
        ]

    def test_empty_branches_have_no_value(self):
        code = 'rsx!( div { "class": if on { "" } else { "" }, } )'
        assert records(code) == [AttributeRecord(name="class")]

    def test_one_empty_branch_kept(self):
        code = 'rsx!( div { "class": if on { "flex" } else { "" }, } )'
        assert records(code) == [
            AttributeRecord(name="class", branch_values=("flex", "")),
        ]

    def test_prefix_stripped(self):
        code = 'rsx!( div { ":foo": "bar", } )'
        assert records(code) == [AttributeRecord(name="foo", value="bar")]

    def test_custom_macro_name(self):
        code = 'html!( div { "class": "a", } )'
        assert records(code, macro_name="html") == [AttributeRecord(name="class", value="a")]
        assert records(code) == []

    def test_format_string_skipped(self):
        code = 'rsx!( div { "class": "{dynamic}", } )'
        assert records(code) == []

    def test_missing_trailing_comma_skipped(self):
        """The last attribute needs a comma to be part of the block."""
        code = 'rsx!( div { "class": "a", "id": "b" } )'
        assert records(code) == [AttributeRecord(name="class", value="a")]
