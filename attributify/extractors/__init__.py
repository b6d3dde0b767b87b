"""Attribute extractors.

Each extractor exports `extract_records(code, ignore_attributes, ...)`,
a generator of AttributeRecord. Ignore-listed names are dropped and
binding prefixes stripped before a record is yielded.
"""

from attributify.extractors import macro, markup

__all__ = ["macro", "markup"]
