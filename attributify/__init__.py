"""Attributify: extract attribute selectors from source text."""

from attributify.constants import EXTRACTOR_NAME, Mode
from attributify.errors import AttributifyError, ConfigurationError
from attributify.extractor import AttributifyExtractor, create_extractor, extract
from attributify.options import ExtractionOptions
from attributify.records import AttributeRecord
from attributify.synthesizer import is_valid_selector

__version__ = "0.1.0"

__all__ = [
    "EXTRACTOR_NAME",
    "AttributeRecord",
    "AttributifyError",
    "AttributifyExtractor",
    "ConfigurationError",
    "ExtractionOptions",
    "Mode",
    "create_extractor",
    "extract",
    "is_valid_selector",
]
