"""Attributify Constants

Centralized constants for the extractor name, attribute handling and modes.
"""

# Name the extractor registers under in the host pipeline.
EXTRACTOR_NAME = "attributify"

# Project-level config directory: project_path / CONFIG_DIR / CONFIG_FILE
CONFIG_DIR = ".attributify"
CONFIG_FILE = "attributify.yaml"

DEFAULT_IGNORE_ATTRIBUTES = frozenset({"placeholder"})
DEFAULT_PREFIX = "un-"
DEFAULT_MACRO_NAME = "rsx"

# Checked in order, first match wins.
STRIPPED_PREFIXES = ("v-bind:", ":")

# Markup attribute names whose values are class lists.
CLASS_ATTRIBUTES = frozenset({"class", "className"})

# Macro blocks only know the plain name.
MACRO_CLASS_ATTRIBUTE = "class"


class Mode:
    """Extraction mode constants."""

    MARKUP = "markup"
    MACRO = "macro"

    ALL = [MARKUP, MACRO]
