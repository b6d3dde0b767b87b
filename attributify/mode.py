"""Mode selection: markup scanning or macro scanning."""

import logging
from typing import Optional

from attributify.constants import Mode
from attributify.options import ExtractionOptions
from attributify.patterns import IMPORT_STATEMENT_RE

logger = logging.getLogger(__name__)


def looks_like_macro_source(code: str) -> bool:
    """True if the text has at least one `use ...` import line."""
    return IMPORT_STATEMENT_RE.search(code) is not None


def select_mode(
    code: str,
    options: ExtractionOptions,
    diagnostics: Optional[logging.Logger] = None,
) -> str:
    """Pick the extraction mode for a source text.

    Forced macro parsing wins; otherwise macro mode is only chosen when
    auto-detection is enabled and the import heuristic matches. An
    auto-detected switch is reported on the diagnostics sink.

    Returns:
        Mode.MACRO or Mode.MARKUP
    """
    if options.macro_parsing:
        return Mode.MACRO

    if options.detect_embedded_macro and looks_like_macro_source(code):
        (diagnostics or logger).info(
            f"Detected embedded {options.macro_name}! source, using macro parsing"
        )
        return Mode.MACRO

    return Mode.MARKUP
