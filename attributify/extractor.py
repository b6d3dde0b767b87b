"""Attributify extractor entry point.

`extract()` runs the whole pipeline for one source text:

    text -> mode -> attribute records -> selector strings -> set

`AttributifyExtractor` wraps it in the shape host build pipelines expect:
an object with a `name` and an `extract({"code": ...})` method.
"""

import logging
from typing import Any, Iterator, Mapping, Optional, Set

from attributify.constants import EXTRACTOR_NAME, Mode
from attributify.extractors import macro, markup
from attributify.mode import select_mode
from attributify.options import ExtractionOptions
from attributify.synthesizer import (
    SelectorPredicate,
    is_valid_selector as default_is_valid_selector,
    macro_selectors,
    markup_selectors,
)

logger = logging.getLogger(__name__)


def iter_selectors(
    code: str,
    options: ExtractionOptions,
    is_valid: SelectorPredicate = default_is_valid_selector,
    diagnostics: Optional[logging.Logger] = None,
) -> Iterator[str]:
    """Yield selectors in match order, duplicates included."""
    diagnostics = diagnostics or logger
    mode = select_mode(code, options, diagnostics)

    if mode == Mode.MACRO:
        for record in macro.extract_records(
            code, options.ignore_attributes, options.macro_name
        ):
            yield from macro_selectors(record, is_valid, diagnostics)
    else:
        for record in markup.extract_records(code, options.ignore_attributes):
            yield from markup_selectors(record, options, is_valid)


def extract(
    code: str,
    options: Optional[ExtractionOptions] = None,
    *,
    is_valid_selector: Optional[SelectorPredicate] = None,
    diagnostics: Optional[logging.Logger] = None,
) -> Set[str]:
    """Extract the set of selectors used by a source text.

    Never raises on malformed input; unmatched syntax yields fewer
    selectors.

    Args:
        code: Raw source text.
        options: Extraction options (defaults apply when omitted).
        is_valid_selector: Predicate filtering class tokens.
        diagnostics: Logger receiving mode-detection info and
            no-value warnings. Defaults to this module's logger.

    Returns:
        Set of selector strings.
    """
    return set(
        iter_selectors(
            code,
            options or ExtractionOptions(),
            is_valid_selector or default_is_valid_selector,
            diagnostics,
        )
    )


class AttributifyExtractor:
    """Host-pipeline adapter over `extract()`."""

    name = EXTRACTOR_NAME

    def __init__(
        self,
        options: Optional[ExtractionOptions] = None,
        is_valid_selector: Optional[SelectorPredicate] = None,
        diagnostics: Optional[logging.Logger] = None,
    ):
        self.options = options or ExtractionOptions()
        self.is_valid_selector = is_valid_selector
        self.diagnostics = diagnostics

    def extract(self, context: Mapping[str, Any]) -> Set[str]:
        """Extract selectors from `context["code"]`."""
        return extract(
            context.get("code") or "",
            self.options,
            is_valid_selector=self.is_valid_selector,
            diagnostics=self.diagnostics,
        )

    def __repr__(self) -> str:
        return f"AttributifyExtractor(name={self.name!r}, options={self.options!r})"


def create_extractor(
    options: Optional[ExtractionOptions] = None,
    *,
    is_valid_selector: Optional[SelectorPredicate] = None,
    diagnostics: Optional[logging.Logger] = None,
    **overrides: Any,
) -> AttributifyExtractor:
    """Build an extractor from options and/or option overrides.

    Overrides use the keys `ExtractionOptions.from_dict` accepts
    (snake_case or camelCase), e.g.

        create_extractor(ignoreAttributes=["placeholder", "alt"])
    """
    options = (options or ExtractionOptions()).updated(overrides)
    return AttributifyExtractor(
        options, is_valid_selector=is_valid_selector, diagnostics=diagnostics
    )
