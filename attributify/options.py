"""Extraction options.

ExtractionOptions is immutable and supplied per extraction call. It can be
built directly or from a config dict (see config_loader), where both
snake_case field names and the camelCase names used by host build tools
are accepted.
"""

from collections.abc import Iterable
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, FrozenSet, Mapping

from attributify.constants import (
    DEFAULT_IGNORE_ATTRIBUTES,
    DEFAULT_MACRO_NAME,
    DEFAULT_PREFIX,
)
from attributify.errors import ConfigurationError

_ALIASES = {
    "ignoreAttributes": "ignore_attributes",
    "nonValuedAttribute": "non_valued_attribute",
    "trueToNonValued": "true_to_non_valued",
    "macroParsing": "macro_parsing",
    "rsxParsing": "macro_parsing",
    "detectEmbeddedMacro": "detect_embedded_macro",
    "detectRust": "detect_embedded_macro",
    "prefixedOnly": "prefixed_only",
    "macroName": "macro_name",
}

_BOOL_FIELDS = (
    "non_valued_attribute",
    "true_to_non_valued",
    "macro_parsing",
    "detect_embedded_macro",
    "prefixed_only",
)


@dataclass(frozen=True)
class ExtractionOptions:
    """Options controlling attribute extraction.

    Attributes:
        ignore_attributes: Attribute names that never produce selectors.
        non_valued_attribute: Emit `[name=""]` for attributes without a value.
        true_to_non_valued: Also emit `[name="true"]` for such attributes.
        macro_parsing: Always use macro mode.
        detect_embedded_macro: Switch to macro mode when the source looks
            like it embeds UI macros (has `use ...;` import lines).
        prefixed_only: Only keep non-class attributes starting with `prefix`.
        prefix: Attribute prefix used by `prefixed_only`.
        macro_name: Macro scanned in macro mode, e.g. `rsx` for `rsx!(...)`.
    """

    ignore_attributes: FrozenSet[str] = DEFAULT_IGNORE_ATTRIBUTES
    non_valued_attribute: bool = True
    true_to_non_valued: bool = False
    macro_parsing: bool = False
    detect_embedded_macro: bool = False
    prefixed_only: bool = False
    prefix: str = DEFAULT_PREFIX
    macro_name: str = DEFAULT_MACRO_NAME

    def __post_init__(self):
        # Accept any iterable of names but store a frozenset
        object.__setattr__(
            self, "ignore_attributes", _to_name_set(self.ignore_attributes)
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtractionOptions":
        """Build options from a config mapping.

        Unknown keys are ignored so the same YAML file can carry other
        sections (e.g. `logging`).

        Raises:
            ConfigurationError: If a known key has a value of the wrong type.
        """
        return cls(**_normalize(data))

    def updated(self, data: Mapping[str, Any]) -> "ExtractionOptions":
        """Return a copy with the fields named in `data` replaced.

        Accepts the same keys as `from_dict`; None values are skipped.
        """
        return replace(self, **_normalize(data))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["ignore_attributes"] = sorted(self.ignore_attributes)
        return data


def _normalize(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Map config keys to field names and validate their types."""
    known = {f.name for f in fields(ExtractionOptions)}
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in known or value is None:
            continue
        kwargs[name] = value

    for name in _BOOL_FIELDS:
        if name in kwargs and not isinstance(kwargs[name], bool):
            raise ConfigurationError(
                f"{name} must be a boolean, got {kwargs[name]!r}", field=name
            )

    for name in ("prefix", "macro_name"):
        if name in kwargs and not isinstance(kwargs[name], str):
            raise ConfigurationError(
                f"{name} must be a string, got {kwargs[name]!r}", field=name
            )

    if "macro_name" in kwargs and not kwargs["macro_name"]:
        raise ConfigurationError("macro_name must not be empty", field="macro_name")

    if "ignore_attributes" in kwargs:
        kwargs["ignore_attributes"] = _to_name_set(kwargs["ignore_attributes"])

    return kwargs


def _to_name_set(value: Any) -> FrozenSet[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"ignore_attributes must be a list of strings, got {value!r}",
            field="ignore_attributes",
        )
    names = list(value)
    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(
                f"ignore_attributes entries must be strings, got {name!r}",
                field="ignore_attributes",
            )
    return frozenset(names)
