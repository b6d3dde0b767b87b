"""Attribute records passed from the extractors to the synthesizer."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AttributeRecord:
    """One matched attribute occurrence.

    At most one of `value` and `branch_values` is set. A record with
    neither is a valueless attribute (`<input disabled>`), or in macro
    mode an attribute whose value could not be resolved.
    """

    name: str
    value: Optional[str] = None
    branch_values: Optional[Tuple[str, str]] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("AttributeRecord name must not be empty")
        if self.value is not None and self.branch_values is not None:
            raise ValueError(
                f"AttributeRecord {self.name!r} cannot have both a value and branch values"
            )

    @property
    def has_value(self) -> bool:
        return bool(self.value)

    @property
    def has_branches(self) -> bool:
        return self.branch_values is not None
