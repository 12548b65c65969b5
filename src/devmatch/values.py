"""Coercion of loosely typed profile fields into per-kind comparison values.

Profile data arrives from imports, enrichment services and manual edits, so a
field meant to hold a list may hold a bare string, ``None`` or something else
entirely. The scorer never inspects raw fields; it goes through the helpers
below, which always return a value object. Anything that cannot be read is
the ``ABSENT`` variant of its kind and earns no credit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class SetValue:
    """Ordered collection of strings compared case-insensitively."""

    values: Tuple[str, ...] = ()

    ABSENT: ClassVar["SetValue"]

    @property
    def is_absent(self) -> bool:
        return not self.values

    @property
    def keys(self) -> FrozenSet[str]:
        return frozenset(value.lower() for value in self.values)

    def overlap(self, other: "SetValue") -> Tuple[str, ...]:
        """Return our values that also appear in ``other``, in our order."""
        other_keys = other.keys
        return tuple(value for value in self.values if value.lower() in other_keys)


@dataclass(frozen=True)
class SingleValue:
    value: Optional[str] = None

    ABSENT: ClassVar["SingleValue"]

    @property
    def is_absent(self) -> bool:
        return self.value is None

    def is_in(self, accepted: SetValue) -> bool:
        return self.value is not None and self.value.lower() in accepted.keys


@dataclass(frozen=True)
class NumericValue:
    value: Optional[float] = None

    ABSENT: ClassVar["NumericValue"]

    @property
    def is_absent(self) -> bool:
        return self.value is None


SetValue.ABSENT = SetValue()
SingleValue.ABSENT = SingleValue()
NumericValue.ABSENT = NumericValue()


def _clean(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def as_set_value(raw: Any) -> SetValue:
    if isinstance(raw, str):
        cleaned = _clean(raw)
        return SetValue((cleaned,)) if cleaned else SetValue.ABSENT
    if isinstance(raw, (list, tuple, set, frozenset)):
        seen = set()
        values = []
        for item in raw:
            cleaned = _clean(item)
            if cleaned and cleaned.lower() not in seen:
                values.append(cleaned)
                seen.add(cleaned.lower())
        return SetValue(tuple(values)) if values else SetValue.ABSENT
    return SetValue.ABSENT


def as_single_value(raw: Any) -> SingleValue:
    if isinstance(raw, (list, tuple)):
        # A one-element list is how some imports store an enum column.
        if len(raw) != 1:
            return SingleValue.ABSENT
        raw = raw[0]
    cleaned = _clean(raw)
    return SingleValue(cleaned) if cleaned else SingleValue.ABSENT


def format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)


def as_numeric_value(raw: Any) -> NumericValue:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return NumericValue.ABSENT
    if raw != raw:  # NaN
        return NumericValue.ABSENT
    return NumericValue(raw)


__all__ = [
    "NumericValue",
    "SetValue",
    "SingleValue",
    "as_numeric_value",
    "as_set_value",
    "as_single_value",
    "format_number",
]
