"""Lenient field access for loosely-typed catalog records.

Archive rows arrive with either lower- or upper-case column names depending on
the source, and values may be numbers, numeric strings, nulls, or placeholders
such as "N/A". Every lookup goes through RecordFields so that the fallback
rules live in one place.
"""

import math
from typing import Any

from goldilocks.models import RawRecord


def to_finite_float(value: Any) -> float | None:
    """Coerce value to a finite float, or None if that is not possible."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


class RecordFields:
    """Typed read-only view over a RawRecord."""

    def __init__(self, record: RawRecord):
        self._record = record

    def _candidates(self, key: str) -> list[Any]:
        keys = [key] if key == key.upper() else [key, key.upper()]
        return [self._record.get(k) for k in keys]

    def raw(self, key: str) -> Any:
        """First non-null value for key, trying the key verbatim then upper-cased."""
        for value in self._candidates(key):
            if value is not None:
                return value
        return None

    def number(self, key: str) -> float | None:
        """First candidate that coerces to a finite float. Non-numeric counts as absent."""
        for value in self._candidates(key):
            number = to_finite_float(value)
            if number is not None:
                return number
        return None

    def number_or(self, key: str, fallback: float) -> float:
        number = self.number(key)
        return fallback if number is None else number

    def has_number(self, key: str) -> bool:
        return self.number(key) is not None

    def text(self, key: str, fallback: str) -> str:
        value = self.raw(key)
        if value is None:
            return fallback
        return str(value).strip() or fallback
