from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable

from ..errors import InvalidSelectorError


class DateField(IntEnum):
    """Which calendar field to read. Values are the integer codes used by table builtins."""

    YEAR = 1
    MONTH = 2
    DAY = 3

    @classmethod
    def from_code(cls, code: object) -> "DateField":
        if isinstance(code, cls):
            return code
        # bool is an int subclass; True must not mean YEAR.
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidSelectorError(f"Date field code must be an int, got {type(code).__name__}")
        try:
            return cls(code)
        except ValueError:
            raise InvalidSelectorError(f"Unknown date field code: {code} (expected 1, 2 or 3)") from None


@runtime_checkable
class DateLike(Protocol):
    """Anything exposing calendar fields (datetime.date, datetime.datetime, timestamps)."""

    year: int
    month: int
    day: int


@runtime_checkable
class SupportsAsDate(Protocol):
    """A host value that can be asked for its date view."""

    def as_date(self) -> DateLike: ...
