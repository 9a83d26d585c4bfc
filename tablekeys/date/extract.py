from __future__ import annotations

import logging
import operator

from ..errors import CapabilityError, InvalidSelectorError
from .types import DateField, DateLike, SupportsAsDate

logger = logging.getLogger(__name__)

_ATTRS = {
    DateField.YEAR: "year",
    DateField.MONTH: "month",
    DateField.DAY: "day",
}


def as_date_like(value: object) -> DateLike:
    """Return the date view of value, or raise CapabilityError.

    Values exposing year/month/day are used as-is; otherwise a value
    implementing as_date() is asked for its date view.
    """
    # Plain scalars never carry dates, even if a subclass grows the attributes.
    if value is None or isinstance(value, (bool, int, float, str, bytes)):
        raise CapabilityError(value)

    if isinstance(value, DateLike):
        return value

    if isinstance(value, SupportsAsDate):
        logger.debug("Using as_date() view of %s", type(value).__name__)
        try:
            d = value.as_date()
        except (TypeError, ValueError, NotImplementedError) as e:
            raise CapabilityError(value, f"as_date() failed: {e}") from e
        if not isinstance(d, DateLike):
            raise CapabilityError(value, f"as_date() returned {type(d).__name__}")
        return d

    raise CapabilityError(value)


def _read(d: DateLike, field: DateField, value: object) -> int:
    raw = getattr(d, _ATTRS[field])
    if isinstance(raw, bool):
        raise CapabilityError(value, f"{_ATTRS[field]} is bool, not an integer")
    try:
        return operator.index(raw)
    except TypeError:
        raise CapabilityError(value, f"{_ATTRS[field]} is {type(raw).__name__}, not an integer") from None


def extract(value: object, field: DateField) -> int:
    """Return one calendar field of a date-like value.

    YEAR is the proleptic year as reported by the value, MONTH is 1-12 and DAY
    is the 1-based day of month. Raises CapabilityError when value is not
    date-like and InvalidSelectorError when field is not a DateField.
    """
    if not isinstance(field, DateField):
        raise InvalidSelectorError(f"Expected a DateField, got {field!r}")
    return _read(as_date_like(value), field, value)


def year_month_day(value: object) -> tuple[int, int, int]:
    d = as_date_like(value)
    return (
        _read(d, DateField.YEAR, value),
        _read(d, DateField.MONTH, value),
        _read(d, DateField.DAY, value),
    )


def date_value(value: object, code: int) -> int:
    """Integer-coded form of extract(): 1 = year, 2 = month, 3 = day."""
    return extract(value, DateField.from_code(code))
