"""Calendar field extraction from date-like values.

Anything with integer year/month/day attributes works (datetime.date,
datetime.datetime, most third-party timestamps). Host values that only offer a
date view can implement as_date() instead.
"""

from .types import DateField, DateLike, SupportsAsDate
from .extract import as_date_like, date_value, extract, year_month_day
