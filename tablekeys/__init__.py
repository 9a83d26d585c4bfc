"""Small key helpers for table tooling.

- `tablekeys.date`: year/month/day extraction from date-like values.
- `tablekeys.natural`: digit/non-digit tokenization for natural-order keys.
"""

from .date import DateField, date_value, extract, year_month_day
from .errors import CapabilityError, InvalidSelectorError, TableKeysError
from .natural import Token, TokenKind, iter_tokens, split, tokenize
