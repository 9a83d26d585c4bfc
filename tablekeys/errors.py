from __future__ import annotations


class TableKeysError(Exception):
    """Base class for errors raised by tablekeys."""


class CapabilityError(TableKeysError, TypeError):
    """The value cannot be decomposed into date fields."""

    def __init__(self, value: object, detail: str | None = None) -> None:
        msg = f"value is not date-like: {type(value).__name__}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
        self.value = value


class InvalidSelectorError(TableKeysError, ValueError):
    """A date field selector outside YEAR/MONTH/DAY (caller defect)."""
