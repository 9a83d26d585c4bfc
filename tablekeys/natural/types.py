from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    DIGITS = "digits"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A maximal run of ASCII digits, or of anything else."""

    text: str
    kind: TokenKind

    @property
    def is_digits(self) -> bool:
        return self.kind is TokenKind.DIGITS
