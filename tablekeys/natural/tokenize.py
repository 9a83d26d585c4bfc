from __future__ import annotations

import re
from typing import Iterator

from .types import Token, TokenKind

# ASCII only: \d would also match other Unicode decimal digits.
RUN_RE = re.compile(r"[0-9]+|[^0-9]+")


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield alternating digit / non-digit runs of text, left to right.

    The runs cover text exactly, so "".join(t.text for t in iter_tokens(s)) == s.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str, got {type(text).__name__}")

    for m in RUN_RE.finditer(text):
        run = m.group()
        kind = TokenKind.DIGITS if run[0] in "0123456789" else TokenKind.OTHER
        yield Token(text=run, kind=kind)


def tokenize(text: str) -> list[Token]:
    """Split text into maximal runs of ASCII digits and non-digits.

    >>> [(t.text, t.kind.value) for t in tokenize("abc123def")]
    [('abc', 'other'), ('123', 'digits'), ('def', 'other')]
    """
    return list(iter_tokens(text))


def split(text: str) -> list[str]:
    """Like tokenize(), but only the run texts."""
    return [t.text for t in iter_tokens(text)]
