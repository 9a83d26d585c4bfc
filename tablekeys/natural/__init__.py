"""Natural-key tokenization: "file10.txt" -> ["file", "10", ".txt"].

Only the split is provided; callers decide how to compare the runs.
"""

from .types import Token, TokenKind
from .tokenize import iter_tokens, split, tokenize
