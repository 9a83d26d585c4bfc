#!/usr/bin/env python3
"""Print the natural-key runs of each input.

Usage:
  python3 scripts/split_keys.py "file10.txt" "2023-10-05"
  printf 'a1\nb22\n' | python3 scripts/split_keys.py --json

With no TEXT arguments, reads one input per line from stdin.

Env:
  TABLEKEYS_LOG_LEVEL (or put it in .env)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable

from tablekeys.config import Settings, configure_logging
from tablekeys.natural import tokenize

logger = logging.getLogger("split_keys")


def format_tokens(text: str, *, as_json: bool = False) -> str:
    tokens = tokenize(text)
    if as_json:
        return json.dumps([{"text": t.text, "kind": t.kind.value} for t in tokens], ensure_ascii=False)
    return "\t".join(f"{t.kind.value}:{t.text}" for t in tokens)


def read_inputs(args_text: list[str], stdin: Iterable[str]) -> list[str]:
    if args_text:
        return list(args_text)
    return [ln.rstrip("\r\n") for ln in stdin]


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="*", help="Inputs to split (default: stdin lines)")
    ap.add_argument("--json", action="store_true", help="Print one JSON list of tokens per input")
    args = ap.parse_args(argv)

    configure_logging(Settings.from_env())

    inputs = read_inputs(args.text, sys.stdin if not args.text else [])
    logger.debug("Splitting %d input(s)", len(inputs))
    for text in inputs:
        print(format_tokens(text, as_json=args.json))


if __name__ == "__main__":
    main()
