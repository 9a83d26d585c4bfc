#!/usr/bin/env python3
"""Print year/month/day for ISO dates.

Usage:
  python3 scripts/date_fields.py 2024-03-15 1999-12-31
  python3 scripts/date_fields.py 2024-03-15 --field month
"""

from __future__ import annotations

import argparse
from datetime import date

from tablekeys.config import Settings, configure_logging
from tablekeys.date import DateField, extract, year_month_day

FIELDS = {f.name.lower(): f for f in DateField}


def parse_iso(s: str) -> date:
    try:
        return date.fromisoformat(s.strip())
    except ValueError:
        raise SystemExit(f"Not an ISO date (YYYY-MM-DD): {s!r}") from None


def describe(d: date, field: str | None = None) -> str:
    if field:
        return str(extract(d, FIELDS[field]))
    y, m, da = year_month_day(d)
    return f"year={y} month={m} day={da}"


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("dates", nargs="+", help="Dates as YYYY-MM-DD")
    ap.add_argument("--field", choices=sorted(FIELDS), default=None, help="Print only this field")
    args = ap.parse_args(argv)

    configure_logging(Settings.from_env())

    for s in args.dates:
        print(f"{s}: {describe(parse_iso(s), args.field)}")


if __name__ == "__main__":
    main()
