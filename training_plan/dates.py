"""
Date helpers for the training plan.

All plan dates are ISO 'YYYY-MM-DD' strings. They are fixed width and zero
padded, so plain string comparison orders them chronologically.
"""

import time
from datetime import date, datetime, timedelta


def _to_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def add_days(iso, days):
    """Shift an ISO date by a number of days (may be negative)."""
    return (_to_date(iso) + timedelta(days=days)).isoformat()


def iso_week_key(value):
    """Return the ISO-8601 week key, e.g. '2025-W02'."""
    year, week, _ = _to_date(value).isocalendar()
    return f"{year}-W{week:02d}"


def next_monday_or_same(iso):
    d = _to_date(iso)
    return (d + timedelta(days=(7 - d.weekday()) % 7)).isoformat()


def next_annual_date(month, day, reference):
    """
    Next occurrence of month/day strictly after the reference date.

    A reference that falls on the date itself counts as already past, so
    next_annual_date(8, 1, 2025-08-01T12:00) is 2026-08-01.
    """
    ref = _to_date(reference)
    year = ref.year
    while True:
        try:
            candidate = date(year, month, day)
        except ValueError:
            # Feb 29 outside a leap year
            year += 1
            continue
        if candidate > ref:
            return candidate.isoformat()
        year += 1


def today_iso(now=None):
    return _to_date(now or datetime.now()).isoformat()


def compare_iso(a, b):
    return (a > b) - (a < b)


def now_ms():
    return int(time.time() * 1000)
