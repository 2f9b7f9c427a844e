"""
Locked plan generation.

The plan starts on the first Monday on or after today and runs to the next
August 1st, cycling through the phases in order (1, 2, 3, 1, ...).
"""

from datetime import datetime
from uuid import uuid4

from .dates import add_days, compare_iso, next_annual_date, next_monday_or_same, now_ms, today_iso
from .merge import dedupe
from .models import Session
from .templates import PHASES, validate_catalog

TARGET_MONTH = 8
TARGET_DAY = 1


def generate_block(template_weeks, start_iso, block_name, stamp=None):
    """Expand one phase template into dated sessions starting at start_iso."""
    stamp = now_ms() if stamp is None else stamp
    plan = []
    for w, week in enumerate(template_weeks):
        for d, item in enumerate(week):
            plan.append(Session(
                id=uuid4().hex,
                date=add_days(start_iso, d + w * 7),
                planned_type=item['type'],
                planned_minutes=item.get('minutes'),
                planned_km=item.get('km'),
                focus=item.get('focus'),
                instructions=item.get('instructions'),
                completed=False,
                block=block_name,
                active=True,
                updated_at=stamp,
            ))
    return plan


def plan_bounds(now=None, target_month=TARGET_MONTH, target_day=TARGET_DAY):
    """Return (start, target) ISO dates for a plan generated at `now`."""
    now = now or datetime.now()
    return next_monday_or_same(today_iso(now)), next_annual_date(target_month, target_day, now)


def generate_full_locked_plan(now=None, phases=PHASES, target_month=TARGET_MONTH,
                              target_day=TARGET_DAY):
    validate_catalog(phases)
    now = now or datetime.now()
    start, target = plan_bounds(now, target_month, target_day)
    stamp = int(now.timestamp() * 1000) if isinstance(now, datetime) else now_ms()

    cursor = start
    idx = 0
    out = []
    while compare_iso(cursor, target) <= 0:
        name, weeks = phases[idx % len(phases)]
        out.extend(generate_block(weeks, cursor, name, stamp))
        # advance by the length of the phase just applied
        cursor = add_days(cursor, len(weeks) * 7)
        idx += 1
    return [s for s in out if compare_iso(s.date, target) <= 0]


def seed_plan(existing, replace=False, now=None):
    """Generate the full plan and either replace or fold it into `existing`."""
    seeded = generate_full_locked_plan(now)
    if replace:
        return seeded
    return dedupe(list(existing) + seeded)
