"""
Summaries over a plan: compliance, weekly totals, goal progress and search.

Inactive sessions do not count towards planned totals or compliance, but
their actuals still count as training done.
"""

from .dates import iso_week_key

GOAL_MINUTES = 'minutes'
GOAL_KM = 'km'


def _active(sessions):
    return [s for s in sessions if s.active is not False]


def compliance(sessions):
    active = _active(sessions)
    if not active:
        return {'pct': 0, 'done': 0, 'total': 0}
    done = sum(1 for s in active if s.completed)
    return {'pct': round(100 * done / len(active)), 'done': done, 'total': len(active)}


def totals(sessions):
    active = _active(sessions)
    return {
        'active_sessions': len(active),
        'planned_minutes': sum(s.planned_minutes or 0 for s in active),
        'actual_minutes': sum(s.actual_minutes or 0 for s in sessions),
    }


def weekly_summary(sessions):
    """Per ISO week: planned (active) and actual minutes, km, session counts."""
    weeks = {}
    for s in sessions:
        wk = iso_week_key(s.date)
        row = weeks.setdefault(wk, {
            'week': wk, 'planned': 0, 'actual': 0, 'km': 0, 'sessions': 0, 'completed': 0,
        })
        if s.active is not False:
            row['sessions'] += 1
            row['planned'] += s.planned_minutes or 0
        row['actual'] += s.actual_minutes or 0
        row['km'] += s.actual_km or 0
        if s.completed:
            row['completed'] += 1
    return [weeks[k] for k in sorted(weeks)]


def goal_progress(sessions, week_key, goal_type=GOAL_MINUTES, goal_value=180):
    if goal_type not in (GOAL_MINUTES, GOAL_KM):
        raise ValueError(f"Unknown goal type: {goal_type}")
    attr = 'actual_minutes' if goal_type == GOAL_MINUTES else 'actual_km'
    done = sum(getattr(s, attr) or 0 for s in sessions if iso_week_key(s.date) == week_key)
    pct = round(100 * done / goal_value) if goal_value else 0
    return {'week': week_key, 'goal_type': goal_type, 'goal': goal_value, 'done': done, 'pct': pct}


def search(sessions, text):
    ordered = sorted(sessions, key=lambda s: s.date)
    query = (text or '').strip().lower()
    if not query:
        return ordered
    return [
        s for s in ordered
        if any(query in str(v).lower()
               for v in (s.date, s.planned_type, s.focus, s.notes, s.instructions) if v)
    ]


def group_by_block(sessions):
    """Ordered {block: {week_key: [sessions]}} in date order."""
    groups = {}
    for s in sorted(sessions, key=lambda s: s.date):
        weeks = groups.setdefault(s.block or 'Unassigned', {})
        weeks.setdefault(iso_week_key(s.date), []).append(s)
    return groups


def format_minutes(minutes):
    if minutes is None:
        return '-'
    hours, rest = divmod(round(minutes), 60)
    if hours > 0:
        return f"{hours}:{rest:02d} h"
    return f"{rest} min"
