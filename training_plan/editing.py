"""
User edits to a plan.

Plan dates and targets are locked once generated; only status and actuals
can change. Every edit returns a new list and stamps the edited records with
a fresh updated_at so the merge engine sees them as the newest version.
"""

from .dates import compare_iso, iso_week_key, now_ms
from .models import (
    EDITABLE_FIELDS, INTERVAL, LIGHT, LONG_RUN, MODERATE, STRENGTH,
    LockedFieldError, SessionNotFoundError,
)

# Kept first when capping sessions per week
CAP_PRIORITY = (LONG_RUN, INTERVAL, MODERATE, LIGHT, STRENGTH)


def next_stamp(previous, stamp=None):
    """A stamp strictly greater than `previous`, even if the clock is behind."""
    stamp = now_ms() if stamp is None else stamp
    return max(stamp, (previous or 0) + 1)


def update_session(sessions, session_id, changes, stamp=None):
    locked = [name for name in changes if name not in EDITABLE_FIELDS]
    if locked:
        raise LockedFieldError(f"Fields cannot be edited: {', '.join(sorted(locked))}")

    rpe = changes.get('rpe')
    if rpe is not None and not 1 <= rpe <= 10:
        raise ValueError(f"RPE must be between 1 and 10, got {rpe}")

    found = False
    out = []
    for session in sessions:
        if session.id == session_id:
            found = True
            session = session.replace(updated_at=next_stamp(session.updated_at, stamp), **changes)
        out.append(session)
    if not found:
        raise SessionNotFoundError(session_id)
    return out


def find_sessions(sessions, date, planned_type=None):
    return [
        s for s in sessions
        if s.date == date and (planned_type is None or s.planned_type == planned_type)
    ]


def _priority(planned_type):
    try:
        return CAP_PRIORITY.index(planned_type)
    except ValueError:
        return len(CAP_PRIORITY)


def apply_weekly_cap(sessions, cap, start_iso, stamp=None):
    """
    Keep at most `cap` active sessions per ISO week from start_iso onwards.

    Sessions are ranked by CAP_PRIORITY, then date. Those beyond the cap are
    deactivated, the rest reactivated. Sessions before start_iso are untouched.
    """
    if cap < 0:
        raise ValueError(f"Weekly cap must not be negative, got {cap}")

    weeks = {}
    for session in sessions:
        if compare_iso(session.date, start_iso) < 0:
            continue
        weeks.setdefault(iso_week_key(session.date), []).append(session)

    new_state = {}
    for items in weeks.values():
        ranked = sorted(items, key=lambda s: (_priority(s.planned_type), s.date))
        for i, session in enumerate(ranked):
            new_state[session.id] = i < cap

    return [
        s.replace(active=new_state[s.id], updated_at=next_stamp(s.updated_at, stamp))
        if s.id in new_state else s
        for s in sessions
    ]
