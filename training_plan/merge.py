"""
Reconcile two collections of sessions, e.g. the local copy and the one
pulled from the gist.

merge() first collapses records sharing an id (newest updated_at wins, no
field-level merge), then collapses semantic duplicates: different ids for
what is the same planned session. Among those the most filled-in record
wins, then the newest.
"""

from .models import MissingIdError


def score_completeness(session):
    score = 0
    if session.completed:
        score += 10
    if session.actual_minutes is not None:
        score += 4
    if session.actual_km is not None:
        score += 3
    if session.rpe is not None:
        score += 2
    if session.notes and session.notes.strip():
        score += 1
    return score


def semantic_key(session):
    return (
        session.date,
        session.planned_type,
        session.planned_minutes or 0,
        (session.focus or '').strip(),
    )


def _stamp(session):
    return session.updated_at or 0


def merge_by_id(a, b):
    by_id = {}
    for session in list(a) + list(b):
        if not session.id:
            raise MissingIdError(f"Cannot merge a session without an id: {session!r}")
        prev = by_id.get(session.id)
        # equal stamps: the later occurrence wins
        if prev is None or _stamp(session) >= _stamp(prev):
            by_id[session.id] = session
    return list(by_id.values())


def dedupe(sessions):
    by_key = {}
    for session in sessions:
        key = semantic_key(session)
        prev = by_key.get(key)
        if prev is None:
            by_key[key] = session
            continue
        a, b = score_completeness(prev), score_completeness(session)
        if b > a or (b == a and _stamp(session) > _stamp(prev)):
            by_key[key] = session
    return sorted(by_key.values(), key=lambda s: s.date)


def merge(a, b):
    return dedupe(merge_by_id(a, b))
