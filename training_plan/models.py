"""
Session records and the JSON document that carries them.

Records are parsed leniently: optional fields that are missing or malformed
become None. A record without an id is a bug in whoever produced it and is
rejected with MissingIdError.
"""

import math
from dataclasses import dataclass, asdict, replace
from datetime import date

SCHEMA_VERSION = 5

LIGHT = 'Light'
INTERVAL = 'Interval'
STRENGTH = 'Strength'
MODERATE = 'Moderate'
LONG_RUN = 'LongRun'
PLANNED_TYPES = (LIGHT, INTERVAL, STRENGTH, MODERATE, LONG_RUN)

# Type names used by documents from the first (Norwegian) version of the app.
# Focus text is not mapped, so legacy sessions only dedupe against each other.
LEGACY_TYPES = {
    'Lett': LIGHT,
    'Intervall': INTERVAL,
    'Styrke': STRENGTH,
    'Moderat': MODERATE,
    'Langtur': LONG_RUN,
}

EDITABLE_FIELDS = ('completed', 'actual_minutes', 'actual_km', 'rpe', 'notes', 'active')

_JSON_KEYS = {
    'id': 'id',
    'date': 'date',
    'planned_type': 'plannedType',
    'planned_minutes': 'plannedMinutes',
    'planned_km': 'plannedKm',
    'focus': 'focus',
    'instructions': 'instructions',
    'completed': 'completed',
    'actual_minutes': 'actualMinutes',
    'actual_km': 'actualKm',
    'rpe': 'rpe',
    'notes': 'notes',
    'block': 'block',
    'active': 'active',
    'updated_at': 'updatedAt',
}


class SessionError(ValueError):
    """Base class for session contract violations."""


class MissingIdError(SessionError):
    pass


class DocumentError(SessionError):
    """Raised when a document or entry cannot be read as sessions at all."""


class LockedFieldError(SessionError):
    pass


class SessionNotFoundError(KeyError):
    pass


@dataclass
class Session:
    id: str
    date: str
    planned_type: str
    planned_minutes: float = None
    planned_km: float = None
    focus: str = None
    instructions: str = None
    completed: bool = False
    actual_minutes: float = None
    actual_km: float = None
    rpe: int = None
    notes: str = None
    block: str = None
    active: bool = True
    updated_at: int = 0

    def to_dict(self):
        """Serialize with the document's camelCase keys, dropping absent fields."""
        out = {}
        for attr, value in asdict(self).items():
            if value is None:
                continue
            out[_JSON_KEYS[attr]] = value
        return out

    def replace(self, **changes):
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data, default_updated_at=0):
        session_id = data.get('id')
        if session_id is None or session_id == '':
            raise MissingIdError(f"Session has no id: {data!r}")

        session_date = _iso_date(data.get('date'))
        if session_date is None:
            raise DocumentError(f"Session {session_id} has no valid date")

        planned_type = data.get('plannedType')
        if not isinstance(planned_type, str) or not planned_type:
            raise DocumentError(f"Session {session_id} has no planned type")

        updated_at = _number(data.get('updatedAt'))
        return cls(
            id=str(session_id),
            date=session_date,
            planned_type=LEGACY_TYPES.get(planned_type, planned_type),
            planned_minutes=_number(data.get('plannedMinutes')),
            planned_km=_number(data.get('plannedKm')),
            focus=_text(data.get('focus')),
            instructions=_text(data.get('instructions')),
            completed=_flag(data.get('completed'), False),
            actual_minutes=_number(data.get('actualMinutes')),
            actual_km=_number(data.get('actualKm')),
            rpe=_rpe(data.get('rpe')),
            notes=_text(data.get('notes')),
            block=_text(data.get('block')),
            active=_flag(data.get('active'), True),
            updated_at=int(updated_at) if updated_at is not None else default_updated_at,
        )


def _iso_date(value):
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10]).isoformat()
    except ValueError:
        return None


def _number(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = value
    elif isinstance(value, str) and value.strip():
        try:
            num = float(value)
        except ValueError:
            return None
    else:
        return None
    if isinstance(num, float):
        if math.isnan(num) or math.isinf(num):
            return None
        if num.is_integer():
            return int(num)
    return num


def _rpe(value):
    num = _number(value)
    if num is None or num != int(num) or not 1 <= num <= 10:
        return None
    return int(num)


def _text(value):
    return value if isinstance(value, str) else None


def _flag(value, default):
    if isinstance(value, bool):
        return value
    if value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ('1', 'true', '0', 'false'):
        return value.strip().lower() in ('1', 'true')
    return default


def parse_document(data, default_updated_at=0):
    """
    Read a bare list of entries or a {version, entries} wrapper.

    Returns (version, sessions). Entries that are not objects, or lack an id,
    date or type, are skipped.
    """
    if isinstance(data, list):
        version, entries = SCHEMA_VERSION, data
    elif isinstance(data, dict):
        version = data.get('version', SCHEMA_VERSION)
        if not isinstance(version, int) or isinstance(version, bool):
            version = SCHEMA_VERSION
        entries = data.get('entries') or []
        if not isinstance(entries, list):
            raise DocumentError("'entries' must be a list")
    else:
        raise DocumentError(f"Expected a list or an object, got {type(data).__name__}")

    sessions = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        try:
            sessions.append(Session.from_dict(entry, default_updated_at))
        except SessionError:
            continue
    return version, sessions


def build_document(sessions, version=SCHEMA_VERSION):
    return {'version': version, 'entries': [s.to_dict() for s in sessions]}
