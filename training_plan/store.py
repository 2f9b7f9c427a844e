"""
SQLite storage for the plan.

The store holds one document: the schema version and the full list of
sessions. save() replaces the whole collection in a single transaction.
"""

import os
import shutil
import sqlite3
from datetime import datetime

from .models import SCHEMA_VERSION, Session

DEFAULT_DB_PATH = 'training_plan/training_plan.db'

_COLUMNS = (
    'id', 'date', 'planned_type', 'planned_minutes', 'planned_km', 'focus', 'instructions',
    'completed', 'actual_minutes', 'actual_km', 'rpe', 'notes', 'block', 'active', 'updated_at',
)

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS sessions (
        id TEXT PRIMARY KEY,
        date DATE NOT NULL,
        planned_type TEXT NOT NULL,
        planned_minutes REAL,
        planned_km REAL,
        focus TEXT,
        instructions TEXT,
        completed INTEGER NOT NULL DEFAULT 0,
        actual_minutes REAL,
        actual_km REAL,
        rpe INTEGER,
        notes TEXT,
        block TEXT,
        active INTEGER NOT NULL DEFAULT 1,
        updated_at INTEGER NOT NULL DEFAULT 0
    );

    CREATE TABLE IF NOT EXISTS meta (
        key TEXT PRIMARY KEY,
        value TEXT
    );

    CREATE INDEX IF NOT EXISTS idx_sessions_date ON sessions(date);
"""


def _num(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class PlanStore:
    def __init__(self, db_path=DEFAULT_DB_PATH):
        self.db_path = db_path

    def _connect(self):
        db_dir = os.path.dirname(self.db_path)
        if db_dir and not os.path.exists(db_dir):
            os.makedirs(db_dir)
        conn = sqlite3.connect(self.db_path)
        try:
            conn.executescript(_SCHEMA)
        except sqlite3.DatabaseError:
            conn.close()
            raise
        return conn

    def load(self):
        """Return (version, sessions). Unreadable data counts as no data."""
        if not os.path.exists(self.db_path):
            return SCHEMA_VERSION, []

        try:
            conn = self._connect()
        except sqlite3.DatabaseError as e:
            print(f"✗ Could not read {self.db_path}: {e}")
            return SCHEMA_VERSION, []

        try:
            row = conn.execute("SELECT value FROM meta WHERE key = 'schema_version'").fetchone()
            rows = conn.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM sessions ORDER BY date, rowid"
            ).fetchall()
        except sqlite3.DatabaseError as e:
            print(f"✗ Could not read {self.db_path}: {e}")
            return SCHEMA_VERSION, []
        finally:
            conn.close()

        version = int(row[0]) if row and str(row[0]).isdigit() else SCHEMA_VERSION
        sessions = []
        for values in rows:
            data = dict(zip(_COLUMNS, values))
            sessions.append(Session(
                id=data['id'],
                date=data['date'],
                planned_type=data['planned_type'],
                planned_minutes=_num(data['planned_minutes']),
                planned_km=_num(data['planned_km']),
                focus=data['focus'],
                instructions=data['instructions'],
                completed=bool(data['completed']),
                actual_minutes=_num(data['actual_minutes']),
                actual_km=_num(data['actual_km']),
                rpe=data['rpe'],
                notes=data['notes'],
                block=data['block'],
                active=bool(data['active']),
                updated_at=data['updated_at'] or 0,
            ))
        return version, sessions

    def save(self, version, sessions):
        conn = self._connect()
        try:
            with conn:
                conn.execute("DELETE FROM sessions")
                conn.executemany(
                    f"INSERT INTO sessions ({', '.join(_COLUMNS)}) "
                    f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                    [(
                        s.id, s.date, s.planned_type, s.planned_minutes, s.planned_km,
                        s.focus, s.instructions, int(bool(s.completed)), s.actual_minutes,
                        s.actual_km, s.rpe, s.notes, s.block, int(s.active is not False),
                        s.updated_at or 0,
                    ) for s in sessions]
                )
                conn.execute(
                    "INSERT OR REPLACE INTO meta (key, value) VALUES ('schema_version', ?)",
                    (str(version),)
                )
        finally:
            conn.close()

    def clear(self):
        version, _ = self.load()
        self.save(version, [])

    def backup(self):
        """Copy the database next to itself with a timestamp suffix."""
        if not os.path.exists(self.db_path):
            return None
        backup_path = f"{self.db_path}.backup.{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        shutil.copy2(self.db_path, backup_path)
        return backup_path
