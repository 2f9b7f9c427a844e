"""
CSV and JSON exports of a plan.
"""

import csv
import io
import json

from .models import SCHEMA_VERSION, build_document

CSV_COLUMNS = [
    'date', 'plannedType', 'plannedMinutes', 'plannedKm', 'focus', 'instructions',
    'completed', 'actualMinutes', 'actualKm', 'rpe', 'notes', 'block', 'active', 'updatedAt',
]


def _flat(text):
    return (text or '').replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')


def _blank(value):
    return '' if value is None else value


def csv_row(s):
    return [
        s.date,
        s.planned_type,
        _blank(s.planned_minutes),
        _blank(s.planned_km),
        _flat(s.focus),
        _flat(s.instructions),
        '1' if s.completed else '0',
        _blank(s.actual_minutes),
        _blank(s.actual_km),
        _blank(s.rpe),
        _flat(s.notes),
        s.block or '',
        '0' if s.active is False else '1',
        s.updated_at,
    ]


def to_csv(sessions):
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(CSV_COLUMNS)
    for s in sessions:
        writer.writerow(csv_row(s))
    return buf.getvalue()


def to_json(sessions, version=SCHEMA_VERSION):
    return json.dumps(build_document(sessions, version), indent=2, ensure_ascii=False)


def write_export(path, text):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
