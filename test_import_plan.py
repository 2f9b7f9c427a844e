import json

from training_plan.import_plan import import_document, import_file
from training_plan.models import SCHEMA_VERSION
from training_plan.store import PlanStore


def test_import_merges_never_replaces(store, make_session):
    store.save(SCHEMA_VERSION, [make_session(id='a', date='2025-01-06')])

    merged = import_document([
        {'id': 'b', 'date': '2025-01-07', 'plannedType': 'Light', 'plannedMinutes': 30},
    ], store, stamp=777)

    assert [s.id for s in merged] == ['a', 'b']
    assert merged[1].updated_at == 777
    assert store.load()[1] == merged


def test_import_stamped_entries_override_same_id(store, make_session):
    store.save(SCHEMA_VERSION, [make_session(id='a', updated_at=100)])
    merged = import_document({'version': 5, 'entries': [
        {'id': 'a', 'date': '2025-01-06', 'plannedType': 'Interval', 'plannedMinutes': 30,
         'completed': True},
    ]}, store, stamp=5000)
    assert merged[0].completed is True
    assert merged[0].updated_at == 5000


def test_import_file_makes_backup(tmp_path, make_session):
    db_path = str(tmp_path / 'plan.db')
    PlanStore(db_path).save(SCHEMA_VERSION, [make_session(id='a')])
    doc = tmp_path / 'export.json'
    doc.write_text(json.dumps([{'id': 'b', 'date': '2025-02-01', 'plannedType': 'Langtur'}]))

    merged = import_file(str(doc), db_path)

    assert [s.id for s in merged] == ['a', 'b']
    assert merged[1].planned_type == 'LongRun'
    assert len(list(tmp_path.glob('plan.db.backup.*'))) == 1
