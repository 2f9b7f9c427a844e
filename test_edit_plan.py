import os

import pytest

import edit_plan
from training_plan.dates import today_iso
from training_plan.models import SCHEMA_VERSION
from training_plan.store import PlanStore


@pytest.fixture
def paths(tmp_path, monkeypatch):
    db_path = str(tmp_path / 'plan.db')
    ics_path = str(tmp_path / 'plan.ics')
    monkeypatch.setenv('TRAINING_DB_PATH', db_path)
    monkeypatch.setenv('TRAINING_ICS_PATH', ics_path)
    return db_path, ics_path


def test_generate_then_regenerate_calendar(paths):
    db_path, ics_path = paths
    edit_plan.main(['generate'])

    _, sessions = PlanStore(db_path).load()
    assert sessions
    assert all(s.date >= today_iso() for s in sessions)
    assert os.path.exists(ics_path)


def test_complete_and_note(paths, make_session):
    db_path, ics_path = paths
    PlanStore(db_path).save(SCHEMA_VERSION, [make_session(id='a')])

    edit_plan.main(['--no-regen', 'complete', '2025-01-06', '--minutes', '33', '--rpe', '6'])
    edit_plan.main(['--no-regen', 'note', '2025-01-06', 'Windy'])

    session = PlanStore(db_path).load()[1][0]
    assert session.completed is True
    assert session.actual_minutes == 33
    assert session.rpe == 6
    assert session.notes == 'Windy'
    assert session.updated_at > 100
    assert not os.path.exists(ics_path)


def test_update_unknown_date(paths, capsys):
    editor = edit_plan.PlanEditor()
    assert editor.update('2030-01-01', {'completed': True}) is False
    assert 'No planned session found' in capsys.readouterr().out


def test_ambiguous_date_needs_type(paths, make_session):
    db_path, _ = paths
    PlanStore(db_path).save(SCHEMA_VERSION, [
        make_session(id='a'), make_session(id='b', planned_type='Strength'),
    ])
    editor = edit_plan.PlanEditor()
    assert editor.update('2025-01-06', {'notes': 'x'}) is False
    assert editor.update('2025-01-06', {'notes': 'x'}, 'Strength') is True
    notes = {s.id: s.notes for s in PlanStore(db_path).load()[1]}
    assert notes == {'a': None, 'b': 'x'}


def test_toggle_and_clear(paths, make_session):
    db_path, _ = paths
    PlanStore(db_path).save(SCHEMA_VERSION, [make_session(id='a')])

    edit_plan.main(['--no-regen', 'toggle', '2025-01-06'])
    assert PlanStore(db_path).load()[1][0].active is False

    with pytest.raises(SystemExit):
        edit_plan.main(['clear'])
    edit_plan.main(['--no-regen', 'clear', '--yes'])
    assert PlanStore(db_path).load()[1] == []


def test_export(paths, make_session, tmp_path):
    db_path, _ = paths
    PlanStore(db_path).save(SCHEMA_VERSION, [make_session(id='a')])
    out = tmp_path / 'plan.csv'
    edit_plan.main(['export-csv', str(out)])
    assert out.read_text(encoding='utf-8').startswith('date,plannedType')


def test_list_all_groups_by_block_and_week(paths, make_session, capsys):
    db_path, _ = paths
    PlanStore(db_path).save(SCHEMA_VERSION, [
        make_session(id='a', block='Phase 1 - Foundation', completed=True),
        make_session(id='b', date='2025-01-13', block='Phase 2 - Development'),
    ])
    edit_plan.main(['list', '--all'])

    out = capsys.readouterr().out
    assert '== Phase 1 - Foundation (1 weeks) ==' in out
    assert '-- 2025-W02: 1/1 done --' in out
    assert out.index('Phase 1 - Foundation') < out.index('Phase 2 - Development')
