# test_basic.py
# Check that the Flask app loads and serves the plan, exports and import.

import json

import pytest

from plan_server import app
from training_plan.models import SCHEMA_VERSION


@pytest.fixture
def client(store, make_session):
    store.save(SCHEMA_VERSION, [
        make_session(id='a', completed=True, actual_minutes=30),
        make_session(id='b', date='2025-01-07', planned_type='Light', notes='two\nlines'),
    ])
    app.config['PLAN_DB_PATH'] = store.db_path
    yield app.test_client()
    app.config.pop('PLAN_DB_PATH', None)


def test_calendar_feed(client):
    resp = client.get('/training_calendar.ics')
    assert resp.status_code == 200
    assert resp.mimetype == 'text/calendar'
    assert b'a@training-plan' in resp.data


def test_plan_csv(client):
    resp = client.get('/plan.csv')
    assert resp.status_code == 200
    lines = resp.get_data(as_text=True).strip().split('\n')
    assert lines[0].startswith('date,plannedType,plannedMinutes')
    assert len(lines) == 3


def test_plan_json(client):
    resp = client.get('/plan.json')
    doc = json.loads(resp.get_data(as_text=True))
    assert doc['version'] == SCHEMA_VERSION
    assert [e['id'] for e in doc['entries']] == ['a', 'b']


def test_stats(client):
    resp = client.get('/stats')
    assert resp.status_code == 200
    assert resp.json['compliance'] == {'pct': 50, 'done': 1, 'total': 2}


def test_import(client):
    resp = client.post('/import', json={'version': 5, 'entries': [
        {'id': 'c', 'date': '2025-01-08', 'plannedType': 'Strength', 'plannedMinutes': 25},
    ]})
    assert resp.status_code == 200
    assert resp.json == {'success': True, 'sessions': 3}


def test_import_rejects_bad_body(client):
    assert client.post('/import', data='nope', content_type='text/plain').status_code == 400
    assert client.post('/import', json='a string').status_code == 400
