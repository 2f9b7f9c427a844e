import os
from unittest.mock import MagicMock

from training_plan.models import SCHEMA_VERSION
from training_plan.plan_sync import PlanSync


def _transport(remote=None, push_ok=True):
    transport = MagicMock()
    transport.pull.return_value = remote
    transport.push.return_value = push_ok
    return transport


def test_failed_pull_keeps_local(store, make_session):
    local = [make_session(id='a')]
    store.save(SCHEMA_VERSION, local)

    assert PlanSync(store, _transport(None)).pull_and_merge() is None
    assert store.load()[1] == local


def test_pull_merges_and_saves(store, make_session, tmp_path):
    local = [make_session(id='a', updated_at=100)]
    remote = [
        make_session(id='a', updated_at=200, completed=True),
        make_session(id='b', date='2025-01-07'),
    ]
    store.save(SCHEMA_VERSION, local)
    ics = str(tmp_path / 'out' / 'plan.ics')

    merged = PlanSync(store, _transport(remote), ics_path=ics).pull_and_merge()

    assert [s.id for s in merged] == ['a', 'b']
    assert merged[0].completed is True
    assert store.load()[1] == merged
    assert os.path.exists(ics)


def test_push_sends_stored_plan(store, make_session):
    store.save(4, [make_session(id='a')])
    transport = _transport()
    assert PlanSync(store, transport).push() is True

    sessions, version = transport.push.call_args[0]
    assert [s.id for s in sessions] == ['a']
    assert version == 4


def test_sync_pushes_even_when_offline(store, make_session):
    store.save(SCHEMA_VERSION, [make_session(id='a')])
    transport = _transport(None, push_ok=False)
    assert PlanSync(store, transport).sync() is False
    transport.push.assert_called_once()
