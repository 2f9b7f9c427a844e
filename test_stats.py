import pytest

from training_plan.stats import (
    compliance, format_minutes, goal_progress, group_by_block, search, totals, weekly_summary,
)


@pytest.fixture
def sessions(make_session):
    return [
        make_session(id='a', date='2025-01-06', planned_minutes=30, completed=True,
                     actual_minutes=32, actual_km=5.0, block='Phase 1 - Foundation'),
        make_session(id='b', date='2025-01-07', planned_type='Strength', planned_minutes=25,
                     block='Phase 1 - Foundation', notes='Sore calves'),
        make_session(id='c', date='2025-01-08', planned_minutes=40, active=False,
                     completed=True, actual_minutes=20, block='Phase 1 - Foundation'),
        make_session(id='d', date='2025-01-13', planned_type='LongRun', planned_minutes=90,
                     focus='Easy trail', block='Phase 2 - Development'),
    ]


def test_compliance_counts_active_only(sessions):
    assert compliance(sessions) == {'pct': 33, 'done': 1, 'total': 3}
    assert compliance([]) == {'pct': 0, 'done': 0, 'total': 0}


def test_totals(sessions):
    assert totals(sessions) == {'active_sessions': 3, 'planned_minutes': 145, 'actual_minutes': 52}


def test_weekly_summary(sessions):
    weeks = weekly_summary(sessions)
    assert [w['week'] for w in weeks] == ['2025-W02', '2025-W03']
    assert weeks[0] == {
        'week': '2025-W02', 'planned': 55, 'actual': 52, 'km': 5.0, 'sessions': 2, 'completed': 2,
    }
    assert weeks[1]['planned'] == 90


def test_goal_progress(sessions):
    progress = goal_progress(sessions, '2025-W02', 'minutes', 104)
    assert progress['done'] == 52
    assert progress['pct'] == 50

    km = goal_progress(sessions, '2025-W02', 'km', 20)
    assert km['done'] == 5.0
    assert km['pct'] == 25

    with pytest.raises(ValueError):
        goal_progress(sessions, '2025-W02', 'hours', 3)


def test_search(sessions):
    assert [s.id for s in search(sessions, 'calves')] == ['b']
    assert [s.id for s in search(sessions, 'TRAIL')] == ['d']
    assert [s.id for s in search(sessions, '2025-01-0')] == ['a', 'b', 'c']
    assert len(search(sessions, '  ')) == 4


def test_group_by_block(sessions):
    groups = group_by_block(sessions)
    assert list(groups) == ['Phase 1 - Foundation', 'Phase 2 - Development']
    assert list(groups['Phase 1 - Foundation']) == ['2025-W02']
    assert [s.id for s in groups['Phase 2 - Development']['2025-W03']] == ['d']


def test_format_minutes():
    assert format_minutes(None) == '-'
    assert format_minutes(45) == '45 min'
    assert format_minutes(90) == '1:30 h'
    assert format_minutes(119.6) == '2:00 h'
