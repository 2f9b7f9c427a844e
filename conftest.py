"""Shared pytest fixtures for the training plan tests."""

import pytest

from training_plan.models import Session
from training_plan.store import PlanStore


@pytest.fixture
def make_session():
    counter = {'n': 0}

    def _make(**fields):
        counter['n'] += 1
        values = {
            'id': f"s{counter['n']}",
            'date': '2025-01-06',
            'planned_type': 'Interval',
            'planned_minutes': 30,
            'updated_at': 100,
        }
        values.update(fields)
        return Session(**values)

    return _make


@pytest.fixture
def store(tmp_path):
    return PlanStore(str(tmp_path / 'plan.db'))
