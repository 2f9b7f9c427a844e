"""
Phased training plan with offline-first sync.

This package provides:
- A locked plan generator (next Monday to next August 1st, phases 1 -> 2 -> 3)
- Merge of two diverging copies of the plan (by id, then by planned session)
- SQLite storage, GitHub Gist sync, CSV/JSON export and JSON import
- iCalendar generation for calendar subscription

Usage:
    # Generate the plan
    python3 edit_plan.py generate

    # Log a session
    python3 edit_plan.py complete 2026-01-13 --minutes 42 --rpe 6

    # Sync with the gist
    python3 sync_plan.py sync

    # Import a JSON export from another device
    python3 -m training_plan.import_plan training_plan.json
"""

from .planner import generate_block, generate_full_locked_plan
from .merge import dedupe, merge, merge_by_id, score_completeness
from .models import Session, parse_document, build_document
from .store import PlanStore
from .gist import GistTransport
from .plan_sync import PlanSync
from .generator import CalendarGenerator

__all__ = [
    'generate_block', 'generate_full_locked_plan',
    'dedupe', 'merge', 'merge_by_id', 'score_completeness',
    'Session', 'parse_document', 'build_document',
    'PlanStore', 'GistTransport', 'PlanSync', 'CalendarGenerator',
]
__version__ = '1.0.0'
