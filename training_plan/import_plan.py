#!/usr/bin/env python3
"""
Import a JSON plan document into the SQLite store.
Usage: python3 -m training_plan.import_plan path/to/training_plan.json

The file may hold a bare list of entries or a {version, entries} document.
Entries are merged into what is already stored, never replacing it.
"""

import json
import sys

from dotenv import load_dotenv

from . import config
from .dates import now_ms
from .merge import merge
from .models import parse_document
from .store import DEFAULT_DB_PATH, PlanStore


def import_document(data, store, stamp=None):
    """Merge a decoded document into the store. Returns the merged sessions."""
    stamp = now_ms() if stamp is None else stamp
    _, incoming = parse_document(data, default_updated_at=stamp)

    version, local = store.load()
    merged = merge(local, incoming)
    store.save(version, merged)
    return merged


def import_file(path, db_path=DEFAULT_DB_PATH):
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    store = PlanStore(db_path)
    backup_path = store.backup()
    if backup_path:
        print(f"📦 Created backup: {backup_path}")

    _, before = store.load()
    merged = import_document(data, store)
    print(f"✓ Imported {path}")
    print(f"✓ Sessions in plan: {len(before)} -> {len(merged)}")
    return merged


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print("Usage: python3 -m training_plan.import_plan path/to/training_plan.json")
        sys.exit(1)

    load_dotenv()
    try:
        import_file(sys.argv[1], config.db_path())
    except (OSError, ValueError) as e:
        print(f"✗ Import failed: {e}")
        sys.exit(1)
