"""
Settings read from the environment.

Entry-point scripts call load_dotenv() first, so values may also come from a
.env file in the working directory.
"""

import os

from .generator import DEFAULT_ICS_PATH
from .gist import DEFAULT_FILENAME
from .store import DEFAULT_DB_PATH

MIN_PULL_INTERVAL_SEC = 10


def _int(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"✗ {name}={value!r} is not a number, using {default}")
        return default


def _bool(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def db_path():
    return os.environ.get('TRAINING_DB_PATH') or DEFAULT_DB_PATH


def ics_path():
    return os.environ.get('TRAINING_ICS_PATH') or DEFAULT_ICS_PATH


def calendar_settings():
    return {
        'timezone_name': os.environ.get('TRAINING_TIMEZONE') or 'Europe/Oslo',
        'start_time': os.environ.get('TRAINING_START_TIME') or '06:30:00',
    }


def gist_settings():
    return {
        'token': os.environ.get('GITHUB_TOKEN', ''),
        'gist_id': os.environ.get('GIST_ID') or None,
        'filename': os.environ.get('GIST_FILENAME') or DEFAULT_FILENAME,
    }


def app_settings():
    goal_type = os.environ.get('GOAL_TYPE') or 'minutes'
    if goal_type not in ('minutes', 'km'):
        print(f"✗ GOAL_TYPE={goal_type!r} is not 'minutes' or 'km', using 'minutes'")
        goal_type = 'minutes'
    return {
        'goal_type': goal_type,
        'goal_value': _int('GOAL_VALUE', 180),
        'auto_pull': _bool('AUTO_PULL', True),
        'pull_interval_sec': max(MIN_PULL_INTERVAL_SEC, _int('PULL_INTERVAL_SEC', 60)),
    }
