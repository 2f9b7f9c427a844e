#!/usr/bin/env python3
"""
Command-line tool to sync the training plan with a GitHub Gist.

Usage:
    python sync_plan.py sync          # Pull + merge, then push
    python sync_plan.py pull          # Pull + merge only
    python sync_plan.py push          # Push the local plan
    python sync_plan.py check         # Test that the gist can be read
    python sync_plan.py watch --interval 60
"""

import argparse
import os
import sys
import time

from dotenv import load_dotenv

from training_plan import config
from training_plan.generator import CalendarGenerator
from training_plan.gist import GistTransport
from training_plan.plan_sync import PlanSync
from training_plan.store import PlanStore


def debug_environment():
    """Print debug information about the environment."""
    print("\n==== Environment Debug ====")
    print(f"Current directory: {os.getcwd()}")
    print(f"Environment file exists: {os.path.exists('.env')}")
    print("GITHUB_TOKEN present:", "GITHUB_TOKEN" in os.environ)
    print("GIST_ID present:", "GIST_ID" in os.environ)
    print(f"Database: {config.db_path()}")


def build_sync():
    transport = GistTransport(**config.gist_settings())
    store = PlanStore(config.db_path())
    calendar = CalendarGenerator(**config.calendar_settings())
    return PlanSync(store, transport, ics_path=config.ics_path(), calendar=calendar)


def watch(plan_sync, interval):
    """Pull and merge every `interval` seconds until interrupted."""
    print(f"Pulling every {interval}s, press Ctrl+C to stop")
    try:
        while True:
            plan_sync.pull_and_merge()
            time.sleep(interval)
    except KeyboardInterrupt:
        print("\n✓ Stopped")


def main(argv=None):
    load_dotenv()
    debug_environment()

    parser = argparse.ArgumentParser(description='Sync the training plan with a GitHub Gist')
    parser.add_argument('command', choices=['pull', 'push', 'sync', 'check', 'watch'],
                        nargs='?', default='sync', help='What to do (default: sync)')
    parser.add_argument('--interval', type=int,
                        help='Seconds between pulls for watch (default: PULL_INTERVAL_SEC)')
    args = parser.parse_args(argv)

    settings = config.app_settings()
    plan_sync = build_sync()
    transport = plan_sync.transport

    if not transport.token:
        print("✗ Error: GITHUB_TOKEN not found in environment variables")
        sys.exit(1)

    if args.command == 'check':
        ok = transport.check()
        print("✓ Found the gist and read the plan file" if ok else "✗ Could not read from the gist")
        sys.exit(0 if ok else 1)
    elif args.command == 'pull':
        plan_sync.pull_and_merge()
    elif args.command in ('push', 'sync'):
        had_gist = transport.gist_id is not None
        ok = plan_sync.push() if args.command == 'push' else plan_sync.sync()
        if ok and not had_gist:
            print(f"  Set GIST_ID={transport.gist_id} in .env to keep using this gist")
        sys.exit(0 if ok else 1)
    elif args.command == 'watch':
        if not settings['auto_pull'] and args.interval is None:
            print("✗ AUTO_PULL is off, pass --interval to watch anyway")
            sys.exit(1)
        interval = max(config.MIN_PULL_INTERVAL_SEC, args.interval or settings['pull_interval_sec'])
        watch(plan_sync, interval)


if __name__ == "__main__":
    main()
