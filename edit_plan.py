#!/usr/bin/env python3
"""
Generate, log and adjust the training plan, then regenerate the .ics file.

Usage:
    ./edit_plan.py generate
    ./edit_plan.py complete 2026-01-13 --minutes 42 --km 7.5 --rpe 6
    ./edit_plan.py note 2026-01-13 "Felt great today!"
    ./edit_plan.py list 7  # Show next 7 days
"""

import argparse
import sys
from datetime import datetime, timedelta

from dotenv import load_dotenv

from training_plan import config
from training_plan.dates import compare_iso, iso_week_key, today_iso
from training_plan.editing import apply_weekly_cap, find_sessions, update_session
from training_plan.export import to_csv, to_json, write_export
from training_plan.generator import CalendarGenerator
from training_plan.models import PLANNED_TYPES
from training_plan.planner import plan_bounds, seed_plan
from training_plan.stats import (
    compliance, format_minutes, goal_progress, group_by_block, search, totals, weekly_summary,
)
from training_plan.store import PlanStore


class PlanEditor:
    def __init__(self, db_path=None, ics_path=None):
        self.store = PlanStore(db_path or config.db_path())
        self.ics_path = ics_path or config.ics_path()
        self.generator = CalendarGenerator(**config.calendar_settings())

    def generate(self, replace=False):
        version, sessions = self.store.load()
        start, target = plan_bounds()
        plan = seed_plan(sessions, replace=replace)
        self.store.save(version, plan)
        print(f"✓ Plan {start} -> {target}: {len(plan)} sessions")
        return plan

    def _pick(self, sessions, date_str, planned_type=None):
        matches = find_sessions(sessions, date_str, planned_type)
        if not matches:
            print(f"✗ No planned session found for {date_str}")
            return None
        if len(matches) > 1:
            types = ', '.join(s.planned_type for s in matches)
            print(f"✗ Several sessions on {date_str} ({types}), pick one with --type")
            return None
        return matches[0]

    def update(self, date_str, changes, planned_type=None):
        """Apply changes to the session on a date. Returns True when saved."""
        version, sessions = self.store.load()
        session = self._pick(sessions, date_str, planned_type)
        if session is None:
            return False

        print(f"Found: {session.planned_type} on {date_str}")
        try:
            sessions = update_session(sessions, session.id, changes)
        except ValueError as e:
            print(f"✗ {e}")
            return False
        self.store.save(version, sessions)

        for name, value in changes.items():
            print(f"✓ Updated {name}: {value}")
        return True

    def toggle_active(self, date_str, planned_type=None):
        _, sessions = self.store.load()
        session = self._pick(sessions, date_str, planned_type)
        if session is None:
            return False
        return self.update(date_str, {'active': not session.active}, session.planned_type)

    def cap(self, per_week, start_date=None):
        version, sessions = self.store.load()
        start_date = start_date or today_iso()
        capped = apply_weekly_cap(sessions, per_week, start_date)
        self.store.save(version, capped)
        inactive = sum(1 for s in capped if not s.active and compare_iso(s.date, start_date) >= 0)
        print(f"✓ Max {per_week} sessions per week from {start_date} ({inactive} inactive)")
        return capped

    def _print_session(self, s):
        status = "✅" if s.completed else ("➖" if not s.active else "  ")
        planned = f" ({format_minutes(s.planned_minutes)})" if s.planned_minutes else ""
        print(f"{status} {s.date} - {s.planned_type}{planned}")
        if s.focus:
            print(f"         {s.focus}")
        if s.completed and (s.actual_minutes or s.actual_km or s.rpe):
            done = [format_minutes(s.actual_minutes)]
            if s.actual_km:
                done.append(f"{s.actual_km} km")
            if s.rpe:
                done.append(f"RPE {s.rpe}")
            print(f"         ✔ {' · '.join(done)}")
        if s.notes:
            print(f"         📝 {s.notes}")
        print()

    def list_sessions(self, days=7, start_date=None, text=None, show_all=False):
        _, sessions = self.store.load()

        if start_date is None:
            start_date = datetime.now().date().isoformat()
        end_date = (datetime.strptime(start_date, '%Y-%m-%d').date() + timedelta(days=days)).isoformat()

        selected = search(sessions, text)
        if show_all:
            print(f"\n📅 All sessions ({len(selected)}):\n")
            for block, weeks in group_by_block(selected).items():
                print(f"== {block} ({len(weeks)} weeks) ==\n")
                for week, items in weeks.items():
                    done = sum(1 for s in items if s.completed and s.active)
                    active = sum(1 for s in items if s.active)
                    print(f"-- {week}: {done}/{active} done --")
                    for s in items:
                        self._print_session(s)
            return selected

        selected = [s for s in selected if start_date <= s.date < end_date]
        print(f"\n📅 Sessions from {start_date} to {end_date}:\n")
        for s in selected:
            self._print_session(s)
        return selected

    def show_stats(self):
        _, sessions = self.store.load()
        settings = config.app_settings()
        c = compliance(sessions)
        t = totals(sessions)
        week = goal_progress(sessions, iso_week_key(today_iso()),
                             settings['goal_type'], settings['goal_value'])

        print(f"\n📊 Compliance: {c['pct']}% ({c['done']}/{c['total']} active sessions)")
        print(f"   Planned time (active): {format_minutes(t['planned_minutes'])}")
        print(f"   Actual time: {format_minutes(t['actual_minutes'])}")
        print(f"   This week: {week['done']}/{week['goal']} {week['goal_type']} ({week['pct']}%)\n")
        for row in weekly_summary(sessions):
            print(f"   {row['week']}  planned {format_minutes(row['planned']):>8}  "
                  f"actual {format_minutes(row['actual']):>8}  "
                  f"{row['completed']}/{row['sessions']} done")

    def export(self, path, fmt):
        version, sessions = self.store.load()
        text = to_csv(sessions) if fmt == 'csv' else to_json(sessions, version)
        write_export(path, text)
        print(f"✓ Exported {len(sessions)} sessions to {path}")

    def clear(self):
        self.store.clear()
        print("✓ Cleared all sessions")

    def regenerate(self):
        """Regenerate the calendar file."""
        print("\n🔄 Regenerating calendar...")
        _, sessions = self.store.load()
        self.generator.generate_calendar(sessions, self.ics_path)


def main(argv=None):
    load_dotenv()
    parser = argparse.ArgumentParser(
        description='Generate and edit the training plan',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s complete 2026-01-13 --minutes 42 --rpe 6
  %(prog)s note 2026-01-13 "Felt great today!"
  %(prog)s cap 4 --from 2026-02-02
  %(prog)s list 7
        """
    )
    parser.add_argument('--no-regen', action='store_true', help='Skip calendar regeneration')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    gen_parser = subparsers.add_parser('generate', help='Generate the full plan to August 1st')
    gen_parser.add_argument('--replace', action='store_true',
                            help='Replace the stored plan instead of merging into it')

    complete_parser = subparsers.add_parser('complete', help='Mark a session as completed')
    complete_parser.add_argument('date', help='Date in YYYY-MM-DD format')
    complete_parser.add_argument('--type', choices=PLANNED_TYPES, help='Session type, if several share the date')
    complete_parser.add_argument('--minutes', type=float, help='Actual minutes')
    complete_parser.add_argument('--km', type=float, help='Actual distance in km')
    complete_parser.add_argument('--rpe', type=int, choices=range(1, 11), help='Perceived exertion 1-10')
    complete_parser.add_argument('--note', help='Note text')
    complete_parser.add_argument('--undo', action='store_true', help='Mark as not completed')

    note_parser = subparsers.add_parser('note', help='Update notes for a session')
    note_parser.add_argument('date', help='Date in YYYY-MM-DD format')
    note_parser.add_argument('note', help='Note text')
    note_parser.add_argument('--type', choices=PLANNED_TYPES)

    toggle_parser = subparsers.add_parser('toggle', help='Switch a session between active and inactive')
    toggle_parser.add_argument('date', help='Date in YYYY-MM-DD format')
    toggle_parser.add_argument('--type', choices=PLANNED_TYPES)

    cap_parser = subparsers.add_parser('cap', help='Limit active sessions per week')
    cap_parser.add_argument('per_week', type=int, choices=range(1, 8), help='Max sessions per week (1-7)')
    cap_parser.add_argument('--from', dest='start', help='Start date (default: today)')

    list_parser = subparsers.add_parser('list', help='List upcoming sessions')
    list_parser.add_argument('days', type=int, nargs='?', default=7, help='Number of days to show (default: 7)')
    list_parser.add_argument('--start', help='Start date (default: today)')
    list_parser.add_argument('--search', help='Filter on date, type, focus, notes or instructions')
    list_parser.add_argument('--all', action='store_true', help='Show the whole plan')

    subparsers.add_parser('stats', help='Show compliance and weekly totals')

    for fmt in ('csv', 'json'):
        export_parser = subparsers.add_parser(f'export-{fmt}', help=f'Export the plan as {fmt.upper()}')
        export_parser.add_argument('path', nargs='?', default=f'training_plan.{fmt}')

    clear_parser = subparsers.add_parser('clear', help='Delete all sessions')
    clear_parser.add_argument('--yes', action='store_true', help='Confirm deletion')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    editor = PlanEditor()
    changed = False

    if args.command == 'generate':
        editor.generate(args.replace)
        changed = True
    elif args.command == 'complete':
        changes = {'completed': not args.undo}
        if args.minutes is not None:
            changes['actual_minutes'] = args.minutes
        if args.km is not None:
            changes['actual_km'] = args.km
        if args.rpe is not None:
            changes['rpe'] = args.rpe
        if args.note is not None:
            changes['notes'] = args.note
        changed = editor.update(args.date, changes, args.type)
    elif args.command == 'note':
        changed = editor.update(args.date, {'notes': args.note}, args.type)
    elif args.command == 'toggle':
        changed = editor.toggle_active(args.date, args.type)
    elif args.command == 'cap':
        editor.cap(args.per_week, args.start)
        changed = True
    elif args.command == 'list':
        editor.list_sessions(args.days, args.start, args.search, args.all)
    elif args.command == 'stats':
        editor.show_stats()
    elif args.command in ('export-csv', 'export-json'):
        editor.export(args.path, args.command.split('-')[1])
    elif args.command == 'clear':
        if not args.yes:
            print("✗ Refusing to delete all sessions without --yes")
            sys.exit(1)
        editor.clear()
        changed = True

    if changed and not args.no_regen:
        editor.regenerate()


if __name__ == '__main__':
    main()
