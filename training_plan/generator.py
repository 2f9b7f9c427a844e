"""
Generate an iCalendar file from the training plan.
"""

import os
from datetime import datetime, timedelta

import pytz
from icalendar import Calendar, Event

from .models import INTERVAL, LIGHT, LONG_RUN, MODERATE, STRENGTH
from .stats import format_minutes

DEFAULT_ICS_PATH = 'training_plan/training_calendar.ics'

EMOJI = {
    LIGHT: '🚶',
    INTERVAL: '⚡',
    STRENGTH: '💪',
    MODERATE: '🏃',
    LONG_RUN: '⛰️',
}


class CalendarGenerator:
    def __init__(self, timezone_name='Europe/Oslo', start_time='06:30:00',
                 calendar_name='Training Plan'):
        self.timezone = pytz.timezone(timezone_name)
        self.start_time = start_time
        self.calendar_name = calendar_name

    def build_calendar(self, sessions):
        cal = Calendar()
        cal.add('prodid', '-//Training Plan//Gist Sync//EN')
        cal.add('version', '2.0')
        cal.add('x-wr-calname', self.calendar_name)
        cal.add('x-wr-timezone', self.timezone.zone)
        cal.add('x-wr-caldesc', 'Phased training plan with logged sessions')

        for session in sorted(sessions, key=lambda s: s.date):
            # Inactive sessions stay in the history but not in the calendar
            if session.active is False:
                continue
            cal.add_component(self._create_event(session))
        return cal

    def generate_calendar(self, sessions, output_path=DEFAULT_ICS_PATH):
        """Write the calendar file and return the number of events."""
        cal = self.build_calendar(sessions)

        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(output_path, 'wb') as f:
            f.write(cal.to_ical())

        events = cal.walk('VEVENT')
        completed = sum(1 for e in events if str(e.get('summary', '')).startswith('✅'))
        print(f"✓ Calendar generated: {output_path}")
        print(f"  - {len(events)} planned sessions")
        print(f"  - {completed} completed")
        return len(events)

    def _create_event(self, session):
        event = Event()

        hour, minute, second = map(int, self.start_time.split(':'))
        start_dt = datetime.combine(
            datetime.strptime(session.date, '%Y-%m-%d').date(),
            datetime.min.time().replace(hour=hour, minute=minute, second=second),
        )
        start_dt = self.timezone.localize(start_dt)

        if session.completed and session.actual_minutes:
            duration = session.actual_minutes
        else:
            duration = session.planned_minutes or 60
        end_dt = start_dt + timedelta(minutes=duration)

        if session.completed:
            summary = f"✅ {session.planned_type}"
        else:
            summary = f"{EMOJI.get(session.planned_type, '🏃')} {session.planned_type}"
        if session.planned_minutes:
            summary += f" - {format_minutes(session.planned_minutes)}"

        desc_parts = []
        if session.focus:
            desc_parts.append(session.focus)
        if session.instructions:
            desc_parts.append(session.instructions)

        if session.completed:
            desc_parts.append("\n✅ COMPLETED")
            if session.actual_minutes is not None:
                desc_parts.append(f"Time: {format_minutes(session.actual_minutes)}")
            if session.actual_km is not None:
                desc_parts.append(f"Distance: {session.actual_km} km")
            if session.rpe is not None:
                desc_parts.append(f"RPE: {session.rpe}/10")
        else:
            if session.planned_minutes:
                desc_parts.append(f"\nPlanned duration: {session.planned_minutes}min")
            if session.planned_km:
                desc_parts.append(f"Planned distance: {session.planned_km}km")

        if session.notes:
            desc_parts.append(f"\nNotes: {session.notes}")
        if session.block:
            desc_parts.append(f"\n{session.block}")

        event.add('summary', summary)
        event.add('dtstart', start_dt)
        event.add('dtend', end_dt)
        event.add('description', '\n'.join(desc_parts))
        event.add('uid', f"{session.id}@training-plan")
        event.add('status', 'CONFIRMED')

        return event
