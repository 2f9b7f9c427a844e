"""
Pull the remote plan, merge it into the local store, and push the result.

The store stays authoritative when the gist cannot be reached: a failed
pull leaves local data untouched.
"""

from .merge import merge
from .generator import CalendarGenerator


class PlanSync:
    def __init__(self, store, transport, ics_path=None, calendar=None):
        self.store = store
        self.transport = transport
        self.ics_path = ics_path
        self.calendar = calendar or CalendarGenerator()

    def pull_and_merge(self):
        """
        Merge remote sessions into the store.

        Returns the merged sessions, or None when there was no remote data.
        """
        remote = self.transport.pull()
        if remote is None:
            print("✗ No remote data available, keeping local plan")
            return None

        version, local = self.store.load()
        merged = merge(local, remote)
        changed = [s.to_dict() for s in merged] != [s.to_dict() for s in local]
        if changed:
            self.store.save(version, merged)
            print(f"✓ Merged {len(remote)} remote sessions ({len(local)} -> {len(merged)} local)")
            self.regenerate(merged)
        else:
            print("✓ Already up to date")
        return merged

    def push(self):
        version, sessions = self.store.load()
        ok = self.transport.push(sessions, version)
        if ok:
            print(f"✓ Pushed {len(sessions)} sessions")
        else:
            print("✗ Push failed")
        return ok

    def sync(self):
        self.pull_and_merge()
        return self.push()

    def regenerate(self, sessions):
        if not self.ics_path:
            return
        try:
            self.calendar.generate_calendar(sessions, self.ics_path)
        except OSError as e:
            print(f"✗ Failed to regenerate calendar: {e}")
