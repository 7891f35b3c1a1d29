"""
Utils for testing.

Import this module before anything that imports Kivy: Kivy parses the command line on import, which clashes with the
command line of whatever test runner is used.
"""
import os

os.environ.setdefault('KIVY_NO_ARGS', '1')

from filehandler import ItemStore, LoadError, StoreError  # noqa: E402


class FakeClockEvent(object):
    def __init__(self, callback, timeout, interval):
        self.callback = callback
        self.remaining = timeout
        self.interval = interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeClock(object):
    """Stands in for kivy.clock.Clock where the passing of time must be controlled by the test itself; time passes only
    when `advance` is called. Interval events with an interval of 0 fire once per `advance`, like Kivy's do once per
    frame."""

    def __init__(self):
        self.events = []

    def schedule_once(self, callback, timeout=0):
        event = FakeClockEvent(callback, timeout, interval=False)
        self.events.append(event)
        return event

    def schedule_interval(self, callback, timeout):
        event = FakeClockEvent(callback, timeout, interval=True)
        self.events.append(event)
        return event

    def pending(self):
        return [e for e in self.events if not e.cancelled]

    def advance(self, dt):
        # events scheduled from within callbacks wait for the next advance
        for event in self.pending():
            if event.cancelled:
                continue

            if event.interval:
                if event.callback(dt) is False:
                    event.cancel()
            else:
                event.remaining -= dt
                if event.remaining <= 0:
                    event.cancel()
                    event.callback(dt)

        self.events = self.pending()

    def advance_frames(self, n, dt=1 / 60):
        for i in range(n):
            self.advance(dt)


class MemoryStore(ItemStore):
    def __init__(self, records=()):
        self.records = [dict(r) for r in records]
        self.next_id = 0
        self.updates = []

    def list_items(self, owner_id, project_id):
        return [dict(r) for r in self.records]

    def create_item(self, owner_id, project_id, data):
        self.next_id += 1
        item_id = "item-%s" % self.next_id
        self.records.append(dict(data, id=item_id))
        return item_id

    def update_item(self, owner_id, project_id, item_id, data):
        self.updates.append((item_id, data))


class FailingStore(MemoryStore):
    """A store for which every call fails, as if the remote end is unreachable."""

    def list_items(self, owner_id, project_id):
        raise LoadError("store unreachable")

    def create_item(self, owner_id, project_id, data):
        raise StoreError("store unreachable")

    def update_item(self, owner_id, project_id, item_id, data):
        raise StoreError("store unreachable")
