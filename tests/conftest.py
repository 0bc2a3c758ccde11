"""Shared fakes: a simulated Tk event queue and recording collaborators."""
import heapq
import itertools

import pytest

from fuzzy_eyes.notifications import DeliveryError, NotificationGateway, PermissionDenied


class FakeRoot:
    """Stands in for ``tk.Tk``: ``after``/``after_cancel`` on a simulated clock."""

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._seq = itertools.count()
        self.pending = {}
        self.installs = 0
        self.cancels = 0

    def after(self, ms, func, *args):
        seq = next(self._seq)
        after_id = f"after#{seq}"
        due = self.now + ms / 1000.0
        self.pending[after_id] = (func, args)
        heapq.heappush(self._queue, (due, seq, after_id))
        self.installs += 1
        return after_id

    def after_cancel(self, after_id):
        if self.pending.pop(after_id, None) is not None:
            self.cancels += 1

    def advance(self, seconds):
        """Run every callback due within the next ``seconds``; ties run in install order."""
        target = self.now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, after_id = heapq.heappop(self._queue)
            entry = self.pending.pop(after_id, None)
            if entry is None:
                continue
            self.now = due
            func, args = entry
            func(*args)
        self.now = target


class FakeGateway(NotificationGateway):
    def __init__(self, fail=None):
        super().__init__()
        self.fail = fail
        self.sent = []
        self.cleared = []

    def notify(self, alert_id, title, body):
        if self.fail == "permission":
            raise PermissionDenied("not authorized")
        if self.fail == "delivery":
            raise DeliveryError("transport down")
        if self.fail == "crash":
            raise RuntimeError("backend bug")
        self.sent.append((alert_id, title, body))

    def clear_pending(self, alert_id):
        self.cleared.append(alert_id)


class FakeSurface:
    def __init__(self):
        self.calls = []

    def show(self, remaining):
        self.calls.append(("show", remaining))

    def update(self, remaining):
        self.calls.append(("update", remaining))

    def hide(self):
        self.calls.append(("hide",))

    def names(self):
        return [c[0] for c in self.calls]


class FakeAudio:
    def __init__(self, fail=False):
        self.fail = fail
        self.played = 0

    def play_completion(self):
        self.played += 1
        if self.fail:
            raise OSError("no audio device")


@pytest.fixture
def root():
    return FakeRoot()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def audio():
    return FakeAudio()
