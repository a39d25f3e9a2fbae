import pytest


class FakeClock:
    """Deterministic clock: every call moves time forward by ``tick`` seconds."""

    def __init__(self, start=100.0, tick=0.5):
        self.now = start
        self.tick = tick
        self.calls = 0

    def __call__(self):
        value = self.now
        self.now += self.tick
        self.calls += 1
        return value


@pytest.fixture
def clock():
    return FakeClock()
