"""Test helpers shared by unit and integration tests."""

from datetime import UTC, datetime, timedelta


class TickingClock:
    """Clock that returns a strictly increasing time on every call.

    Repositories read the clock once per write, so consecutive writes always
    get distinct timestamps regardless of the host clock resolution.
    """

    def __init__(
        self,
        start: datetime = datetime(2026, 1, 5, 9, 0, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ):
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        self.calls += 1
        return now
