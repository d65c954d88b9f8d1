"""Mock clock providers for testing."""

from datetime import datetime, timezone

from dishka import Scope, provide

from shareport.util.clock import Clock, FixedClock
from shareport.util.di.infrastructure.clock import ClockProvider

# Instant every mocked clock starts at
TEST_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class MockClockProvider(ClockProvider):
    """Mock clock provider pinned to TEST_NOW.

    APP scope so tests can move time forward between requests.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_fixed_clock(self) -> FixedClock:
        """Provide the controllable clock."""
        return FixedClock(TEST_NOW)

    @provide(scope=Scope.APP)
    def get_clock(self, clock: FixedClock) -> Clock:
        """Expose the fixed clock as the application clock."""
        return clock
