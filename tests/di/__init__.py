"""Mock providers for testing."""

from .clock import MockClockProvider, TEST_NOW
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockPersistenceProvider",
    "TEST_NOW",
    "build_test_container",
]
